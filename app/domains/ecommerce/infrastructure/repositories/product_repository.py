"""
Product Repository Implementation

SQLAlchemy implementation of IProductRepository.
"""

import logging
import uuid
from typing import cast

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.domains.ecommerce.application.ports import IProductRepository
from app.domains.ecommerce.domain.entities.product import Product
from app.domains.ecommerce.domain.value_objects import ProductVisibility, SizeVariant
from app.models.db.catalog import Product as ProductModel

logger = logging.getLogger(__name__)


class SQLAlchemyProductRepository(IProductRepository):
    """
    SQLAlchemy implementation of product repository.

    Read side used by the pricing engine.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def get_by_id(self, product_id: str) -> Product | None:
        """Get product by ID with its size variants."""
        try:
            product_uuid = uuid.UUID(str(product_id))
        except (ValueError, TypeError):
            logger.warning(f"Invalid product_id format: {product_id}")
            return None

        try:
            result = await self.session.execute(
                select(ProductModel).options(selectinload(ProductModel.sizes)).where(ProductModel.id == product_uuid)
            )
            model = result.scalar_one_or_none()
        except Exception as e:
            logger.error(f"Error getting product by ID {product_id}: {e}")
            raise

        return self._to_entity(model) if model else None

    # Helper methods

    def _to_entity(self, model: ProductModel) -> Product:
        """Convert product model to domain entity."""
        return Product(
            id=str(model.id),
            name=cast(str, model.name),
            description=cast(str | None, model.description),
            category_id=str(model.category_id) if model.category_id is not None else None,
            visibility=ProductVisibility.from_string(cast(str, model.status)),
            colors=list(model.colors or []),
            sizes=[SizeVariant(label=size.label, price=size.price) for size in model.sizes],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["SQLAlchemyProductRepository"]
