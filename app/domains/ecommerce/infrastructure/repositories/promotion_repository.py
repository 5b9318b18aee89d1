"""
Promotion Repository Implementation

SQLAlchemy implementation of IPromotionRepository.
"""

import logging
import uuid
from typing import cast

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.ecommerce.application.ports import IPromotionRepository
from app.domains.ecommerce.domain.entities.promotion import Promotion, build_terms
from app.domains.ecommerce.domain.value_objects import PromotionVisibility
from app.models.db.promotions import Promotion as PromotionModel

logger = logging.getLogger(__name__)


class SQLAlchemyPromotionRepository(IPromotionRepository):
    """
    SQLAlchemy implementation of promotion repository.

    Handles promotion reads for the pricing engine.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def get_by_id(self, promotion_id: str) -> Promotion | None:
        """Get promotion by ID, whatever its status."""
        try:
            promo_uuid = uuid.UUID(str(promotion_id))
        except (ValueError, TypeError):
            logger.warning(f"Invalid promotion_id format: {promotion_id}")
            return None

        try:
            result = await self.session.execute(select(PromotionModel).where(PromotionModel.id == promo_uuid))
            model = result.scalar_one_or_none()
        except Exception as e:
            logger.error(f"Error getting promotion by ID {promotion_id}: {e}")
            raise

        return self._to_entity(model) if model else None

    async def get_active_by_product(self, product_id: str) -> list[Promotion]:
        """Get VISIBLE promotions for a product, ordered by id."""
        try:
            product_uuid = uuid.UUID(str(product_id))
        except (ValueError, TypeError):
            logger.warning(f"Invalid product_id format: {product_id}")
            return []

        try:
            result = await self.session.execute(
                select(PromotionModel)
                .where(
                    PromotionModel.product_id == product_uuid,
                    PromotionModel.status == PromotionVisibility.VISIBLE.value,
                )
                .order_by(PromotionModel.id.asc())
            )
            models = result.scalars().all()
        except Exception as e:
            logger.error(f"Error getting promotions for product {product_id}: {e}")
            raise

        return [self._to_entity(m) for m in models]

    # Helper methods

    def _to_entity(self, model: PromotionModel) -> Promotion:
        """
        Convert promotion model to domain entity.

        Raises:
            ValidationException: If the row populates fields of both kinds
        """
        terms = build_terms(
            cast(str, model.type),
            model.discount_percentage,
            model.buy_quantity,
            model.get_quantity,
        )
        return Promotion(
            id=str(model.id),
            name=cast(str, model.name),
            description=cast(str | None, model.description),
            product_id=str(model.product_id),
            visibility=PromotionVisibility.from_string(cast(str, model.status)),
            terms=terms,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["SQLAlchemyPromotionRepository"]
