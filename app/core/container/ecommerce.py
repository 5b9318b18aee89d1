"""
E-commerce Domain Container.

Single Responsibility: Wire all e-commerce domain dependencies.
"""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.ecommerce.application.services import (
    CartLinePricer,
    ProductPriceLookup,
    PromotionResolver,
)
from app.domains.ecommerce.application.use_cases import (
    CalculateCartUseCase,
    CalculateProductOfferUseCase,
)
from app.domains.ecommerce.infrastructure.repositories import (
    SQLAlchemyProductRepository,
    SQLAlchemyPromotionRepository,
)

if TYPE_CHECKING:
    from app.core.container.base import BaseContainer

logger = logging.getLogger(__name__)


class EcommerceContainer:
    """
    E-commerce domain container.

    Single Responsibility: Create e-commerce repositories, pricing services and use cases.
    Every factory takes the request-scoped AsyncSession.
    """

    def __init__(self, base: "BaseContainer"):
        """
        Initialize e-commerce container.

        Args:
            base: BaseContainer with shared settings
        """
        self._base = base

    # ==================== REPOSITORIES ====================

    def create_product_repository(self, db: AsyncSession) -> SQLAlchemyProductRepository:
        """Create Product Repository."""
        return SQLAlchemyProductRepository(session=db)

    def create_promotion_repository(self, db: AsyncSession) -> SQLAlchemyPromotionRepository:
        """Create Promotion Repository."""
        return SQLAlchemyPromotionRepository(session=db)

    # ==================== SERVICES ====================

    def create_price_lookup(self, db: AsyncSession) -> ProductPriceLookup:
        """Create ProductPriceLookup."""
        return ProductPriceLookup(product_repository=self.create_product_repository(db))

    def create_promotion_resolver(self, db: AsyncSession) -> PromotionResolver:
        """Create PromotionResolver."""
        return PromotionResolver(promotion_repository=self.create_promotion_repository(db))

    def create_cart_line_pricer(self, db: AsyncSession) -> CartLinePricer:
        """Create CartLinePricer with its lookup and resolver."""
        return CartLinePricer(
            price_lookup=self.create_price_lookup(db),
            promotion_resolver=self.create_promotion_resolver(db),
        )

    # ==================== USE CASES ====================

    def create_calculate_cart_use_case(self, db: AsyncSession) -> CalculateCartUseCase:
        """Create CalculateCartUseCase with dependencies."""
        config = self._base.get_config()
        return CalculateCartUseCase(
            line_pricer=self.create_cart_line_pricer(db),
            concurrent=config["cart_pricing_concurrent"],
            max_concurrency=config["cart_pricing_max_concurrency"],
        )

    def create_calculate_product_offer_use_case(self, db: AsyncSession) -> CalculateProductOfferUseCase:
        """Create CalculateProductOfferUseCase with dependencies."""
        return CalculateProductOfferUseCase(promotion_repository=self.create_promotion_repository(db))
