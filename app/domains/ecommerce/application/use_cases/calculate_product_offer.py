"""
Calculate Product Offer Use Case

Quotes the best active promotion of a product for a given price and
quantity, without looking the product up.
"""

import logging
from decimal import Decimal, InvalidOperation

from app.core.domain import ValidationException, to_decimal
from app.domains.ecommerce.application.ports import IPromotionRepository
from app.domains.ecommerce.domain.services.promotion_strategy import (
    PromotionCalculation,
    select_best_promotion,
)

logger = logging.getLogger(__name__)


class CalculateProductOfferUseCase:
    """
    Use Case: Calculate Product Offer

    Picks, among the product's VISIBLE promotions, the one giving the
    largest positive discount (ties resolve to the lowest promotion id).
    """

    def __init__(self, promotion_repository: IPromotionRepository):
        """
        Initialize use case with dependencies.

        Args:
            promotion_repository: Repository for promotion data access
        """
        self.promotion_repository = promotion_repository

    async def execute(
        self,
        product_id: str,
        price: Decimal | float,
        quantity: int,
    ) -> PromotionCalculation | None:
        """
        Calculate the best offer for a product.

        Args:
            product_id: Product whose promotions are considered
            price: Unit price to apply the promotions to
            quantity: Number of units

        Returns:
            Best applied calculation, or None if no promotion saves money

        Raises:
            ValidationException: On blank product id, non-positive price or quantity
        """
        if not product_id or not str(product_id).strip():
            raise ValidationException("Product ID is required", field="product_id")

        try:
            unit_price = to_decimal(price)
        except InvalidOperation:
            raise ValidationException("Price must be a number", field="price") from None
        if unit_price <= 0:
            raise ValidationException("Price must be greater than 0", field="price")

        if quantity <= 0:
            raise ValidationException("Quantity must be greater than 0", field="quantity")

        promotions = await self.promotion_repository.get_active_by_product(product_id)
        if not promotions:
            return None

        best = select_best_promotion(
            [p for p in promotions if p.is_visible()],
            unit_price,
            quantity,
            require_discount=True,
        )
        if best is None:
            logger.debug(f"No promotion gives a discount for product {product_id} x{quantity}")
            return None

        return best[1]


__all__ = ["CalculateProductOfferUseCase"]
