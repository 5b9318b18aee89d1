"""
Cart Line Pricer

Prices one cart line: resolves its promotion, looks up the unit price,
applies the promotion and rounds the result. Every pricing failure is
captured into the returned line instead of being raised, so a batch of
lines is never aborted by one bad entry.
"""

import logging
from decimal import Decimal

from app.core.domain import quantize_money
from app.domains.ecommerce.application.dto import CartLine, PricedLine, PromotionResolution
from app.domains.ecommerce.application.services.price_lookup import ProductPriceLookup
from app.domains.ecommerce.application.services.promotion_resolver import PromotionResolver
from app.domains.ecommerce.domain.entities.promotion import Promotion
from app.domains.ecommerce.domain.exceptions import (
    InvalidQuantity,
    LookupFailure,
    PricingError,
    ProductIdRequired,
    ProductUnavailable,
)
from app.domains.ecommerce.domain.services.promotion_strategy import (
    PromotionCalculation,
    apply_promotion,
    no_promotion,
    select_best_promotion,
)
from app.domains.ecommerce.domain.value_objects.visibility import PromotionType

logger = logging.getLogger(__name__)


class CartLinePricer:
    """
    Price a single cart line.

    Single Responsibility: orchestrate lookup, promotion resolution and the
    promotion strategy for one line.
    """

    def __init__(self, price_lookup: ProductPriceLookup, promotion_resolver: PromotionResolver):
        """
        Initialize pricer with its collaborators.

        Args:
            price_lookup: Resolves product and unit price
            promotion_resolver: Resolves explicit or automatic promotions
        """
        self.price_lookup = price_lookup
        self.promotion_resolver = promotion_resolver

    async def price(self, line: CartLine) -> PricedLine:
        """
        Price a cart line.

        Args:
            line: Cart line to price

        Returns:
            PricedLine; on failure a zero-valued line with `error` set
        """
        try:
            return await self._price(line)
        except LookupFailure as e:
            logger.error(f"Store lookup failed while pricing product {line.product_id}: {e.details}")
            return PricedLine.failed(line, e)
        except PricingError as e:
            logger.warning(f"Cannot price line for product {line.product_id}: [{e.code}] {e.message}")
            return PricedLine.failed(line, e)

    async def _price(self, line: CartLine) -> PricedLine:
        if line.quantity <= 0:
            raise InvalidQuantity(line.quantity)

        resolution = await self.promotion_resolver.resolve(line.product_id, line.promotion_id)

        product_id = line.product_id or resolution.product_id
        if not product_id:
            raise ProductIdRequired()

        quote = await self.price_lookup.lookup(product_id, line.size)
        product = quote.product
        if not product.is_visible():
            raise ProductUnavailable(str(product.id), product.name)

        promotion, calculation = self._apply(resolution, quote.unit_price, line.quantity)

        line_total = quantize_money(calculation.final_amount)
        if promotion is not None and promotion.type == PromotionType.BUY_X_GET_Y_FREE:
            # Free units are reflected in the line total only
            final_price = quantize_money(quote.unit_price)
        else:
            final_price = quantize_money(line_total / line.quantity)

        return PricedLine(
            product_id=str(product.id),
            product_name=product.name,
            quantity=line.quantity,
            base_price=quote.unit_price,
            final_price=final_price,
            line_total=line_total,
            applied_promotion_id=str(promotion.id) if promotion else None,
            applied_promotion_name=promotion.name if promotion else None,
            size=line.size,
            color=line.color,
        )

    def _apply(
        self,
        resolution: PromotionResolution,
        unit_price: Decimal,
        quantity: int,
    ) -> tuple[Promotion | None, PromotionCalculation]:
        """Apply the explicit promotion, the best candidate, or nothing."""
        if resolution.explicit is not None:
            # Out-of-range terms are reported with a zero discount
            return resolution.explicit, apply_promotion(resolution.explicit, unit_price, quantity)

        best = select_best_promotion(resolution.candidates, unit_price, quantity)
        if best is None:
            return None, no_promotion(unit_price, quantity)
        return best
