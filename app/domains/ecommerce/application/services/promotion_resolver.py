"""
Promotion Resolver

Finds the promotion(s) that may apply to a cart line: either the one the
caller asked for explicitly, or the visible promotions of the product.
"""

import logging

from app.domains.ecommerce.application.dto import PromotionResolution
from app.domains.ecommerce.application.ports import IPromotionRepository
from app.domains.ecommerce.domain.exceptions import (
    LookupFailure,
    PricingError,
    PromotionNotAvailable,
    PromotionNotFound,
    PromotionProductMismatch,
)

logger = logging.getLogger(__name__)


class PromotionResolver:
    """
    Resolve explicit or auto-discovered promotions for a product.

    Never mutates promotion state.
    """

    def __init__(self, promotion_repository: IPromotionRepository):
        """
        Initialize resolver.

        Args:
            promotion_repository: Read-only promotion store
        """
        self.promotion_repository = promotion_repository

    async def resolve(self, product_id: str | None, promotion_id: str | None = None) -> PromotionResolution:
        """
        Resolve promotions for a line.

        Args:
            product_id: Product on the line (may be None when the line only
                names a promotion)
            promotion_id: Explicitly requested promotion, if any

        Returns:
            PromotionResolution with the explicit promotion, the candidate
            list ordered by id, or nothing

        Raises:
            PromotionNotFound: Explicit promotion does not exist
            PromotionNotAvailable: Explicit promotion is not VISIBLE
            PromotionProductMismatch: Explicit promotion belongs to another product
            LookupFailure: The promotion store failed
        """
        if promotion_id:
            return await self._resolve_explicit(product_id, promotion_id)
        if product_id:
            return await self._discover(product_id)
        return PromotionResolution()

    async def _resolve_explicit(self, product_id: str | None, promotion_id: str) -> PromotionResolution:
        try:
            promotion = await self.promotion_repository.get_by_id(promotion_id)
        except PricingError:
            raise
        except Exception as e:
            raise LookupFailure("promotion", e) from e

        if promotion is None:
            raise PromotionNotFound(promotion_id)
        if not promotion.is_visible():
            raise PromotionNotAvailable(str(promotion.id), promotion.name)
        if product_id and not promotion.is_for_product(product_id):
            raise PromotionProductMismatch(str(promotion.id), promotion.name, product_id)

        return PromotionResolution(explicit=promotion)

    async def _discover(self, product_id: str) -> PromotionResolution:
        try:
            promotions = await self.promotion_repository.get_active_by_product(product_id)
        except PricingError:
            raise
        except Exception as e:
            raise LookupFailure("promotion", e) from e

        # Only VISIBLE promotions of this product are eligible
        candidates = tuple(
            sorted(
                (p for p in promotions if p.is_visible() and p.is_for_product(product_id)),
                key=lambda p: str(p.id),
            )
        )
        if candidates:
            logger.debug(f"Found {len(candidates)} active promotion(s) for product {product_id}")
        return PromotionResolution(candidates=candidates)
