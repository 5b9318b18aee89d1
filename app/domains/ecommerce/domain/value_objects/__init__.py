"""
E-commerce Domain Value Objects

Immutable value objects for the e-commerce domain.
"""

from app.domains.ecommerce.domain.value_objects.promotion_terms import (
    BuyXGetYFree,
    PercentageDiscount,
    PromotionTerms,
)
from app.domains.ecommerce.domain.value_objects.size_variant import SizeVariant
from app.domains.ecommerce.domain.value_objects.visibility import (
    ProductVisibility,
    PromotionType,
    PromotionVisibility,
)

__all__ = [
    "SizeVariant",
    "PercentageDiscount",
    "BuyXGetYFree",
    "PromotionTerms",
    "ProductVisibility",
    "PromotionVisibility",
    "PromotionType",
]
