"""
E-commerce Domain Layer

Domain-Driven Design implementation for the e-commerce pricing context.

This module contains:
- Entities: Business objects with identity (Product, Promotion)
- Value Objects: Immutable domain primitives (SizeVariant, promotion terms, visibility)
- Domain Services: Promotion strategy and best-promotion selection
- Exceptions: Line-level pricing failures
"""

from app.domains.ecommerce.domain.entities import (
    Product,
    Promotion,
)
from app.domains.ecommerce.domain.services import (
    PromotionCalculation,
    apply_promotion,
    no_promotion,
    select_best_promotion,
)
from app.domains.ecommerce.domain.value_objects import (
    BuyXGetYFree,
    PercentageDiscount,
    ProductVisibility,
    PromotionType,
    PromotionVisibility,
    SizeVariant,
)

__all__ = [
    # Entities
    "Product",
    "Promotion",
    # Value Objects
    "SizeVariant",
    "PercentageDiscount",
    "BuyXGetYFree",
    "ProductVisibility",
    "PromotionVisibility",
    "PromotionType",
    # Services
    "PromotionCalculation",
    "apply_promotion",
    "no_promotion",
    "select_best_promotion",
]
