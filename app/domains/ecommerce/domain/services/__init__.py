"""
E-commerce Domain Services
"""

from app.domains.ecommerce.domain.services.promotion_strategy import (
    PromotionCalculation,
    apply_promotion,
    free_units_for,
    no_promotion,
    select_best_promotion,
)

__all__ = [
    "PromotionCalculation",
    "apply_promotion",
    "free_units_for",
    "no_promotion",
    "select_best_promotion",
]
