"""
E-commerce Application Services

Collaborators of the cart pricing use case.
"""

from .cart_line_pricer import CartLinePricer
from .price_lookup import ProductPriceLookup
from .promotion_resolver import PromotionResolver

__all__ = [
    "CartLinePricer",
    "ProductPriceLookup",
    "PromotionResolver",
]
