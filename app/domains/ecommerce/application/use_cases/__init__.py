"""
E-commerce Use Cases

Business use cases for the e-commerce domain.
Each use case represents a single business operation.
"""

from .calculate_cart import CalculateCartUseCase
from .calculate_product_offer import CalculateProductOfferUseCase

__all__ = [
    "CalculateCartUseCase",
    "CalculateProductOfferUseCase",
]
