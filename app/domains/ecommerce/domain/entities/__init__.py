"""
E-commerce Domain Entities
"""

from app.domains.ecommerce.domain.entities.product import Product
from app.domains.ecommerce.domain.entities.promotion import Promotion, build_terms

__all__ = [
    "Product",
    "Promotion",
    "build_terms",
]
