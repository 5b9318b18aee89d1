"""
E-commerce Infrastructure Repositories

Repository implementations for data access.
All repositories implement the ports from app.domains.ecommerce.application.ports
"""

from .product_repository import SQLAlchemyProductRepository
from .promotion_repository import SQLAlchemyPromotionRepository

__all__ = [
    "SQLAlchemyProductRepository",
    "SQLAlchemyPromotionRepository",
]
