"""
Database models package - Organized by responsibility
"""

from .base import Base, TimestampMixin
from .catalog import Product, ProductSize
from .promotions import Promotion

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    # Catalog
    "Product",
    "ProductSize",
    # Promotions
    "Promotion",
]
