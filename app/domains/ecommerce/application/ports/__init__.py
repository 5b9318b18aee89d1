"""
Ecommerce Application Ports

Interface definitions (ports) for the Ecommerce domain.
Uses Protocol for structural typing.

All ports are read-only from the pricing engine's point of view. Reads are
not locked: a product or promotion may change between a cart quotation and
the order that follows it.
"""

from typing import Protocol, runtime_checkable

from app.domains.ecommerce.domain.entities.product import Product
from app.domains.ecommerce.domain.entities.promotion import Promotion


@runtime_checkable
class IProductRepository(Protocol):
    """
    Interface for product repository.

    Defines the contract for product data access.
    """

    async def get_by_id(self, product_id: str) -> Product | None:
        """Get product by ID, including its size variants"""
        ...


@runtime_checkable
class IPromotionRepository(Protocol):
    """
    Interface for promotion repository.

    Defines the contract for promotion data access.
    """

    async def get_by_id(self, promotion_id: str) -> Promotion | None:
        """Get promotion by ID regardless of visibility"""
        ...

    async def get_active_by_product(self, product_id: str) -> list[Promotion]:
        """Get VISIBLE promotions bound to a product"""
        ...


__all__ = [
    "IProductRepository",
    "IPromotionRepository",
]
