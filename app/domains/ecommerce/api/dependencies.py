"""
E-commerce API Dependencies

FastAPI dependencies for the e-commerce domain.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.container import DependencyContainer, get_container
from app.database.async_db import get_async_db
from app.domains.ecommerce.application.use_cases import (
    CalculateCartUseCase,
    CalculateProductOfferUseCase,
)


def get_dependency_container() -> DependencyContainer:
    """Get dependency container instance."""
    return get_container()


def get_calculate_cart_use_case(
    db: AsyncSession = Depends(get_async_db),
    container: DependencyContainer = Depends(get_dependency_container),
) -> CalculateCartUseCase:
    """Get CalculateCartUseCase bound to the request session."""
    return container.create_calculate_cart_use_case(db)


def get_calculate_product_offer_use_case(
    db: AsyncSession = Depends(get_async_db),
    container: DependencyContainer = Depends(get_dependency_container),
) -> CalculateProductOfferUseCase:
    """Get CalculateProductOfferUseCase bound to the request session."""
    return container.create_calculate_product_offer_use_case(db)


__all__ = [
    "get_dependency_container",
    "get_calculate_cart_use_case",
    "get_calculate_product_offer_use_case",
]
