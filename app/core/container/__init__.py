"""
Dependency Injection Container.

Centralized container for creating and managing all application dependencies.
Wires concrete implementations to the application ports.

This module is the facade that composes the domain-specific containers.
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.ecommerce.application.use_cases import (
    CalculateCartUseCase,
    CalculateProductOfferUseCase,
)

from .base import BaseContainer
from .ecommerce import EcommerceContainer

logger = logging.getLogger(__name__)


class DependencyContainer:
    """
    Dependency Injection Container (Facade).

    Single Responsibility: Compose and delegate to domain-specific containers.
    """

    def __init__(self, config: dict | None = None):
        """
        Initialize container with all domain sub-containers.

        Args:
            config: Optional configuration dict (overrides settings)
        """
        self._base = BaseContainer(config)
        self._ecommerce = EcommerceContainer(self._base)

        logger.info("DependencyContainer initialized")

    @property
    def settings(self):
        return self._base.settings

    @property
    def config(self):
        return self._base.config

    def get_config(self) -> dict:
        """Get current configuration."""
        return self._base.get_config()

    # ============================================================
    # E-COMMERCE (delegated to EcommerceContainer)
    # ============================================================

    @property
    def ecommerce(self) -> EcommerceContainer:
        """Direct access to the e-commerce container."""
        return self._ecommerce

    def create_calculate_cart_use_case(self, db: AsyncSession) -> CalculateCartUseCase:
        return self._ecommerce.create_calculate_cart_use_case(db)

    def create_calculate_product_offer_use_case(self, db: AsyncSession) -> CalculateProductOfferUseCase:
        return self._ecommerce.create_calculate_product_offer_use_case(db)


# ============================================================
# GLOBAL CONTAINER INSTANCE
# ============================================================

_container: DependencyContainer | None = None


def get_container(config: dict | None = None) -> DependencyContainer:
    """
    Get global container instance (singleton).

    Args:
        config: Optional configuration (only used on first call)

    Returns:
        DependencyContainer instance
    """
    global _container

    if _container is None:
        logger.info("Initializing global DependencyContainer")
        _container = DependencyContainer(config)
    elif config is not None:
        logger.warning(
            "Container already initialized, ignoring new config. "
            "Call reset_container() first to change config."
        )

    return _container


def reset_container() -> None:
    """
    Reset global container instance.

    Useful for testing or reconfiguration.
    """
    global _container
    logger.info("Resetting global DependencyContainer")
    _container = None


__all__ = [
    "DependencyContainer",
    "get_container",
    "reset_container",
    "BaseContainer",
    "EcommerceContainer",
]
