"""
Base Container - Shared Settings.

Single Responsibility: Hold application settings and container-wide config.
"""

import logging

from app.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class BaseContainer:
    """
    Base container shared by the domain containers.
    """

    def __init__(self, config: dict | None = None, settings: Settings | None = None):
        """
        Initialize base container.

        Args:
            config: Optional configuration dict (overrides settings)
            settings: Optional settings instance (defaults to get_settings())
        """
        self.settings = settings or get_settings()
        self.config = config or {}

        logger.info("BaseContainer initialized")

    def get_config(self) -> dict:
        """Get current configuration."""
        return {
            "cart_pricing_concurrent": self.config.get(
                "cart_pricing_concurrent", self.settings.CART_PRICING_CONCURRENT
            ),
            "cart_pricing_max_concurrency": self.config.get(
                "cart_pricing_max_concurrency", self.settings.CART_PRICING_MAX_CONCURRENCY
            ),
            "domains": ["ecommerce"],
        }
