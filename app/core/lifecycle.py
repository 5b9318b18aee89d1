"""
Application lifecycle management using modern FastAPI lifespan pattern.

This module follows SRP by handling only application startup/shutdown logic.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config.settings import get_settings
from app.database.async_db import check_db_connection, dispose_async_engine

logger = logging.getLogger(__name__)


class LifecycleManager:
    """
    Manages application lifecycle events.

    Handles startup checks and releases the database pool on shutdown.
    """

    def __init__(self, check_database: bool = True) -> None:
        """
        Initialize lifecycle manager.

        Args:
            check_database: Ping the database on startup
        """
        self._check_database = check_database
        self._initialized = False

    async def startup(self) -> None:
        """
        Execute startup tasks.

        Called when the application starts.
        """
        if self._initialized:
            logger.warning("Lifecycle already initialized, skipping startup")
            return

        settings = get_settings()
        logger.info(f"Starting application lifecycle ({settings.ENVIRONMENT})...")

        if settings.CART_PRICING_CONCURRENT:
            logger.info(f"Cart lines priced concurrently (max {settings.CART_PRICING_MAX_CONCURRENCY})")

        if self._check_database:
            # Startup continues without a database; requests will fail per line
            if await check_db_connection():
                logger.info("Database connectivity verified")
            else:
                logger.warning("Database not reachable at startup")

        self._initialized = True
        logger.info("Application lifecycle startup completed")

    async def shutdown(self) -> None:
        """
        Execute shutdown tasks.

        Called when the application stops.
        """
        if not self._initialized:
            logger.warning("Lifecycle not initialized, skipping shutdown")
            return

        logger.info("Stopping application lifecycle...")
        await dispose_async_engine()

        self._initialized = False
        logger.info("Application lifecycle shutdown completed")


# Global lifecycle manager instance
_lifecycle_manager: LifecycleManager | None = None


def get_lifecycle_manager() -> LifecycleManager:
    """Get or create the global lifecycle manager instance."""
    global _lifecycle_manager
    if _lifecycle_manager is None:
        _lifecycle_manager = LifecycleManager(check_database=get_settings().ENVIRONMENT != "test")
    return _lifecycle_manager


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Usage:
        app = FastAPI(lifespan=lifespan)
    """
    lifecycle = get_lifecycle_manager()

    await lifecycle.startup()

    yield

    await lifecycle.shutdown()
