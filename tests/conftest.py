"""
Shared pytest fixtures for all tests.

This module provides in-memory product and promotion stores, entity
factories and the FastAPI test application.
"""

import os
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

# Ensure test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["TESTING"] = "true"

from app.config.settings import Settings  # noqa: E402
from app.core.container import reset_container  # noqa: E402
from app.domains.ecommerce.application.ports import IProductRepository, IPromotionRepository  # noqa: E402
from app.domains.ecommerce.domain.entities import Product, Promotion  # noqa: E402
from app.domains.ecommerce.domain.value_objects import (  # noqa: E402
    BuyXGetYFree,
    PercentageDiscount,
    ProductVisibility,
    PromotionVisibility,
    SizeVariant,
)

# ============================================================================
# ENTITY FACTORIES
# ============================================================================


@pytest.fixture
def make_product():
    """Build a Product; `sizes` is a list of (label, price) pairs."""

    def _make(
        product_id: str = "prod-1",
        name: str = "Cotton T-Shirt",
        sizes: list[tuple[str, str]] | None = None,
        visibility: ProductVisibility = ProductVisibility.VISIBLE,
    ) -> Product:
        if sizes is None:
            sizes = [("U", "100.00")]
        return Product(
            id=product_id,
            name=name,
            visibility=visibility,
            sizes=[SizeVariant(label=label, price=Decimal(price)) for label, price in sizes],
        )

    return _make


@pytest.fixture
def make_percentage_promotion():
    """Build a percentage promotion without range validation."""

    def _make(
        promotion_id: str = "promo-pct",
        product_id: str = "prod-1",
        percentage: str = "20",
        name: str = "20% off",
        visibility: PromotionVisibility = PromotionVisibility.VISIBLE,
    ) -> Promotion:
        return Promotion(
            id=promotion_id,
            name=name,
            product_id=product_id,
            visibility=visibility,
            terms=PercentageDiscount(discount_percentage=Decimal(percentage)),
        )

    return _make


@pytest.fixture
def make_bogo_promotion():
    """Build a buy X get Y free promotion without range validation."""

    def _make(
        promotion_id: str = "promo-bogo",
        product_id: str = "prod-1",
        buy: int = 2,
        get: int = 1,
        name: str = "Buy 2 get 1",
        visibility: PromotionVisibility = PromotionVisibility.VISIBLE,
    ) -> Promotion:
        return Promotion(
            id=promotion_id,
            name=name,
            product_id=product_id,
            visibility=visibility,
            terms=BuyXGetYFree(buy_quantity=buy, get_quantity=get),
        )

    return _make


# ============================================================================
# STORE FIXTURES
# ============================================================================


class InMemoryProductRepository(IProductRepository):
    """Product store backed by a dict."""

    def __init__(self, products: list[Product] | None = None):
        self.products = {str(p.id): p for p in products or []}

    async def get_by_id(self, product_id: str) -> Product | None:
        return self.products.get(str(product_id))


class InMemoryPromotionRepository(IPromotionRepository):
    """Promotion store backed by a dict."""

    def __init__(self, promotions: list[Promotion] | None = None):
        self.promotions = {str(p.id): p for p in promotions or []}

    async def get_by_id(self, promotion_id: str) -> Promotion | None:
        return self.promotions.get(str(promotion_id))

    async def get_active_by_product(self, product_id: str) -> list[Promotion]:
        return sorted(
            (p for p in self.promotions.values() if p.is_visible() and p.is_for_product(product_id)),
            key=lambda p: str(p.id),
        )


@pytest.fixture
def product_store():
    """Factory for in-memory product stores."""
    return InMemoryProductRepository


@pytest.fixture
def promotion_store():
    """Factory for in-memory promotion stores."""
    return InMemoryPromotionRepository


@pytest.fixture
def failing_repository():
    """Store mock whose every read raises a connection error."""
    repo = AsyncMock()
    repo.get_by_id.side_effect = ConnectionError("database is down")
    repo.get_active_by_product.side_effect = ConnectionError("database is down")
    return repo


@pytest.fixture(autouse=True)
def _fresh_container():
    """Drop the global container after each test."""
    yield
    reset_container()


# ============================================================================
# API FIXTURES
# ============================================================================


@pytest.fixture
def test_settings() -> Settings:
    """Settings for the test application."""
    return Settings(ENVIRONMENT="test", DEBUG=False, LOG_LEVEL="DEBUG", LOG_FORMAT="plain")


@pytest.fixture
def fastapi_app(test_settings) -> FastAPI:
    """Create the FastAPI application without running its lifespan."""
    from app.core.app_factory import create_app

    return create_app(test_settings)


@pytest.fixture
def api_client(fastapi_app) -> TestClient:
    """Create FastAPI test client."""
    return TestClient(fastapi_app)
