"""
Unit tests for E-commerce Domain Repositories.

Tests the data access layer for products and promotions.
"""

from datetime import UTC, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain import ValidationException
from app.domains.ecommerce.application.dto import CartLine
from app.domains.ecommerce.application.services import CartLinePricer, ProductPriceLookup, PromotionResolver
from app.domains.ecommerce.domain.value_objects import (
    BuyXGetYFree,
    PercentageDiscount,
    ProductVisibility,
    PromotionType,
    PromotionVisibility,
)
from app.domains.ecommerce.infrastructure.repositories.product_repository import (
    SQLAlchemyProductRepository,
)
from app.domains.ecommerce.infrastructure.repositories.promotion_repository import (
    SQLAlchemyPromotionRepository,
)


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def mock_async_session():
    """Create a mock async database session."""
    session = AsyncMock(spec=AsyncSession)
    session.execute = AsyncMock()
    return session


def _result_with_one(model):
    result = MagicMock()
    result.scalar_one_or_none.return_value = model
    return result


def _result_with_many(models):
    result = MagicMock()
    result.scalars.return_value.all.return_value = models
    return result


@pytest.fixture
def sample_product_model():
    """Sample SQLAlchemy product model with two sizes."""
    small = MagicMock()
    small.label = "S"
    small.price = Decimal("10.00")
    medium = MagicMock()
    medium.label = "M"
    medium.price = Decimal("12.50")

    model = MagicMock()
    model.id = uuid4()
    model.name = "Cotton T-Shirt"
    model.description = "100% cotton"
    model.category_id = None
    model.status = "visible"
    model.colors = ["white", "black"]
    model.sizes = [small, medium]
    model.created_at = datetime.now(UTC)
    model.updated_at = datetime.now(UTC)
    return model


@pytest.fixture
def sample_promotion_model():
    """Sample SQLAlchemy percentage promotion model."""
    model = MagicMock()
    model.id = uuid4()
    model.name = "Summer Sale"
    model.description = "20% off"
    model.type = "PERCENTAGE_DISCOUNT"
    model.product_id = uuid4()
    model.discount_percentage = Decimal("20.00")
    model.buy_quantity = None
    model.get_quantity = None
    model.status = "VISIBLE"
    model.created_at = datetime.now(UTC)
    model.updated_at = datetime.now(UTC)
    return model


# ============================================================================
# PRODUCT REPOSITORY TESTS
# ============================================================================


class TestSQLAlchemyProductRepository:
    @pytest.mark.asyncio
    async def test_get_by_id_maps_sizes(self, mock_async_session, sample_product_model):
        # Arrange
        mock_async_session.execute.return_value = _result_with_one(sample_product_model)
        repo = SQLAlchemyProductRepository(mock_async_session)

        # Act
        product = await repo.get_by_id(str(sample_product_model.id))

        # Assert
        assert product.id == str(sample_product_model.id)
        assert product.name == "Cotton T-Shirt"
        assert product.visibility == ProductVisibility.VISIBLE
        assert [(s.label, s.price) for s in product.sizes] == [("S", Decimal("10.00")), ("M", Decimal("12.50"))]
        assert product.colors == ["white", "black"]
        assert product.category_id is None

    @pytest.mark.asyncio
    async def test_get_by_id_not_found(self, mock_async_session):
        mock_async_session.execute.return_value = _result_with_one(None)
        repo = SQLAlchemyProductRepository(mock_async_session)

        assert await repo.get_by_id(str(uuid4())) is None

    @pytest.mark.asyncio
    async def test_invalid_uuid_is_not_found(self, mock_async_session):
        repo = SQLAlchemyProductRepository(mock_async_session)

        assert await repo.get_by_id("not-a-uuid") is None
        mock_async_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_database_error_propagates(self, mock_async_session):
        mock_async_session.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))
        repo = SQLAlchemyProductRepository(mock_async_session)

        with pytest.raises(OperationalError):
            await repo.get_by_id(str(uuid4()))


# ============================================================================
# PROMOTION REPOSITORY TESTS
# ============================================================================


class TestSQLAlchemyPromotionRepository:
    @pytest.mark.asyncio
    async def test_get_by_id_percentage(self, mock_async_session, sample_promotion_model):
        mock_async_session.execute.return_value = _result_with_one(sample_promotion_model)
        repo = SQLAlchemyPromotionRepository(mock_async_session)

        promotion = await repo.get_by_id(str(sample_promotion_model.id))

        assert promotion.id == str(sample_promotion_model.id)
        assert promotion.product_id == str(sample_promotion_model.product_id)
        assert promotion.type == PromotionType.PERCENTAGE_DISCOUNT
        assert promotion.terms == PercentageDiscount(Decimal("20.00"))
        assert promotion.visibility == PromotionVisibility.VISIBLE

    @pytest.mark.asyncio
    async def test_get_by_id_buy_x_get_y(self, mock_async_session, sample_promotion_model):
        sample_promotion_model.type = "BUY_X_GET_Y_FREE"
        sample_promotion_model.discount_percentage = None
        sample_promotion_model.buy_quantity = 3
        sample_promotion_model.get_quantity = 1
        sample_promotion_model.status = "HIDDEN"
        mock_async_session.execute.return_value = _result_with_one(sample_promotion_model)
        repo = SQLAlchemyPromotionRepository(mock_async_session)

        promotion = await repo.get_by_id(str(sample_promotion_model.id))

        assert promotion.terms == BuyXGetYFree(3, 1)
        assert promotion.is_visible() is False

    @pytest.mark.asyncio
    async def test_row_mixing_kinds_is_rejected(self, mock_async_session, sample_promotion_model):
        sample_promotion_model.buy_quantity = 2
        mock_async_session.execute.return_value = _result_with_one(sample_promotion_model)
        repo = SQLAlchemyPromotionRepository(mock_async_session)

        with pytest.raises(ValidationException):
            await repo.get_by_id(str(sample_promotion_model.id))

    @pytest.mark.asyncio
    async def test_get_active_by_product(self, mock_async_session, sample_promotion_model):
        mock_async_session.execute.return_value = _result_with_many([sample_promotion_model])
        repo = SQLAlchemyPromotionRepository(mock_async_session)

        promotions = await repo.get_active_by_product(str(sample_promotion_model.product_id))

        assert len(promotions) == 1
        assert promotions[0].name == "Summer Sale"
        mock_async_session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_get_active_by_product_invalid_uuid(self, mock_async_session):
        repo = SQLAlchemyPromotionRepository(mock_async_session)

        assert await repo.get_active_by_product("not-a-uuid") == []
        mock_async_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_database_error_propagates(self, mock_async_session):
        mock_async_session.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))
        repo = SQLAlchemyPromotionRepository(mock_async_session)

        with pytest.raises(OperationalError):
            await repo.get_active_by_product(str(uuid4()))


# ============================================================================
# PRICING OVER SQLALCHEMY STORES
# ============================================================================


def _pricer_over(session) -> CartLinePricer:
    return CartLinePricer(
        price_lookup=ProductPriceLookup(SQLAlchemyProductRepository(session)),
        promotion_resolver=PromotionResolver(SQLAlchemyPromotionRepository(session)),
    )


class TestPricingWithUuidSpellings:
    """Product ids are UUIDs; any spelling the store accepts must price the same."""

    @pytest.fixture
    def bound_promotion(self, sample_product_model, sample_promotion_model):
        sample_promotion_model.product_id = sample_product_model.id
        return sample_promotion_model

    @pytest.mark.asyncio
    @pytest.mark.parametrize("spelling", [str, lambda pid: str(pid).upper(), lambda pid: pid.hex])
    async def test_automatic_promotion_found(
        self, mock_async_session, sample_product_model, bound_promotion, spelling
    ):
        # Arrange
        mock_async_session.execute.side_effect = [
            _result_with_many([bound_promotion]),
            _result_with_one(sample_product_model),
        ]

        # Act
        line = await _pricer_over(mock_async_session).price(
            CartLine(product_id=spelling(sample_product_model.id), quantity=3, size="M")
        )

        # Assert
        assert line.error is None
        assert line.applied_promotion_id == str(bound_promotion.id)
        assert line.line_total == Decimal("30.00")
        assert line.product_id == str(sample_product_model.id)

    @pytest.mark.asyncio
    async def test_explicit_promotion_matches_upper_case_product_id(
        self, mock_async_session, sample_product_model, bound_promotion
    ):
        mock_async_session.execute.side_effect = [
            _result_with_one(bound_promotion),
            _result_with_one(sample_product_model),
        ]

        line = await _pricer_over(mock_async_session).price(
            CartLine(
                product_id=str(sample_product_model.id).upper(),
                promotion_id=str(bound_promotion.id),
                quantity=3,
                size="M",
            )
        )

        assert line.error_code is None
        assert line.applied_promotion_id == str(bound_promotion.id)
        assert line.line_total == Decimal("30.00")
