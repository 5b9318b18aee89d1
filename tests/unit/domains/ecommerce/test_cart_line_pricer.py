"""
Unit Tests for the Cart Line Pricer

Every pricing failure must come back as an errored line, never as an exception.
"""

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from app.domains.ecommerce.application.dto import CartLine
from app.domains.ecommerce.application.services import CartLinePricer, ProductPriceLookup, PromotionResolver


@pytest.fixture
def build_pricer(product_store, promotion_store):
    """Pricer over in-memory stores."""

    def _build(products=None, promotions=None) -> CartLinePricer:
        return CartLinePricer(
            price_lookup=ProductPriceLookup(product_store(products)),
            promotion_resolver=PromotionResolver(promotion_store(promotions)),
        )

    return _build


class TestSuccessfulLines:
    @pytest.mark.asyncio
    async def test_percentage_promotion_applied_automatically(
        self, build_pricer, make_product, make_percentage_promotion
    ):
        # Arrange
        pricer = build_pricer([make_product()], [make_percentage_promotion(percentage="20")])

        # Act
        line = await pricer.price(CartLine(product_id="prod-1", quantity=3))

        # Assert
        assert line.is_error is False
        assert line.product_name == "Cotton T-Shirt"
        assert line.base_price == Decimal("100.00")
        assert line.line_total == Decimal("240.00")
        assert line.final_price == Decimal("80.00")
        assert line.applied_promotion_id == "promo-pct"
        assert line.applied_promotion_name == "20% off"

    @pytest.mark.asyncio
    async def test_buy_x_get_y_keeps_unit_price(self, build_pricer, make_product, make_bogo_promotion):
        pricer = build_pricer([make_product(sizes=[("U", "10.00")])], [make_bogo_promotion(buy=2, get=1)])

        line = await pricer.price(CartLine(product_id="prod-1", quantity=7))

        assert line.line_total == Decimal("50.00")
        assert line.final_price == Decimal("10.00")
        assert line.applied_promotion_id == "promo-bogo"

    @pytest.mark.asyncio
    async def test_no_promotion(self, build_pricer, make_product):
        pricer = build_pricer([make_product(sizes=[("U", "19.99")])])

        line = await pricer.price(CartLine(product_id="prod-1", quantity=2, color="red"))

        assert line.line_total == Decimal("39.98")
        assert line.final_price == Decimal("19.99")
        assert line.applied_promotion_id is None
        assert line.color == "red"

    @pytest.mark.asyncio
    async def test_line_total_rounded_half_up(self, build_pricer, make_product, make_percentage_promotion):
        pricer = build_pricer(
            [make_product(sizes=[("U", "10.00")])],
            [make_percentage_promotion(percentage="33.33")],
        )

        line = await pricer.price(CartLine(product_id="prod-1", quantity=3))

        # 30.00 - 9.999 = 20.001
        assert line.line_total == Decimal("20.00")
        assert line.final_price == Decimal("6.67")

    @pytest.mark.asyncio
    async def test_size_selects_price(self, build_pricer, make_product):
        pricer = build_pricer([make_product(sizes=[("S", "10"), ("M", "12")])])

        line = await pricer.price(CartLine(product_id="prod-1", quantity=2, size="M"))

        assert line.base_price == Decimal("12")
        assert line.line_total == Decimal("24.00")
        assert line.size == "M"

    @pytest.mark.asyncio
    async def test_explicit_promotion_supplies_product(self, build_pricer, make_product, make_percentage_promotion):
        pricer = build_pricer([make_product()], [make_percentage_promotion(promotion_id="promo-1", percentage="10")])

        line = await pricer.price(CartLine(promotion_id="promo-1", quantity=1))

        assert line.product_id == "prod-1"
        assert line.line_total == Decimal("90.00")
        assert line.applied_promotion_id == "promo-1"

    @pytest.mark.asyncio
    async def test_explicit_promotion_wins_over_better_one(
        self, build_pricer, make_product, make_percentage_promotion
    ):
        pricer = build_pricer(
            [make_product()],
            [
                make_percentage_promotion(promotion_id="small", percentage="5"),
                make_percentage_promotion(promotion_id="big", percentage="50"),
            ],
        )

        line = await pricer.price(CartLine(product_id="prod-1", promotion_id="small", quantity=1))

        assert line.applied_promotion_id == "small"
        assert line.line_total == Decimal("95.00")

    @pytest.mark.asyncio
    async def test_unapplicable_explicit_promotion_reported_at_base_price(
        self, build_pricer, make_product, make_percentage_promotion
    ):
        pricer = build_pricer([make_product()], [make_percentage_promotion(promotion_id="broken", percentage="0")])

        line = await pricer.price(CartLine(product_id="prod-1", promotion_id="broken", quantity=2))

        assert line.is_error is False
        assert line.applied_promotion_id == "broken"
        assert line.applied_promotion_name == "20% off"
        assert line.line_total == Decimal("200.00")
        assert line.final_price == Decimal("100.00")

    @pytest.mark.asyncio
    async def test_best_automatic_promotion(self, build_pricer, make_product, make_percentage_promotion):
        pricer = build_pricer(
            [make_product()],
            [
                make_percentage_promotion(promotion_id="b", percentage="30"),
                make_percentage_promotion(promotion_id="a", percentage="30"),
                make_percentage_promotion(promotion_id="c", percentage="10"),
            ],
        )

        line = await pricer.price(CartLine(product_id="prod-1", quantity=1))

        assert line.applied_promotion_id == "a"
        assert line.line_total == Decimal("70.00")


class TestFailedLines:
    @pytest.mark.asyncio
    async def test_invalid_quantity_skips_lookups(self):
        price_lookup = AsyncMock(spec=ProductPriceLookup)
        resolver = AsyncMock(spec=PromotionResolver)
        pricer = CartLinePricer(price_lookup=price_lookup, promotion_resolver=resolver)

        line = await pricer.price(CartLine(product_id="prod-1", quantity=0))

        assert line.error_code == "INVALID_QUANTITY"
        assert line.error == "Invalid quantity for item. Quantity must be greater than 0."
        price_lookup.lookup.assert_not_awaited()
        resolver.resolve.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_promotion_product_mismatch(self, build_pricer, make_product, make_percentage_promotion):
        pricer = build_pricer(
            [make_product(), make_product(product_id="prod-2", name="Mug")],
            [make_percentage_promotion(promotion_id="promo-1", product_id="prod-2")],
        )

        line = await pricer.price(CartLine(product_id="prod-1", promotion_id="promo-1", quantity=2, size="U"))

        assert line.error_code == "PROMOTION_PRODUCT_MISMATCH"
        assert line.product_name is None
        assert line.line_total == line.base_price == line.final_price == Decimal("0")
        assert line.applied_promotion_id is None
        assert line.quantity == 2
        assert line.size == "U"

    @pytest.mark.asyncio
    async def test_product_id_required(self, build_pricer):
        line = await build_pricer().price(CartLine(quantity=1))

        assert line.error_code == "PRODUCT_ID_REQUIRED"

    @pytest.mark.asyncio
    async def test_size_required(self, build_pricer, make_product):
        pricer = build_pricer([make_product(sizes=[("S", "10"), ("M", "12")])])

        line = await pricer.price(CartLine(product_id="prod-1", quantity=1))

        assert line.error_code == "SIZE_REQUIRED"
        assert line.line_total == Decimal("0")

    @pytest.mark.asyncio
    async def test_product_not_found(self, build_pricer):
        line = await build_pricer().price(CartLine(product_id="ghost", quantity=1))

        assert line.error_code == "PRODUCT_NOT_FOUND"
        assert line.product_id == "ghost"

    @pytest.mark.asyncio
    async def test_store_failure(self, failing_repository):
        pricer = CartLinePricer(
            price_lookup=ProductPriceLookup(failing_repository),
            promotion_resolver=PromotionResolver(failing_repository),
        )

        line = await pricer.price(CartLine(product_id="prod-1", quantity=1))

        assert line.error_code == "LOOKUP_FAILURE"

    @pytest.mark.asyncio
    async def test_programming_errors_propagate(self):
        price_lookup = AsyncMock(spec=ProductPriceLookup)
        price_lookup.lookup.side_effect = TypeError("boom")
        resolver = AsyncMock(spec=PromotionResolver)
        resolver.resolve.return_value.product_id = None
        pricer = CartLinePricer(price_lookup=price_lookup, promotion_resolver=resolver)

        with pytest.raises(TypeError):
            await pricer.price(CartLine(product_id="prod-1", quantity=1))
