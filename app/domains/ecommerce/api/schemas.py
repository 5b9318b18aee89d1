"""
E-commerce API Schemas

Pydantic schemas for API request/response validation.
Money amounts go out as numbers rounded to 2 decimals.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from app.core.domain.value_objects import quantize_money
from app.domains.ecommerce.application.dto import CalculationResult, CartLine, PricedLine
from app.domains.ecommerce.domain.services import PromotionCalculation


def _money(amount: Decimal) -> float:
    return float(quantize_money(amount))


# ==================== Cart ====================


class CartItemRequest(BaseModel):
    """
    Cart item request schema.

    Quantity is not range-checked here; invalid quantities are reported on the line.
    """

    product_id: str | None = None
    promotion_id: str | None = None
    quantity: int
    size: str | None = None
    color: str | None = None

    def to_cart_line(self) -> CartLine:
        return CartLine(
            quantity=self.quantity,
            product_id=self.product_id,
            promotion_id=self.promotion_id,
            size=self.size,
            color=self.color,
        )


class CalculateCartRequest(BaseModel):
    """Calculate cart request schema."""

    items: list[CartItemRequest] = Field(default_factory=list)


class PricedLineResponse(BaseModel):
    """Priced cart line response schema."""

    product_id: str | None = None
    product_name: str | None = None
    quantity: int
    base_price: float
    final_price: float
    line_total: float
    applied_promotion_id: str | None = None
    applied_promotion_name: str | None = None
    size: str | None = None
    color: str | None = None
    error: str | None = None
    error_code: str | None = None

    @classmethod
    def from_line(cls, line: PricedLine) -> "PricedLineResponse":
        return cls(
            product_id=line.product_id,
            product_name=line.product_name,
            quantity=line.quantity,
            base_price=_money(line.base_price),
            final_price=_money(line.final_price),
            line_total=_money(line.line_total),
            applied_promotion_id=line.applied_promotion_id,
            applied_promotion_name=line.applied_promotion_name,
            size=line.size,
            color=line.color,
            error=line.error,
            error_code=line.error_code,
        )


class CalculateCartResponse(BaseModel):
    """Calculate cart response schema."""

    items: list[PricedLineResponse]
    total_amount: float

    @classmethod
    def from_result(cls, result: CalculationResult) -> "CalculateCartResponse":
        return cls(
            items=[PricedLineResponse.from_line(line) for line in result.lines],
            total_amount=_money(result.total_amount),
        )


# ==================== Product offers ====================


class ProductOfferRequest(BaseModel):
    """Product offer request schema."""

    price: Decimal
    quantity: int


class ProductOfferResponse(BaseModel):
    """Best offer for a product; only `offer_applied` is set when nothing applies."""

    offer_applied: bool
    promotion_id: str | None = None
    promotion_name: str | None = None
    promotion_type: str | None = None
    original_amount: float | None = None
    discount_amount: float | None = None
    final_amount: float | None = None
    free_units: int | None = None

    @classmethod
    def from_calculation(cls, calculation: PromotionCalculation | None) -> "ProductOfferResponse":
        if calculation is None:
            return cls(offer_applied=False)
        return cls(
            offer_applied=True,
            promotion_id=calculation.promotion_id,
            promotion_name=calculation.promotion_name,
            promotion_type=calculation.promotion_type.value if calculation.promotion_type else None,
            original_amount=_money(calculation.original_amount),
            discount_amount=_money(calculation.discount_amount),
            final_amount=_money(calculation.final_amount),
            free_units=calculation.free_units,
        )
