"""
Promotion Terms Value Objects

The two shapes a promotion can take. A promotion carries exactly one of
them, so the fields of the other kind cannot be populated by construction.

Range checks (percentage in (0, 100], quantities >= 1) belong to the write
path (`Promotion.create`); the terms themselves only normalize types so that
the strategy can still fall back to a zero discount for out-of-range data.
"""

from dataclasses import dataclass
from decimal import Decimal

from app.core.domain import ValueObject, to_decimal

from .visibility import PromotionType


@dataclass(frozen=True)
class PercentageDiscount(ValueObject):
    """Percentage off the line amount."""

    discount_percentage: Decimal

    def _validate(self) -> None:
        object.__setattr__(self, "discount_percentage", to_decimal(self.discount_percentage))

    @property
    def type(self) -> PromotionType:
        return PromotionType.PERCENTAGE_DISCOUNT

    def is_valid(self) -> bool:
        """Percentage must be in (0, 100]."""
        return Decimal("0") < self.discount_percentage <= Decimal("100")


@dataclass(frozen=True)
class BuyXGetYFree(ValueObject):
    """Buy `buy_quantity` units, get `get_quantity` more for free."""

    buy_quantity: int
    get_quantity: int

    def _validate(self) -> None:
        object.__setattr__(self, "buy_quantity", int(self.buy_quantity))
        object.__setattr__(self, "get_quantity", int(self.get_quantity))

    @property
    def type(self) -> PromotionType:
        return PromotionType.BUY_X_GET_Y_FREE

    @property
    def cycle_size(self) -> int:
        """Units in one repeating buy + get cycle."""
        return self.buy_quantity + self.get_quantity

    def is_valid(self) -> bool:
        return self.buy_quantity >= 1 and self.get_quantity >= 1


PromotionTerms = PercentageDiscount | BuyXGetYFree
