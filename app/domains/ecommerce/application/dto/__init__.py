"""
Ecommerce Application DTOs

Data Transfer Objects for the cart pricing flow. All of them are
request-scoped and immutable once built.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from app.domains.ecommerce.domain.entities.product import Product
from app.domains.ecommerce.domain.entities.promotion import Promotion
from app.domains.ecommerce.domain.exceptions import PricingError
from app.domains.ecommerce.domain.value_objects.size_variant import SizeVariant

ZERO = Decimal("0")


# ==================== Cart DTOs ====================


@dataclass(frozen=True)
class CartLine:
    """One requested entry of a cart."""

    quantity: int
    product_id: str | None = None
    promotion_id: str | None = None
    size: str | None = None
    color: str | None = None


@dataclass(frozen=True)
class PricedLine:
    """Priced result of one cart line; errored lines carry zero amounts."""

    product_id: str | None
    product_name: str | None
    quantity: int
    base_price: Decimal
    final_price: Decimal
    line_total: Decimal
    applied_promotion_id: str | None = None
    applied_promotion_name: str | None = None
    size: str | None = None
    color: str | None = None
    error: str | None = None
    error_code: str | None = None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @classmethod
    def failed(cls, line: CartLine, error: PricingError) -> "PricedLine":
        """Zero-valued line recording why pricing failed."""
        return cls(
            product_id=line.product_id,
            product_name=None,
            quantity=line.quantity,
            base_price=ZERO,
            final_price=ZERO,
            line_total=ZERO,
            size=line.size,
            color=line.color,
            error=error.message,
            error_code=error.code,
        )


@dataclass(frozen=True)
class CalculationResult:
    """Priced lines in input order plus the cart total."""

    lines: list[PricedLine] = field(default_factory=list)
    total_amount: Decimal = ZERO

    @property
    def has_errors(self) -> bool:
        return any(line.is_error for line in self.lines)


# ==================== Lookup DTOs ====================


@dataclass(frozen=True)
class PriceQuote:
    """Product and the size variant whose price applies to a line."""

    product: Product
    variant: SizeVariant

    @property
    def unit_price(self) -> Decimal:
        return self.variant.price


@dataclass(frozen=True)
class PromotionResolution:
    """
    Outcome of promotion resolution for a line.

    Either an explicitly requested promotion, a list of auto-discovered
    candidates ordered by id, or nothing.
    """

    explicit: Promotion | None = None
    candidates: tuple[Promotion, ...] = ()

    @property
    def is_empty(self) -> bool:
        return self.explicit is None and not self.candidates

    @property
    def product_id(self) -> str | None:
        """Product the explicit promotion is bound to."""
        return self.explicit.product_id if self.explicit else None


__all__ = [
    "CartLine",
    "PricedLine",
    "CalculationResult",
    "PriceQuote",
    "PromotionResolution",
]
