"""
Size Variant Value Object for E-commerce Domain

A (label, unit price) pair offered by a product.
"""

from dataclasses import dataclass
from decimal import Decimal

from app.core.domain import ValueObject, to_decimal


@dataclass(frozen=True)
class SizeVariant(ValueObject):
    """
    Size variant of a product with its own unit price.

    Example:
        ```python
        small = SizeVariant(label="S", price=Decimal("19.90"))
        small.matches(" S ")  # True
        ```
    """

    label: str
    price: Decimal

    def _validate(self) -> None:
        object.__setattr__(self, "price", to_decimal(self.price))
        if self.price <= 0:
            raise ValueError(f"Size '{self.label}' must have a positive price")

    def matches(self, label: str) -> bool:
        """Case-sensitive comparison after trimming both sides."""
        return self.label.strip() == label.strip()

    def __str__(self) -> str:
        return f"{self.label} (${self.price:,.2f})"
