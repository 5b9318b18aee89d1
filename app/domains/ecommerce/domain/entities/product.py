"""
Product Entity for E-commerce Domain

Represents a catalog product as seen by the pricing engine.
"""

from dataclasses import dataclass, field

from app.core.domain import Entity

from ..value_objects.size_variant import SizeVariant
from ..value_objects.visibility import ProductVisibility


@dataclass
class Product(Entity[str]):
    """
    Product entity for e-commerce domain.

    A product is priced through its ordered list of size variants:
    - exactly one variant: priceable without a size label
    - more than one: the caller must name the size

    Example:
        ```python
        product = Product(
            id="0b6f...",
            name="Cotton T-Shirt",
            sizes=[SizeVariant("S", Decimal("10")), SizeVariant("M", Decimal("12"))],
        )
        product.find_size("M")  # SizeVariant(label="M", price=Decimal("12"))
        ```
    """

    name: str = ""
    description: str | None = None
    category_id: str | None = None
    visibility: ProductVisibility = ProductVisibility.VISIBLE
    colors: list[str] = field(default_factory=list)
    sizes: list[SizeVariant] = field(default_factory=list)

    def __post_init__(self):
        """Validate product after initialization."""
        if not self.name:
            raise ValueError("Product name is required")

    def is_visible(self) -> bool:
        return self.visibility == ProductVisibility.VISIBLE

    def has_sizes(self) -> bool:
        return len(self.sizes) > 0

    def requires_size(self) -> bool:
        """A size label is mandatory when more than one variant exists."""
        return len(self.sizes) > 1

    def find_size(self, label: str) -> SizeVariant | None:
        """
        Find a size variant by label.

        Args:
            label: Requested size label (surrounding whitespace ignored)

        Returns:
            First matching variant, or None
        """
        for variant in self.sizes:
            if variant.matches(label):
                return variant
        return None

    def default_size(self) -> SizeVariant | None:
        """The only variant, when the product has exactly one."""
        if len(self.sizes) == 1:
            return self.sizes[0]
        return None
