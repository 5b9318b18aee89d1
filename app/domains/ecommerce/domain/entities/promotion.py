"""
Promotion Entity for E-commerce Domain

A discount rule bound to exactly one product.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from app.core.domain import Entity, ValidationException, canonical_id, generate_uuid_str

from ..value_objects.promotion_terms import BuyXGetYFree, PercentageDiscount, PromotionTerms
from ..value_objects.visibility import PromotionType, PromotionVisibility


@dataclass
class Promotion(Entity[str]):
    """
    Promotion entity.

    The kind of promotion is given by its terms (percentage discount or
    buy X get Y free); `type` is derived from them.

    Example:
        ```python
        promo = Promotion.create(
            name="Summer 20%",
            product_id=product.id,
            promotion_type=PromotionType.PERCENTAGE_DISCOUNT,
            discount_percentage=20,
        )
        ```
    """

    name: str = ""
    description: str | None = None
    product_id: str = ""
    visibility: PromotionVisibility = PromotionVisibility.VISIBLE
    terms: PromotionTerms = field(default_factory=lambda: PercentageDiscount(Decimal("0")))

    @property
    def type(self) -> PromotionType:
        return self.terms.type

    def is_visible(self) -> bool:
        return self.visibility == PromotionVisibility.VISIBLE

    def is_for_product(self, product_id: str) -> bool:
        return canonical_id(self.product_id) == canonical_id(product_id)

    @classmethod
    def create(
        cls,
        name: str,
        product_id: str,
        promotion_type: PromotionType,
        discount_percentage: Decimal | float | None = None,
        buy_quantity: int | None = None,
        get_quantity: int | None = None,
        description: str | None = None,
        visibility: PromotionVisibility = PromotionVisibility.VISIBLE,
        promotion_id: str | None = None,
    ) -> "Promotion":
        """
        Create a promotion, enforcing that only the fields of its kind are set.

        Raises:
            ValidationException: If fields of the other kind are populated,
                required fields are missing or values are out of range
        """
        if not name or not name.strip():
            raise ValidationException("Promotion name is required", field="name")
        if not product_id:
            raise ValidationException("Promotion must belong to a product", field="product_id")

        terms = build_terms(promotion_type, discount_percentage, buy_quantity, get_quantity)
        if not terms.is_valid():
            if isinstance(terms, PercentageDiscount):
                raise ValidationException(
                    "Discount percentage must be greater than 0 and at most 100",
                    field="discount_percentage",
                )
            raise ValidationException(
                "Buy and get quantities must be at least 1",
                field="buy_quantity",
            )

        return cls(
            id=promotion_id or generate_uuid_str(),
            name=name.strip(),
            description=description,
            product_id=str(product_id),
            visibility=visibility,
            terms=terms,
        )


def build_terms(
    promotion_type: PromotionType | str,
    discount_percentage: Decimal | float | None,
    buy_quantity: int | None,
    get_quantity: int | None,
) -> PromotionTerms:
    """
    Build the terms for a promotion kind from flat fields.

    Shared by the write path and the persistence mapper so that rows mixing
    both kinds are rejected the same way everywhere.

    Raises:
        ValidationException: On unknown kind, missing fields or mixed kinds
    """
    try:
        kind = PromotionType.from_string(promotion_type)
    except ValueError:
        raise ValidationException(f"Unknown promotion type: {promotion_type}", field="type") from None

    if kind == PromotionType.PERCENTAGE_DISCOUNT:
        if buy_quantity is not None or get_quantity is not None:
            raise ValidationException(
                "Percentage promotions cannot define buy/get quantities",
                field="buy_quantity",
            )
        if discount_percentage is None:
            raise ValidationException("Discount percentage is required", field="discount_percentage")
        return PercentageDiscount(discount_percentage=discount_percentage)

    if discount_percentage is not None:
        raise ValidationException(
            "Buy X get Y promotions cannot define a discount percentage",
            field="discount_percentage",
        )
    if buy_quantity is None or get_quantity is None:
        raise ValidationException("Buy and get quantities are required", field="buy_quantity")
    return BuyXGetYFree(buy_quantity=buy_quantity, get_quantity=get_quantity)
