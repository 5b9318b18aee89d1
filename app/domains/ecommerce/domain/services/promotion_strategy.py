"""
Promotion Strategy for E-commerce Domain

Pure functions computing the discount one promotion produces for one
(unit price, quantity) pair, and the choice between competing promotions.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from ..entities.promotion import Promotion
from ..value_objects.promotion_terms import BuyXGetYFree, PercentageDiscount
from ..value_objects.visibility import PromotionType

ZERO = Decimal("0")
HUNDRED = Decimal("100")


@dataclass(frozen=True)
class PromotionCalculation:
    """Result of applying (or not applying) a promotion to a line."""

    original_amount: Decimal
    discount_amount: Decimal
    final_amount: Decimal
    applied: bool
    promotion_id: str | None = None
    promotion_name: str | None = None
    promotion_type: PromotionType | None = None
    free_units: int = 0


def no_promotion(unit_price: Decimal, quantity: int) -> PromotionCalculation:
    """Base-price calculation used when no promotion is in play."""
    original = unit_price * quantity
    return PromotionCalculation(
        original_amount=original,
        discount_amount=ZERO,
        final_amount=original,
        applied=False,
    )


def apply_promotion(promotion: Promotion, unit_price: Decimal, quantity: int) -> PromotionCalculation:
    """
    Apply a promotion to a unit price and quantity.

    Callers must reject non-positive prices and quantities before calling.
    Promotions with out-of-range terms produce a zero-discount result with
    `applied=False` instead of raising.

    Args:
        promotion: Promotion to apply
        unit_price: Base price of one unit
        quantity: Number of units on the line

    Returns:
        PromotionCalculation with original, discount and final amounts
    """
    original = unit_price * quantity

    match promotion.terms:
        case PercentageDiscount() as terms if terms.is_valid():
            discount = original * terms.discount_percentage / HUNDRED
            free_units = 0
        case BuyXGetYFree() as terms if terms.is_valid():
            free_units = free_units_for(terms, quantity)
            discount = unit_price * free_units
        case _:
            return PromotionCalculation(
                original_amount=original,
                discount_amount=ZERO,
                final_amount=original,
                applied=False,
                promotion_id=promotion.id,
                promotion_name=promotion.name,
                promotion_type=promotion.type,
            )

    return PromotionCalculation(
        original_amount=original,
        discount_amount=discount,
        final_amount=original - discount,
        applied=True,
        promotion_id=promotion.id,
        promotion_name=promotion.name,
        promotion_type=promotion.type,
        free_units=free_units,
    )


def free_units_for(terms: BuyXGetYFree, quantity: int) -> int:
    """
    Free units granted by a buy X get Y offer.

    Every full cycle of `buy + get` units grants `get` free units. In a
    trailing partial cycle, units beyond the `buy` threshold are free, up
    to `get` of them.
    """
    full_cycles, remainder = divmod(quantity, terms.cycle_size)
    return full_cycles * terms.get_quantity + max(0, min(remainder - terms.buy_quantity, terms.get_quantity))


def select_best_promotion(
    promotions: Iterable[Promotion],
    unit_price: Decimal,
    quantity: int,
    require_discount: bool = False,
) -> tuple[Promotion, PromotionCalculation] | None:
    """
    Pick the promotion giving the largest discount for this line.

    Equal discounts resolve to the lowest promotion id. Promotions whose
    terms are not applicable are skipped.

    Args:
        promotions: Candidate promotions for the product
        unit_price: Base price of one unit
        quantity: Number of units on the line
        require_discount: When True, candidates with a zero discount are
            ignored and None is returned if nothing saves money

    Returns:
        (promotion, calculation) for the winner, or None
    """
    best: tuple[Promotion, PromotionCalculation] | None = None

    for promotion in sorted(promotions, key=lambda p: str(p.id)):
        calculation = apply_promotion(promotion, unit_price, quantity)
        if not calculation.applied:
            continue
        if require_discount and calculation.discount_amount <= ZERO:
            continue
        if best is None or calculation.discount_amount > best[1].discount_amount:
            best = (promotion, calculation)

    return best
