"""
Visibility and Type Value Objects for E-commerce Domain

Catalog visibility states for products and promotions, and the
promotion kinds supported by the pricing engine.
"""

from app.core.domain import StatusEnum


class ProductVisibility(StatusEnum):
    """
    Catalog visibility of a product.

    Only visible products can be priced or ordered.
    """

    VISIBLE = "visible"
    HIDDEN = "hidden"


class PromotionVisibility(StatusEnum):
    """
    Visibility of a promotion.

    Only VISIBLE promotions are eligible for automatic application
    and for explicit selection on a cart line.
    """

    VISIBLE = "VISIBLE"
    HIDDEN = "HIDDEN"


class PromotionType(StatusEnum):
    """Promotion kinds supported by the pricing engine."""

    PERCENTAGE_DISCOUNT = "PERCENTAGE_DISCOUNT"
    BUY_X_GET_Y_FREE = "BUY_X_GET_Y_FREE"
