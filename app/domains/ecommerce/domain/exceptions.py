"""
Pricing Exceptions for E-commerce Domain

Every failure a single cart line can hit while being priced. The cart
line pricer recovers all of them into the line's error field, so none
of these escape a cart calculation.
"""

from typing import Any

from app.core.domain import DomainException


class PricingError(DomainException):
    """Base class for line-level pricing failures."""

    code_name: str = "PRICING_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, self.code_name, details)


class InvalidQuantity(PricingError):
    code_name = "INVALID_QUANTITY"

    def __init__(self, quantity: Any):
        super().__init__(
            "Invalid quantity for item. Quantity must be greater than 0.",
            {"quantity": quantity},
        )


class PromotionNotFound(PricingError):
    code_name = "PROMOTION_NOT_FOUND"

    def __init__(self, promotion_id: str):
        super().__init__(f"Promotion {promotion_id} not found", {"promotion_id": promotion_id})


class PromotionNotAvailable(PricingError):
    code_name = "PROMOTION_NOT_AVAILABLE"

    def __init__(self, promotion_id: str, promotion_name: str):
        super().__init__(
            f"Promotion {promotion_name} is no longer available",
            {"promotion_id": promotion_id},
        )


class PromotionProductMismatch(PricingError):
    code_name = "PROMOTION_PRODUCT_MISMATCH"

    def __init__(self, promotion_id: str, promotion_name: str, product_id: str):
        super().__init__(
            f"Promotion {promotion_name} is not valid for the specified product",
            {"promotion_id": promotion_id, "product_id": product_id},
        )


class ProductIdRequired(PricingError):
    code_name = "PRODUCT_ID_REQUIRED"

    def __init__(self):
        super().__init__("Product ID is required for each item (either directly or via a promotion)")


class ProductNotFound(PricingError):
    code_name = "PRODUCT_NOT_FOUND"

    def __init__(self, product_id: str):
        super().__init__(f"Product {product_id} not found", {"product_id": product_id})


class ProductUnavailable(PricingError):
    code_name = "PRODUCT_UNAVAILABLE"

    def __init__(self, product_id: str, product_name: str):
        super().__init__(f"Product {product_name} is not available", {"product_id": product_id})


class SizeRequired(PricingError):
    code_name = "SIZE_REQUIRED"

    def __init__(self, product_name: str, available: list[str]):
        super().__init__(
            f"Please specify a size for product '{product_name}'",
            {"available_sizes": available},
        )


class SizeNotFound(PricingError):
    code_name = "SIZE_NOT_FOUND"

    def __init__(self, size: str, product_name: str, available: list[str]):
        super().__init__(
            f"Size '{size}' not found for product '{product_name}'",
            {"size": size, "available_sizes": available},
        )


class NoPriceAvailable(PricingError):
    code_name = "NO_PRICE_AVAILABLE"

    def __init__(self, product_id: str, product_name: str):
        super().__init__(
            f"Product '{product_name}' has no priced sizes",
            {"product_id": product_id},
        )


class LookupFailure(PricingError):
    """Wraps an I/O error raised by the product or promotion store."""

    code_name = "LOOKUP_FAILURE"

    def __init__(self, store: str, original_error: Exception):
        self.original_error = original_error
        super().__init__(
            f"Failed to read from {store} store",
            {"store": store, "original_error": str(original_error)},
        )
