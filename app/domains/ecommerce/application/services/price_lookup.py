"""
Product Price Lookup

Resolves the unit price of a product, disambiguated by size label.
"""

from app.domains.ecommerce.application.dto import PriceQuote
from app.domains.ecommerce.application.ports import IProductRepository
from app.domains.ecommerce.domain.exceptions import (
    LookupFailure,
    NoPriceAvailable,
    PricingError,
    ProductNotFound,
    ProductUnavailable,
    SizeNotFound,
    SizeRequired,
)


class ProductPriceLookup:
    """Look up a product and the size variant whose price applies."""

    def __init__(self, product_repository: IProductRepository):
        self.product_repository = product_repository

    async def lookup(self, product_id: str, size: str | None = None) -> PriceQuote:
        """
        Resolve the unit price for a product.

        Args:
            product_id: Product to price
            size: Optional size label; required when the product has more
                than one size

        Returns:
            PriceQuote with the product and selected variant

        Raises:
            ProductNotFound, ProductUnavailable, SizeNotFound, SizeRequired,
            NoPriceAvailable, LookupFailure
        """
        try:
            product = await self.product_repository.get_by_id(product_id)
        except PricingError:
            raise
        except Exception as e:
            raise LookupFailure("product", e) from e

        if product is None:
            raise ProductNotFound(product_id)
        if not product.is_visible():
            raise ProductUnavailable(str(product.id), product.name)
        if not product.has_sizes():
            raise NoPriceAvailable(str(product.id), product.name)

        labels = [variant.label for variant in product.sizes]

        if size is not None and size.strip():
            variant = product.find_size(size)
            if variant is None:
                raise SizeNotFound(size, product.name, labels)
            return PriceQuote(product=product, variant=variant)

        variant = product.default_size()
        if variant is None:
            raise SizeRequired(product.name, labels)
        return PriceQuote(product=product, variant=variant)
