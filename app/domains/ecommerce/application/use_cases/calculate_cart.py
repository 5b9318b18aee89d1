"""
Calculate Cart Use Case

Prices every line of a cart and sums the cart total.
"""

import asyncio
from collections.abc import Sequence
from decimal import Decimal

from app.core.domain import quantize_money
from app.core.shared.logger import get_service_logger
from app.domains.ecommerce.application.dto import CalculationResult, CartLine, PricedLine
from app.domains.ecommerce.application.services.cart_line_pricer import CartLinePricer

logger = get_service_logger("cart_pricing")


class CalculateCartUseCase:
    """
    Use Case: Calculate Cart

    Returns one priced line per input line, in input order, whatever the
    outcome of each line. Failed lines carry their error and never count
    towards the total.

    The calculation performs no writes and takes no locks: prices and
    promotion visibility may change between this quotation and the order
    that follows it.
    """

    def __init__(
        self,
        line_pricer: CartLinePricer,
        concurrent: bool = False,
        max_concurrency: int = 10,
    ):
        """
        Initialize use case with dependencies.

        Args:
            line_pricer: Prices individual lines
            concurrent: Price lines concurrently. Only safe when the stores
                behind the pricer tolerate concurrent reads (a single
                SQLAlchemy AsyncSession does not)
            max_concurrency: Upper bound of lines priced at once
        """
        self.line_pricer = line_pricer
        self.concurrent = concurrent
        self.max_concurrency = max_concurrency

    async def execute(self, lines: Sequence[CartLine]) -> CalculationResult:
        """
        Calculate the cart.

        Args:
            lines: Cart lines to price

        Returns:
            CalculationResult with priced lines and total amount
        """
        if not lines:
            return CalculationResult(lines=[], total_amount=Decimal("0"))

        if self.concurrent:
            priced = await self._price_concurrently(lines)
        else:
            priced = [await self.line_pricer.price(line) for line in lines]

        # Line totals are already rounded; sum them exactly and round once
        total = sum((line.line_total for line in priced if not line.is_error), Decimal("0"))
        result = CalculationResult(lines=priced, total_amount=quantize_money(total))

        failed = sum(1 for line in priced if line.is_error)
        logger.info(
            f"Cart calculated: {len(priced)} lines, {failed} failed, total {result.total_amount}",
            lines=len(priced),
            failed_lines=failed,
            total_amount=str(result.total_amount),
            concurrent=self.concurrent,
        )
        return result

    async def _price_concurrently(self, lines: Sequence[CartLine]) -> list[PricedLine]:
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def price_one(line: CartLine) -> PricedLine:
            async with semaphore:
                return await self.line_pricer.price(line)

        # gather preserves input order
        return list(await asyncio.gather(*(price_one(line) for line in lines)))


__all__ = ["CalculateCartUseCase"]
