"""
E-commerce API Routes

FastAPI router for e-commerce endpoints.
"""

from fastapi import APIRouter, Depends

from app.core.shared.logger import get_api_logger
from app.domains.ecommerce.api.dependencies import (
    get_calculate_cart_use_case,
    get_calculate_product_offer_use_case,
)
from app.domains.ecommerce.api.schemas import (
    CalculateCartRequest,
    CalculateCartResponse,
    ProductOfferRequest,
    ProductOfferResponse,
)
from app.domains.ecommerce.application.use_cases import (
    CalculateCartUseCase,
    CalculateProductOfferUseCase,
)

logger = get_api_logger("ecommerce")

router = APIRouter(prefix="/ecommerce", tags=["E-commerce"])


@router.post("/cart/calculate", response_model=CalculateCartResponse)
async def calculate_cart(
    request: CalculateCartRequest,
    use_case: CalculateCartUseCase = Depends(get_calculate_cart_use_case),
):
    """
    Price every item of a cart.

    Always answers 200 for a well-formed body; items that cannot be priced
    carry `error` and `error_code` and are left out of `total_amount`.
    """
    result = await use_case.execute([item.to_cart_line() for item in request.items])
    if result.has_errors:
        logger.info(
            "Cart calculated with line errors",
            items=len(result.lines),
            errors=sum(1 for line in result.lines if line.is_error),
        )
    return CalculateCartResponse.from_result(result)


@router.post(
    "/products/{product_id}/offers/calculate",
    response_model=ProductOfferResponse,
    response_model_exclude_none=True,
)
async def calculate_product_offer(
    product_id: str,
    request: ProductOfferRequest,
    use_case: CalculateProductOfferUseCase = Depends(get_calculate_product_offer_use_case),
):
    """Best promotion for a product at a given price and quantity."""
    calculation = await use_case.execute(product_id, request.price, request.quantity)
    return ProductOfferResponse.from_calculation(calculation)
