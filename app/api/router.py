from fastapi import APIRouter

from app.domains.ecommerce.api.routes import router as ecommerce_router

api_router = APIRouter()

# API routes (all have /api/v1 prefix from the app factory)
api_router.include_router(ecommerce_router)
