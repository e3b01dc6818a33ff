"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from catalog.api.v1.dependencies (no manual repo/service construction).
"""

from fastapi import APIRouter

from catalog.api.v1.endpoints import (
    categories,
    favorites,
    health,
    items,
    orders,
    promotions,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(items.router, prefix="/items", tags=["items"])
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(promotions.router, prefix="/promotions", tags=["promotions"])
api_router.include_router(orders.router, prefix="/orders", tags=["orders"])
api_router.include_router(favorites.router, prefix="/favorites", tags=["favorites"])
