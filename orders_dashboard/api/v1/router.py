"""API v1 router combining all route modules."""

from fastapi import APIRouter

from orders_dashboard.api.v1 import dashboard, health, orders

api_router = APIRouter()

# Include health check routes (no prefix)
api_router.include_router(health.router)

# Orders grid
api_router.include_router(
    orders.router,
    prefix="/orders",
    tags=["orders"],
)

# Dashboard metrics
api_router.include_router(
    dashboard.router,
    prefix="/dashboard",
    tags=["dashboard"],
)
