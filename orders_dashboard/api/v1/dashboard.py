"""Dashboard metrics endpoint."""

from fastapi import APIRouter

from orders_dashboard.core.deps import DashboardServiceDep, TodayDep
from orders_dashboard.schemas.metrics import DashboardMetrics

router = APIRouter()


@router.get("/metrics", response_model=DashboardMetrics)
async def dashboard_metrics(
    service: DashboardServiceDep,
    today: TodayDep,
) -> DashboardMetrics:
    """Get today's metrics: placed today, 7-day average, completed, red lights."""
    return await service.get_metrics(today)
