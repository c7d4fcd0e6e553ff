"""Health check endpoints."""

from fastapi import APIRouter

from orders_dashboard.core.config import settings
from orders_dashboard.core.deps import OrderProviderDep
from orders_dashboard.schemas.common import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(provider: OrderProviderDep) -> HealthResponse:
    """
    Health check endpoint.

    Reports which source the order data is served from. A search index that
    is failing still reports healthy because requests fall back to sample
    data.
    """
    return HealthResponse(
        status="healthy",
        version=settings.version,
        environment=settings.environment,
        checks={"orders_source": provider.source},
    )


@router.get("/health/live")
async def liveness_check() -> dict[str, str]:
    """
    Liveness probe for Kubernetes/container orchestration.

    Simple check that the service is running.
    """
    return {"status": "alive"}


@router.get("/health/ready")
async def readiness_check(provider: OrderProviderDep) -> dict[str, str]:
    """
    Readiness probe for Kubernetes/container orchestration.

    Ready once the lifespan has created the order provider.
    """
    return {"status": "ready", "orders_source": provider.source}
