"""Dependency injection for FastAPI routes."""

from datetime import date
from typing import Annotated

from fastapi import Depends, HTTPException, Query, Request

from orders_dashboard.core.config import settings
from orders_dashboard.models.order import FulfillmentType, OrderStatus
from orders_dashboard.schemas.grid import GridQuery, SortColumn, SortDirection
from orders_dashboard.services.metrics_service import DashboardService
from orders_dashboard.services.order_provider import OrderProvider, create_order_provider


def get_order_provider(request: Request) -> OrderProvider:
    """Return the order provider created for this application in the lifespan.

    Falls back to building one on first use when the lifespan did not run
    (e.g. ASGI transports in tests that skip startup).
    """
    provider: OrderProvider | None = getattr(request.app.state, "order_provider", None)
    if provider is None:
        provider = create_order_provider(settings)
        request.app.state.order_provider = provider
    return provider


def get_today() -> date:
    """The reference date for "today" in metrics and sample data."""
    return date.today()


def get_dashboard_service(
    provider: OrderProvider = Depends(get_order_provider),
) -> DashboardService:
    return DashboardService(provider)


def _optional_filter[E: (OrderStatus, FulfillmentType)](
    enum_cls: type[E], value: str, param: str
) -> E | None:
    # Empty string is the "All ..." option submitted by the dashboard form
    if not value:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise HTTPException(
            status_code=422,
            detail=f"Invalid {param} '{value}'. Expected one of: {allowed}",
        ) from None


def get_grid_query(
    search: str = Query("", max_length=200, description="Search order number, store or partner"),
    status_filter: str = Query(
        "",
        alias="status",
        description="Placed, Fulfillment, Completed or Canceled. Empty means all statuses.",
    ),
    fulfillment_filter: str = Query(
        "",
        alias="fulfillment_type",
        description="Pickup, Delivery or Shipping. Empty means all fulfillment types.",
    ),
    sort_by: SortColumn = Query(SortColumn.ORDER_NUMBER),
    sort_direction: SortDirection = Query(SortDirection.ASC),
) -> GridQuery:
    """Build the grid state from query parameters."""
    return GridQuery(
        search_text=search,
        status_filter=_optional_filter(OrderStatus, status_filter, "status"),
        fulfillment_filter=_optional_filter(FulfillmentType, fulfillment_filter, "fulfillment_type"),
        sort_column=sort_by,
        sort_direction=sort_direction,
    )


OrderProviderDep = Annotated[OrderProvider, Depends(get_order_provider)]
TodayDep = Annotated[date, Depends(get_today)]
DashboardServiceDep = Annotated[DashboardService, Depends(get_dashboard_service)]
GridQueryDep = Annotated[GridQuery, Depends(get_grid_query)]
