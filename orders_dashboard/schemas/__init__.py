"""Pydantic schemas for request/response validation."""

from orders_dashboard.schemas.common import ErrorResponse, HealthResponse
from orders_dashboard.schemas.grid import (
    GridQuery,
    OrderAction,
    OrderGridResponse,
    OrderRow,
    SortColumn,
    SortDirection,
)
from orders_dashboard.schemas.metrics import DashboardMetrics

__all__ = [
    "HealthResponse",
    "ErrorResponse",
    "DashboardMetrics",
    "GridQuery",
    "OrderAction",
    "OrderGridResponse",
    "OrderRow",
    "SortColumn",
    "SortDirection",
]
