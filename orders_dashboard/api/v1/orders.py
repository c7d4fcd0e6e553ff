"""Orders grid endpoints."""

import logging

from fastapi import APIRouter, HTTPException, Path, status

from orders_dashboard.core.deps import GridQueryDep, OrderProviderDep
from orders_dashboard.schemas.common import ErrorResponse
from orders_dashboard.schemas.grid import OrderGridResponse, OrderRow
from orders_dashboard.services.order_grid import build_grid, row_actions

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=OrderGridResponse)
async def list_orders(
    provider: OrderProviderDep,
    query: GridQueryDep,
) -> OrderGridResponse:
    """List orders after applying search, status/fulfillment filters and sorting."""
    orders = await provider.get_orders()
    grid = build_grid(orders, query)
    logger.debug("Orders grid: %d of %d orders visible", grid.count, grid.total)
    return grid


@router.get(
    "/{order_number}",
    response_model=OrderRow,
    responses={404: {"model": ErrorResponse}},
)
async def get_order(
    provider: OrderProviderDep,
    order_number: int = Path(..., ge=1),
) -> OrderRow:
    """Get a single order with its available actions."""
    orders = await provider.get_orders()
    for order in orders:
        if order.order_number == order_number:
            return OrderRow(**order.model_dump(), actions=row_actions(order))

    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Order {order_number} not found",
    )
