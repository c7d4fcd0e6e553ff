"""Dashboard metrics aggregation over an order collection."""

import logging
from collections.abc import Iterable
from datetime import date, timedelta

from orders_dashboard.models.order import Order, OrderStatus
from orders_dashboard.schemas.metrics import DashboardMetrics
from orders_dashboard.services.order_provider import OrderProvider

logger = logging.getLogger(__name__)

AVERAGE_WINDOW_DAYS = 7


def compute_metrics(orders: Iterable[Order], today: date) -> DashboardMetrics:
    """Aggregate dashboard metrics for ``orders`` as of ``today``.

    The 7-day average counts Placed orders dated on or after
    ``today - 7 days``. There is no upper bound, so future-dated Placed
    orders are included. The average is rounded with ``round`` (half to even).
    """
    window_start = today - timedelta(days=AVERAGE_WINDOW_DAYS)

    placed_today = 0
    placed_in_window = 0
    completed = 0
    canceled = 0

    for order in orders:
        if order.status == OrderStatus.PLACED:
            order_day = order.order_date.date()
            if order_day == today:
                placed_today += 1
            if order_day >= window_start:
                placed_in_window += 1
        elif order.status == OrderStatus.COMPLETED:
            completed += 1
        elif order.status == OrderStatus.CANCELED:
            canceled += 1

    return DashboardMetrics(
        placed_orders_today=placed_today,
        average_7_day_placed_orders=round(placed_in_window / float(AVERAGE_WINDOW_DAYS), 1),
        completed_orders=completed,
        red_lights=canceled,
    )


class DashboardService:
    """Fetches orders from a provider and summarises them."""

    def __init__(self, provider: OrderProvider) -> None:
        self.provider = provider

    async def get_metrics(self, today: date) -> DashboardMetrics:
        """Compute metrics over the provider's current orders."""
        orders = await self.provider.get_orders()
        return self.summarize(orders, today)

    def summarize(self, orders: list[Order], today: date) -> DashboardMetrics:
        """Compute metrics over orders the caller already fetched."""
        logger.info("Calculating dashboard metrics")
        metrics = compute_metrics(orders, today)
        logger.info(
            "Dashboard metrics calculated",
            extra={
                "placed_today": metrics.placed_orders_today,
                "average_7_day": metrics.average_7_day_placed_orders,
                "completed": metrics.completed_orders,
                "red_lights": metrics.red_lights,
                "order_count": len(orders),
            },
        )
        return metrics
