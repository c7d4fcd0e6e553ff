"""Dashboard metrics schema."""

from orders_dashboard.schemas.common import BaseSchema


class DashboardMetrics(BaseSchema):
    """Summary figures shown in the metric cards at the top of the dashboard."""

    placed_orders_today: int = 0
    average_7_day_placed_orders: float = 0.0  # one decimal place
    completed_orders: int = 0
    red_lights: int = 0  # canceled orders
