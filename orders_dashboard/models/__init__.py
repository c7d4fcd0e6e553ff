"""Domain models."""

from orders_dashboard.models.order import FulfillmentType, Order, OrderStatus

__all__ = [
    "Order",
    "OrderStatus",
    "FulfillmentType",
]
