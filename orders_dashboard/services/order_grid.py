"""Filtering, searching and sorting for the orders grid."""

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from orders_dashboard.models.order import Order, OrderStatus
from orders_dashboard.schemas.grid import (
    GridQuery,
    OrderAction,
    OrderGridResponse,
    OrderRow,
    SortColumn,
    SortDirection,
)

NO_RESULTS_MESSAGE = "No orders found matching your criteria"

_SORT_KEYS: dict[SortColumn, Callable[[Order], Any]] = {
    SortColumn.ORDER_NUMBER: lambda o: o.order_number,
    SortColumn.STATUS: lambda o: o.status.ordinal,
    SortColumn.STORE_ID: lambda o: o.store_id,
    SortColumn.STORE_NAME: lambda o: o.store_name,
    SortColumn.NUMBER_OF_ITEMS: lambda o: o.number_of_items,
    SortColumn.FULFILLMENT_TYPE: lambda o: o.fulfillment_type.ordinal,
}

_ROW_ACTIONS: dict[OrderStatus, tuple[OrderAction, ...]] = {
    OrderStatus.PLACED: (OrderAction.START_FULFILLMENT, OrderAction.CANCEL),
    OrderStatus.FULFILLMENT: (OrderAction.COMPLETE, OrderAction.CANCEL),
    OrderStatus.CANCELED: (OrderAction.REOPEN,),
    OrderStatus.COMPLETED: (),
}


def matches_search(order: Order, search_text: str) -> bool:
    """True if any searchable field contains ``search_text``, ignoring case."""
    if not search_text:
        return True
    needle = search_text.casefold()
    fields = (
        str(order.order_number),
        order.store_id,
        order.store_name,
        order.fulfillment_partner,
    )
    return any(needle in field.casefold() for field in fields)


def filter_orders(orders: Iterable[Order], query: GridQuery) -> list[Order]:
    """Keep orders passing the search, status and fulfillment filters."""
    return [
        order
        for order in orders
        if matches_search(order, query.search_text)
        and (query.status_filter is None or order.status == query.status_filter)
        and (
            query.fulfillment_filter is None
            or order.fulfillment_type == query.fulfillment_filter
        )
    ]


def sort_orders(
    orders: Iterable[Order],
    column: SortColumn,
    direction: SortDirection = SortDirection.ASC,
) -> list[Order]:
    """Stable sort by ``column``; enum columns sort by declaration order."""
    return sorted(
        orders,
        key=_SORT_KEYS[column],
        reverse=direction == SortDirection.DESC,
    )


def apply_grid_query(orders: Iterable[Order], query: GridQuery) -> list[Order]:
    """Filter then sort, producing the visible rows in display order."""
    return sort_orders(filter_orders(orders, query), query.sort_column, query.sort_direction)


def row_actions(order: Order) -> list[OrderAction]:
    """Actions the grid offers for an order in its current status."""
    return list(_ROW_ACTIONS[order.status])


def build_grid(orders: Sequence[Order], query: GridQuery) -> OrderGridResponse:
    visible = apply_grid_query(orders, query)
    rows = [OrderRow(**order.model_dump(), actions=row_actions(order)) for order in visible]
    return OrderGridResponse(items=rows, total=len(orders), count=len(rows))
