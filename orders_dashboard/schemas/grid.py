"""Pydantic schemas for the orders grid (filters, sorting, row actions)."""

import enum

from pydantic import BaseModel, ConfigDict, Field

from orders_dashboard.models.order import FulfillmentType, Order, OrderStatus
from orders_dashboard.schemas.common import BaseSchema


class SortColumn(str, enum.Enum):
    """Grid columns that can be sorted on."""

    ORDER_NUMBER = "order_number"
    STATUS = "status"
    STORE_ID = "store_id"
    STORE_NAME = "store_name"
    NUMBER_OF_ITEMS = "number_of_items"
    FULFILLMENT_TYPE = "fulfillment_type"

    @property
    def label(self) -> str:
        return _COLUMN_LABELS[self]


_COLUMN_LABELS = {
    SortColumn.ORDER_NUMBER: "Order Number",
    SortColumn.STATUS: "Status",
    SortColumn.STORE_ID: "Store ID",
    SortColumn.STORE_NAME: "Store Name",
    SortColumn.NUMBER_OF_ITEMS: "Items",
    SortColumn.FULFILLMENT_TYPE: "Fulfillment Type",
}


class SortDirection(str, enum.Enum):
    """Sort order."""

    ASC = "asc"
    DESC = "desc"


class OrderAction(str, enum.Enum):
    """Row-level actions offered in the grid."""

    START_FULFILLMENT = "Start Fulfillment"
    COMPLETE = "Complete"
    CANCEL = "Cancel"
    REOPEN = "Reopen"


class GridQuery(BaseModel):
    """User-entered grid state: search text, filters and sort."""

    model_config = ConfigDict(frozen=True)

    search_text: str = Field("", description="Case-insensitive substring to search for")
    status_filter: OrderStatus | None = Field(None, description="None means all statuses")
    fulfillment_filter: FulfillmentType | None = Field(
        None, description="None means all fulfillment types"
    )
    sort_column: SortColumn = SortColumn.ORDER_NUMBER
    sort_direction: SortDirection = SortDirection.ASC

    def toggle_sort(self, column: SortColumn) -> "GridQuery":
        """Return the query a click on ``column``'s header produces.

        Clicking the active column flips the direction; any other column
        starts ascending.
        """
        if column == self.sort_column:
            direction = (
                SortDirection.DESC if self.sort_direction == SortDirection.ASC else SortDirection.ASC
            )
        else:
            direction = SortDirection.ASC
        return self.model_copy(update={"sort_column": column, "sort_direction": direction})


class OrderRow(Order):
    """An order as displayed in the grid, with the actions its status allows."""

    actions: list[OrderAction] = []


class OrderGridResponse(BaseSchema):
    """Visible grid rows plus the size of the unfiltered collection."""

    items: list[OrderRow]
    total: int
    count: int
