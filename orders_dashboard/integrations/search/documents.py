"""Search index document shapes and their mapping to domain orders."""

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from orders_dashboard.models.order import FulfillmentType, Order, OrderStatus


def _enum_from_index(enum_cls: type) -> Any:
    """Accept either the member value ("Placed") or its ordinal (0)."""

    def _coerce(value: Any) -> Any:
        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            return enum_cls.from_ordinal(value)
        if isinstance(value, str) and value.isdigit():
            return enum_cls.from_ordinal(int(value))
        return value

    return _coerce


IndexedStatus = Annotated[OrderStatus, BeforeValidator(_enum_from_index(OrderStatus))]
IndexedFulfillmentType = Annotated[
    FulfillmentType, BeforeValidator(_enum_from_index(FulfillmentType))
]


class OrderDocument(BaseModel):
    """An order as stored in the search index (camelCase fields)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    order_number: int
    status: IndexedStatus
    store_id: str = ""
    store_name: str = ""
    number_of_items: int = Field(0, ge=0)
    fulfillment_type: IndexedFulfillmentType
    fulfillment_partner: str | None = None
    order_date: datetime

    def to_order(self) -> Order:
        return Order(
            order_number=self.order_number,
            status=self.status,
            store_id=self.store_id,
            store_name=self.store_name,
            number_of_items=self.number_of_items,
            fulfillment_type=self.fulfillment_type,
            fulfillment_partner=self.fulfillment_partner or "",
            order_date=self.order_date,
        )
