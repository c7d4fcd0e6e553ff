"""Order domain model and its enumerations."""

import enum
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class _OrdinalEnum(str, enum.Enum):
    """String enum whose members also carry their declaration position."""

    @property
    def ordinal(self) -> int:
        return list(type(self)).index(self)

    @classmethod
    def from_ordinal(cls, value: int) -> "_OrdinalEnum":
        members = list(cls)
        if not 0 <= value < len(members):
            raise ValueError(f"{value} is not a valid {cls.__name__} ordinal")
        return members[value]


class OrderStatus(_OrdinalEnum):
    """Where an order is in the fulfillment process."""

    PLACED = "Placed"
    FULFILLMENT = "Fulfillment"
    COMPLETED = "Completed"
    CANCELED = "Canceled"


class FulfillmentType(_OrdinalEnum):
    """How an order reaches the customer."""

    PICKUP = "Pickup"
    DELIVERY = "Delivery"
    SHIPPING = "Shipping"


class Order(BaseModel):
    """A single customer order.

    Orders are value objects: they are produced by an order provider at
    request time and never mutated afterwards. A default-constructed order
    is a placeholder and carries ``order_number == 0``.
    """

    model_config = ConfigDict(frozen=True, from_attributes=True)

    order_number: int = 0
    status: OrderStatus = OrderStatus.PLACED
    store_id: str = ""
    store_name: str = ""
    number_of_items: int = Field(0, ge=0)
    fulfillment_type: FulfillmentType = FulfillmentType.PICKUP
    fulfillment_partner: str = ""
    order_date: datetime = datetime.min
