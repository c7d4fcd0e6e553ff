"""Order providers: search index backed, or deterministic sample data.

Both implement ``OrderProvider``. ``create_order_provider`` picks one when
the application starts:

- no connection string: sample data
- connection string that fails to build a client: sample data, permanently
- working client: search index, falling back to sample data for any call
  whose query fails
"""

import logging
import random
from collections.abc import Callable
from datetime import date, datetime, time, timedelta
from typing import Protocol

from orders_dashboard.core.config import Settings
from orders_dashboard.integrations.search.client import SearchIndexClient
from orders_dashboard.integrations.search.errors import SearchClientInitializationError
from orders_dashboard.models.order import FulfillmentType, Order, OrderStatus

logger = logging.getLogger(__name__)

SAMPLE_SEED = 42
SAMPLE_ORDER_COUNT = 10
SAMPLE_STORES: tuple[tuple[str, str], ...] = (
    ("ST001", "Downtown Store"),
    ("ST002", "Mall Location"),
    ("ST003", "Suburban Branch"),
    ("ST004", "Airport Store"),
    ("ST005", "City Center"),
)
MAX_SAMPLE_ITEMS = 14
MAX_SAMPLE_AGE_DAYS = 13


class OrderProvider(Protocol):
    """Anything that can supply the dashboard's order collection."""

    source: str

    async def get_orders(self) -> list[Order]: ...


def _sample_partner(fulfillment_type: FulfillmentType, rng: random.Random) -> str:
    if fulfillment_type == FulfillmentType.DELIVERY:
        return "Shipt" if rng.random() > 0.5 else "FedEx"
    if fulfillment_type == FulfillmentType.PICKUP:
        return "Mi9"
    return "FedEx"


def generate_sample_orders(
    today: date,
    *,
    seed: int = SAMPLE_SEED,
    count: int = SAMPLE_ORDER_COUNT,
) -> list[Order]:
    """Generate ``count`` orders from a freshly seeded RNG.

    Draw order per order: store, fulfillment type, partner (Delivery only),
    status, item count, age in days. The same seed and ``today`` always give
    the same orders.
    """
    rng = random.Random(seed)
    midnight = datetime.combine(today, time.min)
    statuses = list(OrderStatus)
    fulfillment_types = list(FulfillmentType)

    orders: list[Order] = []
    for i in range(1, count + 1):
        store_id, store_name = rng.choice(SAMPLE_STORES)
        fulfillment_type = rng.choice(fulfillment_types)
        partner = _sample_partner(fulfillment_type, rng)
        status = rng.choice(statuses)
        number_of_items = rng.randint(1, MAX_SAMPLE_ITEMS)
        days_ago = rng.randint(0, MAX_SAMPLE_AGE_DAYS)

        orders.append(
            Order(
                order_number=1000 + i,
                status=status,
                store_id=store_id,
                store_name=store_name,
                number_of_items=number_of_items,
                fulfillment_type=fulfillment_type,
                fulfillment_partner=partner,
                order_date=midnight - timedelta(days=days_ago),
            )
        )
    return orders


class SampleOrderProvider:
    """Serves generated sample orders dated relative to ``clock()``."""

    source = "sample_data"

    def __init__(self, clock: Callable[[], date] = date.today) -> None:
        self.clock = clock

    async def get_orders(self) -> list[Order]:
        logger.debug("Generating sample order data")
        orders = generate_sample_orders(self.clock())
        logger.debug("Generated %d sample orders", len(orders))
        return orders


class SearchIndexOrderProvider:
    """Serves orders from the search index, with per-call sample-data fallback."""

    source = "search_index"

    def __init__(self, client: SearchIndexClient, fallback: SampleOrderProvider) -> None:
        self.client = client
        self.fallback = fallback

    async def get_orders(self) -> list[Order]:
        try:
            logger.info("Retrieving orders from search index '%s'", self.client.index_name)
            return await self.client.search_orders()
        except Exception:
            logger.exception("Error retrieving orders from search index. Falling back to sample data.")

        return await self.fallback.get_orders()


def create_order_provider(
    settings: Settings,
    clock: Callable[[], date] = date.today,
) -> OrderProvider:
    """Choose the order provider for the given configuration."""
    sample = SampleOrderProvider(clock)

    if not settings.uses_search_index:
        logger.info("Search connection string not configured. Using sample data.")
        return sample

    try:
        client = SearchIndexClient.from_connection_string(
            settings.search_connection_string,
            settings.search_orders_index_name,
            api_key=settings.search_api_key,
            api_version=settings.search_api_version,
            page_size=settings.search_page_size,
            timeout=settings.search_timeout_seconds,
        )
    except SearchClientInitializationError as exc:
        logger.warning(
            "Failed to initialize search client: %s. Falling back to sample data.", exc
        )
        return sample

    logger.info("Search client initialized for index '%s'", client.index_name)
    return SearchIndexOrderProvider(client, sample)
