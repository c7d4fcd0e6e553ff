"""Pytest configuration and fixtures for the Orders Dashboard test suite.

Provides:
- A fixed reference date for "today"
- The four hand-written grid orders (1001-1004)
- A static order provider and a seeded sample-data provider
- Async HTTP clients with the provider and "today" overridden
- Disabled rate limiting
"""

from collections.abc import AsyncGenerator, Callable, Generator
from datetime import date, datetime, time, timedelta
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from orders_dashboard.core.deps import get_order_provider, get_today
from orders_dashboard.core.rate_limit import limiter
from orders_dashboard.main import app
from orders_dashboard.models.order import FulfillmentType, Order, OrderStatus
from orders_dashboard.services.order_provider import SampleOrderProvider

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
TODAY = date(2024, 6, 15)
SEARCH_TEST_ENDPOINT = "https://orders-test.search.windows.net"
SEARCH_TEST_KEY = "test-admin-key"
SEARCH_TEST_CONNECTION_STRING = f"Endpoint={SEARCH_TEST_ENDPOINT};ApiKey={SEARCH_TEST_KEY}"

# ---------------------------------------------------------------------------
# Disable rate limiting globally for tests
# ---------------------------------------------------------------------------
limiter.enabled = False


def days_ago(days: int) -> datetime:
    """Midnight ``days`` before TODAY."""
    return datetime.combine(TODAY, time.min) - timedelta(days=days)


class StaticOrderProvider:
    """Order provider that serves a fixed list."""

    source = "static"

    def __init__(self, orders: list[Order]) -> None:
        self.orders = orders
        self.calls = 0

    async def get_orders(self) -> list[Order]:
        self.calls += 1
        return list(self.orders)


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def grid_orders() -> list[Order]:
    """The four orders used throughout the grid tests, none dated today."""
    placed_on = days_ago(3)
    return [
        Order(
            order_number=1001,
            status=OrderStatus.PLACED,
            store_id="ST001",
            store_name="Downtown Store",
            number_of_items=5,
            fulfillment_type=FulfillmentType.PICKUP,
            fulfillment_partner="Mi9",
            order_date=placed_on,
        ),
        Order(
            order_number=1002,
            status=OrderStatus.COMPLETED,
            store_id="ST002",
            store_name="Mall Location",
            number_of_items=3,
            fulfillment_type=FulfillmentType.SHIPPING,
            fulfillment_partner="FedEx",
            order_date=placed_on,
        ),
        Order(
            order_number=1003,
            status=OrderStatus.CANCELED,
            store_id="ST003",
            store_name="Airport Store",
            number_of_items=8,
            fulfillment_type=FulfillmentType.DELIVERY,
            fulfillment_partner="Shipt",
            order_date=placed_on,
        ),
        Order(
            order_number=1004,
            status=OrderStatus.FULFILLMENT,
            store_id="ST001",
            store_name="Downtown Store",
            number_of_items=2,
            fulfillment_type=FulfillmentType.PICKUP,
            fulfillment_partner="Mi9",
            order_date=placed_on,
        ),
    ]


@pytest.fixture
def order_factory() -> Callable[..., Order]:
    """Factory for one-off orders with sensible defaults."""

    def _create(
        *,
        order_number: int = 2001,
        status: OrderStatus = OrderStatus.PLACED,
        store_id: str = "ST001",
        store_name: str = "Downtown Store",
        number_of_items: int = 1,
        fulfillment_type: FulfillmentType = FulfillmentType.PICKUP,
        fulfillment_partner: str = "Mi9",
        order_date: datetime | None = None,
    ) -> Order:
        return Order(
            order_number=order_number,
            status=status,
            store_id=store_id,
            store_name=store_name,
            number_of_items=number_of_items,
            fulfillment_type=fulfillment_type,
            fulfillment_partner=fulfillment_partner,
            order_date=order_date or days_ago(0),
        )

    return _create


# ---------------------------------------------------------------------------
# Providers
# ---------------------------------------------------------------------------


@pytest.fixture
def static_provider(grid_orders: list[Order]) -> StaticOrderProvider:
    return StaticOrderProvider(grid_orders)


@pytest.fixture
def sample_provider() -> SampleOrderProvider:
    """Seeded sample-data provider pinned to TODAY."""
    return SampleOrderProvider(clock=lambda: TODAY)


# ---------------------------------------------------------------------------
# Clients
# ---------------------------------------------------------------------------


async def _client_for(provider: Any) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[get_order_provider] = lambda: provider
    app.dependency_overrides[get_today] = lambda: TODAY

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(static_provider: StaticOrderProvider) -> AsyncGenerator[AsyncClient, None]:
    """Async test client serving the four grid orders."""
    async for ac in _client_for(static_provider):
        yield ac


@pytest_asyncio.fixture
async def sample_client(
    sample_provider: SampleOrderProvider,
) -> AsyncGenerator[AsyncClient, None]:
    """Async test client serving seeded sample data."""
    async for ac in _client_for(sample_provider):
        yield ac


@pytest_asyncio.fixture
async def empty_client() -> AsyncGenerator[AsyncClient, None]:
    """Async test client whose provider has no orders."""
    async for ac in _client_for(StaticOrderProvider([])):
        yield ac


@pytest_asyncio.fixture
async def plain_client() -> AsyncGenerator[AsyncClient, None]:
    """Minimal async test client with NO dependency overrides."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# ---------------------------------------------------------------------------
# Search index HTTP mocks
# ---------------------------------------------------------------------------


@pytest.fixture
def index_document() -> Callable[..., dict[str, Any]]:
    """Factory for raw camelCase documents as the search index returns them."""

    def _doc(order_number: int = 5001, **overrides: Any) -> dict[str, Any]:
        doc: dict[str, Any] = {
            "@search.score": 1.0,
            "orderNumber": order_number,
            "status": "Placed",
            "storeId": "ST002",
            "storeName": "Mall Location",
            "numberOfItems": 4,
            "fulfillmentType": "Delivery",
            "fulfillmentPartner": "Shipt",
            "orderDate": "2024-06-14T09:30:00Z",
        }
        doc.update(overrides)
        return doc

    return _doc


def search_response(documents: list[dict[str, Any]]) -> MagicMock:
    """A successful search response carrying ``documents``."""
    response = MagicMock()
    response.json.return_value = {"value": documents}
    response.raise_for_status = MagicMock()
    return response


@pytest.fixture
def mock_search_http() -> Generator[AsyncMock, None, None]:
    """Patch httpx.AsyncClient inside the search client; yields the inner client."""
    with patch("orders_dashboard.integrations.search.client.httpx.AsyncClient") as mock_class:
        mock_client = AsyncMock()
        mock_class.return_value.__aenter__.return_value = mock_client
        yield mock_client
