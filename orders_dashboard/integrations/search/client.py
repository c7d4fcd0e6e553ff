"""Search index REST client using httpx.

Speaks the Azure Cognitive Search document query API: documents are read
from ``/indexes/{index}/docs/search`` a page at a time.
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from orders_dashboard.integrations.search.documents import OrderDocument
from orders_dashboard.integrations.search.errors import (
    SearchClientInitializationError,
    SearchQueryError,
)
from orders_dashboard.models.order import Order

logger = logging.getLogger(__name__)

DEFAULT_API_VERSION = "2023-11-01"
DEFAULT_PAGE_SIZE = 1000


def parse_connection_string(connection_string: str) -> tuple[str, str]:
    """Split a connection string into ``(endpoint, api_key)``.

    Accepts ``Endpoint=https://svc.search.windows.net;ApiKey=...`` (keys are
    case-insensitive) or a bare http(s) URL, in which case the key is empty.
    """
    value = connection_string.strip()
    if not value:
        raise SearchClientInitializationError("Search connection string is empty")

    endpoint = value
    api_key = ""
    if ";" in value or value.lower().startswith("endpoint="):
        parts: dict[str, str] = {}
        for segment in value.split(";"):
            if not segment.strip():
                continue
            key, sep, item = segment.partition("=")
            if not sep:
                raise SearchClientInitializationError(
                    f"Malformed connection string segment: {segment!r}"
                )
            parts[key.strip().lower()] = item.strip()
        endpoint = parts.get("endpoint", "")
        api_key = parts.get("apikey") or parts.get("api-key") or parts.get("key") or ""

    try:
        url = httpx.URL(endpoint)
    except httpx.InvalidURL as exc:
        raise SearchClientInitializationError(f"Invalid search endpoint: {endpoint!r}") from exc

    if url.scheme not in ("http", "https") or not url.host:
        raise SearchClientInitializationError(f"Invalid search endpoint: {endpoint!r}")

    return str(url).rstrip("/"), api_key


class SearchIndexClient:
    """Async client for querying orders out of a search index."""

    def __init__(
        self,
        endpoint: str,
        api_key: str,
        index_name: str,
        *,
        api_version: str = DEFAULT_API_VERSION,
        page_size: int = DEFAULT_PAGE_SIZE,
        timeout: float = 30.0,
    ) -> None:
        self.endpoint = endpoint.rstrip("/")
        self.index_name = index_name
        self.api_version = api_version
        self.page_size = page_size
        self.timeout = timeout
        self.headers = {
            "api-key": api_key,
            "Content-Type": "application/json",
        }

    @classmethod
    def from_connection_string(
        cls,
        connection_string: str,
        index_name: str,
        *,
        api_key: str = "",
        api_version: str = DEFAULT_API_VERSION,
        page_size: int = DEFAULT_PAGE_SIZE,
        timeout: float = 30.0,
    ) -> "SearchIndexClient":
        """Build a client, raising SearchClientInitializationError on bad config."""
        endpoint, parsed_key = parse_connection_string(connection_string)
        key = parsed_key or api_key
        if not key:
            raise SearchClientInitializationError("Search API key is not configured")
        if not index_name.strip():
            raise SearchClientInitializationError("Search index name is empty")
        if page_size < 1:
            raise SearchClientInitializationError("Search page size must be positive")
        return cls(
            endpoint,
            key,
            index_name.strip(),
            api_version=api_version,
            page_size=page_size,
            timeout=timeout,
        )

    @property
    def search_url(self) -> str:
        return f"{self.endpoint}/indexes/{self.index_name}/docs/search"

    async def search_orders(self) -> list[Order]:
        """Fetch every order document in the index.

        Pages are keyed on ``orderNumber``: each request asks for documents
        after the highest order number seen so far, so paging does not depend
        on ``skip`` (capped by the service at 100000).
        """
        orders: list[Order] = []
        after: int | None = None

        async with httpx.AsyncClient(headers=self.headers, timeout=self.timeout) as client:
            while True:
                documents = await self._fetch_page(client, after)
                page = self._to_orders(documents)
                orders.extend(page)
                if len(documents) < self.page_size:
                    break
                last = max(order.order_number for order in page)
                if after is not None and last <= after:
                    raise SearchQueryError(
                        f"Index '{self.index_name}' did not advance past order {after}"
                    )
                after = last

        logger.info("Retrieved %d orders from index '%s'", len(orders), self.index_name)
        return orders

    async def _fetch_page(
        self, client: httpx.AsyncClient, after: int | None
    ) -> list[dict[str, Any]]:
        body: dict[str, Any] = {
            "search": "*",
            "top": self.page_size,
            "orderby": "orderNumber asc",
        }
        if after is not None:
            body["filter"] = f"orderNumber gt {after}"
        try:
            response = await client.post(
                self.search_url,
                params={"api-version": self.api_version},
                json=body,
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as exc:
            raise SearchQueryError(f"Search request to index '{self.index_name}' failed") from exc
        except ValueError as exc:
            raise SearchQueryError("Search response was not valid JSON") from exc

        if not isinstance(payload, dict) or not isinstance(payload.get("value", []), list):
            raise SearchQueryError("Search response is missing the 'value' array")
        documents: list[dict[str, Any]] = payload.get("value", [])
        return documents

    def _to_orders(self, documents: list[dict[str, Any]]) -> list[Order]:
        try:
            return [OrderDocument.model_validate(doc).to_order() for doc in documents]
        except ValidationError as exc:
            raise SearchQueryError(
                f"Index '{self.index_name}' returned a malformed order document"
            ) from exc
