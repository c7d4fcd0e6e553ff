"""Search index integration."""

from orders_dashboard.integrations.search.client import SearchIndexClient, parse_connection_string
from orders_dashboard.integrations.search.errors import (
    SearchClientInitializationError,
    SearchIndexError,
    SearchQueryError,
)

__all__ = [
    "SearchIndexClient",
    "parse_connection_string",
    "SearchIndexError",
    "SearchClientInitializationError",
    "SearchQueryError",
]
