"""Errors raised by the search index integration."""


class SearchIndexError(Exception):
    """Base class for search index failures."""


class SearchClientInitializationError(SearchIndexError):
    """The client could not be built from the configured connection string."""


class SearchQueryError(SearchIndexError):
    """A query against the index failed or returned unusable documents."""
