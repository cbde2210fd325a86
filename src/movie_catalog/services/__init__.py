"""Service layer: catalog store, ingestion and query dispatch."""

from .dispatcher import QueryDispatcher, QueryParseError
from .ingestion import CatalogIngestor, load_catalog
from .store import CatalogStore

__all__ = ["CatalogIngestor", "CatalogStore", "QueryDispatcher", "QueryParseError", "load_catalog"]
