"""Salvage Union reference data: typed query, search and table rolls."""

from .catalog import SchemaCatalog, SchemaDescriptor, load_catalog
from .registry import EntityRegistry, ParsedRef, UnknownSchemaError
from .search import SearchEngine, SearchResult
from .tables import TableRollError, TableRollResult, result_for_table

__version__ = "0.1.0"

__all__ = [
    "SchemaCatalog",
    "SchemaDescriptor",
    "load_catalog",
    "EntityRegistry",
    "ParsedRef",
    "UnknownSchemaError",
    "SearchEngine",
    "SearchResult",
    "TableRollError",
    "TableRollResult",
    "result_for_table",
    "load_registry",
]


def load_registry(index_path=None, data_root=None) -> EntityRegistry:
    """Load the catalog from disk and build a registry over it."""
    return EntityRegistry(load_catalog(index_path, data_root))
