"""Schema catalog: descriptors and the on-disk loader."""

from .schemas import EntityShape, SchemaCatalog, SchemaDescriptor, SchemaIndexEntry
from .loader import load_catalog, read_index, read_records

__all__ = [
    "EntityShape",
    "SchemaCatalog",
    "SchemaDescriptor",
    "SchemaIndexEntry",
    "load_catalog",
    "read_index",
    "read_records",
]
