"""Load the schema catalog from its on-disk JSON layout."""

import json
import logging
from pathlib import Path

from ..config import DATA_ROOT, SCHEMA_INDEX_PATH
from .schemas import SchemaCatalog, SchemaDescriptor, SchemaIndexEntry

logger = logging.getLogger(__name__)


def read_index(index_path: Path) -> list[SchemaIndexEntry]:
    """Read the schema index file.

    Raises:
        FileNotFoundError: If the index file does not exist.
        ValueError: If the index has no ``schemas`` list.
    """
    if not index_path.exists():
        raise FileNotFoundError(f"Schema index not found: {index_path}")

    with open(index_path) as f:
        data = json.load(f)

    entries = data.get("schemas") if isinstance(data, dict) else None
    if not isinstance(entries, list):
        raise ValueError(f"Schema index {index_path} has no 'schemas' list")

    return [SchemaIndexEntry.model_validate(entry) for entry in entries]


def read_records(data_path: Path) -> list[dict]:
    """Read one schema's data file, which must hold a JSON array."""
    if not data_path.exists():
        raise FileNotFoundError(f"Data file not found: {data_path}")

    with open(data_path) as f:
        records = json.load(f)

    if not isinstance(records, list):
        raise ValueError(f"Data file {data_path} must contain a JSON array")
    return records


def load_catalog(
    index_path: Path | None = None,
    data_root: Path | None = None,
) -> SchemaCatalog:
    """Build a catalog from ``schemas/index.json`` and its data files.

    Args:
        index_path: Path to the schema index. Defaults to SCHEMA_INDEX_PATH.
        data_root: Directory that ``dataFile`` entries are relative to.
            Defaults to DATA_ROOT when the index is the configured one,
            otherwise to the index file's grandparent directory.

    Returns:
        SchemaCatalog with schemas in index order.
    """
    if index_path is None:
        index_path = SCHEMA_INDEX_PATH
        data_root = data_root or DATA_ROOT
    index_path = Path(index_path)
    data_root = Path(data_root) if data_root else index_path.parent.parent

    schemas = []
    for entry in read_index(index_path):
        records = read_records(data_root / entry.data_file)
        if entry.item_count is not None and entry.item_count != len(records):
            logger.warning(
                "Schema %s: index lists %d items, data file has %d",
                entry.id,
                entry.item_count,
                len(records),
            )
        schemas.append(
            SchemaDescriptor(
                id=entry.id,
                title=entry.title,
                description=entry.description,
                records=records,
            )
        )

    logger.info("Loaded %d schemas from %s", len(schemas), index_path)
    return SchemaCatalog(schemas=schemas)
