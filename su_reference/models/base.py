"""Base record accessor over one schema's entities."""

import random as _random
from typing import Any, Callable, TypeVar

Entity = dict[str, Any]
Predicate = Callable[[Entity], bool]

U = TypeVar("U")


class RecordModel:
    """Uniform read-only query wrapper around a single record collection.

    The accessor holds a reference to the catalog's record list; it never
    copies or mutates it. Predicates passed to ``find``/``find_all`` should
    only read entity fields.
    """

    def __init__(self, records: list[Entity], schema_id: str = "", title: str = ""):
        self._records = records
        self.schema_id = schema_id
        self.title = title

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(schema_id={self.schema_id!r}, count={len(self)})"

    def all(self) -> list[Entity]:
        """Get all records in load order."""
        return self._records

    def count(self) -> int:
        return len(self._records)

    def find(self, predicate: Predicate) -> Entity | None:
        """Find the first record matching predicate."""
        for record in self._records:
            if predicate(record):
                return record
        return None

    def find_all(self, predicate: Predicate) -> list[Entity]:
        """Find all records matching predicate, in load order."""
        return [record for record in self._records if predicate(record)]

    where = find_all

    def find_by_id(self, entity_id: str) -> Entity | None:
        return self.find(lambda e: e.get("id") == entity_id)

    def find_by_name(self, name: str) -> Entity | None:
        """Find a record by exact (case-sensitive) name."""
        return self.find(lambda e: e.get("name") == name)

    def search_by_name(self, query: str) -> list[Entity]:
        """Find records whose name contains query, ignoring case."""
        query_lower = query.lower()
        return self.find_all(lambda e: query_lower in str(e.get("name", "")).lower())

    def find_by_source(self, source: str) -> list[Entity]:
        return self.find_all(lambda e: e.get("source") == source)

    def first(self) -> Entity | None:
        return self._records[0] if self._records else None

    def last(self) -> Entity | None:
        return self._records[-1] if self._records else None

    def map(self, fn: Callable[[Entity], U]) -> list[U]:
        return [fn(record) for record in self._records]

    def some(self, predicate: Predicate) -> bool:
        return any(predicate(record) for record in self._records)

    def every(self, predicate: Predicate) -> bool:
        return all(predicate(record) for record in self._records)

    def random(self) -> Entity | None:
        """Pick one record at random."""
        if not self._records:
            return None
        return _random.choice(self._records)

    def random_many(self, count: int) -> list[Entity]:
        """Pick up to ``count`` distinct records at random."""
        if count >= len(self._records):
            return list(self._records)
        return _random.sample(self._records, count)


def has_trait(entity: Entity, trait_type: str) -> bool:
    """Check whether an entity's traits list contains a trait of this type."""
    traits = entity.get("traits") or []
    return any(isinstance(t, dict) and t.get("type") == trait_type for t in traits)


def as_number(value: Any) -> float:
    """Read a numeric field, treating missing, null and non-numeric values as 0."""
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return 0
    return value


def number_at_least(value: Any, minimum: float) -> bool:
    return as_number(value) >= minimum
