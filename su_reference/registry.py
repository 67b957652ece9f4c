"""Entity registry: cross-schema lookup, caching and reference strings.

A single registry is built from the schema catalog at startup and passed to
whatever needs it (search engine, CLI, API, tool server).
"""

import logging
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable, Mapping

from .catalog.schemas import SchemaCatalog, SchemaDescriptor
from .models.base import Entity, Predicate, RecordModel
from .models.factory import build_models, to_pascal_case

if TYPE_CHECKING:
    from .search import SearchEngine, SearchResult

logger = logging.getLogger(__name__)

REF_SEPARATOR = "::"

CLASS_SCHEMAS = ("classes.core", "classes.advanced", "classes.hybrid")


class UnknownSchemaError(KeyError):
    """Raised when a schema ID is not registered."""

    def __init__(self, schema_id: str):
        super().__init__(schema_id)
        self.schema_id = schema_id

    def __str__(self) -> str:
        return f"Unknown schema: {self.schema_id}"


@dataclass(frozen=True)
class ParsedRef:
    """A reference string split into its schema ID and entity ID."""

    schema_id: str
    id: str


@dataclass
class CacheInfo:
    hits: int
    misses: int
    size: int


class EntityRegistry:
    """Aggregates every schema accessor and resolves entities across schemas."""

    def __init__(self, catalog: SchemaCatalog):
        self.catalog = catalog
        self._models = build_models(catalog)
        self._by_name = {to_pascal_case(schema_id): m for schema_id, m in self._models.items()}
        self._cache: dict[str, Entity] = {}
        self._cache_lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._search_engine: "SearchEngine | None" = None

    def __getattr__(self, name: str) -> RecordModel:
        # Accessor names (registry.Systems, registry.CoreClasses)
        by_name = self.__dict__.get("_by_name", {})
        if name in by_name:
            return by_name[name]
        raise AttributeError(f"{type(self).__name__!r} has no attribute {name!r}")

    # ------------------------------------------------------------------
    # Schema access
    # ------------------------------------------------------------------

    def schema_ids(self) -> list[str]:
        """Registered schema IDs in catalog order."""
        return list(self._models)

    def schemas(self) -> list[SchemaDescriptor]:
        return list(self.catalog.schemas)

    def has_schema(self, schema_id: str) -> bool:
        return schema_id in self._models

    def model(self, schema_id: str) -> RecordModel:
        """Get the accessor for a schema.

        Raises:
            UnknownSchemaError: If the schema is not registered.
        """
        try:
            return self._models[schema_id]
        except KeyError:
            raise UnknownSchemaError(schema_id) from None

    def find_in(self, schema_id: str, predicate: Predicate) -> Entity | None:
        """Find the first entity in a schema matching predicate."""
        return self.model(schema_id).find(predicate)

    def find_all_in(self, schema_id: str, predicate: Predicate) -> list[Entity]:
        """Find all entities in a schema matching predicate."""
        return self.model(schema_id).find_all(predicate)

    # ------------------------------------------------------------------
    # Lookup by ID
    # ------------------------------------------------------------------

    def get(self, schema_id: str, entity_id: str) -> Entity | None:
        """Get an entity by schema and ID.

        Found entities are cached for the life of the registry; misses are
        not cached, so a repeated miss rescans the schema.
        """
        key = self.compose_ref(schema_id, entity_id)
        with self._cache_lock:
            cached = self._cache.get(key)
            if cached is not None:
                self._hits += 1
                return cached
            self._misses += 1

        entity = self.find_in(schema_id, lambda e: e.get("id") == entity_id)
        if entity is not None:
            with self._cache_lock:
                self._cache[key] = entity
        else:
            logger.debug("No entity for %s", key)
        return entity

    def exists(self, schema_id: str, entity_id: str) -> bool:
        return self.get(schema_id, entity_id) is not None

    def get_many(
        self, requests: Iterable[tuple[str, str] | Mapping[str, str]]
    ) -> list[Entity | None]:
        """Resolve several ``(schema_id, id)`` requests, preserving order.

        Each request may be a tuple or a mapping with ``schema_id`` and
        ``id`` keys. A miss yields None at its position.
        """
        results = []
        for request in requests:
            if isinstance(request, Mapping):
                schema_id, entity_id = request["schema_id"], request["id"]
            else:
                schema_id, entity_id = request
            results.append(self.get(schema_id, entity_id))
        return results

    def cache_info(self) -> CacheInfo:
        with self._cache_lock:
            return CacheInfo(hits=self._hits, misses=self._misses, size=len(self._cache))

    # ------------------------------------------------------------------
    # Reference strings
    # ------------------------------------------------------------------

    @staticmethod
    def compose_ref(schema_id: str, entity_id: str) -> str:
        """Compose a ``schema::id`` reference string."""
        return f"{schema_id}{REF_SEPARATOR}{entity_id}"

    def parse_ref(self, ref: str) -> ParsedRef | None:
        """Split a reference string.

        Returns None unless the string splits into exactly two non-empty
        parts and the first names a registered schema.
        """
        parts = ref.split(REF_SEPARATOR)
        if len(parts) != 2:
            return None
        schema_id, entity_id = parts
        if not schema_id or not entity_id or not self.has_schema(schema_id):
            return None
        return ParsedRef(schema_id=schema_id, id=entity_id)

    def get_by_ref(self, ref: str) -> Entity | None:
        """Get an entity by reference string. Invalid references yield None."""
        parsed = self.parse_ref(ref)
        if parsed is None:
            return None
        return self.get(parsed.schema_id, parsed.id)

    def get_many_by_ref(self, refs: Iterable[str]) -> dict[str, Entity | None]:
        """Resolve several reference strings, keyed by the original string."""
        return {ref: self.get_by_ref(ref) for ref in refs}

    # ------------------------------------------------------------------
    # Classes and abilities
    # ------------------------------------------------------------------

    def get_all_classes(self) -> list[Entity]:
        """All core, advanced and hybrid classes, in that order."""
        classes: list[Entity] = []
        for schema_id in CLASS_SCHEMAS:
            if self.has_schema(schema_id):
                classes.extend(self._models[schema_id].all())
        return classes

    def find_class_by_id(self, class_id: str) -> Entity | None:
        for schema_id in CLASS_SCHEMAS:
            if self.has_schema(schema_id):
                found = self._models[schema_id].find(lambda c: c.get("id") == class_id)
                if found is not None:
                    return found
        return None

    def get_abilities_for_class(self, tree_names: Iterable[str]) -> list[Entity]:
        """Abilities belonging to any of the given ability trees."""
        if not self.has_schema("abilities"):
            return []
        trees = set(tree_names)
        return self.find_all_in(
            "abilities", lambda a: isinstance(a.get("tree"), str) and a["tree"] in trees
        )

    # ------------------------------------------------------------------
    # Search delegates
    # ------------------------------------------------------------------

    @property
    def search_engine(self) -> "SearchEngine":
        if self._search_engine is None:
            from .search import SearchEngine

            self._search_engine = SearchEngine(self)
        return self._search_engine

    def search(self, query: str, **kwargs: Any) -> list["SearchResult"]:
        return self.search_engine.search(query, **kwargs)

    def search_in(self, schema_id: str, query: str, **kwargs: Any) -> list[Entity]:
        return self.search_engine.search_in(schema_id, query, **kwargs)

    def get_suggestions(self, query: str, **kwargs: Any) -> list[str]:
        return self.search_engine.get_suggestions(query, **kwargs)
