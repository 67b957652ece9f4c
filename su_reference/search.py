"""Free-text search across schemas with relevance scoring.

Matching is plain substring containment against an entity's ``name``,
``description`` and ``effect`` fields. No tokenizing, stemming or fuzzy
matching is done.
"""

import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, SkipValidation
from pydantic.alias_generators import to_camel

from .config import SUGGESTION_LIMIT
from .models.base import Entity

if TYPE_CHECKING:
    from .registry import EntityRegistry

logger = logging.getLogger(__name__)

# Fields checked for a match, in order
SEARCH_FIELDS = ("name", "description", "effect")

EXACT_NAME_SCORE = 100
NAME_PREFIX_SCORE = 50
NAME_CONTAINS_SCORE = 25
DESCRIPTION_SCORE = 10
PER_FIELD_SCORE = 5


class SearchResult(BaseModel):
    """A single search hit.

    Serialized with camelCase keys (``by_alias=True``) for JSON consumers.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    schema_id: str
    schema_title: str
    entity: SkipValidation[dict[str, Any]]
    entity_id: str
    entity_name: str
    matched_fields: list[str] = Field(default_factory=list)
    match_score: int = 0


def _normalize(text: str, case_sensitive: bool) -> str:
    return text if case_sensitive else text.lower()


def match_fields(entity: Entity, query: str, case_sensitive: bool = False) -> list[str]:
    """Return the names of the fields that contain query.

    ``name`` is always checked; ``description`` and ``effect`` only when
    present as strings.
    """
    needle = _normalize(query, case_sensitive)
    matched = []
    for field in SEARCH_FIELDS:
        value = entity.get(field)
        if not isinstance(value, str):
            continue
        if needle in _normalize(value, case_sensitive):
            matched.append(field)
    return matched


def calculate_score(entity: Entity, query: str, matched_fields: list[str]) -> int:
    """Score a match. Higher is more relevant.

    The base comes from the name alone (exact, prefix, contains), the
    description adds a flat bonus, and every matched field adds a bit more,
    so a description hit is counted twice. Scoring always ignores case;
    ``case_sensitive`` only decides which fields match.
    """
    needle = query.lower()
    name = str(entity.get("name", "")).lower()

    score = 0
    if name == needle:
        score += EXACT_NAME_SCORE
    elif name.startswith(needle):
        score += NAME_PREFIX_SCORE
    elif needle in name:
        score += NAME_CONTAINS_SCORE

    description = entity.get("description")
    if isinstance(description, str) and needle in description.lower():
        score += DESCRIPTION_SCORE

    score += PER_FIELD_SCORE * len(matched_fields)
    return score


class SearchEngine:
    """Search engine over every schema in a registry."""

    def __init__(self, registry: "EntityRegistry"):
        self.registry = registry

    def _schemas_to_search(self, schemas: list[str] | None):
        # Catalog order is kept; unknown IDs in the filter are dropped.
        all_schemas = self.registry.schemas()
        if schemas is None:
            return all_schemas
        wanted = set(schemas)
        unknown = wanted.difference(s.id for s in all_schemas)
        if unknown:
            logger.debug("Ignoring unknown schemas in search filter: %s", sorted(unknown))
        return [s for s in all_schemas if s.id in wanted]

    def search(
        self,
        query: str,
        schemas: list[str] | None = None,
        limit: int | None = None,
        case_sensitive: bool = False,
        early_exit: bool = False,
    ) -> list[SearchResult]:
        """Search entities across all or selected schemas.

        Args:
            query: Text to look for. Blank queries return no results.
            schemas: Restrict to these schema IDs. Unknown IDs are ignored.
            limit: Maximum number of results. None or 0 means no limit.
            case_sensitive: Compare without lower-casing.
            early_exit: Stop scanning once ``limit`` hits are collected,
                before sorting. Cheaper, but later high-scoring entities
                can be missed. By default every schema is scanned, then
                results are sorted and truncated.

        Returns:
            Results sorted by match score, highest first. Ties keep catalog
            order, then load order within a schema.
        """
        if not query or not query.strip():
            return []
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be a positive integer, got {limit}")

        results: list[SearchResult] = []
        stop = False
        for schema in self._schemas_to_search(schemas):
            model = self.registry.model(schema.id)
            for entity in model.all():
                matched = match_fields(entity, query, case_sensitive)
                if not matched:
                    continue
                results.append(
                    SearchResult(
                        schema_id=schema.id,
                        schema_title=schema.title,
                        entity=entity,
                        entity_id=str(entity.get("id", "")),
                        entity_name=str(entity.get("name", "")),
                        matched_fields=matched,
                        match_score=calculate_score(entity, query, matched),
                    )
                )
                if early_exit and limit and len(results) >= limit:
                    stop = True
                    break
            if stop:
                break

        # sorted() is stable, so ties keep scan order
        results = sorted(results, key=lambda r: r.match_score, reverse=True)
        if limit:
            results = results[:limit]
        return results

    def search_in(
        self,
        schema_id: str,
        query: str,
        limit: int | None = None,
        case_sensitive: bool = False,
    ) -> list[Entity]:
        """Search one schema and return just the matching entities."""
        results = self.search(query, schemas=[schema_id], limit=limit, case_sensitive=case_sensitive)
        return [r.entity for r in results]

    def get_suggestions(
        self,
        query: str,
        schemas: list[str] | None = None,
        limit: int | None = None,
        case_sensitive: bool = False,
    ) -> list[str]:
        """Unique entity names matching query, in result order."""
        results = self.search(
            query,
            schemas=schemas,
            limit=limit or SUGGESTION_LIMIT,
            case_sensitive=case_sensitive,
        )
        return list(dict.fromkeys(r.entity_name for r in results))
