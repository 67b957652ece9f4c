"""Reference tool server wrapping the entity registry and search engine."""

import json
from typing import Any

from ..registry import EntityRegistry
from ..search import SearchResult
from ..tables import roll_on_table, table_for_entity
from .base import Handler, ToolDef, ToolParameter, ToolResult, ToolServer

MAX_ENTITY_CHARS = 2000
SEARCH_LIMIT = 5
SUGGESTION_LIMIT = 10


class ReferenceToolServer(ToolServer):
    """Tool server exposing Salvage Union reference lookups to an LLM agent."""

    def __init__(self, registry: EntityRegistry):
        self.registry = registry
        self._tools = self._build_tools()

    def _build_tools(self) -> list[ToolDef]:
        schema_list = ", ".join(self.registry.schema_ids())
        return [
            ToolDef(
                name="search_reference",
                description="Search Salvage Union reference data by name, description or effect.",
                parameters=[
                    ToolParameter(
                        name="query",
                        type="string",
                        description="Text to search for (e.g., 'railgun', 'shield')",
                    ),
                    ToolParameter(
                        name="schemas",
                        type="string",
                        description=f"Comma-separated schema IDs to search. Available: {schema_list}",
                        required=False,
                    ),
                    ToolParameter(
                        name="limit",
                        type="integer",
                        description="Maximum number of results",
                        required=False,
                        default=SEARCH_LIMIT,
                    ),
                ],
            ),
            ToolDef(
                name="lookup_entity",
                description="Look up one entity by reference string 'schema::id' "
                "(e.g., 'systems::energy-shield'). Returns the full record.",
                parameters=[
                    ToolParameter(
                        name="ref",
                        type="string",
                        description="Reference string in the form schema::id",
                    ),
                ],
            ),
            ToolDef(
                name="get_suggestions",
                description="List entity names matching a partial query.",
                parameters=[
                    ToolParameter(name="query", type="string", description="Partial name"),
                    ToolParameter(
                        name="limit",
                        type="integer",
                        description="Maximum number of names",
                        required=False,
                        default=SUGGESTION_LIMIT,
                    ),
                ],
            ),
            ToolDef(
                name="roll_table",
                description="Roll a d20 on an entity's roll table (roll tables, crawler bays, "
                "equipment with tables). Pass 'roll' to resolve a specific result.",
                parameters=[
                    ToolParameter(
                        name="ref",
                        type="string",
                        description="Reference string of the entity holding the table",
                    ),
                    ToolParameter(
                        name="roll",
                        type="integer",
                        description="Die result 1-20; rolled if omitted",
                        required=False,
                    ),
                ],
            ),
        ]

    def list_tools(self) -> list[ToolDef]:
        return self._tools

    def handlers(self) -> dict[str, Handler]:
        return {
            "search_reference": self._search,
            "lookup_entity": self._lookup,
            "get_suggestions": self._suggest,
            "roll_table": self._roll_table,
        }

    def _search(self, args: dict[str, Any]) -> ToolResult:
        query = args["query"]
        schemas = args.get("schemas")
        if isinstance(schemas, str):
            schemas = [s.strip() for s in schemas.split(",") if s.strip()]
        results = self.registry.search(
            query, schemas=schemas or None, limit=args.get("limit", SEARCH_LIMIT)
        )
        if not results:
            return ToolResult.ok(f"No entries found matching '{query}'")
        return ToolResult.ok(self._format_results(results))

    def _lookup(self, args: dict[str, Any]) -> ToolResult:
        ref = args["ref"]
        if self.registry.parse_ref(ref) is None:
            return ToolResult.fail(f"Invalid reference: '{ref}'")
        entity = self.registry.get_by_ref(ref)
        if entity is None:
            return ToolResult.ok(f"No entity found for '{ref}'")
        return ToolResult.ok(self._format_entity(entity))

    def _suggest(self, args: dict[str, Any]) -> ToolResult:
        query = args["query"]
        names = self.registry.get_suggestions(query, limit=args.get("limit", SUGGESTION_LIMIT))
        if not names:
            return ToolResult.ok(f"No names match '{query}'")
        return ToolResult.ok(", ".join(names))

    def _roll_table(self, args: dict[str, Any]) -> ToolResult:
        ref = args["ref"]
        entity = self.registry.get_by_ref(ref)
        if entity is None:
            return ToolResult.fail(f"No entity found for '{ref}'")
        table = table_for_entity(entity)
        if table is None:
            return ToolResult.fail(f"'{entity['name']}' has no roll table")

        roll = args.get("roll")
        rolled, outcome = roll_on_table(table, int(roll) if roll is not None else None)
        if not outcome.success:
            return ToolResult.fail(outcome.error)
        return ToolResult.ok(f"**{entity['name']}** rolled {rolled}: {outcome.result}")

    def _format_entity(self, entity: dict) -> str:
        text = json.dumps(entity, indent=2, ensure_ascii=False)
        if len(text) > MAX_ENTITY_CHARS:
            text = text[:MAX_ENTITY_CHARS] + "..."
        return text

    def _format_results(self, results: list[SearchResult]) -> str:
        """One block per hit: bold name, schema title and ref, then the blurb."""
        blocks = []
        for r in results:
            ref = self.registry.compose_ref(r.schema_id, r.entity_id)
            blurb = r.entity.get("description") or r.entity.get("effect") or ""
            blocks.append(f"**{r.entity_name}** ({r.schema_title}) - {ref}\n{blurb}".rstrip())
        return "\n\n---\n\n".join(blocks)
