"""Flask REST API serving Salvage Union reference data to the web viewer."""

import logging

from flask import Flask, jsonify, request
from flask_cors import CORS

from su_reference import load_registry
from su_reference.config import API_DEBUG, API_HOST, API_PORT, LOG_FORMAT, LOG_LEVEL
from su_reference.registry import EntityRegistry, UnknownSchemaError
from su_reference.tables import result_for_table, table_for_entity

# Configure logging
logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

app = Flask(__name__)

# The viewer is served from its own dev server
CORS(app, resources={r"/api/*": {"origins": "*"}})

_registry: EntityRegistry | None = None


def get_registry() -> EntityRegistry:
    """Get the process-wide registry, loading the catalog on first use."""
    global _registry
    if _registry is None:
        _registry = load_registry()
    return _registry


def _error(message: str, status: int):
    return jsonify({"error": message}), status


def _parse_bool(value: str | None) -> bool:
    return (value or "").lower() in ("1", "true", "yes")


# =============================================================================
# Health
# =============================================================================


@app.route("/api/health", methods=["GET"])
def health():
    """Health check with the number of loaded schemas."""
    registry = get_registry()
    return jsonify(
        {
            "status": "ok",
            "service": "su-reference",
            "schemas": len(registry.schema_ids()),
        }
    )


# =============================================================================
# Schemas and entities
# =============================================================================


@app.route("/api/schemas", methods=["GET"])
def list_schemas():
    """List schemas in catalog order."""
    registry = get_registry()
    return jsonify(
        {
            "schemas": [
                {
                    "id": s.id,
                    "title": s.title,
                    "description": s.description,
                    "itemCount": len(s.records),
                }
                for s in registry.schemas()
            ]
        }
    )


@app.route("/api/schemas/<schema_id>", methods=["GET"])
def list_records(schema_id: str):
    """All records of one schema."""
    registry = get_registry()
    try:
        model = registry.model(schema_id)
    except UnknownSchemaError as e:
        return _error(str(e), 404)
    return jsonify({"schema": schema_id, "title": model.title, "records": model.all()})


@app.route("/api/schemas/<schema_id>/<entity_id>", methods=["GET"])
def get_entity(schema_id: str, entity_id: str):
    """One entity by schema and ID."""
    registry = get_registry()
    try:
        entity = registry.get(schema_id, entity_id)
    except UnknownSchemaError as e:
        return _error(str(e), 404)
    if entity is None:
        return _error(f"Entity '{entity_id}' not found in {schema_id}", 404)
    return jsonify({"ref": registry.compose_ref(schema_id, entity_id), "entity": entity})


@app.route("/api/refs/<path:ref>", methods=["GET"])
def get_by_ref(ref: str):
    """One entity by 'schema::id' reference."""
    registry = get_registry()
    if registry.parse_ref(ref) is None:
        return _error(f"Invalid reference: '{ref}'", 400)
    entity = registry.get_by_ref(ref)
    if entity is None:
        return _error(f"Entity '{ref}' not found", 404)
    return jsonify({"ref": ref, "entity": entity})


# =============================================================================
# Search
# =============================================================================


def _search_params():
    """Read the common search query parameters."""
    query = request.args.get("q", "")
    schemas = request.args.get("schemas")
    schema_list = [s.strip() for s in schemas.split(",") if s.strip()] if schemas else None
    limit = request.args.get("limit", type=int)
    if limit is not None and limit < 1:
        raise ValueError("limit must be a positive integer")
    case_sensitive = _parse_bool(request.args.get("case_sensitive"))
    return query, schema_list, limit, case_sensitive


@app.route("/api/search", methods=["GET"])
def search():
    """Search across schemas. Query params: q, schemas, limit, case_sensitive."""
    try:
        query, schemas, limit, case_sensitive = _search_params()
    except ValueError as e:
        return _error(str(e), 400)

    results = get_registry().search(
        query, schemas=schemas, limit=limit, case_sensitive=case_sensitive
    )
    return jsonify(
        {
            "query": query,
            "count": len(results),
            "results": [r.model_dump(by_alias=True) for r in results],
        }
    )


@app.route("/api/suggestions", methods=["GET"])
def suggestions():
    """Unique entity names for a partial query."""
    try:
        query, schemas, limit, case_sensitive = _search_params()
    except ValueError as e:
        return _error(str(e), 400)

    names = get_registry().get_suggestions(
        query, schemas=schemas, limit=limit, case_sensitive=case_sensitive
    )
    return jsonify({"query": query, "suggestions": names})


# =============================================================================
# Tables
# =============================================================================


@app.route("/api/tables/roll", methods=["POST"])
def roll_table():
    """Resolve a roll against an entity's table or an inline table.

    Body: {"ref": "roll-tables::core-mechanic", "roll": 12}
       or {"table": {"1": "...", "2-5": "..."}, "roll": 12}
    """
    data = request.get_json(silent=True) or {}
    roll = data.get("roll")
    if not isinstance(roll, int) or isinstance(roll, bool):
        return _error("'roll' must be an integer", 400)

    if "ref" in data:
        entity = get_registry().get_by_ref(str(data["ref"]))
        if entity is None:
            return _error(f"Entity '{data['ref']}' not found", 404)
        table = table_for_entity(entity)
    else:
        table = data.get("table")
        if table is not None and not isinstance(table, dict):
            return _error("'table' must be an object", 400)

    outcome = result_for_table(table, roll)
    return jsonify({"roll": roll, **outcome.model_dump(mode="json")})


def create_app(registry: EntityRegistry | None = None) -> Flask:
    """Application factory for uWSGI/Gunicorn."""
    global _registry
    _registry = registry or load_registry()
    logger.info("Serving %d schemas", len(_registry.schema_ids()))
    return app


if __name__ == "__main__":
    create_app()
    app.run(debug=API_DEBUG, host=API_HOST, port=API_PORT)
