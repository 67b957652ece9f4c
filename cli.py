#!/usr/bin/env python3
"""CLI for the Salvage Union reference data."""

import json
import logging
import sys
from pathlib import Path

import click

# Ensure su_reference is importable
sys.path.insert(0, str(Path(__file__).parent))

from su_reference import load_registry
from su_reference.config import LOG_FORMAT, LOG_LEVEL
from su_reference.dice import roll_dice
from su_reference.registry import EntityRegistry
from su_reference.tables import roll_on_table, table_for_entity

_registry: EntityRegistry | None = None


def get_registry() -> EntityRegistry:
    """Load the registry on first use."""
    global _registry
    if _registry is None:
        try:
            _registry = load_registry()
        except (FileNotFoundError, ValueError) as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
    return _registry


@click.group()
@click.version_option(version="0.1.0")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Salvage Union reference - search and look up game data."""
    logging.basicConfig(level=logging.DEBUG if verbose else LOG_LEVEL, format=LOG_FORMAT)


@cli.command("schemas")
def schemas_list():
    """List all schemas and their record counts."""
    registry = get_registry()
    for schema in registry.schemas():
        click.echo(f"  {schema.id}: {schema.title} [{len(schema.records)} records]")


@cli.command("search")
@click.argument("query")
@click.option("--schema", "-s", "schemas", multiple=True, help="Restrict to schema ID (repeatable)")
@click.option("--limit", "-n", type=click.IntRange(min=1), default=None, help="Maximum results")
@click.option("--case-sensitive", is_flag=True, help="Match case exactly")
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON")
def search(query: str, schemas: tuple[str, ...], limit: int | None, case_sensitive: bool, as_json: bool):
    """Search names, descriptions and effects across schemas.

    \b
    Examples:
      su search railgun
      su search shield -s systems -s modules --limit 5
    """
    registry = get_registry()
    results = registry.search(
        query,
        schemas=list(schemas) or None,
        limit=limit,
        case_sensitive=case_sensitive,
    )

    if as_json:
        click.echo(json.dumps([r.model_dump(by_alias=True) for r in results], indent=2))
        return

    if not results:
        click.echo(f"No results for '{query}'.")
        return

    for r in results:
        ref = registry.compose_ref(r.schema_id, r.entity_id)
        fields = ", ".join(r.matched_fields)
        click.echo(f"  [{r.match_score:>3}] {r.entity_name} ({r.schema_title}) {ref} - {fields}")


@cli.command("get")
@click.argument("ref")
def get(ref: str):
    """Show one entity by reference, e.g. 'systems::energy-shield'."""
    registry = get_registry()
    if registry.parse_ref(ref) is None:
        click.echo(f"Invalid reference '{ref}'. Expected schema::id.", err=True)
        sys.exit(1)

    entity = registry.get_by_ref(ref)
    if entity is None:
        click.echo(f"Entity '{ref}' not found.", err=True)
        sys.exit(1)

    click.echo(json.dumps(entity, indent=2, ensure_ascii=False))


@cli.command("suggest")
@click.argument("query")
@click.option("--limit", "-n", type=click.IntRange(min=1), default=None, help="Maximum names")
def suggest(query: str, limit: int | None):
    """Suggest entity names for a partial query."""
    for name in get_registry().get_suggestions(query, limit=limit):
        click.echo(name)


@cli.command("roll")
@click.argument("ref")
@click.option("--roll", "-r", "roll_value", type=int, default=None, help="Use this d20 result")
def roll(ref: str, roll_value: int | None):
    """Roll on the table carried by an entity."""
    registry = get_registry()
    entity = registry.get_by_ref(ref)
    if entity is None:
        click.echo(f"Entity '{ref}' not found.", err=True)
        sys.exit(1)

    table = table_for_entity(entity)
    if table is None:
        click.echo(f"'{entity['name']}' has no roll table.", err=True)
        sys.exit(1)

    rolled, outcome = roll_on_table(table, roll_value)
    if not outcome.success:
        click.echo(f"Error: {outcome.error}", err=True)
        sys.exit(1)

    click.echo(f"{entity['name']} - rolled {rolled}")
    click.echo(f"  {outcome.result}")


@cli.command("dice")
@click.argument("expression", default="1d20")
def dice(expression: str):
    """Roll a dice expression such as 1d20 or 2d6+2."""
    try:
        result = roll_dice(expression)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(str(result))


if __name__ == "__main__":
    cli()
