"""Resolve d20 rolls against roll tables.

A roll table maps die faces to outcomes. Keys are either single faces
(``"7"``) or inclusive ranges (``"2-5"``); other keys such as ``type`` are
ignored. The layout is detected from the keys themselves, not from ``type``:

- flat: exactly twenty single-face keys, one per face
- ranged: anything else; an exact face key wins over a range
"""

import re
from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel

from .dice import D20, roll_d20

TABLE_KEY_RE = re.compile(r"^\d+(-\d+)?$")

MIN_ROLL = 1
MAX_ROLL = D20


class TableRollError(str, Enum):
    MISSING_TABLE = "missing_table"
    INVALID_ROLL = "invalid_roll"
    NO_RESULT = "no_result"


class TableRollResult(BaseModel):
    """Outcome of a table roll: either a result string or an error."""

    success: bool
    result: str | None = None
    error: str | None = None
    error_kind: TableRollError | None = None

    @classmethod
    def ok(cls, result: str) -> "TableRollResult":
        return cls(success=True, result=result)

    @classmethod
    def fail(cls, kind: TableRollError, error: str) -> "TableRollResult":
        return cls(success=False, error=error, error_kind=kind)


def is_flat_table(table: Mapping[str, Any]) -> bool:
    """A flat table has one single-face key for each of the twenty faces."""
    keys = [k for k in table if TABLE_KEY_RE.match(str(k))]
    return len(keys) == D20 and not any("-" in k for k in keys)


def _range_bounds(key: str) -> tuple[int, int]:
    low, high = key.split("-")
    return int(low), int(high)


def result_for_table(table: Mapping[str, Any] | None, roll: int) -> TableRollResult:
    """Resolve a d20 roll against a roll table.

    Args:
        table: Mapping of face or range keys to outcome strings.
        roll: The d20 result, 1-20.

    Returns:
        TableRollResult; failures are returned, never raised.
    """
    if not table:
        return TableRollResult.fail(TableRollError.MISSING_TABLE, "Table data is undefined")

    if roll < MIN_ROLL or roll > MAX_ROLL:
        return TableRollResult.fail(
            TableRollError.INVALID_ROLL,
            f"Roll must be between {MIN_ROLL} and {MAX_ROLL}, got {roll}",
        )

    face = str(roll)

    if is_flat_table(table):
        value = table.get(face)
        if isinstance(value, str) and value:
            return TableRollResult.ok(value)
        return TableRollResult.fail(
            TableRollError.NO_RESULT, f"No result found for roll {roll} in flat table"
        )

    value = table.get(face)
    if isinstance(value, str) and value:
        return TableRollResult.ok(value)

    # First matching range wins; overlapping ranges are not checked.
    for key, value in table.items():
        key = str(key)
        if "-" not in key or not TABLE_KEY_RE.match(key):
            continue
        low, high = _range_bounds(key)
        if low <= roll <= high and isinstance(value, str) and value:
            return TableRollResult.ok(value)

    table_type = table.get("type", "range")
    return TableRollResult.fail(
        TableRollError.NO_RESULT, f"No result found for roll {roll} in {table_type} table"
    )


def table_for_entity(entity: Mapping[str, Any] | None) -> Mapping[str, Any] | None:
    """Get the roll table carried by an entity (crawler bays, equipment, roll tables)."""
    if not entity:
        return None
    for field in ("table", "rollTable"):
        value = entity.get(field)
        if isinstance(value, Mapping):
            return value
    return None


def roll_on_table(
    table: Mapping[str, Any] | None, roll: int | None = None
) -> tuple[int, TableRollResult]:
    """Roll a d20 (unless a roll is given) and resolve it against table."""
    if roll is None:
        roll = roll_d20()
    return roll, result_for_table(table, roll)
