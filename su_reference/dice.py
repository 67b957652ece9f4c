"""Dice rolling for table lookups.

Salvage Union resolves almost everything on a single d20; a few tables and
effects call for other dice (1d6 scrap, 2d10 crawler damage, ...).
"""

import random
import re
from dataclasses import dataclass, field

D20 = 20

MAX_DICE = 100
MAX_SIDES = 100

DICE_RE = re.compile(r"^(?P<count>\d*)d(?P<sides>\d+)(?P<modifier>[+-]\d+)?$")


@dataclass
class DiceResult:
    """Dice rolled for one expression."""

    expression: str
    num_dice: int
    dice_type: int
    modifier: int = 0
    rolls: list[int] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(self.rolls) + self.modifier

    def __str__(self) -> str:
        faces = ", ".join(str(r) for r in self.rolls)
        text = f"{self.expression}: [{faces}]"
        if self.modifier:
            sign = "+" if self.modifier > 0 else "-"
            text += f" {sign} {abs(self.modifier)}"
        return f"{text} = {self.total}"


def parse_dice_expression(expr: str) -> tuple[int, int, int]:
    """Split an expression like ``2d6+4`` into ``(count, sides, modifier)``.

    The count defaults to 1 (``d20``).

    Raises:
        ValueError: If the expression is malformed, or the count or sides
            fall outside 1-100.
    """
    match = DICE_RE.match(expr.strip().lower())
    if match is None:
        raise ValueError(f"Invalid dice expression: {expr.strip()}")

    count = int(match["count"] or 1)
    sides = int(match["sides"])
    modifier = int(match["modifier"] or 0)

    if not 1 <= count <= MAX_DICE:
        raise ValueError(f"Number of dice must be 1-{MAX_DICE}, got {count}")
    if not 1 <= sides <= MAX_SIDES:
        raise ValueError(f"Dice type must be 1-{MAX_SIDES}, got d{sides}")
    return count, sides, modifier


def roll_dice(expr: str) -> DiceResult:
    """Roll an expression such as ``1d20`` or ``2d6+4``."""
    count, sides, modifier = parse_dice_expression(expr)
    return DiceResult(
        expression=expr,
        num_dice=count,
        dice_type=sides,
        modifier=modifier,
        rolls=[random.randint(1, sides) for _ in range(count)],
    )


def roll_d20() -> int:
    """Roll the single d20 used for table lookups."""
    return random.randint(1, D20)
