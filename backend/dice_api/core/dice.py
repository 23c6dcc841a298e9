"""Dice Rolling — uniform d6 draws and roll-count parsing.

Invariants:
    - Every draw is an int in [1, 6], uniform over the six faces
    - roll_dice(n) returns exactly n draws, in draw order
    - parse_roll_count() accepts only counts in [MIN_ROLL_COUNT, MAX_ROLL_COUNT]

Design Decisions:
    - Default PRNG (random module), not secrets: fairness for a game, not crypto
    - rng injectable: tests seed a random.Random for deterministic draws
    - Leading-integer parse: "3abc" → 3, "2.5" → 2, matching the existing
      public API's lenient path parameter handling
"""

import random
import re

from dice_api.core.errors import InvalidRollCountError

DIE_NAME = "d6"
DIE_FACES = 6
MIN_ROLL_COUNT = 1
MAX_ROLL_COUNT = 100

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def roll_die(rng: random.Random | None = None) -> int:
    """Roll a single d6."""
    return (rng or random).randint(1, DIE_FACES)


def roll_dice(count: int, rng: random.Random | None = None) -> list[int]:
    """Roll `count` independent d6."""
    return [roll_die(rng) for _ in range(count)]


def parse_leading_int(raw: str) -> int | None:
    """Parse the leading ASCII integer of `raw`; None if it has no leading digits.

    Raises ValueError for digit runs past the interpreter's int conversion limit.
    """
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    return int(match.group(1))


def parse_roll_count(raw: str) -> int:
    """Parse and bound-check a dice count. Raises InvalidRollCountError."""
    try:
        count = parse_leading_int(raw)
    except ValueError:
        raise InvalidRollCountError(raw) from None
    if count is None or count < MIN_ROLL_COUNT or count > MAX_ROLL_COUNT:
        raise InvalidRollCountError(raw)
    return count
