"""Dice Rules — tests for pure d6 draws and roll-count parsing.

Tests cover:
    - roll_die stays in [1, 6] and reaches every face
    - roll_dice returns exactly `count` draws in order
    - parse_leading_int follows leading-integer semantics
    - parse_roll_count enforces the [1, 100] bounds
"""

import random

import pytest

from dice_api.core.dice import (
    DIE_FACES,
    MAX_ROLL_COUNT,
    MIN_ROLL_COUNT,
    parse_leading_int,
    parse_roll_count,
    roll_dice,
    roll_die,
)
from dice_api.core.errors import InvalidRollCountError


# ─── roll_die / roll_dice ────────────────────────────────────────

def test_roll_die_stays_in_range():
    rng = random.Random(42)
    for _ in range(1000):
        assert 1 <= roll_die(rng) <= DIE_FACES


def test_roll_die_reaches_every_face():
    rng = random.Random(7)
    faces = {roll_die(rng) for _ in range(1000)}
    assert faces == {1, 2, 3, 4, 5, 6}


def test_roll_die_uses_module_rng_by_default():
    random.seed(1)
    first = roll_die()
    random.seed(1)
    assert roll_die() == first


@pytest.mark.parametrize("count", [1, 2, 50, 100])
def test_roll_dice_returns_exact_count(count):
    results = roll_dice(count, random.Random(count))
    assert len(results) == count
    assert all(1 <= r <= 6 for r in results)


def test_roll_dice_is_reproducible_with_seeded_rng():
    assert roll_dice(10, random.Random(3)) == roll_dice(10, random.Random(3))


# ─── parse_leading_int ───────────────────────────────────────────

@pytest.mark.parametrize("raw, expected", [
    ("5", 5),
    ("  12", 12),
    ("3abc", 3),
    ("2.5", 2),
    ("-4", -4),
    ("+7", 7),
    ("007", 7),
])
def test_parse_leading_int_reads_leading_digits(raw, expected):
    assert parse_leading_int(raw) == expected


@pytest.mark.parametrize("raw", ["", "abc", "x5", " ", "-", ".5", "٣", "５"])
def test_parse_leading_int_returns_none_without_digits(raw):
    assert parse_leading_int(raw) is None


# ─── parse_roll_count ────────────────────────────────────────────

def test_parse_roll_count_accepts_bounds():
    assert parse_roll_count(str(MIN_ROLL_COUNT)) == 1
    assert parse_roll_count(str(MAX_ROLL_COUNT)) == 100


@pytest.mark.parametrize("raw", ["0", "-1", "101", "1000", "abc", ""])
def test_parse_roll_count_rejects_invalid(raw):
    with pytest.raises(InvalidRollCountError) as exc_info:
        parse_roll_count(raw)
    assert exc_info.value.http_status == 400
    assert exc_info.value.raw_count == raw


@pytest.mark.parametrize("raw", ["1" * 5000, "-" + "9" * 5000])
def test_parse_roll_count_rejects_huge_digit_runs(raw):
    with pytest.raises(InvalidRollCountError):
        parse_roll_count(raw)


def test_parse_roll_count_error_envelope():
    with pytest.raises(InvalidRollCountError) as exc_info:
        parse_roll_count("0")
    assert exc_info.value.to_response() == {
        "status": "error",
        "message": "Invalid count parameter. Must be a number between 1 and 100.",
    }
