"""Calendar date to seed helpers.

Callers supply the date; nothing in the engine reads a clock.
"""

from __future__ import annotations

import secrets
from datetime import date

FIRST_PUZZLE = date(2025, 8, 11)  # puzzle #01
_EPOCH = date(1970, 1, 1)


def daily_key(day: date) -> str:
    return day.strftime("%Y-%m-%d")


def daily_seed(day: date) -> str:
    return f"SEED_{daily_key(day)}"


def day_index(day: date) -> int:
    """Days since 1970-01-01, which drives the weekly difficulty rotation."""
    return (day - _EPOCH).days


def puzzle_number(day: date) -> int:
    return max(1, (day - FIRST_PUZZLE).days + 1)


def practice_seed() -> str:
    return f"PRACTICE_{secrets.token_hex(6)}"


__all__ = [
    "FIRST_PUZZLE",
    "daily_key",
    "daily_seed",
    "day_index",
    "puzzle_number",
    "practice_seed",
]
