"""Deterministic pseudo-random stream from a string seed.

The same seed must yield the same puzzle for every player on every platform,
so the generator is spelled out with explicit 32-bit arithmetic instead of
relying on :mod:`random`, whose algorithms may change between releases.
"""

from __future__ import annotations

import secrets
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

_MASK = 0xFFFFFFFF


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK


def _code_units(seed: str) -> list[int]:
    """UTF-16 code units, so non-BMP characters hash like their surrogate pair."""
    raw = seed.encode("utf-16-le")
    return [raw[i] | (raw[i + 1] << 8) for i in range(0, len(raw), 2)]


def hash_seed(seed: str) -> int:
    """Fold *seed* into a 32-bit state (xmur3 mixing)."""
    units = _code_units(seed)
    h = (1779033703 ^ len(units)) & _MASK
    for unit in units:
        h = _imul(h ^ unit, 3432918353)
        h = ((h << 13) | (h >> 19)) & _MASK
    h = _imul(h ^ (h >> 16), 2246822507)
    h = _imul(h ^ (h >> 13), 3266489909)
    return (h ^ (h >> 16)) & _MASK


def char_code_sum(seed: str) -> int:
    return sum(_code_units(seed))


class SeededRandom:
    """mulberry32 generator with the handful of helpers generation needs."""

    def __init__(self, state: int) -> None:
        self._state = state & _MASK

    def random(self) -> float:
        """Return a float in ``[0, 1)``."""
        self._state = (self._state + 0x6D2B79F5) & _MASK
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK
        return ((t ^ (t >> 14)) & _MASK) / 4294967296

    def randint(self, lo: int, hi: int) -> int:
        """Inclusive on both ends."""
        if hi <= lo:
            return lo
        return lo + int(self.random() * (hi - lo + 1))

    def uniform(self, lo: float, hi: float) -> float:
        return lo + (hi - lo) * self.random()

    def chance(self, probability: float) -> bool:
        return self.random() < probability

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise IndexError("Cannot choose from an empty sequence")
        return items[int(self.random() * len(items))]

    def shuffle(self, items: list[T]) -> None:
        """Fisher-Yates, in place."""
        for i in range(len(items) - 1, 0, -1):
            j = int(self.random() * (i + 1))
            items[i], items[j] = items[j], items[i]


def create_rng(seed: str | None = None) -> SeededRandom:
    """Seeded stream for *seed*, or a non-deterministic one when omitted."""
    if seed is None:
        return SeededRandom(secrets.randbits(32))
    return SeededRandom(hash_seed(seed))


__all__ = ["SeededRandom", "create_rng", "hash_seed", "char_code_sum"]
