"""Difficulty rotation and the curated template catalog."""

from __future__ import annotations

from labyrinth.engine.generator.rng import char_code_sum
from labyrinth.models.puzzle import Difficulty, PuzzleTemplate

PUZZLE_TEMPLATES: dict[Difficulty, tuple[PuzzleTemplate, ...]] = {
    Difficulty.EASY: (
        PuzzleTemplate(3, 4, path_complexity=1, gem_count=1, decoy_density=0.3,
                       optimal_moves=2, difficulty=Difficulty.EASY),
        PuzzleTemplate(4, 4, path_complexity=2, gem_count=1, decoy_density=0.4,
                       optimal_moves=3, difficulty=Difficulty.EASY),
    ),
    Difficulty.MEDIUM: (
        PuzzleTemplate(4, 5, path_complexity=3, gem_count=2, decoy_density=0.5,
                       optimal_moves=4, difficulty=Difficulty.MEDIUM),
        PuzzleTemplate(5, 5, path_complexity=3, gem_count=2, decoy_density=0.6,
                       optimal_moves=5, difficulty=Difficulty.MEDIUM),
    ),
    Difficulty.HARD: (
        PuzzleTemplate(5, 6, path_complexity=4, gem_count=3, decoy_density=0.7,
                       optimal_moves=6, difficulty=Difficulty.HARD),
        PuzzleTemplate(6, 6, path_complexity=5, gem_count=4, decoy_density=0.8,
                       optimal_moves=8, difficulty=Difficulty.HARD),
    ),
}

_SCRAMBLE_MULTIPLIER = {
    Difficulty.EASY: 1.0,
    Difficulty.MEDIUM: 1.2,
    Difficulty.HARD: 1.4,
}


def difficulty_for_day(day_index: int) -> Difficulty:
    """Weekly rotation: the two boundary days are easy, mid-week is hard."""
    cycle = day_index % 7
    if cycle in (0, 6):
        return Difficulty.EASY
    if cycle in (1, 2, 5):
        return Difficulty.MEDIUM
    return Difficulty.HARD


def template_for_seed(seed: str, difficulty: Difficulty) -> PuzzleTemplate:
    templates = PUZZLE_TEMPLATES[difficulty]
    return templates[char_code_sum(seed) % len(templates)]


def scramble_multiplier(difficulty: Difficulty) -> float:
    return _SCRAMBLE_MULTIPLIER[difficulty]


__all__ = [
    "PUZZLE_TEMPLATES",
    "difficulty_for_day",
    "template_for_seed",
    "scramble_multiplier",
]
