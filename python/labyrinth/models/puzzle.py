"""Generated puzzle records: templates, difficulty profile and the puzzle itself."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from labyrinth.models.board import Board, Position


class Difficulty(StrEnum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True)
class PuzzleTemplate:
    rows: int
    cols: int
    path_complexity: int  # 1-5, 5 is most complex
    gem_count: int
    decoy_density: float
    optimal_moves: int
    difficulty: Difficulty

    @property
    def area(self) -> int:
        return self.rows * self.cols


@dataclass(frozen=True)
class DifficultyProfile:
    """Cached difficulty of a generated puzzle.

    Computed once from the freshly scrambled board and carried alongside it;
    it describes the puzzle as generated, not whatever state the player has
    since swapped it into.
    """

    optimal_to_goal: int
    optimal_all_gems: int
    total_gems: int

    def to_dict(self) -> dict[str, int]:
        return {
            "optimal_to_goal": self.optimal_to_goal,
            "optimal_all_gems": self.optimal_all_gems,
            "total_gems": self.total_gems,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DifficultyProfile:
        try:
            return cls(
                optimal_to_goal=int(data["optimal_to_goal"]),
                optimal_all_gems=int(data["optimal_all_gems"]),
                total_gems=int(data["total_gems"]),
            )
        except (KeyError, TypeError) as exc:
            raise ValueError(f"Malformed difficulty profile: {data!r}") from exc


@dataclass(frozen=True)
class Puzzle:
    seed: str
    template: PuzzleTemplate
    start: Position
    goal: Position
    board: Board
    solution: Board
    route: tuple[Position, ...]
    gems: tuple[Position, ...]
    profile: DifficultyProfile
