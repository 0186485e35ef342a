from labyrinth.models.board import (
    GOAL_ID,
    START_ID,
    Board,
    Direction,
    Position,
    Special,
    Tile,
    TileKind,
)
from labyrinth.models.puzzle import Difficulty, DifficultyProfile, Puzzle, PuzzleTemplate
from labyrinth.models.snapshot import SessionSnapshot, SnapshotStore, is_playable

__all__ = [
    "GOAL_ID",
    "START_ID",
    "Board",
    "Direction",
    "Position",
    "Special",
    "Tile",
    "TileKind",
    "Difficulty",
    "DifficultyProfile",
    "Puzzle",
    "PuzzleTemplate",
    "SessionSnapshot",
    "SnapshotStore",
    "is_playable",
]
