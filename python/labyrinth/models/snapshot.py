"""Per-day session snapshots and their JSON persistence."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from labyrinth.models.board import GOAL_ID, START_ID, Board, Position
from labyrinth.models.puzzle import DifficultyProfile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionSnapshot:
    day_key: str
    seed: str
    board: Board
    start: Position
    goal: Position
    moves: int
    elapsed: float
    completed: bool
    gems_collected: int
    stars: int
    profile: DifficultyProfile

    def to_dict(self) -> dict[str, Any]:
        return {
            "day_key": self.day_key,
            "seed": self.seed,
            "board": self.board.to_dict(),
            "start": self.start.to_dict(),
            "goal": self.goal.to_dict(),
            "moves": self.moves,
            "elapsed": self.elapsed,
            "completed": self.completed,
            "gems_collected": self.gems_collected,
            "stars": self.stars,
            "profile": self.profile.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SessionSnapshot:
        """Decode a stored snapshot; raises ``ValueError`` on malformed data."""
        try:
            return cls(
                day_key=str(data["day_key"]),
                seed=str(data["seed"]),
                board=Board.from_dict(data["board"]),
                start=Position.from_dict(data["start"]),
                goal=Position.from_dict(data["goal"]),
                moves=int(data["moves"]),
                elapsed=float(data.get("elapsed", 0.0)),
                completed=bool(data.get("completed", False)),
                gems_collected=int(data.get("gems_collected", 0)),
                stars=int(data.get("stars", 0)),
                profile=DifficultyProfile.from_dict(data["profile"]),
            )
        except (KeyError, TypeError) as exc:
            raise ValueError(f"Malformed session snapshot: {exc}") from exc


def is_playable(snapshot: SessionSnapshot) -> bool:
    """Structural check run before resuming a stored session.

    Start and goal must be in bounds, carry their role ids, be the only
    tiles with those ids, and be path tiles with at least one open edge.
    """
    board = snapshot.board
    for pos, role in ((snapshot.start, START_ID), (snapshot.goal, GOAL_ID)):
        if not board.in_bounds(pos):
            return False
        if board.find(role) != [pos]:
            return False
        tile = board[pos]
        if not tile.is_path or not tile.open_directions:
            return False
    return snapshot.moves >= 0


class SnapshotStore:
    """Loads, saves, and clears per-day snapshots in a JSON file."""

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath
        self._entries: dict[str, dict[str, Any]] = {}
        self._load()

    # -- persistence ----------------------------------------------------------

    def _load(self) -> None:
        if not self.filepath.exists():
            return
        try:
            data = json.loads(self.filepath.read_text())
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable snapshot file %s: %s", self.filepath, exc)
            return
        if isinstance(data, dict):
            self._entries = {k: v for k, v in data.items() if isinstance(v, dict)}

    def _write(self) -> None:
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self.filepath.write_text(json.dumps(self._entries, indent=2) + "\n")

    # -- queries --------------------------------------------------------------

    def load(self, day_key: str) -> SessionSnapshot | None:
        """Return the stored snapshot for *day_key*.

        Raises ``ValueError`` when an entry exists but cannot be decoded.
        """
        raw = self._entries.get(day_key)
        if raw is None:
            return None
        return SessionSnapshot.from_dict(raw)

    def save(self, snapshot: SessionSnapshot) -> None:
        self._entries[snapshot.day_key] = snapshot.to_dict()
        self._write()

    def clear(self, day_key: str) -> None:
        if self._entries.pop(day_key, None) is not None:
            self._write()

    def days(self) -> list[str]:
        return sorted(self._entries)
