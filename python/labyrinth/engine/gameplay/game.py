"""Core gameplay logic: processes swaps, undo and the win condition."""

from __future__ import annotations

import logging
from datetime import date

from labyrinth.config import DEFAULT_CONFIG, EngineConfig
from labyrinth.engine.gamestate import GameState
from labyrinth.engine.generator import PuzzleGenerator
from labyrinth.engine.generator.daily import daily_key, practice_seed
from labyrinth.engine.scoring import StarRating, rate
from labyrinth.engine.solver import Connection, check_connection, reachable
from labyrinth.models.board import Position
from labyrinth.models.puzzle import Difficulty, DifficultyProfile, Puzzle, PuzzleTemplate
from labyrinth.models.snapshot import SessionSnapshot, SnapshotStore, is_playable

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single puzzle session."""

    def __init__(
        self,
        seed: str | None = None,
        difficulty: Difficulty = Difficulty.MEDIUM,
        template: PuzzleTemplate | None = None,
        config: EngineConfig = DEFAULT_CONFIG,
    ) -> None:
        self.config = config
        self.generator = PuzzleGenerator(config)
        puzzle = self.generator.generate(seed or practice_seed(), difficulty, template)
        self._load_puzzle(puzzle)

    @classmethod
    def from_puzzle(cls, puzzle: Puzzle, config: EngineConfig = DEFAULT_CONFIG) -> GamePlay:
        """Create a session from an already generated puzzle."""
        obj = object.__new__(cls)
        obj.config = config
        obj.generator = PuzzleGenerator(config)
        obj._load_puzzle(puzzle)
        return obj

    @classmethod
    def for_day(
        cls,
        day: date,
        store: SnapshotStore | None = None,
        config: EngineConfig = DEFAULT_CONFIG,
    ) -> GamePlay:
        """Resume the stored session for *day*, or start that day's puzzle.

        A stored snapshot that cannot be decoded or fails the structural check
        is discarded and the puzzle is generated afresh.
        """
        generator = PuzzleGenerator(config)
        game = cls.from_puzzle(generator.generate_daily(day), config)
        game.day_key = daily_key(day)
        if store is None:
            return game

        try:
            snapshot = store.load(game.day_key)
        except ValueError as exc:
            logger.warning("Discarding undecodable snapshot for %s: %s", game.day_key, exc)
            store.clear(game.day_key)
            return game

        if snapshot is None:
            return game
        if snapshot.seed != game.puzzle.seed or not is_playable(snapshot):
            logger.warning("Stored snapshot for %s is broken, regenerating", game.day_key)
            store.clear(game.day_key)
            return game

        game._resume(snapshot)
        return game

    # -- setup ----------------------------------------------------------------

    def _load_puzzle(self, puzzle: Puzzle) -> None:
        self.puzzle = puzzle
        self.profile: DifficultyProfile = puzzle.profile
        self.day_key: str | None = None
        self.state = GameState(
            puzzle.board,
            puzzle.start,
            puzzle.goal,
            history_capacity=self.config.history_capacity,
        )
        self._connection = check_connection(self.state.board, puzzle.start, puzzle.goal)
        self._settle()

    def _resume(self, snapshot: SessionSnapshot) -> None:
        self.profile = snapshot.profile
        self.state.board = snapshot.board
        self.state.start = snapshot.start
        self.state.goal = snapshot.goal
        self.state.moves = snapshot.moves
        self.state.restore_elapsed(snapshot.elapsed)
        self._connection = check_connection(snapshot.board, snapshot.start, snapshot.goal)
        self._settle()

    def _settle(self) -> None:
        if self._connection.connected and not self.state.completed:
            self.state.completed = True
            self.state.pause()

    # -- player intents -------------------------------------------------------

    def can_swap(self, a: Position, b: Position) -> bool:
        board = self.state.board
        return (
            not self.state.completed
            and a != b
            and board.in_bounds(a)
            and board.in_bounds(b)
            and board.is_movable(a)
            and board.is_movable(b)
        )

    def swap(self, a: Position, b: Position) -> bool:
        """Swap the tiles at *a* and *b*.

        Returns True if the swap was valid and applied. Locked, empty,
        start/goal and out-of-bounds cells are rejected, as is swapping a
        cell with itself or playing on after completion.
        """
        if not self.can_swap(a, b):
            return False
        self.state.apply(self.state.board.swapped(a, b))
        self._connection = check_connection(self.state.board, self.state.start, self.state.goal)
        self._settle()
        return True

    def undo(self) -> bool:
        if not self.state.undo():
            return False
        if self.state.completed:
            self.state.completed = False
            self.state.resume()
        self._connection = check_connection(self.state.board, self.state.start, self.state.goal)
        self._settle()
        return True

    def new_puzzle(
        self,
        seed: str | None = None,
        difficulty: Difficulty | None = None,
    ) -> None:
        difficulty = difficulty or self.puzzle.template.difficulty
        self._load_puzzle(self.generator.generate(seed or practice_seed(), difficulty))

    # -- queries --------------------------------------------------------------

    @property
    def connection(self) -> Connection:
        return self._connection

    @property
    def is_won(self) -> bool:
        return self.state.completed

    @property
    def gems_collected(self) -> int:
        """Gems a walker from the start can currently reach."""
        cells = reachable(self.state.board, self.state.start)
        return sum(1 for pos in self.puzzle.gems if pos in cells)

    @property
    def rating(self) -> StarRating:
        return rate(self.state.completed, self.state.moves, self.profile, self.gems_collected)

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            day_key=self.day_key or self.puzzle.seed,
            seed=self.puzzle.seed,
            board=self.state.board,
            start=self.state.start,
            goal=self.state.goal,
            moves=self.state.moves,
            elapsed=round(self.state.elapsed_time, 2),
            completed=self.state.completed,
            gems_collected=self.gems_collected,
            stars=self.rating.stars,
            profile=self.profile,
        )
