"""Tracks the state of a game in progress, including undo history."""

from __future__ import annotations

import time
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass

from labyrinth.models.board import Board, Position


@dataclass(frozen=True)
class Snapshot:
    board: Board
    start: Position
    goal: Position
    moves: int


class MoveHistory:
    """Bounded undo stack; the oldest snapshot is dropped when full.

    Boards are immutable and share untouched rows, so each snapshot costs
    little more than the rows a swap rebuilt.
    """

    def __init__(self, capacity: int) -> None:
        self._stack: deque[Snapshot] = deque(maxlen=capacity)

    def push(self, snapshot: Snapshot) -> None:
        self._stack.append(snapshot)

    def pop(self) -> Snapshot | None:
        return self._stack.pop() if self._stack else None

    def clear(self) -> None:
        self._stack.clear()

    def __len__(self) -> int:
        return len(self._stack)


class GameState:
    """Holds the current board, positions, move counter and elapsed time."""

    def __init__(
        self,
        board: Board,
        start: Position,
        goal: Position,
        history_capacity: int = 500,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.board = board
        self.start = start
        self.goal = goal
        self.moves: int = 0
        self.completed: bool = False
        self.history = MoveHistory(history_capacity)
        self._clock = clock
        self._start_time: float = clock()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (self._clock() - self._start_time)
        return self._elapsed_banked

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += self._clock() - self._start_time
            self._running = False

    def resume(self) -> None:
        if not self._running:
            self._start_time = self._clock()
            self._running = True

    def restore_elapsed(self, seconds: float) -> None:
        """Continue a clock saved in a snapshot."""
        self._elapsed_banked = seconds
        self._start_time = self._clock()

    # -- moves ----------------------------------------------------------------

    def snapshot(self) -> Snapshot:
        return Snapshot(self.board, self.start, self.goal, self.moves)

    def apply(self, board: Board) -> None:
        """Record the current position for undo, then move to *board*."""
        self.history.push(self.snapshot())
        self.board = board
        self.moves += 1

    def undo(self) -> bool:
        previous = self.history.pop()
        if previous is None:
            return False
        self.board = previous.board
        self.start = previous.start
        self.goal = previous.goal
        self.moves = previous.moves
        return True

    @property
    def can_undo(self) -> bool:
        return len(self.history) > 0
