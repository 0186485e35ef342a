"""Scrambles a solved board while keeping it solvable."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from labyrinth.config import DEFAULT_CONFIG, EngineConfig
from labyrinth.engine.generator.difficulty import scramble_multiplier
from labyrinth.engine.generator.rng import SeededRandom
from labyrinth.engine.solver.connectivity import check_connection
from labyrinth.models.board import GOAL_ID, START_ID, Board, Position
from labyrinth.models.puzzle import Difficulty

logger = logging.getLogger(__name__)

Swap = tuple[Position, Position]


@dataclass(frozen=True)
class ScrambleResult:
    board: Board
    swaps: tuple[Swap, ...]
    attempts: int
    fallback: bool = False


def swap_budget(movable: int, difficulty: Difficulty) -> int:
    return round(max(8, 0.7 * movable) * scramble_multiplier(difficulty))


def unscramble(board: Board, swaps: tuple[Swap, ...] | list[Swap]) -> Board:
    """Replay *swaps* backwards, undoing them."""
    for a, b in reversed(swaps):
        board = board.swapped(a, b)
    return board


def is_solvable(
    board: Board, swaps: tuple[Swap, ...] | list[Swap], start: Position, goal: Position
) -> bool:
    """True if undoing the recorded swaps reconnects *start* and *goal*."""
    return check_connection(unscramble(board, swaps), start, goal).connected


def _random_swap(movable: list[Position], rng: SeededRandom) -> Swap:
    i = rng.randint(0, len(movable) - 1)
    j = rng.randint(0, len(movable) - 2)
    if j >= i:
        j += 1
    return movable[i], movable[j]


def _restamp(board: Board, solved: Board, start: Position, goal: Position) -> Board:
    """Put the start/goal roles back on their coordinates.

    A role tile that is no longer a usable path tile is replaced by the
    solved board's tile at that cell.
    """
    for pos, role in ((start, START_ID), (goal, GOAL_ID)):
        tile = board[pos]
        if not tile.is_path or not tile.open_directions:
            logger.warning("Role tile %s at %s unusable, restoring it", role, pos)
            tile = solved[pos]
        if tile.id != role:
            tile = tile.with_id(role)
        board = board.replaced(pos, tile)
    return board


def scramble(
    solved: Board,
    start: Position,
    goal: Position,
    difficulty: Difficulty,
    rng: SeededRandom,
    config: EngineConfig = DEFAULT_CONFIG,
) -> ScrambleResult:
    """Permute the movable tiles of *solved* with random pairwise swaps.

    Every swap is its own inverse, so replaying the recorded swaps backwards
    always restores *solved*; the swaps are returned as that witness (see
    :func:`is_solvable`). An attempt is therefore kept exactly when the
    scrambled board is not already connected. An attempt that leaves the
    route intact gets a few corrective swaps to break it. When every attempt
    fails the solved board itself is returned.
    """
    movable = solved.movable_positions()
    if len(movable) < 2:
        logger.info("Fewer than two movable tiles, nothing to scramble")
        return ScrambleResult(_restamp(solved, solved, start, goal), (), 0, fallback=True)

    budget = swap_budget(len(movable), difficulty)

    for attempt in range(1, config.scramble_attempts + 1):
        board = solved
        swaps: list[Swap] = []
        for _ in range(budget):
            a, b = _random_swap(movable, rng)
            board = board.swapped(a, b)
            swaps.append((a, b))

        corrections = 0
        while (
            check_connection(board, start, goal).connected
            and corrections < config.corrective_swaps
        ):
            a, b = _random_swap(movable, rng)
            board = board.swapped(a, b)
            swaps.append((a, b))
            corrections += 1

        if check_connection(board, start, goal).connected:
            continue

        logger.debug("Scrambled with %d swaps on attempt %d", len(swaps), attempt)
        return ScrambleResult(_restamp(board, solved, start, goal), tuple(swaps), attempt)

    logger.info("No usable scramble in %d attempts, keeping the solved board",
                config.scramble_attempts)
    return ScrambleResult(
        _restamp(solved, solved, start, goal), (), config.scramble_attempts, fallback=True
    )


__all__ = ["ScrambleResult", "scramble", "swap_budget", "unscramble", "is_solvable"]
