"""Swap-distance estimator.

Breadth-first search over the boards reachable by swapping two movable
tiles. The search is capped by a state budget and a depth limit, so on
larger boards the result is an upper-bound approximation (or the fallback
constant), not a true minimum.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Iterable

from labyrinth.config import DEFAULT_CONFIG, EngineConfig
from labyrinth.engine.solver.connectivity import check_connection, covers_gems
from labyrinth.models.board import Board, Position

logger = logging.getLogger(__name__)


def _state_key(board: Board, movable: list[Position]) -> tuple:
    return tuple(board[p].signature for p in movable)


def _search(
    board: Board,
    is_solved: Callable[[Board], bool],
    max_depth: int,
    max_states: int,
    fallback: int,
) -> int:
    if is_solved(board):
        return 0

    movable = board.movable_positions()
    pairs = [
        (a, b)
        for i, a in enumerate(movable)
        for b in movable[i + 1:]
    ]
    seen = {_state_key(board, movable)}
    queue: deque[tuple[Board, int]] = deque([(board, 0)])

    while queue:
        state, depth = queue.popleft()
        if depth >= max_depth:
            continue
        for a, b in pairs:
            if state[a].signature == state[b].signature:
                continue
            child = state.swapped(a, b)
            key = _state_key(child, movable)
            if key in seen:
                continue
            if is_solved(child):
                return depth + 1
            if len(seen) >= max_states:
                logger.debug("Swap search hit the %d-state cap", max_states)
                return fallback
            seen.add(key)
            queue.append((child, depth + 1))

    logger.debug("Swap search exhausted within depth %d", max_depth)
    return fallback


def min_swaps_to_solve(
    board: Board,
    start: Position,
    goal: Position,
    config: EngineConfig = DEFAULT_CONFIG,
) -> int:
    """Estimated swaps until *start* connects to *goal*."""
    return _search(
        board,
        lambda b: check_connection(b, start, goal).connected,
        config.estimator_goal_depth,
        config.estimator_max_states,
        config.estimator_fallback,
    )


def min_swaps_to_collect_all_gems(
    board: Board,
    start: Position,
    goal: Position,
    gems: Iterable[Position] | None = None,
    config: EngineConfig = DEFAULT_CONFIG,
) -> int:
    """Estimated swaps until a walk from *start* passes every gem and reaches *goal*."""
    gem_cells = tuple(board.gem_positions() if gems is None else gems)
    return _search(
        board,
        lambda b: covers_gems(b, start, goal, gem_cells),
        config.estimator_gem_depth,
        config.estimator_max_states,
        config.estimator_fallback,
    )


__all__ = ["min_swaps_to_solve", "min_swaps_to_collect_all_gems"]
