"""Start-to-goal connectivity over directional tiles."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from labyrinth.models.board import Board, Direction, Position


@dataclass(frozen=True)
class Connection:
    connected: bool
    path: tuple[Position, ...] = ()


def can_step(board: Board, a: Position, b: Position) -> bool:
    """Return True if a walker may move from *a* to the adjacent cell *b*.

    Both cells must hold path tiles and both facing edges must be open; an
    edge opened on one side only does not connect.
    """
    direction = Direction.between(a, b)
    if direction is None or not (board.in_bounds(a) and board.in_bounds(b)):
        return False
    here, there = board[a], board[b]
    if not (here.is_path and there.is_path):
        return False
    return here.is_open(direction) and there.is_open(direction.opposite)


def _steps(board: Board, pos: Position) -> list[Position]:
    nexts = (pos.step(d) for d in board[pos].open_directions)
    return [nxt for nxt in nexts if can_step(board, pos, nxt)]


def check_connection(board: Board, start: Position, goal: Position) -> Connection:
    """Depth-first search from *start* to *goal*.

    On success ``path`` is the DFS branch that reached the goal, which is a
    valid walk but not necessarily the shortest one.
    """
    if not (board.in_bounds(start) and board.in_bounds(goal)):
        return Connection(False)
    if not board[start].is_path:
        return Connection(False)
    if start == goal:
        return Connection(True, (start,))

    path = [start]
    visited = {start}
    stack = [iter(_steps(board, start))]
    while stack:
        nxt = next(stack[-1], None)
        if nxt is None:
            stack.pop()
            path.pop()
            continue
        if nxt in visited:
            continue
        visited.add(nxt)
        path.append(nxt)
        if nxt == goal:
            return Connection(True, tuple(path))
        stack.append(iter(_steps(board, nxt)))
    return Connection(False)


def reachable(board: Board, start: Position) -> set[Position]:
    """Every cell a walker starting on *start* can reach."""
    if not (board.in_bounds(start) and board[start].is_path):
        return set()
    seen = {start}
    frontier = [start]
    while frontier:
        pos = frontier.pop()
        for nxt in _steps(board, pos):
            if nxt not in seen:
                seen.add(nxt)
                frontier.append(nxt)
    return seen


def covers_gems(
    board: Board, start: Position, goal: Position, gems: Iterable[Position]
) -> bool:
    """One traversal from *start* that reaches *goal* having passed every gem.

    The traversal walks the reachable component depth-first and records the
    gem cells it passes; it does not look for an optimal visiting order.
    """
    pending = set(gems)
    if not (board.in_bounds(start) and board[start].is_path):
        return False
    reached_goal = start == goal
    pending.discard(start)
    seen = {start}
    stack = [start]
    while stack:
        pos = stack.pop()
        for nxt in _steps(board, pos):
            if nxt in seen:
                continue
            seen.add(nxt)
            pending.discard(nxt)
            if nxt == goal:
                reached_goal = True
            stack.append(nxt)
        if reached_goal and not pending:
            return True
    return reached_goal and not pending


__all__ = ["Connection", "can_step", "check_connection", "reachable", "covers_gems"]
