"""Start/goal placement and the turn-biased route between them."""

from __future__ import annotations

import logging
import math

from labyrinth.config import DEFAULT_CONFIG, EngineConfig
from labyrinth.engine.generator.rng import SeededRandom
from labyrinth.models.board import Direction, Position

logger = logging.getLogger(__name__)


# -- endpoints ----------------------------------------------------------------


def _border_cells(rows: int, cols: int) -> list[Position]:
    return [
        Position(x, y)
        for y in range(rows)
        for x in range(cols)
        if x in (0, cols - 1) or y in (0, rows - 1)
    ]


def _interior_cells(rows: int, cols: int) -> list[Position]:
    return [Position(x, y) for y in range(1, rows - 1) for x in range(1, cols - 1)]


def min_separation(rows: int, cols: int) -> float:
    return max(3.0, math.sqrt(rows * cols))


def pick_endpoints(
    rows: int,
    cols: int,
    rng: SeededRandom,
    config: EngineConfig = DEFAULT_CONFIG,
) -> tuple[Position, Position]:
    """Choose start and goal cells far enough apart.

    Each endpoint lands on the border with ``config.edge_probability``,
    otherwise in the interior. Falls back to the bottom-left and top-right
    corners when no pair is found within the attempt budget.
    """
    border = _border_cells(rows, cols)
    interior = _interior_cells(rows, cols)
    needed = min_separation(rows, cols)

    def draw() -> Position:
        if not interior or rng.chance(config.edge_probability):
            return rng.choice(border)
        return rng.choice(interior)

    for _ in range(config.endpoint_attempts):
        start, goal = draw(), draw()
        if start != goal and start.distance(goal) >= needed:
            return start, goal

    logger.debug("No endpoint pair on %dx%d board, using corners", rows, cols)
    return Position(0, rows - 1), Position(cols - 1, 0)


# -- route --------------------------------------------------------------------


def count_turns(route: list[Position] | tuple[Position, ...]) -> int:
    turns = 0
    for a, b, c in zip(route, route[1:], route[2:]):
        if Direction.between(a, b) != Direction.between(b, c):
            turns += 1
    return turns


def turn_indices(route: list[Position] | tuple[Position, ...]) -> list[int]:
    """Indices of interior route cells where the direction changes."""
    return [
        i
        for i in range(1, len(route) - 1)
        if Direction.between(route[i - 1], route[i])
        != Direction.between(route[i], route[i + 1])
    ]


def l_route(start: Position, goal: Position) -> list[Position]:
    """Horizontal leg first, then vertical. Always connects."""
    route = [start]
    x, y = start.x, start.y
    dx = (goal.x > x) - (goal.x < x)
    while x != goal.x:
        x += dx
        route.append(Position(x, y))
    dy = (goal.y > y) - (goal.y < y)
    while y != goal.y:
        y += dy
        route.append(Position(x, y))
    return route


def _ordered_directions(
    rng: SeededRandom, last: Direction | None, prefer_turn: bool
) -> list[Direction]:
    directions = list(Direction)
    rng.shuffle(directions)
    if prefer_turn and last is not None:
        directions.sort(key=lambda d: d == last)
    return directions


def _search_route(
    rows: int,
    cols: int,
    start: Position,
    goal: Position,
    target: int,
    min_turns: int,
    rng: SeededRandom,
    config: EngineConfig,
) -> list[Position] | None:
    """One randomised depth-first attempt; ``None`` when the budget runs out."""
    min_length = math.ceil(target * config.route_accept_ratio)

    path = [start]
    turns = [0]
    last: list[Direction | None] = [None]
    visited = {start}
    stack = [iter(_ordered_directions(rng, None, min_turns > 0))]
    expansions = 0

    while stack:
        direction = next(stack[-1], None)
        if direction is None:
            stack.pop()
            visited.discard(path.pop())
            turns.pop()
            last.pop()
            continue

        cell = path[-1].step(direction)
        if not (0 <= cell.x < cols and 0 <= cell.y < rows) or cell in visited:
            continue
        turned = last[-1] is not None and direction != last[-1]
        cell_turns = turns[-1] + turned

        if cell == goal:
            if len(path) + 1 >= min_length and cell_turns >= min_turns:
                return path + [cell]
            continue
        # leave room to walk to the goal without exceeding the target
        if len(path) + 1 + cell.distance(goal) > target:
            continue

        expansions += 1
        if expansions > config.route_expansions:
            return None
        path.append(cell)
        visited.add(cell)
        turns.append(cell_turns)
        last.append(direction)
        stack.append(iter(_ordered_directions(rng, direction, cell_turns < min_turns)))

    return None


def build_route(
    rows: int,
    cols: int,
    start: Position,
    goal: Position,
    rng: SeededRandom,
    config: EngineConfig = DEFAULT_CONFIG,
) -> list[Position]:
    """Return a simple route of cells from *start* to *goal* (both included)."""
    area = rows * cols
    shortest = start.distance(goal) + 1
    for attempt in range(config.route_attempts):
        fill = rng.uniform(config.route_min_fill, config.route_max_fill)
        target = max(shortest, round(area * fill))
        min_turns = max(3, target // 6)
        route = _search_route(rows, cols, start, goal, target, min_turns, rng, config)
        if route is not None:
            logger.debug(
                "Route of %d cells, %d turns on attempt %d",
                len(route), count_turns(route), attempt + 1,
            )
            return route

    logger.info("Route search exhausted on %dx%d board, using L-route", rows, cols)
    return l_route(start, goal)


def route_edges(route: list[Position] | tuple[Position, ...]) -> dict[Position, set[Direction]]:
    """Open edges for each route cell: toward its predecessor and successor."""
    edges: dict[Position, set[Direction]] = {pos: set() for pos in route}
    for a, b in zip(route, route[1:]):
        direction = Direction.between(a, b)
        edges[a].add(direction)
        edges[b].add(direction.opposite)
    return edges


__all__ = [
    "pick_endpoints",
    "build_route",
    "l_route",
    "route_edges",
    "count_turns",
    "turn_indices",
    "min_separation",
]
