"""Gem placement along the route or on optional side spurs."""

from __future__ import annotations

import logging
from dataclasses import replace

from labyrinth.engine.generator.rng import SeededRandom
from labyrinth.engine.generator.route import turn_indices
from labyrinth.models.board import Direction, Position, Special, Tile

logger = logging.getLogger(__name__)

Grid = list[list[Tile]]


def gem_target(gem_count: int, route_length: int) -> int:
    return min(gem_count, route_length // 4)


def _in_bounds(grid: Grid, pos: Position) -> bool:
    return 0 <= pos.y < len(grid) and 0 <= pos.x < len(grid[0])


def place_route_gems(
    grid: Grid,
    route: list[Position],
    count: int,
    existing: int = 0,
) -> list[Position]:
    """Mark up to *count* route cells as locked gem tiles.

    Direction changes come first; if there are not enough of them the rest
    are spread evenly along the route. Start and goal never carry gems.
    """
    if count <= 0 or len(route) < 3:
        return []

    chosen: list[int] = []
    for i in turn_indices(route):
        if len(chosen) == count:
            break
        chosen.append(i)

    if len(chosen) < count:
        interior = [i for i in range(1, len(route) - 1) if i not in chosen]
        remaining = count - len(chosen)
        stride = max(1, len(interior) // (remaining + 1))
        for i in interior[stride - 1::stride]:
            if len(chosen) == count:
                break
            chosen.append(i)

    placed: list[Position] = []
    for i in sorted(chosen):
        pos = route[i]
        tile = grid[pos.y][pos.x]
        if tile.special == Special.GEM:
            continue
        grid[pos.y][pos.x] = replace(
            tile,
            special=Special.GEM,
            locked=True,
            id=f"gem-main-{existing + len(placed) + 1}",
        )
        placed.append(pos)
    return placed


def place_branch_gems(
    grid: Grid,
    route: list[Position],
    count: int,
    rng: SeededRandom,
) -> list[Position]:
    """Hang gems on one-cell dead-end spurs so collecting them is optional.

    Spurs attach to the middle 60% of the route. The spur tile opens only the
    edge back to its attachment and is locked; the attachment tile gains the
    edge toward the spur. Any shortfall is made up with gems on the route.
    """
    if count <= 0:
        return []

    on_route = set(route)
    taken: set[Position] = set()

    def free_directions(pos: Position) -> list[Direction]:
        out = []
        for d in Direction:
            cell = pos.step(d)
            if (
                _in_bounds(grid, cell)
                and not grid[cell.y][cell.x].is_path
                and cell not in on_route
                and cell not in taken
            ):
                out.append(d)
        return out

    lo, hi = int(len(route) * 0.2), int(len(route) * 0.8)
    anchors = [i for i in range(max(1, lo), min(hi, len(route) - 1)) if free_directions(route[i])]

    placed: list[Position] = []
    while anchors and len(placed) < count:
        index = rng.choice(anchors)
        anchors.remove(index)
        anchor = route[index]
        directions = free_directions(anchor)
        if not directions:
            continue
        direction = rng.choice(directions)
        spur = anchor.step(direction)
        grid[spur.y][spur.x] = Tile.path(
            f"gem-branch-{len(placed) + 1}",
            [direction.opposite],
            special=Special.GEM,
            locked=True,
        )
        grid[anchor.y][anchor.x] = grid[anchor.y][anchor.x].with_edge(direction, True)
        taken.add(spur)
        placed.append(spur)

    if len(placed) < count:
        logger.debug("Only %d of %d gem spurs fit, placing the rest on the route",
                     len(placed), count)
        placed.extend(place_route_gems(grid, route, count - len(placed), len(placed)))
    return placed


__all__ = ["gem_target", "place_route_gems", "place_branch_gems"]
