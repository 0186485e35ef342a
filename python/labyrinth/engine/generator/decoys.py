"""Decoy tiles that obscure the true route."""

from __future__ import annotations

from labyrinth.config import DEFAULT_CONFIG, EngineConfig
from labyrinth.engine.generator.rng import SeededRandom
from labyrinth.models.board import Direction, Position, Tile

Grid = list[list[Tile]]

# Straights and corners only; junctions would make the board noisy.
DECOY_SHAPES: tuple[tuple[Direction, Direction], ...] = (
    (Direction.NORTH, Direction.SOUTH),
    (Direction.EAST, Direction.WEST),
    (Direction.NORTH, Direction.EAST),
    (Direction.NORTH, Direction.WEST),
    (Direction.SOUTH, Direction.EAST),
    (Direction.SOUTH, Direction.WEST),
)


def decoy_density(
    template_density: float, rng: SeededRandom, config: EngineConfig = DEFAULT_CONFIG
) -> float:
    """Draw a density inside the configured band, pulled toward the template.

    The result is halfway between a uniform draw over the band and the
    template's density clamped into it, so every tier keeps some spread.
    """
    lo, hi = config.decoy_density_min, config.decoy_density_max
    anchor = min(hi, max(lo, template_density))
    return (rng.uniform(lo, hi) + anchor) / 2


def _cells(grid: Grid) -> list[Position]:
    return [Position(x, y) for y in range(len(grid)) for x in range(len(grid[0]))]


def _in_bounds(grid: Grid, pos: Position) -> bool:
    return 0 <= pos.y < len(grid) and 0 <= pos.x < len(grid[0])


def fill_decoys(
    grid: Grid,
    route: list[Position],
    density: float,
    rng: SeededRandom,
    config: EngineConfig = DEFAULT_CONFIG,
) -> int:
    """Scatter decoys over empty cells; returns the number of tiles placed.

    Where a decoy opens toward a route cell the edge is usually closed, so it
    almost connects; the rest are left open as alternative shortcuts.
    """
    on_route = set(route)
    placed = 0
    for pos in _cells(grid):
        if grid[pos.y][pos.x].is_path or not rng.chance(density):
            continue
        tile = Tile.path(f"decoy-{pos.x}-{pos.y}", rng.choice(DECOY_SHAPES))
        for direction in tile.open_directions:
            neighbour = pos.step(direction)
            if neighbour in on_route and rng.chance(config.decoy_trap_probability):
                tile = tile.with_edge(direction, False)
        grid[pos.y][pos.x] = tile
        placed += 1
    return placed


def lay_segments(
    grid: Grid,
    route: list[Position],
    rng: SeededRandom,
    config: EngineConfig = DEFAULT_CONFIG,
) -> list[list[Position]]:
    """Lay short connected runs that lead nowhere.

    Segments never overlap the route, gems or each other. A segment tile opens
    only the edges between consecutive segment cells.
    """
    blocked = set(route)
    blocked.update(
        p for p in _cells(grid) if grid[p.y][p.x].locked
    )
    segments: list[list[Position]] = []

    for index in range(rng.randint(*config.decoy_segments)):
        candidates = [p for p in _cells(grid) if p not in blocked]
        if not candidates:
            break
        length = rng.randint(*config.decoy_segment_length)
        walk = [rng.choice(candidates)]
        while len(walk) < length:
            options = [
                walk[-1].step(d)
                for d in Direction
                if _in_bounds(grid, walk[-1].step(d))
                and walk[-1].step(d) not in blocked
                and walk[-1].step(d) not in walk
            ]
            if not options:
                break
            walk.append(rng.choice(options))
        if len(walk) < 2:
            continue

        for i, pos in enumerate(walk):
            directions = []
            if i > 0:
                directions.append(Direction.between(pos, walk[i - 1]))
            if i < len(walk) - 1:
                directions.append(Direction.between(pos, walk[i + 1]))
            grid[pos.y][pos.x] = Tile.path(f"segment-{index + 1}-{i + 1}", directions)
        blocked.update(walk)
        segments.append(walk)
    return segments


__all__ = ["DECOY_SHAPES", "decoy_density", "fill_decoys", "lay_segments"]
