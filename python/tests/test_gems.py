"""Gem placement tests."""

from __future__ import annotations

from boards import P
from labyrinth.engine.generator.gems import gem_target, place_branch_gems, place_route_gems
from labyrinth.engine.generator.rng import create_rng
from labyrinth.engine.generator.route import l_route, route_edges
from labyrinth.engine.solver.connectivity import covers_gems
from labyrinth.models.board import Board, Direction, Special, Tile


def _grid_with_route(rows, cols, route):
    grid = Board.blank(rows, cols).to_grid()
    for i, (pos, directions) in enumerate(route_edges(route).items()):
        grid[pos.y][pos.x] = Tile.path(f"route-{i}", sorted(directions))
    return grid


def test_gem_target_scales_with_route_length():
    assert gem_target(3, 7) == 1
    assert gem_target(3, 16) == 3
    assert gem_target(1, 2) == 0


def test_route_gems_prefer_turns():
    route = l_route(P(0, 0), P(3, 3))
    grid = _grid_with_route(4, 4, route)

    placed = place_route_gems(grid, route, 1)

    assert placed == [P(3, 0)]
    tile = grid[0][3]
    assert tile.id == "gem-main-1"
    assert tile.special == Special.GEM
    assert tile.locked
    assert tile.open_directions == (Direction.SOUTH, Direction.WEST)


def test_route_gems_never_on_endpoints():
    route = l_route(P(0, 0), P(3, 0))
    grid = _grid_with_route(1, 4, route)
    placed = place_route_gems(grid, route, 4)
    assert P(0, 0) not in placed and P(3, 0) not in placed
    assert placed


def test_branch_gems_hang_off_the_route():
    route = l_route(P(0, 2), P(4, 2))
    grid = _grid_with_route(5, 5, route)

    placed = place_branch_gems(grid, route, 2, create_rng("spurs"))

    assert len(placed) == 2
    for n, spur in enumerate(placed, start=1):
        tile = grid[spur.y][spur.x]
        assert spur not in route
        assert tile.id == f"gem-branch-{n}"
        assert tile.locked and tile.special == Special.GEM
        (back,) = tile.open_directions
        anchor = spur.step(back)
        assert anchor in route[1:-1]
        assert grid[anchor.y][anchor.x].is_open(back.opposite)

    board = Board.from_rows(grid)
    assert covers_gems(board, route[0], route[-1], placed)


def test_branch_gems_fall_back_to_route():
    route = l_route(P(0, 0), P(3, 0))
    grid = _grid_with_route(1, 4, route)

    placed = place_branch_gems(grid, route, 1, create_rng("flat"))

    assert placed == [P(1, 0)]
    assert grid[0][1].id == "gem-main-1"
