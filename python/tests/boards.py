"""Build small boards from box-drawing layouts for tests.

Each character is one cell: ``.`` is empty, box-drawing glyphs are path
tiles opening toward the arms they draw::

    make_board(["╶─╴"], start=(0, 0), goal=(2, 0))
"""

from __future__ import annotations

from labyrinth.models.board import (
    GOAL_ID,
    START_ID,
    Board,
    Direction,
    Position,
    Special,
    Tile,
)

N, S, E, W = Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST

GLYPHS: dict[str, tuple[Direction, ...]] = {
    "□": (),
    "╵": (N,),
    "╷": (S,),
    "╶": (E,),
    "╴": (W,),
    "│": (N, S),
    "─": (E, W),
    "└": (N, E),
    "┘": (N, W),
    "┌": (S, E),
    "┐": (S, W),
    "├": (N, S, E),
    "┤": (N, S, W),
    "┴": (N, E, W),
    "┬": (S, E, W),
    "┼": (N, S, E, W),
}


def make_board(
    layout: list[str],
    start: tuple[int, int] | None = None,
    goal: tuple[int, int] | None = None,
    gems: tuple[tuple[int, int], ...] = (),
    locked: tuple[tuple[int, int], ...] = (),
) -> Board:
    rows: list[list[Tile]] = []
    for y, line in enumerate(layout):
        row: list[Tile] = []
        for x, ch in enumerate(line):
            if ch == ".":
                row.append(Tile.empty(f"empty-{x}-{y}"))
                continue
            tile_id = f"t-{x}-{y}"
            if (x, y) == start:
                tile_id = START_ID
            elif (x, y) == goal:
                tile_id = GOAL_ID
            row.append(
                Tile.path(
                    tile_id,
                    GLYPHS[ch],
                    special=Special.GEM if (x, y) in gems else None,
                    locked=(x, y) in gems or (x, y) in locked,
                )
            )
        rows.append(row)
    return Board.from_rows(rows)


def P(x: int, y: int) -> Position:
    return Position(x, y)
