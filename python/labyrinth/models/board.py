"""Board model for the daily labyrinth puzzle."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Any

START_ID = "start-tile"
GOAL_ID = "goal-tile"


class Direction(StrEnum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @property
    def offset(self) -> tuple[int, int]:
        """``(dx, dy)`` of a single step; y grows downwards."""
        return _OFFSETS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @classmethod
    def between(cls, a: Position, b: Position) -> Direction | None:
        """Direction of the step from *a* to *b*, or ``None`` if not adjacent."""
        return _BY_OFFSET.get((b.x - a.x, b.y - a.y))


_OFFSETS = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}
_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}
_BY_OFFSET = {offset: d for d, offset in _OFFSETS.items()}


class TileKind(StrEnum):
    EMPTY = "empty"
    PATH = "path"


class Special(StrEnum):
    GEM = "gem"
    KEY = "key"
    TIME = "time"


@dataclass(frozen=True, order=True)
class Position:
    x: int
    y: int

    def step(self, direction: Direction) -> Position:
        dx, dy = direction.offset
        return Position(self.x + dx, self.y + dy)

    def distance(self, other: Position) -> int:
        """Manhattan distance."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def to_dict(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Position:
        try:
            return cls(x=int(data["x"]), y=int(data["y"]))
        except (KeyError, TypeError) as exc:
            raise ValueError(f"Malformed position: {data!r}") from exc


@dataclass(frozen=True)
class Tile:
    """A single grid cell.

    Tiles are immutable; edits go through :meth:`with_edge` and friends so a
    tile can be shared between successive boards.
    """

    id: str
    kind: TileKind = TileKind.EMPTY
    north: bool = False
    south: bool = False
    east: bool = False
    west: bool = False
    special: Special | None = None
    locked: bool = False

    def __post_init__(self) -> None:
        if self.kind == TileKind.EMPTY and (self.open_directions or self.special):
            raise ValueError(
                f"Empty tile {self.id!r} cannot have open edges or a special marker."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def empty(cls, tile_id: str) -> Tile:
        return cls(id=tile_id)

    @classmethod
    def path(
        cls,
        tile_id: str,
        directions: Iterable[Direction] = (),
        special: Special | None = None,
        locked: bool = False,
    ) -> Tile:
        """Create a path tile with the given *directions* open.

        Example::

            Tile.path("route-3", [Direction.NORTH, Direction.EAST])
        """
        edges = {d.value: True for d in directions}
        return cls(
            id=tile_id,
            kind=TileKind.PATH,
            special=special,
            locked=locked,
            **edges,
        )

    def with_edge(self, direction: Direction, is_open: bool) -> Tile:
        return replace(self, **{direction.value: is_open})

    def with_id(self, tile_id: str) -> Tile:
        return replace(self, id=tile_id)

    # -- queries --------------------------------------------------------------

    @property
    def is_path(self) -> bool:
        return self.kind == TileKind.PATH

    def is_open(self, direction: Direction) -> bool:
        return getattr(self, direction.value)

    @property
    def open_directions(self) -> tuple[Direction, ...]:
        return tuple(d for d in Direction if getattr(self, d.value))

    @property
    def signature(self) -> tuple:
        """Everything that matters for play, i.e. the tile minus its id."""
        return (
            self.kind,
            self.north,
            self.south,
            self.east,
            self.west,
            self.special,
            self.locked,
        )

    # -- serialisation --------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.kind.value,
            "connections": {d.value: self.is_open(d) for d in Direction},
            "special": self.special.value if self.special else None,
            "locked": self.locked,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Tile:
        try:
            connections = data.get("connections") or {}
            special = data.get("special")
            return cls(
                id=str(data["id"]),
                kind=TileKind(data["type"]),
                special=Special(special) if special else None,
                locked=bool(data.get("locked", False)),
                **{d.value: bool(connections.get(d.value, False)) for d in Direction},
            )
        except (KeyError, TypeError, AttributeError) as exc:
            raise ValueError(f"Malformed tile: {data!r}") from exc


@dataclass(frozen=True)
class Board:
    """Represents the puzzle grid.

    Tiles are stored as a tuple of row tuples, addressed ``tiles[y][x]``.
    Boards never change; :meth:`swapped` returns a new board that shares
    every untouched row with its parent.
    """

    tiles: tuple[tuple[Tile, ...], ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Tile]]) -> Board:
        """Freeze a mutable grid (list of rows) into a board."""
        tiles = tuple(tuple(row) for row in rows)
        if not tiles or not tiles[0]:
            raise ValueError("A board needs at least one row and one column.")
        width = len(tiles[0])
        if any(len(row) != width for row in tiles):
            raise ValueError("All board rows must have the same length.")
        return cls(tiles=tiles)

    @classmethod
    def blank(cls, rows: int, cols: int) -> Board:
        return cls.from_rows(
            [[Tile.empty(f"empty-{x}-{y}") for x in range(cols)] for y in range(rows)]
        )

    # -- queries --------------------------------------------------------------

    @property
    def rows(self) -> int:
        return len(self.tiles)

    @property
    def cols(self) -> int:
        return len(self.tiles[0])

    @property
    def area(self) -> int:
        return self.rows * self.cols

    def __getitem__(self, pos: Position) -> Tile:
        return self.tiles[pos.y][pos.x]

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.x < self.cols and 0 <= pos.y < self.rows

    def positions(self) -> Iterator[Position]:
        for y in range(self.rows):
            for x in range(self.cols):
                yield Position(x, y)

    def find(self, tile_id: str) -> list[Position]:
        return [p for p in self.positions() if self[p].id == tile_id]

    def is_movable(self, pos: Position) -> bool:
        """Path tiles without the start/goal role that are not locked."""
        tile = self[pos]
        return tile.is_path and not tile.locked and tile.id not in (START_ID, GOAL_ID)

    def movable_positions(self) -> list[Position]:
        return [p for p in self.positions() if self.is_movable(p)]

    def gem_positions(self) -> list[Position]:
        return [p for p in self.positions() if self[p].special == Special.GEM]

    def signature(self) -> tuple:
        return tuple(tile.signature for row in self.tiles for tile in row)

    # -- derived boards -------------------------------------------------------

    def swapped(self, a: Position, b: Position) -> Board:
        rows = list(self.tiles)
        tile_a, tile_b = self[a], self[b]
        row_a = list(rows[a.y])
        row_a[a.x] = tile_b
        rows[a.y] = tuple(row_a)
        row_b = list(rows[b.y])
        row_b[b.x] = tile_a
        rows[b.y] = tuple(row_b)
        return Board(tiles=tuple(rows))

    def replaced(self, pos: Position, tile: Tile) -> Board:
        rows = list(self.tiles)
        row = list(rows[pos.y])
        row[pos.x] = tile
        rows[pos.y] = tuple(row)
        return Board(tiles=tuple(rows))

    def to_grid(self) -> list[list[Tile]]:
        """Return a mutable copy (tiles themselves are shared)."""
        return [list(row) for row in self.tiles]

    # -- serialisation --------------------------------------------------------

    def to_dict(self) -> list[list[dict[str, Any]]]:
        return [[tile.to_dict() for tile in row] for row in self.tiles]

    @classmethod
    def from_dict(cls, data: list[list[dict[str, Any]]]) -> Board:
        if not isinstance(data, list) or not all(isinstance(r, list) for r in data):
            raise ValueError("Board data must be a list of rows.")
        return cls.from_rows([[Tile.from_dict(t) for t in row] for row in data])
