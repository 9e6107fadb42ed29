"""Loading and validating ``.ber`` game maps."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Union

from solong.linereader import read_lines
from solong.strings import split

BER_EXTENSION = ".ber"

Position = tuple[int, int]
PathLike = Union[str, "os.PathLike[str]"]


class MapError(Exception):
    """Raised when a map cannot be read or does not describe a playable map."""


class Tile(str, Enum):
    """The symbols a map may contain."""

    WALL = "1"
    SPACE = "0"
    PLAYER = "P"
    EXIT = "E"
    COLLECTIBLE = "C"

    def __str__(self) -> str:
        return self.value


_SYMBOLS = frozenset(tile.value for tile in Tile)


@dataclass
class GameMap:
    """A rectangular grid of tiles, indexed by ``(x, y)``."""

    grid: list[list[Tile]]

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def height(self) -> int:
        return len(self.grid)

    def __getitem__(self, position: Position) -> Tile:
        x, y = position
        return self.grid[y][x]

    def __setitem__(self, position: Position, tile: Tile) -> None:
        x, y = position
        self.grid[y][x] = tile

    def in_bounds(self, position: Position) -> bool:
        """True when ``position`` lies inside the grid."""
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    def tiles(self) -> Iterator[tuple[Position, Tile]]:
        """Yield every position with its tile, row by row."""
        for y, row in enumerate(self.grid):
            for x, tile in enumerate(row):
                yield (x, y), tile

    def count(self, tile: Tile) -> int:
        """Number of cells holding ``tile``."""
        return sum(row.count(tile) for row in self.grid)

    def find(self, tile: Tile) -> Position | None:
        """First position holding ``tile`` in row-major order, or None."""
        return next((pos for pos, cell in self.tiles() if cell == tile), None)

    def copy(self) -> "GameMap":
        """An independent copy of the map."""
        return GameMap([list(row) for row in self.grid])

    def __str__(self) -> str:
        return "\n".join("".join(tile.value for tile in row) for row in self.grid)


def has_ber_extension(path: PathLike) -> bool:
    """True when ``path`` ends with ``.ber``."""
    return os.fspath(path).endswith(BER_EXTENSION)


def read_map_text(path: PathLike) -> str:
    """Read the whole map file; an unreadable or empty file raises MapError."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as stream:
            text = "".join(read_lines(stream))
    except OSError as exc:
        raise MapError("Failed to open file") from exc
    if not text:
        raise MapError("Wrong lecture map")
    return text


def _check_rectangle(rows: list[str]) -> None:
    expected = len(rows[0])
    if any(len(row) != expected for row in rows):
        raise MapError("Map must be a rectangle or a square")


def _check_closed_line(row: str) -> None:
    if any(ch != Tile.WALL.value for ch in row):
        raise MapError("Map line not close")


def _check_closed_sides(row: str) -> None:
    if row[0] != Tile.WALL.value or row[-1] != Tile.WALL.value:
        raise MapError("Map column not close")


def _check_symbols(row: str) -> None:
    if any(ch not in _SYMBOLS for ch in row):
        raise MapError("Unknown symbol(s) in map")


def parse_map(text: str) -> GameMap:
    """Build a map from its text and check that it is closed, valid and solvable.

    Empty lines are ignored.
    """
    from solong.solver import is_solvable

    rows = split(text, "\n")
    if not rows:
        raise MapError("Wrong lecture map")
    _check_rectangle(rows)
    _check_closed_line(rows[0])
    for row in rows[1:]:
        _check_closed_sides(row)
        _check_symbols(row)
    _check_closed_line(rows[-1])

    game_map = GameMap([[Tile(ch) for ch in row] for row in rows])
    if not is_solvable(game_map):
        raise MapError("Map is not solvable")
    if (
        game_map.count(Tile.COLLECTIBLE) == 0
        or game_map.count(Tile.EXIT) != 1
        or game_map.count(Tile.PLAYER) != 1
    ):
        raise MapError("Need 1 Player/Exit and at least 1 Object")
    return game_map


def load_map(path: PathLike) -> GameMap:
    """Read and validate the map stored at ``path``, which must end in ``.ber``."""
    if not has_ber_extension(path):
        raise MapError("No correct format map founded")
    return parse_map(read_map_text(path))