"""Loading and validating tile maps stored in .ber files.

A map is a rectangle of characters: '1' wall, '0' floor, 'C' collectible,
'E' exit and 'P' the player's start. A valid map has at least one
collectible, exactly one exit and one start, equal-length rows, and walls
all around its border.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import takewhile
from typing import Iterable, List, Sequence, Tuple

from tilequest.linereader import read_lines
from tilequest.textlib.strings import strstr

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
MAP_EXTENSION = ".ber"


class MapError(Exception):
    """A map file could not be read or is not a valid map."""


@dataclass
class Counts:
    """How many collectibles, exits and starts a map holds."""

    collectible: int = 0
    exit: int = 0
    start: int = 0


@dataclass
class GameMap:
    """A loaded map: its grid of cells, its size and the player's position."""

    grid: List[List[str]]
    width: int
    height: int
    counts: Counts = field(default_factory=Counts)
    player_x: int = 0
    player_y: int = 0

    def find_player(self) -> Tuple[int, int]:
        """Locate the start cell, store it as the player's position, return (y, x).

        When several start cells exist, the last one in reading order wins.
        """
        found = None
        for y, row in enumerate(self.grid[: self.height]):
            for x, cell in enumerate(row[: self.width]):
                if cell == PLAYER:
                    found = (y, x)
        if found is None:
            raise MapError("map has no player start")
        self.player_y, self.player_x = found
        return found


def is_valid_filename(filename: str) -> bool:
    """True when the name contains the map extension."""
    return strstr(filename, MAP_EXTENSION) is not None


def count_props(lines: Iterable[Iterable[str]]) -> Counts:
    """Count collectibles, exits and starts across all lines."""
    counts = Counts()
    for line in lines:
        for c in line:
            if c == COLLECTIBLE:
                counts.collectible += 1
            elif c == EXIT:
                counts.exit += 1
            elif c == PLAYER:
                counts.start += 1
    return counts


def _row_length(row: Iterable[str]) -> int:
    return sum(1 for _ in takewhile(lambda c: c != "\n", row))


def check_form(grid: Sequence[Sequence[str]]) -> bool:
    """True when every row has the same length, not counting a newline."""
    lengths = {_row_length(row) for row in grid}
    return len(lengths) <= 1


def _cell(grid: Sequence[Sequence[str]], y: int, x: int) -> str:
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return ""


def check_close(grid: Sequence[Sequence[str]], width: int, height: int) -> bool:
    """True when the first and last rows and columns are all walls."""
    if width <= 0 or height <= 0:
        return False
    top_and_bottom = all(
        _cell(grid, y, x) == WALL for y in (0, height - 1) for x in range(width)
    )
    sides = all(
        _cell(grid, y, x) == WALL for y in range(height) for x in (0, width - 1)
    )
    return top_and_bottom and sides


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


def load_map(path) -> GameMap:
    """Read a map file into a GameMap without validating it."""
    try:
        lines = read_lines(path)
    except OSError as exc:
        raise MapError(f"cannot open map {path}: {exc}") from exc
    if not lines:
        raise MapError(f"map {path} is empty")
    grid = [list(_strip_newline(line)) for line in lines]
    return GameMap(
        grid=grid,
        width=len(grid[0]),
        height=len(grid),
        counts=count_props(lines),
    )


def validate_map(game_map: GameMap) -> None:
    """Raise MapError unless the map's contents, shape and border are valid."""
    counts = game_map.counts
    if counts.collectible <= 0:
        raise MapError("Map not valid: no collectible")
    if counts.exit != 1:
        raise MapError("Map not valid: there must be exactly one exit")
    if counts.start != 1:
        raise MapError("Map not valid: there must be exactly one start")
    if not check_form(game_map.grid):
        raise MapError("Map not valid: map is not rectangular")
    if not check_close(game_map.grid, game_map.width, game_map.height):
        raise MapError("Map not valid: map is not closed by walls")