"""Game state and movement rules for walking a tile map.

The player moves one tile at a time, cannot enter walls, picks up
collectibles by stepping on them, and wins by reaching the exit once every
collectible is taken. Every change is reported as a list of tile updates,
(sprite, y, x), that a renderer draws at (x * TILE_SIZE, y * TILE_SIZE).
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import List, Optional, Tuple

from tilequest.mapfile import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, GameMap

TILE_SIZE = 64
WINDOW_WIDTH = 2880
WINDOW_HEIGHT = 1620

Update = Tuple["Sprite", int, int]


class Sprite(IntEnum):
    """The images a tile can show."""

    FLOOR = 0
    CHARACTER = 1
    WALL = 2
    ITEM = 3
    EXIT = 4
    CHARACTER_ON_EXIT = 5


class Key(IntEnum):
    """Key codes the game reacts to (X11 keysyms)."""

    W = 119
    A = 97
    S = 115
    D = 100
    ESC = 65307
    LEFT = 65361
    UP = 65362
    RIGHT = 65363
    DOWN = 65364


class Direction(Enum):
    """A step on the grid as (dy, dx)."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def dy(self) -> int:
        return self.value[0]

    @property
    def dx(self) -> int:
        return self.value[1]


_KEY_DIRECTIONS = {
    Key.A: Direction.LEFT,
    Key.LEFT: Direction.LEFT,
    Key.W: Direction.UP,
    Key.UP: Direction.UP,
    Key.D: Direction.RIGHT,
    Key.RIGHT: Direction.RIGHT,
    Key.S: Direction.DOWN,
    Key.DOWN: Direction.DOWN,
}

_CELL_SPRITES = {
    WALL: Sprite.WALL,
    FLOOR: Sprite.FLOOR,
    PLAYER: Sprite.CHARACTER,
    COLLECTIBLE: Sprite.ITEM,
    EXIT: Sprite.EXIT,
}


def key_direction(keycode: int) -> Optional[Direction]:
    """The direction a key moves the player, or None for other keys."""
    try:
        key = Key(keycode)
    except ValueError:
        return None
    return _KEY_DIRECTIONS.get(key)


class Game:
    """A running game on one map."""

    def __init__(self, game_map: GameMap) -> None:
        self.map = game_map
        self.collectibles = game_map.counts.collectible
        self.running = True
        self.won = False
        game_map.find_player()

    @property
    def player(self) -> Tuple[int, int]:
        """The player's position as (y, x)."""
        return self.map.player_y, self.map.player_x

    def cell_at(self, y: int, x: int) -> str:
        """The map character at (y, x); positions outside the map read as walls."""
        grid = self.map.grid
        if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
            return grid[y][x]
        return WALL

    def initial_frame(self) -> List[Update]:
        """Updates that draw the whole map; unknown characters are not drawn."""
        frame = []
        for y, row in enumerate(self.map.grid[: self.map.height]):
            for x, cell in enumerate(row[: self.map.width]):
                sprite = _CELL_SPRITES.get(cell)
                if sprite is not None:
                    frame.append((sprite, y, x))
                if cell == PLAYER:
                    self.map.player_y, self.map.player_x = y, x
        return frame

    def move(self, direction: Direction) -> List[Update]:
        """Step the player one tile and return the tiles to redraw.

        A wall blocks the move and nothing changes. Reaching the exit with
        no collectibles left wins and ends the game.
        """
        if not self.running:
            return []
        y, x = self.player
        ty, tx = y + direction.dy, x + direction.dx
        target = self.cell_at(ty, tx)
        if target == WALL:
            return []
        if target == COLLECTIBLE:
            self.map.grid[ty][tx] = FLOOR
            self.collectibles -= 1
        left_behind = Sprite.EXIT if self.cell_at(y, x) == EXIT else Sprite.FLOOR
        updates: List[Update] = [(left_behind, y, x)]
        self.map.player_y, self.map.player_x = ty, tx
        if self.cell_at(ty, tx) == EXIT:
            updates.append((Sprite.CHARACTER_ON_EXIT, ty, tx))
            if self.collectibles == 0:
                self.won = True
                self.running = False
        else:
            updates.append((Sprite.CHARACTER, ty, tx))
        return updates

    def handle_key(self, keycode: int) -> List[Update]:
        """React to a key: move on movement keys, stop the game on Escape."""
        direction = key_direction(keycode)
        if direction is not None:
            return self.move(direction)
        if keycode == Key.ESC:
            self.running = False
        return []