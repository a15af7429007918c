"""The windowed game: textures, drawing and the event loop."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Sequence

import pygame

from tilequest.game import TILE_SIZE, WINDOW_HEIGHT, WINDOW_WIDTH, Game, Key, Sprite
from tilequest.mapfile import MapError, is_valid_filename, load_map, validate_map

DEFAULT_ASSET_DIR = Path("asset")
TITLE = "tilequest"

_TEXTURE_FILES = {
    Sprite.WALL: "wall.xpm",
    Sprite.FLOOR: "floor.xpm",
    Sprite.CHARACTER: "character.xpm",
    Sprite.EXIT: "exit.xpm",
    Sprite.ITEM: "item.xpm",
    Sprite.CHARACTER_ON_EXIT: "character_e.xpm",
}

_PYGAME_KEYS = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_ESCAPE: Key.ESC,
}


@dataclass
class Textures:
    """One image for every sprite."""

    images: Mapping[Sprite, pygame.Surface]

    def __post_init__(self) -> None:
        missing = [sprite.name for sprite in Sprite if sprite not in self.images]
        if missing:
            raise ValueError(f"missing textures for: {', '.join(missing)}")

    def __getitem__(self, sprite: Sprite) -> pygame.Surface:
        return self.images[sprite]


def load_textures(asset_dir=DEFAULT_ASSET_DIR) -> Textures:
    """Load the sprite images from asset_dir; a missing file raises FileNotFoundError."""
    directory = Path(asset_dir)
    images = {}
    for sprite, name in _TEXTURE_FILES.items():
        path = directory / name
        if not path.is_file():
            raise FileNotFoundError(f"texture not found: {path}")
        images[sprite] = pygame.image.load(str(path))
    return Textures(images)


def draw(screen: pygame.Surface, textures: Textures, updates: Iterable) -> List[pygame.Rect]:
    """Blit each (sprite, y, x) update onto screen and return the changed areas."""
    return [
        screen.blit(textures[sprite], (x * TILE_SIZE, y * TILE_SIZE))
        for sprite, y, x in updates
    ]


def _keycode(pygame_key: int) -> Optional[int]:
    key = _PYGAME_KEYS.get(pygame_key)
    return None if key is None else int(key)


def run(path, asset_dir=DEFAULT_ASSET_DIR) -> Game:
    """Load and validate the map at path, then play it in a window until it ends."""
    game_map = load_map(path)
    validate_map(game_map)
    game = Game(game_map)
    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(TITLE)
        textures = load_textures(asset_dir)
        draw(screen, textures, game.initial_frame())
        pygame.display.flip()
        clock = pygame.time.Clock()
        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                elif event.type == pygame.KEYUP:
                    keycode = _keycode(event.key)
                    if keycode is None:
                        continue
                    changed = draw(screen, textures, game.handle_key(keycode))
                    if changed:
                        pygame.display.update(changed)
            clock.tick(60)
    finally:
        pygame.quit()
    return game


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: play the .ber map named by the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1 or not is_valid_filename(args[0]):
        sys.stderr.write("Usage : tilequest <location of map.ber>\n")
        return 1
    try:
        run(args[0])
    except MapError as exc:
        sys.stderr.write(f"Error\n{exc}\n")
        return 1
    except (OSError, pygame.error) as exc:
        sys.stderr.write(f"Error\n{exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())