import pygame
import pytest

from tilequest.app import Textures, draw, load_textures, main
from tilequest.game import TILE_SIZE, Sprite

COLORS = {
    Sprite.FLOOR: (10, 20, 30),
    Sprite.CHARACTER: (200, 0, 0),
    Sprite.WALL: (0, 200, 0),
    Sprite.ITEM: (0, 0, 200),
    Sprite.EXIT: (200, 200, 0),
    Sprite.CHARACTER_ON_EXIT: (0, 200, 200),
}

XPM_NAMES = {
    Sprite.WALL: "wall.xpm",
    Sprite.FLOOR: "floor.xpm",
    Sprite.CHARACTER: "character.xpm",
    Sprite.EXIT: "exit.xpm",
    Sprite.ITEM: "item.xpm",
    Sprite.CHARACTER_ON_EXIT: "character_e.xpm",
}


def solid_textures():
    images = {}
    for sprite, color in COLORS.items():
        surface = pygame.Surface((TILE_SIZE, TILE_SIZE))
        surface.fill(color)
        images[sprite] = surface
    return Textures(images)


def write_xpm(path, color_hex):
    path.write_text(
        "/* XPM */\n"
        "static char * img[] = {\n"
        '"2 2 1 1",\n'
        f'"a c #{color_hex}",\n'
        '"aa",\n'
        '"aa"};\n'
    )


def test_textures_require_every_sprite():
    images = {Sprite.WALL: pygame.Surface((TILE_SIZE, TILE_SIZE))}
    with pytest.raises(ValueError):
        Textures(images)


def test_draw_blits_at_tile_positions():
    screen = pygame.Surface((TILE_SIZE * 3, TILE_SIZE * 2))
    textures = solid_textures()
    rects = draw(screen, textures, [(Sprite.WALL, 0, 1), (Sprite.ITEM, 1, 2)])
    assert tuple(screen.get_at((TILE_SIZE, 0)))[:3] == COLORS[Sprite.WALL]
    assert tuple(screen.get_at((2 * TILE_SIZE, TILE_SIZE)))[:3] == COLORS[Sprite.ITEM]
    assert tuple(screen.get_at((0, 0)))[:3] == (0, 0, 0)
    assert [(r.x, r.y) for r in rects] == [(TILE_SIZE, 0), (2 * TILE_SIZE, TILE_SIZE)]


def test_draw_nothing_returns_no_rects():
    screen = pygame.Surface((TILE_SIZE, TILE_SIZE))
    assert draw(screen, solid_textures(), []) == []


def test_load_textures_missing_dir(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_textures(tmp_path / "nowhere")


def test_load_textures_reads_xpm_files(tmp_path):
    for name in XPM_NAMES.values():
        write_xpm(tmp_path / name, "FF0000")
    textures = load_textures(tmp_path)
    for sprite in Sprite:
        image = textures[sprite]
        assert image.get_size() == (2, 2)
        assert tuple(image.get_at((0, 0)))[:3] == (255, 0, 0)


def test_main_usage_without_arguments(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_rejects_wrong_extension(capsys):
    assert main(["map.txt"]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_rejects_too_many_arguments(capsys):
    assert main(["a.ber", "b.ber"]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_reports_missing_map(tmp_path, capsys):
    assert main([str(tmp_path / "missing.ber")]) == 1
    assert capsys.readouterr().err.startswith("Error\n")


def test_main_reports_invalid_map(tmp_path, capsys):
    bad = tmp_path / "bad.ber"
    bad.write_text("11111\n1P0E1\n11111\n")
    assert main([str(bad)]) == 1
    err = capsys.readouterr().err
    assert err.startswith("Error\n")
    assert "Map not valid" in err