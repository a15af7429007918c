# tilequest

A small top-down tile game. You walk a character around a grid map, pick up
every collectible, and step onto the exit once all of them are gone.

## Installing

```
pip install .
```

This installs the `tilequest` command and its one dependency, pygame.

## Playing

```
tilequest path/to/level.ber
```

The command takes exactly one argument, the path of a map file whose name
contains `.ber`. Anything else prints a usage message to standard error and
exits with status 1.

The game opens a 2880×1620 window titled `tilequest`. Moves are applied when
a key is released:

| Key                   | Action     |
|-----------------------|------------|
| `W` / Up arrow        | move up    |
| `A` / Left arrow      | move left  |
| `S` / Down arrow      | move down  |
| `D` / Right arrow     | move right |
| `Esc` or close window | quit       |

Walls block movement. Walking onto a collectible picks it up. Stepping onto
the exit once every collectible has been taken wins and closes the game; the
exit can be crossed freely before that. The command exits with status 0 when
the game ends, whether won or quit.

## Map format

A map is a plain text file with one row of the grid per line:

| Character | Meaning      |
|-----------|--------------|
| `1`       | wall         |
| `0`       | floor        |
| `P`       | player start |
| `C`       | collectible  |
| `E`       | exit         |

A map is accepted only if:

- it holds at least one `C`, exactly one `E` and exactly one `P`;
- every row has the same length, so the map is a rectangle;
- the whole border is wall (`1`).

A map that cannot be read or breaks these rules makes the command print
`Error` followed by the reason (for example
`Map not valid: map is not closed by walls`) to standard error and exit with
status 1.

Example:

```
1111111
1P0C0E1
1111111
```

## Textures

Tiles are drawn as 64×64 images read from the directory `asset` under the
current working directory: `wall.xpm`, `floor.xpm`, `character.xpm`,
`item.xpm`, `exit.xpm` and `character_e.xpm`, the last being the character
standing on the exit. A missing image is reported as an error and the command
exits with status 1. The command has no option to choose another directory;
`tilequest.app.run(path, asset_dir)` takes one.

## What it does not do

- It does not check that the collectibles and the exit can be reached from
  the start; a map that passes the rules above may be unwinnable.
- It does not count or display moves.
- Characters other than `0`, `1`, `C`, `E` and `P` are not rejected; they
  are simply not drawn.

## Using the pieces from Python

- `tilequest.mapfile`: `load_map(path)` reads a map file into a `GameMap`,
  and `validate_map(game_map)` raises `MapError` for a map that breaks the
  rules above. `check_form`, `check_close`, `count_props` and
  `is_valid_filename` expose the individual checks.
- `tilequest.game`: `Game` holds the game state. `Game.initial_frame()`,
  `Game.move(direction)` and `Game.handle_key(keycode)` return the tiles to
  redraw as `(Sprite, y, x)` tuples, so the game logic runs without a window.
  `key_direction(keycode)` maps key codes to a `Direction`.
- `tilequest.app`: `load_textures`, `draw`, `run` and `main`, the windowed
  front end.
- `tilequest.linereader`: `LineReader` reads a text stream one line at a
  time, and `read_lines(path)` reads a whole file; both keep each line's
  newline.
- `tilequest.textlib`: small helpers for ASCII character classification
  (`chars`), integer/decimal text conversion (`numbers`), byte buffers
  (`memory`), string searching and slicing (`strings`), a singly linked list
  (`linked`) and printf-style formatting (`formatting`).

## Running the tests

```
pip install .[test]
pytest
```