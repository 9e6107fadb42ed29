# solong

A small top-down puzzle game. You move a player around a walled map, pick up
every collectible, and then step onto the exit. The number of moves is printed
as you go.

## Installing

```
pip install .
```

The game window is drawn with pygame, which is installed as a dependency.

## Playing

```
solong maps/level.ber
```

The command takes exactly one argument: a map file whose name ends in `.ber`.
If the argument count is wrong, the map is rejected or a texture cannot be
loaded, it writes a message starting with `Error` to standard error and exits
with status 1.

### Textures

The command loads its tile images from a `textures` directory in the current
working directory. It needs these five files, one per tile:

| Tile         | File                 |
|--------------|----------------------|
| floor        | `floor_texture.xpm`  |
| wall         | `wall_texture.xpm`   |
| collectible  | `collect.xpm`        |
| player       | `mario_player.xpm`   |
| exit         | `exit_texture.xpm`   |

Images that are not 80×80 pixels are scaled to that size. The package does
not ship any textures; you provide them.

### Controls

| Key    | Action     |
|--------|------------|
| `W`    | move up    |
| `A`    | move left  |
| `S`    | move down  |
| `D`    | move right |
| `Esc`  | quit       |

Keys act when released. Closing the window also quits. Walls block movement.
Each step onto floor or a collectible picks up the collectible, if any, and
prints `count: N`. Stepping onto the exit while collectibles remain does
nothing. Once all are collected, stepping onto the exit prints
`Congratulations! You won in : N !` and the game ends.

## Map format

A map is a text file made of these characters:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | empty floor  |
| `C`  | collectible  |
| `E`  | exit         |
| `P`  | player start |

Empty lines are ignored. A map is accepted only if:

- it is a rectangle (every line has the same length);
- the first and last rows are all walls, and every row starts and ends with a wall;
- it holds no other characters;
- the player can reach every collectible and the exit;
- it has exactly one `P`, exactly one `E` and at least one `C`.

Example:

```
1111111
1P0C0E1
1111111
```

## Using it as a library

```python
from solong.gamemap import load_map
from solong.solver import is_solvable
from solong.game import Game, Direction

game_map = load_map("maps/level.ber")
assert is_solvable(game_map)

game = Game(game_map)
result = game.move(Direction.RIGHT)
print(result, game.player_position(), game.remaining_collectibles())
```

- `solong.gamemap` — `Tile`, `GameMap` (indexed by `(x, y)`, with `count`,
  `find`, `copy`, `tiles` and `in_bounds`), `parse_map` for map text held in
  memory, `load_map` for a `.ber` file, and `MapError`, raised for every
  rejected map.
- `solong.solver` — `find_player`, `flood_fill` (the set of positions
  reachable without crossing a wall) and `is_solvable`.
- `solong.game` — `Game`, which plays on its own copy of a map; `move` takes
  a `Direction` and returns a `MoveResult` (`BLOCKED`, `MOVED`,
  `EXIT_LOCKED` or `WON`). Moving after a win raises `RuntimeError`.
- `solong.render` — `load_textures`, `Renderer` (with `draw`, `handle_key`
  and `run`) and `main`, the function behind the `solong` command.

The package also includes small helper modules: `solong.chars`,
`solong.strings`, `solong.memory`, `solong.linkedlist`, `solong.output` and
`solong.linereader`. The last provides `LineReader` and `read_lines` for
reading a stream line by line through a fixed-size buffer.

## Running the tests

```
pip install .[test]
pytest
```