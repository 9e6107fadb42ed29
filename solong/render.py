"""Drawing a game with pygame, keyboard handling and the command entry point."""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence
from pathlib import Path

import pygame

from solong.game import Direction, Game, MoveResult
from solong.gamemap import MapError, Tile, load_map

TILE_SIZE = 80
WINDOW_TITLE = "So_long"
TEXTURE_FILES = {
    Tile.SPACE: "floor_texture.xpm",
    Tile.WALL: "wall_texture.xpm",
    Tile.COLLECTIBLE: "collect.xpm",
    Tile.PLAYER: "mario_player.xpm",
    Tile.EXIT: "exit_texture.xpm",
}
KEY_DIRECTIONS = {
    pygame.K_w: Direction.UP,
    pygame.K_d: Direction.RIGHT,
    pygame.K_a: Direction.LEFT,
    pygame.K_s: Direction.DOWN,
}


def load_textures(
    directory: str | Path = "textures", tile_size: int = TILE_SIZE
) -> dict[Tile, pygame.Surface]:
    """Load one image per tile from ``directory``, scaled to ``tile_size`` pixels square."""
    if tile_size <= 0:
        raise ValueError("tile_size must be positive")
    textures = {}
    for tile, name in TEXTURE_FILES.items():
        path = Path(directory) / name
        if not path.is_file():
            raise FileNotFoundError(f"missing texture {path}")
        image = pygame.image.load(str(path))
        if image.get_size() != (tile_size, tile_size):
            image = pygame.transform.scale(image, (tile_size, tile_size))
        textures[tile] = image
    return textures


class Renderer:
    """Draws a game onto a surface and feeds it keyboard input."""

    def __init__(
        self,
        game: Game,
        textures: Mapping[Tile, pygame.Surface],
        tile_size: int = TILE_SIZE,
        surface: pygame.Surface | None = None,
    ) -> None:
        missing = [tile.name for tile in Tile if tile not in textures]
        if missing:
            raise ValueError(f"no texture for {', '.join(missing)}")
        self.game = game
        self.textures = dict(textures)
        self.tile_size = tile_size
        self.size = (game.game_map.width * tile_size, game.game_map.height * tile_size)
        self.surface = surface if surface is not None else pygame.Surface(self.size)
        self.running = True

    def draw(self) -> None:
        """Blit every tile of the map onto the surface."""
        for (x, y), tile in self.game.game_map.tiles():
            self.surface.blit(self.textures[tile], (x * self.tile_size, y * self.tile_size))

    def handle_key(self, key: int) -> MoveResult | None:
        """React to a released key: Escape quits, W/A/S/D move the player."""
        if key == pygame.K_ESCAPE:
            self.running = False
            return None
        direction = KEY_DIRECTIONS.get(key)
        if direction is None or self.game.finished:
            return None
        result = self.game.move(direction)
        if result is MoveResult.WON:
            self.running = False
        return result

    def run(self) -> None:
        """Open a window and play until the game is won or the window closed."""
        pygame.init()
        try:
            self.surface = pygame.display.set_mode(self.size)
            pygame.display.set_caption(WINDOW_TITLE)
            clock = pygame.time.Clock()
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYUP:
                        self.handle_key(event.key)
                self.draw()
                pygame.display.flip()
                clock.tick(60)
        finally:
            pygame.quit()


def _error(message: str) -> int:
    sys.stderr.write(f"Error\n{message}\n")
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Load the ``.ber`` map named on the command line and play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return _error("This programe take 1 argument .ber")
    try:
        game_map = load_map(args[0])
    except MapError as exc:
        return _error(str(exc))
    try:
        textures = load_textures()
    except (OSError, pygame.error) as exc:
        return _error(str(exc))
    Renderer(Game(game_map), textures).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())