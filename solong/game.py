"""Game state: the player's moves, collectibles and the exit."""

from __future__ import annotations

import sys
from enum import Enum
from typing import TextIO

from solong.gamemap import GameMap, Position, Tile


class Direction(Enum):
    """A step on the grid as ``(dx, dy)``."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def step(self, position: Position) -> Position:
        """The position one step from ``position`` in this direction."""
        dx, dy = self.value
        x, y = position
        return x + dx, y + dy


class MoveResult(Enum):
    """What happened when the player tried to move."""

    BLOCKED = "blocked"
    MOVED = "moved"
    EXIT_LOCKED = "exit_locked"
    WON = "won"


class Game:
    """A game in progress on its own copy of a map."""

    def __init__(self, game_map: GameMap, out: TextIO | None = None) -> None:
        self.game_map = game_map.copy()
        self.moves = 0
        self.finished = False
        self._out = out

    def _write(self, message: str) -> None:
        stream = sys.stdout if self._out is None else self._out
        stream.write(message + "\n")

    def remaining_collectibles(self) -> int:
        """Number of collectibles still on the map."""
        return self.game_map.count(Tile.COLLECTIBLE)

    def player_position(self) -> Position:
        """Where the player stands; a map without a player raises ValueError."""
        position = self.game_map.find(Tile.PLAYER)
        if position is None:
            raise ValueError("map has no player")
        return position

    def move(self, direction: Direction) -> MoveResult:
        """Try to move the player one step.

        Walls block. The exit only lets the player through once every
        collectible is taken, which wins the game. Any other tile is entered,
        picking up a collectible if one lies there, and counts as a move.
        """
        if self.finished:
            raise RuntimeError("the game is over")
        current = self.player_position()
        target = direction.step(current)
        if not self.game_map.in_bounds(target) or self.game_map[target] == Tile.WALL:
            return MoveResult.BLOCKED
        if self.game_map[target] == Tile.EXIT:
            if self.remaining_collectibles():
                return MoveResult.EXIT_LOCKED
            self.finished = True
            self._write(f"Congratulations! You won in : {self.moves} !")
            return MoveResult.WON
        self.game_map[target] = Tile.PLAYER
        self.game_map[current] = Tile.SPACE
        self.moves += 1
        self._write(f"count: {self.moves}")
        return MoveResult.MOVED