"""Reachability checks for game maps."""

from __future__ import annotations

from solong.gamemap import GameMap, Position, Tile


def find_player(game_map: GameMap) -> Position | None:
    """Position of the first player tile, or None."""
    return game_map.find(Tile.PLAYER)


def flood_fill(game_map: GameMap, start: Position) -> frozenset[Position]:
    """Every position reachable from ``start`` without crossing a wall.

    A start outside the map or on a wall reaches nothing. Exits do not block
    movement.
    """
    if not game_map.in_bounds(start) or game_map[start] == Tile.WALL:
        return frozenset()
    seen = {start}
    stack = [start]
    while stack:
        x, y = stack.pop()
        for neighbour in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if (
                neighbour not in seen
                and game_map.in_bounds(neighbour)
                and game_map[neighbour] != Tile.WALL
            ):
                seen.add(neighbour)
                stack.append(neighbour)
    return frozenset(seen)


def is_solvable(game_map: GameMap) -> bool:
    """True when the player can reach every collectible and an exit."""
    start = find_player(game_map)
    if start is None:
        return False
    reached = flood_fill(game_map, start)
    collected = sum(1 for pos in reached if game_map[pos] == Tile.COLLECTIBLE)
    exit_found = any(game_map[pos] == Tile.EXIT for pos in reached)
    return collected == game_map.count(Tile.COLLECTIBLE) and exit_found