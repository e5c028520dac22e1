"""Choosing a teleport destination around the player for teleporting mobs."""

from __future__ import annotations

import math
from dataclasses import dataclass

from hexcrawl.pathfinding import Cell, Position, TileType

TILE_PIXELS = 32.0
LINE_STEPS = 200
LINE_CLEAR_THRESHOLD = 190


@dataclass
class MapTile:
    """A map cell with its tile type and the number of mobs standing on it."""

    tile_type: TileType
    mob_count: int = 0


def _cell_of(position: Position) -> Cell:
    return (
        max(0, int(math.floor(position[0]) / TILE_PIXELS)),
        max(0, int(math.floor(position[1]) / TILE_PIXELS)),
    )


def has_line_of_sight(tiles, origin: Position, target: Position) -> bool:
    """True when a straight line from ``origin`` to ``target`` stays on known non-wall tiles.

    The line is sampled at evenly spaced points; hitting a wall within the last
    few samples still counts as a clear line.
    """
    steps_taken = 0
    for step in range(LINE_STEPS + 1):
        ratio = step / LINE_STEPS
        point = (
            ratio * target[0] + (1.0 - ratio) * origin[0],
            ratio * target[1] + (1.0 - ratio) * origin[1],
        )
        tile = tiles.get(_cell_of(point))
        if tile is None or tile.tile_type == TileType.WALL:
            break
        steps_taken = step + 1
    return steps_taken >= LINE_CLEAR_THRESHOLD


def find_teleport_cell(tiles, player_position: Position, player_cell: Cell,
                       amount_of_tiles: int, room_size: int) -> Cell | None:
    """First free floor cell on the square ring around the player with a clear view of them.

    The ring lies ``amount_of_tiles`` cells away from ``player_cell`` and is
    clipped to the room. Cells are tried row by row. Returns None when no
    cell qualifies.
    """
    bounds = []
    for coordinate in player_cell:
        low = max(0, coordinate - amount_of_tiles)
        high = min(coordinate + amount_of_tiles + 1, room_size)
        bounds.append((low, high))
    (low_i, high_i), (low_j, high_j) = bounds

    for i in range(low_i, high_i):
        for j in range(low_j, high_j):
            on_ring = i in (low_i, high_i - 1) or j in (low_j, high_j - 1)
            if not on_ring:
                continue
            tile = tiles.get((i, j))
            if tile is None or tile.tile_type != TileType.FLOOR or tile.mob_count != 0:
                continue
            if has_line_of_sight(tiles, (i * TILE_PIXELS, j * TILE_PIXELS), player_position):
                return (i, j)
    return None


def reserve_teleport(tiles, cell: Cell, mob_position: Position) -> None:
    """Move a mob's occupancy from the tile it stands on to ``cell``."""
    source = _cell_of(mob_position)
    destination_tile = tiles[cell]
    source_tile = tiles[source]
    if source_tile.mob_count <= 0:
        raise ValueError(f"no mob recorded on tile {source}")
    destination_tile.mob_count += 1
    source_tile.mob_count -= 1