# world/tiles.py

from enum import IntEnum
from typing import Dict, Tuple

from settings import (
    COLOR_FLOOR,
    COLOR_WALL,
    COLOR_COIN,
    COLOR_KEY,
    COLOR_DOOR,
)


class Tile(IntEnum):
    """Grid cell types. Values match the saved snapshot format."""
    FLOOR = 0
    WALL = 1
    COIN = 2
    KEY = 3
    DOOR = 4

    @property
    def walkable(self) -> bool:
        # Doors are walkable once opened; the resolver decides that.
        return self is not Tile.WALL

    @property
    def color(self) -> Tuple[int, int, int]:
        return TILE_COLORS[self]


TILE_COLORS: Dict[Tile, Tuple[int, int, int]] = {
    Tile.FLOOR: COLOR_FLOOR,
    Tile.WALL: COLOR_WALL,
    Tile.COIN: COLOR_COIN,
    Tile.KEY: COLOR_KEY,
    Tile.DOOR: COLOR_DOOR,
}
