# world/game_map.py

from typing import Iterator, List, Tuple

from settings import FOV_RADIUS
from world.tiles import Tile


class GameMap:
    """
    Square tile grid for one dungeon board.
    Holds tiles and provides bounds, collision and visibility helpers.
    """

    def __init__(self, tiles: List[List[Tile]]) -> None:
        self.tiles: List[List[Tile]] = tiles
        self.height: int = len(tiles)
        self.width: int = len(tiles[0]) if self.height > 0 else 0

    # ------------------------------------------------------------------
    # Tile helpers
    # ------------------------------------------------------------------

    def in_bounds(self, tile_x: int, tile_y: int) -> bool:
        """Return True if the tile coordinate is inside the map."""
        return 0 <= tile_x < self.width and 0 <= tile_y < self.height

    def tile_at(self, tile_x: int, tile_y: int) -> Tile:
        return self.tiles[tile_y][tile_x]

    def set_tile(self, tile_x: int, tile_y: int, tile: Tile) -> None:
        self.tiles[tile_y][tile_x] = tile

    def clear_tile(self, tile_x: int, tile_y: int) -> None:
        """Turn a collected item or opened door back into floor."""
        self.tiles[tile_y][tile_x] = Tile.FLOOR

    def is_walkable_tile(self, tile_x: int, tile_y: int) -> bool:
        """Check if a tile is walkable. Outside the map = not walkable."""
        if not self.in_bounds(tile_x, tile_y):
            return False
        return self.tiles[tile_y][tile_x].walkable

    def iter_tiles(self) -> Iterator[Tuple[int, int, Tile]]:
        for y, row in enumerate(self.tiles):
            for x, tile in enumerate(row):
                yield x, y, tile

    def border_is_solid(self) -> bool:
        for x, y, tile in self.iter_tiles():
            on_border = x in (0, self.width - 1) or y in (0, self.height - 1)
            if on_border and tile is not Tile.WALL:
                return False
        return True

    # ------------------------------------------------------------------
    # Visibility
    # ------------------------------------------------------------------

    @staticmethod
    def is_visible(
        center_tx: int,
        center_ty: int,
        tile_x: int,
        tile_y: int,
        radius: int = FOV_RADIUS,
    ) -> bool:
        """Manhattan-distance sight: walls do not block it."""
        return abs(tile_x - center_tx) + abs(tile_y - center_ty) <= radius

    def to_rows(self) -> List[List[int]]:
        return [[int(tile) for tile in row] for row in self.tiles]

    @classmethod
    def from_rows(cls, rows: List[List[int]]) -> "GameMap":
        return cls([[Tile(value) for value in row] for row in rows])
