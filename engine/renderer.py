# engine/renderer.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Tuple

import pygame

from settings import (
    COLOR_BG,
    COLOR_ENEMY,
    COLOR_FOG,
    COLOR_PLAYER,
    FOV_RADIUS,
    TILE_SIZE,
)

if TYPE_CHECKING:
    from world.world_state import World

Color = Tuple[int, int, int]


class Layer:
    TILE = "tile"
    FOG = "fog"
    ENEMY = "enemy"
    PLAYER = "player"


@dataclass(frozen=True)
class DrawCell:
    """One filled square on the tile grid."""
    x: int
    y: int
    color: Color
    layer: str


@dataclass
class Frame:
    """Ordered draw list for one tick. Later cells paint over earlier ones."""
    width: int
    height: int
    cells: List[DrawCell] = field(default_factory=list)

    def cells_in_layer(self, layer: str) -> List[DrawCell]:
        return [cell for cell in self.cells if cell.layer == layer]

    def top_cell_at(self, x: int, y: int) -> DrawCell | None:
        """The cell painted last at (x, y), i.e. what ends up on screen."""
        top = None
        for cell in self.cells:
            if cell.x == x and cell.y == y:
                top = cell
        return top


def build_frame(world: "World", radius: int = FOV_RADIUS) -> Frame:
    """
    Build the full-grid draw list for the current world state.

    - Tiles further than ``radius`` (Manhattan) from the player -> fog
    - Other tiles                                                -> tile color
    - Enemies inside the radius, then the player on top
    """
    game_map = world.game_map
    player = world.player
    frame = Frame(game_map.width, game_map.height)

    for x, y, tile in game_map.iter_tiles():
        if game_map.is_visible(player.x, player.y, x, y, radius):
            frame.cells.append(DrawCell(x, y, tile.color, Layer.TILE))
        else:
            frame.cells.append(DrawCell(x, y, COLOR_FOG, Layer.FOG))

    for enemy in world.enemies:
        if enemy.distance_to(player) <= radius:
            frame.cells.append(DrawCell(enemy.x, enemy.y, COLOR_ENEMY, Layer.ENEMY))

    frame.cells.append(DrawCell(player.x, player.y, COLOR_PLAYER, Layer.PLAYER))
    return frame


class SurfaceRenderer:
    """Paints frames onto a pygame surface, one square per cell."""

    def __init__(
        self,
        surface: pygame.Surface,
        tile_size: int = TILE_SIZE,
        origin: Tuple[int, int] = (0, 0),
    ) -> None:
        self.surface = surface
        self.tile_size = tile_size
        self.origin = origin

    def cell_rect(self, x: int, y: int) -> pygame.Rect:
        ox, oy = self.origin
        return pygame.Rect(
            ox + x * self.tile_size,
            oy + y * self.tile_size,
            self.tile_size,
            self.tile_size,
        )

    def render(self, frame: Frame) -> None:
        board = pygame.Rect(
            self.origin[0],
            self.origin[1],
            frame.width * self.tile_size,
            frame.height * self.tile_size,
        )
        self.surface.fill(COLOR_BG, board)
        for cell in frame.cells:
            pygame.draw.rect(self.surface, cell.color, self.cell_rect(cell.x, cell.y))
