# world/mapgen.py

import logging
import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from settings import (
    MAP_SIZE,
    WALL_CHANCE,
    COIN_CHANCE,
    KEY_CHANCE,
    DOOR_CHANCE,
)
from world.tiles import Tile

logger = logging.getLogger("dungeon.mapgen")

Grid = List[List[Tile]]


@dataclass(frozen=True)
class TileRule:
    """One weighted roll applied to every cell: with ``chance`` the cell becomes ``tile``."""
    tile: Tile
    chance: float


# Order matters: every rule is rolled for every cell and a later hit
# overwrites an earlier one, so DOOR > KEY > COIN > WALL on collisions.
DEFAULT_RULES: Tuple[TileRule, ...] = (
    TileRule(Tile.WALL, WALL_CHANCE),
    TileRule(Tile.COIN, COIN_CHANCE),
    TileRule(Tile.KEY, KEY_CHANCE),
    TileRule(Tile.DOOR, DOOR_CHANCE),
)


def _roll_cell(rules: Sequence[TileRule], rng: random.Random) -> Tile:
    tile = Tile.FLOOR
    for rule in rules:
        if rng.random() < rule.chance:
            tile = rule.tile
    return tile


def _wall_border(grid: Grid) -> None:
    size = len(grid)
    for i in range(size):
        grid[0][i] = Tile.WALL
        grid[size - 1][i] = Tile.WALL
        grid[i][0] = Tile.WALL
        grid[i][size - 1] = Tile.WALL


def generate_grid(
    size: int = MAP_SIZE,
    rules: Sequence[TileRule] = DEFAULT_RULES,
    rng: Optional[random.Random] = None,
) -> Grid:
    """
    Generate a size x size grid indexed as grid[y][x].

    Every cell is rolled against ``rules`` in order, then the outer ring is
    forced to WALL. Nothing checks that open tiles are reachable from each
    other.
    """
    if size < 3:
        raise ValueError(f"map size must be at least 3, got {size}")

    rng = rng or random.Random()
    grid: Grid = [[_roll_cell(rules, rng) for _ in range(size)] for _ in range(size)]
    _wall_border(grid)
    logger.debug("Generated %dx%d grid", size, size)
    return grid


def clear_spawn_tiles(grid: Grid, positions: Iterable[Tuple[int, int]]) -> None:
    """Force each spawn position to FLOOR so nothing starts inside a wall or on an item."""
    size = len(grid)
    for x, y in positions:
        if not (0 < x < size - 1 and 0 < y < size - 1):
            raise ValueError(f"spawn position {(x, y)} is on or outside the border")
        grid[y][x] = Tile.FLOOR
