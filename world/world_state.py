# world/world_state.py

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from settings import MAP_SIZE, ENEMY_SPAWNS
from world.entities import Enemy, Player, create_player
from world.game_map import GameMap
from world.mapgen import clear_spawn_tiles, generate_grid


@dataclass
class World:
    """Everything that gets saved: the board, the player and the enemies."""
    game_map: GameMap
    player: Player
    enemies: List[Enemy] = field(default_factory=list)


def default_enemy_spawns(size: int) -> Tuple[Tuple[int, int], ...]:
    """
    ENEMY_SPAWNS scaled from the standard board to a ``size`` board and kept
    off the border wall. On the standard board this is ENEMY_SPAWNS itself.
    """
    inner = size - 2
    return tuple(
        (max(1, min(inner, x * size // MAP_SIZE)), max(1, min(inner, y * size // MAP_SIZE)))
        for x, y in ENEMY_SPAWNS
    )


def new_world(
    size: int = MAP_SIZE,
    enemy_spawns: Optional[Sequence[Tuple[int, int]]] = None,
    rng: Optional[random.Random] = None,
) -> World:
    """
    Build a fresh board with the player at its start tile and one enemy per
    spawn point (default_enemy_spawns(size) when none are given). Spawn
    tiles are cleared to floor; the rest of the board is left exactly as
    generated.
    """
    if enemy_spawns is None:
        enemy_spawns = default_enemy_spawns(size)

    player = create_player()
    spawns = [player.position, *enemy_spawns]

    tiles = generate_grid(size, rng=rng)
    clear_spawn_tiles(tiles, spawns)

    enemies = [Enemy(x, y) for x, y in enemy_spawns]
    return World(GameMap(tiles), player, enemies)
