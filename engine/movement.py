"""
Player movement and tile interaction.

Resolves one requested step against the board: walls and the map edge
block silently, coins and keys are picked up, doors need a key. The player
only moves once the interaction on the target tile has been resolved.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Tuple

from settings import COIN_VALUE
from world.tiles import Tile

if TYPE_CHECKING:
    from world.entities import Player
    from world.game_map import GameMap


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value


class MoveOutcome(str, Enum):
    """What a single player step did."""

    BLOCKED = "blocked"          # wall or outside the map
    LOCKED_DOOR = "locked_door"  # door without a key, player stays put
    MOVED = "moved"
    COIN = "coin"
    KEY = "key"
    DOOR = "door"                # door opened with a key

    @property
    def moved(self) -> bool:
        return self not in (MoveOutcome.BLOCKED, MoveOutcome.LOCKED_DOOR)


def resolve_player_step(
    player: "Player",
    game_map: "GameMap",
    direction: Direction,
) -> MoveOutcome:
    """Apply one step in ``direction``, mutating the player and the map."""
    dx, dy = direction.delta
    nx = player.x + dx
    ny = player.y + dy

    if not game_map.is_walkable_tile(nx, ny):
        return MoveOutcome.BLOCKED

    tile = game_map.tile_at(nx, ny)
    outcome = MoveOutcome.MOVED

    if tile is Tile.COIN:
        player.add_score(COIN_VALUE)
        game_map.clear_tile(nx, ny)
        outcome = MoveOutcome.COIN
    elif tile is Tile.KEY:
        player.add_key()
        game_map.clear_tile(nx, ny)
        outcome = MoveOutcome.KEY
    elif tile is Tile.DOOR:
        if not player.use_key():
            return MoveOutcome.LOCKED_DOOR
        game_map.clear_tile(nx, ny)
        outcome = MoveOutcome.DOOR

    player.move_to(nx, ny)
    return outcome
