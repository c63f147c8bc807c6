# world/ai.py

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from world.entities import Enemy, Player
    from world.game_map import GameMap


def _sign(value: int) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def chase_step(enemy: "Enemy", player: "Player") -> Tuple[int, int]:
    """
    Greedy single-axis step towards the player.

    Moves along whichever axis has the larger distance; ties (including
    standing on the player) go vertical, which yields (0, 0) when both
    deltas are zero.
    """
    dx = player.x - enemy.x
    dy = player.y - enemy.y

    if abs(dx) > abs(dy):
        return _sign(dx), 0
    return 0, _sign(dy)


def move_enemy_towards_player(
    enemy: "Enemy",
    player: "Player",
    game_map: "GameMap",
) -> bool:
    """
    Advance one enemy by a single chase step.

    The step is dropped when it would leave the map or enter a wall. Items,
    doors and other enemies are ignored. Returns True if the enemy moved.
    """
    step_x, step_y = chase_step(enemy, player)
    if step_x == 0 and step_y == 0:
        return False

    new_x = enemy.x + step_x
    new_y = enemy.y + step_y

    # Can't walk through walls
    if not game_map.is_walkable_tile(new_x, new_y):
        return False

    enemy.move_to(new_x, new_y)
    return True
