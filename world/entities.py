# world/entities.py

from dataclasses import dataclass
from typing import Tuple

from settings import PLAYER_START, PLAYER_START_HEALTH


@dataclass
class Entity:
    """Base entity that lives on the tile grid."""
    x: int
    y: int

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    def move_to(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def distance_to(self, other: "Entity") -> int:
        """Manhattan distance in tiles."""
        return abs(self.x - other.x) + abs(self.y - other.y)


@dataclass
class Player(Entity):
    """
    The player character.

    health, keys and score never go below zero; take_damage and use_key
    clamp instead of going negative.
    """
    health: int = PLAYER_START_HEALTH
    keys: int = 0
    score: int = 0

    def take_damage(self, amount: int) -> None:
        self.health = max(0, self.health - amount)

    def add_key(self) -> None:
        self.keys += 1

    def use_key(self) -> bool:
        if self.keys <= 0:
            return False
        self.keys -= 1
        return True

    def add_score(self, amount: int) -> None:
        self.score = max(0, self.score + amount)

    @property
    def is_alive(self) -> bool:
        return self.health > 0


@dataclass
class Enemy(Entity):
    """Chasing enemy. Position only; it has no stats of its own."""


def create_player() -> Player:
    x, y = PLAYER_START
    return Player(x, y)
