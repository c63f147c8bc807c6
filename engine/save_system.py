"""
Save/Load system for the game.

Serializes the world (board, player, enemies) to JSON text and keeps it in
a key/value store: an in-memory dict for headless runs, or a JSON file on
disk for the pygame host.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from engine.error_handler import SaveError
from world.entities import Enemy, Player
from world.game_map import GameMap
from world.tiles import Tile
from world.world_state import World

logger = logging.getLogger("dungeon.save")

CORRUPT_SAVE_MESSAGE = "Save data is corrupt."
STORAGE_ERROR_MESSAGE = "Could not access save data."


# -----------------------------------------------------------------------------
# Stores
# -----------------------------------------------------------------------------

class MemoryStore:
    """Dict-backed store; lives as long as the process."""

    def __init__(self) -> None:
        self._data: Dict[str, str] = {}

    def read(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def write(self, key: str, value: str) -> None:
        self._data[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self._data


class JsonFileStore:
    """
    Key/value store persisted as a single JSON object on disk.

    Every write rewrites the whole file through a temporary file and an
    atomic rename.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        with self.path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise SaveError(
                f"{self.path} does not hold a JSON object",
                user_message=CORRUPT_SAVE_MESSAGE,
            )
        return data

    def read(self, key: str) -> Optional[str]:
        try:
            value = self._read_all().get(key)
        except ValueError as e:
            raise SaveError(f"Unreadable store {self.path}: {e}", user_message=CORRUPT_SAVE_MESSAGE) from e
        except OSError as e:
            raise SaveError(f"Cannot read {self.path}: {e}", user_message=STORAGE_ERROR_MESSAGE) from e
        return value if isinstance(value, str) else None

    def write(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except (ValueError, SaveError):
            logger.warning("Overwriting unreadable store %s", self.path)
            data = {}
        except OSError as e:
            raise SaveError(f"Cannot read {self.path}: {e}", user_message=STORAGE_ERROR_MESSAGE) from e
        data[key] = value

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)

            # Write to a temporary file first, then rename (atomic write)
            temp_path = self.path.with_suffix(".tmp")
            with temp_path.open("w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            temp_path.replace(self.path)
        except OSError as e:
            raise SaveError(f"Cannot write {self.path}: {e}", user_message=STORAGE_ERROR_MESSAGE) from e


# -----------------------------------------------------------------------------
# Serialization helpers
# -----------------------------------------------------------------------------

def serialize_world(world: World) -> Dict[str, Any]:
    """Convert a World to a JSON-serializable dict."""
    player = world.player
    return {
        "map": world.game_map.to_rows(),
        "player": {
            "x": player.x,
            "y": player.y,
            "health": player.health,
            "keys": player.keys,
            "score": player.score,
        },
        "enemies": [{"x": enemy.x, "y": enemy.y} for enemy in world.enemies],
    }


def encode_world(world: World) -> str:
    return json.dumps(serialize_world(world))


def _int_field(data: Dict[str, Any], name: str) -> int:
    value = data[name]
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    return value


def _check_position(game_map: GameMap, x: int, y: int, who: str) -> None:
    if not game_map.in_bounds(x, y):
        raise ValueError(f"{who} position {(x, y)} is outside the map")
    if game_map.tile_at(x, y) is Tile.WALL:
        raise ValueError(f"{who} position {(x, y)} is inside a wall")


def _deserialize_map(rows: List[List[int]], size: Optional[int] = None) -> GameMap:
    if not rows or any(len(row) != len(rows) for row in rows):
        raise ValueError("map must be a non-empty square grid")
    if size is not None and len(rows) != size:
        raise ValueError(f"map is {len(rows)}x{len(rows)}, expected {size}x{size}")
    game_map = GameMap.from_rows(rows)
    if not game_map.border_is_solid():
        raise ValueError("map border must be solid wall")
    return game_map


def deserialize_world(data: Dict[str, Any], size: Optional[int] = None) -> World:
    """
    Rebuild a World from a serialized dict.

    Raises SaveError for anything that would break the board invariants:
    ragged or open-bordered maps, unknown tiles, negative stats, or
    entities placed in walls or off the map. When ``size`` is given the
    board must also be exactly ``size`` tiles wide.
    """
    try:
        game_map = _deserialize_map(data["map"], size)

        pdata = data["player"]
        player = Player(
            _int_field(pdata, "x"),
            _int_field(pdata, "y"),
            health=_int_field(pdata, "health"),
            keys=_int_field(pdata, "keys"),
            score=_int_field(pdata, "score"),
        )
        if min(player.health, player.keys, player.score) < 0:
            raise ValueError("player stats must not be negative")
        _check_position(game_map, player.x, player.y, "player")

        enemies: List[Enemy] = []
        for edata in data["enemies"]:
            enemy = Enemy(_int_field(edata, "x"), _int_field(edata, "y"))
            _check_position(game_map, enemy.x, enemy.y, "enemy")
            enemies.append(enemy)
    except (KeyError, TypeError, ValueError) as e:
        raise SaveError(f"Invalid snapshot: {e}", user_message=CORRUPT_SAVE_MESSAGE) from e

    return World(game_map, player, enemies)


def decode_world(text: str, size: Optional[int] = None) -> World:
    try:
        data = json.loads(text)
    except ValueError as e:
        raise SaveError(f"Snapshot is not valid JSON: {e}", user_message=CORRUPT_SAVE_MESSAGE) from e
    if not isinstance(data, dict):
        raise SaveError("Snapshot is not a JSON object", user_message=CORRUPT_SAVE_MESSAGE)
    return deserialize_world(data, size)
