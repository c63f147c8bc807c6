"""
Game configuration: user preferences loaded from a JSON file.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from settings import SOUND_VOLUME, TICKS_PER_SECOND

logger = logging.getLogger("dungeon.config")

# Config file location
CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"
CONFIG_FILE = CONFIG_DIR / "settings.json"

# Key/value store that holds the saved snapshot
DEFAULT_SAVE_FILE = Path(__file__).resolve().parent.parent / "saves" / "storage.json"


class GameConfig:
    """Manages game configuration/settings."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path: Path = path or CONFIG_FILE
        self.ticks_per_second: int = TICKS_PER_SECOND
        self.sound_enabled: bool = True
        self.volume: float = SOUND_VOLUME
        self.save_file: Path = DEFAULT_SAVE_FILE
        self.telemetry_enabled: bool = False

    def from_dict(self, data: Dict[str, Any]) -> None:
        """Load config from dictionary."""
        self.ticks_per_second = max(1, int(data.get("ticks_per_second", TICKS_PER_SECOND)))
        self.sound_enabled = bool(data.get("sound_enabled", True))
        self.volume = max(0.0, min(1.0, float(data.get("volume", SOUND_VOLUME))))
        self.save_file = Path(data.get("save_file", DEFAULT_SAVE_FILE))
        self.telemetry_enabled = bool(data.get("telemetry_enabled", False))

    @property
    def tick_interval(self) -> float:
        """Seconds between simulation ticks."""
        return 1.0 / self.ticks_per_second

    def load(self) -> bool:
        """Load config from file. Missing file keeps the defaults."""
        if not self.path.exists():
            return False

        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            self.from_dict(data)
            return True
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning("Error loading config: %s", e)
            return False


def load_config(path: Optional[Path] = None) -> GameConfig:
    """Load and return a config, falling back to defaults."""
    config = GameConfig(path)
    config.load()
    return config
