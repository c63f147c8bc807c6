"""
Centralized error handling and logging.

This module provides:
- Logger setup (daily log file + console warnings)
- Custom exception types carrying a player-facing message
- A helper to log errors with context
"""
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

# Setup logging directory
LOG_DIR = Path(__file__).resolve().parent.parent / "logs"

logger = logging.getLogger("dungeon")


def configure_logging(log_dir: Path = LOG_DIR, level: int = logging.DEBUG) -> logging.Logger:
    """
    Attach a file handler (everything) and a console handler (warnings and
    up) to the ``dungeon`` logger. Safe to call more than once.
    """
    logger.setLevel(level)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    log_dir.mkdir(parents=True, exist_ok=True)

    # File handler for detailed logs
    log_file = log_dir / f"game_{datetime.now().strftime('%Y%m%d')}.log"
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    )

    # Console handler for warnings/errors
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(
        logging.Formatter('%(levelname)s: %(message)s')
    )

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    return logger


class GameError(Exception):
    """Base exception for game-specific errors."""
    def __init__(self, message: str, user_message: Optional[str] = None):
        super().__init__(message)
        self.user_message = user_message or message


class SaveError(GameError):
    """Error during save/load operations."""
    pass


def log_error(error: Exception, context: str = "") -> None:
    """
    Log an error with context information.

    Args:
        error: The exception that occurred
        context: Where the error occurred (e.g., "load_game")
    """
    logger.error(
        "Error in %s: %s: %s",
        context or "unknown",
        type(error).__name__,
        error,
        exc_info=error,
    )
