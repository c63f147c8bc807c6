"""
Pytest configuration and shared fixtures.

This file is automatically discovered by pytest and provides fixtures
available to all test files.
"""

import os
import random
from typing import Callable, Generator, List, Optional, Sequence, Tuple

# Headless SDL so tests run without a display or sound card
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from engine.effects import Effects, SoundCue
from engine.save_system import MemoryStore
from world.entities import Enemy, Player
from world.game_map import GameMap
from world.tiles import Tile
from world.world_state import World


_LEGEND = {
    "#": Tile.WALL,
    ".": Tile.FLOOR,
    "c": Tile.COIN,
    "k": Tile.KEY,
    "d": Tile.DOOR,
}


@pytest.fixture(scope="session", autouse=True)
def pygame_init() -> Generator[None, None, None]:
    """
    Initialize pygame for the test session.
    This runs once before all tests and cleans up after.
    """
    pygame.init()
    # Use a small headless surface (no display needed)
    pygame.display.set_mode((64, 64), pygame.HIDDEN)
    yield
    pygame.quit()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


def parse_layout(layout: Sequence[str]) -> GameMap:
    """Build a GameMap from rows like '#.c#' (see _LEGEND)."""
    return GameMap([[_LEGEND[ch] for ch in row] for row in layout])


@pytest.fixture
def make_world() -> Callable[..., World]:
    """
    Factory for hand-built worlds:

        make_world(["#####", "#...#", "#####"], player=(1, 1), enemies=[(3, 1)])
    """
    def _make(
        layout: Sequence[str],
        player: Tuple[int, int] = (1, 1),
        enemies: Sequence[Tuple[int, int]] = (),
        health: int = 3,
        keys: int = 0,
        score: int = 0,
    ) -> World:
        px, py = player
        return World(
            parse_layout(layout),
            Player(px, py, health=health, keys=keys, score=score),
            [Enemy(x, y) for x, y in enemies],
        )
    return _make


class RecordingAudio:
    def __init__(self) -> None:
        self.played: List[SoundCue] = []

    def play(self, cue: SoundCue) -> None:
        self.played.append(cue)


class RecordingFrames:
    def __init__(self) -> None:
        self.frames: list = []

    def render(self, frame) -> None:
        self.frames.append(frame)


class RecordingStats:
    def __init__(self) -> None:
        self.updates: List[Tuple[int, int, int]] = []

    def update_stats(self, health: int, score: int, keys: int) -> None:
        self.updates.append((health, score, keys))

    @property
    def last(self) -> Optional[Tuple[int, int, int]]:
        return self.updates[-1] if self.updates else None


class RecordingNotifier:
    def __init__(self) -> None:
        self.notices: List[str] = []
        self.overlays: List[str] = []

    def notify(self, message: str) -> None:
        self.notices.append(message)

    def show_overlay(self, message: str) -> None:
        self.overlays.append(message)


@pytest.fixture
def effects() -> Effects:
    """Effects bundle whose parts record every call."""
    return Effects(
        audio=RecordingAudio(),
        frames=RecordingFrames(),
        store=MemoryStore(),
        stats=RecordingStats(),
        notifier=RecordingNotifier(),
    )


@pytest.fixture
def open_room() -> List[str]:
    """7x7 room with a solid border and an empty interior."""
    return [
        "#######",
        "#.....#",
        "#.....#",
        "#.....#",
        "#.....#",
        "#.....#",
        "#######",
    ]
