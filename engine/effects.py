"""
Side-effect interfaces the simulation calls but never implements.

The session only talks to these protocols, so the whole game can run
headless: the pygame host plugs in real audio, a surface renderer, a file
store and the HUD, while tests plug in recorders.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional, Protocol

from engine.save_system import MemoryStore

if TYPE_CHECKING:
    from engine.renderer import Frame


class SoundCue(str, Enum):
    COIN = "coin"
    DAMAGE = "damage"
    KEY = "key"
    DOOR = "door"
    WIN = "win"
    GAMEOVER = "gameover"

    @property
    def filename(self) -> str:
        return f"{self.value}.wav"


class AudioSink(Protocol):
    def play(self, cue: SoundCue) -> None:
        ...


class FrameSink(Protocol):
    def render(self, frame: "Frame") -> None:
        ...


class SnapshotStore(Protocol):
    """Host key/value storage holding serialized snapshots."""

    def read(self, key: str) -> Optional[str]:
        ...

    def write(self, key: str, value: str) -> None:
        ...


class StatsDisplay(Protocol):
    def update_stats(self, health: int, score: int, keys: int) -> None:
        ...


class Notifier(Protocol):
    def notify(self, message: str) -> None:
        ...

    def show_overlay(self, message: str) -> None:
        ...


# ----------------------------------------------------------------------
# No-op implementations
# ----------------------------------------------------------------------


class NullAudio:
    def play(self, cue: SoundCue) -> None:
        pass


class NullFrameSink:
    def render(self, frame: "Frame") -> None:
        pass


class NullStats:
    def update_stats(self, health: int, score: int, keys: int) -> None:
        pass


class NullNotifier:
    def notify(self, message: str) -> None:
        pass

    def show_overlay(self, message: str) -> None:
        pass


@dataclass
class Effects:
    """Bundle of every effect the session may trigger."""
    audio: AudioSink = field(default_factory=NullAudio)
    frames: FrameSink = field(default_factory=NullFrameSink)
    store: SnapshotStore = field(default_factory=MemoryStore)
    stats: StatsDisplay = field(default_factory=NullStats)
    notifier: Notifier = field(default_factory=NullNotifier)
