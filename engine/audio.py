# engine/audio.py

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

import pygame

from engine.effects import SoundCue
from settings import ASSETS_DIR, SOUND_VOLUME

logger = logging.getLogger("dungeon.audio")

DEFAULT_ASSETS_DIR = Path(__file__).resolve().parent.parent / ASSETS_DIR


class PygameAudio:
    """
    Fire-and-forget sound cues through pygame.mixer.

    Each cue maps to ``<assets>/<cue>.wav`` played at a fixed volume.
    Overlapping cues simply overlap. Missing files or a mixer that cannot
    start are logged once and the cue is skipped.
    """

    def __init__(self, assets_dir: Optional[Path] = None, volume: float = SOUND_VOLUME) -> None:
        self.assets_dir = Path(assets_dir) if assets_dir is not None else DEFAULT_ASSETS_DIR
        self.volume = max(0.0, min(1.0, float(volume)))
        self._cache: Dict[SoundCue, pygame.mixer.Sound] = {}
        self._missing: set[SoundCue] = set()
        self._mixer_failed = False

    def path_for(self, cue: SoundCue) -> Path:
        return self.assets_dir / cue.filename

    def _ensure_mixer(self) -> bool:
        if self._mixer_failed:
            return False
        if not pygame.mixer.get_init():
            try:
                pygame.mixer.init()
            except pygame.error as e:
                logger.warning("Audio disabled, mixer failed to start: %s", e)
                self._mixer_failed = True
                return False
        return True

    def _load(self, cue: SoundCue) -> Optional[pygame.mixer.Sound]:
        snd = self._cache.get(cue)
        if snd is not None:
            return snd

        path = self.path_for(cue)
        if not path.exists():
            if cue not in self._missing:
                logger.info("No sound asset for %s at %s", cue.value, path)
                self._missing.add(cue)
            return None

        try:
            snd = pygame.mixer.Sound(str(path))
        except pygame.error as e:
            logger.warning("Could not load %s: %s", path, e)
            self._missing.add(cue)
            return None
        snd.set_volume(self.volume)
        self._cache[cue] = snd
        return snd

    def play(self, cue: SoundCue) -> None:
        if cue in self._missing or not self._ensure_mixer():
            return
        snd = self._load(cue)
        if snd is not None:
            snd.play()
