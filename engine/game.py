# engine/game.py

from __future__ import annotations

import logging
import random
from typing import Optional

import pygame

from engine.audio import PygameAudio
from engine.config import GameConfig
from engine.effects import AudioSink, Effects, NullAudio
from engine.renderer import SurfaceRenderer, build_frame
from engine.save_system import JsonFileStore
from engine.session import GameSession
from settings import MAX_TICKS_PER_UPDATE, TILE_SIZE
from systems.input import InputAction, InputManager, create_default_input_manager
from telemetry.logger import TelemetryLogger
from ui.hud import Hud
from world.world_state import World

logger = logging.getLogger("dungeon.game")


class Game:
    """
    pygame host around a GameSession.

    - Routes key events to the session (moves, save, load, quit)
    - Runs session ticks at the configured rate, independent of FPS
    - Draws the board, then the HUD band and overlay
    """

    def __init__(
        self,
        screen: pygame.Surface,
        config: Optional[GameConfig] = None,
        *,
        world: Optional[World] = None,
        rng: Optional[random.Random] = None,
        audio: Optional[AudioSink] = None,
        telemetry: Optional[TelemetryLogger] = None,
    ) -> None:
        self.screen = screen
        self.config = config or GameConfig()
        self.input_manager: InputManager = create_default_input_manager()

        # Simple UI fonts
        self.ui_font = pygame.font.SysFont("consolas", 20)
        self.big_font = pygame.font.SysFont("consolas", 48, bold=True)

        self.hud = Hud(self.ui_font, self.big_font)
        self.renderer = SurfaceRenderer(screen, TILE_SIZE)

        if audio is None:
            audio = PygameAudio(volume=self.config.volume) if self.config.sound_enabled else NullAudio()

        effects = Effects(
            audio=audio,
            frames=self.renderer,
            store=JsonFileStore(self.config.save_file),
            stats=self.hud,
            notifier=self.hud,
        )
        self.session = GameSession(world, effects, rng=rng, telemetry=telemetry)
        self.session.start()

        self.running: bool = True
        self._tick_accumulator: float = 0.0

    @property
    def board_height(self) -> int:
        return self.session.world.game_map.height * TILE_SIZE

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
            return

        action = self.input_manager.action_for_event(event)
        if action is None:
            return

        if action is InputAction.QUIT:
            self.running = False
        elif action is InputAction.SAVE:
            self.session.save()
        elif action is InputAction.LOAD:
            if self.session.load():
                self.session.render()
        elif not self.session.is_over:
            direction = self.input_manager.direction_for_event(event)
            if direction is None:
                return
            outcome = self.session.handle_direction(direction)
            # Show the step now instead of waiting for the next tick.
            if outcome is not None and outcome.moved:
                self.session.render()

    # ------------------------------------------------------------------
    # Frame
    # ------------------------------------------------------------------

    def update(self, dt: float) -> int:
        """
        Advance the simulation by ``dt`` seconds of wall time.
        Returns the number of ticks that ran. A slow frame catches up on at
        most MAX_TICKS_PER_UPDATE ticks; the rest of the backlog is dropped.
        """
        self.hud.update(dt)
        if self.session.is_over:
            return 0

        ticks = 0
        interval = self.config.tick_interval
        self._tick_accumulator = min(
            self._tick_accumulator + dt, interval * MAX_TICKS_PER_UPDATE
        )
        while self._tick_accumulator >= interval and not self.session.is_over:
            self._tick_accumulator -= interval
            self.session.tick()
            ticks += 1
        return ticks

    def draw(self) -> None:
        if self.session.is_over:
            # Loop is stopped; repaint the final board under the overlay.
            self.renderer.render(build_frame(self.session.world))
        self.hud.draw(self.screen, self.board_height)
