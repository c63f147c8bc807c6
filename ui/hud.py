from __future__ import annotations

from typing import Optional

import pygame

from engine.message_log import MessageLog
from settings import COLOR_HUD_BG, COLOR_HUD_TEXT, HUD_HEIGHT

_OVERLAY_BG = (0, 0, 0, 190)
_OVERLAY_TEXT = (245, 245, 230)


class Hud:
    """
    Stats band, notices and the end-of-game overlay.

    Acts as both the stats display and the notifier for a session: the
    session pushes numbers and messages in, ``draw`` paints whatever is
    current.
    """

    def __init__(
        self,
        font: pygame.font.Font,
        big_font: Optional[pygame.font.Font] = None,
        messages: Optional[MessageLog] = None,
    ) -> None:
        self.font = font
        self.big_font = big_font or font
        self.messages = messages if messages is not None else MessageLog()
        self.health: int = 0
        self.score: int = 0
        self.keys: int = 0
        self.overlay_message: Optional[str] = None

    # ------------------------------------------------------------------
    # Session-facing API
    # ------------------------------------------------------------------

    def update_stats(self, health: int, score: int, keys: int) -> None:
        self.health = health
        self.score = score
        self.keys = keys

    def notify(self, message: str) -> None:
        self.messages.add_entry(message)

    def show_overlay(self, message: str) -> None:
        # Only the first terminal message is kept.
        if self.overlay_message is None:
            self.overlay_message = message

    @property
    def overlay_visible(self) -> bool:
        return self.overlay_message is not None

    def stats_text(self) -> str:
        return f"Health: {self.health}   Score: {self.score}   Keys: {self.keys}"

    def update(self, dt: float) -> None:
        self.messages.update(dt)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def draw(self, surface: pygame.Surface, board_height: int) -> None:
        screen_w, screen_h = surface.get_size()

        band = pygame.Rect(0, board_height, screen_w, max(HUD_HEIGHT, screen_h - board_height))
        pygame.draw.rect(surface, COLOR_HUD_BG, band)

        stats = self.font.render(self.stats_text(), True, COLOR_HUD_TEXT)
        surface.blit(stats, (band.x + 10, band.y + 6))

        if self.messages.last_message:
            msg = self.font.render(self.messages.last_message, True, (240, 210, 120))
            surface.blit(msg, (band.x + 10, band.y + 30))

        if self.overlay_visible:
            self._draw_overlay(surface, board_height)

    def _draw_overlay(self, surface: pygame.Surface, board_height: int) -> None:
        screen_w = surface.get_width()
        panel = pygame.Surface((screen_w, board_height), pygame.SRCALPHA)
        panel.fill(_OVERLAY_BG)
        surface.blit(panel, (0, 0))

        text = self.big_font.render(self.overlay_message, True, _OVERLAY_TEXT)
        rect = text.get_rect(center=(screen_w // 2, board_height // 2))
        surface.blit(text, rect)
