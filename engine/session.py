"""
Game session: owns the world and runs the simulation.

A session is driven from outside: the host calls ``tick()`` once per frame
(render, then enemy movement) and ``handle_direction()`` for each movement
key. Every stat change is followed by a terminal check; once the game is
won or lost the session refuses any further mutation.
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Optional

from engine.effects import Effects, SoundCue
from engine.error_handler import SaveError, log_error
from engine.movement import Direction, MoveOutcome, resolve_player_step
from engine.renderer import Frame, build_frame
from engine.save_system import decode_world, encode_world
from settings import ENEMY_DAMAGE, SAVE_KEY, WIN_SCORE
from telemetry.logger import TelemetryLogger
from world.ai import move_enemy_towards_player
from world.world_state import World, new_world

logger = logging.getLogger("dungeon.session")

SAVED_MESSAGE = "Game saved!"
NO_SAVE_MESSAGE = "No saved game."
WIN_MESSAGE = "You Win!"
LOSS_MESSAGE = "Game Over"

_OUTCOME_CUES = {
    MoveOutcome.COIN: SoundCue.COIN,
    MoveOutcome.KEY: SoundCue.KEY,
    MoveOutcome.DOOR: SoundCue.DOOR,
}


class GameResult(str, Enum):
    WIN = "win"
    LOSS = "loss"


class GameSession:
    """
    Core game object for one run.

    Responsibilities:
    - Apply player steps and enemy chase steps to the shared World
    - Fire effects (sound cues, stats refresh, frames, notices)
    - Detect the terminal condition and freeze the world afterwards
    - Save/restore the world through the snapshot store
    """

    def __init__(
        self,
        world: Optional[World] = None,
        effects: Optional[Effects] = None,
        *,
        rng: Optional[random.Random] = None,
        save_key: str = SAVE_KEY,
        telemetry: Optional[TelemetryLogger] = None,
    ) -> None:
        self.world: World = world if world is not None else new_world(rng=rng)
        self.effects: Effects = effects if effects is not None else Effects()
        self.save_key = save_key
        self.telemetry = telemetry
        self.result: Optional[GameResult] = None
        self.frame_count: int = 0

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def is_over(self) -> bool:
        return self.result is not None

    def start(self) -> None:
        """Push initial stats to the display."""
        self._update_stats()
        if self.telemetry is not None:
            self.telemetry.session_start(enemies=len(self.world.enemies))

    def _update_stats(self) -> None:
        player = self.world.player
        self.effects.stats.update_stats(player.health, player.score, player.keys)

    # ------------------------------------------------------------------
    # Player input
    # ------------------------------------------------------------------

    def handle_direction(self, direction: Direction) -> Optional[MoveOutcome]:
        """
        Apply one player step. Returns the outcome, or None once the game
        has ended and input is no longer accepted.
        """
        if self.is_over:
            return None

        outcome = resolve_player_step(self.world.player, self.world.game_map, direction)
        if not outcome.moved:
            return outcome

        cue = _OUTCOME_CUES.get(outcome)
        if cue is not None:
            self.effects.audio.play(cue)

        self._update_stats()
        self.check_terminal()
        return outcome

    # ------------------------------------------------------------------
    # Enemies
    # ------------------------------------------------------------------

    def advance_enemies(self) -> int:
        """
        Move every enemy one chase step, in list order.

        An enemy that ends its step on the player deals damage at once.
        Stops as soon as the game ends. Returns the number of hits dealt.
        """
        hits = 0
        player = self.world.player
        game_map = self.world.game_map

        for enemy in self.world.enemies:
            if self.is_over:
                break

            move_enemy_towards_player(enemy, player, game_map)

            if enemy.position == player.position:
                player.take_damage(ENEMY_DAMAGE)
                hits += 1
                self.effects.audio.play(SoundCue.DAMAGE)
                self._update_stats()
                self.check_terminal()

        return hits

    # ------------------------------------------------------------------
    # Frame loop
    # ------------------------------------------------------------------

    def render(self) -> Frame:
        frame = build_frame(self.world)
        self.effects.frames.render(frame)
        return frame

    def tick(self) -> bool:
        """
        Run one frame: draw the current state, then advance enemies, so the
        drawn frame shows enemies where they were before moving. Returns
        False once the session is over and the loop should stop.
        """
        if self.is_over:
            return False

        self.render()
        self.advance_enemies()
        self.frame_count += 1
        return not self.is_over

    # ------------------------------------------------------------------
    # Win / lose
    # ------------------------------------------------------------------

    def check_terminal(self) -> Optional[GameResult]:
        """End the session if health ran out or the score target was hit."""
        if self.is_over:
            return self.result

        player = self.world.player
        if not player.is_alive:
            self._end(GameResult.LOSS)
        elif player.score >= WIN_SCORE:
            self._end(GameResult.WIN)
        return self.result

    def _end(self, result: GameResult) -> None:
        self.result = result
        won = result is GameResult.WIN
        logger.info("Session ended: %s after %d frames", result.value, self.frame_count)

        self.effects.notifier.show_overlay(WIN_MESSAGE if won else LOSS_MESSAGE)
        self.effects.audio.play(SoundCue.WIN if won else SoundCue.GAMEOVER)

        if self.telemetry is not None:
            player = self.world.player
            self.telemetry.session_end(
                self.frame_count,
                result.value,
                score=player.score,
                health=player.health,
                keys=player.keys,
            )

    # ------------------------------------------------------------------
    # Save / load
    # ------------------------------------------------------------------

    def save(self) -> bool:
        """
        Store a snapshot of the world under the save key.

        A store that cannot be written is reported to the player; the game
        keeps running.
        """
        try:
            self.effects.store.write(self.save_key, encode_world(self.world))
        except SaveError as e:
            log_error(e, "save_game")
            self.effects.notifier.notify(e.user_message)
            return False

        self.effects.notifier.notify(SAVED_MESSAGE)
        logger.info("Saved game under %r", self.save_key)
        if self.telemetry is not None:
            self.telemetry.saved(self.frame_count)
        return True

    def load(self) -> bool:
        """
        Replace the world with the stored snapshot.

        A missing or unreadable snapshot, or one for a board of another
        size, leaves the world untouched and tells the player why. Loading
        is refused once the game is over.
        """
        if self.is_over:
            logger.debug("Ignoring load after the session ended")
            return False

        try:
            text = self.effects.store.read(self.save_key)
            if text is None:
                self.effects.notifier.notify(NO_SAVE_MESSAGE)
                return False
            world = decode_world(text, size=self.world.game_map.width)
        except SaveError as e:
            log_error(e, "load_game")
            self.effects.notifier.notify(e.user_message)
            return False

        self.world = world
        logger.info("Loaded game from %r", self.save_key)
        if self.telemetry is not None:
            self.telemetry.loaded(self.frame_count)
        self._update_stats()
        self.check_terminal()
        return True
