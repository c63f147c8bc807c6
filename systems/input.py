from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Set, Union

import pygame

from engine.movement import Direction


ActionType = Union["InputAction", str]


class InputAction(str, Enum):
    """
    Logical input actions the game can respond to.

    These are decoupled from any specific key so bindings can be remapped.
    """

    # Movement
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"

    # Snapshot
    SAVE = "save"
    LOAD = "load"

    QUIT = "quit"


MOVE_DIRECTIONS: Dict[InputAction, Direction] = {
    InputAction.MOVE_UP: Direction.UP,
    InputAction.MOVE_DOWN: Direction.DOWN,
    InputAction.MOVE_LEFT: Direction.LEFT,
    InputAction.MOVE_RIGHT: Direction.RIGHT,
}


class InputManager:
    """
    Key bindings for the game.

    Responsibilities:
    - Maintain bindings: logical InputAction -> one or more pygame keycodes.
    - Translate key events into actions and movement directions.
    """

    def __init__(self) -> None:
        # Map from action -> set of pygame key constants
        self._bindings: Dict[InputAction, Set[int]] = {}

    # ------------------------------------------------------------------
    # Binding helpers
    # ------------------------------------------------------------------

    def _normalise_action(self, action: ActionType) -> InputAction:
        """
        Ensure we always use a stable InputAction key internally.

        Accepts either an InputAction or a matching string value.
        """
        if isinstance(action, InputAction):
            return action
        # Will raise ValueError if an unknown string is passed, which is fine:
        # better an explicit crash than silently having a dead binding.
        return InputAction(action)

    def bind_key(self, action: ActionType, key: int) -> None:
        """Bind a pygame key constant to the given logical action."""
        act = self._normalise_action(action)
        self._bindings.setdefault(act, set()).add(int(key))

    # ------------------------------------------------------------------
    # Event queries
    # ------------------------------------------------------------------

    def action_for_event(self, event: pygame.event.Event) -> Optional[InputAction]:
        """Map a KEYDOWN event to its action, or None for unbound keys."""
        if event.type != pygame.KEYDOWN:
            return None
        key = getattr(event, "key", None)
        if key is None:
            return None
        for action, keys in self._bindings.items():
            if int(key) in keys:
                return action
        return None

    def direction_for_event(self, event: pygame.event.Event) -> Optional[Direction]:
        action = self.action_for_event(event)
        if action is None:
            return None
        return MOVE_DIRECTIONS.get(action)


def create_default_input_manager() -> InputManager:
    """Arrow keys and WASD move, F5 saves, F9 loads, Escape quits."""
    manager = InputManager()

    manager.bind_key(InputAction.MOVE_UP, pygame.K_UP)
    manager.bind_key(InputAction.MOVE_UP, pygame.K_w)
    manager.bind_key(InputAction.MOVE_DOWN, pygame.K_DOWN)
    manager.bind_key(InputAction.MOVE_DOWN, pygame.K_s)
    manager.bind_key(InputAction.MOVE_LEFT, pygame.K_LEFT)
    manager.bind_key(InputAction.MOVE_LEFT, pygame.K_a)
    manager.bind_key(InputAction.MOVE_RIGHT, pygame.K_RIGHT)
    manager.bind_key(InputAction.MOVE_RIGHT, pygame.K_d)

    manager.bind_key(InputAction.SAVE, pygame.K_F5)
    manager.bind_key(InputAction.LOAD, pygame.K_F9)
    manager.bind_key(InputAction.QUIT, pygame.K_ESCAPE)

    return manager
