"""
Unit tests for InputManager and the default key bindings.
"""

import pygame
import pytest

from engine.movement import Direction
from systems.input import InputAction, InputManager, create_default_input_manager


def _keydown(key: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def _keyup(key: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYUP, key=key)


class TestBindings:

    def test_several_keys_per_action(self):
        manager = InputManager()
        manager.bind_key(InputAction.SAVE, pygame.K_F5)
        manager.bind_key("save", pygame.K_F6)
        assert manager.action_for_event(_keydown(pygame.K_F5)) is InputAction.SAVE
        assert manager.action_for_event(_keydown(pygame.K_F6)) is InputAction.SAVE

    def test_empty_manager_maps_nothing(self):
        assert InputManager().action_for_event(_keydown(pygame.K_F9)) is None

    def test_unknown_action_name_raises(self):
        with pytest.raises(ValueError):
            InputManager().bind_key("teleport", pygame.K_t)


class TestDefaultBindings:

    @pytest.mark.parametrize(
        "key, direction",
        [
            (pygame.K_UP, Direction.UP),
            (pygame.K_DOWN, Direction.DOWN),
            (pygame.K_LEFT, Direction.LEFT),
            (pygame.K_RIGHT, Direction.RIGHT),
            (pygame.K_w, Direction.UP),
            (pygame.K_d, Direction.RIGHT),
        ],
    )
    def test_movement_keys(self, key, direction):
        manager = create_default_input_manager()
        assert manager.direction_for_event(_keydown(key)) is direction

    def test_unrecognized_key_is_noop(self):
        manager = create_default_input_manager()
        assert manager.action_for_event(_keydown(pygame.K_q)) is None
        assert manager.direction_for_event(_keydown(pygame.K_q)) is None

    def test_non_movement_action_has_no_direction(self):
        manager = create_default_input_manager()
        assert manager.action_for_event(_keydown(pygame.K_F5)) is InputAction.SAVE
        assert manager.direction_for_event(_keydown(pygame.K_F5)) is None

    def test_keyup_is_not_an_action(self):
        manager = create_default_input_manager()
        assert manager.action_for_event(_keyup(pygame.K_UP)) is None
