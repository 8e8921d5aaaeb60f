"""
test_input_manager.py
---------------------
Unit tests for pointer -> tap conversion.
"""

import pygame
import pytest

from saloon.core.services.input_manager import InputManager, TapEvent
from saloon.core.utils.geometry import Viewport


@pytest.fixture
def viewport():
    viewport = Viewport(480, 720)
    viewport.fit(960, 1440)
    return viewport


@pytest.fixture
def input_manager(viewport):
    return InputManager(viewport)


def click(x, y, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=(x, y))


class TestMouseInput:

    def test_left_click_becomes_scaled_tap(self, input_manager):
        assert input_manager.handle_event(click(480, 720)) is True
        assert input_manager.drain() == [TapEvent(240, 360)]

    def test_other_buttons_ignored(self, input_manager):
        assert input_manager.handle_event(click(480, 720, button=3)) is False
        assert len(input_manager) == 0

    def test_mirrored_touch_click_ignored(self, input_manager):
        event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10), touch=True)
        assert input_manager.handle_event(event) is False

    def test_letterbox_click_dropped(self, viewport):
        viewport.fit(1440, 1440)
        manager = InputManager(viewport)

        assert manager.handle_event(click(100, 700)) is False
        assert manager.drain() == []

    def test_unrelated_events_ignored(self, input_manager):
        event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)
        assert input_manager.handle_event(event) is False


class TestTouchInput:

    def test_finger_uses_normalized_window_coordinates(self, input_manager):
        event = pygame.event.Event(pygame.FINGERDOWN, x=0.25, y=0.5, finger_id=0, touch_id=0)

        assert input_manager.handle_event(event) is True
        assert input_manager.drain() == [TapEvent(120, 360)]


class TestQueue:

    def test_drain_empties_queue_in_order(self, input_manager):
        input_manager.handle_event(click(0, 0))
        input_manager.handle_event(click(960, 1440))

        assert input_manager.drain() == [TapEvent(0, 0), TapEvent(480, 720)]
        assert input_manager.drain() == []
