"""
input_manager.py
----------------
Turns raw pointer events into playfield taps.

Provides:
- Mouse (left button) and touch (FINGERDOWN) support
- Window -> logical coordinate conversion through the Viewport
- A queue of TapEvents drained once per frame by the host loop
"""

from collections import deque
from dataclasses import dataclass

import pygame

from saloon.core.debug.debug_logger import DebugLogger


@dataclass(frozen=True)
class TapEvent:
    """A tap at (x, y) in logical playfield coordinates."""
    x: float
    y: float


class InputManager:
    """Collects taps between frames."""

    LEFT_BUTTON = 1

    def __init__(self, viewport):
        """
        Args:
            viewport: Viewport used for window -> playfield conversion
        """
        self.viewport = viewport
        self._taps = deque()

    def handle_event(self, event) -> bool:
        """
        Queue a tap for a pointer-down event.

        Returns:
            bool: True if the event produced a tap
        """
        if event.type == pygame.MOUSEBUTTONDOWN:
            # SDL mirrors touches as mouse clicks; FINGERDOWN already covers them
            if getattr(event, "touch", False) or event.button != self.LEFT_BUTTON:
                return False
            screen_x, screen_y = event.pos

        elif event.type == pygame.FINGERDOWN:
            screen_x = event.x * self.viewport.window_width
            screen_y = event.y * self.viewport.window_height

        else:
            return False

        if not self.viewport.is_in_game_area(screen_x, screen_y):
            DebugLogger.trace(f"Tap on letterbox ignored ({screen_x:.0f}, {screen_y:.0f})", category="input")
            return False

        x, y = self.viewport.screen_to_game_pos(screen_x, screen_y)
        self._taps.append(TapEvent(x, y))
        DebugLogger.trace(f"Tap at ({x:.1f}, {y:.1f})", category="input")
        return True

    def drain(self):
        """Return and clear all taps queued since the last call."""
        taps = list(self._taps)
        self._taps.clear()
        return taps

    def __len__(self):
        return len(self._taps)
