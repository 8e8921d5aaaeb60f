"""
geometry.py
-----------
Pure hit-testing helpers and the screen-to-playfield transform.

Rectangles are (x, y, w, h) tuples in logical space with inclusive edges,
so a tap exactly on a button border still counts.
"""

from saloon.core.runtime.game_settings import Display


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds."""
    return lo if value < lo else hi if value > hi else value


def point_in_rect(px: float, py: float, rect) -> bool:
    """Inclusive point-in-rectangle test."""
    x, y, w, h = rect
    return x <= px <= x + w and y <= py <= y + h


def rect_center(rect) -> tuple:
    x, y, w, h = rect
    return x + w / 2, y + h / 2


class Viewport:
    """
    Fit-to-window transform preserving the logical aspect ratio.

    The playfield is scaled uniformly to the largest size that fits the
    window and centred, leaving letterbox bars on the spare axis.
    """

    def __init__(self, game_width=Display.WIDTH, game_height=Display.HEIGHT):
        self.game_width = game_width
        self.game_height = game_height
        self.window_width = game_width
        self.window_height = game_height
        self.scale = 1.0
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.fit(game_width, game_height)

    def fit(self, window_width: float, window_height: float):
        """Recompute scale and letterbox offsets for a new window size."""
        if window_width <= 0 or window_height <= 0:
            raise ValueError(f"Invalid window size: {window_width}x{window_height}")

        self.window_width = window_width
        self.window_height = window_height
        self.scale = min(window_width / self.game_width, window_height / self.game_height)
        self.offset_x = (window_width - self.game_width * self.scale) / 2
        self.offset_y = (window_height - self.game_height * self.scale) / 2

    @property
    def scaled_size(self) -> tuple:
        return (round(self.game_width * self.scale), round(self.game_height * self.scale))

    def screen_to_game_pos(self, screen_x: float, screen_y: float) -> tuple:
        """Convert window coordinates to logical playfield coordinates."""
        return (
            (screen_x - self.offset_x) / self.scale,
            (screen_y - self.offset_y) / self.scale,
        )

    def is_in_game_area(self, screen_x: float, screen_y: float) -> bool:
        """False for taps on the letterbox bars."""
        game_x, game_y = self.screen_to_game_pos(screen_x, screen_y)
        return 0 <= game_x <= self.game_width and 0 <= game_y <= self.game_height
