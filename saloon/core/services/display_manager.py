"""
display_manager.py
------------------
Window management and letterboxed scaling of the portrait playfield.

Responsibilities:
- Window creation, resizing and fullscreen toggling
- Aspect ratio preservation with letterboxing (through Viewport)
- Blitting the logical game surface to the window each frame
"""

import pygame

from saloon.core.debug.debug_logger import DebugLogger
from saloon.core.runtime.game_settings import Display
from saloon.core.utils.geometry import Viewport


class DisplayManager:
    """
    Owns the window and the fixed-size logical game surface.

    Everything is drawn at 480x720 and scaled with pygame.transform.scale()
    into the centred viewport area; spare window space stays black.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, game_width=Display.WIDTH, game_height=Display.HEIGHT, window_size="small"):
        """
        Args:
            game_width: Logical playfield width
            game_height: Logical playfield height
            window_size: Initial window preset ("small", "medium", "large")
        """
        DebugLogger.init_entry("DisplayManager")

        self.game_width = game_width
        self.game_height = game_height
        self.game_surface = pygame.Surface((game_width, game_height))
        self.viewport = Viewport(game_width, game_height)

        self.window = None
        self.window_size_preset = window_size
        self.is_fullscreen = False

        self._create_window()

    # ===========================================================
    # Window Management
    # ===========================================================

    def toggle_fullscreen(self):
        """Toggle between windowed and fullscreen modes."""
        self._create_window(fullscreen=not self.is_fullscreen)
        state = "ON" if self.is_fullscreen else "OFF"
        DebugLogger.state(f"Toggled fullscreen -> {state}", category="display")

    def set_window_size(self, size_preset: str):
        """Switch to a preset window size (ignored in fullscreen)."""
        if self.is_fullscreen:
            DebugLogger.warn("Cannot change window size in fullscreen mode", category="display")
            return

        if size_preset not in Display.WINDOW_SIZES:
            DebugLogger.warn(f"Unknown window size preset: {size_preset}", category="display")
            return

        self.window_size_preset = size_preset
        self._create_window()

    def handle_resize(self, width: int, height: int):
        """Refit the viewport after the user resized the window."""
        if width <= 0 or height <= 0:
            return
        self.window = pygame.display.get_surface() or self.window
        self._refit()

    # ===========================================================
    # Rendering Pipeline
    # ===========================================================

    def get_game_surface(self) -> pygame.Surface:
        """Logical surface all drawing targets."""
        return self.game_surface

    def render(self):
        """Scale the game surface into the viewport and flip."""
        self.window.fill((0, 0, 0))
        scaled = pygame.transform.scale(self.game_surface, self.viewport.scaled_size)
        self.window.blit(scaled, (round(self.viewport.offset_x), round(self.viewport.offset_y)))
        pygame.display.flip()

    # ===========================================================
    # Internal: Window Creation
    # ===========================================================

    def _create_window(self, fullscreen: bool = False):
        if fullscreen:
            self.window = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
            self.is_fullscreen = True
            mode = "Fullscreen"
        else:
            window_w, window_h = Display.WINDOW_SIZES.get(
                self.window_size_preset,
                (self.game_width, self.game_height)
            )
            self.window = pygame.display.set_mode((window_w, window_h), pygame.RESIZABLE)
            self.is_fullscreen = False
            mode = f"Windowed ({window_w}x{window_h})"

        self._refit()
        DebugLogger.init_sub(f"Display Mode: {mode}", level=1)

    def _refit(self):
        window_w, window_h = self.window.get_size()
        self.viewport.fit(window_w, window_h)
        DebugLogger.trace(
            f"Scale={self.viewport.scale:.3f}, "
            f"Offset=({self.viewport.offset_x:.0f},{self.viewport.offset_y:.0f})",
            category="display"
        )
