"""
main_loop.py
------------
Host loop: window, clock, pointer input, session step and rendering.

Responsibilities:
- Initialize pygame and the display
- Convert pointer events to taps and feed them to the session
- Step the session with the clamped frame delta
- Draw the session snapshot and present it
- Keep the window caption in step with the session (wave, final score)
"""

import pygame

from saloon.core.debug.debug_logger import DebugLogger
from saloon.core.runtime.game_settings import Display, Physics
from saloon.core.services.display_manager import DisplayManager
from saloon.core.services.event_manager import (
    SessionStartedEvent,
    SessionEndedEvent,
    WaveStartedEvent,
)
from saloon.core.services.input_manager import InputManager
from saloon.graphics.draw_manager import SaloonRenderer
from saloon.scenes.game_session import GameSession


class MainLoop:
    """
    Runs one GameSession in a pygame window.

    One variable step per frame; the session clamps the delta itself, the
    loop clamps it again so a stalled frame never reaches the simulation.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, session=None, window_size=Display.DEFAULT_WINDOW_SIZE):
        """
        Args:
            session: GameSession to host (a fresh one if None)
            window_size: Window preset name
        """
        DebugLogger.section("Initializing MainLoop")

        pygame.init()
        pygame.display.set_caption(Display.CAPTION)
        DebugLogger.init_entry("Pygame")

        self.display = DisplayManager(Display.WIDTH, Display.HEIGHT, window_size)
        self.input_manager = InputManager(self.display.viewport)
        self.renderer = SaloonRenderer()
        self.session = session or GameSession()
        self.session.events.subscribe(SessionStartedEvent, self._on_session_started)
        self.session.events.subscribe(WaveStartedEvent, self._on_wave_started)
        self.session.events.subscribe(SessionEndedEvent, self._on_session_ended)

        self.clock = pygame.time.Clock()
        self.running = True

        DebugLogger.init_entry("Main Loop Runtime")
        DebugLogger.init_sub("Game Clock Initialized", level=1)

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self):
        """Loop until the window is closed."""
        DebugLogger.section("Game Loop")

        try:
            while self.running:
                frame_time = self.clock.tick(Display.FPS) / 1000.0
                frame_time = min(frame_time, Physics.MAX_FRAME_TIME)

                self._handle_events()
                for tap in self.input_manager.drain():
                    self.session.handle_input(tap)

                self.session.step(frame_time)
                self._draw()
        except Exception as exc:
            DebugLogger.fail(f"Main loop crashed: {exc}")
            raise
        finally:
            pygame.quit()
            DebugLogger.system("Pygame terminated")

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        """Quit, window hotkeys and resizes first; everything else may become a tap."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                break

            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_F11:
                    self.display.toggle_fullscreen()
                elif event.key == pygame.K_ESCAPE:
                    self.running = False
                continue

            if event.type == pygame.VIDEORESIZE:
                self.display.handle_resize(event.w, event.h)
                continue

            self.input_manager.handle_event(event)

    # ===========================================================
    # Rendering
    # ===========================================================

    def _draw(self):
        self.renderer.draw(self.display.get_game_surface(), self.session.snapshot())
        self.display.render()

    # ===========================================================
    # Session Events
    # ===========================================================

    def _on_session_started(self, event):
        self._set_caption("Wave 1")

    def _on_wave_started(self, event):
        self._set_caption(f"Wave {event.wave}")

    def _on_session_ended(self, event):
        self._set_caption(f"Game Over | Score {event.score} | Best {event.best_score}")

    @staticmethod
    def _set_caption(status: str):
        pygame.display.set_caption(f"{Display.CAPTION} - {status}")
