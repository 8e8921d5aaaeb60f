"""
game_settings.py
----------------
Centralized constants for all game systems.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Logical playfield and window configuration (portrait)."""
    WIDTH: int = 480
    HEIGHT: int = 720
    FPS: int = 60
    CAPTION: str = "Saloon Shootout"

    WINDOW_SIZES = {
        "small": (480, 720),
        "medium": (600, 900),
        "large": (720, 1080),
    }
    DEFAULT_WINDOW_SIZE: str = "small"


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Update timing."""
    MAX_FRAME_TIME: float = 0.05    # Clamp after stalls (window dragged, tab hidden)


# ===========================================================
# Playfield Layout
# ===========================================================

class Playfield:
    """Fixed scenery positions in logical space."""
    DOOR_CX: float = 412
    DOOR_CY: float = 318
    DOOR_W: float = 76
    DOOR_H: float = 155

    # Player revolver muzzle (bottom-centre)
    GUN_X: float = Display.WIDTH / 2
    GUN_Y: float = Display.HEIGHT - 145


# ===========================================================
# UI Regions (x, y, w, h in logical space)
# ===========================================================

class UIRegions:
    """Tappable rectangles; edges are inclusive."""
    START_BUTTON = (Display.WIDTH / 2 - 125, Display.HEIGHT / 2 + 90, 250, 56)
    RESTART_BUTTON = (Display.WIDTH / 2 - 110, Display.HEIGHT * 0.67, 220, 56)
    RELOAD_BUTTON = (Display.WIDTH - 118, Display.HEIGHT - 70, 108, 34)


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Visual debug toggles -- not related to logging."""
    HITBOX_VISIBLE: bool = False
    HITBOX_LINE_WIDTH: int = 1
