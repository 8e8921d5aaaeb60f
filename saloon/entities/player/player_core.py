"""
player_core.py
--------------
The player's revolver and health: ammunition, reload countdown, lives.

Responsibilities
----------------
- Track rounds in the cylinder and refill them only through a reload.
- Run the reload countdown and ignore redundant reload requests.
- Track remaining lives, floored at zero.
"""

from saloon.core.debug.debug_logger import DebugLogger
from saloon.core.runtime.gameplay_config import DEFAULT_CONFIG


class Player:
    """Resource model for the gunslinger behind the camera."""

    def __init__(self, config=None):
        """
        Args:
            config: "player" section of the gameplay config
        """
        config = config if config is not None else DEFAULT_CONFIG["player"]
        self.max_ammo = config["max_ammo"]
        self.max_lives = config["max_lives"]
        self.reload_time = config["reload_time"]

        self.ammo = self.max_ammo
        self.lives = self.max_lives
        self.reloading = False
        self.reload_timer = 0.0

    def reset(self):
        """Full cylinder, full lives, no reload in progress."""
        self.ammo = self.max_ammo
        self.lives = self.max_lives
        self.reloading = False
        self.reload_timer = 0.0

    # ===========================================================
    # Shooting
    # ===========================================================
    @property
    def can_fire(self) -> bool:
        return self.ammo > 0 and not self.reloading

    @property
    def is_empty(self) -> bool:
        return self.ammo <= 0

    def consume_round(self) -> bool:
        """Spend one round. Returns False (and changes nothing) if unable to fire."""
        if not self.can_fire:
            return False
        self.ammo -= 1
        return True

    # ===========================================================
    # Reloading
    # ===========================================================
    def start_reload(self) -> bool:
        """
        Begin reloading.

        Returns:
            bool: False when already reloading or the cylinder is full
        """
        if self.reloading or self.ammo >= self.max_ammo:
            return False

        self.reloading = True
        self.reload_timer = self.reload_time
        DebugLogger.action(f"Reloading ({self.ammo}/{self.max_ammo} left)", category="player")
        return True

    def update(self, dt: float) -> bool:
        """
        Advance the reload countdown.

        Returns:
            bool: True on the frame the reload completes
        """
        if not self.reloading:
            return False

        self.reload_timer -= dt
        if self.reload_timer > 0:
            return False

        self.reloading = False
        self.reload_timer = 0.0
        self.ammo = self.max_ammo
        DebugLogger.action("Reload complete", category="player")
        return True

    @property
    def reload_progress(self) -> float:
        """0.0 at the start of a reload, 1.0 when done (0.0 when idle)."""
        if not self.reloading or self.reload_time <= 0:
            return 0.0
        return min(1.0, max(0.0, 1.0 - self.reload_timer / self.reload_time))

    # ===========================================================
    # Damage
    # ===========================================================
    def lose_life(self) -> int:
        """Remove one life (never below zero). Returns lives left."""
        self.lives = max(0, self.lives - 1)
        DebugLogger.state(f"Player hit, {self.lives} lives left", category="player")
        return self.lives

    @property
    def is_alive(self) -> bool:
        return self.lives > 0
