"""
enemy.py
--------
Outlaw enemy driven by the hide / warn / peek / shoot cycle.

Responsibilities
----------------
- Advance the per-enemy phase machine each frame.
- Derive the draw position from the cover slot and the current phase.
- Apply hits: retreat when wounded, fall when killed.
- Raise the fire side effect through `on_fire` when a peek runs out.
"""

import math
import random

import pygame

from saloon.core.debug.debug_logger import DebugLogger
from saloon.core.runtime.gameplay_config import DEFAULT_CONFIG
from saloon.core.utils.geometry import clamp
from saloon.entities.entity_state import (
    EnteringPhase,
    HidingPhase,
    WarningPhase,
    PeekingPhase,
    ShootingPhase,
    RetreatingPhase,
    DeadPhase,
)


class Enemy:
    """A single outlaw bound to one cover slot for its whole life."""

    __slots__ = (
        'cover', 'hp', 'max_hp', 'outfit', 'speed', 'phase',
        'pos', 'peek_y', 'on_fire', '_config', '_rng'
    )

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, cover, hp=1, speed=None, outfit=0, config=None, rng=None, entry_x=None):
        """
        Args:
            cover: CoverSlot the enemy walks to and hides behind
            hp: Starting (and maximum) hit points
            speed: Entry walk speed in px/s (defaults to the wave-1 speed)
            outfit: Cosmetic palette index
            config: "enemy" section of the gameplay config
            rng: random.Random used for every dwell draw
            entry_x: Horizontal start position (defaults to the door)
        """
        if hp <= 0:
            raise ValueError(f"Enemy needs positive hit points, got {hp}")

        self._config = config if config is not None else DEFAULT_CONFIG["enemy"]
        self._rng = rng or random.Random()

        self.cover = cover
        self.hp = hp
        self.max_hp = hp
        self.outfit = outfit
        self.speed = speed if speed is not None else (
            self._config["base_speed"] + self._config["speed_per_wave"]
        )

        self.peek_y = cover.peek_y(self._config["peek_offset"])
        start_x = self._config["entry_x"] if entry_x is None else entry_x
        self.pos = pygame.Vector2(start_x, self.peek_y)

        self.phase = EnteringPhase()

        # Called with this enemy when a peek ends in a shot
        self.on_fire = None

    # ===========================================================
    # Queries
    # ===========================================================
    @property
    def cover_id(self) -> int:
        return self.cover.id

    @property
    def phase_name(self) -> str:
        return self.phase.name

    @property
    def visible(self) -> bool:
        return self.phase.visible

    @property
    def is_dead(self) -> bool:
        return isinstance(self.phase, DeadPhase)

    @property
    def is_hittable(self) -> bool:
        """
        Only enemies showing above cover can be shot.

        Enemies still walking in are drawn in front of the furniture but are
        never hit-tested.
        """
        return self.visible and not isinstance(self.phase, (EnteringPhase, DeadPhase))

    @property
    def is_removable(self) -> bool:
        return self.is_dead and self.phase.remaining <= 0

    def hitbox(self) -> tuple:
        """Tappable rectangle (x, y, w, h) around the upper body."""
        width, height = self._config["hitbox"]
        return (
            self.pos.x - width / 2,
            self.pos.y - self._config["hitbox_top"],
            width,
            height,
        )

    # ===========================================================
    # Update Logic
    # ===========================================================
    def update(self, dt: float, now: float = 0.0):
        """
        Advance the active phase.

        Args:
            dt: Delta time in seconds
            now: Session animation time (drives the warning bob)
        """
        phase = self.phase

        if isinstance(phase, EnteringPhase):
            self._update_entering(phase, dt)

        elif isinstance(phase, HidingPhase):
            phase.remaining -= dt
            if phase.remaining <= 0:
                self._start_warning()

        elif isinstance(phase, WarningPhase):
            phase.remaining -= dt
            self.pos.y = (
                self.peek_y + self._config["warning_bob_base"]
                + math.sin(now * self._config["warning_bob_rate"]) * self._config["warning_bob"]
            )
            if phase.remaining <= 0:
                self._start_peeking()

        elif isinstance(phase, PeekingPhase):
            phase.remaining -= dt
            if phase.remaining <= 0:
                self._fire()

        elif isinstance(phase, ShootingPhase):
            phase.remaining -= dt
            if phase.remaining <= 0:
                self._hide("post_shot_hide")

        elif isinstance(phase, RetreatingPhase):
            phase.remaining -= dt
            sunk = 1.0 - clamp(phase.remaining / phase.duration, 0.0, 1.0)
            self.pos.y = self.peek_y + sunk * self._config["retreat_depth"]
            if phase.remaining <= 0:
                self._hide("post_retreat_hide")

        elif isinstance(phase, DeadPhase):
            phase.remaining -= dt
            self.pos.y += dt * self._config["fall_speed"]

    def _update_entering(self, phase: EnteringPhase, dt: float):
        """Walk toward the cover with a two-frame walk cycle."""
        phase.walk_timer += dt
        if phase.walk_timer > self._config["walk_frame_time"]:
            phase.walk_timer = 0.0
            phase.walk_frame ^= 1

        step = self.speed * dt
        dx = self.cover.x - self.pos.x
        if abs(dx) <= step:
            self.pos.x = self.cover.x
            self._hide("entry_hide")
        else:
            self.pos.x += math.copysign(step, dx)

    # ===========================================================
    # Transitions
    # ===========================================================
    def _draw(self, key: str) -> float:
        low, high = self._config[key]
        return self._rng.uniform(low, high)

    def _hide(self, dwell_key: str):
        self.phase = HidingPhase(self._draw(dwell_key))
        DebugLogger.trace(
            f"Cover {self.cover_id}: hiding for {self.phase.remaining:.2f}s",
            category="enemy"
        )

    def _start_warning(self):
        self.phase = WarningPhase(self._draw("warning"))
        self.pos.y = self.peek_y + self._config["warning_offset"]

    def _start_peeking(self):
        self.phase = PeekingPhase(self._draw("peek"))
        self.pos.y = self.peek_y

    def _fire(self):
        self.phase = ShootingPhase(self._config["shoot_duration"])
        DebugLogger.trace(f"Cover {self.cover_id}: fired", category="enemy")
        if self.on_fire:
            self.on_fire(self)

    # ===========================================================
    # Damage
    # ===========================================================
    def take_damage(self, amount: int = 1) -> bool:
        """
        Apply a hit.

        Returns:
            bool: True if this hit killed the enemy
        """
        if self.is_dead:
            return False

        self.hp = max(0, self.hp - amount)

        if self.hp == 0:
            self.phase = DeadPhase(self._config["dead_duration"])
            DebugLogger.state(f"Enemy at cover {self.cover_id} killed", category="enemy")
            return True

        duration = self._config["retreat_duration"]
        self.phase = RetreatingPhase(remaining=duration, duration=duration)
        DebugLogger.state(
            f"Enemy at cover {self.cover_id} wounded ({self.hp}/{self.max_hp} HP)",
            category="enemy"
        )
        return False

    def __repr__(self):
        return (
            f"Enemy(cover={self.cover_id}, phase={self.phase_name}, "
            f"hp={self.hp}/{self.max_hp}, pos=({self.pos.x:.1f}, {self.pos.y:.1f}))"
        )
