"""
session_snapshot.py
-------------------
Read-only per-frame view of a session for the renderer.

Everything here is a frozen copy; drawing code can never mutate the
simulation through it.
"""

from dataclasses import dataclass
from typing import Tuple

from saloon.scenes.scene_state import SessionMode


@dataclass(frozen=True)
class EnemyView:
    cover_id: int
    x: float
    y: float
    phase: str
    visible: bool
    hittable: bool
    hp: int
    max_hp: int
    outfit: int
    walk_frame: int
    hitbox: tuple


@dataclass(frozen=True)
class ParticleView:
    kind: str
    x: float
    y: float
    life: float
    life_ratio: float


@dataclass(frozen=True)
class SessionSnapshot:
    mode: SessionMode
    score: int
    best_score: int
    lives: int
    max_lives: int
    ammo: int
    max_ammo: int
    reloading: bool
    reload_progress: float
    wave: int
    wave_kills: int
    wave_target: int
    banner_alpha: float
    hit_flash: float
    door_swing: float
    time: float
    enemies: Tuple[EnemyView, ...]
    particles: Tuple[ParticleView, ...]
    covers: tuple

    @property
    def entering_enemies(self):
        """Enemies drawn in front of the cover (still walking in)."""
        return tuple(e for e in self.enemies if e.phase == "entering")

    @property
    def covered_enemies(self):
        """Visible enemies drawn behind the cover."""
        return tuple(e for e in self.enemies if e.phase != "entering" and e.visible)
