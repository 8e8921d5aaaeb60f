"""
particle_manager.py
-------------------
Short-lived feedback particles: muzzle flashes, blood, bullet holes, hit flashes.

Particles are plain simulation records; the renderer reads them from the
session snapshot. Presets (lifetimes, blood spray) come from particles.json.

Usage:
    particles = ParticleManager(rng=rng)
    particles.muzzle_flash()
    particles.impact(x, y)      # blood burst + hit flash
    particles.update(dt)
"""

import random

from saloon.core.debug.debug_logger import DebugLogger
from saloon.core.runtime.game_settings import Playfield
from saloon.core.services.config_manager import load_config
from saloon.entities.entity_types import ParticleKind


# ===========================================================
# Presets
# ===========================================================

DEFAULT_PRESETS = {
    ParticleKind.FLASH: {"lifetime": (0.14, 0.14)},
    ParticleKind.ENEMY_FLASH: {"lifetime": (0.14, 0.14), "offset": (-24, 8)},
    ParticleKind.HIT: {"lifetime": (0.22, 0.22)},
    ParticleKind.HOLE: {"lifetime": (7.0, 7.0)},
    ParticleKind.BLOOD: {
        "lifetime": (0.35, 0.7),
        "count": 7,
        "vx_range": (-150, 150),
        "vy_range": (-210, -30),
        "gravity": 648,
    },
}


def load_presets(filename="particles.json"):
    """Load particle presets from config, convert lists to tuples."""
    data = load_config(filename, default_dict=DEFAULT_PRESETS)

    for preset in data.values():
        for key, value in preset.items():
            if isinstance(value, list):
                preset[key] = tuple(value)

    return data


# ===========================================================
# Single Particle
# ===========================================================

class Particle:
    """Individual particle with position, velocity, and lifetime."""

    __slots__ = ("kind", "x", "y", "vx", "vy", "gravity", "lifetime", "max_lifetime")

    def __init__(self, kind, x, y, lifetime, vx=0.0, vy=0.0, gravity=0.0):
        self.kind = kind
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.gravity = gravity
        self.lifetime = lifetime
        self.max_lifetime = lifetime

    def update(self, dt):
        """Update particle position and lifetime. Returns True while alive."""
        self.x += self.vx * dt
        self.y += self.vy * dt
        self.vy += self.gravity * dt
        self.lifetime -= dt
        return self.lifetime > 0

    @property
    def alive(self):
        return self.lifetime > 0

    @property
    def life_ratio(self):
        """Remaining share of the lifetime, 1.0 when fresh."""
        if self.max_lifetime <= 0:
            return 0.0
        return max(0.0, self.lifetime / self.max_lifetime)


# ===========================================================
# Particle Manager
# ===========================================================

class ParticleManager:
    """Owns every live particle of one session."""

    def __init__(self, presets=None, rng=None):
        self.presets = presets if presets is not None else load_presets()
        self._rng = rng or random.Random()
        self.particles = []

    # ===========================================================
    # Emission
    # ===========================================================

    def _preset(self, kind):
        return self.presets.get(kind, DEFAULT_PRESETS[kind])

    def emit(self, kind, x, y, vx=0.0, vy=0.0, gravity=0.0):
        """Spawn a single particle using the preset lifetime for `kind`."""
        if kind not in ParticleKind.ALL:
            raise ValueError(f"Unknown particle kind: {kind}")

        low, high = self._preset(kind)["lifetime"]
        particle = Particle(kind, x, y, self._rng.uniform(low, high), vx, vy, gravity)
        self.particles.append(particle)
        return particle

    def muzzle_flash(self):
        """Player revolver flash at the gun position."""
        return self.emit(ParticleKind.FLASH, Playfield.GUN_X, Playfield.GUN_Y)

    def enemy_flash(self, x, y):
        """Enemy gun flash, offset from the enemy's body centre."""
        ox, oy = self._preset(ParticleKind.ENEMY_FLASH).get("offset", (0, 0))
        return self.emit(ParticleKind.ENEMY_FLASH, x + ox, y + oy)

    def bullet_hole(self, x, y):
        """Decal left where a shot missed."""
        return self.emit(ParticleKind.HOLE, x, y)

    def impact(self, x, y):
        """Blood spray plus a hit flash at the impact point."""
        preset = self._preset(ParticleKind.BLOOD)
        for _ in range(preset["count"]):
            self.emit(
                ParticleKind.BLOOD, x, y,
                vx=self._rng.uniform(*preset["vx_range"]),
                vy=self._rng.uniform(*preset["vy_range"]),
                gravity=preset["gravity"],
            )
        self.emit(ParticleKind.HIT, x, y)

    # ===========================================================
    # Update
    # ===========================================================

    def update(self, dt):
        """Advance all particles and drop expired ones."""
        before = len(self.particles)
        self.particles = [p for p in self.particles if p.update(dt)]
        removed = before - len(self.particles)
        if removed:
            DebugLogger.trace(f"Expired {removed} particles", category="particles")

    def of_kind(self, kind):
        return [p for p in self.particles if p.kind == kind]

    def clear(self):
        self.particles.clear()

    def __len__(self):
        return len(self.particles)

    def __iter__(self):
        return iter(self.particles)
