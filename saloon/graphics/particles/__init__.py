"""
Particle system exports.

Provides feedback particles for shots, hits and misses.
"""

from saloon.graphics.particles.particle_manager import (
    ParticleManager,
    Particle,
    DEFAULT_PRESETS,
    load_presets,
)

__all__ = [
    'ParticleManager',
    'Particle',
    'DEFAULT_PRESETS',
    'load_presets',
]
