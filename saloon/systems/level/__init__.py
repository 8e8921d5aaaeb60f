"""
Level system exports.

Provides spawn pacing and wave progression.
"""

from saloon.systems.level.wave_director import WaveDirector

__all__ = [
    'WaveDirector',
]
