"""
Runtime configuration exports.

Provides game-wide constants, gameplay tuning and per-run statistics.
"""

from saloon.core.runtime.game_settings import (
    Display,
    Physics,
    Playfield,
    UIRegions,
    Debug,
)
from saloon.core.runtime.session_stats import SessionStats

__all__ = [
    # Display & Layout
    'Display',
    'Playfield',
    'UIRegions',
    # Timing
    'Physics',
    # Debug
    'Debug',
    # Session
    'SessionStats',
]
