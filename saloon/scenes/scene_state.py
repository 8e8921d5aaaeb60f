"""
scene_state.py
--------------
Top-level modes of a game session.
"""

from enum import Enum


class SessionMode(Enum):
    """Lifecycle modes for a play-through."""
    NOT_STARTED = "not_started"   # Title screen, waiting for the start button
    ACTIVE = "active"             # Simulation running
    ENDED = "ended"               # Game-over screen, final score retained
