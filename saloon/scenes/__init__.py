"""
Scene module exports.

Provides the game session, its modes and the render snapshot.
"""

from saloon.scenes.scene_state import SessionMode
from saloon.scenes.session_snapshot import SessionSnapshot, EnemyView, ParticleView
from saloon.scenes.game_session import GameSession

__all__ = [
    # Core
    'GameSession',
    'SessionMode',
    # Render boundary
    'SessionSnapshot',
    'EnemyView',
    'ParticleView',
]
