"""
Core services exports.

Provides the event system, configuration loading and pointer input.
"""

from saloon.core.services.config_manager import load_config
from saloon.core.services.event_manager import (
    EventManager,
    BaseEvent,
    SessionStartedEvent,
    SessionEndedEvent,
    WaveStartedEvent,
    EnemySpawnedEvent,
    EnemyHitEvent,
    EnemyKilledEvent,
    EnemyFiredEvent,
    PlayerHitEvent,
    ShotFiredEvent,
    ReloadStartedEvent,
    ReloadFinishedEvent,
)
from saloon.core.services.input_manager import InputManager, TapEvent

__all__ = [
    # Config
    'load_config',
    # Events
    'EventManager',
    'BaseEvent',
    'SessionStartedEvent',
    'SessionEndedEvent',
    'WaveStartedEvent',
    'EnemySpawnedEvent',
    'EnemyHitEvent',
    'EnemyKilledEvent',
    'EnemyFiredEvent',
    'PlayerHitEvent',
    'ShotFiredEvent',
    'ReloadStartedEvent',
    'ReloadFinishedEvent',
    # Input
    'InputManager',
    'TapEvent',
]
