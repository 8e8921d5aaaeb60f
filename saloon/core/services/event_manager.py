"""
event_manager.py
----------------
Event-driven notifications for decoupled listeners (sound, HUD, analytics).
The host loop listens for session and wave changes to update its window
caption.

Each GameSession owns its own EventManager, so independent sessions never
see each other's events.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Type
from saloon.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class SessionStartedEvent(BaseEvent):
    """Dispatched when a new play-through begins."""
    best_score: int


@dataclass(frozen=True)
class SessionEndedEvent(BaseEvent):
    """Dispatched when the game-over screen takes over."""
    score: int
    best_score: int
    wave: int


@dataclass(frozen=True)
class WaveStartedEvent(BaseEvent):
    """Dispatched when the next wave begins."""
    wave: int
    target: int


@dataclass(frozen=True)
class EnemySpawnedEvent(BaseEvent):
    """Dispatched when an enemy walks in through the door."""
    cover_id: int
    hp: int


@dataclass(frozen=True)
class EnemyHitEvent(BaseEvent):
    """Dispatched for every successful hit, fatal or not."""
    cover_id: int
    position: tuple
    hp_left: int


@dataclass(frozen=True)
class EnemyKilledEvent(BaseEvent):
    """Dispatched when an enemy's hit points reach zero."""
    cover_id: int
    position: tuple
    points: int


@dataclass(frozen=True)
class EnemyFiredEvent(BaseEvent):
    """Dispatched when an enemy pulls the trigger."""
    cover_id: int
    position: tuple


@dataclass(frozen=True)
class PlayerHitEvent(BaseEvent):
    """Dispatched when an enemy bullet lands."""
    lives_left: int


@dataclass(frozen=True)
class ShotFiredEvent(BaseEvent):
    """Dispatched for each round the player fires."""
    position: tuple
    hit: bool
    ammo_left: int


@dataclass(frozen=True)
class ReloadStartedEvent(BaseEvent):
    duration: float


@dataclass(frozen=True)
class ReloadFinishedEvent(BaseEvent):
    ammo: int


# ===========================================================
# Event Manager
# ===========================================================
class EventManager:
    """Central event dispatcher using pub-sub pattern."""

    def __init__(self):
        self._subscribers: Dict[Type[BaseEvent], List[Callable]] = {}

    # ===========================================================
    # Subscription
    # ===========================================================

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """
        Register a callback for an event type.

        Args:
            event_type: Event class to listen for
            callback: Function to call when event fires
        """
        callbacks = self._subscribers.setdefault(event_type, [])
        if callback in callbacks:
            return

        callbacks.append(callback)
        callback_name = getattr(callback, '__name__', repr(callback))
        DebugLogger.system(
            f"Subscribed '{callback_name}' to '{event_type.__name__}'",
            category="event_manager"
        )

    def unsubscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """Remove a callback from an event type."""
        if event_type in self._subscribers:
            try:
                self._subscribers[event_type].remove(callback)
            except ValueError:
                pass

    # ===========================================================
    # Dispatch
    # ===========================================================

    def dispatch(self, event: BaseEvent) -> None:
        """
        Send event to all registered callbacks.

        Args:
            event: Event instance to dispatch
        """
        event_type = type(event)

        if event_type not in self._subscribers:
            return

        for callback in list(self._subscribers[event_type]):
            try:
                callback(event)
            except Exception as e:
                callback_name = getattr(callback, '__name__', repr(callback))
                DebugLogger.warn(f"Error in event callback {callback_name}: {e}")

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def clear_all(self) -> None:
        """Remove all subscribers."""
        self._subscribers.clear()

    def get_subscriber_count(self, event_type: Type[BaseEvent] = None) -> int:
        """Number of subscribers for one event type, or in total."""
        if event_type:
            return len(self._subscribers.get(event_type, []))
        return sum(len(subs) for subs in self._subscribers.values())
