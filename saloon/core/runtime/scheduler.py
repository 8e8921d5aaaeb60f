"""
scheduler.py
------------
Per-session queue of deferred effects keyed by due time.

Delayed consequences (an enemy's bullet landing, the next wave starting,
the automatic reload after the last round, the game-over screen) are pushed
here instead of running on free timers. The session drains due entries at
the start of every step and re-validates each one before applying it, so an
entry whose target has since changed simply does nothing.
"""

import heapq
import itertools
from dataclasses import dataclass
from typing import Any, List

from saloon.core.debug.debug_logger import DebugLogger

# Absorbs float drift from summing frame deltas
DUE_EPSILON = 1e-9


# ===========================================================
# Deferred Effect Definitions
# ===========================================================

@dataclass(frozen=True, eq=False)
class DeferredEffect:
    """Base class for scheduled effects."""
    pass


@dataclass(frozen=True, eq=False)
class EnemyShotLands(DeferredEffect):
    """An enemy's shot reaches the player unless the shooter died meanwhile."""
    enemy: Any


@dataclass(frozen=True)
class WaveAdvance(DeferredEffect):
    """Start the wave after `wave` if it is still the current one."""
    wave: int


@dataclass(frozen=True)
class AutoReload(DeferredEffect):
    """Reload request issued after the cylinder runs dry."""
    pass


@dataclass(frozen=True)
class SessionEnd(DeferredEffect):
    """Switch an active session with no lives left to the ended screen."""
    pass


# ===========================================================
# Scheduler
# ===========================================================

class EventScheduler:
    """Min-heap of (due_time, sequence, effect) on the session clock."""

    def __init__(self):
        self.now = 0.0
        self._queue = []
        self._sequence = itertools.count()

    def schedule(self, effect: DeferredEffect, delay: float) -> float:
        """
        Queue an effect to fire `delay` seconds from now.

        Args:
            effect: DeferredEffect instance
            delay: Seconds on the session clock (>= 0)

        Returns:
            float: Due time of the entry
        """
        if delay < 0:
            raise ValueError(f"Cannot schedule {type(effect).__name__} with negative delay {delay}")

        due = self.now + delay
        # Sequence keeps FIFO order between entries due at the same instant
        heapq.heappush(self._queue, (due, next(self._sequence), effect))
        DebugLogger.trace(
            f"Scheduled {type(effect).__name__} at t={due:.3f}",
            category="scheduler"
        )
        return due

    def advance(self, dt: float) -> List[DeferredEffect]:
        """Move the clock forward and return every effect now due, oldest first."""
        self.now += dt
        return self.pop_due()

    def pop_due(self) -> List[DeferredEffect]:
        due = []
        while self._queue and self._queue[0][0] <= self.now + DUE_EPSILON:
            _, _, effect = heapq.heappop(self._queue)
            due.append(effect)
        return due

    def pending(self, effect_type=None) -> List[DeferredEffect]:
        """Queued effects in due order, optionally filtered by type."""
        entries = sorted(self._queue)
        return [
            effect for _, _, effect in entries
            if effect_type is None or isinstance(effect, effect_type)
        ]

    def clear(self):
        """Drop every pending entry. The clock keeps running."""
        if self._queue:
            DebugLogger.trace(f"Dropped {len(self._queue)} pending effects", category="scheduler")
        self._queue.clear()

    def __len__(self):
        return len(self._queue)
