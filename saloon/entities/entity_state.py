"""
entity_state.py
---------------
Enemy behaviour phases as tagged variants.

Each phase is its own small record carrying only the countdown it needs,
so there is never a stale timer belonging to some other phase. The
`name` tag is what the render snapshot and logs use.

Cycle:
    Entering -> Hiding -> Warning -> Peeking -> Shooting -> Hiding ...
    visible live phase --(non-fatal hit)--> Retreating -> Hiding
    any live phase --(fatal hit)--> Dead -> removed
"""

from dataclasses import dataclass
from typing import ClassVar, Union


@dataclass
class EnteringPhase:
    """Walking from the door to the assigned cover."""
    walk_timer: float = 0.0
    walk_frame: int = 0
    name: ClassVar[str] = "entering"
    visible: ClassVar[bool] = True


@dataclass
class HidingPhase:
    """Fully behind cover; neither drawn as a target nor hittable."""
    remaining: float
    name: ClassVar[str] = "hiding"
    visible: ClassVar[bool] = False


@dataclass
class WarningPhase:
    """Hat showing above cover, alert indicator pulsing."""
    remaining: float
    name: ClassVar[str] = "warning"
    visible: ClassVar[bool] = True


@dataclass
class PeekingPhase:
    """Fully exposed and armed."""
    remaining: float
    name: ClassVar[str] = "peeking"
    visible: ClassVar[bool] = True


@dataclass
class ShootingPhase:
    """Recoil after firing."""
    remaining: float
    name: ClassVar[str] = "shooting"
    visible: ClassVar[bool] = True


@dataclass
class RetreatingPhase:
    """Wounded, flickering and sinking back behind cover."""
    remaining: float
    duration: float
    name: ClassVar[str] = "retreating"
    visible: ClassVar[bool] = True


@dataclass
class DeadPhase:
    """Falling out of view before removal."""
    remaining: float
    name: ClassVar[str] = "dead"
    visible: ClassVar[bool] = True


EnemyPhase = Union[
    EnteringPhase, HidingPhase, WarningPhase, PeekingPhase,
    ShootingPhase, RetreatingPhase, DeadPhase,
]
