"""
saloon/entities/__init__.py
---------------------------
Entity module exports.

Provides enemy phase variants, cover slots and type constants. These are
plain records and constants with no pygame dependency.

Exports:
    EnemyPhase    - Union of the per-phase records (EnteringPhase ... DeadPhase)
    CoverSlot     - Fixed cover location
    COVERS        - The four cover slots of the saloon
    CoverType     - Cover archetypes (BARREL, TABLE)
    ParticleKind  - Feedback particle tags
"""

from saloon.entities.entity_state import (
    EnemyPhase,
    EnteringPhase,
    HidingPhase,
    WarningPhase,
    PeekingPhase,
    ShootingPhase,
    RetreatingPhase,
    DeadPhase,
)
from saloon.entities.entity_types import CoverType, ParticleKind
from saloon.entities.cover import CoverSlot, COVERS

__all__ = [
    # Phases
    'EnemyPhase',
    'EnteringPhase',
    'HidingPhase',
    'WarningPhase',
    'PeekingPhase',
    'ShootingPhase',
    'RetreatingPhase',
    'DeadPhase',
    # Cover
    'CoverSlot',
    'COVERS',
    # Types
    'CoverType',
    'ParticleKind',
]
