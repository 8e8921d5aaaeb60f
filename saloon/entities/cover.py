"""
cover.py
--------
The four fixed cover slots enemies hide behind.
"""

from dataclasses import dataclass

from saloon.entities.entity_types import CoverType


@dataclass(frozen=True)
class CoverSlot:
    """Static cover position. x, y is the centre; w, h the full extent."""
    id: int
    x: float
    y: float
    w: float
    h: float
    cover_type: str

    @property
    def top(self) -> float:
        return self.y - self.h / 2

    def peek_y(self, peek_offset: float = 28) -> float:
        """Body-centre height of an enemy fully peeking over this cover."""
        return self.top - peek_offset

    @property
    def rect(self) -> tuple:
        return (self.x - self.w / 2, self.y - self.h / 2, self.w, self.h)


COVERS = (
    CoverSlot(0, 78, 410, 90, 112, CoverType.BARREL),
    CoverSlot(1, 200, 405, 134, 92, CoverType.TABLE),
    CoverSlot(2, 308, 405, 134, 92, CoverType.TABLE),
    CoverSlot(3, 420, 410, 90, 112, CoverType.BARREL),
)
