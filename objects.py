"""Physical entities living in the 2D plane."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

Vector = Tuple[float, float]
FieldLine = List[Vector]


@dataclass(frozen=True)
class PointCharge:
    """A point charge defined by its position and signed magnitude."""

    x: float
    y: float
    q: float

    @property
    def position(self) -> Vector:
        return self.x, self.y

    @property
    def sign(self) -> int:
        return -1 if self.q < 0 else 1


@dataclass
class TestParticle:
    """Massless test charge advected along the field, one step per tick."""

    __test__ = False  # not a pytest class

    x: float = 0.0
    y: float = 0.0
    live: bool = False

    @property
    def position(self) -> Vector:
        return self.x, self.y
