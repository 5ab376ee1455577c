"""Plane-centered viewport helper shared by the core and the pygame scene."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class Viewport:
    """Map between pixel coordinates and the plane, whose origin is the viewport center."""

    width: int
    height: int

    @property
    def half_width(self) -> float:
        return self.width / 2

    @property
    def half_height(self) -> float:
        return self.height / 2

    def world_to_screen(self, x: float, y: float) -> Tuple[float, float]:
        """Convert plane coordinates into top-left pixel coordinates."""

        return x + self.half_width, y + self.half_height

    def screen_to_world(self, sx: float, sy: float) -> Tuple[float, float]:
        """Convert top-left pixel coordinates back to plane coordinates."""

        return sx - self.half_width, sy - self.half_height

    def contains(self, x: float, y: float, margin: float = 0.0) -> bool:
        """Whether a plane point lies inside the viewport grown by ``margin`` on every side."""

        return (
            -self.half_width - margin <= x <= self.half_width + margin
            and -self.half_height - margin <= y <= self.half_height + margin
        )

    def grid_pixels(self, step: int) -> List[Tuple[int, int]]:
        """Pixel centers of a regular grid with ``step`` spacing, row by row."""

        return [
            (px, py)
            for py in range(step // 2, self.height, step)
            for px in range(step // 2, self.width, step)
        ]
