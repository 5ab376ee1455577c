"""Configuration objects and enumerations for the field line visualizer."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from viewport import Viewport


class ChargeSign(Enum):
    """Sign of a charge placed by the user."""

    POSITIVE = 1
    NEGATIVE = -1

    @property
    def q(self) -> float:
        return float(self.value)

    def label(self) -> str:
        return "+q" if self is ChargeSign.POSITIVE else "-q"


@dataclass
class SimulationConfig:
    """Container for every tunable of the field model and its visualisation."""

    width: int = 900
    height: int = 600

    coulomb_k: float = 2000.0
    min_r_sq: float = 16.0  # floor on r^2 near a charge

    line_step: float = 3.0
    line_max_steps: int = 1500
    line_min_field: float = 1e-6
    line_margin: float = 50.0
    seed_radius: float = 8.0
    seeds_per_charge: int = 20

    arrow_grid_step: int = 40
    arrow_length: float = 15.0
    arrow_min_field: float = 1e-3

    particle_step: float = 2.0
    particle_min_field: float = 1e-4
    particle_margin: float = 100.0

    background_scale: float = 0.03
    fps: int = 60

    def __post_init__(self) -> None:
        for name in ("width", "height", "line_max_steps", "seeds_per_charge", "arrow_grid_step", "fps"):
            value = getattr(self, name)
            if not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        for name in ("coulomb_k", "min_r_sq", "line_step", "seed_radius", "particle_step"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)!r}")

    @property
    def viewport(self) -> Viewport:
        return Viewport(self.width, self.height)

    def describe(self) -> str:
        """Return a short human-readable summary of the configuration."""

        return (
            f"{self.width}x{self.height} • k={self.coulomb_k:g} • "
            f"{self.seeds_per_charge} lignes/charge"
        )
