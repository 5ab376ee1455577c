"""Session state of the visualizer: charges, cached field visuals and the test particle."""
from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, field as dataclass_field
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from field import compute_arrow_grid, compute_background, compute_E_at_point, compute_field_magnitude, normalize
from field_lines import generate_field_lines
from objects import FieldLine, PointCharge, TestParticle, Vector
from simulation_config import ChargeSign, SimulationConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlaceCharge:
    """The user asked for a new charge at a plane point."""

    x: float
    y: float
    sign: ChargeSign = ChargeSign.POSITIVE


@dataclass(frozen=True)
class SpawnParticle:
    """The user asked for a test particle at a plane point."""

    x: float
    y: float


@dataclass(frozen=True)
class ClearCharges:
    """The user asked to remove every charge."""


Event = Union[PlaceCharge, SpawnParticle, ClearCharges]


@dataclass(frozen=True)
class FrameSnapshot:
    """Read-only view of the state handed to the renderer once per tick."""

    charges: Tuple[PointCharge, ...]
    field_lines: Sequence[FieldLine]
    background: Optional[np.ndarray]
    arrows: Sequence[Tuple[Vector, Vector]] = dataclass_field(default_factory=tuple)
    particle: Optional[Vector] = None


def default_charges() -> List[PointCharge]:
    """Dipole shown when the program starts."""

    return [PointCharge(-150.0, 0.0, 1.0), PointCharge(150.0, 0.0, -1.0)]


def advance_particle(
    particle: TestParticle, charges: Sequence[PointCharge], config: SimulationConfig
) -> bool:
    """Move ``particle`` one step along the local field direction.

    A particle sitting where the field is weaker than ``config.particle_min_field``
    holds its position. The particle dies once it leaves the viewport grown by
    ``config.particle_margin``. Returns whether the particle moved.
    """

    if not particle.live:
        return False

    field_vec = compute_E_at_point(particle.position, charges, config.coulomb_k, config.min_r_sq)
    magnitude = compute_field_magnitude(field_vec)
    if math.isnan(magnitude) or magnitude < config.particle_min_field:
        return False

    ux, uy = normalize(field_vec)
    particle.x += ux * config.particle_step
    particle.y += uy * config.particle_step

    viewport = config.viewport
    if (
        abs(particle.x) > viewport.half_width + config.particle_margin
        or abs(particle.y) > viewport.half_height + config.particle_margin
    ):
        particle.live = False
        logger.info("Test particle left the view at (%.1f, %.1f)", particle.x, particle.y)
    return True


class FieldSimulation:
    """Own the charge set and everything derived from it.

    Derived state (field lines, background, arrows) is tagged with the charge
    set version it was built from and rebuilt in full when the versions differ.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        charges: Optional[Iterable[PointCharge]] = None,
    ) -> None:
        self.config = config or SimulationConfig()
        self.charges: List[PointCharge] = list(charges) if charges is not None else default_charges()
        self.particle = TestParticle()

        self.field_lines: List[FieldLine] = []
        self.background: Optional[np.ndarray] = None
        self.arrows: List[Tuple[Vector, Vector]] = []

        self._version = 0
        self._built_version = -1

    @property
    def dirty(self) -> bool:
        return self._built_version != self._version

    def add_charge(self, x: float, y: float, q: float) -> PointCharge:
        charge = PointCharge(x, y, q)
        self.charges.append(charge)
        self._version += 1
        logger.info("Placed charge q=%+g at (%.1f, %.1f)", q, x, y)
        return charge

    def clear_charges(self) -> None:
        if not self.charges:
            return
        self.charges = []
        self._version += 1
        logger.info("Cleared all charges")

    def spawn_particle(self, x: float, y: float) -> TestParticle:
        self.particle = TestParticle(x, y, live=True)
        logger.info("Spawned test particle at (%.1f, %.1f)", x, y)
        return self.particle

    def apply(self, event: Event) -> None:
        if isinstance(event, PlaceCharge):
            self.add_charge(event.x, event.y, event.sign.q)
        elif isinstance(event, SpawnParticle):
            self.spawn_particle(event.x, event.y)
        elif isinstance(event, ClearCharges):
            self.clear_charges()
        else:
            raise TypeError(f"Unknown event: {event!r}")

    def rebuild(self) -> None:
        """Recompute field lines, background and arrows from the current charges."""

        started = time.perf_counter()
        charges = tuple(self.charges)
        field_lines = generate_field_lines(charges, self.config)
        background = compute_background(charges, self.config)
        arrows = compute_arrow_grid(charges, self.config)

        self.field_lines, self.background, self.arrows = field_lines, background, arrows
        self._built_version = self._version
        logger.debug(
            "Rebuilt field visuals: %d lines, %d arrows in %.3fs",
            len(field_lines),
            len(arrows),
            time.perf_counter() - started,
        )

    def step_particle(self) -> bool:
        return advance_particle(self.particle, self.charges, self.config)

    def field_at(self, x: float, y: float) -> Vector:
        return compute_E_at_point((x, y), self.charges, self.config.coulomb_k, self.config.min_r_sq)

    def snapshot(self) -> FrameSnapshot:
        return FrameSnapshot(
            charges=tuple(self.charges),
            field_lines=self.field_lines,
            background=self.background,
            arrows=self.arrows,
            particle=self.particle.position if self.particle.live else None,
        )

    def tick(self, events: Iterable[Event] = ()) -> FrameSnapshot:
        """Run one frame: apply input events, rebuild stale visuals, advance the particle."""

        for event in events:
            self.apply(event)
        if self.dirty:
            self.rebuild()
        self.step_particle()
        return self.snapshot()
