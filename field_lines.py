"""Field line tracing by fixed-step Euler integration of the field direction."""
from __future__ import annotations

import logging
import math
from typing import Iterator, List, Sequence

from field import compute_E_at_point, compute_field_magnitude
from objects import FieldLine, PointCharge, Vector
from simulation_config import SimulationConfig

logger = logging.getLogger(__name__)


def near_charge(point: Vector, charges: Sequence[PointCharge], radius: float) -> bool:
    for charge in charges:
        if math.hypot(point[0] - charge.x, point[1] - charge.y) < radius:
            return True
    return False


def iter_field_line(
    start: Vector,
    direction: int,
    charges: Sequence[PointCharge],
    config: SimulationConfig,
) -> Iterator[Vector]:
    """Yield successive points of the streamline starting at ``start``.

    ``direction`` is ``+1`` to follow the field and ``-1`` to go against it. The
    start point itself is not yielded. The line stops after
    ``config.line_max_steps`` steps, when the field gets too weak to give a
    direction, when it leaves the viewport grown by ``config.line_margin`` or
    when it enters the seed circle of any charge.
    """

    viewport = config.viewport
    x, y = start
    for _ in range(config.line_max_steps):
        field_vec = compute_E_at_point((x, y), charges, config.coulomb_k, config.min_r_sq)
        magnitude = compute_field_magnitude(field_vec)
        if math.isnan(magnitude) or magnitude < config.line_min_field:
            return

        x += field_vec[0] / magnitude * direction * config.line_step
        y += field_vec[1] / magnitude * direction * config.line_step

        if not viewport.contains(x, y, config.line_margin):
            return
        if near_charge((x, y), charges, config.seed_radius):
            return

        yield x, y


def trace_field_line(
    start: Vector,
    direction: int,
    charges: Sequence[PointCharge],
    config: SimulationConfig,
) -> FieldLine:
    return list(iter_field_line(start, direction, charges, config))


def seed_points(charge: PointCharge, config: SimulationConfig) -> List[Vector]:
    """Evenly spaced starting points on the seed circle around ``charge``."""

    count = config.seeds_per_charge
    points: List[Vector] = []
    for i in range(count):
        angle = 2 * math.pi * i / count
        points.append(
            (
                charge.x + config.seed_radius * math.cos(angle),
                charge.y + config.seed_radius * math.sin(angle),
            )
        )
    return points


def generate_field_lines(charges: Sequence[PointCharge], config: SimulationConfig) -> List[FieldLine]:
    """Trace the field lines seeded around every charge.

    Lines leave positive charges along the field and are traced backwards from
    negative ones. Lines with fewer than two points are dropped.
    """

    if not charges:
        return []

    lines: List[FieldLine] = []
    for charge in charges:
        for start in seed_points(charge, config):
            line = trace_field_line(start, charge.sign, charges, config)
            if len(line) > 1:
                lines.append(line)
    logger.debug("Traced %d field lines from %d charges", len(lines), len(charges))
    return lines
