"""Computation helpers for the electric field of point charges in the plane."""
from __future__ import annotations

import math
from typing import List, Sequence, Tuple

import numpy as np

from objects import PointCharge, Vector
from simulation_config import SimulationConfig

K_E = 2000.0  # Coulomb-like constant (arbitrary units for the visualisation)
MIN_R_SQ = 16.0
EPSILON = 1e-12


def normalize(vec: Vector) -> Vector:
    mag = math.hypot(vec[0], vec[1])
    if mag < EPSILON:
        return 0.0, 0.0
    return vec[0] / mag, vec[1] / mag


def compute_field_magnitude(vec: Vector) -> float:
    return math.hypot(vec[0], vec[1])


def compute_E_at_point(
    point: Vector,
    charges: Sequence[PointCharge],
    k: float = K_E,
    min_r_sq: float = MIN_R_SQ,
) -> Vector:
    """Compute the electric field (Ex, Ey) generated at ``point``.

    Each charge contributes ``k * q / r**3 * d`` where ``d`` is the displacement
    from the charge to ``point``. ``r**2`` is floored at ``min_r_sq`` so the field
    stays finite on top of a charge.
    """

    px, py = point
    field_x = 0.0
    field_y = 0.0

    for charge in charges:
        dx = px - charge.x
        dy = py - charge.y
        r_sq = dx * dx + dy * dy
        if r_sq < min_r_sq:
            r_sq = min_r_sq
        r_mag = math.sqrt(r_sq)
        factor = k * charge.q / (r_sq * r_mag)
        field_x += factor * dx
        field_y += factor * dy

    return field_x, field_y


def compute_E_on_grid(
    xs: np.ndarray,
    ys: np.ndarray,
    charges: Sequence[PointCharge],
    k: float = K_E,
    min_r_sq: float = MIN_R_SQ,
) -> Tuple[np.ndarray, np.ndarray]:
    """Vectorised :func:`compute_E_at_point` over arrays of plane coordinates."""

    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)
    field_x = np.zeros(np.broadcast(xs, ys).shape)
    field_y = np.zeros_like(field_x)

    for charge in charges:
        dx = xs - charge.x
        dy = ys - charge.y
        r_sq = np.maximum(dx * dx + dy * dy, min_r_sq)
        factor = k * charge.q / (r_sq * np.sqrt(r_sq))
        field_x += factor * dx
        field_y += factor * dy

    return field_x, field_y


def compute_background(charges: Sequence[PointCharge], config: SimulationConfig) -> np.ndarray:
    """Sample |E| at every pixel and return a grayscale RGBA buffer.

    The buffer has shape ``(width, height, 4)`` and is indexed ``[px, py]`` like
    ``pygame.surfarray``.
    """

    viewport = config.viewport
    xs = np.arange(config.width, dtype=np.float64) - viewport.half_width
    ys = np.arange(config.height, dtype=np.float64) - viewport.half_height
    grid_x, grid_y = np.meshgrid(xs, ys, indexing="ij")

    field_x, field_y = compute_E_on_grid(grid_x, grid_y, charges, config.coulomb_k, config.min_r_sq)
    brightness = np.nan_to_num(np.hypot(field_x, field_y) * config.background_scale, nan=0.0)
    intensity = (np.clip(brightness, 0.0, 1.0) * 255).astype(np.uint8)

    buffer = np.empty((config.width, config.height, 4), dtype=np.uint8)
    buffer[..., :3] = intensity[..., np.newaxis]
    buffer[..., 3] = 255
    return buffer


def compute_arrow_grid(
    charges: Sequence[PointCharge], config: SimulationConfig
) -> List[Tuple[Vector, Vector]]:
    """Fixed-length arrows along the field direction on a regular pixel grid.

    Returns ``(start, end)`` pairs in plane coordinates. Grid points where the
    field is weaker than ``config.arrow_min_field`` get no arrow.
    """

    viewport = config.viewport
    arrows: List[Tuple[Vector, Vector]] = []
    for px, py in viewport.grid_pixels(config.arrow_grid_step):
        x, y = viewport.screen_to_world(px, py)
        field_vec = compute_E_at_point((x, y), charges, config.coulomb_k, config.min_r_sq)
        magnitude = compute_field_magnitude(field_vec)
        if math.isnan(magnitude) or magnitude < config.arrow_min_field:
            continue
        scale = config.arrow_length / magnitude
        arrows.append(((x, y), (x + field_vec[0] * scale, y + field_vec[1] * scale)))
    return arrows
