"""Shared fixtures for the field line tests."""

import pytest

from objects import PointCharge
from simulation_config import SimulationConfig


@pytest.fixture
def config():
    """Default configuration matching the interactive window."""
    return SimulationConfig()


@pytest.fixture
def small_config():
    """Small viewport to keep per-pixel sampling fast."""
    return SimulationConfig(width=60, height=40, arrow_grid_step=10)


@pytest.fixture
def dipole():
    """Equal and opposite charges placed symmetrically on the x axis."""
    return [PointCharge(-150.0, 0.0, 1.0), PointCharge(150.0, 0.0, -1.0)]
