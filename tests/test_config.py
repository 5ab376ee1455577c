"""
Tests for configuration validation and the viewport coordinate convention.
"""

import pytest

from simulation_config import ChargeSign, SimulationConfig
from viewport import Viewport


class TestSimulationConfig:
    """Test suite for SimulationConfig."""

    def test_defaults(self, config):
        """Test defaults reproduce the interactive window settings."""
        assert (config.width, config.height) == (900, 600)
        assert config.coulomb_k == 2000.0
        assert config.min_r_sq == 16.0
        assert config.seeds_per_charge == 20
        assert config.particle_margin > config.line_margin
        assert config.particle_min_field > config.line_min_field

    @pytest.mark.parametrize(
        "overrides",
        [
            {"width": 0},
            {"height": -5},
            {"seeds_per_charge": 0},
            {"line_max_steps": 2.5},
            {"line_step": 0.0},
            {"min_r_sq": -1.0},
        ],
    )
    def test_invalid_values(self, overrides):
        """Test invalid settings are rejected at construction."""
        with pytest.raises(ValueError):
            SimulationConfig(**overrides)

    def test_viewport(self, config):
        """Test the config exposes its viewport."""
        assert config.viewport == Viewport(900, 600)

    def test_describe(self, config):
        """Test the summary mentions the window size."""
        assert "900x600" in config.describe()

    def test_charge_sign(self):
        """Test charge signs map to unit charges."""
        assert ChargeSign.POSITIVE.q == 1.0
        assert ChargeSign.NEGATIVE.q == -1.0
        assert ChargeSign.NEGATIVE.label() == "-q"


class TestViewport:
    """Test suite for the plane-centered coordinate convention."""

    def test_center_is_origin(self):
        """Test the viewport center maps to the plane origin."""
        viewport = Viewport(900, 600)
        assert viewport.screen_to_world(450, 300) == (0.0, 0.0)
        assert viewport.world_to_screen(0.0, 0.0) == (450.0, 300.0)

    def test_round_trip(self):
        """Test converting back and forth returns the same point."""
        viewport = Viewport(900, 600)
        assert viewport.world_to_screen(*viewport.screen_to_world(17, 523)) == (17.0, 523.0)

    def test_contains_with_margin(self):
        """Test extended bounds are inclusive and grow with the margin."""
        viewport = Viewport(900, 600)
        assert viewport.contains(450.0, -300.0)
        assert not viewport.contains(451.0, 0.0)
        assert viewport.contains(500.0, 0.0, margin=50.0)
        assert not viewport.contains(0.0, 350.5, margin=50.0)

    def test_grid_pixels(self):
        """Test grid centers start at half a step and stay on screen."""
        pixels = Viewport(100, 60).grid_pixels(40)
        assert pixels == [(20, 20), (60, 20)]
