"""Tests for slider ranges and defaults."""

import pytest
from planar_arm import config
from planar_arm.config import LINK_RANGE, TARGET_RANGE, THETA_RANGE, SliderRange


class TestSliderRange:
    """Test range clamping and step snapping."""

    def test_clamp_above_maximum(self):
        assert TARGET_RANGE.clamp(12.34) == 10.0
        assert THETA_RANGE.clamp(400.0) == 180.0

    def test_clamp_below_minimum(self):
        assert LINK_RANGE.clamp(0.2) == 1.0
        assert THETA_RANGE.clamp(-181.0) == -180.0

    def test_snap_to_step(self):
        assert TARGET_RANGE.clamp(4.26) == 4.3
        assert LINK_RANGE.clamp(3.04) == 3.0
        assert THETA_RANGE.clamp(44.6) == 45.0

    def test_value_on_grid_unchanged(self):
        assert TARGET_RANGE.clamp(-7.5) == -7.5

    def test_contains(self):
        assert 0.0 in TARGET_RANGE
        assert 8.1 not in LINK_RANGE

    def test_custom_range(self):
        r = SliderRange(0.0, 1.0, 0.25)
        assert r.clamp(0.6) == 0.5


class TestDefaults:
    """Defaults must sit inside their slider ranges."""

    def test_default_angles_in_range(self):
        assert config.DEFAULT_THETA1_DEG in THETA_RANGE
        assert config.DEFAULT_THETA2_DEG in THETA_RANGE

    @pytest.mark.parametrize("value", config.DEFAULT_TARGET)
    def test_default_target_in_range(self, value):
        assert value in TARGET_RANGE

    def test_default_links_in_range(self):
        assert config.DEFAULT_L1 in LINK_RANGE
        assert config.DEFAULT_L2 in LINK_RANGE

    def test_grid_fits_canvas(self):
        assert 2 * config.GRID_EXTENT * config.SCREEN_SCALE <= config.CANVAS_SIZE
