"""Tests for the readout script."""

import visualize_arm


class TestVisualizeArm:
    """Run the script entry point with explicit arguments."""

    def test_default_readout(self, capsys):
        visualize_arm.main([])
        out = capsys.readouterr().out
        assert "X: 2.83, Y: 7.83" in out
        assert "θ2: 90.00°" in out
        assert "out of reach" not in out

    def test_unreachable_target(self, capsys):
        visualize_arm.main(['--target', '9', '9', '--links', '2', '3'])
        out = capsys.readouterr().out
        assert "θ1: 45.00°, θ2: 0.00°" in out
        assert "out of reach" in out

    def test_inputs_snap_to_slider_ranges(self, capsys):
        """Link lengths beyond the slider maximum are clamped to 8."""
        visualize_arm.main(['--theta1', '0', '--theta2', '0', '--links', '20', '20'])
        out = capsys.readouterr().out
        assert "X: 16.00, Y: 0.00" in out
