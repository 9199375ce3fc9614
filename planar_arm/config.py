"""Input ranges, defaults and screen constants for the arm visualizer.

These are contracts of the slider UI, not of the solvers, which accept
any finite value.
"""

from typing import NamedTuple


class SliderRange(NamedTuple):
    """Inclusive range of a slider input with its step size."""
    minimum: float
    maximum: float
    step: float

    def clamp(self, value: float) -> float:
        """
        Bound a value to the range and snap it to the step grid.

        Example:
            >>> TARGET_RANGE.clamp(12.34)
            10.0
            >>> TARGET_RANGE.clamp(4.26)
            4.3
        """
        value = min(max(value, self.minimum), self.maximum)
        steps = round((value - self.minimum) / self.step)
        snapped = self.minimum + steps * self.step
        # Keep float noise from the step arithmetic out of the result
        return round(min(snapped, self.maximum), 10)

    def __contains__(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum


THETA_RANGE = SliderRange(-180.0, 180.0, 1.0)   # degrees
TARGET_RANGE = SliderRange(-10.0, 10.0, 0.1)
LINK_RANGE = SliderRange(1.0, 8.0, 0.1)

DEFAULT_THETA1_DEG = 45.0
DEFAULT_THETA2_DEG = 45.0
DEFAULT_TARGET = (4.0, 5.0)
DEFAULT_L1 = 4.0
DEFAULT_L2 = 5.0

CANVAS_SIZE = 600        # pixels, square canvas
SCREEN_SCALE = 27.5      # pixels per length unit
GRID_EXTENT = 10         # grid lines drawn at -10..10

READOUT_DECIMALS = 2
