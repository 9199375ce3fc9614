"""Per-update recomputation of both arms for a 2D canvas renderer.

The renderer calls ``compute_scene`` whenever a slider moves and draws the
returned screen-space polylines. Nothing here touches a drawing API.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, List, NamedTuple, Optional, Tuple

from . import config
from .kinematics import (
    ElbowBranch, IKResult, KinematicSolution, LinkLengths, Point2D, solve, solve_target,
)

ScreenPoint = Tuple[float, float]


@dataclass(frozen=True)
class SceneParams:
    """Raw UI inputs. Joint angles are in degrees as shown on the sliders."""
    theta1_deg: float = config.DEFAULT_THETA1_DEG
    theta2_deg: float = config.DEFAULT_THETA2_DEG
    target_x: float = config.DEFAULT_TARGET[0]
    target_y: float = config.DEFAULT_TARGET[1]
    L1: float = config.DEFAULT_L1
    L2: float = config.DEFAULT_L2
    branch: ElbowBranch = ElbowBranch.UP


class ScreenTransform:
    """Maps base-frame coordinates onto a canvas with y pointing down.

    The arm base sits at the canvas centre.
    """

    def __init__(self, scale: float = config.SCREEN_SCALE,
                 width: int = config.CANVAS_SIZE, height: int = config.CANVAS_SIZE):
        if scale <= 0:
            raise ValueError(f"Screen scale {scale} must be positive")
        self.scale = scale
        self.width = width
        self.height = height

    @property
    def origin(self) -> ScreenPoint:
        return (self.width / 2, self.height / 2)

    def to_screen(self, point: Point2D) -> ScreenPoint:
        ox, oy = self.origin
        return (ox + point[0] * self.scale, oy - point[1] * self.scale)

    def to_world(self, px: float, py: float) -> Point2D:
        ox, oy = self.origin
        return Point2D((px - ox) / self.scale, (oy - py) / self.scale)

    def polyline(self, pose: KinematicSolution) -> List[ScreenPoint]:
        """Base, elbow and end effector in screen space."""
        return [
            self.origin,
            self.to_screen(pose.elbow_position),
            self.to_screen(pose.end_effector_position),
        ]


class Scene(NamedTuple):
    forward: KinematicSolution
    inverse: KinematicSolution
    ik: IKResult
    forward_polyline: List[ScreenPoint]
    inverse_polyline: List[ScreenPoint]
    target_marker: ScreenPoint

    def readout(self, decimals: int = config.READOUT_DECIMALS) -> Dict[str, Any]:
        """
        Values shown next to the sliders.

        Returns:
            Dict with keys: end_effector (x, y), ik_angles_deg (theta1, theta2),
                            reachable
        """
        end = self.forward.end_effector_position
        return {
            'end_effector': (round(end.x, decimals), round(end.y, decimals)),
            'ik_angles_deg': (round(math.degrees(self.ik.theta1), decimals),
                              round(math.degrees(self.ik.theta2), decimals)),
            'reachable': self.ik.reachable,
        }


def compute_scene(params: SceneParams,
                  transform: Optional[ScreenTransform] = None) -> Scene:
    """
    Recompute both arms for the current inputs.

    Args:
        params: Current slider values
        transform: Screen mapping (defaults to the standard 600px canvas)

    Returns:
        Scene with both poses and their screen-space polylines

    Raises:
        ValueError: If a link length is not positive
    """
    if transform is None:
        transform = ScreenTransform()
    links = LinkLengths.of(params.L1, params.L2)

    forward = solve(math.radians(params.theta1_deg), math.radians(params.theta2_deg),
                    links.L1, links.L2)
    inverse, ik = solve_target(params.target_x, params.target_y,
                               links.L1, links.L2, params.branch)

    return Scene(
        forward=forward,
        inverse=inverse,
        ik=ik,
        forward_polyline=transform.polyline(forward),
        inverse_polyline=transform.polyline(inverse),
        target_marker=transform.to_screen(Point2D(params.target_x, params.target_y)),
    )
