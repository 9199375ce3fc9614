"""Forward and inverse kinematics for a two-link planar arm."""

import logging
import math
from enum import IntEnum
from typing import NamedTuple, Tuple

import numpy as np

logger = logging.getLogger(__name__)

# Distance slack when deciding whether a target lies inside the annulus
REACH_TOLERANCE = 1e-9


class ElbowBranch(IntEnum):
    """Inverse kinematics solution branch, valued by the sign of theta2."""
    UP = 1
    DOWN = -1


class Point2D(NamedTuple):
    """Cartesian point in the arm's base frame (base joint at origin)."""
    x: float
    y: float


class JointAngles(NamedTuple):
    """Joint angles in radians.

    theta1 is measured from the positive x-axis to link 1, theta2 relative
    to the direction of link 1.
    """
    theta1: float
    theta2: float


class LinkLengths(NamedTuple):
    L1: float
    L2: float

    @classmethod
    def of(cls, L1: float, L2: float) -> "LinkLengths":
        """
        Build validated link lengths.

        Raises:
            ValueError: If either length is not a positive finite number
        """
        for name, value in (('L1', L1), ('L2', L2)):
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"Link length {name}={value} must be positive and finite")
        return cls(float(L1), float(L2))

    @property
    def max_reach(self) -> float:
        return self.L1 + self.L2

    @property
    def min_reach(self) -> float:
        return abs(self.L1 - self.L2)


class IKResult(NamedTuple):
    """Inverse kinematics result.

    When the target lies outside the reachable annulus the angles describe
    the nearest boundary pose (fully extended or fully folded) and
    ``reachable`` is False.
    """
    theta1: float
    theta2: float
    reachable: bool
    distance: float
    branch: ElbowBranch = ElbowBranch.UP

    @property
    def angles(self) -> JointAngles:
        return JointAngles(self.theta1, self.theta2)


class KinematicSolution(NamedTuple):
    """Complete derived pose of the arm."""
    joint_angles: JointAngles
    elbow_position: Point2D
    end_effector_position: Point2D


def elbow_position(theta1: float, L1: float) -> Point2D:
    """
    Compute the position of the elbow joint.

    Args:
        theta1: Shoulder angle (radians)
        L1: Shoulder to elbow length

    Returns:
        Elbow position in the base frame
    """
    return Point2D(float(L1 * np.cos(theta1)), float(L1 * np.sin(theta1)))


def solve_forward(theta1: float, theta2: float, L1: float, L2: float) -> Point2D:
    """
    Compute forward kinematics.

    Args:
        theta1: Shoulder angle (radians)
        theta2: Elbow angle relative to link 1 (radians)
        L1: Shoulder to elbow length
        L2: Elbow to end-effector length

    Returns:
        End-effector position in the base frame
    """
    x = L1 * np.cos(theta1) + L2 * np.cos(theta1 + theta2)
    y = L1 * np.sin(theta1) + L2 * np.sin(theta1 + theta2)
    return Point2D(float(x), float(y))


def solve_inverse(x: float, y: float, L1: float, L2: float,
                  branch: ElbowBranch = ElbowBranch.UP) -> IKResult:
    """
    Compute inverse kinematics using the law of cosines.

    Targets outside the reachable annulus [|L1-L2|, L1+L2] are not an
    error: the cosine of the elbow angle is clamped to [-1, 1], which
    saturates the arm to the nearest boundary pose, and the result is
    flagged as unreachable.

    A target at the base origin uses atan2(0, 0) = 0, i.e. the +x axis
    as the target direction.

    Args:
        x: Target X position
        y: Target Y position
        L1: Shoulder to elbow length
        L2: Elbow to end-effector length
        branch: Which elbow solution to return (UP gives theta2 >= 0)

    Returns:
        IKResult with joint angles in radians and the reachability flag
    """
    d_squared = x**2 + y**2
    d = float(np.sqrt(d_squared))

    reachable = (abs(L1 - L2) - REACH_TOLERANCE <= d <= L1 + L2 + REACH_TOLERANCE)
    if not reachable:
        logger.debug("Target (%.3f, %.3f) outside reach [%.3f, %.3f], clamping",
                     x, y, abs(L1 - L2), L1 + L2)

    # Elbow angle using law of cosines
    cos_theta2 = (d_squared - L1**2 - L2**2) / (2 * L1 * L2)
    cos_theta2 = np.clip(cos_theta2, -1.0, 1.0)

    theta2 = int(branch) * np.arccos(cos_theta2)

    # Shoulder angle
    alpha = np.arctan2(y, x)
    beta = np.arctan2(L2 * np.sin(theta2), L1 + L2 * np.cos(theta2))
    theta1 = alpha - beta

    return IKResult(float(theta1), float(theta2), reachable, d, ElbowBranch(branch))


def solve(theta1: float, theta2: float, L1: float, L2: float) -> KinematicSolution:
    """Full forward pose for the given joint angles."""
    return KinematicSolution(
        joint_angles=JointAngles(float(theta1), float(theta2)),
        elbow_position=elbow_position(theta1, L1),
        end_effector_position=solve_forward(theta1, theta2, L1, L2),
    )


def solve_target(x: float, y: float, L1: float, L2: float,
                 branch: ElbowBranch = ElbowBranch.UP) -> Tuple[KinematicSolution, IKResult]:
    """
    Solve inverse kinematics and push the angles back through the forward solver.

    For a clamped target the returned end effector is the boundary point the
    arm actually reaches, not the requested target.

    Returns:
        (pose, ik_result)
    """
    result = solve_inverse(x, y, L1, L2, branch)
    return solve(result.theta1, result.theta2, L1, L2), result


class ArmKinematics:
    """2-DOF planar arm kinematics.

    Link 1 (L1): Shoulder to elbow
    Link 2 (L2): Elbow to end-effector
    """

    def __init__(self, L1: float = 4.0, L2: float = 5.0):
        """
        Initialize with link lengths.

        Args:
            L1: Shoulder to elbow length
            L2: Elbow to end-effector length

        Raises:
            ValueError: If either length is not positive
        """
        self.links = LinkLengths.of(L1, L2)

    @property
    def L1(self) -> float:
        return self.links.L1

    @property
    def L2(self) -> float:
        return self.links.L2

    def forward(self, theta1: float, theta2: float) -> Tuple[float, float]:
        """
        Compute forward kinematics.

        Args:
            theta1: Shoulder angle (radians)
            theta2: Elbow angle (radians)

        Returns:
            (x, y) end-effector position
        """
        return solve_forward(theta1, theta2, self.L1, self.L2)

    def elbow(self, theta1: float) -> Tuple[float, float]:
        return elbow_position(theta1, self.L1)

    def inverse(self, x: float, y: float, branch: ElbowBranch = ElbowBranch.UP,
                strict: bool = False) -> Tuple[float, float]:
        """
        Compute inverse kinematics (elbow-up solution by default).

        Args:
            x: Target X position
            y: Target Y position
            branch: Elbow solution to return
            strict: Raise instead of clamping unreachable targets

        Returns:
            (theta1, theta2) joint angles in radians

        Raises:
            ValueError: If strict and the target is unreachable
        """
        result = solve_inverse(x, y, self.L1, self.L2, branch)
        if strict and not result.reachable:
            raise ValueError(f"Target ({x:.3f}, {y:.3f}) unreachable "
                             f"(distance {result.distance:.3f}, max {self.links.max_reach:.3f})")
        return result.angles

    def solve(self, theta1: float, theta2: float) -> KinematicSolution:
        return solve(theta1, theta2, self.L1, self.L2)

    def solve_target(self, x: float, y: float,
                     branch: ElbowBranch = ElbowBranch.UP) -> Tuple[KinematicSolution, IKResult]:
        return solve_target(x, y, self.L1, self.L2, branch)
