"""Two-link planar arm kinematics."""

from .kinematics import (
    ArmKinematics,
    ElbowBranch,
    IKResult,
    JointAngles,
    KinematicSolution,
    LinkLengths,
    Point2D,
    elbow_position,
    solve,
    solve_forward,
    solve_inverse,
    solve_target,
)
from .scene import Scene, SceneParams, ScreenTransform, compute_scene

__version__ = "0.1.0"
