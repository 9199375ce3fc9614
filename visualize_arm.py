"""Print forward and inverse kinematics readouts for one set of inputs."""

import argparse

from planar_arm import SceneParams, compute_scene
from planar_arm.config import LINK_RANGE, TARGET_RANGE, THETA_RANGE


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('--theta1', type=float, default=45.0, help="shoulder angle (degrees)")
    parser.add_argument('--theta2', type=float, default=45.0, help="elbow angle (degrees)")
    parser.add_argument('--target', type=float, nargs=2, default=(4.0, 5.0), metavar=('X', 'Y'))
    parser.add_argument('--links', type=float, nargs=2, default=(4.0, 5.0), metavar=('L1', 'L2'))
    args = parser.parse_args(argv)

    # Slider semantics: out-of-range inputs snap to the nearest allowed value
    params = SceneParams(
        theta1_deg=THETA_RANGE.clamp(args.theta1),
        theta2_deg=THETA_RANGE.clamp(args.theta2),
        target_x=TARGET_RANGE.clamp(args.target[0]),
        target_y=TARGET_RANGE.clamp(args.target[1]),
        L1=LINK_RANGE.clamp(args.links[0]),
        L2=LINK_RANGE.clamp(args.links[1]),
    )
    readout = compute_scene(params).readout()

    x, y = readout['end_effector']
    t1, t2 = readout['ik_angles_deg']
    print(f"End effector: X: {x:.2f}, Y: {y:.2f}")
    print(f"Calculated angles: θ1: {t1:.2f}°, θ2: {t2:.2f}°")
    if not readout['reachable']:
        print("Target out of reach, showing nearest pose")


if __name__ == '__main__':
    main()
