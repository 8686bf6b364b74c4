"""
Forward kinematics for the 2-link planar arm.

Joint angles are radians, as published in sensor_msgs/JointState.
The configured joint offsets (Theta1_offset, Theta2_offset) are degrees
and are converted to radians once, before being subtracted from the
measured joint angle.
"""

from collections import namedtuple

import numpy as np


EndEffectorPosition = namedtuple('EndEffectorPosition', ['x', 'y'])


class PlanarArm:
    """Geometry of a 2-DOF planar manipulator"""

    def __init__(self, lengths=(1.0, 1.0), offsets_deg=(0.0, 0.0)):
        self.l1, self.l2 = lengths
        self.offsets = np.radians(np.asarray(offsets_deg, dtype=float))

    @classmethod
    def from_config(cls, config):
        return cls(
            lengths=(config.link_1, config.link_2),
            offsets_deg=(config.theta1_offset, config.theta2_offset)
        )

    def joint_angles(self, q):
        """Measured joint angles (rad) minus the configured offsets"""
        return np.asarray(q, dtype=float) - self.offsets

    def joint_positions(self, q):
        """Base, elbow and end-effector points as a (3, 2) array"""
        theta = self.joint_angles(q)
        with np.errstate(invalid='ignore'):
            elbow = self.l1 * np.array([np.cos(theta[0]), np.sin(theta[0])])
            tip = elbow + self.l2 * np.array([np.cos(theta[0] + theta[1]), np.sin(theta[0] + theta[1])])
        return np.array([np.zeros(2), elbow, tip])

    def forward_kinematics(self, q):
        """Compute end-effector position, NaN for non-finite joint angles"""
        theta = self.joint_angles(q)
        with np.errstate(invalid='ignore'):
            x = self.l1 * np.cos(theta[0]) + self.l2 * np.cos(theta[0] + theta[1])
            y = self.l1 * np.sin(theta[0]) + self.l2 * np.sin(theta[0] + theta[1])
        return np.array([x, y])


def compute_end_effector(angle1, angle2, config):
    """Map two joint angles (rad) to the end-effector position for ``config``"""
    x, y = PlanarArm.from_config(config).forward_kinematics([angle1, angle2])
    return EndEffectorPosition(float(x), float(y))
