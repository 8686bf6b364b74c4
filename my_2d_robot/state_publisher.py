#!/usr/bin/env python3
"""
my_2d_robo_state_publisher ROS 2 NODE
Publishes random joint states for the 2-DOF planar arm as test traffic.
"""

import numpy as np
import rclpy
from rclpy.node import Node
from sensor_msgs.msg import JointState


JOINT_NAMES = ['joint1', 'joint2']
# Positions are drawn from 0.00 .. 3.14 rad in 0.01 steps
POSITION_STEPS = 315
POSITION_RESOLUTION = 0.01


def random_joint_positions(rng, count=2):
    return (rng.integers(0, POSITION_STEPS, size=count) * POSITION_RESOLUTION).tolist()


class StatePublisher(Node):
    """Publishes a random JointState at a fixed rate"""

    def __init__(self):
        super().__init__('my_2d_robo_state_publisher')

        self.declare_parameter('joint_state_topic', 'joint_states')
        self.declare_parameter('publish_rate', 30.0)
        self.declare_parameter('seed', -1)

        topic = self.get_parameter('joint_state_topic').value
        rate = self.get_parameter('publish_rate').value
        seed = self.get_parameter('seed').value

        self.rng = np.random.default_rng(None if seed < 0 else seed)
        self.joint_pub = self.create_publisher(JointState, topic, 1000)
        self.timer = self.create_timer(1.0 / rate, self.publish_joint_state)

        self.get_logger().info(f"Publishing random joint states on '{topic}' at {rate} Hz")

    def publish_joint_state(self):
        msg = JointState()
        msg.header.stamp = self.get_clock().now().to_msg()
        msg.name = list(JOINT_NAMES)
        msg.position = random_joint_positions(self.rng, len(JOINT_NAMES))

        self.get_logger().info(f"{msg.position[0]:f}")
        self.joint_pub.publish(msg)


def main(args=None):
    rclpy.init(args=args)
    node = StatePublisher()

    try:
        rclpy.spin(node)
    except KeyboardInterrupt:
        pass

    node.destroy_node()
    if rclpy.ok():
        rclpy.shutdown()


if __name__ == '__main__':
    main()
