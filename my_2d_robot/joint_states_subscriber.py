#!/usr/bin/env python3
"""
joint_states_subscriber ROS 2 NODE
Records joint angles and end-effector positions of the 2-DOF planar arm
to a YAML file until data_point_count samples have been received.
"""

import rclpy
from rclpy.exceptions import InvalidParameterTypeException, InvalidParameterValueException
from rclpy.node import Node
from sensor_msgs.msg import JointState

from my_2d_robot.config import PARAMETER_DEFAULTS, RecorderConfig
from my_2d_robot.errors import ConfigurationError, IngestionError, RecorderError
from my_2d_robot.ingestion import JointStateIngestion
from my_2d_robot.recorder import SampleRecorder


class JointStatesSubscriber(Node):
    """Subscribes to joint_states and feeds the sample recorder"""

    def __init__(self, **kwargs):
        super().__init__('joint_states_subscriber', **kwargs)

        self.finished = False

        self.init_parameters()
        self.init_recorder()
        self.init_ros_components()

        self.get_logger().info("=" * 60)
        self.get_logger().info("JOINT STATES SUBSCRIBER INITIALIZED")
        self.get_logger().info("=" * 60)
        self.get_logger().info(f"Link lengths: [{self.config.link_1}, {self.config.link_2}]")
        self.get_logger().info(
            f"Joint offsets: [{self.config.theta1_offset}, {self.config.theta2_offset}] deg")
        self.get_logger().info(f"Data points: {self.config.data_point_count}")
        self.get_logger().info(f"Output file: {self.config.output_path}")
        self.get_logger().info("=" * 60)

    def init_parameters(self):
        """Declare parameters and build the recorder configuration"""
        try:
            for name, default in PARAMETER_DEFAULTS.items():
                self.declare_parameter(name, default)
        except (InvalidParameterTypeException, InvalidParameterValueException) as e:
            raise ConfigurationError(str(e)) from e
        self.declare_parameter('joint_state_topic', 'joint_states')
        self.declare_parameter('output_directory', '.')

        params = {name: self.get_parameter(name).value for name in PARAMETER_DEFAULTS}
        self.joint_state_topic = self.get_parameter('joint_state_topic').value
        output_directory = self.get_parameter('output_directory').value

        self.config = RecorderConfig.for_directory(params, output_directory)

    def init_recorder(self):
        self.recorder = SampleRecorder(
            self.config,
            on_quota_reached=self.request_shutdown,
            logger=self.get_logger()
        )
        self.ingestion = JointStateIngestion(self.recorder, logger=self.get_logger())

    def init_ros_components(self):
        self.joint_state_sub = self.create_subscription(
            JointState,
            self.joint_state_topic,
            self.joint_states_callback,
            1000
        )

    def joint_states_callback(self, msg):
        """Callback for joint state updates"""
        try:
            self.ingestion.handle(msg)
        except IngestionError as e:
            self.get_logger().warn(f"Dropped joint state: {e}")
        except RecorderError as e:
            if self.recorder.is_terminal:
                self.get_logger().warn(f"{e}; retrying once at shutdown")
            else:
                self.get_logger().warn(f"{e}; sample kept in memory, retrying on next sample")

    def request_shutdown(self):
        """Stop taking samples and let the spin loop exit"""
        if self.joint_state_sub is not None:
            self.destroy_subscription(self.joint_state_sub)
            self.joint_state_sub = None
        self.finished = True
        self.get_logger().info("Data point count reached, shutting down")

    def shutdown(self):
        """Clean shutdown procedure"""
        if self.recorder.write_pending:
            try:
                self.recorder.flush()
            except RecorderError as e:
                self.get_logger().error(f"Final write failed: {e}")

        self.get_logger().info("=" * 60)
        self.get_logger().info(
            f"RECORDED {self.recorder.received_count} DATA POINTS TO {self.config.output_path}")
        self.get_logger().info("=" * 60)
        self.destroy_node()


# ============================================================================
# MAIN EXECUTION
# ============================================================================

def main(args=None):
    """Main function"""
    rclpy.init(args=args)

    node = None
    try:
        node = JointStatesSubscriber()
        while rclpy.ok() and not node.finished:
            rclpy.spin_once(node, timeout_sec=0.1)

    except ConfigurationError as e:
        print(f"\nInvalid parameters: {e}")
        return 1

    except KeyboardInterrupt:
        print("\n\nKeyboard interrupt received")

    finally:
        if node is not None:
            node.shutdown()
        if rclpy.ok():
            rclpy.shutdown()


if __name__ == '__main__':
    main()
