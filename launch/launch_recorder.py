#!/usr/bin/env python3
from launch import LaunchDescription
from launch_ros.actions import Node

def generate_launch_description():
    return LaunchDescription([
        Node(
            package='my_2d_robot',
            executable='my_2d_robo_state_publisher',
            name='my_2d_robo_state_publisher',
            output='screen',
            parameters=[{
                'joint_state_topic': 'joint_states',
                'publish_rate': 30.0,
            }]
        ),
        Node(
            package='my_2d_robot',
            executable='joint_states_subscriber',
            name='joint_states_subscriber',
            output='screen',
            emulate_tty=True,
            parameters=[{
                # Link lengths
                'link_1': 1.0,
                'link_2': 1.0,

                # Joint angle offsets (degrees)
                'Theta1_offset': 0.0,
                'Theta2_offset': 0.0,

                # Samples to record before the node shuts down
                'data_point_count': 10,

                'joint_state_topic': 'joint_states',

                # Output_yaml/ is created under this directory
                'output_directory': '.',
            }]
        )
    ])
