from types import SimpleNamespace

import pytest

from my_2d_robot.config import RecorderConfig


@pytest.fixture
def joint_state():
    """Factory for stand-ins of sensor_msgs/JointState"""
    def _make(*positions, names=('joint1', 'joint2')):
        return SimpleNamespace(name=list(names), position=list(positions))
    return _make


@pytest.fixture
def make_config(tmp_path):
    def _make(**overrides):
        params = {
            'link_1': 1.0,
            'link_2': 1.0,
            'Theta1_offset': 0.0,
            'Theta2_offset': 0.0,
            'data_point_count': 2,
        }
        output_path = overrides.pop('output_path', tmp_path / 'output.yaml')
        params.update(overrides)
        return RecorderConfig.from_mapping(params, output_path)
    return _make

