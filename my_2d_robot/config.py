"""Recorder configuration loaded from node parameters"""

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from my_2d_robot.errors import ConfigurationError


OUTPUT_FOLDER = 'Output_yaml'
OUTPUT_SUFFIX = '_output.yaml'
TIMESTAMP_FORMAT = '%d_%m_%Y_%H:%M:%S'

# Parameter names as they appear in the launch file
PARAMETER_DEFAULTS = {
    'link_1': 1.0,
    'link_2': 1.0,
    'Theta1_offset': 0.0,
    'Theta2_offset': 0.0,
    'data_point_count': 10,
}


def _number(params, key):
    if key not in params or params[key] is None:
        raise ConfigurationError(f"missing parameter '{key}'")
    value = params[key]
    if isinstance(value, bool):
        raise ConfigurationError(f"parameter '{key}' must be a number, got {value!r}")
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"parameter '{key}' must be a number, got {value!r}") from None
    if not math.isfinite(value):
        raise ConfigurationError(f"parameter '{key}' must be finite, got {value!r}")
    return value


@dataclass(frozen=True)
class RecorderConfig:
    """Immutable settings for one recording session

    Link lengths share the unit of the recorded end-effector position.
    Offsets are degrees.
    """

    link_1: float
    link_2: float
    theta1_offset: float
    theta2_offset: float
    data_point_count: int
    output_path: str

    @staticmethod
    def validate(params):
        """Check raw parameter values keyed by their launch-file names"""
        link_1 = _number(params, 'link_1')
        link_2 = _number(params, 'link_2')
        for key, length in (('link_1', link_1), ('link_2', link_2)):
            if length <= 0.0:
                raise ConfigurationError(f"parameter '{key}' must be positive, got {length}")

        if 'data_point_count' not in params or params['data_point_count'] is None:
            raise ConfigurationError("missing parameter 'data_point_count'")
        count = params['data_point_count']
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise ConfigurationError(
                f"parameter 'data_point_count' must be an integer >= 1, got {count!r}")

        return {
            'link_1': link_1,
            'link_2': link_2,
            'theta1_offset': _number(params, 'Theta1_offset'),
            'theta2_offset': _number(params, 'Theta2_offset'),
            'data_point_count': count,
        }

    @classmethod
    def from_mapping(cls, params, output_path):
        fields = cls.validate(params)
        if not output_path:
            raise ConfigurationError('output path must not be empty')
        return cls(output_path=str(output_path), **fields)

    @classmethod
    def for_directory(cls, params, directory, now=None):
        """Validate first, then create the timestamped file path under ``directory``"""
        fields = cls.validate(params)
        return cls(output_path=str(build_output_path(directory, now)), **fields)


def build_output_path(directory, now=None):
    """Return a timestamped output file path, creating the Output_yaml folder"""
    folder = Path(directory) / OUTPUT_FOLDER
    folder.mkdir(parents=True, exist_ok=True)

    if now is None:
        now = datetime.now(timezone.utc)
    return folder / f'{now.strftime(TIMESTAMP_FORMAT)}{OUTPUT_SUFFIX}'
