"""YAML layout of the recorded samples"""

from collections import namedtuple

import yaml

from my_2d_robot.errors import RecordFormatError
from my_2d_robot.kinematics import EndEffectorPosition


JOINT_ANGLES_KEY = 'joint angles'
END_EFFECTOR_KEY = 'end effector position'


class OutputRecord(namedtuple('OutputRecord', ['angle1', 'angle2', 'position'])):
    """Raw joint angles of one sample and the end-effector position they give"""

    __slots__ = ()

    def to_dict(self):
        return {
            JOINT_ANGLES_KEY: [float(self.angle1), float(self.angle2)],
            END_EFFECTOR_KEY: [float(self.position.x), float(self.position.y)],
        }

    @classmethod
    def from_dict(cls, entry):
        try:
            angle1, angle2 = (float(a) for a in entry[JOINT_ANGLES_KEY])
            x, y = (float(v) for v in entry[END_EFFECTOR_KEY])
        except (KeyError, TypeError, ValueError) as e:
            raise RecordFormatError(f'malformed record {entry!r}') from e
        return cls(angle1, angle2, EndEffectorPosition(x, y))


def serialize_record(record):
    """Render one record as a YAML list item with flow-style pairs.

    Items concatenate into a valid YAML sequence, so the accumulated text of a
    session can be written out as is.
    """
    return yaml.safe_dump([record.to_dict()], default_flow_style=None, sort_keys=False)


def parse_records(text):
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise RecordFormatError(f'not a YAML document: {e}') from e
    if data is None:
        return []
    if not isinstance(data, list):
        raise RecordFormatError(f'expected a list of records, got {type(data).__name__}')
    return [OutputRecord.from_dict(entry) for entry in data]


def load_records(path):
    """Read back an output file written by the sample recorder"""
    with open(path, 'r') as f:
        return parse_records(f.read())
