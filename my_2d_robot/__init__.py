"""Joint state recorder for a 2-link planar robot arm"""

from my_2d_robot.config import RecorderConfig, build_output_path
from my_2d_robot.errors import (
    ConfigurationError,
    IngestionError,
    MalformedMessage,
    My2dRobotError,
    RecordFormatError,
    RecorderClosedError,
    RecorderError,
    WriteFailure,
)
from my_2d_robot.ingestion import JointStateIngestion, extract_joint_angles
from my_2d_robot.kinematics import EndEffectorPosition, PlanarArm, compute_end_effector
from my_2d_robot.recorder import RecorderState, SampleRecorder
from my_2d_robot.records import OutputRecord, load_records, parse_records, serialize_record

__version__ = '0.1.0'
