"""Translate joint state messages into recorder samples"""

import logging
from threading import Lock

from my_2d_robot.errors import MalformedMessage


def extract_joint_angles(msg):
    """Return (joint1, joint2) positions from a JointState-like message"""
    positions = getattr(msg, 'position', None)
    positions = [] if positions is None else list(positions)
    if len(positions) < 2:
        raise MalformedMessage(len(positions))
    return float(positions[0]), float(positions[1])


class JointStateIngestion:
    """Forwards joint1/joint2 positions to a SampleRecorder.

    Calls are serialized so that a multi-threaded executor never overlaps
    two samples inside the recorder.
    """

    def __init__(self, recorder, logger=None):
        self.recorder = recorder
        self.logger = logger or logging.getLogger(__name__)
        self._lock = Lock()

    def handle(self, msg):
        """Process one message; returns the record, or None once the quota is met"""
        angle1, angle2 = extract_joint_angles(msg)

        with self._lock:
            if self.recorder.is_terminal:
                self.logger.debug('Sample quota reached, dropping joint state')
                return None
            self.logger.info(f'I heard: [{angle1:f}, {angle2:f}]')
            return self.recorder.on_sample(angle1, angle2)
