"""
Sample recorder: kinematics, accumulation, persistence and the sample quota.

Every sample rewrites the whole output file from the accumulated YAML text.
This costs O(n) per sample but leaves the file complete and parseable after
each write, and a failed write is repaired by the next one.
"""

import enum
import logging

from my_2d_robot.errors import RecorderClosedError, WriteFailure
from my_2d_robot.kinematics import compute_end_effector
from my_2d_robot.records import OutputRecord, serialize_record


class RecorderState(enum.Enum):
    ACTIVE = 'active'
    TERMINAL = 'terminal'


class SampleRecorder:
    """Records joint samples until ``config.data_point_count`` is reached"""

    def __init__(self, config, on_quota_reached=None, logger=None):
        self.config = config
        self.on_quota_reached = on_quota_reached
        self.logger = logger or logging.getLogger(__name__)

        self.state = RecorderState.ACTIVE
        self.received_count = 0
        self.write_pending = False
        self._records = []
        self._output_text = ''

    @property
    def is_terminal(self):
        return self.state is RecorderState.TERMINAL

    @property
    def records(self):
        return tuple(self._records)

    @property
    def output_text(self):
        return self._output_text

    def on_sample(self, angle1, angle2):
        """Process one joint sample and return its record.

        Raises WriteFailure when the output file could not be rewritten. The
        sample is kept in memory and counted either way.
        """
        if self.is_terminal:
            raise RecorderClosedError(
                f'quota of {self.config.data_point_count} samples already recorded')

        position = compute_end_effector(angle1, angle2, self.config)
        record = OutputRecord(float(angle1), float(angle2), position)

        self._records.append(record)
        self._output_text += serialize_record(record)
        self.received_count += 1

        failure = None
        try:
            self.flush()
        except WriteFailure as e:
            failure = e

        if self.received_count == self.config.data_point_count:
            self._terminate()

        if failure is not None:
            raise failure
        return record

    def flush(self):
        """Rewrite the output file with everything recorded so far"""
        try:
            with open(self.config.output_path, 'w') as f:
                f.write(self._output_text)
        except OSError as e:
            self.write_pending = True
            self.logger.error(f'Failed to write {self.config.output_path}: {e}')
            raise WriteFailure(self.config.output_path, e) from e
        self.write_pending = False

    def _terminate(self):
        self.state = RecorderState.TERMINAL
        self.logger.info(
            f'Recorded {self.received_count} samples to {self.config.output_path}')
        if self.on_quota_reached is not None:
            self.on_quota_reached()
