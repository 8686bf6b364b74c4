"""Exceptions raised by the my_2d_robot recording pipeline"""


class My2dRobotError(Exception):
    """Base class for all package errors"""


class ConfigurationError(My2dRobotError):
    """A node parameter is missing or invalid"""


class IngestionError(My2dRobotError):
    """An inbound joint state message could not be used"""


class MalformedMessage(IngestionError):
    """Joint state message carries fewer than two positions"""

    def __init__(self, position_count):
        super().__init__(
            f"expected at least 2 joint positions, got {position_count}")
        self.position_count = position_count


class RecorderError(My2dRobotError):
    """Base class for sample recorder failures"""


class WriteFailure(RecorderError):
    """The accumulated record could not be written to the output file"""

    def __init__(self, path, reason):
        super().__init__(f"could not write {path}: {reason}")
        self.path = path


class RecorderClosedError(RecorderError):
    """A sample was delivered after the quota was reached"""


class RecordFormatError(My2dRobotError):
    """An output file does not hold a list of recorded samples"""
