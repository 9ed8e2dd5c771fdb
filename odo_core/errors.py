"""
Exception types raised by the odometry core.

Arithmetic errors (division by a zero-length cycle, NaN propagation) are not
wrapped here; they propagate to the caller unchanged.
"""


class OdometryError(Exception):
    """Base class for odometry core failures."""


class MatrixDimensionError(OdometryError, ValueError):
    """Matrix shapes are not conformant for the requested operation."""


class IMURecalibrationError(OdometryError, RuntimeError):
    """
    Heading sensor recalibration did not complete its settling delay.

    Fatal: a partially completed recalibration cannot be resumed.
    """
