"""
Absolute heading source interface and the recalibration settling wait.

Recalibration blocks for a fixed settling delay. settle() is a fallible
wait: it returns CANCELED when the caller's cancellation token fires, and
the caller decides how to escalate.
"""

import logging
import threading
from enum import IntEnum
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class HeadingSource(Protocol):
    """Absolute heading sensor (e.g. an odometry computer's IMU)."""

    def update(self) -> None:
        """Refresh the cached heading reading."""
        ...

    def get_heading(self) -> float:
        """Heading in radians, not necessarily wrapped."""
        ...

    def recalibrate_imu(self) -> None:
        """Start an IMU recalibration; the sensor must then settle."""
        ...

    def reset_pos_and_imu(self) -> None:
        """Zero the sensor's own position and recalibrate its IMU."""
        ...


class SettleResult(IntEnum):
    """Outcome of a settling wait."""

    COMPLETED = 0
    CANCELED = 1


def settle(duration_s: float, cancel_event: Optional[threading.Event] = None) -> SettleResult:
    """
    Block for duration_s seconds unless cancel_event is set first.

    Args:
        duration_s: Settling delay (s)
        cancel_event: Optional cancellation token

    Returns:
        SettleResult.COMPLETED after the full delay, CANCELED otherwise
    """
    if cancel_event is None:
        cancel_event = threading.Event()

    if cancel_event.wait(timeout=duration_s):
        logger.debug(f"Settling wait of {duration_s:.3f}s canceled")
        return SettleResult.CANCELED
    return SettleResult.COMPLETED
