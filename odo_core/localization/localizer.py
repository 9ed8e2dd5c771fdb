"""
Localizer interface.

Every odometry strategy (two-wheel, three-wheel, drive-encoder, sensor
fusion) implements this capability set. The base class carries no state;
each variant owns its own estimator state and is picked at construction.
"""

from abc import ABC, abstractmethod
import threading
from typing import Optional

from odo_core.geometry import Pose, Vector


class Localizer(ABC):
    """Pose and velocity estimator driven by a periodic update() call."""

    @abstractmethod
    def get_pose(self) -> Pose:
        """Current pose estimate."""

    @abstractmethod
    def get_velocity(self) -> Pose:
        """Last computed velocity (dx/dt, dy/dt, dheading/dt)."""

    @abstractmethod
    def get_velocity_vector(self) -> Vector:
        """Last computed translational velocity as a Vector."""

    @abstractmethod
    def set_start_pose(self, set_start: Pose):
        """Replace the origin that displacement is measured from."""

    @abstractmethod
    def set_pose(self, set_pose: Pose):
        """Overwrite the current pose estimate."""

    @abstractmethod
    def update(self):
        """Advance the estimator by one control cycle."""

    @abstractmethod
    def get_total_heading(self) -> float:
        """Unclamped accumulated turn (radians)."""

    @abstractmethod
    def get_forward_multiplier(self) -> float:
        """Forward ticks-to-inches multiplier."""

    @abstractmethod
    def get_lateral_multiplier(self) -> float:
        """Lateral ticks-to-inches multiplier."""

    @abstractmethod
    def get_turning_multiplier(self) -> float:
        """Turning ticks-to-radians multiplier."""

    @abstractmethod
    def reset_imu(self, cancel_event: Optional[threading.Event] = None):
        """Blocking heading sensor recalibration."""

    @abstractmethod
    def is_nan(self) -> bool:
        """Fault indicator for NaN in the estimate."""

    @abstractmethod
    def set_guard_against_flying(self, guard_against_flying: bool):
        """Enable or disable rejection of implausible jumps."""
