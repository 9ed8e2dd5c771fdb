"""
Two-Wheel Localizer with an absolute heading sensor.

Dead-reckons planar pose and velocity from two orthogonally mounted,
non-driven odometry wheels. Heading comes from an external absolute
heading sensor; the wheels supply translation only.

Robot frame, viewed from above:

                        forward (x positive)
                               ^
                               |
                        /--------------\\
                        |              |
                        |           || |   forward wheel, offset y
 left (y positive) <--- |           || |
                        |     ____     |   strafe wheel, offset x
                        |     ----     |
                        \\--------------/

Per cycle:
1. Robot-frame twist with offset correction
       dx = k_f * (df - y_f * dθ)
       dy = k_l * (dl - x_l * dθ)
2. Curvature correction T(dθ) (see pose_exponential)
3. Rotation into the global frame using the heading before this cycle
4. Accumulate displacement, velocity and total heading
"""

import logging
import math
import threading
import time
from dataclasses import dataclass, field, replace
from typing import Callable, Optional

from odo_core.errors import IMURecalibrationError
from odo_core.geometry import (
    Matrix,
    Pose,
    Vector,
    normalize_angle,
    smallest_angle_difference,
    get_turn_direction,
    subtract_poses,
)
from odo_core.hardware import (
    Encoder,
    EncoderDirection,
    TickSource,
    HeadingSource,
    SettleResult,
    settle,
    NanoTimer,
)
from odo_core.hardware.timer import NANOS_PER_SECOND
from odo_core.localization.localizer import Localizer
from odo_core.localization.pose_exponential import pose_exponential_matrix, rotation_matrix
from odo_core.metrics import get_metrics

logger = logging.getLogger(__name__)


@dataclass
class OdometryHardware:
    """
    Binding of the localizer to its external collaborators.

    Attributes:
        forward: Tick source of the forward-facing odometry wheel
        strafe: Tick source of the sideways-facing odometry wheel
        heading: Absolute heading sensor
        clock: Monotonic nanosecond clock
    """

    forward: TickSource
    strafe: TickSource
    heading: HeadingSource
    clock: Callable[[], int] = time.monotonic_ns


@dataclass(frozen=True)
class TwoWheelLocalizerConfig:
    """
    Calibration constants for the two-wheel localizer.

    Attributes:
        forward_ticks_to_inches: Forward wheel ticks-to-inches multiplier (tuned)
        strafe_ticks_to_inches: Strafe wheel ticks-to-inches multiplier (tuned)
        forward_encoder_pose: Forward wheel mounting pose; only y is used
        strafe_encoder_pose: Strafe wheel mounting pose; only x is used
        forward_direction: Sign of the forward wheel
        strafe_direction: Sign of the strafe wheel
        imu_settle_time_s: Settling delay after an IMU recalibration (s)
    """

    forward_ticks_to_inches: float = 0.002
    strafe_ticks_to_inches: float = 0.002
    forward_encoder_pose: Pose = field(default_factory=lambda: Pose(0.0, 0.75, 0.0))
    strafe_encoder_pose: Pose = field(default_factory=lambda: Pose(-6.6, 0.0, math.pi / 2))
    forward_direction: EncoderDirection = EncoderDirection.FORWARD
    strafe_direction: EncoderDirection = EncoderDirection.FORWARD
    imu_settle_time_s: float = 0.3

    def __post_init__(self):
        """Validate configuration."""
        for name in ('forward_ticks_to_inches', 'strafe_ticks_to_inches'):
            value = getattr(self, name)
            if not math.isfinite(value) or value == 0:
                raise ValueError(f"{name} must be finite and non-zero: {value}")

        if not self.imu_settle_time_s >= 0:
            raise ValueError(f"imu_settle_time_s cannot be negative: {self.imu_settle_time_s}")


class TwoWheelLocalizer(Localizer):
    """
    Pose-exponential dead reckoning from two odometry wheels and an IMU heading.

    States: idle until the first update(), running afterwards. All state is
    owned by the instance and is not safe for concurrent use; call update()
    from a single control-loop thread.

    Usage:
        hardware = OdometryHardware(forward_ticks, strafe_ticks, imu)
        localizer = TwoWheelLocalizer(hardware, Pose(10, 20, 0))

        while running:
            localizer.update()
            pose = localizer.get_pose()
    """

    def __init__(
        self,
        hardware: OdometryHardware,
        start_pose: Optional[Pose] = None,
        config: Optional[TwoWheelLocalizerConfig] = None,
    ):
        """
        Initialize the localizer.

        Args:
            hardware: Encoder and heading bindings
            start_pose: Starting pose (default origin, zero heading)
            config: Calibration constants (uses defaults if None)
        """
        self.hardware = hardware
        self.config = config or TwoWheelLocalizerConfig()
        self.metrics = get_metrics()

        self.heading_source = hardware.heading
        self.heading_source.reset_pos_and_imu()

        self.forward_encoder = Encoder(hardware.forward, self.config.forward_direction)
        self.strafe_encoder = Encoder(hardware.strafe, self.config.strafe_direction)

        self.start_pose = start_pose.copy() if start_pose is not None else Pose()
        self.timer = NanoTimer(hardware.clock)
        self.delta_time_nano = 1
        self.displacement_pose = Pose()
        self.current_velocity = Pose()
        self.previous_heading = self.start_pose.heading
        self.delta_radians = 0.0
        self.total_heading = 0.0
        self.prev_rotation_matrix = rotation_matrix(0.0)
        self._running = False

        logger.info(f"TwoWheelLocalizer initialized at {self.start_pose}")

    @property
    def is_running(self) -> bool:
        """False until the first update() has completed."""
        return self._running

    def get_pose(self) -> Pose:
        """
        Current pose estimate.

        Position is start + displacement. Heading comes from the
        displacement alone; the start heading only seeds the heading
        bookkeeping at construction.
        """
        return Pose(
            self.start_pose.x + self.displacement_pose.x,
            self.start_pose.y + self.displacement_pose.y,
            self.displacement_pose.heading,
        )

    def get_velocity(self) -> Pose:
        return self.current_velocity.copy()

    def get_velocity_vector(self) -> Vector:
        return self.current_velocity.get_vector()

    def set_start_pose(self, set_start: Pose):
        """
        Replace the start pose. Displacement is untouched, so the robot
        moves as if all previous motion had started from the new origin.
        """
        self.start_pose = set_start.copy()
        self.metrics.increment('start_pose_changes')

    def set_prev_rotation_matrix(self, heading: float):
        """Build the rotation matrix for the heading before this cycle."""
        self.prev_rotation_matrix = rotation_matrix(heading)

    def set_pose(self, set_pose: Pose):
        """
        Overwrite the current pose estimate without touching the start pose.

        Encoders are rebased so the next cycle starts from zero delta.
        """
        self.displacement_pose = subtract_poses(set_pose, self.start_pose)
        self.reset_encoders()
        self.metrics.increment('pose_resets')
        logger.info(f"Pose set to {set_pose}")

    def update(self):
        """
        Advance the estimator by one control cycle.

        Reads and resets the cycle timer, polls encoders and heading, then
        integrates the robot-frame twist with the pose exponential.

        Raises:
            ZeroDivisionError: If no time elapsed since the previous cycle. The
                cycle's motion is accumulated before the error is raised.
        """
        self.delta_time_nano = self.timer.get_elapsed_time()
        self.timer.reset_timer()

        self.update_encoders()
        robot_deltas = self.get_robot_deltas()
        self.set_prev_rotation_matrix(self.get_pose().heading)

        transformation = pose_exponential_matrix(robot_deltas.get(2, 0))
        global_deltas = Matrix.multiply(
            Matrix.multiply(self.prev_rotation_matrix, transformation),
            robot_deltas,
        )
        delta = Pose(global_deltas.get(0, 0), global_deltas.get(1, 0), global_deltas.get(2, 0))

        self.displacement_pose.add(delta)
        self.total_heading += delta.heading
        self._running = True

        # Motion is already accumulated; only the velocity is undefined
        if self.delta_time_nano <= 0:
            logger.warning(f"Zero-length update cycle ({self.delta_time_nano} ns)")
            self.metrics.increment_fault('zero_cycle_time')
        delta_time_s = self.delta_time_nano / NANOS_PER_SECOND
        self.current_velocity = Pose(delta.x / delta_time_s, delta.y / delta_time_s, delta.heading / delta_time_s)

        self.metrics.increment('localizer_updates')
        self.metrics.record_cycle(self.delta_time_nano / 1e6, delta.heading)
        logger.debug(f"Update dt={delta_time_s * 1e3:.2f}ms delta={delta} pose={self.get_pose()}")

    def update_encoders(self):
        """Poll both encoders and derive the heading delta from the IMU."""
        self.forward_encoder.update()
        self.strafe_encoder.update()

        self.heading_source.update()
        current_heading = self.start_pose.heading + normalize_angle(self.heading_source.get_heading())
        self.delta_radians = (
            get_turn_direction(self.previous_heading, current_heading)
            * smallest_angle_difference(current_heading, self.previous_heading)
        )
        self.previous_heading = current_heading

    def reset_encoders(self):
        self.forward_encoder.reset()
        self.strafe_encoder.reset()
        self.metrics.increment('encoder_resets')

    def get_robot_deltas(self) -> Matrix:
        """
        Robot-frame movement over the last cycle.

        Returns:
            3x1 Matrix [forward, strafe, turn]
        """
        deltas = Matrix(3, 1)
        # x/forward movement
        deltas.set(0, 0, self.config.forward_ticks_to_inches * (
            self.forward_encoder.get_delta_position()
            - self.config.forward_encoder_pose.y * self.delta_radians
        ))
        # y/strafe movement
        deltas.set(1, 0, self.config.strafe_ticks_to_inches * (
            self.strafe_encoder.get_delta_position()
            - self.config.strafe_encoder_pose.x * self.delta_radians
        ))
        # theta/turning
        deltas.set(2, 0, self.delta_radians)
        return deltas

    def get_total_heading(self) -> float:
        """
        How far the robot has turned in total, not clamped to [0, 2*pi).

        Only used for tuning diagnostics.
        """
        return self.total_heading

    def get_forward_multiplier(self) -> float:
        return self.config.forward_ticks_to_inches

    def get_lateral_multiplier(self) -> float:
        return self.config.strafe_ticks_to_inches

    def get_turning_multiplier(self) -> float:
        """Always 1: heading comes from the IMU, not from wheel ticks."""
        return 1.0

    def set_forward_multiplier(self, multiplier: float):
        """Apply a newly tuned forward ticks-to-inches multiplier."""
        self.config = replace(self.config, forward_ticks_to_inches=multiplier)
        logger.info(f"Forward multiplier set to {multiplier}")

    def set_lateral_multiplier(self, multiplier: float):
        """Apply a newly tuned strafe ticks-to-inches multiplier."""
        self.config = replace(self.config, strafe_ticks_to_inches=multiplier)
        logger.info(f"Lateral multiplier set to {multiplier}")

    def reset_imu(self, cancel_event: Optional[threading.Event] = None):
        """
        Recalibrate the IMU and block for the settling delay.

        Args:
            cancel_event: Optional token that aborts the settling wait

        Raises:
            IMURecalibrationError: If the wait was canceled. Not retried.
        """
        logger.info("Recalibrating IMU")
        self.heading_source.recalibrate_imu()
        self.metrics.increment('imu_recalibrations')

        if settle(self.config.imu_settle_time_s, cancel_event) is SettleResult.CANCELED:
            self.metrics.increment_fault('imu_recalibration_canceled')
            logger.error("IMU recalibration interrupted before settling")
            raise IMURecalibrationError("IMU recalibration interrupted before settling")

    def is_nan(self) -> bool:
        """
        NaN fault indicator.

        Not implemented for this localizer: always reports no fault, so a
        NaN reaching the displacement is not detected here.
        """
        return False

    def set_guard_against_flying(self, guard_against_flying: bool):
        """No-op: this localizer has no jump rejection."""
