"""
In-memory stand-ins for the hardware collaborators.

Used by the test suite and the demo loop in main.py:
- ManualClock: nanosecond clock advanced explicitly
- SimulatedTickSource: settable encoder counter
- SimulatedHeadingSource: settable absolute heading with call counters
- SimulatedRobot: drives all of the above along constant-curvature arcs
"""

import math
from typing import Optional

from odo_core.geometry import Pose


class ManualClock:
    """Monotonic nanosecond clock that only moves when told to."""

    def __init__(self, start_ns: int = 0):
        self.now_ns = int(start_ns)

    def __call__(self) -> int:
        return self.now_ns

    def advance(self, nanos: int):
        if nanos < 0:
            raise ValueError(f"Clock cannot move backwards: {nanos}")
        self.now_ns += int(nanos)

    def advance_seconds(self, seconds: float):
        self.advance(round(seconds * 1e9))


class SimulatedTickSource:
    """
    Encoder counter backed by a float position.

    Attributes:
        position: True position in ticks (may be fractional)
        quantize: If True, report the rounded integer count like real hardware
    """

    def __init__(self, position: float = 0.0, quantize: bool = True):
        self.position = position
        self.quantize = quantize

    def get_current_position(self) -> float:
        """Rounded integer count when quantized, fractional ticks otherwise."""
        if self.quantize:
            return int(round(self.position))
        return self.position

    def move(self, ticks: float):
        self.position += ticks


class SimulatedHeadingSource:
    """
    Absolute heading sensor with a cached reading refreshed by update().

    Attributes:
        heading: True heading (radians) the next update() will latch
    """

    def __init__(self, heading: float = 0.0):
        self.heading = float(heading)
        self._reading = float(heading)
        self.update_count = 0
        self.recalibration_count = 0
        self.reset_count = 0

    def update(self) -> None:
        self.update_count += 1
        self._reading = self.heading

    def get_heading(self) -> float:
        return self._reading

    def recalibrate_imu(self) -> None:
        self.recalibration_count += 1

    def reset_pos_and_imu(self) -> None:
        self.reset_count += 1
        self.heading = 0.0
        self._reading = 0.0


class SimulatedRobot:
    """
    Ground-truth kinematics for a robot carrying two offset odometry wheels.

    Produces encoder ticks that include the rotation-induced artifact of
    each wheel's mounting offset, so a correct localizer recovers the
    true pose.

    Usage:
        robot = SimulatedRobot(forward_offset_y=0.75, strafe_offset_x=-6.6)
        robot.step(forward_speed=10.0, strafe_speed=0.0, turn_rate=0.5, dt=0.01)
    """

    def __init__(
        self,
        forward_offset_y: float,
        strafe_offset_x: float,
        forward_ticks_to_inches: float = 0.002,
        strafe_ticks_to_inches: float = 0.002,
        quantize: bool = True,
        clock: Optional[ManualClock] = None,
    ):
        self.forward_offset_y = forward_offset_y
        self.strafe_offset_x = strafe_offset_x
        self.forward_ticks_to_inches = forward_ticks_to_inches
        self.strafe_ticks_to_inches = strafe_ticks_to_inches

        self.forward = SimulatedTickSource(quantize=quantize)
        self.strafe = SimulatedTickSource(quantize=quantize)
        self.heading = SimulatedHeadingSource()
        self.clock = clock or ManualClock()

        # Ground truth relative to where the heading sensor was zeroed
        self.true_pose = Pose()

    def step(self, forward_speed: float, strafe_speed: float, turn_rate: float, dt: float):
        """
        Advance ground truth along a constant-curvature arc for dt seconds.

        Args:
            forward_speed: Robot-frame forward speed (in/s)
            strafe_speed: Robot-frame leftward speed (in/s)
            turn_rate: Angular rate (rad/s), counter-clockwise positive
            dt: Step duration (s)
        """
        dx = forward_speed * dt
        dy = strafe_speed * dt
        dtheta = turn_rate * dt
        theta = self.true_pose.heading

        if abs(dtheta) < 1e-12:
            gx = dx * math.cos(theta) - dy * math.sin(theta)
            gy = dx * math.sin(theta) + dy * math.cos(theta)
        else:
            # Closed-form arc integral of the robot-frame twist
            s0, c0 = math.sin(theta), math.cos(theta)
            s1, c1 = math.sin(theta + dtheta), math.cos(theta + dtheta)
            gx = (dx * (s1 - s0) + dy * (c1 - c0)) / dtheta
            gy = (dx * (c0 - c1) + dy * (s1 - s0)) / dtheta

        self.true_pose.add(Pose(gx, gy, dtheta))

        # Offset artifact is subtracted in tick units before scaling
        self.forward.move(dx / self.forward_ticks_to_inches + self.forward_offset_y * dtheta)
        self.strafe.move(dy / self.strafe_ticks_to_inches + self.strafe_offset_x * dtheta)
        self.heading.heading = self.true_pose.heading
        self.clock.advance_seconds(dt)
