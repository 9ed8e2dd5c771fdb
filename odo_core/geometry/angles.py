"""
Angle helpers for heading bookkeeping.

normalize_angle() maps into [0, 2*pi). The heading delta used by the
localizer is get_turn_direction(prev, cur) * smallest_angle_difference(cur, prev),
i.e. the signed shortest turn between two absolute readings.
"""

import math

from .pose import Pose

TWO_PI = 2.0 * math.pi


def normalize_angle(angle: float) -> float:
    """
    Wrap angle to [0, 2*pi).

    Args:
        angle: Angle (radians)

    Returns:
        Wrapped angle
    """
    wrapped = angle % TWO_PI
    # -1e-18 % 2pi rounds to exactly 2pi
    if wrapped >= TWO_PI:
        wrapped -= TWO_PI
    return wrapped


def smallest_angle_difference(one: float, two: float) -> float:
    """Unsigned smallest angle between two headings, in [0, pi]."""
    return min(normalize_angle(one - two), normalize_angle(two - one))


def get_turn_direction(start_heading: float, end_heading: float) -> int:
    """
    Direction of the shortest turn from start_heading to end_heading.

    Returns:
        1 for counter-clockwise (or no turn), -1 for clockwise
    """
    if 0.0 <= normalize_angle(end_heading - start_heading) <= math.pi:
        return 1
    return -1


def subtract_poses(one: Pose, two: Pose) -> Pose:
    """Return a new Pose equal to one - two."""
    return one.copy().subtract(two)
