"""
SE(2) pose-exponential integration.

Maps a constant-curvature arc traversed during one cycle into the linear
displacement it produces, instead of assuming straight-line motion:

    T(dθ) = [[ a, b, 0],
             [-b, a, 0],
             [ 0, 0, 1]]

    a = sin(dθ)/dθ,  b = (cos(dθ) - 1)/dθ

Below SMALL_ANGLE_THRESHOLD the second-order Taylor expansion
(a = 1 - dθ²/6, b = -dθ/2) is used so dθ = 0 never divides by zero.
"""

import math
from typing import Tuple

from odo_core.geometry import Matrix

SMALL_ANGLE_THRESHOLD = 1e-3


def transform_coefficients(dtheta: float) -> Tuple[float, float]:
    """
    Pose-exponential coefficients (a, b) for an angular delta.

    Args:
        dtheta: Heading change over the cycle (radians)

    Returns:
        (a, b) tuple
    """
    if abs(dtheta) < SMALL_ANGLE_THRESHOLD:
        return 1.0 - dtheta ** 2 / 6.0, -dtheta / 2.0
    return math.sin(dtheta) / dtheta, (math.cos(dtheta) - 1.0) / dtheta


def pose_exponential_matrix(dtheta: float) -> Matrix:
    """3x3 curvature-correction transform for an angular delta."""
    a, b = transform_coefficients(dtheta)
    return Matrix.from_rows([
        [a, b, 0.0],
        [-b, a, 0.0],
        [0.0, 0.0, 1.0],
    ])


def rotation_matrix(heading: float) -> Matrix:
    """3x3 robot-to-global rotation; heading passes through unchanged."""
    c = math.cos(heading)
    s = math.sin(heading)
    return Matrix.from_rows([
        [c, -s, 0.0],
        [s, c, 0.0],
        [0.0, 0.0, 1.0],
    ])
