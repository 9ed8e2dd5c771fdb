"""
Geometry Module: Planar value types and math helpers.

Key classes:
- Matrix: Dense numpy-backed matrix for 3x3 transforms and 3x1 deltas
- Pose: (x, y, heading) triple, heading in radians and never wrapped
- Vector: Polar 2D vector used for velocity output
"""

from .matrix import Matrix
from .pose import Pose, Vector
from .angles import (
    normalize_angle,
    smallest_angle_difference,
    get_turn_direction,
    subtract_poses,
)

__all__ = [
    'Matrix',
    'Pose',
    'Vector',
    'normalize_angle',
    'smallest_angle_difference',
    'get_turn_direction',
    'subtract_poses',
]
