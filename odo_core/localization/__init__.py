"""
Localization Module: Pose estimation from odometry wheels and heading.

Key classes:
- Localizer: Capability set shared by every odometry strategy
- TwoWheelLocalizer: Two odometry wheels + absolute heading sensor
- TwoWheelLocalizerConfig: Tuned multipliers and wheel mounting offsets
- OdometryHardware: Binding to tick sources, heading sensor and clock
"""

from .localizer import Localizer
from .pose_exponential import (
    SMALL_ANGLE_THRESHOLD,
    transform_coefficients,
    pose_exponential_matrix,
    rotation_matrix,
)
from .two_wheel_localizer import (
    OdometryHardware,
    TwoWheelLocalizer,
    TwoWheelLocalizerConfig,
)

__all__ = [
    'Localizer',
    'SMALL_ANGLE_THRESHOLD',
    'transform_coefficients',
    'pose_exponential_matrix',
    'rotation_matrix',
    'OdometryHardware',
    'TwoWheelLocalizer',
    'TwoWheelLocalizerConfig',
]
