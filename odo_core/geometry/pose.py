"""
Pose and Vector value types.

A Pose is either an absolute robot pose or a relative displacement; the
type carries no frame tag, so callers track which meaning applies.
Heading is a radian scalar and is never wrapped.
"""

import math


class Vector:
    """
    Polar 2D vector (magnitude, direction).

    Attributes:
        magnitude: Length of the vector
        theta: Direction in radians, measured from +x
    """

    def __init__(self, magnitude: float = 0.0, theta: float = 0.0):
        self.magnitude = float(magnitude)
        self.theta = float(theta)

    @classmethod
    def from_cartesian(cls, x: float, y: float) -> 'Vector':
        """Create a vector from orthogonal components."""
        return cls(math.hypot(x, y), math.atan2(y, x))

    @property
    def x_component(self) -> float:
        return self.magnitude * math.cos(self.theta)

    @property
    def y_component(self) -> float:
        return self.magnitude * math.sin(self.theta)

    def __repr__(self) -> str:
        return f"Vector(magnitude={self.magnitude:.4f}, theta={self.theta:.4f})"


class Pose:
    """
    Planar pose (x, y, heading).

    add() and subtract() mutate in place, which is how the localizer
    accumulates displacement. Everything else treats Pose as a value.
    """

    def __init__(self, x: float = 0.0, y: float = 0.0, heading: float = 0.0):
        self.x = float(x)
        self.y = float(y)
        self.heading = float(heading)

    def add(self, other: 'Pose') -> 'Pose':
        """Component-wise add other into this pose. Returns self."""
        self.x += other.x
        self.y += other.y
        self.heading += other.heading
        return self

    def subtract(self, other: 'Pose') -> 'Pose':
        """Component-wise subtract other from this pose. Returns self."""
        self.x -= other.x
        self.y -= other.y
        self.heading -= other.heading
        return self

    def copy(self) -> 'Pose':
        return Pose(self.x, self.y, self.heading)

    def get_vector(self) -> Vector:
        """Project the (x, y) part onto a polar Vector."""
        return Vector.from_cartesian(self.x, self.y)

    def roughly_equals(self, other: 'Pose', accuracy: float = 1e-9) -> bool:
        """Check all three components agree within accuracy."""
        return (
            abs(self.x - other.x) <= accuracy
            and abs(self.y - other.y) <= accuracy
            and abs(self.heading - other.heading) <= accuracy
        )

    def as_tuple(self):
        return (self.x, self.y, self.heading)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Pose):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __repr__(self) -> str:
        return f"Pose(x={self.x:.4f}, y={self.y:.4f}, heading={self.heading:.4f})"
