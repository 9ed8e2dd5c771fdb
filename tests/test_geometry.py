"""
Unit tests for geometry primitives.

Tests cover:
- Matrix construction, element access and shape-checked multiplication
- Pose accumulation, copy semantics and vector projection
- Angle normalization and shortest-turn helpers
"""

import math

import numpy as np
import pytest

from odo_core.errors import MatrixDimensionError, OdometryError
from odo_core.geometry import (
    Matrix,
    Pose,
    Vector,
    normalize_angle,
    smallest_angle_difference,
    get_turn_direction,
    subtract_poses,
)


# =============================================================================
# Test Matrix
# =============================================================================


class TestMatrix:
    """Tests for the dense Matrix primitive."""

    def test_zero_initialized(self):
        """New matrices are all zeros with the requested shape."""
        m = Matrix(3, 1)

        assert m.rows == 3
        assert m.cols == 1
        assert all(m.get(r, 0) == 0.0 for r in range(3))

    def test_set_and_get(self):
        m = Matrix(2, 2)
        m.set(1, 0, 4.5)

        assert m.get(1, 0) == 4.5
        assert m.get(0, 1) == 0.0

    def test_invalid_dimensions(self):
        with pytest.raises(MatrixDimensionError):
            Matrix(0, 3)

    def test_multiply(self):
        """2x3 times 3x1 gives the expected 2x1 product."""
        a = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        b = Matrix.from_rows([[1], [0], [-1]])

        product = Matrix.multiply(a, b)

        assert (product.rows, product.cols) == (2, 1)
        assert product.get(0, 0) == -2.0
        assert product.get(1, 0) == -2.0

    def test_matmul_operator_matches_multiply(self):
        a = Matrix.from_rows([[0, -1], [1, 0]])
        b = Matrix.from_rows([[2], [3]])

        assert (a @ b) == Matrix.multiply(a, b)

    def test_non_conformant_multiply_fails(self):
        """Mismatched shapes fail loudly rather than broadcasting."""
        a = Matrix(3, 3)
        b = Matrix(2, 1)

        with pytest.raises(MatrixDimensionError):
            Matrix.multiply(a, b)

    def test_dimension_error_is_value_error(self):
        with pytest.raises(ValueError):
            Matrix(3, 1) @ Matrix(3, 1)
        assert issubclass(MatrixDimensionError, OdometryError)

    def test_to_array_is_copy(self):
        m = Matrix.from_rows([[1.0, 2.0]])
        arr = m.to_array()
        arr[0, 0] = 99.0

        assert m.get(0, 0) == 1.0
        np.testing.assert_array_equal(m.to_array(), [[1.0, 2.0]])


# =============================================================================
# Test Pose and Vector
# =============================================================================


class TestPose:
    """Tests for the Pose value type."""

    def test_default_is_origin(self):
        assert Pose() == Pose(0.0, 0.0, 0.0)

    def test_add_mutates_in_place(self):
        """add() accumulates into the receiver and returns it."""
        pose = Pose(1.0, 2.0, 0.5)
        result = pose.add(Pose(0.5, -1.0, 0.25))

        assert result is pose
        assert pose == Pose(1.5, 1.0, 0.75)

    def test_subtract_mutates_in_place(self):
        pose = Pose(1.0, 2.0, 0.5)
        pose.subtract(Pose(1.0, 1.0, 1.0))

        assert pose == Pose(0.0, 1.0, -0.5)

    def test_heading_not_wrapped(self):
        """Heading accumulates past 2*pi without wrapping."""
        pose = Pose(0.0, 0.0, 3.0 * math.pi)
        pose.add(Pose(0.0, 0.0, math.pi))

        assert pose.heading == pytest.approx(4.0 * math.pi)

    def test_copy_is_independent(self):
        pose = Pose(1.0, 2.0, 3.0)
        clone = pose.copy()
        clone.add(Pose(1.0, 1.0, 1.0))

        assert pose == Pose(1.0, 2.0, 3.0)

    def test_get_vector(self):
        """Vector projection uses only x and y."""
        vector = Pose(3.0, 4.0, 1.0).get_vector()

        assert vector.magnitude == pytest.approx(5.0)
        assert vector.theta == pytest.approx(math.atan2(4.0, 3.0))
        assert vector.x_component == pytest.approx(3.0)
        assert vector.y_component == pytest.approx(4.0)

    def test_roughly_equals(self):
        assert Pose(1.0, 1.0, 1.0).roughly_equals(Pose(1.0 + 1e-12, 1.0, 1.0))
        assert not Pose(1.0, 1.0, 1.0).roughly_equals(Pose(1.1, 1.0, 1.0), accuracy=0.01)


class TestVector:
    """Tests for the polar Vector."""

    def test_from_cartesian_zero(self):
        vector = Vector.from_cartesian(0.0, 0.0)

        assert vector.magnitude == 0.0
        assert vector.x_component == 0.0

    def test_components(self):
        vector = Vector(2.0, math.pi / 2)

        assert vector.x_component == pytest.approx(0.0, abs=1e-12)
        assert vector.y_component == pytest.approx(2.0)


# =============================================================================
# Test Angle Helpers
# =============================================================================


class TestAngles:
    """Tests for heading normalization and shortest-turn logic."""

    @pytest.mark.parametrize("angle,expected", [
        (0.0, 0.0),
        (math.pi, math.pi),
        (-math.pi / 2, 3 * math.pi / 2),
        (2 * math.pi, 0.0),
        (5 * math.pi, math.pi),
    ])
    def test_normalize_angle(self, angle, expected):
        assert normalize_angle(angle) == pytest.approx(expected)

    def test_normalize_tiny_negative_stays_in_range(self):
        """A rounding-sized negative angle never maps to exactly 2*pi."""
        wrapped = normalize_angle(-1e-18)

        assert 0.0 <= wrapped < 2 * math.pi

    def test_smallest_difference_across_zero(self):
        assert smallest_angle_difference(0.1, 2 * math.pi - 0.1) == pytest.approx(0.2)

    def test_smallest_difference_is_symmetric(self):
        assert smallest_angle_difference(1.0, 2.5) == pytest.approx(smallest_angle_difference(2.5, 1.0))

    def test_turn_direction(self):
        """Shortest turn is counter-clockwise (+1) or clockwise (-1)."""
        assert get_turn_direction(0.0, 0.1) == 1
        assert get_turn_direction(0.1, 0.0) == -1
        assert get_turn_direction(2 * math.pi - 0.1, 0.1) == 1
        assert get_turn_direction(0.1, 2 * math.pi - 0.1) == -1
        assert get_turn_direction(1.0, 1.0) == 1

    def test_subtract_poses_returns_new_pose(self):
        one = Pose(5.0, 5.0, 1.0)
        two = Pose(1.0, 2.0, 0.5)

        result = subtract_poses(one, two)

        assert result == Pose(4.0, 3.0, 0.5)
        assert one == Pose(5.0, 5.0, 1.0)
