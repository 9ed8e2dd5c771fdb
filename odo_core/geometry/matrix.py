"""
Dense Matrix primitive.

Thin wrapper over a numpy float64 array with element get/set and
shape-checked multiplication. Used for 3x3 rotation/transform matrices
and 3x1 robot delta vectors.
"""

from typing import Sequence
import numpy as np

from odo_core.errors import MatrixDimensionError


class Matrix:
    """
    Zero-initialized dense real matrix.

    Usage:
        m = Matrix(3, 3)
        m.set(0, 0, 1.0)
        product = Matrix.multiply(m, other)   # or m @ other
    """

    def __init__(self, rows: int, cols: int):
        """
        Create a rows x cols matrix of zeros.

        Args:
            rows: Number of rows (> 0)
            cols: Number of columns (> 0)
        """
        if rows <= 0 or cols <= 0:
            raise MatrixDimensionError(f"Matrix dimensions must be positive: {rows}x{cols}")
        self._data = np.zeros((rows, cols))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> 'Matrix':
        """Build a matrix from nested row sequences."""
        data = np.array(rows, dtype=float)
        if data.ndim != 2:
            raise MatrixDimensionError(f"Expected 2D rows, got shape {data.shape}")
        matrix = cls(data.shape[0], data.shape[1])
        matrix._data[:, :] = data
        return matrix

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    def get(self, row: int, col: int) -> float:
        return float(self._data[row, col])

    def set(self, row: int, col: int, value: float):
        self._data[row, col] = value

    def to_array(self) -> np.ndarray:
        """Return a copy of the underlying array."""
        return self._data.copy()

    @staticmethod
    def multiply(a: 'Matrix', b: 'Matrix') -> 'Matrix':
        """
        Multiply two matrices.

        Args:
            a: Left operand (n x m)
            b: Right operand (m x p)

        Returns:
            New n x p matrix

        Raises:
            MatrixDimensionError: If a.cols != b.rows
        """
        if a.cols != b.rows:
            raise MatrixDimensionError(
                f"Cannot multiply {a.rows}x{a.cols} by {b.rows}x{b.cols}"
            )
        result = Matrix(a.rows, b.cols)
        result._data = a._data @ b._data
        return result

    def __matmul__(self, other: 'Matrix') -> 'Matrix':
        return Matrix.multiply(self, other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._data.shape == other._data.shape and np.array_equal(self._data, other._data)

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()})"
