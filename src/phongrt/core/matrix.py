# core/matrix.py
import math
from typing import Sequence, Union

import numpy as np

from phongrt.core.tuples import Tuple


class NonInvertibleMatrixError(ValueError):
    """Raised when inverting a matrix whose determinant is zero."""


class Matrix:
    """
    A 4x4 row-major affine transform backed by a float64 numpy array.

    Use ``@`` to compose two matrices or to transform a point or vector:

        >>> Matrix.translation(5, -3, 2) @ point(-3, 4, 5)
        Tuple(2.0, 1.0, 7.0, 1.0)
    """
    __slots__ = ("data",)

    def __init__(self, values: Union[Sequence[float], Sequence[Sequence[float]], np.ndarray]):
        self.data = np.array(values, dtype=np.float64).reshape(4, 4)

    @staticmethod
    def identity() -> "Matrix":
        return Matrix(np.eye(4))

    @staticmethod
    def translation(x: float, y: float, z: float) -> "Matrix":
        return Matrix([
            1.0, 0.0, 0.0, x,
            0.0, 1.0, 0.0, y,
            0.0, 0.0, 1.0, z,
            0.0, 0.0, 0.0, 1.0,
        ])

    @staticmethod
    def scaling(x: float, y: float, z: float) -> "Matrix":
        return Matrix([
            x, 0.0, 0.0, 0.0,
            0.0, y, 0.0, 0.0,
            0.0, 0.0, z, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ])

    @staticmethod
    def rotation_x(theta: float) -> "Matrix":
        c, s = math.cos(theta), math.sin(theta)
        return Matrix([
            1.0, 0.0, 0.0, 0.0,
            0.0, c, -s, 0.0,
            0.0, s, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ])

    @staticmethod
    def rotation_y(theta: float) -> "Matrix":
        c, s = math.cos(theta), math.sin(theta)
        return Matrix([
            c, 0.0, s, 0.0,
            0.0, 1.0, 0.0, 0.0,
            -s, 0.0, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ])

    @staticmethod
    def rotation_z(theta: float) -> "Matrix":
        c, s = math.cos(theta), math.sin(theta)
        return Matrix([
            c, -s, 0.0, 0.0,
            s, c, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ])

    @staticmethod
    def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> "Matrix":
        """
        Each argument names which axis moves in proportion to which other,
        e.g. ``xy`` moves x in proportion to y.
        """
        return Matrix([
            1.0, xy, xz, 0.0,
            yx, 1.0, yz, 0.0,
            zx, zy, 1.0, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ])

    @staticmethod
    def view_transform(from_: Tuple, at: Tuple, up: Tuple) -> "Matrix":
        """
        Returns the world-to-camera transform of an eye at `from_` looking at
        `at`, with `up` roughly pointing up.
        """
        forward = (at - from_).normalized()
        left = forward.cross(up.normalized())
        true_up = left.cross(forward)
        orientation = Matrix([
            left.x, left.y, left.z, 0.0,
            true_up.x, true_up.y, true_up.z, 0.0,
            -forward.x, -forward.y, -forward.z, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ])
        return orientation @ Matrix.translation(-from_.x, -from_.y, -from_.z)

    def __getitem__(self, index) -> float:
        row, col = index
        if not (0 <= row < 4 and 0 <= col < 4):
            raise IndexError(f"matrix index ({row}, {col}) out of range")
        return float(self.data[row, col])

    def __setitem__(self, index, value: float):
        row, col = index
        if not (0 <= row < 4 and 0 <= col < 4):
            raise IndexError(f"matrix index ({row}, {col}) out of range")
        if not self.data.flags.writeable:
            raise ValueError("matrix is read-only")
        self.data[row, col] = value

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            return Matrix(self.data @ other.data)
        if isinstance(other, Tuple):
            x, y, z, w = self.data @ np.array((other.x, other.y, other.z, other.w))
            return Tuple(float(x), float(y), float(z), float(w))
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return bool(np.array_equal(self.data, other.data))

    __hash__ = None

    def frozen(self) -> "Matrix":
        """Returns a read-only copy, safe to cache alongside its inverse."""
        copy = Matrix(self.data)
        copy.data.flags.writeable = False
        return copy

    def transpose(self) -> "Matrix":
        return Matrix(self.data.T)

    def _minors(self):
        a = self.data.tolist()
        # 2x2 determinants of the top two rows (s) and bottom two rows (c)
        s = (
            a[0][0] * a[1][1] - a[1][0] * a[0][1],
            a[0][0] * a[1][2] - a[1][0] * a[0][2],
            a[0][0] * a[1][3] - a[1][0] * a[0][3],
            a[0][1] * a[1][2] - a[1][1] * a[0][2],
            a[0][1] * a[1][3] - a[1][1] * a[0][3],
            a[0][2] * a[1][3] - a[1][2] * a[0][3],
        )
        c = (
            a[2][0] * a[3][1] - a[3][0] * a[2][1],
            a[2][0] * a[3][2] - a[3][0] * a[2][2],
            a[2][0] * a[3][3] - a[3][0] * a[2][3],
            a[2][1] * a[3][2] - a[3][1] * a[2][2],
            a[2][1] * a[3][3] - a[3][1] * a[2][3],
            a[2][2] * a[3][3] - a[3][2] * a[2][3],
        )
        return a, s, c

    def determinant(self) -> float:
        _, s, c = self._minors()
        return s[0] * c[5] - s[1] * c[4] + s[2] * c[3] + s[3] * c[2] - s[4] * c[1] + s[5] * c[0]

    def inverse(self) -> "Matrix":
        """
        Closed-form inverse by cofactor expansion over 2x2 sub-determinants.

        Raises:
            NonInvertibleMatrixError: If the determinant is zero.
        """
        a, s, c = self._minors()
        det = s[0] * c[5] - s[1] * c[4] + s[2] * c[3] + s[3] * c[2] - s[4] * c[1] + s[5] * c[0]
        if det == 0:
            raise NonInvertibleMatrixError("matrix is not invertible")
        inv = 1.0 / det

        return Matrix([
            (a[1][1] * c[5] - a[1][2] * c[4] + a[1][3] * c[3]) * inv,
            (-a[0][1] * c[5] + a[0][2] * c[4] - a[0][3] * c[3]) * inv,
            (a[3][1] * s[5] - a[3][2] * s[4] + a[3][3] * s[3]) * inv,
            (-a[2][1] * s[5] + a[2][2] * s[4] - a[2][3] * s[3]) * inv,

            (-a[1][0] * c[5] + a[1][2] * c[2] - a[1][3] * c[1]) * inv,
            (a[0][0] * c[5] - a[0][2] * c[2] + a[0][3] * c[1]) * inv,
            (-a[3][0] * s[5] + a[3][2] * s[2] - a[3][3] * s[1]) * inv,
            (a[2][0] * s[5] - a[2][2] * s[2] + a[2][3] * s[1]) * inv,

            (a[1][0] * c[4] - a[1][1] * c[2] + a[1][3] * c[0]) * inv,
            (-a[0][0] * c[4] + a[0][1] * c[2] - a[0][3] * c[0]) * inv,
            (a[3][0] * s[4] - a[3][1] * s[2] + a[3][3] * s[0]) * inv,
            (-a[2][0] * s[4] + a[2][1] * s[2] - a[2][3] * s[0]) * inv,

            (-a[1][0] * c[3] + a[1][1] * c[1] - a[1][2] * c[0]) * inv,
            (a[0][0] * c[3] - a[0][1] * c[1] + a[0][2] * c[0]) * inv,
            (-a[3][0] * s[3] + a[3][1] * s[1] - a[3][2] * s[0]) * inv,
            (a[2][0] * s[3] - a[2][1] * s[1] + a[2][2] * s[0]) * inv,
        ])

    def __repr__(self) -> str:
        rows = ", ".join(str(row) for row in self.data.tolist())
        return f"Matrix([{rows}])"
