"""
Homogeneous 2D transform.

A 3x3 matrix expressing compositions of translation, rotation and scale.
Matrices multiply column vectors, so ``(A @ B).apply(p) == A.apply(B.apply(p))``.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import List, Sequence, Union

import numpy as np

from .point import Point2, PointLike, PointSequence, as_array, as_point


_EQUALITY_TOLERANCE = 1e-6
_SINGULAR_TOLERANCE = 1e-12


class AffineTransform2D:
    """
    3x3 homogeneous transform (row-major, column-vector convention).

    Instances are treated as values: operations return new transforms and
    the underlying array is read-only.
    """

    __slots__ = ("_m",)

    def __init__(self, matrix: Union[np.ndarray, Sequence[Sequence[float]]]):
        m = np.array(matrix, dtype=float)
        if m.shape != (3, 3):
            raise ValueError(f"Transform matrix must be 3x3, got shape {m.shape}")
        m.flags.writeable = False
        self._m = m

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def identity(cls) -> "AffineTransform2D":
        return cls(np.eye(3))

    @classmethod
    def from_rows(
        cls,
        m00: float, m01: float, m02: float,
        m10: float, m11: float, m12: float,
        m20: float, m21: float, m22: float,
    ) -> "AffineTransform2D":
        return cls([[m00, m01, m02], [m10, m11, m12], [m20, m21, m22]])

    @classmethod
    def translate(cls, translation: PointLike) -> "AffineTransform2D":
        t = as_point(translation)
        return cls([[1.0, 0.0, t.x], [0.0, 1.0, t.y], [0.0, 0.0, 1.0]])

    @classmethod
    def rotate(cls, angle: float) -> "AffineTransform2D":
        """Rotation about the origin, counter-clockwise, radians."""
        s = math.sin(angle)
        c = math.cos(angle)
        return cls([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])

    @classmethod
    def scale(cls, scale: Union[float, PointLike]) -> "AffineTransform2D":
        if isinstance(scale, Real):
            sx = sy = float(scale)
        else:
            sx, sy = as_point(scale).to_tuple()
        return cls([[sx, 0.0, 0.0], [0.0, sy, 0.0], [0.0, 0.0, 1.0]])

    @classmethod
    def trs(
        cls,
        translation: PointLike,
        angle: float,
        scale: Union[float, PointLike] = 1.0,
    ) -> "AffineTransform2D":
        """Scale @ Rotate @ Translate: translate first, then rotate, then scale."""
        return cls.scale(scale) @ cls.rotate(angle) @ cls.translate(translation)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def matrix(self) -> np.ndarray:
        """Read-only view of the 3x3 matrix."""
        return self._m

    @property
    def determinant(self) -> float:
        return float(np.linalg.det(self._m))

    @property
    def transpose(self) -> "AffineTransform2D":
        return AffineTransform2D(self._m.T)

    @property
    def inverse(self) -> "AffineTransform2D":
        """Inverse transform, or identity when the matrix is singular."""
        inv = self.try_invert()
        return inv if inv is not None else AffineTransform2D.identity()

    def try_invert(self):
        """Return the inverse transform, or None if the matrix is singular."""
        if abs(self.determinant) < _SINGULAR_TOLERANCE:
            return None
        return AffineTransform2D(np.linalg.inv(self._m))

    # ------------------------------------------------------------------
    # Application
    # ------------------------------------------------------------------

    def apply(self, point: PointLike) -> Point2:
        """Transform a single point (w = 1)."""
        p = as_point(point)
        m = self._m
        return Point2(
            m[0, 0] * p.x + m[0, 1] * p.y + m[0, 2],
            m[1, 0] * p.x + m[1, 1] * p.y + m[1, 2],
        )

    def apply_array(self, points: PointSequence) -> np.ndarray:
        """Transform a point sequence, returning a new N x 2 array."""
        arr = as_array(points)
        return arr @ self._m[:2, :2].T + self._m[:2, 2]

    def apply_points(self, points: PointSequence) -> List[Point2]:
        """Transform a point sequence, returning a list of Point2."""
        return [Point2(x, y) for x, y in self.apply_array(points).tolist()]

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __matmul__(self, other):
        if isinstance(other, AffineTransform2D):
            return AffineTransform2D(self._m @ other._m)
        if isinstance(other, Point2):
            return self.apply(other)
        return NotImplemented

    __mul__ = __matmul__

    def __eq__(self, other) -> bool:
        """Element-wise equality within a small tolerance."""
        if not isinstance(other, AffineTransform2D):
            return NotImplemented
        return bool(np.all(np.abs(self._m - other._m) < _EQUALITY_TOLERANCE))

    def __ne__(self, other) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # tolerance-based equality cannot be hashed consistently

    def to_list(self) -> List[float]:
        """Flattened row-major matrix."""
        return [float(v) for v in self._m.ravel()]

    def __repr__(self) -> str:
        rows = ", ".join(
            "[" + ", ".join(f"{v:.6g}" for v in row) + "]" for row in self._m.tolist()
        )
        return f"AffineTransform2D([{rows}])"
