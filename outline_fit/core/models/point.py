"""
Point class for 2D outline fitting.

Conventions:
- Coordinates: X to the right, Y up - right-handed system
- Angles: radians, counter-clockwise positive
- Points are immutable values; equality is exact coordinate equality
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple, Union

import numpy as np


@dataclass(frozen=True)
class Point2:
    """
    Immutable 2D point (or vector).

    Points hash by their coordinates, so they can be collected in sets and
    used as dictionary keys. Two points are equal only if both coordinates
    are exactly equal; no tolerance is applied.

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate
    """

    x: float
    y: float

    def __post_init__(self):
        """Coerce coordinates to float."""
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def zero(cls) -> "Point2":
        return cls(0.0, 0.0)

    def __add__(self, other: "Point2") -> "Point2":
        return Point2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point2") -> "Point2":
        return Point2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Point2":
        return Point2(-self.x, -self.y)

    def __mul__(self, factor: float) -> "Point2":
        return Point2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "Point2":
        return Point2(self.x / divisor, self.y / divisor)

    def __iter__(self):
        yield self.x
        yield self.y

    def dot(self, other: "Point2") -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def perp_dot(self, other: "Point2") -> float:
        """
        Perpendicular dot product (2D cross product).

        Positive when ``other`` lies counter-clockwise of this vector.
        """
        return self.x * other.y - self.y * other.x

    @property
    def sqr_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> "Point2":
        """Unit vector in the same direction. The zero vector stays zero."""
        length = self.magnitude
        if length == 0.0:
            return Point2(0.0, 0.0)
        return Point2(self.x / length, self.y / length)

    def rotate_perpendicular_left(self) -> "Point2":
        """Rotate 90 degrees counter-clockwise."""
        return Point2(-self.y, self.x)

    def rotate_perpendicular_right(self) -> "Point2":
        """Rotate 90 degrees clockwise."""
        return Point2(self.y, -self.x)

    def rotated(self, angle: float) -> "Point2":
        """Rotate about the origin by ``angle`` radians (counter-clockwise)."""
        c = math.cos(angle)
        s = math.sin(angle)
        return Point2(c * self.x - s * self.y, s * self.x + c * self.y)

    def distance_to(self, other: "Point2") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize point to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Point2":
        """
        Create a Point2 from a dictionary.

        Raises:
            KeyError: If a coordinate is missing
            ValueError: If a coordinate is not numeric
        """
        return cls(float(data["x"]), float(data["y"]))

    def __repr__(self) -> str:
        return f"Point2({self.x:.6g}, {self.y:.6g})"


PointLike = Union[Point2, Tuple[float, float], List[float], np.ndarray]
PointSequence = Union[Iterable[PointLike], np.ndarray]


def as_point(value: PointLike) -> Point2:
    """Coerce a Point2, an (x, y) pair or a length-2 array to Point2."""
    if isinstance(value, Point2):
        return value
    try:
        x, y = value
    except (TypeError, ValueError):
        raise ValueError(f"Expected an (x, y) pair, got {value!r}") from None
    return Point2(x, y)


def as_points(points: PointSequence) -> List[Point2]:
    """
    Coerce a point sequence to a list of Point2.

    Accepts Point2 instances, (x, y) pairs or an N x 2 array.
    """
    if points is None:
        raise TypeError("Point sequence cannot be None")
    if isinstance(points, np.ndarray):
        arr = _check_array_shape(points)
        return [Point2(x, y) for x, y in arr.tolist()]
    return [as_point(p) for p in points]


def as_array(points: PointSequence) -> np.ndarray:
    """
    Coerce a point sequence to a new float N x 2 numpy array.

    The returned array never shares memory with the input.
    """
    if points is None:
        raise TypeError("Point sequence cannot be None")
    if isinstance(points, np.ndarray):
        return np.array(_check_array_shape(points), dtype=float, copy=True)
    coords = [as_point(p).to_tuple() for p in points]
    if not coords:
        return np.zeros((0, 2), dtype=float)
    return np.array(coords, dtype=float)


def _check_array_shape(arr: np.ndarray) -> np.ndarray:
    if arr.size == 0:
        return arr.reshape(0, 2)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Point array must be N x 2, got shape {arr.shape}")
    return arr
