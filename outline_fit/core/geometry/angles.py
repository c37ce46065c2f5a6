"""outline_fit.core.geometry.angles

Angle arithmetic and vector direction helpers.

Conventions:
  - Angles: radians, counter-clockwise positive
  - Signed deltas are wrapped to [-π, π], unsigned deltas to [0, π]

Functions taking "angles or vectors" dispatch on the argument type: two
real numbers are treated as angles, anything else as 2D vectors.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Union

from ..models.point import Point2, PointLike, as_point


TAU = 2.0 * math.pi
EPSILON = 1e-7
EPSILON_ANGULAR = 1e-5

_ROOT_OF_2 = math.sqrt(2.0)

AngleOrVector = Union[float, PointLike]


def wrap_angle(angle: float) -> float:
    """Normalize angle to [0, 2π)."""
    a = angle % TAU
    # -1e-20 % TAU rounds to TAU
    if a >= TAU:
        a -= TAU
    return a


def wrap_pi(angle: float) -> float:
    """Normalize angle to [-π, π]."""
    a = wrap_angle(angle)
    if a > math.pi:
        a -= TAU
    return a


def delta_angle_signed(a: AngleOrVector, b: AngleOrVector) -> float:
    """Signed angular difference from ``a`` to ``b``, wrapped to [-π, π].

    For vectors the result is 0 when either vector has (near) zero length.
    """
    if isinstance(a, Real) and isinstance(b, Real):
        return wrap_pi(float(b) - float(a))

    va = as_point(a)
    vb = as_point(b)
    denominator = math.sqrt(va.sqr_magnitude * vb.sqr_magnitude)
    if denominator < EPSILON:
        return 0.0

    cos_angle = _clamp_unit(va.dot(vb) / denominator)
    angle = math.acos(cos_angle)
    if va.perp_dot(vb) < 0.0:
        angle = -angle
    return angle


def delta_angle(a: AngleOrVector, b: AngleOrVector) -> float:
    """Unsigned angular difference between ``a`` and ``b``, in [0, π]."""
    if isinstance(a, Real) and isinstance(b, Real):
        return abs(wrap_pi(float(b) - float(a)))

    va = as_point(a)
    vb = as_point(b)
    denominator = math.sqrt(va.sqr_magnitude * vb.sqr_magnitude)
    if denominator < EPSILON:
        return 0.0
    return math.acos(_clamp_unit(va.dot(vb) / denominator))


def are_vectors_same_direction(v0: PointLike, v1: PointLike) -> bool:
    """True if both vectors point in the same direction. Zero vectors never do."""
    a = as_point(v0)
    b = as_point(v1)
    if _is_zero(a) or _is_zero(b):
        return False
    return abs(a.perp_dot(b)) < EPSILON * a.magnitude * b.magnitude and a.dot(b) > 0.0


def are_vectors_opposite_direction(v0: PointLike, v1: PointLike) -> bool:
    """True if the vectors point in exactly opposite directions. Zero vectors never do."""
    a = as_point(v0)
    b = as_point(v1)
    if _is_zero(a) or _is_zero(b):
        return False
    return abs(a.perp_dot(b)) < EPSILON * a.magnitude * b.magnitude and a.dot(b) < 0.0


def project(vector_a: PointLike, vector_b: PointLike) -> float:
    """Signed length of ``vector_a`` projected onto ``vector_b``."""
    a = as_point(vector_a)
    b = as_point(vector_b)
    b_mag = b.magnitude
    if b_mag <= 0.0:
        return 0.0
    return a.dot(b) / b_mag


def project_normalized(vector_a: PointLike, vector_b: PointLike) -> float:
    """Projection of ``vector_a`` onto ``vector_b`` in units of ``|vector_b|``."""
    a = as_point(vector_a)
    b = as_point(vector_b)
    b_sq = b.sqr_magnitude
    if b_sq <= 0.0:
        return 0.0
    return a.dot(b) / b_sq


def project_to_vector(vector_a: PointLike, vector_b: PointLike) -> Point2:
    """Component of ``vector_a`` along ``vector_b``."""
    b = as_point(vector_b)
    return b * project_normalized(vector_a, b)


def lerp_angle_positive(a: float, b: float, t: float) -> float:
    """Interpolate from angle ``a`` towards ``b`` going counter-clockwise.

    The result is in [0, 2π).
    """
    a = wrap_angle(a)
    b = wrap_angle(b)
    if b < a:
        b += TAU
    return wrap_angle(a + (b - a) * t)


def square_diagonal_length(side_length: float) -> float:
    """Length of the diagonal of a square."""
    return side_length * _ROOT_OF_2


def _clamp_unit(value: float) -> float:
    if value < -1.0:
        return -1.0
    if value > 1.0:
        return 1.0
    return value


def _is_zero(v: Point2) -> bool:
    return -EPSILON < v.x < EPSILON and -EPSILON < v.y < EPSILON
