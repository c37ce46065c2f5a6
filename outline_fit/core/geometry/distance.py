"""outline_fit.core.geometry.distance

Point-to-shape distances.

Conventions:
  - A polyline is an open chain of segments (first point to last point)
  - An outline is a closed polygon (the last point connects back to the first)
  - Signed line distances are positive on the right side of a→b

The scalar functions operate on single points; the ``points_to_*`` functions
are vectorized with numpy for whole point arrays.
"""

from __future__ import annotations

import math

import numpy as np

from ..models.point import PointLike, PointSequence, as_array, as_point, as_points
from .angles import EPSILON


def point_to_line_distance_signed(point: PointLike, a: PointLike, b: PointLike) -> float:
    """Signed distance from ``point`` to the infinite line through a and b.

    Positive on the right side of a→b, negative on the left. A zero-length
    line gives 0.
    """
    p = as_point(point)
    pa = as_point(a)
    pb = as_point(b)
    abx = pb.x - pa.x
    aby = pb.y - pa.y
    den = abx * abx + aby * aby
    if den < EPSILON:
        return 0.0
    cross = abx * (p.y - pa.y) - aby * (p.x - pa.x)
    return -cross / math.sqrt(den)


def point_to_line_distance(point: PointLike, a: PointLike, b: PointLike) -> float:
    """Distance from ``point`` to the infinite line through a and b."""
    return abs(point_to_line_distance_signed(point, a, b))


def point_to_segment_square_distance(point: PointLike, a: PointLike, b: PointLike) -> float:
    """Squared distance from ``point`` to the segment a-b.

    The projection parameter is clamped to [0, 1]; a zero-length segment
    measures to its start point.
    """
    p = as_point(point)
    pa = as_point(a)
    pb = as_point(b)
    return _segment_square_distance(p.x, p.y, pa.x, pa.y, pb.x, pb.y)


def point_to_segment_distance(point: PointLike, a: PointLike, b: PointLike) -> float:
    """Distance from ``point`` to the segment a-b."""
    return math.sqrt(point_to_segment_square_distance(point, a, b))


def point_to_polyline_square_distance(point: PointLike, polyline: PointSequence) -> float:
    """Squared distance from ``point`` to an open polyline."""
    pts = as_points(polyline)
    if len(pts) < 2:
        raise ValueError("A polyline needs at least two points")
    p = as_point(point)
    min_sq = math.inf
    a = pts[0]
    for b in pts[1:]:
        sq = _segment_square_distance(p.x, p.y, a.x, a.y, b.x, b.y)
        if sq < min_sq:
            min_sq = sq
        a = b
    return min_sq


def point_to_polyline_distance(point: PointLike, polyline: PointSequence) -> float:
    """Distance from ``point`` to an open polyline."""
    return math.sqrt(point_to_polyline_square_distance(point, polyline))


def point_to_outline_square_distance(point: PointLike, outline: PointSequence) -> float:
    """Squared distance from ``point`` to a closed outline."""
    pts = as_points(outline)
    if len(pts) < 2:
        raise ValueError("An outline needs at least two points")
    p = as_point(point)
    min_sq = math.inf
    a = pts[-1]
    for b in pts:
        sq = _segment_square_distance(p.x, p.y, a.x, a.y, b.x, b.y)
        if sq < min_sq:
            min_sq = sq
        a = b
    return min_sq


def point_to_outline_distance(point: PointLike, outline: PointSequence) -> float:
    """Distance from ``point`` to a closed outline."""
    return math.sqrt(point_to_outline_square_distance(point, outline))


def point_to_circle_distance_signed(point: PointLike, center: PointLike, radius: float) -> float:
    """Distance from ``point`` to a circle. Positive outside, negative inside."""
    return as_point(point).distance_to(as_point(center)) - radius


def point_to_circle_distance(point: PointLike, center: PointLike, radius: float) -> float:
    """Unsigned distance from ``point`` to the circle's perimeter."""
    return abs(point_to_circle_distance_signed(point, center, radius))


def points_to_outline_square_distances(points: PointSequence, outline: PointSequence) -> np.ndarray:
    """Squared distance from each point to a closed outline.

    Args:
        points: N points (any point sequence, or an N x 2 array)
        outline: M >= 2 outline points

    Returns:
        Array of N squared distances
    """
    p = _as_float_array(points)
    o = _as_float_array(outline)
    if len(o) < 2:
        raise ValueError("An outline needs at least two points")
    return _min_square_distances(p, np.roll(o, 1, axis=0), o)


def points_to_polyline_square_distances(points: PointSequence, polyline: PointSequence) -> np.ndarray:
    """Squared distance from each point to an open polyline."""
    p = _as_float_array(points)
    o = _as_float_array(polyline)
    if len(o) < 2:
        raise ValueError("A polyline needs at least two points")
    return _min_square_distances(p, o[:-1], o[1:])


def _as_float_array(points: PointSequence) -> np.ndarray:
    # Avoid a copy for arrays that are already well formed; they are only read.
    if isinstance(points, np.ndarray) and points.ndim == 2 and points.shape[1] == 2:
        return points.astype(float, copy=False)
    return as_array(points)


def _min_square_distances(p: np.ndarray, seg_a: np.ndarray, seg_b: np.ndarray) -> np.ndarray:
    """Minimum over segments (seg_a[j], seg_b[j]) of squared point distance."""
    if len(p) == 0:
        return np.zeros(0, dtype=float)

    d = seg_b - seg_a                       # (M, 2)
    len_sq = np.einsum("ij,ij->i", d, d)    # (M,)
    ap = p[:, None, :] - seg_a[None, :, :]  # (N, M, 2)
    dot = np.einsum("nmk,mk->nm", ap, d)    # (N, M)

    # Zero-length segments measure to their start point (t = 0)
    safe_len = np.where(len_sq != 0.0, len_sq, 1.0)
    t = np.where(len_sq != 0.0, dot / safe_len, 0.0)
    t = np.clip(t, 0.0, 1.0)

    closest = seg_a[None, :, :] + t[:, :, None] * d[None, :, :]
    diff = p[:, None, :] - closest
    sq = np.einsum("nmk,nmk->nm", diff, diff)
    return sq.min(axis=1)


def _segment_square_distance(px: float, py: float, ax: float, ay: float, bx: float, by: float) -> float:
    cx = bx - ax
    cy = by - ay
    len_sq = cx * cx + cy * cy
    t = 0.0
    if len_sq != 0.0:
        t = ((px - ax) * cx + (py - ay) * cy) / len_sq
        if t < 0.0:
            t = 0.0
        elif t > 1.0:
            t = 1.0
    dx = px - (ax + t * cx)
    dy = py - (ay + t * cy)
    return dx * dx + dy * dy
