"""outline_fit.core.geometry.closest_point

Closest-point queries on lines, segments, paths and circles.
"""

from __future__ import annotations

import math

from ..models.point import Point2, PointLike, PointSequence, as_point, as_points
from .distance import _segment_square_distance


def closest_point_on_line(point: PointLike, a: PointLike, b: PointLike) -> Point2:
    """Orthogonal projection of ``point`` onto the infinite line through a and b.

    A zero-length line gives ``a``.
    """
    p = as_point(point)
    pa = as_point(a)
    ab = as_point(b) - pa
    len_sq = ab.sqr_magnitude
    if len_sq == 0.0:
        return pa
    return pa + ab * ((p - pa).dot(ab) / len_sq)


def closest_point_on_segment(point: PointLike, a: PointLike, b: PointLike) -> Point2:
    """Closest point to ``point`` on the segment a-b."""
    p = as_point(point)
    pa = as_point(a)
    pb = as_point(b)
    ab = pb - pa
    len_sq = ab.sqr_magnitude
    if len_sq == 0.0:
        return pa
    t = (p - pa).dot(ab) / len_sq
    if t <= 0.0:
        return pa
    if t >= 1.0:
        return pb
    return pa + ab * t


def closest_point_on_path(point: PointLike, path: PointSequence, is_path_closed: bool = False) -> Point2:
    """Closest point to ``point`` on a polyline or closed outline.

    Raises:
        ValueError: If the path has fewer than two points
    """
    pts = as_points(path)
    if len(pts) < 2:
        raise ValueError("A path needs at least two points")
    p = as_point(point)

    if is_path_closed:
        segments = zip([pts[-1]] + pts[:-1], pts)
    else:
        segments = zip(pts[:-1], pts[1:])

    min_sq = math.inf
    best = None
    for a, b in segments:
        sq = _segment_square_distance(p.x, p.y, a.x, a.y, b.x, b.y)
        if sq < min_sq:
            min_sq = sq
            best = (a, b)
    return closest_point_on_segment(p, best[0], best[1])


def closest_point_on_polyline(point: PointLike, polyline: PointSequence) -> Point2:
    """Closest point to ``point`` on an open polyline."""
    return closest_point_on_path(point, polyline, is_path_closed=False)


def closest_point_on_outline(point: PointLike, outline: PointSequence) -> Point2:
    """Closest point to ``point`` on a closed outline."""
    return closest_point_on_path(point, outline, is_path_closed=True)


def closest_point_on_circle(point: PointLike, center: PointLike, radius: float) -> Point2:
    """Closest point to ``point`` on a circle's perimeter.

    A point at the exact center has no unique answer; the center is returned.
    """
    p = as_point(point)
    c = as_point(center)
    dx = p.x - c.x
    dy = p.y - c.y
    dist_sq = dx * dx + dy * dy
    if dist_sq == 0.0:
        return c
    dist = math.sqrt(dist_sq)
    return Point2(c.x + radius * dx / dist, c.y + radius * dy / dist)


def closest_point_index_to_line(points: PointSequence, a: PointLike, b: PointLike) -> int:
    """Index of the point closest to the infinite line through a and b.

    Ties keep the earliest index.

    Raises:
        ValueError: If ``points`` is empty
    """
    pts = as_points(points)
    if not pts:
        raise ValueError("Cannot find the closest of zero points")
    pa = as_point(a)
    pb = as_point(b)

    # Unnormalized line equation; only the ordering matters
    aby = pb.y - pa.y
    bax = pa.x - pb.x
    d = pb.x * pa.y - pa.x * pb.y

    best_index = 0
    best = abs(aby * pts[0].x + bax * pts[0].y + d)
    for i in range(1, len(pts)):
        dist = abs(aby * pts[i].x + bax * pts[i].y + d)
        if dist < best:
            best_index = i
            best = dist
    return best_index
