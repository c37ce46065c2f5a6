"""outline_fit.core.geometry.inside

Containment tests: point in triangle, point in polygon, point on line/segment.
"""

from __future__ import annotations

from ..models.point import PointLike, PointSequence, as_point, as_points
from .angles import EPSILON


def is_inside_triangle(p0: PointLike, p1: PointLike, p2: PointLike, test_point: PointLike) -> bool:
    """True if ``test_point`` lies strictly inside triangle p0-p1-p2.

    Works for either winding. Points on an edge and degenerate (zero-area)
    triangles give False.
    """
    a = as_point(p0)
    b = as_point(p1)
    c = as_point(p2)
    p = as_point(test_point)

    area = 0.5 * (-b.y * c.x + a.y * (-b.x + c.x) + a.x * (b.y - c.y) + b.x * c.y)
    sign = -1.0 if area < 0.0 else 1.0
    s = (a.y * c.x - a.x * c.y + (c.y - a.y) * p.x + (a.x - c.x) * p.y) * sign
    t = (a.x * b.y - a.y * b.x + (a.y - b.y) * p.x + (b.x - a.x) * p.y) * sign
    return s > 0.0 and t > 0.0 and (s + t) < 2.0 * area * sign


def is_inside_polygon(polygon: PointSequence, test_point: PointLike) -> bool:
    """True if ``test_point`` lies inside ``polygon`` (ray-cast parity).

    Counts the edges crossing a horizontal ray extending left of the point.
    Polygons with fewer than three points contain nothing. Points exactly on
    the boundary may be reported either way.
    """
    pts = as_points(polygon)
    if len(pts) < 3:
        return False

    p = as_point(test_point)
    inside = False
    p0 = pts[-1]
    for p1 in pts:
        if (p1.y < p.y <= p0.y) or (p0.y < p.y <= p1.y):
            x_cross = p1.x + (p.y - p1.y) * ((p0.x - p1.x) / (p0.y - p1.y))
            if p.x > x_cross:
                inside = not inside
        p0 = p1
    return inside


def is_point_on_line(point: PointLike, a: PointLike, b: PointLike) -> bool:
    """True if ``point`` lies on the infinite line through a and b."""
    p = as_point(point)
    pa = as_point(a)
    pb = as_point(b)

    dx = pb.x - pa.x
    if -EPSILON < dx < EPSILON:
        return pa.x - EPSILON < p.x < pa.x + EPSILON  # vertical
    dy = pb.y - pa.y
    if -EPSILON < dy < EPSILON:
        return pa.y - EPSILON < p.y < pa.y + EPSILON  # horizontal

    # Compare y-intercepts using the line's slope
    slope = dy / dx
    y_intercept = pa.y - pa.x * slope
    y_intercept_p = p.y - slope * p.x
    return y_intercept - EPSILON < y_intercept_p < y_intercept + EPSILON


def is_point_on_segment(point: PointLike, a: PointLike, b: PointLike) -> bool:
    """True if ``point`` lies on the segment from a to b."""
    p = as_point(point)
    pa = as_point(a)
    pb = as_point(b)

    if not (min(pa.x, pb.x) - EPSILON < p.x < max(pa.x, pb.x) + EPSILON):
        return False
    if not (min(pa.y, pb.y) - EPSILON < p.y < max(pa.y, pb.y) + EPSILON):
        return False

    # Parallelogram area spanned by a->b and a->point must vanish. The
    # tolerance scales with the squared segment length.
    dx = pb.x - pa.x
    dy = pb.y - pa.y
    area = dx * (pa.y - p.y) + dy * (p.x - pa.x)
    tolerance = EPSILON * (dx * dx + dy * dy)
    return -tolerance <= area <= tolerance
