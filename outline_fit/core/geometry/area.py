"""outline_fit.core.geometry.area

Triangle and polygon area, centroids and winding.

Polygons are closed (the last point connects back to the first), must not be
self-intersecting, and may be wound either way. The center of mass uses the
signed area, so it is correct for both windings.
"""

from __future__ import annotations

import logging
from typing import List

from ..models.point import Point2, PointLike, PointSequence, as_point, as_points


logger = logging.getLogger(__name__)


def triangle_area(a: PointLike, b: PointLike, c: PointLike) -> float:
    """Signed area of triangle a-b-c.

    Positive when a→b→c turns clockwise, negative when counter-clockwise.
    """
    pa = as_point(a)
    pb = as_point(b)
    pc = as_point(c)
    return ((pb.x - pa.x) * (pa.y - pc.y) + (pb.y - pa.y) * (pc.x - pa.x)) * 0.5


def polygon_signed_area(points: PointSequence) -> float:
    """Shoelace area, positive for counter-clockwise winding.

    Raises:
        ValueError: If the polygon has fewer than three points
    """
    pts = _require_polygon(points)
    return _shoelace(pts)


def polygon_area(points: PointSequence) -> float:
    """Area of a simple polygon, independent of winding.

    Raises:
        ValueError: If the polygon has fewer than three points
    """
    return abs(polygon_signed_area(points))


def polygon_center_of_mass(points: PointSequence) -> Point2:
    """Area-weighted centroid of a simple polygon.

    Invariant under cyclic reordering and reversal of the point list. A
    polygon with zero area (all points collinear) returns the mean of its
    vertices.

    Raises:
        ValueError: If the polygon has fewer than three points
    """
    pts = _require_polygon(points)

    # Paul Bourke's formulation: sum((p0 + p1) * cross(p0, p1)) / (6 * A)
    x = 0.0
    y = 0.0
    twice_area = 0.0
    p0 = pts[-1]
    for p1 in pts:
        t = p0.x * p1.y - p1.x * p0.y
        x += (p0.x + p1.x) * t
        y += (p0.y + p1.y) * t
        twice_area += t
        p0 = p1

    if twice_area == 0.0:
        logger.debug("Polygon of %d points has zero area; using vertex mean", len(pts))
        return centroid(pts)

    d = 1.0 / (3.0 * twice_area)
    return Point2(x * d, y * d)


def centroid(points: PointSequence) -> Point2:
    """Arithmetic mean of a set of points. An empty set gives the origin."""
    pts = as_points(points)
    if not pts:
        return Point2(0.0, 0.0)
    n = float(len(pts))
    return Point2(sum(p.x for p in pts) / n, sum(p.y for p in pts) / n)


def is_clockwise(points: PointSequence) -> bool:
    """True if the polygon is wound clockwise (negative signed area)."""
    return polygon_signed_area(points) < 0.0


def ensure_counter_clockwise(points: PointSequence) -> List[Point2]:
    """Return the polygon wound counter-clockwise, keeping the first point first."""
    pts = _require_polygon(points)
    if _shoelace(pts) < 0.0:
        return [pts[0]] + pts[:0:-1]
    return pts


def _shoelace(pts: List[Point2]) -> float:
    total = 0.0
    p0 = pts[-1]
    for p1 in pts:
        total += p0.x * p1.y - p1.x * p0.y
        p0 = p1
    return total * 0.5


def _require_polygon(points: PointSequence) -> List[Point2]:
    pts = as_points(points)
    if len(pts) < 3:
        raise ValueError(f"A polygon needs at least three points, got {len(pts)}")
    return pts
