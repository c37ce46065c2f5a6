"""outline_fit.core.hull.quick_hull

Convex hull of a 2D point set using Quickhull.

Based on Dirk Gregorius, "Implementing QuickHull" (GDC 2014).

Outline of the algorithm:
  1) Deduplicate the input and pick the extreme pair along the wider axis
     as the initial baseline a-b.
  2) Split the other points into those right and left of a->b. Points
     within epsilon of the line ("fat plane") are dropped.
  3) For each edge with conflict points, add the farthest point c to the
     hull, discard conflict points inside triangle a-b-c and split the
     rest between the new edges a->c and c->b.

Edges are processed from an explicit worklist rather than by recursion, so
the iteration cap is simply the number of edge tasks processed. The hull is
kept as a ring (point -> next point); inserting c between a and b is O(1)
and the output order does not depend on task processing order.

Output order is construction order: a, the points right of a->b, b, the
points left of a->b. Set ``HullOptions.counter_clockwise`` to normalize it.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..models.options import HullOptions
from ..models.point import Point2, PointSequence, as_points
from ..geometry.area import ensure_counter_clockwise
from ..geometry.inside import is_inside_triangle


logger = logging.getLogger(__name__)


DEFAULT_MAX_ITERATIONS = 99999


@dataclass(frozen=True)
class _HullContext:
    """Per-call values shared by all edge tasks."""

    epsilon: float


@dataclass
class HullResult:
    """
    Result of a convex hull computation.

    Attributes:
        points: Hull vertices, a subset of the input points
        epsilon: On-line tolerance used for this point cloud
        iterations: Number of edge tasks processed
        iteration_cap_reached: True if tasks were left unprocessed and the
            hull may be incomplete
        input_count: Number of input points
        unique_count: Number of distinct input points
    """

    points: List[Point2] = field(default_factory=list)
    epsilon: float = 0.0
    iterations: int = 0
    iteration_cap_reached: bool = False
    input_count: int = 0
    unique_count: int = 0

    @property
    def is_degenerate(self) -> bool:
        """True if the hull does not enclose any area (fewer than 3 vertices)."""
        return len(self.points) < 3

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize hull result to dictionary."""
        return {
            "points": [p.to_dict() for p in self.points],
            "epsilon": self.epsilon,
            "iterations": self.iterations,
            "iteration_cap_reached": self.iteration_cap_reached,
            "input_count": self.input_count,
            "unique_count": self.unique_count,
        }


def quickhull(
    points: PointSequence,
    max_iterations: Optional[int] = None,
    options: Optional[HullOptions] = None,
) -> HullResult:
    """Compute the convex hull of ``points``.

    Args:
        points: Input points (any point sequence or N x 2 array)
        max_iterations: Cap on edge tasks; overrides ``options.max_iterations``
        options: Hull options (defaults to ``HullOptions()``)

    Returns:
        HullResult. Fewer than three distinct points give an empty hull;
        collinear points give the two extreme points.
    """
    opts = options or HullOptions()
    cap = opts.max_iterations if max_iterations is None else int(max_iterations)
    if cap < 1:
        raise ValueError("max_iterations must be at least 1")

    pts = as_points(points)
    unique = list(dict.fromkeys(pts))
    result = HullResult(input_count=len(pts), unique_count=len(unique))
    if len(unique) < 3:
        return result

    x_min = min(unique, key=lambda p: p.x)
    x_max = max(unique, key=lambda p: p.x)
    y_min = min(unique, key=lambda p: p.y)
    y_max = max(unique, key=lambda p: p.y)

    # Tolerance scales with the magnitude of the coordinates
    ctx = _HullContext(
        epsilon=2.0
        * (max(abs(x_max.x), abs(x_min.x)) + max(abs(y_min.y), abs(y_max.y)))
        * opts.epsilon_scale
    )
    result.epsilon = ctx.epsilon

    # Baseline along the wider axis
    if x_max.x - x_min.x > y_max.y - y_min.y:
        a, b = x_min, x_max
    else:
        a, b = y_min, y_max

    candidates = [p for p in unique if p != a and p != b]
    right, left = _partition(a, b, candidates, ctx)

    next_point: Dict[Point2, Point2] = {a: b, b: a}
    tasks: List[Tuple[Point2, Point2, List[Point2]]] = []
    if left:
        tasks.append((b, a, left))
    if right:
        tasks.append((a, b, right))

    iterations = 0
    while tasks:
        if iterations >= cap:
            result.iteration_cap_reached = True
            break
        iterations += 1

        edge_a, edge_b, conflict = tasks.pop()
        c = _farthest_right_of(edge_a, edge_b, conflict, ctx)
        if c is None:
            continue

        next_point[edge_a] = c
        next_point[c] = edge_b

        remaining = [
            p for p in conflict
            if p != c and not is_inside_triangle(edge_a, edge_b, c, p)
        ]
        if not remaining:
            continue

        # Each leftover point lies beyond exactly one of the new edges
        outside_ac, _ = _partition(edge_a, c, remaining, ctx)
        taken = set(outside_ac)
        outside_cb, _ = _partition(c, edge_b, [p for p in remaining if p not in taken], ctx)
        if outside_cb:
            tasks.append((c, edge_b, outside_cb))
        if outside_ac:
            tasks.append((edge_a, c, outside_ac))

    result.iterations = iterations
    result.points = _walk_ring(a, next_point)

    if opts.counter_clockwise and len(result.points) >= 3:
        result.points = ensure_counter_clockwise(result.points)

    logger.debug(
        "Hull of %d points (%d unique): %d vertices, %d iterations, epsilon=%.3g",
        result.input_count, result.unique_count, len(result.points),
        iterations, ctx.epsilon,
    )
    return result


def convex_hull(
    points: PointSequence,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    options: Optional[HullOptions] = None,
) -> List[Point2]:
    """Convex hull vertices of ``points``.

    Same as :func:`quickhull` but returns only the vertices. A hull cut short
    by the iteration cap is logged as a warning.
    """
    result = quickhull(points, max_iterations=max_iterations, options=options)
    if result.iteration_cap_reached:
        logger.warning(
            "Convex hull stopped after %d iterations; returning a partial hull of %d points",
            result.iterations, len(result.points),
        )
    return result.points


def _partition(
    a: Point2,
    b: Point2,
    points: List[Point2],
    ctx: _HullContext,
) -> Tuple[List[Point2], List[Point2]]:
    """Split points into (right of a->b, left of a->b), dropping the fat plane.

    Sides are decided on the signed distance to the line, so the dropped
    band is epsilon wide whatever the length of a->b.
    """
    right: List[Point2] = []
    left: List[Point2] = []
    length = (b - a).magnitude
    if length == 0.0:
        return right, left

    ab_right = (b - a).rotate_perpendicular_right() / length
    for p in points:
        sd = ab_right.x * (p.x - a.x) + ab_right.y * (p.y - a.y)
        if sd > ctx.epsilon:
            right.append(p)
        elif sd < -ctx.epsilon:
            left.append(p)
    return right, left


def _farthest_right_of(
    a: Point2,
    b: Point2,
    points: List[Point2],
    ctx: _HullContext,
) -> Optional[Point2]:
    """Point farthest right of a->b by more than epsilon, first found on ties."""
    abx = b.x - a.x
    aby = b.y - a.y
    length = math.hypot(abx, aby)
    if length == 0.0:
        return None

    d_max = ctx.epsilon
    farthest = None
    for p in points:
        sd = (aby * (p.x - a.x) - abx * (p.y - a.y)) / length
        if sd > d_max:
            d_max = sd
            farthest = p
    return farthest


def _walk_ring(start: Point2, next_point: Dict[Point2, Point2]) -> List[Point2]:
    ring = [start]
    p = next_point[start]
    while p != start:
        ring.append(p)
        p = next_point[p]
    return ring
