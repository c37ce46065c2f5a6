"""outline_fit.core.fitting.points_on_outline

Fixed-scale rigid fit of a point set onto an outline.

Method:
  1) Pivot both shapes on the center of mass of their convex hulls. The
     hull makes the pivot insensitive to uneven sampling along the boundary.
  2) Rotate the centered points a full turn in equal steps, summing squared
     point-to-outline distances at each step. The lowest sum wins; ties keep
     the first (lowest) angle.
  3) Optionally rescan one step either side of the winner at a finer step.
  4) Convert the pivot offset and rotation into a translation applied before
     a rotation about the origin.

The search is exhaustive over the discretized circle, so it always
terminates after a fixed amount of work and is deterministic. Cost is
O(steps x |points| x |outline|), vectorized over points and outline edges.

The caller's sequences are never modified; all work happens on copies.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Optional, Tuple

import numpy as np

from ..models.options import FitOptions
from ..models.point import Point2, PointSequence, as_array
from ..models.transform import AffineTransform2D
from ..geometry.angles import wrap_angle
from ..geometry.area import polygon_center_of_mass
from ..geometry.distance import points_to_outline_square_distances
from ..hull.quick_hull import quickhull
from ..results.fit_result import FitResult


logger = logging.getLogger(__name__)


def fit_points_on_outline_fixed_scale(
    points: PointSequence,
    outline: PointSequence,
    angular_step: Optional[float] = None,
    perform_post_adjustment: Optional[bool] = None,
    options: Optional[FitOptions] = None,
) -> FitResult:
    """Find the translation and rotation that best place ``points`` on ``outline``.

    No scaling is applied. The returned transform maps a point p to
    ``R(rotation) · (p + translation)``; see :class:`FitResult`.

    Args:
        points: Mobile point set (at least 3 points, not all collinear)
        outline: Closed reference outline (at least 3 points, not all collinear)
        angular_step: Requested angular resolution in radians; overrides
            ``options.angular_step``. The effective step divides the full
            turn evenly and is never coarser than requested.
        perform_post_adjustment: Refine the best angle with a finer local scan;
            overrides ``options.perform_post_adjustment``
        options: Fit options (defaults to ``FitOptions()``)

    Returns:
        FitResult with translation, rotation in [0, 2π) and search diagnostics

    Raises:
        ValueError: If either set has fewer than three points, its hull is
            degenerate, or the angular step is not a positive finite number
    """
    opts = _resolve_options(options, angular_step, perform_post_adjustment)

    # Private copies; the caller's data is never shifted in place
    p = as_array(points)
    o = as_array(outline)
    if len(p) < 3:
        raise ValueError(f"Fitting needs at least three points, got {len(p)}")
    if len(o) < 3:
        raise ValueError(f"Fitting needs an outline of at least three points, got {len(o)}")

    points_pivot = _hull_pivot(p, opts, "points")
    outline_pivot = _hull_pivot(o, opts, "outline")

    p -= points_pivot.to_tuple()
    o -= outline_pivot.to_tuple()

    step_count = opts.step_count
    step = opts.effective_step

    best_angle = 0.0
    best_sum = np.inf
    for s in range(step_count):
        a = s * step
        acc = _accumulated_square_distance(p, o, a)
        if acc < best_sum:
            best_sum = acc
            best_angle = a

    post_adjusted = False
    if opts.perform_post_adjustment:
        best_angle, best_sum = _post_adjust(p, o, best_angle, best_sum, step, opts.post_adjustment_subdivisions)
        post_adjusted = True

    best_angle = wrap_angle(best_angle)

    # Rotation is about the origin, not the outline pivot; compensate for it
    translation = (outline_pivot - points_pivot) - (
        outline_pivot - AffineTransform2D.rotate(-best_angle).apply(outline_pivot)
    )

    logger.debug(
        "Fit %d points on %d-point outline: rotation=%.4f rad, sum_sq=%.6g, steps=%d%s",
        len(p), len(o), best_angle, best_sum, step_count,
        " (post-adjusted)" if post_adjusted else "",
    )

    return FitResult(
        translation=translation,
        rotation=best_angle,
        accumulated_square_distance=float(best_sum),
        angular_step=step,
        step_count=step_count,
        post_adjusted=post_adjusted,
        points_pivot=points_pivot,
        outline_pivot=outline_pivot,
        point_count=len(p),
    )


def _resolve_options(
    options: Optional[FitOptions],
    angular_step: Optional[float],
    perform_post_adjustment: Optional[bool],
) -> FitOptions:
    opts = options or FitOptions()
    overrides = {}
    if angular_step is not None:
        overrides["angular_step"] = float(angular_step)
    if perform_post_adjustment is not None:
        overrides["perform_post_adjustment"] = bool(perform_post_adjustment)
    if overrides:
        # replace() re-runs __post_init__ validation
        opts = dataclasses.replace(opts, **overrides)
    return opts


def _hull_pivot(arr: np.ndarray, opts: FitOptions, label: str) -> Point2:
    hull = quickhull(arr, options=opts.hull)
    if hull.iteration_cap_reached:
        logger.warning(
            "Convex hull of %s stopped after %d iterations; pivot uses a partial hull",
            label, hull.iterations,
        )
    if hull.is_degenerate:
        raise ValueError(
            f"Convex hull of {label} is degenerate ({len(hull.points)} vertices); "
            "points may be collinear or duplicated"
        )
    return polygon_center_of_mass(hull.points)


def _accumulated_square_distance(p: np.ndarray, o: np.ndarray, angle: float) -> float:
    rotation = AffineTransform2D.rotate(angle).matrix[:2, :2]
    rotated = p @ rotation.T
    return float(points_to_outline_square_distances(rotated, o).sum())


def _post_adjust(
    p: np.ndarray,
    o: np.ndarray,
    angle: float,
    best_sum: float,
    step: float,
    subdivisions: int,
) -> Tuple[float, float]:
    """Scan one coarse step either side of ``angle`` at step / subdivisions."""
    fine_step = step / subdivisions
    best_angle = angle
    for k in range(-subdivisions, subdivisions + 1):
        if k == 0:
            continue
        a = angle + k * fine_step
        acc = _accumulated_square_distance(p, o, a)
        if acc < best_sum:
            best_sum = acc
            best_angle = a
    return best_angle, best_sum
