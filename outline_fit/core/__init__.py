"""
Core module for outline fitting.

This module contains the pure computational geometry: no I/O, no device or
rendering dependencies. Point sets come in, a transform comes out.
"""

from .models import (
    Point2,
    AffineTransform2D,
    HullOptions,
    FitOptions,
    as_points,
    as_array,
)

from .results import FitResult

from .hull import HullResult, convex_hull, quickhull

from .geometry import (
    polygon_area,
    polygon_center_of_mass,
    point_to_segment_square_distance,
    point_to_segment_distance,
    point_to_polyline_square_distance,
    point_to_polyline_distance,
    point_to_outline_square_distance,
    point_to_outline_distance,
    point_to_circle_distance_signed,
    point_to_circle_distance,
    is_inside_polygon,
)

from .fitting import fit_points_on_outline_fixed_scale

__all__ = [
    # Models
    "Point2",
    "AffineTransform2D",
    "HullOptions",
    "FitOptions",
    "as_points",
    "as_array",

    # Results
    "FitResult",
    "HullResult",

    # Hull
    "convex_hull",
    "quickhull",

    # Geometry
    "polygon_area",
    "polygon_center_of_mass",
    "point_to_segment_square_distance",
    "point_to_segment_distance",
    "point_to_polyline_square_distance",
    "point_to_polyline_distance",
    "point_to_outline_square_distance",
    "point_to_outline_distance",
    "point_to_circle_distance_signed",
    "point_to_circle_distance",
    "is_inside_polygon",

    # Fitting
    "fit_points_on_outline_fixed_scale",
]
