"""
Outline Fit - rigid 2D registration of point sets onto outlines

Finds the rotation and translation (no scaling) that best place a noisy
point cloud on a known reference outline, plus the convex hull and
geometry analysis routines the fit is built from.

Conventions:
- Angles: Radians, counter-clockwise positive
- Coordinates: X right, Y up - right-handed system
- Outlines: Closed polygons, the last point connects to the first
- Fit results map a point p to R(rotation) · (p + translation)
"""

__version__ = "1.0.0"

from .core.models import Point2, AffineTransform2D, HullOptions, FitOptions
from .core.results import FitResult
from .core.hull import HullResult, convex_hull, quickhull
from .core.geometry import (
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
from .core.fitting import fit_points_on_outline_fixed_scale

__all__ = [
    # Version
    "__version__",

    # Models
    "Point2",
    "AffineTransform2D",
    "HullOptions",
    "FitOptions",

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
