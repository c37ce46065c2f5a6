"""
Data models for outline fitting.

This module provides the core data structures:
- Point2: Immutable 2D point/vector
- AffineTransform2D: 3x3 homogeneous transform
- HullOptions, FitOptions: Configuration for hull construction and fitting
"""

from .point import Point2, PointLike, PointSequence, as_point, as_points, as_array
from .transform import AffineTransform2D
from .options import HullOptions, FitOptions, TAU

__all__ = [
    # Point
    "Point2",
    "PointLike",
    "PointSequence",
    "as_point",
    "as_points",
    "as_array",

    # Transform
    "AffineTransform2D",

    # Options
    "HullOptions",
    "FitOptions",
    "TAU",
]
