"""Convex hull construction (Quickhull)."""

from .quick_hull import DEFAULT_MAX_ITERATIONS, HullResult, convex_hull, quickhull

__all__ = [
    "DEFAULT_MAX_ITERATIONS",
    "HullResult",
    "convex_hull",
    "quickhull",
]
