"""Rigid registration of point sets onto outlines."""

from .points_on_outline import fit_points_on_outline_fixed_scale

__all__ = [
    "fit_points_on_outline_fixed_scale",
]
