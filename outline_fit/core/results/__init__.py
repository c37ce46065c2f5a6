"""Result containers for outline fitting."""

from .fit_result import FitResult

__all__ = ["FitResult"]
