"""
Options for convex hull construction and outline fitting.

This module defines configuration for the Quickhull algorithm and the
fixed-scale rigid fit, including search resolution and safety limits.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict


TAU = 2.0 * math.pi

_STEP_COUNT_SLACK = 1e-9


@dataclass
class HullOptions:
    """
    Configuration options for Quickhull.

    Attributes:
        max_iterations: Maximum number of edge tasks processed before the
            partial hull is returned (default: 99999)
        epsilon_scale: Factor applied to the point cloud magnitude to obtain
            the on-line tolerance (default: 1e-6)
        counter_clockwise: If True, the hull is returned counter-clockwise
            instead of in construction order (default: False)
    """

    max_iterations: int = 99999
    epsilon_scale: float = 1e-6
    counter_clockwise: bool = False

    def __post_init__(self):
        """Validate options after initialization."""
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")

        if not self.epsilon_scale > 0:
            raise ValueError("epsilon_scale must be positive")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "max_iterations": self.max_iterations,
            "epsilon_scale": self.epsilon_scale,
            "counter_clockwise": self.counter_clockwise,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HullOptions":
        return cls(
            max_iterations=int(data.get("max_iterations", 99999)),
            epsilon_scale=float(data.get("epsilon_scale", 1e-6)),
            counter_clockwise=bool(data.get("counter_clockwise", False)),
        )


@dataclass
class FitOptions:
    """
    Configuration options for the fixed-scale rigid fit.

    Attributes:
        angular_step: Requested angular resolution in radians (default: 1 degree).
            The full turn is divided into ceil(2*pi / angular_step) equal steps,
            so the effective step is never coarser than requested.
        perform_post_adjustment: Refine the best angle with a finer local scan
            (default: False)
        post_adjustment_subdivisions: Number of finer steps on each side of the
            best angle, spanning one effective step (default: 10)
        hull: Options for the convex hulls used to find the pivots
    """

    angular_step: float = TAU / 360.0
    perform_post_adjustment: bool = False
    post_adjustment_subdivisions: int = 10
    hull: HullOptions = field(default_factory=HullOptions)

    def __post_init__(self):
        """Validate options after initialization."""
        if not math.isfinite(self.angular_step) or self.angular_step <= 0:
            raise ValueError("angular_step must be a positive finite number of radians")

        if self.post_adjustment_subdivisions < 1:
            raise ValueError("post_adjustment_subdivisions must be at least 1")

        # Accept a plain dict for nested hull options
        if isinstance(self.hull, dict):
            self.hull = HullOptions.from_dict(self.hull)

    @property
    def step_count(self) -> int:
        """Number of equal steps the full turn is divided into."""
        # Absorb rounding so that e.g. TAU / 360 yields exactly 360 steps
        return max(1, int(math.ceil(TAU / self.angular_step - _STEP_COUNT_SLACK)))

    @property
    def effective_step(self) -> float:
        """Angular step actually used, dividing the full turn evenly."""
        return TAU / self.step_count

    @property
    def angular_step_degrees(self) -> float:
        return math.degrees(self.angular_step)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize options to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "angular_step": self.angular_step,
            "perform_post_adjustment": self.perform_post_adjustment,
            "post_adjustment_subdivisions": self.post_adjustment_subdivisions,
            "hull": self.hull.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FitOptions":
        """
        Create FitOptions from a dictionary.

        ``angular_step_degrees`` is accepted in place of ``angular_step``.
        """
        step = data.get("angular_step")
        if step is None and "angular_step_degrees" in data:
            step = math.radians(float(data["angular_step_degrees"]))
        if step is None:
            step = TAU / 360.0

        return cls(
            angular_step=float(step),
            perform_post_adjustment=bool(data.get("perform_post_adjustment", False)),
            post_adjustment_subdivisions=int(data.get("post_adjustment_subdivisions", 10)),
            hull=HullOptions.from_dict(data.get("hull", {})),
        )

    @classmethod
    def default(cls) -> "FitOptions":
        return cls()

    @classmethod
    def high_precision(cls) -> "FitOptions":
        """
        Create options for a fine angular search.

        Returns:
            FitOptions with a quarter-degree step and post adjustment enabled
        """
        return cls(
            angular_step=math.radians(0.25),
            perform_post_adjustment=True,
            post_adjustment_subdivisions=20,
        )

    def __repr__(self) -> str:
        return (
            f"FitOptions("
            f"step={self.angular_step_degrees:.4g}deg, "
            f"post_adjust={self.perform_post_adjustment})"
        )
