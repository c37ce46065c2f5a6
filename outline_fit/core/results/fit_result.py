"""
Result of a fixed-scale rigid fit of points onto an outline.

The fit is expressed as a translation and a rotation about the origin. A
mobile point p is mapped onto the outline by first translating it, then
rotating it:

    fitted = R(rotation) · (p + translation)

which is the transform ``Rotate(rotation) @ Translate(translation)``.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List

import numpy as np

from ..models.point import Point2, PointLike, PointSequence
from ..models.transform import AffineTransform2D


def _json_safe_value(value: Any) -> Any:
    """Convert non-JSON-safe floats (nan/inf) to None."""
    if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
        return None
    return value


@dataclass
class FitResult:
    """
    Translation and rotation that best place a point set on an outline.

    Attributes:
        translation: Translation applied before the rotation
        rotation: Rotation about the origin in radians, in [0, 2π)
        accumulated_square_distance: Sum of squared point-to-outline distances
            at the chosen rotation
        angular_step: Effective angular step of the coarse search (radians)
        step_count: Number of angles evaluated by the coarse search
        post_adjusted: True if the finer local search ran
        points_pivot: Center of mass of the mobile points' convex hull
        outline_pivot: Center of mass of the outline's convex hull
        point_count: Number of mobile points
    """

    translation: Point2
    rotation: float
    accumulated_square_distance: float = 0.0
    angular_step: float = 0.0
    step_count: int = 0
    post_adjusted: bool = False
    points_pivot: Point2 = field(default_factory=Point2.zero)
    outline_pivot: Point2 = field(default_factory=Point2.zero)
    point_count: int = 0

    @property
    def rotation_degrees(self) -> float:
        """Return rotation in degrees."""
        return math.degrees(self.rotation)

    @property
    def rms_distance(self) -> float:
        """Root mean square point-to-outline distance at the chosen rotation."""
        if self.point_count == 0:
            return 0.0
        return math.sqrt(self.accumulated_square_distance / self.point_count)

    def to_transform(self) -> AffineTransform2D:
        """Transform mapping mobile points onto the outline."""
        return AffineTransform2D.rotate(self.rotation) @ AffineTransform2D.translate(self.translation)

    def apply(self, point: PointLike) -> Point2:
        return self.to_transform().apply(point)

    def apply_points(self, points: PointSequence) -> List[Point2]:
        return self.to_transform().apply_points(points)

    def apply_array(self, points: PointSequence) -> np.ndarray:
        return self.to_transform().apply_array(points)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize fit result to dictionary."""
        return {
            "translation": self.translation.to_dict(),
            "rotation_rad": self.rotation,
            "rotation_deg": self.rotation_degrees,
            "accumulated_square_distance": _json_safe_value(self.accumulated_square_distance),
            "rms_distance": _json_safe_value(self.rms_distance),
            "angular_step_rad": self.angular_step,
            "step_count": self.step_count,
            "post_adjusted": self.post_adjusted,
            "points_pivot": self.points_pivot.to_dict(),
            "outline_pivot": self.outline_pivot.to_dict(),
            "point_count": self.point_count,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FitResult":
        """Create FitResult from dictionary."""
        # Handle both radian and degree input
        rotation = data.get("rotation_rad", data.get("rotation", 0.0))
        if "rotation_deg" in data and "rotation_rad" not in data:
            rotation = math.radians(data["rotation_deg"])

        acc = data.get("accumulated_square_distance", 0.0)
        return cls(
            translation=Point2.from_dict(data["translation"]),
            rotation=float(rotation),
            accumulated_square_distance=math.inf if acc is None else float(acc),
            angular_step=float(data.get("angular_step_rad", 0.0)),
            step_count=int(data.get("step_count", 0)),
            post_adjusted=bool(data.get("post_adjusted", False)),
            points_pivot=Point2.from_dict(data.get("points_pivot", {"x": 0.0, "y": 0.0})),
            outline_pivot=Point2.from_dict(data.get("outline_pivot", {"x": 0.0, "y": 0.0})),
            point_count=int(data.get("point_count", 0)),
        )

    def __repr__(self) -> str:
        return (
            f"FitResult(t=({self.translation.x:.4f}, {self.translation.y:.4f}), "
            f"rot={self.rotation_degrees:.3f}deg, "
            f"sum_sq={self.accumulated_square_distance:.6g})"
        )
