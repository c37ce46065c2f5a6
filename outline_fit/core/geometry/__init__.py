"""Geometry analysis: angles, areas, distances, closest points and containment."""

from .angles import (
    TAU,
    EPSILON,
    EPSILON_ANGULAR,
    wrap_angle,
    wrap_pi,
    delta_angle_signed,
    delta_angle,
    are_vectors_same_direction,
    are_vectors_opposite_direction,
    project,
    project_normalized,
    project_to_vector,
    lerp_angle_positive,
    square_diagonal_length,
)
from .area import (
    triangle_area,
    polygon_signed_area,
    polygon_area,
    polygon_center_of_mass,
    centroid,
    is_clockwise,
    ensure_counter_clockwise,
)
from .distance import (
    point_to_line_distance_signed,
    point_to_line_distance,
    point_to_segment_square_distance,
    point_to_segment_distance,
    point_to_polyline_square_distance,
    point_to_polyline_distance,
    point_to_outline_square_distance,
    point_to_outline_distance,
    point_to_circle_distance_signed,
    point_to_circle_distance,
    points_to_outline_square_distances,
    points_to_polyline_square_distances,
)
from .closest_point import (
    closest_point_on_line,
    closest_point_on_segment,
    closest_point_on_path,
    closest_point_on_polyline,
    closest_point_on_outline,
    closest_point_on_circle,
    closest_point_index_to_line,
)
from .inside import (
    is_inside_triangle,
    is_inside_polygon,
    is_point_on_line,
    is_point_on_segment,
)

__all__ = [
    # Constants
    "TAU",
    "EPSILON",
    "EPSILON_ANGULAR",

    # Angles
    "wrap_angle",
    "wrap_pi",
    "delta_angle_signed",
    "delta_angle",
    "are_vectors_same_direction",
    "are_vectors_opposite_direction",
    "project",
    "project_normalized",
    "project_to_vector",
    "lerp_angle_positive",
    "square_diagonal_length",

    # Area
    "triangle_area",
    "polygon_signed_area",
    "polygon_area",
    "polygon_center_of_mass",
    "centroid",
    "is_clockwise",
    "ensure_counter_clockwise",

    # Distance
    "point_to_line_distance_signed",
    "point_to_line_distance",
    "point_to_segment_square_distance",
    "point_to_segment_distance",
    "point_to_polyline_square_distance",
    "point_to_polyline_distance",
    "point_to_outline_square_distance",
    "point_to_outline_distance",
    "point_to_circle_distance_signed",
    "point_to_circle_distance",
    "points_to_outline_square_distances",
    "points_to_polyline_square_distances",

    # Closest point
    "closest_point_on_line",
    "closest_point_on_segment",
    "closest_point_on_path",
    "closest_point_on_polyline",
    "closest_point_on_outline",
    "closest_point_on_circle",
    "closest_point_index_to_line",

    # Containment
    "is_inside_triangle",
    "is_inside_polygon",
    "is_point_on_line",
    "is_point_on_segment",
]
