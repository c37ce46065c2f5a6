"""
Tests for Quickhull convex hull construction.
"""

import logging
import math
import pytest
import sys
import os

import numpy as np

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from outline_fit.core.models.options import HullOptions
from outline_fit.core.models.point import Point2, as_points
from outline_fit.core.hull import HullResult, convex_hull, quickhull
from outline_fit.core.geometry import (
    is_clockwise,
    is_inside_polygon,
    point_to_outline_distance,
    polygon_area,
)


def _circle(n, r=1.0):
    return [(r * math.cos(2.0 * math.pi * k / n), r * math.sin(2.0 * math.pi * k / n)) for k in range(n)]


def _turns_left(hull):
    """True if every consecutive vertex triple turns counter-clockwise."""
    n = len(hull)
    for i in range(n):
        a, b, c = hull[i - 1], hull[i], hull[(i + 1) % n]
        if (b - a).perp_dot(c - b) <= 0.0:
            return False
    return True


class TestSmallInputs:
    """Tests for inputs too small to enclose an area."""

    @pytest.mark.parametrize("points", [[], [(0, 0)], [(0, 0), (1, 1)]])
    def test_fewer_than_three_points(self, points):
        assert convex_hull(points) == []

    def test_duplicates_collapse(self):
        """Three copies of two points are still only two points."""
        result = quickhull([(0, 0), (1, 1), (0, 0), (1, 1), (0, 0)])
        assert result.points == []
        assert result.input_count == 5
        assert result.unique_count == 2
        assert result.is_degenerate

    def test_collinear_gives_extremes(self):
        hull = convex_hull([(0, 0), (1, 1), (2, 2), (3, 3)])
        assert set(hull) == {Point2(0, 0), Point2(3, 3)}


class TestSquare:
    """Tests on square point sets with known hulls."""

    def test_unit_square_order(self):
        hull = convex_hull([(0, 0), (1, 0), (1, 1), (0, 1)])
        assert hull == [Point2(0, 0), Point2(1, 0), Point2(1, 1), Point2(0, 1)]

    def test_interior_and_edge_points_dropped(self):
        points = [(0, 0), (2, 0), (2, 2), (0, 2), (1, 1), (0.5, 1.5), (1, 0), (2, 1)]
        hull = convex_hull(points)
        assert len(hull) == 4
        assert set(hull) == {Point2(0, 0), Point2(2, 0), Point2(2, 2), Point2(0, 2)}

    def test_repeated_vertices(self):
        points = [(0, 0), (1, 0), (1, 1), (0, 1)] * 3
        assert len(convex_hull(points)) == 4

    def test_epsilon_scales_with_coordinates(self):
        result = quickhull([(0, 0), (1, 0), (1, 1), (0, 1)])
        assert result.epsilon == pytest.approx(4e-6)

        far = quickhull([(1000, 1000), (1001, 1000), (1001, 1001), (1000, 1001)])
        assert far.epsilon > result.epsilon


class TestKnownShapes:
    """Tests on regular shapes."""

    def test_regular_dodecagon_area(self):
        hull = convex_hull(_circle(12, r=2.0))
        assert len(hull) == 12
        assert polygon_area(hull) == pytest.approx(12.0)

    def test_all_circle_points_on_hull(self):
        assert len(convex_hull(_circle(100))) == 100

    def test_hull_turns_counter_clockwise(self):
        hull = convex_hull(_circle(30) + [(0.0, 0.0), (0.1, -0.2)])
        assert _turns_left(hull)
        assert not is_clockwise(hull)


def _assert_encloses(cloud):
    """Hull vertices come from the input and no point lies beyond epsilon outside."""
    result = quickhull(cloud)
    hull = result.points
    points = as_points(cloud)

    assert len(hull) >= 3
    assert set(hull) <= set(points)
    assert _turns_left(hull)
    for p in points:
        assert p in hull or is_inside_polygon(hull, p) or point_to_outline_distance(p, hull) <= result.epsilon
    return result


def _random_on_circle(rng, n, r=1.0):
    angles = rng.uniform(0.0, 2.0 * math.pi, size=n)
    return np.column_stack([r * np.cos(angles), r * np.sin(angles)])


class TestRandomClouds:
    """Property tests on random point clouds."""

    @pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
    def test_hull_is_subset_and_encloses_all_points(self, seed):
        rng = np.random.default_rng(seed)
        _assert_encloses(rng.normal(0.0, 10.0, size=(200, 2)))

    @pytest.mark.parametrize("seed", range(10))
    def test_dense_circle_keeps_boundary_points(self, seed):
        """Nearly flat runs of boundary points are not dropped as on-the-line."""
        rng = np.random.default_rng(seed)
        _assert_encloses(_random_on_circle(rng, 400))

    @pytest.mark.parametrize("seed", range(10))
    def test_dense_circle_with_duplicates(self, seed):
        rng = np.random.default_rng(100 + seed)
        cloud = _random_on_circle(rng, 400)
        cloud = np.vstack([cloud, cloud[rng.integers(0, len(cloud), size=50)]])

        result = _assert_encloses(cloud)
        assert result.input_count == 450
        assert result.unique_count <= 400

    def test_short_edges_far_from_origin(self):
        """The on-line band is epsilon wide even along very short edges."""
        rng = np.random.default_rng(21)
        _assert_encloses(_random_on_circle(rng, 300, r=0.01) + np.array([50.0, -20.0]))

    def test_deterministic(self):
        cloud = np.random.default_rng(9).uniform(-1.0, 1.0, size=(150, 2))
        assert convex_hull(cloud) == convex_hull(cloud)

    def test_input_not_modified(self):
        cloud = np.random.default_rng(11).uniform(-1.0, 1.0, size=(50, 2))
        copy = cloud.copy()
        convex_hull(cloud)
        np.testing.assert_array_equal(cloud, copy)


class TestIterationCap:
    """Tests for the iteration cap."""

    def test_cap_returns_partial_hull(self):
        result = quickhull(_circle(100), max_iterations=1)
        assert result.iteration_cap_reached
        assert result.iterations == 1
        assert len(result.points) == 3

    def test_cap_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="outline_fit.core.hull.quick_hull"):
            hull = convex_hull(_circle(100), max_iterations=1)
        assert len(hull) == 3
        assert "partial hull" in caplog.text

    def test_default_cap_not_reached(self):
        result = quickhull(_circle(100))
        assert not result.iteration_cap_reached
        assert result.iterations > 0

    def test_cap_from_options(self):
        result = quickhull(_circle(50), options=HullOptions(max_iterations=2))
        assert result.iteration_cap_reached
        assert result.iterations == 2

    def test_rejects_zero_cap(self):
        with pytest.raises(ValueError):
            quickhull(_circle(10), max_iterations=0)


class TestHullResult:
    """Tests for HullResult helpers."""

    def test_counter_clockwise_option(self):
        result = quickhull([(0, 0), (0, 1), (1, 1), (1, 0)], options=HullOptions(counter_clockwise=True))
        assert not is_clockwise(result.points)

    def test_to_dict(self):
        result = quickhull([(0, 0), (1, 0), (1, 1), (0, 1)])
        data = result.to_dict()
        assert data["points"][1] == {"x": 1.0, "y": 0.0}
        assert data["iteration_cap_reached"] is False
        assert data["unique_count"] == 4

    def test_module_importable_beside_function(self):
        """The hull module and the re-exported function are distinct names."""
        import outline_fit.core.hull.quick_hull as quick_hull_module
        from outline_fit.core import hull

        assert quick_hull_module.quickhull is hull.quickhull
        assert callable(hull.quickhull)

    def test_iteration(self):
        result = quickhull([(0, 0), (1, 0), (1, 1), (0, 1)])
        assert isinstance(result, HullResult)
        assert len(result) == 4
        assert list(result) == result.points
