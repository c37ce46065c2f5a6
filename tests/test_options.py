"""Tests for hull and fit options."""

import math

import pytest

from outline_fit.core.models.options import FitOptions, HullOptions, TAU


class TestHullOptions:
    """Tests for HullOptions validation and serialization."""

    def test_defaults(self):
        opts = HullOptions()
        assert opts.max_iterations == 99999
        assert opts.epsilon_scale == 1e-6
        assert opts.counter_clockwise is False

    def test_rejects_zero_iterations(self):
        with pytest.raises(ValueError):
            HullOptions(max_iterations=0)

    def test_rejects_non_positive_epsilon_scale(self):
        with pytest.raises(ValueError):
            HullOptions(epsilon_scale=0.0)

    def test_roundtrip(self):
        opts = HullOptions(max_iterations=50, counter_clockwise=True)
        assert HullOptions.from_dict(opts.to_dict()) == opts


class TestFitOptions:
    """Tests for FitOptions validation, derived values and serialization."""

    def test_default_step_is_one_degree(self):
        opts = FitOptions.default()
        assert opts.angular_step_degrees == pytest.approx(1.0)
        assert opts.step_count == 360

    @pytest.mark.parametrize("step", [0.0, -0.1, math.inf, math.nan])
    def test_rejects_invalid_step(self, step):
        with pytest.raises(ValueError):
            FitOptions(angular_step=step)

    def test_rejects_zero_subdivisions(self):
        with pytest.raises(ValueError):
            FitOptions(post_adjustment_subdivisions=0)

    def test_effective_step_divides_full_turn(self):
        """The requested step is rounded down so the turn divides evenly."""
        opts = FitOptions(angular_step=math.radians(7.0))
        assert opts.step_count == 52
        assert opts.effective_step == pytest.approx(TAU / 52)
        assert opts.effective_step <= opts.angular_step

    def test_from_dict_degrees(self):
        opts = FitOptions.from_dict({"angular_step_degrees": 2.0, "perform_post_adjustment": True})
        assert opts.angular_step == pytest.approx(math.radians(2.0))
        assert opts.perform_post_adjustment is True

    def test_roundtrip(self):
        opts = FitOptions(angular_step=0.05, perform_post_adjustment=True, hull=HullOptions(max_iterations=10))
        restored = FitOptions.from_dict(opts.to_dict())
        assert restored == opts

    def test_nested_hull_dict(self):
        opts = FitOptions(hull={"max_iterations": 5})
        assert isinstance(opts.hull, HullOptions)
        assert opts.hull.max_iterations == 5

    def test_high_precision(self):
        opts = FitOptions.high_precision()
        assert opts.perform_post_adjustment is True
        assert opts.angular_step < FitOptions().angular_step
