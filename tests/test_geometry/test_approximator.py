"""Tests for curve approximation."""

import numpy as np
import pytest

from beatmapkit.geometry.approximator import (
    CATMULL_DETAIL,
    PathType,
    approximate,
    approximate_bezier,
    approximate_catmull,
    approximate_circular_arc,
    approximate_linear,
)


def test_linear_returns_anchors():
    anchors = np.array([[0.0, 0.0], [10.0, 5.0], [20.0, 0.0]])
    out = approximate_linear(anchors)
    assert np.array_equal(out, anchors)
    assert out is not anchors


def test_bezier_straight_line_is_two_points():
    out = approximate_bezier(np.array([[0.0, 0.0], [100.0, 0.0]]))
    assert out.tolist() == [[0.0, 0.0], [100.0, 0.0]]


def test_bezier_curve_endpoints_and_bounds():
    out = approximate_bezier(np.array([[0.0, 0.0], [50.0, 100.0], [100.0, 0.0]]))

    assert len(out) > 3
    assert np.all(np.isfinite(out))
    assert out[0].tolist() == [0.0, 0.0]
    assert out[-1].tolist() == [100.0, 0.0]
    # A quadratic with this hull peaks at y=50.
    assert out[:, 1].max() <= 50 + 1e-9
    assert out[:, 1].min() >= 0


def test_bezier_is_finite_for_many_control_points():
    rng = np.random.default_rng(7)
    anchors = rng.uniform(0, 512, size=(12, 2))
    out = approximate_bezier(anchors)
    assert np.all(np.isfinite(out))
    assert np.array_equal(out[0], anchors[0])
    assert np.array_equal(out[-1], anchors[-1])


def test_bezier_empty_input():
    assert approximate_bezier(np.empty((0, 2))).shape == (0, 2)


def test_catmull_samples_two_points_per_step():
    out = approximate_catmull(np.array([[0.0, 0.0], [100.0, 0.0]]))
    assert len(out) == CATMULL_DETAIL * 2
    assert out[0].tolist() == pytest.approx([0.0, 0.0])
    assert out[-1].tolist() == pytest.approx([100.0, 0.0])


def test_circular_arc_lies_on_circle():
    out = approximate_circular_arc(np.array([[0.0, 0.0], [50.0, 50.0], [100.0, 0.0]]))

    radii = np.hypot(out[:, 0] - 50, out[:, 1])
    assert radii == pytest.approx(np.full(len(out), 50.0))
    assert out[0].tolist() == pytest.approx([0.0, 0.0], abs=1e-9)
    assert out[-1].tolist() == pytest.approx([100.0, 0.0], abs=1e-9)
    # Passes through the side of the chord where the middle anchor is.
    assert out[:, 1].max() == pytest.approx(50.0, abs=0.5)
    assert len(out) == 25


def test_collinear_perfect_curve_falls_back_to_bezier():
    anchors = np.array([[0.0, 0.0], [50.0, 0.0], [100.0, 0.0]])
    assert np.array_equal(approximate(PathType.PERFECT_CURVE, anchors), approximate_bezier(anchors))


def test_perfect_curve_needs_three_points():
    anchors = np.array([[0.0, 0.0], [30.0, 40.0], [60.0, 0.0], [90.0, 40.0]])
    assert np.array_equal(approximate(PathType.PERFECT_CURVE, anchors), approximate_bezier(anchors))
