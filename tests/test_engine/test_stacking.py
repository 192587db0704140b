"""Tests for StackingEngine."""

import pytest

from beatmapkit.engine.stacking import StackingEngine
from beatmapkit.geometry.vector import Vector2
from beatmapkit.models.hitobjects import Circle, Spinner
from beatmapkit.models.modes import GameMode


def _circle(t, x, y):
    return Circle(start_time=t, position=Vector2(x, y))


def _heights(objects):
    return [h.stack_height for h in objects]


def test_droid_stacking_depends_on_scale():
    objects = [_circle(0, 100, 100), _circle(50, 102, 100), _circle(100, 400, 300)]

    # Scale 1 converts to a droid scale of ~1.51, so the allowed distance is ~1.23px.
    StackingEngine().post_process(objects, GameMode.DROID, 14, 1.0)
    assert _heights(objects) == [0, 0, 0]

    for h in objects:
        h.set_scale(3.0)
    StackingEngine().post_process(objects, GameMode.DROID, 14, 1.0)
    assert _heights(objects) == [0, 1, 0]


def test_droid_stacking_chains():
    objects = [_circle(0, 100, 100), _circle(100, 100, 100), _circle(200, 100, 100)]
    StackingEngine().post_process(objects, GameMode.DROID, 14, 1.0)
    assert _heights(objects) == [0, 1, 2]


def test_droid_stacking_respects_time_window():
    objects = [_circle(0, 100, 100), _circle(1500, 100, 100)]
    # Window is 2000ms * leniency.
    StackingEngine().post_process(objects, GameMode.DROID, 14, 0.5)
    assert _heights(objects) == [0, 0]


def test_modern_stacking_circles():
    objects = [_circle(0, 100, 100), _circle(100, 100, 100), _circle(200, 101, 100)]
    StackingEngine().post_process(objects, GameMode.OSU, 14, 0.7)
    assert _heights(objects) == [2, 1, 0]


def test_modern_stacking_breaks_outside_threshold():
    # Default preempt 600ms * 0.7 leniency.
    objects = [_circle(0, 100, 100), _circle(500, 100, 100)]
    StackingEngine().post_process(objects, GameMode.OSU, 14, 0.7)
    assert _heights(objects) == [0, 0]


@pytest.mark.parametrize("format_version", [5, 14])
def test_circles_on_slider_end_stack_negatively(
    format_version, make_slider, control_points, difficulty
):
    slider = make_slider()
    slider.apply_defaults(control_points, difficulty, GameMode.OSU)
    # Slider ends at 3000ms on (500, 100).
    objects = [slider, _circle(3200, 500, 100), _circle(3300, 500, 100)]

    StackingEngine().post_process(objects, GameMode.OSU, format_version, 0.7)
    assert _heights(objects) == [0, -1, -2]


def test_legacy_and_modern_differ_on_spinners():
    def build():
        return [Spinner(start_time=0, end_time=1000), _circle(1200, 256, 192)]

    legacy = build()
    StackingEngine().post_process(legacy, GameMode.OSU, 5, 0.7)
    modern = build()
    StackingEngine().post_process(modern, GameMode.OSU, 6, 0.7)

    assert _heights(legacy) == [1, 0]
    assert _heights(modern) == [0, 0]


def test_stacking_is_idempotent(make_slider, control_points, difficulty):
    slider = make_slider()
    slider.apply_defaults(control_points, difficulty, GameMode.OSU)
    objects = [
        _circle(0, 100, 100),
        slider,
        _circle(3200, 500, 100),
        _circle(3300, 500, 100),
        _circle(3400, 100, 100),
    ]

    engine = StackingEngine()
    engine.post_process(objects, GameMode.OSU, 14, 0.7)
    first = _heights(objects)
    engine.post_process(objects, GameMode.OSU, 14, 0.7)
    assert _heights(objects) == first


def test_stack_height_cascades_to_slider_nested_objects(make_slider, control_points, difficulty):
    slider = make_slider()
    slider.apply_defaults(control_points, difficulty, GameMode.OSU)
    objects = [slider, _circle(1100, 100, 100)]

    StackingEngine().post_process(objects, GameMode.OSU, 14, 0.7)
    assert slider.stack_height == 1
    assert all(o.stack_height == 1 for o in slider.nested_objects)


def test_empty_object_list():
    StackingEngine().post_process([], GameMode.OSU, 14, 0.7)


def test_legacy_window_follows_stacked_start_times(make_slider, control_points, difficulty):
    def build():
        slider = make_slider(start_time=100)
        objects = [_circle(0, 100, 100), slider, _circle(2500, 100, 100)]
        for h in objects:
            h.apply_defaults(control_points, difficulty, GameMode.OSU)
        return objects

    # Slider ends at 2100ms on (500, 100); every object starts on (100, 100).
    legacy = build()
    StackingEngine().post_process(legacy, GameMode.OSU, 5, 0.7)
    modern = build()
    StackingEngine().post_process(modern, GameMode.OSU, 6, 0.7)

    # Legacy: the first circle's window moves to the slider's start time,
    # so the last circle only stacks onto the slider.
    assert _heights(legacy) == [1, 1, 0]
    # Modern: the last circle chains through the slider to the first circle.
    assert _heights(modern) == [2, 1, 0]
