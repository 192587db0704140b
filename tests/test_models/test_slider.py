"""Tests for Slider defaults, nested object generation and samples."""

import math

import pytest

from beatmapkit.geometry.vector import Vector2
from beatmapkit.models.hitobjects import NestedKind
from beatmapkit.models.modes import GameMode
from beatmapkit.models.samples import BankHitSampleInfo, HitSampleInfo, SampleBank

# Fixture slider: 400px at 0.2 px/ms with 100px ticks, starting at 1000ms.


def _kinds(slider):
    return [obj.nested_kind for obj in slider.nested_objects]


def test_velocity_and_tick_distance(make_slider, control_points, difficulty):
    slider = make_slider()
    slider.apply_defaults(control_points, difficulty, GameMode.OSU)

    assert slider.velocity == pytest.approx(0.2)
    assert slider.tick_distance == pytest.approx(100)
    assert slider.end_time == pytest.approx(3000)
    assert slider.span_duration == pytest.approx(2000)


def test_speed_multiplier_scales_velocity(make_slider, make_control_points, difficulty):
    slider = make_slider()
    slider.apply_defaults(make_control_points(speed_multiplier=2.0), difficulty, GameMode.OSU)

    assert slider.velocity == pytest.approx(0.4)
    assert slider.end_time == pytest.approx(2000)


def test_tick_distance_multiplier(make_slider, control_points, difficulty):
    slider = make_slider()
    slider.tick_distance_multiplier = 0.5
    slider.apply_defaults(control_points, difficulty, GameMode.OSU)
    assert slider.tick_distance == pytest.approx(50)


def test_end_time_before_defaults_is_start_time(make_slider):
    assert make_slider().end_time == 1000


def test_single_span_nested_objects(make_slider, control_points, difficulty):
    slider = make_slider()
    slider.apply_defaults(control_points, difficulty, GameMode.OSU)

    assert _kinds(slider) == [
        NestedKind.HEAD,
        NestedKind.TICK,
        NestedKind.TICK,
        NestedKind.TICK,
        NestedKind.TAIL,
    ]
    assert [o.start_time for o in slider.nested_objects] == pytest.approx([1000, 1500, 2000, 2500, 3000])
    assert [o.position.x for o in slider.nested_objects] == pytest.approx([100, 200, 300, 400, 500])
    assert slider.head is slider.nested_objects[0]
    assert slider.tail is slider.nested_objects[-1]
    assert slider.tick_count == 3


def test_repeat_span_ticks_are_reversed(make_slider, control_points, difficulty):
    slider = make_slider(repeat_count=1)
    slider.apply_defaults(control_points, difficulty, GameMode.OSU)

    times = [o.start_time for o in slider.nested_objects]
    assert times == sorted(times)
    assert slider.end_time == pytest.approx(5000)

    repeat = [o for o in slider.nested_objects if o.nested_kind == NestedKind.REPEAT]
    assert len(repeat) == 1
    assert repeat[0].start_time == pytest.approx(3000)
    assert repeat[0].position == Vector2(500, 100)

    second_span_ticks = [
        o for o in slider.nested_objects if o.nested_kind == NestedKind.TICK and o.span_index == 1
    ]
    assert [t.start_time for t in second_span_ticks] == pytest.approx([3500, 4000, 4500])
    assert [t.position.x for t in second_span_ticks] == pytest.approx([400, 300, 200])

    # Even span count ends back at the head.
    assert slider.end_position == Vector2(100, 100)
    assert slider.tail.position == Vector2(100, 100)
    assert slider.tail.span_index == 1


def test_no_ticks_when_control_point_disables_them(make_slider, make_control_points, difficulty):
    slider = make_slider()
    slider.apply_defaults(make_control_points(generate_ticks=False), difficulty, GameMode.OSU)

    assert math.isinf(slider.tick_distance)
    assert _kinds(slider) == [NestedKind.HEAD, NestedKind.TAIL]


def test_no_tick_within_clearance_of_span_end(make_slider, control_points, difficulty):
    # 301px: a tick at 300px is 5ms of travel from the end.
    slider = make_slider(length=301)
    slider.apply_defaults(control_points, difficulty, GameMode.OSU)
    assert slider.tick_count == 2


def test_nested_preempt(make_slider, control_points, difficulty):
    slider = make_slider(repeat_count=1)
    slider.apply_defaults(control_points, difficulty, GameMode.OSU)

    # Head, 3 ticks, repeat, 3 ticks, tail.
    nested = slider.nested_objects
    head, first_tick, repeat, later_tick, tail = nested[0], nested[1], nested[4], nested[5], nested[8]

    # AR5 preempt is 1200ms.
    assert head.time_preempt == pytest.approx(1200)
    # First-span tick: half its distance from the span start plus 0.66 * preempt.
    assert first_tick.time_preempt == pytest.approx(250 + 792)
    # Later-span tick uses a fixed 200ms offset.
    assert later_tick.time_preempt == pytest.approx(250 + 200)
    # First end circle fades in with the head.
    assert repeat.time_preempt == pytest.approx(1200 + 2000)
    assert repeat.time_fade_in == pytest.approx(400)
    # Later end circles appear one span ahead of the previous one.
    assert tail.time_preempt == pytest.approx(4000)
    assert tail.time_fade_in == 0


def test_stack_height_and_scale_cascade(make_slider, control_points, difficulty):
    slider = make_slider(repeat_count=1)
    slider.apply_defaults(control_points, difficulty, GameMode.OSU)

    slider.set_stack_height(2)
    slider.set_scale(0.5)

    assert all(o.stack_height == 2 for o in slider.nested_objects)
    assert all(o.scale == 0.5 for o in slider.nested_objects)
    assert slider.stack_offset == Vector2.splat(2 * 0.5 * -6.4)


def test_nested_objects_take_current_stack_height(make_slider, control_points, difficulty):
    slider = make_slider()
    slider.set_stack_height(3)
    slider.apply_defaults(control_points, difficulty, GameMode.OSU)

    assert all(o.stack_height == 3 for o in slider.nested_objects)
    assert all(o.scale == pytest.approx(slider.scale) for o in slider.nested_objects)


def test_end_position_is_recomputed_after_update(make_slider, control_points, difficulty):
    slider = make_slider()
    slider.apply_defaults(control_points, difficulty, GameMode.OSU)
    assert slider.end_position == Vector2(500, 100)

    slider.position = Vector2(0, 0)
    # Still the memoised value until the owner re-syncs.
    assert slider.end_position == Vector2(500, 100)

    slider.update_nested_positions()
    assert slider.end_position == Vector2(400, 0)
    assert slider.head.position == Vector2(0, 0)
    assert slider.tail.position == Vector2(400, 0)


def test_apply_defaults_rebuilds_nested_list(make_slider, control_points, difficulty):
    slider = make_slider()
    slider.apply_defaults(control_points, difficulty, GameMode.OSU)
    first = slider.nested_objects

    slider.apply_defaults(control_points, difficulty, GameMode.OSU)
    assert slider.nested_objects is not first
    assert len(slider.nested_objects) == len(first)


def test_node_samples_grow_to_cover_every_node(make_slider, control_points, difficulty, hit_samples):
    slider = make_slider(repeat_count=2, samples=hit_samples)
    slider.apply_defaults(control_points, difficulty, GameMode.OSU)

    # Head, two repeats, tail.
    assert len(slider.node_samples) == 4
    assert slider.node_samples[0] == hit_samples
    assert slider.node_samples[0] is not slider.node_samples[1]


def test_apply_samples_resolves_nested_samples(make_slider, control_points, difficulty, hit_samples):
    slider = make_slider(repeat_count=1, samples=hit_samples)
    slider.apply_defaults(control_points, difficulty, GameMode.OSU)
    slider.apply_samples(control_points)

    head = slider.head
    assert [s.name for s in head.samples] == ["hitnormal", "hitwhistle"]
    assert all(s.bank == SampleBank.NORMAL and s.volume == 100 for s in head.samples)

    ticks = [o for o in slider.nested_objects if o.nested_kind == NestedKind.TICK]
    assert ticks
    for tick in ticks:
        assert len(tick.samples) == 1
        assert tick.samples[0].name == "slidertick"
        assert tick.samples[0].bank == SampleBank.NORMAL

    names = [seq.samples[0].sample.name for seq in slider.auxiliary_samples]
    assert names == ["sliderslide", "sliderwhistle"]


def test_unknown_sample_type_raises(make_slider, control_points, difficulty):
    slider = make_slider(samples=[HitSampleInfo(volume=50)])
    with pytest.raises(TypeError):
        slider.apply_defaults(control_points, difficulty, GameMode.OSU)


def test_droid_scale_and_offset(make_slider, control_points, difficulty):
    slider = make_slider()
    slider.apply_defaults(control_points, difficulty, GameMode.DROID)
    slider.set_stack_height(1)

    assert slider.stack_offset == Vector2.splat(slider.scale * 4)
    assert slider.head.stacked_position == slider.position.add(slider.stack_offset)


def test_create_hit_sample_info_follows_normal_sample(make_slider):
    slider = make_slider(samples=[BankHitSampleInfo(name="hitnormal", bank=SampleBank.SOFT, volume=70)])
    info = slider.create_hit_sample_info("spinnerbonus")
    assert info.bank == SampleBank.SOFT
    assert info.volume == 70
