"""Tests for BeatmapConverter."""

import pytest

from beatmapkit.engine.converter import BeatmapConverter
from beatmapkit.geometry.vector import Vector2
from beatmapkit.models.beatmap import Beatmap
from beatmapkit.models.hitobjects import HitObject, HitObjectKind


def test_convert_creates_fresh_objects(source_beatmap):
    converted = BeatmapConverter(source_beatmap).convert()

    assert converted is not source_beatmap
    assert converted.difficulty is not source_beatmap.difficulty
    assert [h.kind for h in converted.hit_objects] == [h.kind for h in source_beatmap.hit_objects]
    for new, old in zip(converted.hit_objects, source_beatmap.hit_objects):
        assert new is not old
        assert new.start_time == old.start_time
        assert new.position == old.position
        assert new.samples == old.samples
    assert converted.slider_count == 1
    assert converted.spinner_count == 1
    assert converted.circle_count == 3


def test_spinner_keeps_auxiliary_samples(source_beatmap):
    converted = BeatmapConverter(source_beatmap).convert()
    spinner = converted.hit_objects[2]
    assert spinner.kind == HitObjectKind.SPINNER
    assert [s.name for s in spinner.auxiliary_samples] == ["spinnerbonus"]
    assert spinner.end_time == 6000


@pytest.mark.parametrize(("format_version", "expected"), [(7, 0.5), (8, 1.0), (14, 1.0)])
def test_tick_distance_multiplier(format_version, expected, make_slider, make_control_points):
    beatmap = Beatmap(
        format_version=format_version,
        control_points=make_control_points(speed_multiplier=2.0),
        hit_objects=[make_slider()],
    )
    slider = BeatmapConverter(beatmap).convert_hit_objects()[0]
    assert slider.tick_distance_multiplier == pytest.approx(expected)


def test_unknown_kind_rejected():
    class Unknown(HitObject):
        kind = None

    beatmap = Beatmap(hit_objects=[Unknown(start_time=0, position=Vector2(0, 0))])
    with pytest.raises(TypeError):
        BeatmapConverter(beatmap).convert()
