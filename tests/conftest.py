"""Shared test fixtures."""

from __future__ import annotations

import pytest

from beatmapkit.geometry.approximator import PathType
from beatmapkit.geometry.path import SliderPath
from beatmapkit.geometry.vector import Vector2
from beatmapkit.models.beatmap import Beatmap
from beatmapkit.models.difficulty import BeatmapDifficulty
from beatmapkit.models.hitobjects import Circle, Slider, Spinner
from beatmapkit.models.samples import BankHitSampleInfo
from beatmapkit.models.timing import (
    BeatmapControlPoints,
    ControlPointManager,
    DifficultyControlPoint,
    TimingControlPoint,
)

# 120 BPM
MS_PER_BEAT = 500.0


def _control_points(speed_multiplier: float = 1.0, generate_ticks: bool = True) -> BeatmapControlPoints:
    cp = BeatmapControlPoints()
    cp.timing.add(TimingControlPoint(time=0, ms_per_beat=MS_PER_BEAT))
    cp.difficulty = ControlPointManager(
        DifficultyControlPoint(),
        [DifficultyControlPoint(time=0, speed_multiplier=speed_multiplier, generate_ticks=generate_ticks)],
    )
    return cp


@pytest.fixture
def control_points() -> BeatmapControlPoints:
    return _control_points()


@pytest.fixture
def make_control_points():
    return _control_points


@pytest.fixture
def difficulty() -> BeatmapDifficulty:
    # slider_multiplier 1 at 500ms/beat gives a velocity of 0.2 px/ms.
    return BeatmapDifficulty(cs=4, ar=5, od=8, hp=6, slider_multiplier=1, slider_tick_rate=1)


@pytest.fixture
def make_slider():
    def _make(
        start_time: float = 1000,
        position: Vector2 = Vector2(100, 100),
        length: float = 400,
        repeat_count: int = 0,
        samples: list | None = None,
    ) -> Slider:
        path = SliderPath(PathType.LINEAR, [Vector2(0, 0), Vector2(length, 0)], length)
        return Slider(
            start_time=start_time,
            position=position,
            repeat_count=repeat_count,
            path=path,
            samples=samples,
        )

    return _make


@pytest.fixture
def hit_samples() -> list[BankHitSampleInfo]:
    return [
        BankHitSampleInfo(name=BankHitSampleInfo.HIT_NORMAL),
        BankHitSampleInfo(name=BankHitSampleInfo.HIT_WHISTLE),
    ]


@pytest.fixture
def source_beatmap(make_slider, difficulty, hit_samples) -> Beatmap:
    """Circle, slider, spinner, then two circles stacked on the slider's end."""
    objects = [
        Circle(start_time=0, position=Vector2(256, 100), samples=hit_samples),
        make_slider(start_time=1000, position=Vector2(100, 100), samples=hit_samples),
        Spinner(start_time=4000, end_time=6000),
        Circle(start_time=7000, position=Vector2(300, 300)),
        Circle(start_time=7200, position=Vector2(300, 300)),
    ]
    return Beatmap(
        format_version=14,
        stack_leniency=0.7,
        difficulty=difficulty,
        control_points=_control_points(),
        hit_objects=objects,
    )
