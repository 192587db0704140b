"""Slider: a hit object that follows a path and owns generated nested objects.

Position, path and repeat count are plain fields. After changing any of
them the owner calls ``update_nested_positions()``; the nested list itself
is only rebuilt by ``apply_defaults``, always into a fresh list.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

from beatmapkit.geometry.path import SliderPath
from beatmapkit.geometry.vector import Vector2
from beatmapkit.models.hitobjects.base import HitObject, HitObjectKind, NestedKind
from beatmapkit.models.hitobjects.nested import (
    SliderHead,
    SliderNestedObject,
    SliderRepeat,
    SliderTail,
    SliderTick,
)
from beatmapkit.models.samples import (
    BankHitSampleInfo,
    HitSampleInfo,
    SequenceHitSampleInfo,
    TimedHitSampleInfo,
    clone_sample,
)
from beatmapkit.utils.math_helpers import clamp, fround

if TYPE_CHECKING:
    from beatmapkit.models.difficulty import BeatmapDifficulty
    from beatmapkit.models.modes import GameMode
    from beatmapkit.models.timing import BeatmapControlPoints

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Very lenient cap for tick generation on hand-edited maps with absurd lengths.
MAX_TICK_GENERATION_LENGTH = 100000

# Ticks are not generated closer than this many ms of travel to a span end.
MIN_TICK_CLEARANCE_MS = 10

BASE_NORMAL_SLIDE_SAMPLE = BankHitSampleInfo(name="sliderslide")
BASE_WHISTLE_SLIDE_SAMPLE = BankHitSampleInfo(name="sliderwhistle")
BASE_TICK_SAMPLE = BankHitSampleInfo(name="slidertick")


@dataclass
class Cached(Generic[T]):
    """Memoised value with an explicit valid/stale state."""

    value: T | None = None
    is_valid: bool = False

    def set(self, value: T) -> T:
        self.value = value
        self.is_valid = True
        return value

    def invalidate(self) -> None:
        self.is_valid = False


class Slider(HitObject):
    kind = HitObjectKind.SLIDER

    def __init__(
        self,
        *,
        start_time: float,
        position: Vector2,
        repeat_count: int,
        path: SliderPath,
        node_samples: list[list[HitSampleInfo]] | None = None,
        tick_distance_multiplier: float = 1.0,
        new_combo: bool = False,
        combo_offset: int = 0,
        samples: list[HitSampleInfo] | None = None,
    ) -> None:
        super().__init__(
            start_time=start_time,
            position=position,
            new_combo=new_combo,
            combo_offset=combo_offset,
            samples=samples,
        )
        self.path = path
        self.repeat_count = max(0, repeat_count)
        self.node_samples: list[list[HitSampleInfo]] = [list(n) for n in node_samples or []]
        self.tick_distance_multiplier = tick_distance_multiplier

        # Derived in apply_defaults.
        self.velocity = 0.0
        self.tick_distance = 0.0
        self.generate_ticks = True

        self.nested_objects: list[SliderNestedObject] = []
        self._end_position_cache: Cached[Vector2] = Cached()

    # -- derived geometry -------------------------------------------------

    @property
    def span_count(self) -> int:
        return self.repeat_count + 1

    @property
    def distance(self) -> float:
        return self.path.expected_distance

    @property
    def end_time(self) -> float:
        # Zero velocity means defaults have not been applied yet.
        if self.velocity == 0:
            return self.start_time
        return self.start_time + self.span_count * self.distance / self.velocity

    @property
    def span_duration(self) -> float:
        return self.duration / self.span_count

    @property
    def end_position(self) -> Vector2:
        if self._end_position_cache.is_valid:
            return self._end_position_cache.value
        return self._end_position_cache.set(self.position.add(self.curve_position_at(1)))

    @property
    def head(self) -> SliderHead | None:
        for obj in self.nested_objects:
            if obj.nested_kind == NestedKind.HEAD:
                return obj
        return None

    @property
    def tail(self) -> SliderTail | None:
        for obj in reversed(self.nested_objects):
            if obj.nested_kind == NestedKind.TAIL:
                return obj
        return None

    @property
    def tick_count(self) -> int:
        return sum(1 for obj in self.nested_objects if obj.nested_kind == NestedKind.TICK)

    def curve_position_at(self, progress: float) -> Vector2:
        return self.path.position_at(self.progress_at(progress))

    def progress_at(self, progress: float) -> float:
        """Path progress for an overall slider progress, reversed on backward spans."""
        p = math.fmod(progress * self.span_count, 1)
        if self.span_at(progress) % 2 == 1:
            p = 1 - p
        return p

    def span_at(self, progress: float) -> int:
        return math.floor(progress * self.span_count)

    # -- explicit mutation points ------------------------------------------

    def update_nested_positions(self) -> None:
        """Re-sync the end position, head and tail after position/path/repeat changes."""
        self._end_position_cache.invalidate()

        head = self.head
        if head is not None:
            head.position = self.position
        tail = self.tail
        if tail is not None:
            tail.position = self.end_position

    def set_stack_height(self, value: int) -> None:
        super().set_stack_height(value)
        for obj in self.nested_objects:
            obj.set_stack_height(value)

    def set_scale(self, value: float) -> None:
        super().set_scale(value)
        for obj in self.nested_objects:
            obj.set_scale(value)

    # -- defaults ----------------------------------------------------------

    def apply_defaults(
        self,
        control_points: BeatmapControlPoints,
        difficulty: BeatmapDifficulty,
        mode: GameMode,
    ) -> None:
        super().apply_defaults(control_points, difficulty, mode)

        timing_point = control_points.timing.control_point_at(self.start_time)
        difficulty_point = control_points.difficulty.control_point_at(self.start_time)

        velocity_as_beat_length = -100 / difficulty_point.speed_multiplier
        if velocity_as_beat_length < 0:
            bpm_multiplier = clamp(fround(-velocity_as_beat_length), 10, 1000) / 100
        else:
            bpm_multiplier = 1.0

        self.velocity = 100 * difficulty.slider_multiplier / (timing_point.ms_per_beat * bpm_multiplier)

        # Deliberately not base_scoring_distance * slider_multiplier: the
        # float drift of this form is part of legacy score compatibility.
        scoring_distance = self.velocity * timing_point.ms_per_beat

        self.generate_ticks = difficulty_point.generate_ticks
        if self.generate_ticks:
            self.tick_distance = (
                scoring_distance / difficulty.slider_tick_rate * self.tick_distance_multiplier
            )
        else:
            self.tick_distance = math.inf

        self._create_nested_objects(control_points)

        for obj in self.nested_objects:
            obj.apply_defaults(control_points, difficulty, mode)

    def _create_nested_objects(self, control_points: BeatmapControlPoints) -> None:
        self._end_position_cache.invalidate()

        nested: list[SliderNestedObject] = [
            SliderHead(start_time=self.start_time, position=self.position)
        ]

        length = min(MAX_TICK_GENERATION_LENGTH, self.path.expected_distance)
        tick_distance = clamp(self.tick_distance, 0, length)
        min_distance_from_end = self.velocity * MIN_TICK_CLEARANCE_MS
        span_duration = self.span_duration

        for span in range(self.span_count):
            span_start_time = self.start_time + span * span_duration

            if tick_distance != 0 and self.generate_ticks:
                reversed_span = span % 2 == 1
                ticks: list[SliderTick] = []

                d = tick_distance
                while d <= length:
                    if d >= length - min_distance_from_end:
                        break

                    # Positions always come from the forward path so repeat-span
                    # ticks land exactly on the first-span ones.
                    distance_progress = d / length
                    time_progress = 1 - distance_progress if reversed_span else distance_progress

                    ticks.append(
                        SliderTick(
                            start_time=span_start_time + time_progress * span_duration,
                            position=self.position.add(self.path.position_at(distance_progress)),
                            span_index=span,
                            span_start_time=span_start_time,
                        )
                    )

                    d += tick_distance

                if reversed_span:
                    ticks.reverse()

                nested.extend(ticks)

            if span < self.span_count - 1:
                nested.append(
                    SliderRepeat(
                        start_time=span_start_time + span_duration,
                        position=self.position.add(self.path.position_at((span + 1) % 2)),
                        span_index=span,
                        span_start_time=span_start_time,
                        slider_start_time=self.start_time,
                        slider_span_duration=span_duration,
                    )
                )

        nested.append(
            SliderTail(
                start_time=self.end_time,
                position=self.end_position,
                span_index=self.span_count - 1,
                span_start_time=self.start_time + span_duration * (self.span_count - 1),
                slider_start_time=self.start_time,
                slider_span_duration=span_duration,
            )
        )

        nested.sort(key=lambda obj: obj.start_time)

        for obj in nested:
            obj.set_stack_height(self.stack_height)
            obj.set_scale(self.scale)

        self.nested_objects = nested
        logger.debug("Slider at %.0fms: %d nested objects", self.start_time, len(nested))

        self._update_nested_samples(control_points)

    # -- samples -----------------------------------------------------------

    def apply_samples(self, control_points: BeatmapControlPoints) -> None:
        super().apply_samples(control_points)

        span_duration = self.span_duration
        resolved: list[list[HitSampleInfo]] = []
        for i, node in enumerate(self.node_samples):
            time = self.start_time + i * span_duration + self.CONTROL_POINT_LENIENCY
            point = control_points.sample.control_point_at(time)
            resolved.append([point.apply_to(s) for s in node])
        self.node_samples = resolved

        self._create_sliding_samples(control_points)
        self._update_nested_samples(control_points)

    def _create_sliding_samples(self, control_points: BeatmapControlPoints) -> None:
        bank_samples = [s for s in self.samples if isinstance(s, BankHitSampleInfo)]
        has_normal = any(s.name == BankHitSampleInfo.HIT_NORMAL for s in bank_samples)
        has_whistle = any(s.name == BankHitSampleInfo.HIT_WHISTLE for s in bank_samples)

        auxiliary: list[object] = []

        if has_normal or has_whistle:
            sample_points = control_points.sample.between(
                self.start_time + self.CONTROL_POINT_LENIENCY,
                self.end_time + self.CONTROL_POINT_LENIENCY,
            )

            for present, base in (
                (has_normal, BASE_NORMAL_SLIDE_SAMPLE),
                (has_whistle, BASE_WHISTLE_SLIDE_SAMPLE),
            ):
                if present:
                    auxiliary.append(
                        SequenceHitSampleInfo(
                            tuple(TimedHitSampleInfo(p.time, p.apply_to(base)) for p in sample_points)
                        )
                    )

        self.auxiliary_samples = auxiliary

    def _update_nested_samples(self, control_points: BeatmapControlPoints) -> None:
        # One node per head, repeat and tail.
        while len(self.node_samples) < self.repeat_count + 2:
            self.node_samples.append([clone_sample(s) for s in self.samples])

        for obj in self.nested_objects:
            kind = obj.nested_kind
            if kind == NestedKind.HEAD:
                obj.samples = list(self.node_samples[0])
            elif kind == NestedKind.REPEAT:
                obj.samples = list(self.node_samples[obj.span_index + 1])
            elif kind == NestedKind.TAIL:
                obj.samples = list(self.node_samples[self.span_count])
            elif kind == NestedKind.TICK:
                point = control_points.sample.control_point_at(
                    obj.start_time + self.CONTROL_POINT_LENIENCY
                )
                obj.samples = [point.apply_to(BASE_TICK_SAMPLE)]
            else:
                raise TypeError(f"Unknown nested object kind: {kind}")

    def __repr__(self) -> str:
        return (
            f"Slider(position=[{self.position}], distance={self.path.expected_distance}, "
            f"repeat_count={self.repeat_count}, ticks={self.tick_count})"
        )
