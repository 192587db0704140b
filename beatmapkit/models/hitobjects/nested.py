"""Objects generated along a slider: head, ticks, repeats and tail."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from beatmapkit.geometry.vector import Vector2
from beatmapkit.models.hitobjects.base import HitObject, NestedKind

if TYPE_CHECKING:
    from beatmapkit.models.difficulty import BeatmapDifficulty
    from beatmapkit.models.modes import GameMode
    from beatmapkit.models.timing import BeatmapControlPoints


class SliderNestedObject(HitObject):
    nested_kind: ClassVar[NestedKind]

    def __init__(
        self,
        *,
        start_time: float,
        position: Vector2,
        span_index: int,
        span_start_time: float,
    ) -> None:
        super().__init__(start_time=start_time, position=position)
        self.span_index = span_index
        self.span_start_time = span_start_time

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(start_time={self.start_time}, "
            f"position=[{self.position}], span={self.span_index})"
        )


class SliderHead(SliderNestedObject):
    nested_kind = NestedKind.HEAD

    def __init__(self, *, start_time: float, position: Vector2) -> None:
        super().__init__(
            start_time=start_time,
            position=position,
            span_index=0,
            span_start_time=start_time,
        )


class SliderTick(SliderNestedObject):
    nested_kind = NestedKind.TICK

    def apply_defaults(
        self,
        control_points: BeatmapControlPoints,
        difficulty: BeatmapDifficulty,
        mode: GameMode,
    ) -> None:
        super().apply_defaults(control_points, difficulty, mode)

        offset = 200 if self.span_index > 0 else self.time_preempt * 0.66
        self.time_preempt = (self.start_time - self.span_start_time) / 2 + offset


class SliderEndCircle(SliderNestedObject):
    """Repeat or tail circle. Appears relative to the parent slider's spans."""

    def __init__(
        self,
        *,
        start_time: float,
        position: Vector2,
        span_index: int,
        span_start_time: float,
        slider_start_time: float,
        slider_span_duration: float,
    ) -> None:
        super().__init__(
            start_time=start_time,
            position=position,
            span_index=span_index,
            span_start_time=span_start_time,
        )
        self.slider_start_time = slider_start_time
        self.slider_span_duration = slider_span_duration

    def apply_defaults(
        self,
        control_points: BeatmapControlPoints,
        difficulty: BeatmapDifficulty,
        mode: GameMode,
    ) -> None:
        super().apply_defaults(control_points, difficulty, mode)

        if self.span_index > 0:
            # Later end circles show up behind the still-visible one and only
            # appear once the previous circle on the same end is hit.
            self.time_fade_in = 0
            self.time_preempt = self.slider_span_duration * 2
        else:
            # The first end circle fades in with the slider head.
            self.time_preempt += self.start_time - self.slider_start_time


class SliderRepeat(SliderEndCircle):
    nested_kind = NestedKind.REPEAT


class SliderTail(SliderEndCircle):
    nested_kind = NestedKind.TAIL
