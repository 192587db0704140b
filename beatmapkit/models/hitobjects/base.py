"""HitObject base class and the closed set of object kinds.

Stack height and scale are read through properties but only changed through
``set_stack_height`` / ``set_scale``, so every cascading mutation is an
explicit call at the owner's side.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, ClassVar

from beatmapkit.geometry.vector import Vector2
from beatmapkit.models.modes import GameMode
from beatmapkit.models.samples import BankHitSampleInfo, HitSampleInfo, SampleBank
from beatmapkit.utils.circle_size import droid_cs_to_droid_scale, standard_cs_to_standard_scale
from beatmapkit.utils.difficulty_stats import AR10_MS, convert_approach_rate_to_milliseconds

if TYPE_CHECKING:
    from beatmapkit.models.difficulty import BeatmapDifficulty
    from beatmapkit.models.timing import BeatmapControlPoints


class HitObjectKind(enum.Enum):
    CIRCLE = "circle"
    SLIDER = "slider"
    SPINNER = "spinner"


class NestedKind(enum.Enum):
    HEAD = "head"
    TICK = "tick"
    REPEAT = "repeat"
    TAIL = "tail"


DROID_STACK_OFFSET_MULTIPLIER = 4.0
OSU_STACK_OFFSET_MULTIPLIER = -6.4


class HitObject:
    BASE_RADIUS: ClassVar[float] = 64
    CONTROL_POINT_LENIENCY: ClassVar[float] = 1

    kind: ClassVar[HitObjectKind]

    def __init__(
        self,
        *,
        start_time: float,
        position: Vector2,
        end_time: float | None = None,
        end_position: Vector2 | None = None,
        new_combo: bool = False,
        combo_offset: int = 0,
        samples: list[HitSampleInfo] | None = None,
    ) -> None:
        self.start_time = start_time
        self.position = position
        self._end_time = end_time if end_time is not None else start_time
        self._end_position = end_position
        self.is_new_combo = new_combo
        self.combo_offset = combo_offset
        self.samples: list[HitSampleInfo] = list(samples or [])
        self.auxiliary_samples: list[object] = []

        self.time_preempt = 600.0
        self.time_fade_in = 400.0

        self._stack_height = 0
        self._scale = 1.0
        # Set by apply_defaults once the game mode is known.
        self._stack_offset_multiplier = 0.0

    @property
    def end_time(self) -> float:
        return self._end_time

    @property
    def end_position(self) -> Vector2:
        return self._end_position if self._end_position is not None else self.position

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time

    @property
    def stack_height(self) -> int:
        return self._stack_height

    def set_stack_height(self, value: int) -> None:
        self._stack_height = value

    @property
    def scale(self) -> float:
        return self._scale

    def set_scale(self, value: float) -> None:
        self._scale = value

    @property
    def radius(self) -> float:
        return self.BASE_RADIUS * self._scale

    @property
    def stack_offset(self) -> Vector2:
        return Vector2.splat(self._stack_height * self._scale * self._stack_offset_multiplier)

    @property
    def stacked_position(self) -> Vector2:
        return self.position.add(self.stack_offset)

    @property
    def stacked_end_position(self) -> Vector2:
        return self.end_position.add(self.stack_offset)

    def apply_defaults(
        self,
        control_points: BeatmapControlPoints,
        difficulty: BeatmapDifficulty,
        mode: GameMode,
    ) -> None:
        """Derive preempt, fade-in, scale and stack offset from the final difficulty."""
        self.time_preempt = convert_approach_rate_to_milliseconds(difficulty.ar)

        # AR above 10 shortens preempt below AR10_MS; keep fade-in proportional there.
        self.time_fade_in = 400 * min(1.0, self.time_preempt / AR10_MS)

        if mode == GameMode.DROID:
            self.set_scale(droid_cs_to_droid_scale(difficulty.cs))
            self._stack_offset_multiplier = DROID_STACK_OFFSET_MULTIPLIER
        elif mode == GameMode.OSU:
            self.set_scale(standard_cs_to_standard_scale(difficulty.cs))
            self._stack_offset_multiplier = OSU_STACK_OFFSET_MULTIPLIER
        else:
            raise ValueError(f"Unsupported game mode: {mode}")

    def apply_samples(self, control_points: BeatmapControlPoints) -> None:
        point = control_points.sample.control_point_at(self.end_time + self.CONTROL_POINT_LENIENCY)
        self.samples = [point.apply_to(s) for s in self.samples]

    def create_hit_sample_info(self, sample_name: str) -> BankHitSampleInfo:
        """Bank sample named ``sample_name`` that follows this object's hitnormal sample."""
        for s in self.samples:
            if isinstance(s, BankHitSampleInfo) and s.name == BankHitSampleInfo.HIT_NORMAL:
                return BankHitSampleInfo(
                    volume=s.volume,
                    name=sample_name,
                    bank=s.bank,
                    custom_sample_bank=s.custom_sample_bank,
                )
        return BankHitSampleInfo(name=sample_name, bank=SampleBank.NONE)
