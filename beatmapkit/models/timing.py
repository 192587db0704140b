"""Control points and their time-indexed managers.

A control point is active from its time until the next point of the same
kind. Managers answer "which point is active at time T" by binary search
and fall back to a default point when nothing is active yet.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from beatmapkit.models.samples import (
    BankHitSampleInfo,
    FileHitSampleInfo,
    HitSampleInfo,
    SampleBank,
)


@dataclass(frozen=True)
class ControlPoint:
    time: float = 0.0

    def is_redundant(self, existing: ControlPoint) -> bool:
        return False


@dataclass(frozen=True)
class TimingControlPoint(ControlPoint):
    ms_per_beat: float = 1000.0
    time_signature: int = 4

    @property
    def bpm(self) -> float:
        return 60000 / self.ms_per_beat


@dataclass(frozen=True)
class DifficultyControlPoint(ControlPoint):
    speed_multiplier: float = 1.0
    generate_ticks: bool = True

    def is_redundant(self, existing: ControlPoint) -> bool:
        return (
            isinstance(existing, DifficultyControlPoint)
            and self.speed_multiplier == existing.speed_multiplier
            and self.generate_ticks == existing.generate_ticks
        )


@dataclass(frozen=True)
class SampleControlPoint(ControlPoint):
    sample_bank: SampleBank = SampleBank.NORMAL
    sample_volume: int = 100
    custom_sample_bank: int = 0

    def is_redundant(self, existing: ControlPoint) -> bool:
        return (
            isinstance(existing, SampleControlPoint)
            and self.sample_bank == existing.sample_bank
            and self.sample_volume == existing.sample_volume
            and self.custom_sample_bank == existing.custom_sample_bank
        )

    def apply_to(self, sample: HitSampleInfo) -> HitSampleInfo:
        """Fill the sample's unset bank, custom bank and volume from this point."""
        volume = sample.volume if sample.volume > 0 else self.sample_volume

        if isinstance(sample, BankHitSampleInfo):
            return BankHitSampleInfo(
                volume=volume,
                name=sample.name,
                bank=sample.bank if sample.bank != SampleBank.NONE else self.sample_bank,
                custom_sample_bank=(
                    sample.custom_sample_bank
                    if sample.custom_sample_bank > 0
                    else self.custom_sample_bank
                ),
                is_layered=sample.is_layered,
            )
        if isinstance(sample, FileHitSampleInfo):
            return FileHitSampleInfo(volume=volume, filename=sample.filename)
        raise TypeError(f"Unknown type of hit sample info: {type(sample).__name__}")


T = TypeVar("T", bound=ControlPoint)


class ControlPointManager(Generic[T]):
    """Time-sorted list of one kind of control point."""

    def __init__(self, default: T, points: list[T] | None = None) -> None:
        self.default = default
        self.points: list[T] = []
        for point in points or []:
            self.add(point)

    def control_point_at(self, time: float) -> T:
        index = self._index_at(time)
        if index < 0:
            return self.default
        return self.points[index]

    def between(self, start: float, end: float) -> list[T]:
        """The point active at ``start`` followed by every point in ``(start, end]``."""
        if not self.points:
            return [self.default]

        first = max(self._index_at(start), 0)
        result = [self.points[first]]
        for point in self.points[first + 1 :]:
            if point.time > end:
                break
            result.append(point)
        return result

    def add(self, point: T) -> bool:
        """Insert keeping time order. Redundant points are dropped and return False."""
        existing = self.control_point_at(point.time)
        if self.points and point.is_redundant(existing):
            return False

        for i, other in enumerate(self.points):
            if other.time > point.time:
                self.points.insert(i, point)
                return True

        self.points.append(point)
        return True

    def _index_at(self, time: float) -> int:
        points = self.points
        if not points or time < points[0].time:
            return -1

        if time >= points[-1].time:
            return len(points) - 1

        lo = 0
        hi = len(points) - 2
        while lo <= hi:
            pivot = lo + ((hi - lo) >> 1)
            if points[pivot].time < time:
                lo = pivot + 1
            elif points[pivot].time > time:
                hi = pivot - 1
            else:
                return pivot

        return lo - 1

    def __len__(self) -> int:
        return len(self.points)


@dataclass
class BeatmapControlPoints:
    timing: ControlPointManager[TimingControlPoint] = field(
        default_factory=lambda: ControlPointManager(TimingControlPoint())
    )
    difficulty: ControlPointManager[DifficultyControlPoint] = field(
        default_factory=lambda: ControlPointManager(DifficultyControlPoint())
    )
    sample: ControlPointManager[SampleControlPoint] = field(
        default_factory=lambda: ControlPointManager(SampleControlPoint())
    )
