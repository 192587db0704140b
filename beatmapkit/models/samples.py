"""Hit sample value objects.

Samples are immutable; resolving one against a control point produces a
new instance.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class SampleBank(enum.IntEnum):
    NONE = 0
    NORMAL = 1
    SOFT = 2
    DRUM = 3


@dataclass(frozen=True)
class HitSampleInfo:
    volume: int = 0


@dataclass(frozen=True)
class BankHitSampleInfo(HitSampleInfo):
    HIT_WHISTLE = "hitwhistle"
    HIT_FINISH = "hitfinish"
    HIT_NORMAL = "hitnormal"
    HIT_CLAP = "hitclap"

    name: str = ""
    bank: SampleBank = SampleBank.NONE
    custom_sample_bank: int = 0
    is_layered: bool = False

    @property
    def lookup_names(self) -> list[str]:
        prefix = "" if self.bank == SampleBank.NONE else self.bank.name.lower()
        names: list[str] = []
        if self.custom_sample_bank >= 2:
            names.append(f"{prefix}-{self.name}{self.custom_sample_bank}")
        names.append(f"{prefix}-{self.name}")
        names.append(self.name)
        return names


@dataclass(frozen=True)
class FileHitSampleInfo(HitSampleInfo):
    filename: str = ""

    @property
    def lookup_names(self) -> list[str]:
        return [self.filename]


@dataclass(frozen=True)
class TimedHitSampleInfo:
    time: float
    sample: HitSampleInfo


@dataclass(frozen=True)
class SequenceHitSampleInfo:
    """A looping sample whose source changes over time (e.g. slider body sounds)."""

    samples: tuple[TimedHitSampleInfo, ...] = ()

    @property
    def is_empty(self) -> bool:
        return len(self.samples) == 0

    def sample_at(self, time: float) -> TimedHitSampleInfo | None:
        if self.is_empty or time < self.samples[0].time:
            return None

        last = self.samples[-1]
        if time >= last.time:
            return last

        lo = 0
        hi = len(self.samples) - 2
        while lo <= hi:
            pivot = lo + ((hi - lo) >> 1)
            sample = self.samples[pivot]
            if sample.time < time:
                lo = pivot + 1
            elif sample.time > time:
                hi = pivot - 1
            else:
                return sample

        return self.samples[lo - 1]


def clone_sample(sample: HitSampleInfo) -> HitSampleInfo:
    """Copy a playable sample. Only bank and file samples are playable."""
    if isinstance(sample, BankHitSampleInfo):
        return BankHitSampleInfo(
            volume=sample.volume,
            name=sample.name,
            bank=sample.bank,
            custom_sample_bank=sample.custom_sample_bank,
            is_layered=sample.is_layered,
        )
    if isinstance(sample, FileHitSampleInfo):
        return FileHitSampleInfo(volume=sample.volume, filename=sample.filename)
    raise TypeError(f"Unknown type of hit sample info: {type(sample).__name__}")
