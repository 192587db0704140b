"""Difficulty block of a beatmap."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass
class BeatmapDifficulty:
    cs: float = 5.0
    ar: float = 5.0
    od: float = 5.0
    hp: float = 5.0
    slider_multiplier: float = 1.0
    slider_tick_rate: float = 1.0

    def clone(self) -> BeatmapDifficulty:
        return replace(self)
