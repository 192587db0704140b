"""HardRock: smaller circles, higher AR/OD/HP, all capped at 10."""

from __future__ import annotations

from beatmapkit.models.difficulty import BeatmapDifficulty
from beatmapkit.models.modes import GameMode
from beatmapkit.mods.base import ApplicableToDifficulty, Mod
from beatmapkit.utils.circle_size import droid_cs_to_droid_scale, droid_scale_to_droid_cs

DROID_SCALE_DELTA = 0.125
STAT_RATIO = 1.4
# Circle size uses its own ratio in osu mode.
CS_RATIO = 1.3


def _adjust(value: float, ratio: float = STAT_RATIO) -> float:
    return min(value * ratio, 10)


class ModHardRock(Mod, ApplicableToDifficulty):
    acronym = "HR"
    name = "HardRock"

    def apply_to_difficulty(self, mode: GameMode, difficulty: BeatmapDifficulty) -> None:
        if mode == GameMode.DROID:
            scale = droid_cs_to_droid_scale(difficulty.cs)
            difficulty.cs = droid_scale_to_droid_cs(scale - DROID_SCALE_DELTA)
        else:
            difficulty.cs = _adjust(difficulty.cs, CS_RATIO)

        difficulty.ar = _adjust(difficulty.ar)
        difficulty.od = _adjust(difficulty.od)
        difficulty.hp = _adjust(difficulty.hp)
