"""Easy: larger circles, lower AR/OD/HP."""

from __future__ import annotations

from beatmapkit.models.difficulty import BeatmapDifficulty
from beatmapkit.models.modes import GameMode
from beatmapkit.mods.base import ApplicableToDifficulty, Mod
from beatmapkit.utils.circle_size import droid_cs_to_droid_scale, droid_scale_to_droid_cs

DROID_SCALE_DELTA = 0.125


class ModEasy(Mod, ApplicableToDifficulty):
    acronym = "EZ"
    name = "Easy"

    def apply_to_difficulty(self, mode: GameMode, difficulty: BeatmapDifficulty) -> None:
        if mode == GameMode.DROID:
            scale = droid_cs_to_droid_scale(difficulty.cs)
            difficulty.cs = droid_scale_to_droid_cs(scale + DROID_SCALE_DELTA)
        else:
            difficulty.cs /= 2

        difficulty.ar /= 2
        difficulty.od /= 2
        difficulty.hp /= 2
