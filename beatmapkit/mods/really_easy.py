"""ReallyEasy (droid only): eases every statistic not forced by DifficultyAdjust."""

from __future__ import annotations

from beatmapkit.models.difficulty import BeatmapDifficulty
from beatmapkit.models.modes import GameMode
from beatmapkit.mods.base import ApplicableToDifficultyWithSettings, Mod, find_mod
from beatmapkit.mods.difficulty_adjust import ModDifficultyAdjust
from beatmapkit.mods.easy import ModEasy
from beatmapkit.utils.circle_size import droid_cs_to_droid_scale, droid_scale_to_droid_cs


class ModReallyEasy(Mod, ApplicableToDifficultyWithSettings):
    acronym = "RE"
    name = "ReallyEasy"

    def apply_to_difficulty_with_settings(
        self,
        mode: GameMode,
        difficulty: BeatmapDifficulty,
        mods: list[Mod],
        custom_speed_multiplier: float,
    ) -> None:
        if mode != GameMode.DROID:
            return

        adjust = find_mod(mods, ModDifficultyAdjust)

        if adjust is None or adjust.ar is None:
            if find_mod(mods, ModEasy) is not None:
                difficulty.ar *= 2
                difficulty.ar -= 0.5

            difficulty.ar -= 0.5
            difficulty.ar -= custom_speed_multiplier - 1

        if adjust is None or adjust.cs is None:
            scale = droid_cs_to_droid_scale(difficulty.cs)
            difficulty.cs = droid_scale_to_droid_cs(scale + 0.125)

        if adjust is None or adjust.od is None:
            difficulty.od /= 2

        if adjust is None or adjust.hp is None:
            difficulty.hp /= 2
