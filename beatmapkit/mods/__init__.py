"""Modifiers and the capability interfaces the conversion pipeline calls."""

from beatmapkit.mods.base import (
    ApplicableToBeatmap,
    ApplicableToDifficulty,
    ApplicableToDifficultyWithSettings,
    ApplicableToHitObject,
    Mod,
    find_mod,
)
from beatmapkit.mods.custom_speed import ModCustomSpeed
from beatmapkit.mods.difficulty_adjust import ModDifficultyAdjust
from beatmapkit.mods.easy import ModEasy
from beatmapkit.mods.hard_rock import ModHardRock
from beatmapkit.mods.hidden import ModHidden
from beatmapkit.mods.mirror import Axes, ModMirror
from beatmapkit.mods.really_easy import ModReallyEasy

__all__ = [
    "ApplicableToBeatmap",
    "ApplicableToDifficulty",
    "ApplicableToDifficultyWithSettings",
    "ApplicableToHitObject",
    "Mod",
    "find_mod",
    "Axes",
    "ModCustomSpeed",
    "ModDifficultyAdjust",
    "ModEasy",
    "ModHardRock",
    "ModHidden",
    "ModMirror",
    "ModReallyEasy",
]
