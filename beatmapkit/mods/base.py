"""Modifier base class and the capability interfaces the pipeline calls.

A modifier opts into a pipeline step by inheriting the matching
``ApplicableTo*`` mixin. The pipeline only ever talks to modifiers through
these callbacks, at the step each one belongs to.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from beatmapkit.models.beatmap import Beatmap
    from beatmapkit.models.difficulty import BeatmapDifficulty
    from beatmapkit.models.hitobjects import HitObject
    from beatmapkit.models.modes import GameMode


class Mod:
    acronym: ClassVar[str] = ""
    name: ClassVar[str] = ""

    def is_applicable_to_difficulty(self) -> bool:
        return isinstance(self, ApplicableToDifficulty)

    def is_applicable_to_difficulty_with_settings(self) -> bool:
        return isinstance(self, ApplicableToDifficultyWithSettings)

    def is_applicable_to_hit_object(self) -> bool:
        return isinstance(self, ApplicableToHitObject)

    def is_applicable_to_beatmap(self) -> bool:
        return isinstance(self, ApplicableToBeatmap)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.acronym})"


class ApplicableToDifficulty:
    def apply_to_difficulty(self, mode: GameMode, difficulty: BeatmapDifficulty) -> None:
        raise NotImplementedError


class ApplicableToDifficultyWithSettings:
    def apply_to_difficulty_with_settings(
        self,
        mode: GameMode,
        difficulty: BeatmapDifficulty,
        mods: list[Mod],
        custom_speed_multiplier: float,
    ) -> None:
        raise NotImplementedError


class ApplicableToHitObject:
    def apply_to_hit_object(self, mode: GameMode, hit_object: HitObject) -> None:
        raise NotImplementedError


class ApplicableToBeatmap:
    def apply_to_beatmap(self, beatmap: Beatmap) -> None:
        raise NotImplementedError


def find_mod(mods: list[Mod], mod_type: type) -> Mod | None:
    """First modifier of ``mod_type`` in ``mods``."""
    return next((m for m in mods if isinstance(m, mod_type)), None)
