"""Force difficulty statistics to fixed values."""

from __future__ import annotations

from pydantic import BaseModel, Field

from beatmapkit.models.difficulty import BeatmapDifficulty
from beatmapkit.models.modes import GameMode
from beatmapkit.mods.base import ApplicableToDifficulty, Mod


class DifficultyAdjustSettings(BaseModel):
    cs: float | None = Field(default=None, ge=0, le=15, description="Forced circle size")
    ar: float | None = Field(default=None, ge=0, le=11, description="Forced approach rate")
    od: float | None = Field(default=None, ge=0, le=11, description="Forced overall difficulty")
    hp: float | None = Field(default=None, ge=0, le=11, description="Forced drain rate")


class ModDifficultyAdjust(Mod, ApplicableToDifficulty):
    """Overrides whichever statistics are set.

    The pipeline runs this once more after every other difficulty modifier,
    so forced values always win.
    """

    acronym = "DA"
    name = "Difficulty Adjust"

    def __init__(
        self,
        cs: float | None = None,
        ar: float | None = None,
        od: float | None = None,
        hp: float | None = None,
    ) -> None:
        self.settings = DifficultyAdjustSettings(cs=cs, ar=ar, od=od, hp=hp)

    @property
    def cs(self) -> float | None:
        return self.settings.cs

    @property
    def ar(self) -> float | None:
        return self.settings.ar

    @property
    def od(self) -> float | None:
        return self.settings.od

    @property
    def hp(self) -> float | None:
        return self.settings.hp

    def apply_to_difficulty(self, mode: GameMode, difficulty: BeatmapDifficulty) -> None:
        if self.cs is not None:
            difficulty.cs = self.cs
        if self.ar is not None:
            difficulty.ar = self.ar
        if self.od is not None:
            difficulty.od = self.od
        if self.hp is not None:
            difficulty.hp = self.hp
