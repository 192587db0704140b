"""ConversionContext: the single mutable state object flowing through all steps."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from beatmapkit.engine.config import PipelineConfig
from beatmapkit.models.beatmap import Beatmap
from beatmapkit.models.modes import GameMode
from beatmapkit.mods.base import Mod, find_mod
from beatmapkit.mods.custom_speed import ModCustomSpeed

if TYPE_CHECKING:
    from beatmapkit.models.difficulty import BeatmapDifficulty
    from beatmapkit.models.hitobjects import HitObject


@dataclass
class ConversionContext:
    """Shared state for one beatmap conversion."""

    # Parsed source beatmap. Never mutated.
    source: Beatmap
    mode: GameMode = GameMode.OSU
    mods: list[Mod] = field(default_factory=list)
    # Overrides the multiplier of a ModCustomSpeed in ``mods`` when set.
    custom_speed_multiplier: float | None = None
    config: PipelineConfig = field(default_factory=PipelineConfig)

    # Output of step 1; every later step works on this copy.
    beatmap: Beatmap | None = None

    # Pipeline bookkeeping
    completed_steps: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)
    step_timings_ms: dict[str, float] = field(default_factory=dict)

    @property
    def converted(self) -> Beatmap:
        if self.beatmap is None:
            raise ValueError("Beatmap has not been cloned yet")
        return self.beatmap

    @property
    def difficulty(self) -> BeatmapDifficulty:
        return self.converted.difficulty

    @property
    def hit_objects(self) -> list[HitObject]:
        return self.converted.hit_objects

    @property
    def speed_multiplier(self) -> float:
        if self.custom_speed_multiplier is not None:
            return self.custom_speed_multiplier
        custom_speed = find_mod(self.mods, ModCustomSpeed)
        if custom_speed is not None:
            return custom_speed.track_rate_multiplier
        return 1.0
