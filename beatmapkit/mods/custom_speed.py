"""Custom playback speed."""

from __future__ import annotations

from pydantic import BaseModel, Field

from beatmapkit.mods.base import Mod


class CustomSpeedSettings(BaseModel):
    track_rate_multiplier: float = Field(default=1.0, ge=0.5, le=2.0)


class ModCustomSpeed(Mod):
    """Changes track rate. Has no pipeline callback of its own; the pipeline
    reads its multiplier and hands it to settings-aware modifiers."""

    acronym = "CS"
    name = "Custom Speed"

    def __init__(self, track_rate_multiplier: float = 1.0) -> None:
        self.settings = CustomSpeedSettings(track_rate_multiplier=track_rate_multiplier)

    @property
    def track_rate_multiplier(self) -> float:
        return self.settings.track_rate_multiplier
