"""Game modes supported by the conversion pipeline."""

from __future__ import annotations

import enum


class GameMode(str, enum.Enum):
    DROID = "droid"
    OSU = "osu"
