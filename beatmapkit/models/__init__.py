"""Beatmap data model."""

from beatmapkit.models.beatmap import Beatmap
from beatmapkit.models.difficulty import BeatmapDifficulty
from beatmapkit.models.modes import GameMode
from beatmapkit.models.timing import (
    BeatmapControlPoints,
    ControlPointManager,
    DifficultyControlPoint,
    SampleControlPoint,
    TimingControlPoint,
)

__all__ = [
    "Beatmap",
    "BeatmapDifficulty",
    "GameMode",
    "BeatmapControlPoints",
    "ControlPointManager",
    "DifficultyControlPoint",
    "SampleControlPoint",
    "TimingControlPoint",
]
