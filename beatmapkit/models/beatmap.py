"""Beatmap: the object list plus the metadata the pipeline consumes."""

from __future__ import annotations

from dataclasses import dataclass, field

from beatmapkit.models.difficulty import BeatmapDifficulty
from beatmapkit.models.hitobjects import HitObject, HitObjectKind
from beatmapkit.models.timing import BeatmapControlPoints


@dataclass
class Beatmap:
    format_version: int = 14
    # 0..1 multiplier on the stacking time window.
    stack_leniency: float = 0.7
    difficulty: BeatmapDifficulty = field(default_factory=BeatmapDifficulty)
    control_points: BeatmapControlPoints = field(default_factory=BeatmapControlPoints)
    hit_objects: list[HitObject] = field(default_factory=list)

    def clone(self) -> Beatmap:
        """Copy with its own difficulty block and object list container.

        Control points are shared; they are never mutated after parsing.
        """
        return Beatmap(
            format_version=self.format_version,
            stack_leniency=self.stack_leniency,
            difficulty=self.difficulty.clone(),
            control_points=self.control_points,
            hit_objects=list(self.hit_objects),
        )

    @property
    def circle_count(self) -> int:
        return sum(1 for h in self.hit_objects if h.kind == HitObjectKind.CIRCLE)

    @property
    def slider_count(self) -> int:
        return sum(1 for h in self.hit_objects if h.kind == HitObjectKind.SLIDER)

    @property
    def spinner_count(self) -> int:
        return sum(1 for h in self.hit_objects if h.kind == HitObjectKind.SPINNER)
