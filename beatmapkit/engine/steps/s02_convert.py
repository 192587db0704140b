"""S02: Re-instantiate every source object as a fresh target-mode object."""

from __future__ import annotations

from beatmapkit.engine.context import ConversionContext
from beatmapkit.engine.converter import BeatmapConverter
from beatmapkit.engine.registry import Stage, step


@step(
    id="S02",
    stage=Stage.PREPARE,
    dependencies=["S01"],
    description="Convert hit objects to the target mode",
)
def convert_hit_objects(ctx: ConversionContext) -> None:
    ctx.converted.hit_objects = BeatmapConverter(ctx.source).convert_hit_objects()
