"""S01: Clone the source beatmap and its difficulty block."""

from __future__ import annotations

from beatmapkit.engine.context import ConversionContext
from beatmapkit.engine.registry import Stage, step


@step(id="S01", stage=Stage.PREPARE, description="Clone source beatmap and difficulty")
def clone_beatmap(ctx: ConversionContext) -> None:
    ctx.beatmap = ctx.source.clone()
