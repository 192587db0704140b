"""S06: Derived defaults for every object (builds slider nested objects)."""

from __future__ import annotations

import logging

from beatmapkit.engine.context import ConversionContext
from beatmapkit.engine.registry import Stage, step

logger = logging.getLogger(__name__)


@step(
    id="S06",
    stage=Stage.OBJECTS,
    dependencies=["S05"],
    description="Compute derived defaults and resolve samples",
)
def apply_defaults(ctx: ConversionContext) -> None:
    beatmap = ctx.converted
    for hit_object in beatmap.hit_objects:
        hit_object.apply_defaults(beatmap.control_points, beatmap.difficulty, ctx.mode)
        if ctx.config.apply_samples:
            hit_object.apply_samples(beatmap.control_points)

    logger.debug(
        "Defaults applied: cs=%.2f ar=%.2f od=%.2f hp=%.2f",
        beatmap.difficulty.cs,
        beatmap.difficulty.ar,
        beatmap.difficulty.od,
        beatmap.difficulty.hp,
    )
