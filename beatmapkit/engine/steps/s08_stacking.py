"""S08: Stacking post-process for the active mode and format version."""

from __future__ import annotations

from beatmapkit.engine.context import ConversionContext
from beatmapkit.engine.registry import Stage, step
from beatmapkit.engine.stacking import StackingEngine


@step(
    id="S08",
    stage=Stage.POST_PROCESS,
    dependencies=["S07"],
    description="Assign stack heights",
)
def apply_stacking(ctx: ConversionContext) -> None:
    beatmap = ctx.converted
    StackingEngine().post_process(
        beatmap.hit_objects,
        ctx.mode,
        beatmap.format_version,
        beatmap.stack_leniency,
    )
