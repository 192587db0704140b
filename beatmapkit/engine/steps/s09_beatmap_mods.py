"""S09: Modifiers that reshape the finished beatmap. Runs last."""

from __future__ import annotations

from beatmapkit.engine.context import ConversionContext
from beatmapkit.engine.registry import Stage, step


@step(
    id="S09",
    stage=Stage.POST_PROCESS,
    dependencies=["S08"],
    mod_step=True,
    description="Apply beatmap modifiers",
)
def apply_beatmap_mods(ctx: ConversionContext) -> None:
    for mod in ctx.mods:
        if mod.is_applicable_to_beatmap():
            mod.apply_to_beatmap(ctx.converted)
