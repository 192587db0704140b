"""S07: Modifiers that adjust individual hit objects."""

from __future__ import annotations

from beatmapkit.engine.context import ConversionContext
from beatmapkit.engine.registry import Stage, step


@step(
    id="S07",
    stage=Stage.OBJECTS,
    dependencies=["S06"],
    mod_step=True,
    description="Apply hit object modifiers",
)
def apply_hit_object_mods(ctx: ConversionContext) -> None:
    for mod in ctx.mods:
        if mod.is_applicable_to_hit_object():
            for hit_object in ctx.hit_objects:
                mod.apply_to_hit_object(ctx.mode, hit_object)
