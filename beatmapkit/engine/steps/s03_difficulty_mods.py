"""S03: Modifiers that adjust the difficulty block."""

from __future__ import annotations

from beatmapkit.engine.context import ConversionContext
from beatmapkit.engine.registry import Stage, step


@step(
    id="S03",
    stage=Stage.DIFFICULTY,
    dependencies=["S02"],
    mod_step=True,
    description="Apply difficulty modifiers",
)
def apply_difficulty_mods(ctx: ConversionContext) -> None:
    for mod in ctx.mods:
        if mod.is_applicable_to_difficulty():
            mod.apply_to_difficulty(ctx.mode, ctx.difficulty)
