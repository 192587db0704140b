"""S04: Re-apply the force-difficulty modifier so forced values win."""

from __future__ import annotations

from beatmapkit.engine.context import ConversionContext
from beatmapkit.engine.registry import Stage, step
from beatmapkit.mods.base import find_mod
from beatmapkit.mods.difficulty_adjust import ModDifficultyAdjust


@step(
    id="S04",
    stage=Stage.DIFFICULTY,
    dependencies=["S03"],
    mod_step=True,
    description="Re-apply forced difficulty statistics",
)
def apply_forced_difficulty(ctx: ConversionContext) -> None:
    adjust = find_mod(ctx.mods, ModDifficultyAdjust)
    if adjust is not None:
        adjust.apply_to_difficulty(ctx.mode, ctx.difficulty)
