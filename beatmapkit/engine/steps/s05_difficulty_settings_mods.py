"""S05: Difficulty modifiers that need the full modifier set and speed."""

from __future__ import annotations

from beatmapkit.engine.context import ConversionContext
from beatmapkit.engine.registry import Stage, step


@step(
    id="S05",
    stage=Stage.DIFFICULTY,
    dependencies=["S04"],
    mod_step=True,
    description="Apply settings-aware difficulty modifiers",
)
def apply_difficulty_settings_mods(ctx: ConversionContext) -> None:
    speed = ctx.speed_multiplier
    for mod in ctx.mods:
        if mod.is_applicable_to_difficulty_with_settings():
            mod.apply_to_difficulty_with_settings(ctx.mode, ctx.difficulty, ctx.mods, speed)
