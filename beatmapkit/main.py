"""Entry point: logging bootstrap and one-call beatmap conversion."""

from __future__ import annotations

import logging

from beatmapkit.config import settings
from beatmapkit.engine.config import PipelineConfig
from beatmapkit.engine.context import ConversionContext
from beatmapkit.engine.pipeline import create_pipeline
from beatmapkit.models.beatmap import Beatmap
from beatmapkit.models.modes import GameMode
from beatmapkit.mods.base import Mod

logging.basicConfig(
    level=getattr(logging, settings.beatmapkit_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def convert(
    beatmap: Beatmap,
    mode: GameMode | None = None,
    mods: list[Mod] | None = None,
    custom_speed_multiplier: float | None = None,
    config: PipelineConfig | None = None,
) -> Beatmap:
    """Turn a parsed beatmap into a fully resolved, playable one.

    The source beatmap is left untouched.
    """
    ctx = ConversionContext(
        source=beatmap,
        mode=mode or settings.default_mode,
        mods=list(mods or []),
        custom_speed_multiplier=custom_speed_multiplier,
    )
    create_pipeline(config).run(ctx)
    return ctx.converted
