"""Conversion steps. Importing this package registers all nine."""

from beatmapkit.engine.steps import (  # noqa: F401
    s01_clone,
    s02_convert,
    s03_difficulty_mods,
    s04_force_difficulty,
    s05_difficulty_settings_mods,
    s06_defaults,
    s07_hit_object_mods,
    s08_stacking,
    s09_beatmap_mods,
)
