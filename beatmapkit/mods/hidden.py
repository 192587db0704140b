"""Hidden: objects fade in over a shorter portion of their preempt."""

from __future__ import annotations

from beatmapkit.models.beatmap import Beatmap
from beatmapkit.models.hitobjects import HitObject, Slider
from beatmapkit.mods.base import ApplicableToBeatmap, Mod

FADE_IN_DURATION_MULTIPLIER = 0.4


def _apply_fade_in(hit_object: HitObject) -> None:
    hit_object.time_fade_in = hit_object.time_preempt * FADE_IN_DURATION_MULTIPLIER

    if isinstance(hit_object, Slider):
        for nested in hit_object.nested_objects:
            _apply_fade_in(nested)


class ModHidden(Mod, ApplicableToBeatmap):
    acronym = "HD"
    name = "Hidden"

    def apply_to_beatmap(self, beatmap: Beatmap) -> None:
        for hit_object in beatmap.hit_objects:
            _apply_fade_in(hit_object)
