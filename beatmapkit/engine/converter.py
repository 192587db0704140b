"""BeatmapConverter: re-instantiates source objects as fresh target-mode objects."""

from __future__ import annotations

import logging

from beatmapkit.engine.constants import TICK_DISTANCE_FORMAT_VERSION
from beatmapkit.models.beatmap import Beatmap
from beatmapkit.models.hitobjects import Circle, HitObject, HitObjectKind, Slider, Spinner

logger = logging.getLogger(__name__)


class BeatmapConverter:
    def __init__(self, beatmap: Beatmap) -> None:
        self.beatmap = beatmap

    def convert(self) -> Beatmap:
        """Clone the beatmap (including its difficulty block) with converted objects."""
        converted = self.beatmap.clone()
        converted.hit_objects = self.convert_hit_objects()
        return converted

    def convert_hit_objects(self) -> list[HitObject]:
        objects = [self._convert_hit_object(h) for h in self.beatmap.hit_objects]
        logger.debug("Converted %d hit objects", len(objects))
        return objects

    def _convert_hit_object(self, hit_object: HitObject) -> HitObject:
        kind = hit_object.kind

        if kind == HitObjectKind.CIRCLE:
            converted: HitObject = Circle(
                start_time=hit_object.start_time,
                position=hit_object.position,
                new_combo=hit_object.is_new_combo,
                combo_offset=hit_object.combo_offset,
                samples=hit_object.samples,
            )
        elif kind == HitObjectKind.SLIDER:
            converted = Slider(
                start_time=hit_object.start_time,
                position=hit_object.position,
                repeat_count=hit_object.repeat_count,
                path=hit_object.path,
                node_samples=hit_object.node_samples,
                tick_distance_multiplier=self._tick_distance_multiplier(hit_object),
                new_combo=hit_object.is_new_combo,
                combo_offset=hit_object.combo_offset,
                samples=hit_object.samples,
            )
        elif kind == HitObjectKind.SPINNER:
            converted = Spinner(
                start_time=hit_object.start_time,
                end_time=hit_object.end_time,
                new_combo=hit_object.is_new_combo,
                combo_offset=hit_object.combo_offset,
                samples=hit_object.samples,
            )
        else:
            raise TypeError(f"Unknown hit object kind: {kind}")

        converted.auxiliary_samples = list(hit_object.auxiliary_samples)
        return converted

    def _tick_distance_multiplier(self, slider: HitObject) -> float:
        # Before v8, speed multipliers did not change how many ticks fit in the same distance.
        if self.beatmap.format_version < TICK_DISTANCE_FORMAT_VERSION:
            point = self.beatmap.control_points.difficulty.control_point_at(slider.start_time)
            return 1 / point.speed_multiplier
        return 1.0
