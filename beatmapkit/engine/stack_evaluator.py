"""Windowed stacking entry points.

Unlike StackingEngine.post_process, these take an approach rate and use the
single preempt derived from it for every object, and the standard variant
can restack an index window of an already stacked list. When the window
ends before the last object, the forward extension pass runs first.
"""

from __future__ import annotations

from typing import Sequence

from beatmapkit.engine.constants import MODERN_STACKING_FORMAT_VERSION
from beatmapkit.engine.stacking import droid_stack_pass, legacy_stack_pass, modern_stack_pass
from beatmapkit.models.hitobjects import HitObject
from beatmapkit.utils.difficulty_stats import convert_approach_rate_to_milliseconds


class HitObjectStackEvaluator:
    @staticmethod
    def apply_standard_stacking(
        format_version: int,
        hit_objects: Sequence[HitObject],
        ar: float,
        stack_leniency: float,
        start_index: int = 0,
        end_index: int | None = None,
    ) -> None:
        time_preempt = convert_approach_rate_to_milliseconds(ar)

        def preempt_of(_: HitObject) -> float:
            return time_preempt

        if format_version < MODERN_STACKING_FORMAT_VERSION:
            legacy_stack_pass(hit_objects, stack_leniency, preempt_of)
            return

        if end_index is None:
            end_index = len(hit_objects) - 1

        modern_stack_pass(hit_objects, stack_leniency, preempt_of, start_index, end_index)

    @staticmethod
    def apply_droid_stacking(hit_objects: Sequence[HitObject], stack_leniency: float) -> None:
        """Droid stacking that overwrites every height, so no prior reset is needed."""
        droid_stack_pass(hit_objects, stack_leniency, reset_unstacked=True)
