"""StackingEngine: assigns stack heights to near-coincident objects.

Runs after every object's defaults are computed. Holds no state between
calls; every call starts by resetting all stack heights to zero, so running
it twice gives the same result.

The pass implementations are shared with HitObjectStackEvaluator, which
drives them with a uniform preempt instead of each object's own.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Sequence

from beatmapkit.engine.constants import (
    DROID_STACK_TIME_WINDOW,
    MODERN_STACKING_FORMAT_VERSION,
    STACK_DISTANCE,
)
from beatmapkit.models.hitobjects import HitObject, HitObjectKind
from beatmapkit.models.modes import GameMode
from beatmapkit.utils.circle_size import standard_scale_to_droid_scale

logger = logging.getLogger(__name__)

PreemptFn = Callable[[HitObject], float]


def _own_preempt(hit_object: HitObject) -> float:
    return hit_object.time_preempt


def droid_stack_pass(objects: Sequence[HitObject], stack_leniency: float, reset_unstacked: bool) -> None:
    """Single forward pass: object i+1 stacks onto i when close in time and space."""
    if not objects:
        return

    if reset_unstacked:
        objects[0].set_stack_height(0)

    converted_scale = standard_scale_to_droid_scale(objects[0].scale)
    max_distance = math.sqrt(converted_scale)

    for i in range(len(objects) - 1):
        current = objects[i]
        nxt = objects[i + 1]

        if (
            nxt.start_time - current.start_time < DROID_STACK_TIME_WINDOW * stack_leniency
            and nxt.position.distance(current.position) < max_distance
        ):
            nxt.set_stack_height(current.stack_height + 1)
        elif reset_unstacked:
            nxt.set_stack_height(0)


def modern_stack_pass(
    objects: Sequence[HitObject],
    stack_leniency: float,
    preempt_of: PreemptFn,
    start_index: int,
    end_index: int,
) -> None:
    """Two-pass stacking for format version 6 and later."""
    extended_end_index = end_index

    # Forward pass: only needed when restacking a window that ends early.
    if end_index < len(objects) - 1:
        for i in range(end_index, start_index - 1, -1):
            stack_base_index = i

            for n in range(stack_base_index + 1, len(objects)):
                stack_base = objects[stack_base_index]
                if stack_base.kind == HitObjectKind.SPINNER:
                    break

                object_n = objects[n]
                if object_n.kind == HitObjectKind.SPINNER:
                    break

                stack_threshold = preempt_of(object_n) * stack_leniency

                if object_n.start_time - stack_base.end_time > stack_threshold:
                    break

                end_position_close = (
                    stack_base.kind == HitObjectKind.SLIDER
                    and stack_base.end_position.distance(object_n.position) < STACK_DISTANCE
                )

                if stack_base.position.distance(object_n.position) < STACK_DISTANCE or end_position_close:
                    stack_base_index = n
                    # Objects past the window have not been reset yet.
                    object_n.set_stack_height(0)

            if stack_base_index > extended_end_index:
                extended_end_index = stack_base_index
                if extended_end_index == len(objects) - 1:
                    break

    # Reverse pass.
    extended_start_index = start_index

    for i in range(extended_end_index, start_index, -1):
        n = i

        # Objects that already have a stack were handled as part of a later
        # object's chain (two interleaved stacks).
        object_i = objects[i]
        if object_i.stack_height != 0 or object_i.kind == HitObjectKind.SPINNER:
            continue

        stack_threshold = preempt_of(object_i) * stack_leniency

        if object_i.kind == HitObjectKind.CIRCLE:
            # Ends either as a stack of circles only, or circles under a slider.
            n -= 1
            while n >= 0:
                object_n = objects[n]
                if object_n.kind == HitObjectKind.SPINNER:
                    n -= 1
                    continue

                if object_i.start_time - object_n.end_time > stack_threshold:
                    break

                if n < extended_start_index:
                    object_n.set_stack_height(0)
                    extended_start_index = n

                # Circles under the end of the last slider in a pattern stack
                # down and right (negative) instead.
                if (
                    object_n.kind == HitObjectKind.SLIDER
                    and object_n.end_position.distance(object_i.position) < STACK_DISTANCE
                ):
                    offset = object_i.stack_height - object_n.stack_height + 1
                    for j in range(n + 1, i + 1):
                        object_j = objects[j]
                        if object_n.end_position.distance(object_j.position) < STACK_DISTANCE:
                            object_j.set_stack_height(object_j.stack_height - offset)

                    # The slider keeps a zero height and becomes a base in the outer loop.
                    break

                if object_n.position.distance(object_i.position) < STACK_DISTANCE:
                    # Also covers sliders whose heads stack.
                    object_n.set_stack_height(object_i.stack_height + 1)
                    object_i = object_n

                n -= 1

        elif object_i.kind == HitObjectKind.SLIDER:
            # From the first slider in a stack onwards, stacking is always positive.
            n -= 1
            while n >= start_index:
                object_n = objects[n]
                if object_n.kind == HitObjectKind.SPINNER:
                    n -= 1
                    continue

                if object_i.start_time - object_n.start_time > stack_threshold:
                    break

                if object_n.end_position.distance(object_i.position) < STACK_DISTANCE:
                    object_n.set_stack_height(object_i.stack_height + 1)
                    object_i = object_n

                n -= 1

        else:
            raise TypeError(f"Unknown hit object kind: {object_i.kind}")


def legacy_stack_pass(objects: Sequence[HitObject], stack_leniency: float, preempt_of: PreemptFn) -> None:
    """Single forward pass for format versions before 6.

    The time window runs from the current object's end time, while the
    inner objects are compared by start time. This mismatch is legacy
    behaviour and is kept on purpose.
    """
    for i, current in enumerate(objects):
        if current.stack_height != 0 and current.kind != HitObjectKind.SLIDER:
            continue

        start_time = current.end_time
        slider_stack = 0
        stack_threshold = preempt_of(current) * stack_leniency

        for j in range(i + 1, len(objects)):
            other = objects[j]
            if other.start_time - stack_threshold > start_time:
                break

            if other.position.distance(current.position) < STACK_DISTANCE:
                current.set_stack_height(current.stack_height + 1)
                start_time = other.start_time
            elif other.position.distance(current.end_position) < STACK_DISTANCE:
                # Objects on a slider's end are pushed down and right.
                slider_stack += 1
                other.set_stack_height(other.stack_height - slider_stack)
                start_time = other.start_time


class StackingEngine:
    """Post-processing pass that assigns final stack heights."""

    def post_process(
        self,
        objects: Sequence[HitObject],
        mode: GameMode,
        format_version: int,
        stack_leniency: float,
    ) -> None:
        if not objects:
            return

        for hit_object in objects:
            hit_object.set_stack_height(0)

        if mode == GameMode.DROID:
            droid_stack_pass(objects, stack_leniency, reset_unstacked=False)
            variant = "droid"
        elif mode == GameMode.OSU:
            if format_version >= MODERN_STACKING_FORMAT_VERSION:
                modern_stack_pass(objects, stack_leniency, _own_preempt, 0, len(objects) - 1)
                variant = "modern"
            else:
                legacy_stack_pass(objects, stack_leniency, _own_preempt)
                variant = "legacy"
        else:
            raise ValueError(f"Unsupported game mode: {mode}")

        stacked = sum(1 for h in objects if h.stack_height != 0)
        logger.debug(
            "Stacking (%s, v%d): %d/%d objects stacked",
            variant,
            format_version,
            stacked,
            len(objects),
        )
