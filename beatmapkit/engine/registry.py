"""Step registry: every conversion step is a standalone function registered via decorator.

Usage:
    @step(id="S08", stage=Stage.POST_PROCESS, dependencies=["S07"])
    def stacking(ctx: ConversionContext) -> None:
        StackingEngine().post_process(ctx.hit_objects, ...)

Step order is load-bearing, so every step depends on the one before it and
the resolved order is a single chain.
"""

from __future__ import annotations

import enum
import heapq
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from beatmapkit.engine.context import ConversionContext

logger = logging.getLogger(__name__)


class Stage(enum.IntEnum):
    PREPARE = 0
    DIFFICULTY = 1
    OBJECTS = 2
    POST_PROCESS = 3


@dataclass
class StepSpec:
    id: str
    stage: Stage
    fn: Callable[["ConversionContext"], None]
    dependencies: list[str] = field(default_factory=list)
    # Steps that only dispatch modifier callbacks.
    mod_step: bool = False
    description: str = ""


class StepRegistry:
    """Registry of conversion steps."""

    def __init__(self) -> None:
        self._steps: dict[str, StepSpec] = {}

    def register(self, spec: StepSpec) -> None:
        if spec.id in self._steps:
            raise ValueError(f"Duplicate step ID: {spec.id}")
        self._steps[spec.id] = spec
        logger.debug("Registered step %s (%s)", spec.id, spec.stage.name)

    def get(self, step_id: str) -> StepSpec:
        return self._steps[step_id]

    def get_stage(self, stage: Stage) -> list[StepSpec]:
        return [s for s in self.resolve_order() if s.stage == stage]

    def all(self) -> list[StepSpec]:
        return sorted(self._steps.values(), key=lambda s: (s.stage, s.id))

    def resolve_order(self) -> list[StepSpec]:
        """Dependency order. Among ready steps, earlier stages run first, then lower IDs.

        A step may only depend on steps of its own or an earlier stage.
        """
        pool = self._steps
        dependents: dict[str, list[str]] = {sid: [] for sid in pool}

        for spec in pool.values():
            missing = [d for d in spec.dependencies if d not in pool]
            if missing:
                raise ValueError(f"Step {spec.id} depends on unknown steps: {missing}")
            for dep in spec.dependencies:
                if pool[dep].stage > spec.stage:
                    raise ValueError(
                        f"Step {spec.id} ({spec.stage.name}) depends on later-stage step "
                        f"{dep} ({pool[dep].stage.name})"
                    )
                dependents[dep].append(spec.id)

        pending = {sid: len(spec.dependencies) for sid, spec in pool.items()}
        ready = [(spec.stage, sid) for sid, spec in pool.items() if not spec.dependencies]
        heapq.heapify(ready)
        ordered: list[StepSpec] = []

        while ready:
            _, sid = heapq.heappop(ready)
            ordered.append(pool[sid])
            for other_id in dependents[sid]:
                pending[other_id] -= 1
                if pending[other_id] == 0:
                    heapq.heappush(ready, (pool[other_id].stage, other_id))

        if len(ordered) != len(pool):
            remaining = set(pool) - {s.id for s in ordered}
            raise ValueError(f"Circular dependency detected among: {remaining}")

        return ordered

    @property
    def count(self) -> int:
        return len(self._steps)


# Module-level singleton
_registry = StepRegistry()


def get_registry() -> StepRegistry:
    return _registry


def step(
    *,
    id: str,
    stage: Stage,
    dependencies: list[str] | None = None,
    mod_step: bool = False,
    description: str = "",
):
    """Decorator to register a conversion step."""

    def decorator(fn: Callable[["ConversionContext"], None]):
        _registry.register(
            StepSpec(
                id=id,
                stage=stage,
                fn=fn,
                dependencies=dependencies or [],
                mod_step=mod_step,
                description=description,
            )
        )
        return fn

    return decorator
