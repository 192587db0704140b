"""Pipeline orchestrator: runs the conversion steps in their fixed order."""

from __future__ import annotations

import logging
import time

from beatmapkit.engine.config import PipelineConfig
from beatmapkit.engine.context import ConversionContext
from beatmapkit.engine.registry import Stage, StepRegistry, StepSpec, get_registry

logger = logging.getLogger(__name__)


class ConversionPipeline:
    """Orchestrates the conversion steps."""

    def __init__(
        self,
        registry: StepRegistry | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        if registry is None:
            # Importing the steps package registers every step.
            import beatmapkit.engine.steps  # noqa: F401

            registry = get_registry()
        self.registry = registry
        self.config = config or PipelineConfig()

    def run(self, ctx: ConversionContext) -> ConversionContext:
        """Run every step on the given context.

        A failing step is recorded on the context and re-raised; later steps
        read its results, so the run never continues past it.
        """
        start = time.perf_counter()
        ctx.config = self.config

        skip_ids = self._gate(ctx)
        ordered = [s for s in self.registry.resolve_order() if s.id not in skip_ids]

        logger.info(
            "Pipeline: %d steps queued (%d skipped), %d mods, mode=%s",
            len(ordered),
            len(skip_ids),
            len(ctx.mods),
            ctx.mode.value,
        )

        for spec in ordered:
            self._run_step(spec, ctx)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d steps in %.0fms",
            len(ctx.completed_steps),
            len(ordered),
            total,
        )
        return ctx

    def run_stage(self, ctx: ConversionContext, stage: Stage) -> ConversionContext:
        """Run only the steps of one stage, in order."""
        ctx.config = self.config
        for spec in self.registry.get_stage(stage):
            self._run_step(spec, ctx)
        return ctx

    def _run_step(self, spec: StepSpec, ctx: ConversionContext) -> None:
        t0 = time.perf_counter()
        try:
            spec.fn(ctx)
        except Exception as e:
            ctx.errors[spec.id] = str(e)
            logger.error("  %s FAILED: %s", spec.id, e)
            raise
        ctx.completed_steps.add(spec.id)
        elapsed = (time.perf_counter() - t0) * 1000
        ctx.step_timings_ms[spec.id] = elapsed
        logger.debug("  %s completed in %.1fms", spec.id, elapsed)

    def _gate(self, ctx: ConversionContext) -> set[str]:
        """Steps that have nothing to do for this context."""
        skip: set[str] = set()

        if self.config.skip_empty_mod_steps and not ctx.mods:
            skip.update(s.id for s in self.registry.all() if s.mod_step)

        if not self.config.apply_stacking:
            skip.add("S08")

        return skip


def create_pipeline(config: PipelineConfig | None = None) -> ConversionPipeline:
    """Factory function for creating a pipeline instance."""
    return ConversionPipeline(config=config)
