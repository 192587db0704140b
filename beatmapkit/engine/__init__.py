"""Beatmap conversion engine."""

from beatmapkit.engine.context import ConversionContext
from beatmapkit.engine.converter import BeatmapConverter
from beatmapkit.engine.pipeline import ConversionPipeline, create_pipeline
from beatmapkit.engine.registry import Stage, get_registry, step
from beatmapkit.engine.stack_evaluator import HitObjectStackEvaluator
from beatmapkit.engine.stacking import StackingEngine

__all__ = [
    "step",
    "Stage",
    "get_registry",
    "ConversionContext",
    "BeatmapConverter",
    "ConversionPipeline",
    "create_pipeline",
    "HitObjectStackEvaluator",
    "StackingEngine",
]
