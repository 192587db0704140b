"""Placeable hit objects and slider nested objects."""

from beatmapkit.models.hitobjects.base import HitObject, HitObjectKind, NestedKind
from beatmapkit.models.hitobjects.circle import Circle
from beatmapkit.models.hitobjects.nested import (
    SliderEndCircle,
    SliderHead,
    SliderNestedObject,
    SliderRepeat,
    SliderTail,
    SliderTick,
)
from beatmapkit.models.hitobjects.slider import Slider
from beatmapkit.models.hitobjects.spinner import Spinner

__all__ = [
    "HitObject",
    "HitObjectKind",
    "NestedKind",
    "Circle",
    "Slider",
    "Spinner",
    "SliderEndCircle",
    "SliderHead",
    "SliderNestedObject",
    "SliderRepeat",
    "SliderTail",
    "SliderTick",
]
