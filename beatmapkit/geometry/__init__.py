"""Playfield geometry: vectors, curve approximation and slider paths."""

from beatmapkit.geometry.approximator import PathType, approximate
from beatmapkit.geometry.path import SliderPath
from beatmapkit.geometry.vector import Vector2

__all__ = [
    "PathType",
    "approximate",
    "SliderPath",
    "Vector2",
]
