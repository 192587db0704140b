"""Mirror: reflects objects across the playfield."""

from __future__ import annotations

import enum

from beatmapkit.geometry.path import SliderPath
from beatmapkit.geometry.vector import Vector2
from beatmapkit.models.hitobjects import HitObject, HitObjectKind
from beatmapkit.models.modes import GameMode
from beatmapkit.mods.base import ApplicableToHitObject, Mod

PLAYFIELD_SIZE = Vector2(512, 384)


class Axes(enum.Enum):
    X = "x"
    Y = "y"
    BOTH = "both"


def _reflect(hit_object: HitObject, flip_x: bool, flip_y: bool) -> None:
    def reflect_vector(v: Vector2) -> Vector2:
        return Vector2(
            PLAYFIELD_SIZE.x - v.x if flip_x else v.x,
            PLAYFIELD_SIZE.y - v.y if flip_y else v.y,
        )

    hit_object.position = reflect_vector(hit_object.position)

    if hit_object.kind != HitObjectKind.SLIDER:
        return

    # Anchors are relative to the slider head, so negation mirrors them.
    anchors = [
        Vector2(-p.x if flip_x else p.x, -p.y if flip_y else p.y)
        for p in hit_object.path.control_points
    ]
    hit_object.path = SliderPath(
        hit_object.path.path_type,
        anchors,
        hit_object.path.expected_distance,
    )
    hit_object.update_nested_positions()

    # Head and tail follow the slider; ticks and repeats are mirrored directly.
    for obj in hit_object.nested_objects[1:-1]:
        obj.position = reflect_vector(obj.position)


class ModMirror(Mod, ApplicableToHitObject):
    acronym = "MR"
    name = "Mirror"

    def __init__(self, flipped_axes: Axes = Axes.X) -> None:
        self.flipped_axes = flipped_axes

    def apply_to_hit_object(self, mode: GameMode, hit_object: HitObject) -> None:
        _reflect(
            hit_object,
            flip_x=self.flipped_axes in (Axes.X, Axes.BOTH),
            flip_y=self.flipped_axes in (Axes.Y, Axes.BOTH),
        )
