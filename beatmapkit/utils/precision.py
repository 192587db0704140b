"""Float tolerance helpers. No engine imports."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from beatmapkit.geometry.vector import Vector2

FLOAT_EPSILON = 1e-3


def almost_equals(value1: float, value2: float, acceptable_difference: float = FLOAT_EPSILON) -> bool:
    return abs(value1 - value2) <= acceptable_difference


def almost_equals_vector(
    vec1: Vector2,
    vec2: Vector2,
    acceptable_difference: float = FLOAT_EPSILON,
) -> bool:
    return almost_equals(vec1.x, vec2.x, acceptable_difference) and almost_equals(
        vec1.y, vec2.y, acceptable_difference
    )
