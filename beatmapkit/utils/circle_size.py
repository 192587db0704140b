"""Circle size / scale / radius conversions between the droid and standard playfields.

The droid client renders on an assumed 681px-tall screen, so its object
scale is not the same quantity as the standard client's. Every conversion
used by hit objects, stacking and modifiers lives here.
"""

from __future__ import annotations

ASSUMED_DROID_HEIGHT = 681
BASE_RADIUS = 64

# Scale offset baked into the droid circle-size formula.
_DROID_SCALE_OFFSET = 0.5 * (11 - 5.2450170716245195) / 5

# Ratio between a droid scale and a standard radius.
_DROID_RADIUS_RATIO = (ASSUMED_DROID_HEIGHT * 0.85) / 384


def droid_cs_to_droid_scale(cs: float) -> float:
    return max(
        (ASSUMED_DROID_HEIGHT / 480) * (54.42 - cs * 4.48) * 2 / 128 + _DROID_SCALE_OFFSET,
        1e-3,
    )


def droid_scale_to_droid_cs(scale: float) -> float:
    return (
        54.42 - ((max(1e-3, scale) - _DROID_SCALE_OFFSET) * 128 / 2) * 480 / ASSUMED_DROID_HEIGHT
    ) / 4.48


def droid_scale_to_standard_radius(scale: float) -> float:
    return BASE_RADIUS * max(1e-3, scale) / _DROID_RADIUS_RATIO


def standard_radius_to_droid_scale(radius: float) -> float:
    return radius * _DROID_RADIUS_RATIO / BASE_RADIUS


def standard_radius_to_standard_cs(radius: float) -> float:
    return 5 + (1 - radius / (BASE_RADIUS / 2)) * 5 / 0.7


def standard_cs_to_standard_scale(cs: float) -> float:
    return (1 - 0.7 * (cs - 5) / 5) / 2


def standard_scale_to_droid_scale(scale: float) -> float:
    return standard_radius_to_droid_scale(BASE_RADIUS * scale)


def standard_cs_to_droid_scale(cs: float) -> float:
    return standard_scale_to_droid_scale(standard_cs_to_standard_scale(cs))
