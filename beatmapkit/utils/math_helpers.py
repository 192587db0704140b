"""Math helpers: clamping and single-precision rounding. No engine imports."""

from __future__ import annotations

import numpy as np


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(value, hi))


def fround(value: float) -> float:
    """Round to the nearest IEEE-754 single precision value.

    Some legacy formulas pass intermediate values through a 32-bit float,
    and the drift must be reproduced for score compatibility.
    """
    return float(np.float32(value))
