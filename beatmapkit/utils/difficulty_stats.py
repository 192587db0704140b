"""Approach-rate to preempt-time conversion."""

from __future__ import annotations

AR0_MS = 1800.0
AR5_MS = 1200.0
AR10_MS = 450.0

AR_MS_STEP1 = (AR0_MS - AR5_MS) / 5
AR_MS_STEP2 = (AR5_MS - AR10_MS) / 5


def convert_approach_rate_to_milliseconds(ar: float) -> float:
    """Preempt time for an approach rate. Piecewise linear around AR5."""
    if ar < 5:
        return AR0_MS - AR_MS_STEP1 * ar
    return AR5_MS - AR_MS_STEP2 * (ar - 5)


def convert_approach_rate_milliseconds_to_approach_rate(ms: float) -> float:
    if ms > AR5_MS:
        return (AR0_MS - ms) / AR_MS_STEP1
    return 5 + (AR5_MS - ms) / AR_MS_STEP2
