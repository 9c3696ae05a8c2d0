"""Benchmark (DUPR) to DMR unit conversion."""

import numpy as np

from deucerating.domain.models import round_half_up

DUPR_MIN = 2.0
DUPR_MAX = 8.0

# Knots of the piecewise-linear conversion. Slopes per DUPR point:
# 900 up to 3.0, 1000 up to 5.0, 800 up to 6.0, 650 above.
DUPR_BREAKPOINTS = np.array([2.0, 3.0, 4.0, 5.0, 6.0, 8.0])
DMR_AT_BREAKPOINTS = np.array([1000.0, 1900.0, 2900.0, 3900.0, 4700.0, 6000.0])


def clamp_dupr(value: float, lower: float = DUPR_MIN, upper: float = DUPR_MAX) -> float:
    return max(lower, min(upper, float(value)))


def to_rating(dupr: float) -> int:
    """Convert a DUPR value to a DMR rating (input clamped to [2.0, 8.0])."""
    x = clamp_dupr(dupr)
    return round_half_up(float(np.interp(x, DUPR_BREAKPOINTS, DMR_AT_BREAKPOINTS)))
