"""Benchmark (DUPR) rating conversion."""

from .conversion import DUPR_MIN, DUPR_MAX, to_rating, clamp_dupr
from .converter import BenchmarkConverter, adjust_rd, band_offset

__all__ = [
    "DUPR_MIN",
    "DUPR_MAX",
    "to_rating",
    "clamp_dupr",
    "BenchmarkConverter",
    "adjust_rd",
    "band_offset",
]
