"""Benchmark (DUPR) conversion with cross-format estimation and pattern analysis."""

import logging
from typing import Any, Dict, Optional, Tuple

from deucerating.config.settings import BenchmarkSettings, get_settings
from deucerating.domain.exceptions import BenchmarkValidationError
from deucerating.domain.models import (
    BenchmarkInput,
    ConfidenceTier,
    ConversionOutcome,
    EstimateSource,
    GameMode,
    RatingEstimate,
    clamp_rd,
)
from .conversion import clamp_dupr, to_rating

logger = logging.getLogger(__name__)

# (upper bound of skill band, offset) pairs; bands are narrow around mid-skill
SINGLES_TO_DOUBLES_OFFSETS = ((2.5, 0.05), (3.5, 0.10), (4.5, 0.20), (6.0, 0.15), (8.0, 0.05))
DOUBLES_TO_SINGLES_OFFSETS = ((2.5, 0.05), (3.5, 0.15), (4.5, 0.25), (6.0, 0.15), (8.0, 0.05))

LOW_RELIABILITY_WIDENING = 1.3
# known format -> (low below, high above, narrowing factor)
OFFSET_RELIABILITY_BANDS = {
    GameMode.SINGLES: (40, 80, 0.8),
    GameMode.DOUBLES: (30, 70, 0.7),
}

SINGLES_ONLY_RD = 130
DOUBLES_ONLY_RD = 110
DOUBLES_DOMINANT_RD = 65
SINGLES_DOMINANT_RD = 75
BALANCED_RD = 70

# (minimum reliability, RD multiplier), checked top-down
RELIABILITY_RD_BANDS = ((85, 0.6), (70, 0.8), (50, 1.0), (30, 1.4))
UNRELIABLE_RD_MULTIPLIER = 1.8
FORMAT_RD_MULTIPLIERS = {"singles": 1.3, "doubles": 0.9}
SINGLE_FORMAT_RD_WIDENING = 1.1
DEFAULT_RELIABILITY = {"singles": 25}
DEFAULT_RELIABILITY_OTHER = 45

PATTERN_SINGLES_ABOVE = "singles_above_doubles"
PATTERN_DOUBLES_ABOVE = "doubles_above_singles"
PATTERN_BALANCED = "balanced"


def band_offset(value: float, table: Tuple[Tuple[float, float], ...]) -> float:
    for upper, offset in table:
        if value <= upper:
            return offset
    return table[-1][1]


def reliability_rd_multiplier(reliability: float) -> float:
    for floor, multiplier in RELIABILITY_RD_BANDS:
        if reliability >= floor:
            return multiplier
    return UNRELIABLE_RD_MULTIPLIER


def adjust_rd(
    base_rd: float,
    reliability: Optional[float],
    format_type: str,
    has_both_formats: bool,
    cap: int = 350,
) -> int:
    """
    Scale a base RD by how trustworthy the benchmark is.

    ``format_type`` is "singles", "doubles" or anything else for a neutral
    combined reading. Missing reliability is assumed to be 25% for singles
    and 45% otherwise.
    """
    if reliability is None:
        reliability = DEFAULT_RELIABILITY.get(format_type, DEFAULT_RELIABILITY_OTHER)
    multiplier = reliability_rd_multiplier(reliability)
    multiplier *= FORMAT_RD_MULTIPLIERS.get(format_type, 1.0)
    if not has_both_formats:
        multiplier *= SINGLE_FORMAT_RD_WIDENING
    return clamp_rd(base_rd * multiplier, cap)


class BenchmarkConverter:
    """Turns a BenchmarkInput into a RatingEstimate without a scoring profile."""

    def __init__(self, settings: Optional[BenchmarkSettings] = None):
        self._settings = settings

    @property
    def settings(self) -> BenchmarkSettings:
        return self._settings or get_settings().benchmark

    def convert(self, benchmark: BenchmarkInput) -> Optional[RatingEstimate]:
        """
        Convert a benchmark, or return None when no format was supplied.

        Raises BenchmarkValidationError for values or reliabilities out of
        domain; use try_convert for a non-raising call.
        """
        self.validate(benchmark)
        if benchmark.is_empty:
            return None
        if benchmark.has_both:
            return self._convert_both(benchmark)
        if benchmark.has_singles:
            return self._convert_single_format(benchmark, GameMode.SINGLES)
        return self._convert_single_format(benchmark, GameMode.DOUBLES)

    def try_convert(self, benchmark: BenchmarkInput) -> ConversionOutcome:
        try:
            estimate = self.convert(benchmark)
        except BenchmarkValidationError as e:
            logger.info("Benchmark rejected: %s", e.message)
            return ConversionOutcome.failed(e)
        if estimate is None:
            return ConversionOutcome.not_applicable()
        return ConversionOutcome.ok(estimate)

    def validate(self, benchmark: BenchmarkInput) -> None:
        s = self.settings
        for name, value in (("dupr_singles", benchmark.singles), ("dupr_doubles", benchmark.doubles)):
            if value is not None and not s.min_value <= value <= s.max_value:
                raise BenchmarkValidationError(name, value, s.min_value, s.max_value)
        for name, value in (
            ("dupr_singles_reliability", benchmark.singles_reliability),
            ("dupr_doubles_reliability", benchmark.doubles_reliability),
        ):
            if value is not None and not s.min_reliability <= value <= s.max_reliability:
                raise BenchmarkValidationError(name, value, s.min_reliability, s.max_reliability)

    def estimate_missing_format(self, known_value: float, known_mode: GameMode,
                                reliability: Optional[int]) -> float:
        """Estimate the other format's DUPR from the known one.

        Singles sits above doubles for most recreational players, so a known
        doubles value is offset upwards and a known singles value downwards.
        """
        if known_mode is GameMode.DOUBLES:
            offset = band_offset(known_value, DOUBLES_TO_SINGLES_OFFSETS)
            direction = 1.0
        else:
            offset = band_offset(known_value, SINGLES_TO_DOUBLES_OFFSETS)
            direction = -1.0

        if reliability is not None:
            low, high, narrowing = OFFSET_RELIABILITY_BANDS[known_mode]
            if reliability < low:
                offset *= LOW_RELIABILITY_WIDENING
            elif reliability > high:
                offset *= narrowing

        return clamp_dupr(known_value + direction * offset,
                          self.settings.min_value, self.settings.max_value)

    def _convert_single_format(self, benchmark: BenchmarkInput, known_mode: GameMode) -> RatingEstimate:
        if known_mode is GameMode.SINGLES:
            known, reliability = benchmark.singles, benchmark.singles_reliability
            confidence, base_rd = ConfidenceTier.MEDIUM, SINGLES_ONLY_RD
        else:
            known, reliability = benchmark.doubles, benchmark.doubles_reliability
            confidence, base_rd = ConfidenceTier.MEDIUM_HIGH, DOUBLES_ONLY_RD

        estimated = self.estimate_missing_format(known, known_mode, reliability)
        known_rating = to_rating(known)
        estimated_rating = to_rating(estimated)
        rd = adjust_rd(base_rd, reliability, known_mode.value, False,
                       self.settings.max_rating_deviation)

        if known_mode is GameMode.SINGLES:
            singles, doubles = known_rating, estimated_rating
            estimated_mode = GameMode.DOUBLES
        else:
            singles, doubles = estimated_rating, known_rating
            estimated_mode = GameMode.SINGLES

        logger.debug("Estimated %s DUPR %.2f from %s %.2f",
                     estimated_mode.value, estimated, known_mode.value, known)
        return RatingEstimate(
            source=EstimateSource.DUPR_CONVERSION,
            singles=singles,
            doubles=doubles,
            rating_deviation=rd,
            confidence=confidence,
            detail=self._detail(
                benchmark,
                estimationUsed=True,
                estimatedFormat=estimated_mode.value,
                estimatedDupr=estimated,
                pattern=None,
                dominantFormat=known_mode.value,
                confidenceMultiplier=1.0,
            ),
        )

    def _convert_both(self, benchmark: BenchmarkInput) -> RatingEstimate:
        s = self.settings
        singles, doubles = benchmark.singles, benchmark.doubles
        s_rel, d_rel = benchmark.singles_reliability, benchmark.doubles_reliability
        difference = round(abs(singles - doubles), 6)

        if singles > doubles and difference > s.doubles_dominance_gap:
            # Common: more doubles volume makes the doubles number the better signal
            pattern, dominant = PATTERN_SINGLES_ABOVE, GameMode.DOUBLES
            boosts = sum((
                d_rel is not None and d_rel > 50,
                s_rel is not None and s_rel < 40,
            ))
            multiplier = {0: 1.0, 1: 1.2, 2: 1.3}[boosts]
            base_rd = DOUBLES_DOMINANT_RD
            confidence = ConfidenceTier.HIGH
        elif doubles > singles and difference > s.singles_dominance_gap:
            # Uncommon: a specialised doubles player
            pattern, dominant = PATTERN_DOUBLES_ABOVE, GameMode.SINGLES
            multiplier = 0.9
            base_rd = SINGLES_DOMINANT_RD
            confidence = ConfidenceTier.MEDIUM_HIGH
        else:
            pattern, dominant = PATTERN_BALANCED, None
            multiplier = 1.0
            base_rd = BALANCED_RD
            confidence = ConfidenceTier.HIGH

        if dominant is GameMode.DOUBLES:
            reliability, format_type = d_rel, GameMode.DOUBLES.value
        elif dominant is GameMode.SINGLES:
            reliability, format_type = s_rel, GameMode.SINGLES.value
        else:
            supplied = [r for r in (s_rel, d_rel) if r is not None]
            reliability = sum(supplied) / len(supplied) if supplied else None
            format_type = "combined"

        rd = adjust_rd(base_rd / multiplier, reliability, format_type, True,
                       s.max_rating_deviation)
        logger.debug("DUPR pattern %s (diff %.2f), multiplier %.1f, RD %d",
                     pattern, difference, multiplier, rd)
        return RatingEstimate(
            source=EstimateSource.DUPR_CONVERSION,
            singles=to_rating(singles),
            doubles=to_rating(doubles),
            rating_deviation=rd,
            confidence=confidence,
            detail=self._detail(
                benchmark,
                estimationUsed=False,
                estimatedFormat=None,
                pattern=pattern,
                difference=difference,
                dominantFormat=dominant.value if dominant else None,
                confidenceMultiplier=multiplier,
            ),
        )

    @staticmethod
    def _detail(benchmark: BenchmarkInput, **extra: Any) -> Dict[str, Any]:
        detail = {
            "originalDuprSingles": benchmark.singles,
            "originalDuprDoubles": benchmark.doubles,
            "singlesReliability": benchmark.singles_reliability,
            "doublesReliability": benchmark.doubles_reliability,
        }
        detail.update(extra)
        return detail
