"""Core domain models for initial rating estimation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Optional, Dict, Any, Mapping

from .exceptions import ValidationError, UnsupportedSportError

BASE_RATING = 1500
MAX_RATING_DEVIATION = 350


class Sport(Enum):
    """Sports with a scoring profile."""
    TENNIS = "tennis"
    PICKLEBALL = "pickleball"
    PADEL = "padel"

    @classmethod
    def parse(cls, value: Any) -> "Sport":
        """Resolve a sport from an enum member or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        raise UnsupportedSportError(value, tuple(m.value for m in cls))


class GameMode(Enum):
    SINGLES = "singles"
    DOUBLES = "doubles"


class EstimateSource(Enum):
    """Which path produced an estimate."""
    QUESTIONNAIRE = "questionnaire"
    DUPR_CONVERSION = "dupr_conversion"
    DEFAULT = "default"
    ERROR_FALLBACK = "error_fallback"


class ConfidenceTier(Enum):
    """Display-only confidence label, totally ordered by ``rank``."""
    LOW = "low"
    MEDIUM = "medium"
    MEDIUM_HIGH = "medium-high"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _TIER_ORDER[self]

    def __lt__(self, other):
        if not isinstance(other, ConfidenceTier):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, ConfidenceTier):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, ConfidenceTier):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, ConfidenceTier):
            return NotImplemented
        return self.rank >= other.rank


_TIER_ORDER = {
    ConfidenceTier.LOW: 0,
    ConfidenceTier.MEDIUM: 1,
    ConfidenceTier.MEDIUM_HIGH: 2,
    ConfidenceTier.HIGH: 3,
}


def clamp_rd(rd: float, upper: int = MAX_RATING_DEVIATION) -> int:
    """Round a rating deviation and clamp it to [0, upper]."""
    return int(max(0, min(upper, round_half_up(rd))))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class RatingEstimate:
    """The engine's only output. Immutable, created fresh per call."""
    source: EstimateSource
    singles: int
    doubles: int
    rating_deviation: int
    confidence: ConfidenceTier
    detail: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "singles", int(self.singles))
        object.__setattr__(self, "doubles", int(self.doubles))
        object.__setattr__(self, "rating_deviation", clamp_rd(self.rating_deviation))
        object.__setattr__(self, "detail", MappingProxyType(dict(self.detail)))

    @classmethod
    def default(cls) -> "RatingEstimate":
        """Estimate for an empty or unparseable answer set."""
        return cls(
            source=EstimateSource.DEFAULT,
            singles=BASE_RATING,
            doubles=BASE_RATING,
            rating_deviation=MAX_RATING_DEVIATION,
            confidence=ConfidenceTier.LOW,
            detail={"baseRating": BASE_RATING},
        )

    @classmethod
    def error_fallback(cls, reason: str) -> "RatingEstimate":
        """Estimate used when estimation failed unexpectedly."""
        return cls(
            source=EstimateSource.ERROR_FALLBACK,
            singles=BASE_RATING,
            doubles=BASE_RATING,
            rating_deviation=MAX_RATING_DEVIATION,
            confidence=ConfidenceTier.LOW,
            detail={"baseRating": BASE_RATING, "reason": reason},
        )

    def with_detail(self, **extra: Any) -> "RatingEstimate":
        """Return a copy with extra detail entries."""
        merged = dict(self.detail)
        merged.update(extra)
        return RatingEstimate(
            source=self.source,
            singles=self.singles,
            doubles=self.doubles,
            rating_deviation=self.rating_deviation,
            confidence=self.confidence,
            detail=merged,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the platform's wire names."""
        return {
            "source": self.source.value,
            "singles": self.singles,
            "doubles": self.doubles,
            "ratingDeviation": self.rating_deviation,
            "confidence": self.confidence.value,
            "detail": dict(self.detail),
        }


def _parse_number(raw: Any) -> Optional[float]:
    """Parse a questionnaire value into a finite float, or None."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            return None
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    else:
        return None
    return value if math.isfinite(value) else None


def _parse_percentage(raw: Any) -> Optional[int]:
    """Whole-percent reliability; fractions outside [0, 100] stay outside."""
    value = _parse_number(raw)
    if value is None:
        return None
    if value < 0:
        return math.floor(value)
    if value > 100:
        return math.ceil(value)
    return int(value)


@dataclass(frozen=True)
class BenchmarkInput:
    """Externally supplied benchmark (DUPR) ratings for one player."""
    singles: Optional[float] = None
    doubles: Optional[float] = None
    singles_reliability: Optional[int] = None
    doubles_reliability: Optional[int] = None

    @classmethod
    def from_answers(cls, answers: Mapping[str, Any]) -> "BenchmarkInput":
        """Pull the DUPR fields out of a raw answer set.

        Blank and non-numeric values count as absent; numeric values are
        kept as-is so that range checks happen in the converter.
        """
        return cls(
            singles=_parse_number(answers.get("dupr_singles")),
            doubles=_parse_number(answers.get("dupr_doubles")),
            singles_reliability=_parse_percentage(answers.get("dupr_singles_reliability")),
            doubles_reliability=_parse_percentage(answers.get("dupr_doubles_reliability")),
        )

    @property
    def has_singles(self) -> bool:
        return self.singles is not None

    @property
    def has_doubles(self) -> bool:
        return self.doubles is not None

    @property
    def has_both(self) -> bool:
        return self.has_singles and self.has_doubles

    @property
    def is_empty(self) -> bool:
        return not (self.has_singles or self.has_doubles)


class OutcomeStatus(Enum):
    OK = "ok"
    FAILED = "failed"
    NOT_APPLICABLE = "not_applicable"


@dataclass(frozen=True)
class ConversionOutcome:
    """Tagged result of a benchmark conversion attempt."""
    status: OutcomeStatus
    estimate: Optional[RatingEstimate] = None
    error: Optional[ValidationError] = None

    @classmethod
    def ok(cls, estimate: RatingEstimate) -> "ConversionOutcome":
        return cls(status=OutcomeStatus.OK, estimate=estimate)

    @classmethod
    def failed(cls, error: ValidationError) -> "ConversionOutcome":
        return cls(status=OutcomeStatus.FAILED, error=error)

    @classmethod
    def not_applicable(cls) -> "ConversionOutcome":
        return cls(status=OutcomeStatus.NOT_APPLICABLE)

    @property
    def is_ok(self) -> bool:
        return self.status is OutcomeStatus.OK
