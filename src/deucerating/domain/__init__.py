"""Core domain models."""

from .models import (
    BASE_RATING,
    MAX_RATING_DEVIATION,
    Sport,
    GameMode,
    EstimateSource,
    ConfidenceTier,
    RatingEstimate,
    BenchmarkInput,
    ConversionOutcome,
    OutcomeStatus,
    clamp_rd,
    round_half_up,
)

__all__ = [
    "BASE_RATING",
    "MAX_RATING_DEVIATION",
    "Sport",
    "GameMode",
    "EstimateSource",
    "ConfidenceTier",
    "RatingEstimate",
    "BenchmarkInput",
    "ConversionOutcome",
    "OutcomeStatus",
    "clamp_rd",
    "round_half_up",
]
