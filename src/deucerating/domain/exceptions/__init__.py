"""Custom exceptions for the deucerating package."""

# Base exceptions
from .base import (
    DeuceRatingError,
    ConfigurationError,
)

# Validation exceptions
from .validation import (
    ValidationError,
    BenchmarkValidationError,
    UnsupportedSportError,
)

# Scoring exceptions
from .scoring import (
    ScoringError,
    ProfileConfigurationError,
)

__all__ = [
    # Base
    "DeuceRatingError",
    "ConfigurationError",

    # Validation
    "ValidationError",
    "BenchmarkValidationError",
    "UnsupportedSportError",

    # Scoring
    "ScoringError",
    "ProfileConfigurationError",
]
