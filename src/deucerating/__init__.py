"""Initial DMR rating estimation for tennis, pickleball and padel."""

from deucerating.domain.models import (
    Sport,
    GameMode,
    EstimateSource,
    ConfidenceTier,
    RatingEstimate,
    BenchmarkInput,
)
from deucerating.estimation.dispatcher import EstimationDispatcher, estimate

__version__ = "0.1.0"

__all__ = [
    "Sport",
    "GameMode",
    "EstimateSource",
    "ConfidenceTier",
    "RatingEstimate",
    "BenchmarkInput",
    "EstimationDispatcher",
    "estimate",
    "__version__",
]
