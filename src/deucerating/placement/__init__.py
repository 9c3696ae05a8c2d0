"""Initial placement records for the persistence boundary."""

from .records import (
    INITIAL_PLACEMENT,
    InitialRatingRecord,
    RatingHistoryEntry,
    PlacementPlan,
    PlacementStore,
    build_placement,
    apply_placement,
)

__all__ = [
    "INITIAL_PLACEMENT",
    "InitialRatingRecord",
    "RatingHistoryEntry",
    "PlacementPlan",
    "PlacementStore",
    "build_placement",
    "apply_placement",
]
