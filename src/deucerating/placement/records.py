"""Initial placement records handed to the persistence layer."""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Protocol, Tuple

from deucerating.domain.models import (
    BASE_RATING,
    MAX_RATING_DEVIATION,
    GameMode,
    RatingEstimate,
    Sport,
)

logger = logging.getLogger(__name__)

INITIAL_PLACEMENT = "INITIAL_PLACEMENT"

# (player_id, sport, season_id, game_mode)
PlacementKey = Tuple[str, Sport, str, GameMode]


@dataclass(frozen=True)
class InitialRatingRecord:
    """Seed values of a player's first rating row for one game mode."""
    player_id: str
    sport: Sport
    season_id: str
    game_mode: GameMode
    current_rating: int
    rating_deviation: int
    is_provisional: bool = True
    matches_played: int = 0
    peak_rating: Optional[int] = None
    lowest_rating: Optional[int] = None

    def __post_init__(self):
        if self.peak_rating is None:
            object.__setattr__(self, "peak_rating", self.current_rating)
        if self.lowest_rating is None:
            object.__setattr__(self, "lowest_rating", self.current_rating)

    @property
    def key(self) -> PlacementKey:
        return (self.player_id, self.sport, self.season_id, self.game_mode)


@dataclass(frozen=True)
class RatingHistoryEntry:
    """First history row for a created rating record."""
    rating_before: int
    rating_after: int
    rd_before: int
    rd_after: int
    reason: str
    note: str

    @property
    def delta(self) -> int:
        return self.rating_after - self.rating_before


@dataclass(frozen=True)
class PlacementPlan:
    """Everything the store has to create for one onboarding completion."""
    estimate: RatingEstimate
    items: Tuple[Tuple[InitialRatingRecord, RatingHistoryEntry], ...]

    @property
    def keys(self) -> List[PlacementKey]:
        return [record.key for record, _ in self.items]


class PlacementStore(Protocol):
    """Persistence collaborator. ``create`` must itself reject duplicate keys."""

    def exists(self, key: PlacementKey) -> bool:
        ...

    def create(self, record: InitialRatingRecord, entry: RatingHistoryEntry) -> bool:
        """Create the record and its history entry; False if the key already existed."""
        ...


def _modes_for(sport: Sport) -> Tuple[GameMode, ...]:
    # Padel is played as doubles only
    if sport is Sport.PADEL:
        return (GameMode.DOUBLES,)
    return (GameMode.SINGLES, GameMode.DOUBLES)


def build_placement(estimate: RatingEstimate, player_id: str, sport: Any,
                    season_id: str) -> PlacementPlan:
    """Turn an estimate into the records and history entries to persist."""
    sport = Sport.parse(sport)
    items = []
    for mode in _modes_for(sport):
        rating = estimate.singles if mode is GameMode.SINGLES else estimate.doubles
        record = InitialRatingRecord(
            player_id=player_id,
            sport=sport,
            season_id=season_id,
            game_mode=mode,
            current_rating=rating,
            rating_deviation=estimate.rating_deviation,
        )
        entry = RatingHistoryEntry(
            rating_before=BASE_RATING,
            rating_after=rating,
            rd_before=MAX_RATING_DEVIATION,
            rd_after=estimate.rating_deviation,
            reason=INITIAL_PLACEMENT,
            note=f"Created from {estimate.source.value.replace('_', ' ')} estimate",
        )
        items.append((record, entry))
    return PlacementPlan(estimate=estimate, items=tuple(items))


def apply_placement(plan: PlacementPlan, store: PlacementStore) -> List[PlacementKey]:
    """
    Create every record of the plan that does not exist yet.

    Returns the keys actually created. Calling this twice with the same plan
    creates nothing the second time.
    """
    created = []
    for record, entry in plan.items:
        if store.exists(record.key):
            logger.debug("Rating for %s already exists, skipping", record.key)
            continue
        if store.create(record, entry):
            created.append(record.key)
            logger.info(
                "Created initial %s %s rating for %s: %d",
                record.sport.value, record.game_mode.value, record.player_id,
                record.current_rating,
            )
    return created
