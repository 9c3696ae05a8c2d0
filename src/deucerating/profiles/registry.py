"""Sport -> scoring profile lookup, validated once at import."""

import logging
from types import MappingProxyType
from typing import Any, Mapping, Tuple

from deucerating.domain.models import Sport
from deucerating.domain.exceptions import ProfileConfigurationError
from . import padel, pickleball, tennis
from .base import SportScoringProfile

logger = logging.getLogger(__name__)

_BUILDERS = {
    Sport.TENNIS: tennis.build_profile,
    Sport.PICKLEBALL: pickleball.build_profile,
    Sport.PADEL: padel.build_profile,
}

def load_profiles() -> Mapping[Sport, SportScoringProfile]:
    """Build and validate every sport profile."""
    profiles = {}
    for sport in Sport:
        builder = _BUILDERS.get(sport)
        if builder is None:
            raise ProfileConfigurationError(
                f"No scoring profile registered for {sport.value}", sport=sport.value
            )
        profile = builder()
        if profile.sport is not sport:
            raise ProfileConfigurationError(
                f"Builder for {sport.value} returned a {profile.sport.value} profile",
                sport=sport.value,
            )
        profile.validate()
        profiles[sport] = profile
    logger.debug("Loaded %d scoring profiles", len(profiles))
    return MappingProxyType(profiles)

PROFILES = load_profiles()

def get_profile(sport: Any) -> SportScoringProfile:
    """Profile for a Sport member or sport name."""
    return PROFILES[Sport.parse(sport)]

def available_sports() -> Tuple[str, ...]:
    return tuple(s.value for s in PROFILES)
