"""Top-level estimation entry point: benchmark first, questionnaire second."""

import logging
from typing import Any, Mapping, Optional

from deucerating.benchmark.converter import BenchmarkConverter
from deucerating.config.settings import Settings, get_settings
from deucerating.domain.exceptions import UnsupportedSportError
from deucerating.domain.models import (
    BenchmarkInput,
    OutcomeStatus,
    RatingEstimate,
    Sport,
)
from deucerating.profiles.registry import get_profile
from deucerating.scoring.questionnaire import QuestionnaireScorer

logger = logging.getLogger(__name__)

HAS_DUPR_KEY = "has_dupr"
_FALSY_STRINGS = frozenset({"", "no", "false", "0"})


def _is_truthy(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in _FALSY_STRINGS
    return bool(value)


class EstimationDispatcher:
    """
    Chooses the estimation path for one player and never raises.

    Settings are read at call time unless pinned at construction, so a
    dispatcher created before ``set_settings`` still sees the new values.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    def should_use_benchmark(self, answers: Any) -> bool:
        """True when the player claims a DUPR and at least one value is usable."""
        if not isinstance(answers, Mapping) or not _is_truthy(answers.get(HAS_DUPR_KEY)):
            return False
        bounds = self.settings.benchmark
        benchmark = BenchmarkInput.from_answers(answers)
        return any(
            value is not None and bounds.min_value <= value <= bounds.max_value
            for value in (benchmark.singles, benchmark.doubles)
        )

    def estimate(self, sport: Any, answers: Any) -> RatingEstimate:
        if not isinstance(answers, Mapping) or not answers:
            logger.debug("No answers supplied, using the default estimate")
            return RatingEstimate.default()

        try:
            resolved = Sport.parse(sport)
        except UnsupportedSportError as e:
            logger.warning("%s", e.message)
            return RatingEstimate.error_fallback(e.message)

        try:
            return self._estimate(resolved, answers)
        except Exception as e:
            logger.exception("Estimation failed for %s", resolved.value)
            return RatingEstimate.error_fallback(f"{type(e).__name__}: {e}")

    def _estimate(self, sport: Sport, answers: Mapping[str, Any]) -> RatingEstimate:
        profile = get_profile(sport)
        fallback_reason = None
        use_benchmark = self.should_use_benchmark(answers)
        if use_benchmark and not profile.accepts_benchmark:
            logger.debug("DUPR ratings are not used for %s, scoring questionnaire", sport.value)
            use_benchmark = False
        if use_benchmark:
            converter = BenchmarkConverter(self.settings.benchmark)
            outcome = converter.try_convert(BenchmarkInput.from_answers(answers))
            if outcome.is_ok:
                logger.debug("Estimated %s rating from DUPR", sport.value)
                return outcome.estimate
            if outcome.status is OutcomeStatus.FAILED:
                fallback_reason = outcome.error.message
            else:
                fallback_reason = "no benchmark values"
            logger.info("DUPR conversion unusable (%s), scoring questionnaire", fallback_reason)

        scorer = QuestionnaireScorer(self.settings.questionnaire)
        result = scorer.score(profile, answers)
        if fallback_reason is not None:
            result = result.with_detail(benchmarkFallback=fallback_reason)
        return result


_dispatcher = EstimationDispatcher()


def estimate(sport: Any, answers: Any) -> RatingEstimate:
    """Estimate an initial rating with the current global settings."""
    return _dispatcher.estimate(sport, answers)
