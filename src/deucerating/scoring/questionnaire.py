# deucerating/scoring/questionnaire.py
"""Questionnaire scoring: weighted answers -> rating, RD and confidence."""

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from deucerating.config.settings import (
    ConfidenceBasis,
    QuestionnaireSettings,
    get_settings,
)
from deucerating.domain.exceptions import ScoringError
from deucerating.domain.models import (
    ConfidenceTier,
    EstimateSource,
    RatingEstimate,
    round_half_up,
)
from deucerating.profiles.base import SKILLS_KEY, SportScoringProfile

logger = logging.getLogger(__name__)

def clamp01(x: float) -> float:
    return 0.0 if x is None else max(0.0, min(1.0, x))

def _answered(value: Any) -> bool:
    return isinstance(value, str) and value != ""

def tier_for_ratio(ratio: float, settings: QuestionnaireSettings) -> Tuple[ConfidenceTier, int]:
    """Map a confidence ratio to its tier and rating deviation."""
    if ratio < settings.low_confidence_below:
        return ConfidenceTier.LOW, settings.low_confidence_rd
    if ratio < settings.medium_confidence_below:
        return ConfidenceTier.MEDIUM, settings.medium_confidence_rd
    return ConfidenceTier.HIGH, settings.high_confidence_rd


class QuestionnaireScorer:
    """Generic weighted-sum scorer driven by a SportScoringProfile."""

    def __init__(self, settings: Optional[QuestionnaireSettings] = None):
        self._settings = settings

    @property
    def settings(self) -> QuestionnaireSettings:
        return self._settings or get_settings().questionnaire

    def score(self, profile: SportScoringProfile, answers: Mapping[str, Any]) -> RatingEstimate:
        """
        Score an answer set. Unknown labels weigh 0 and odd value types are
        ignored; nothing in ``answers`` can make this raise.
        """
        settings = self.settings
        if not isinstance(answers, Mapping):
            answers = {}

        rating_adjustment = 0.0
        weighted_confidence = 0.0
        answered_confidence = 0.0
        category_weights: Dict[str, float] = {}

        for spec in profile.categories:
            answer = answers.get(spec.name)
            if not _answered(answer):
                continue
            weight = spec.weight_for(answer)
            category_weights[spec.name] = weight
            rating_adjustment += weight * spec.range_scale
            weighted_confidence += abs(weight) * spec.confidence_weight
            answered_confidence += spec.confidence_weight

        skill_weights = self._skill_weights(profile, answers.get(SKILLS_KEY))
        avg_skill_weight = None
        if skill_weights:
            avg_skill_weight = sum(skill_weights) / len(skill_weights)
            rating_adjustment += avg_skill_weight * profile.skills.range_scale
            weighted_confidence += abs(avg_skill_weight) * profile.skills.confidence_weight
            answered_confidence += profile.skills.confidence_weight

        max_confidence = self._max_confidence(
            profile, answered_confidence, bool(skill_weights), settings.confidence_basis
        )
        confidence_ratio = clamp01(weighted_confidence / max_confidence) if max_confidence > 0 else 0.0
        confidence, rd = tier_for_ratio(confidence_ratio, settings)

        singles = self._bound(round_half_up(profile.base_rating + rating_adjustment), profile, settings)
        doubles = self._bound(profile.doubles_rule.apply(singles, rating_adjustment), profile, settings)

        detail: Dict[str, Any] = {
            "baseRating": profile.base_rating,
            "totalAdjustment": rating_adjustment,
            "confidenceRatio": confidence_ratio,
            "categoryWeights": category_weights,
            "skillWeight": avg_skill_weight,
            "skillsAnswered": len(skill_weights),
        }
        if profile.note:
            detail["note"] = profile.note

        logger.debug(
            "Scored %s questionnaire: adjustment=%.1f ratio=%.3f tier=%s",
            profile.sport.value, rating_adjustment, confidence_ratio, confidence.value,
        )
        return RatingEstimate(
            source=EstimateSource.QUESTIONNAIRE,
            singles=singles,
            doubles=doubles,
            rating_deviation=rd,
            confidence=confidence,
            detail=detail,
        )

    def _skill_weights(self, profile: SportScoringProfile, skills: Any) -> List[float]:
        """Resolved weights of the skill-matrix answers that could be read."""
        if not isinstance(skills, Mapping):
            return []
        weights: List[float] = []
        for sub_skill in profile.skills.sub_skills:
            label = skills.get(sub_skill)
            try:
                weight = self._resolve_skill(profile, sub_skill, label)
            except ScoringError as e:
                logger.warning("Skipping skill answer: %s", e)
                continue
            if weight is not None:
                weights.append(weight)
        return weights

    @staticmethod
    def _resolve_skill(profile: SportScoringProfile, sub_skill: Any, label: Any) -> Optional[float]:
        if label is None or label == "":
            return None
        if not isinstance(label, str):
            raise ScoringError(
                f"Skill '{sub_skill}' answer must be a label string",
                question_key=f"{SKILLS_KEY}.{sub_skill}",
                answer=label,
            )
        return profile.skills.weight_for(str(sub_skill), label)

    @staticmethod
    def _max_confidence(
        profile: SportScoringProfile,
        answered: float,
        skills_answered: bool,
        basis: ConfidenceBasis,
    ) -> float:
        if basis is ConfidenceBasis.PROFILE:
            return profile.total_confidence_weight
        if basis is ConfidenceBasis.ANSWERED_PLUS_SKILLS and not skills_answered:
            return answered + profile.skills.confidence_weight
        return answered

    @staticmethod
    def _bound(rating: int, profile: SportScoringProfile, settings: QuestionnaireSettings) -> int:
        """Clamp to the sport's bounds, narrowed further by the settings."""
        lower = max(profile.min_rating, settings.min_rating)
        upper = min(profile.max_rating, settings.max_rating)
        return max(lower, min(upper, rating))
