"""Questionnaire scoring."""

from .questionnaire import QuestionnaireScorer, clamp01, tier_for_ratio

__all__ = [
    "QuestionnaireScorer",
    "clamp01",
    "tier_for_ratio",
]
