"""Per-sport questionnaire scoring profiles."""

from .base import (
    SKILLS_KEY,
    CategorySpec,
    SkillMatrix,
    DoublesRule,
    DoublesRuleKind,
    SportScoringProfile,
)
from .registry import PROFILES, get_profile, available_sports, load_profiles

__all__ = [
    "SKILLS_KEY",
    "CategorySpec",
    "SkillMatrix",
    "DoublesRule",
    "DoublesRuleKind",
    "SportScoringProfile",
    "PROFILES",
    "get_profile",
    "available_sports",
    "load_profiles",
]
