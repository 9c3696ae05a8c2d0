"""Pickleball questionnaire weights."""

from deucerating.domain.models import Sport
from .base import CategorySpec, DoublesRule, SkillMatrix, SportScoringProfile

# Rating adjustment ranges
EXPERIENCE_RANGE = 300
SPORTS_BACKGROUND_RANGE = 280
FREQUENCY_RANGE = 150
SKILL_RANGE = 320
COMPETITIVE_RANGE = 200
SELF_RATING_RANGE = SKILL_RANGE * 0.7
TOURNAMENT_RANGE = SKILL_RANGE * 0.5

CONFIDENCE_WEIGHTS = {
    "experience": 2.0,
    "skills": 1.8,
    "self_rating": 1.5,
    "competitive_level": 1.3,
    "sports_background": 1.2,
    "frequency": 1.0,
    "tournament": 1.0,
}

DOUBLES_OFFSET = 50
MIN_RATING = 1000

EXPERIENCE = {
    "Less than 1 month": -0.7,
    "1-3 months": -0.4,
    "3-6 months": -0.1,
    "6-12 months": 0.2,
    "1-2 years": 0.5,
    "More than 2 years": 1.0,
}

SPORTS_BACKGROUND = {
    "No experience with racquet sports": -0.8,
    "Casual/recreational player of other racquet sports": -0.3,
    "Intermediate level in tennis, badminton, or table tennis": 0.4,
    "Advanced/competitive player in other racquet sports": 0.9,
    "Professional athlete in racquet sports": 1.0,
}

FREQUENCY = {
    "Less than once a week": -0.6,
    "1-2 times per week": -0.2,
    "3-4 times per week": 0.3,
    "5+ times per week": 0.8,
}

COMPETITIVE_LEVEL = {
    "Recreational only": -0.6,
    "Social/Club matches": -0.2,
    "Local competitive events": 0.3,
    "Regional/National competitive events": 0.8,
}

SELF_RATING = {
    "Beginner: Just starting, learning the basic rules and strokes.": -0.8,
    "Improver: Can sustain short rallies but lacks consistency and tactical knowledge.": -0.4,
    "Intermediate: Can play consistently, understands basic tactics, and uses a variety of shots.": 0.0,
    "Advanced: Has a strong command of all major shots and a deep understanding of strategy.": 0.6,
    "Expert/Competitive: Plays at a high level in competitive tournaments.": 1.0,
}

TOURNAMENT = {
    "Never": -0.6,
    "Local tournaments": -0.1,
    "Regional tournaments": 0.4,
    "National/international tournaments": 0.9,
}

SKILL_OPTIONS = {
    "serving": (
        "Beginner (learning basic serves)",
        "Developing (consistent basic serves)",
        "Intermediate (can place serves)",
        "Advanced (variety of controlled serves)",
    ),
    "dinking": (
        "Beginner (learning to dink)",
        "Developing (can sustain short rallies)",
        "Intermediate (good control and placement)",
        "Advanced (excellent control and strategy)",
    ),
    "volleys": (
        "Beginner (learning basic volleys)",
        "Developing (can sustain volley exchanges)",
        "Intermediate (good reflexes and placement)",
        "Advanced (excellent reflexes and strategy)",
    ),
    "positioning": (
        "Beginner (learning basic positioning)",
        "Developing (understand basic strategy)",
        "Intermediate (good positioning and awareness)",
        "Advanced (excellent strategy and adaptability)",
    ),
}

# Every sub-question uses the same four-step ladder
_LEVEL_WEIGHTS = (-0.7, -0.2, 0.3, 0.8)

SKILL_WEIGHTS = {
    label: weight
    for labels in SKILL_OPTIONS.values()
    for label, weight in zip(labels, _LEVEL_WEIGHTS)
}


def build_profile() -> SportScoringProfile:
    return SportScoringProfile(
        sport=Sport.PICKLEBALL,
        categories=(
            CategorySpec("experience", EXPERIENCE, EXPERIENCE_RANGE,
                         CONFIDENCE_WEIGHTS["experience"]),
            CategorySpec("sports_background", SPORTS_BACKGROUND, SPORTS_BACKGROUND_RANGE,
                         CONFIDENCE_WEIGHTS["sports_background"]),
            CategorySpec("frequency", FREQUENCY, FREQUENCY_RANGE,
                         CONFIDENCE_WEIGHTS["frequency"]),
            CategorySpec("competitive_level", COMPETITIVE_LEVEL, COMPETITIVE_RANGE,
                         CONFIDENCE_WEIGHTS["competitive_level"]),
            CategorySpec("self_rating", SELF_RATING, SELF_RATING_RANGE,
                         CONFIDENCE_WEIGHTS["self_rating"]),
            CategorySpec("tournament", TOURNAMENT, TOURNAMENT_RANGE,
                         CONFIDENCE_WEIGHTS["tournament"]),
        ),
        skills=SkillMatrix(
            label_weights=SKILL_WEIGHTS,
            options=SKILL_OPTIONS,
            range_scale=SKILL_RANGE,
            confidence_weight=CONFIDENCE_WEIGHTS["skills"],
        ),
        doubles_rule=DoublesRule.negative_offset(DOUBLES_OFFSET),
        min_rating=MIN_RATING,
        accepts_benchmark=True,
    )
