"""Tennis questionnaire weights."""

from deucerating.domain.models import Sport
from .base import CategorySpec, DoublesRule, SkillMatrix, SportScoringProfile

# Rating adjustment ranges
EXPERIENCE_RANGE = 400
COACHING_RANGE = 300
FREQUENCY_RANGE = 200
SKILL_RANGE = 350
COMPETITIVE_RANGE = 250
TOURNAMENT_RANGE = 200
SELF_RATING_RANGE = SKILL_RANGE * 0.6

CONFIDENCE_WEIGHTS = {
    "experience": 1.8,
    "skills": 2.0,
    "self_rating": 1.5,
    "competitive_level": 1.4,
    "coaching_background": 1.3,
    "frequency": 1.1,
    "tournament": 1.2,
}

DOUBLES_OFFSET = 50

EXPERIENCE = {
    "Less than 6 months": -0.8,
    "6 months - 1 year": -0.5,
    "1-2 years": -0.1,
    "2-5 years": 0.4,
    "More than 5 years": 1.0,
}

FREQUENCY = {
    "Rarely (less than once a month)": -0.6,
    "Monthly (1-2 times per month)": -0.2,
    "Weekly (1-2 times per week)": 0.3,
    "Regular (3-4 times per week)": 0.7,
    "Daily/Intensive (5+ times per week)": 1.0,
}

COMPETITIVE_LEVEL = {
    "Recreational/social tennis with friends": -0.5,
    "Social/friendly matches": -0.1,
    "Local/small tournaments": 0.4,
    "Regional/state tournaments": 0.8,
    "National tournaments": 1.0,
}

COACHING_BACKGROUND = {
    "Self-taught/no formal instruction": -0.7,
    "Some coaching experience (group or private)": -0.3,
    "Regular coaching in the past or ongoing group lessons": 0.2,
    "Extensive private coaching experience": 0.6,
    "Professional/academy training background": 1.0,
}

TOURNAMENT = {
    "Never played tournaments": -0.6,
    "Club level tournaments": -0.1,
    "Regional tournaments": 0.3,
    "State level tournaments": 0.7,
    "National tournaments": 1.0,
}

SELF_RATING = {
    "1.0-2.0 (Beginner)": -0.8,
    "2.0-3.0 (Improver)": -0.4,
    "3.0-4.0 (Intermediate)": 0.0,
    "4.0-5.0 (Advanced)": 0.6,
    "5.0-6.0 (Professional)": 1.0,
}

_GROUNDSTROKES = (
    "Beginner (learning basic strokes)",
    "Developing (can rally consistently from baseline)",
    "Intermediate (good power and placement from baseline)",
    "Advanced (excellent control, variety, and tactical awareness)",
)

SKILL_OPTIONS = {
    "serving": (
        "Beginner (learning basic serve motion)",
        "Developing (consistent first serve, learning second serve)",
        "Intermediate (good first serve placement, reliable second serve)",
        "Advanced (variety of serves with good placement and power)",
    ),
    "forehand": _GROUNDSTROKES,
    "backhand": _GROUNDSTROKES,
    "net_play": (
        "Beginner (rarely come to net, basic volley technique)",
        "Developing (comfortable with basic volleys)",
        "Intermediate (good net coverage and volley placement)",
        "Advanced (excellent net game and transition play)",
    ),
    "movement": (
        "Beginner (learning basic court positioning)",
        "Developing (understand basic court coverage)",
        "Intermediate (good court movement and recovery)",
        "Advanced (excellent anticipation and court positioning)",
    ),
    "mental_game": (
        "Beginner (focus mainly on hitting the ball back)",
        "Developing (basic understanding of tactics)",
        "Intermediate (good match strategy and point construction)",
        "Advanced (excellent tactical awareness and mental toughness)",
    ),
}

_LEVEL_WEIGHTS = (-0.8, -0.3, 0.3, 0.8)

SKILL_WEIGHTS = {
    label: weight
    for labels in SKILL_OPTIONS.values()
    for label, weight in zip(labels, _LEVEL_WEIGHTS)
}


def build_profile() -> SportScoringProfile:
    return SportScoringProfile(
        sport=Sport.TENNIS,
        categories=(
            CategorySpec("experience", EXPERIENCE, EXPERIENCE_RANGE,
                         CONFIDENCE_WEIGHTS["experience"]),
            CategorySpec("frequency", FREQUENCY, FREQUENCY_RANGE,
                         CONFIDENCE_WEIGHTS["frequency"]),
            CategorySpec("competitive_level", COMPETITIVE_LEVEL, COMPETITIVE_RANGE,
                         CONFIDENCE_WEIGHTS["competitive_level"]),
            CategorySpec("coaching_background", COACHING_BACKGROUND, COACHING_RANGE,
                         CONFIDENCE_WEIGHTS["coaching_background"]),
            CategorySpec("tournament", TOURNAMENT, TOURNAMENT_RANGE,
                         CONFIDENCE_WEIGHTS["tournament"]),
            CategorySpec("self_rating", SELF_RATING, SELF_RATING_RANGE,
                         CONFIDENCE_WEIGHTS["self_rating"]),
        ),
        skills=SkillMatrix(
            label_weights=SKILL_WEIGHTS,
            options=SKILL_OPTIONS,
            range_scale=SKILL_RANGE,
            confidence_weight=CONFIDENCE_WEIGHTS["skills"],
        ),
        doubles_rule=DoublesRule.negative_offset(DOUBLES_OFFSET),
    )
