"""Padel questionnaire weights. Padel is played as doubles only."""

from deucerating.domain.models import Sport
from .base import CategorySpec, DoublesRule, SkillMatrix, SportScoringProfile

# Rating adjustment ranges
EXPERIENCE_RANGE = 350
COACHING_RANGE = 280
FREQUENCY_RANGE = 180
SKILL_RANGE = 400
COMPETITIVE_RANGE = 220
TOURNAMENT_RANGE = 180
SPORTS_BACKGROUND_RANGE = 300
SELF_RATING_RANGE = SKILL_RANGE * 0.6

CONFIDENCE_WEIGHTS = {
    "experience": 1.9,
    "skills": 2.2,
    "self_rating": 1.6,
    "competitive_level": 1.4,
    "coaching_background": 1.3,
    "frequency": 1.1,
    "tournament": 1.2,
    "sports_background": 1.0,
}

# Wall, glass and partner positioning separate padel players from tennis converts
PADEL_SPECIFIC_EMPHASIS = 1.2

EXPERIENCE = {
    "Less than 3 months": -0.8,
    "3-6 months": -0.4,
    "6 months - 1 year": 0.0,
    "1-2 years": 0.5,
    "More than 2 years": 1.0,
}

SPORTS_BACKGROUND = {
    "No prior racket/paddle sports": -0.4,
    "Some casual play (e.g., badminton, tennis, table tennis)": 0.0,
    "Regular player in another racket/paddle sport": 0.4,
    "Competitive background in another racket/paddle sport": 0.8,
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

COACHING_BACKGROUND = {
    "No coaching": -0.4,
    "Few lessons": -0.1,
    "Regular coaching": 0.3,
    "High-performance/academy coaching": 0.8,
}

TOURNAMENT = {
    "Never": -0.6,
    "Local tournaments": -0.1,
    "Regional tournaments": 0.4,
    "National/international tournaments": 0.9,
}

SELF_RATING = {
    "Beginner: Just starting, learning the basic rules and strokes.": -0.8,
    "Improver: Can sustain short rallies but lacks consistency and tactical knowledge.": -0.4,
    "Intermediate: Can play consistently, understands basic tactics, and uses a variety of shots.": 0.0,
    "Advanced: Has a strong command of all major shots and a deep understanding of strategy.": 0.6,
    "Expert/Competitive: Plays at a high level in competitive tournaments.": 1.0,
}

SKILL_OPTIONS = {
    "serving": (
        "Beginner (learning basic underhand serve)",
        "Developing (consistent serve to service box)",
        "Intermediate (good placement and variety)",
        "Advanced (excellent placement, spin, and tactical serving)",
    ),
    "wall_play": (
        "Beginner (struggle with balls off the wall)",
        "Developing (can play basic shots off back wall)",
        "Intermediate (comfortable using walls tactically)",
        "Advanced (excellent wall play and court geometry understanding)",
    ),
    "net_play": (
        "Beginner (basic volleys, rarely at net)",
        "Developing (comfortable with simple volleys)",
        "Intermediate (good net coverage and volley placement)",
        "Advanced (dominant net game with excellent positioning)",
    ),
    "lob_smash": (
        "Beginner (learning basic lobs and overheads)",
        "Developing (can execute basic lobs and smashes)",
        "Intermediate (good lob placement and overhead power)",
        "Advanced (excellent lob variety and smash winners)",
    ),
    "glass_play": (
        "Beginner (struggle with balls off glass walls)",
        "Developing (can return balls off glass walls)",
        "Intermediate (use glass walls tactically)",
        "Advanced (master glass wall angles and spins)",
    ),
    "positioning": (
        "Beginner (learning basic court positions, focused on hitting the ball)",
        "Developing (understand basic partner positioning)",
        "Intermediate (good court coverage with partner)",
        "Advanced (excellent tactical positioning and anticipation)",
    ),
}

_LEVEL_WEIGHTS = (-0.8, -0.3, 0.3, 0.8)

SKILL_WEIGHTS = {
    label: weight
    for labels in SKILL_OPTIONS.values()
    for label, weight in zip(labels, _LEVEL_WEIGHTS)
}

NOTE = "Padel is exclusively doubles - singles rating provided for system compatibility"


def build_profile() -> SportScoringProfile:
    return SportScoringProfile(
        sport=Sport.PADEL,
        categories=(
            CategorySpec("experience", EXPERIENCE, EXPERIENCE_RANGE,
                         CONFIDENCE_WEIGHTS["experience"]),
            CategorySpec("sports_background", SPORTS_BACKGROUND, SPORTS_BACKGROUND_RANGE,
                         CONFIDENCE_WEIGHTS["sports_background"]),
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
            emphasis={
                "wall_play": PADEL_SPECIFIC_EMPHASIS,
                "glass_play": PADEL_SPECIFIC_EMPHASIS,
                "positioning": PADEL_SPECIFIC_EMPHASIS,
            },
        ),
        doubles_rule=DoublesRule.alias(),
        note=NOTE,
    )
