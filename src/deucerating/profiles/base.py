"""Sport scoring profile data structures."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from deucerating.domain.models import BASE_RATING, Sport
from deucerating.domain.exceptions import ProfileConfigurationError

logger = logging.getLogger(__name__)

SKILLS_KEY = "skills"
RATING_FLOOR = 800
RATING_CEILING = 8000


class DoublesRuleKind(Enum):
    EQUAL = "equal"
    NEGATIVE_OFFSET = "negative_offset"
    ALIAS = "alias"


@dataclass(frozen=True)
class DoublesRule:
    """How the doubles rating is derived from the singles computation.

    EQUAL copies singles. NEGATIVE_OFFSET adds ``offset`` when the net
    questionnaire adjustment is negative. ALIAS is for doubles-only sports:
    one rating is computed and reported under both modes.
    """
    kind: DoublesRuleKind
    offset: int = 0

    @classmethod
    def equal(cls) -> "DoublesRule":
        return cls(DoublesRuleKind.EQUAL)

    @classmethod
    def negative_offset(cls, offset: int) -> "DoublesRule":
        return cls(DoublesRuleKind.NEGATIVE_OFFSET, offset)

    @classmethod
    def alias(cls) -> "DoublesRule":
        return cls(DoublesRuleKind.ALIAS)

    def apply(self, singles: int, adjustment: float) -> int:
        if self.kind is DoublesRuleKind.NEGATIVE_OFFSET and adjustment < 0:
            return singles + self.offset
        return singles


@dataclass(frozen=True)
class CategorySpec:
    """One single-choice questionnaire category."""
    name: str
    weights: Mapping[str, float]
    range_scale: float
    confidence_weight: float

    def __post_init__(self):
        object.__setattr__(self, "weights", MappingProxyType(dict(self.weights)))

    def weight_for(self, label: str) -> float:
        """Signed weight of an answer label; unknown labels are neutral."""
        return self.weights.get(label, 0.0)


@dataclass(frozen=True)
class SkillMatrix:
    """The skill self-assessment grid.

    ``label_weights`` is shared by every sub-skill; ``options`` lists the
    labels each sub-question offers; ``emphasis`` multiplies the weight of
    sport-specific sub-skills.
    """
    label_weights: Mapping[str, float]
    options: Mapping[str, Tuple[str, ...]]
    range_scale: float
    confidence_weight: float
    emphasis: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "label_weights", MappingProxyType(dict(self.label_weights)))
        object.__setattr__(
            self, "options",
            MappingProxyType({k: tuple(v) for k, v in self.options.items()}),
        )
        object.__setattr__(self, "emphasis", MappingProxyType(dict(self.emphasis)))

    @property
    def sub_skills(self) -> Tuple[str, ...]:
        return tuple(self.options)

    def weight_for(self, sub_skill: str, label: str) -> Optional[float]:
        """Emphasised weight of a label, or None when the label is unknown."""
        weight = self.label_weights.get(label)
        if weight is None:
            return None
        return weight * self.emphasis.get(sub_skill, 1.0)


@dataclass(frozen=True)
class SportScoringProfile:
    """Immutable scoring configuration for one sport."""
    sport: Sport
    categories: Tuple[CategorySpec, ...]
    skills: SkillMatrix
    doubles_rule: DoublesRule
    base_rating: int = BASE_RATING
    min_rating: int = RATING_FLOOR
    max_rating: int = RATING_CEILING
    accepts_benchmark: bool = False
    note: Optional[str] = None

    @property
    def category_names(self) -> Tuple[str, ...]:
        return tuple(c.name for c in self.categories)

    @property
    def doubles_only(self) -> bool:
        return self.doubles_rule.kind is DoublesRuleKind.ALIAS

    @property
    def total_confidence_weight(self) -> float:
        return sum(c.confidence_weight for c in self.categories) + self.skills.confidence_weight

    def category(self, name: str) -> CategorySpec:
        for spec in self.categories:
            if spec.name == name:
                return spec
        raise KeyError(name)

    def validate(self) -> None:
        """Check the tables once at load time; raise on the first problem."""
        sport = self.sport.value
        names = self.category_names
        if len(set(names)) != len(names):
            raise ProfileConfigurationError(
                "Duplicate category names", sport=sport
            )
        if SKILLS_KEY in names:
            raise ProfileConfigurationError(
                f"'{SKILLS_KEY}' is reserved for the skill matrix", sport=sport
            )

        for spec in self.categories:
            if not spec.weights:
                raise ProfileConfigurationError(
                    f"Category '{spec.name}' has no answer weights", sport=sport
                )
            _check_weights(spec.weights, f"{sport}.{spec.name}")
            _check_positive(spec.range_scale, f"{sport}.{spec.name}.range_scale")
            _check_positive(spec.confidence_weight, f"{sport}.{spec.name}.confidence_weight")

        skills = self.skills
        _check_weights(skills.label_weights, f"{sport}.{SKILLS_KEY}")
        _check_positive(skills.range_scale, f"{sport}.{SKILLS_KEY}.range_scale")
        _check_positive(skills.confidence_weight, f"{sport}.{SKILLS_KEY}.confidence_weight")

        for sub_skill, labels in skills.options.items():
            missing = [label for label in labels if label not in skills.label_weights]
            if missing:
                raise ProfileConfigurationError(
                    f"Skill '{sub_skill}' offers labels without a weight: {missing}",
                    sport=sport,
                    config_field=f"{sport}.{SKILLS_KEY}.{sub_skill}",
                )

        unknown_emphasis = set(skills.emphasis) - set(skills.options)
        if unknown_emphasis:
            raise ProfileConfigurationError(
                f"Emphasis set for unknown sub-skills: {sorted(unknown_emphasis)}",
                sport=sport,
            )
        for sub_skill, factor in skills.emphasis.items():
            _check_positive(factor, f"{sport}.{SKILLS_KEY}.emphasis.{sub_skill}")

        if not self.min_rating <= self.base_rating <= self.max_rating:
            raise ProfileConfigurationError(
                f"Base rating {self.base_rating} outside [{self.min_rating}, {self.max_rating}]",
                sport=sport,
                config_field=f"{sport}.min_rating",
            )

        if self.doubles_rule.kind is DoublesRuleKind.NEGATIVE_OFFSET and self.doubles_rule.offset <= 0:
            raise ProfileConfigurationError(
                "Negative-offset doubles rule needs a positive offset", sport=sport
            )

        logger.debug("Profile %s validated (%d categories)", sport, len(names))

    def describe(self) -> Dict[str, object]:
        """Summary used by the CLI ``profiles`` command."""
        return {
            "sport": self.sport.value,
            "baseRating": self.base_rating,
            "ratingBounds": [self.min_rating, self.max_rating],
            "acceptsBenchmark": self.accepts_benchmark,
            "categories": {
                c.name: {"rangeScale": c.range_scale, "confidenceWeight": c.confidence_weight}
                for c in self.categories
            },
            "skills": {
                "subSkills": list(self.skills.sub_skills),
                "rangeScale": self.skills.range_scale,
                "confidenceWeight": self.skills.confidence_weight,
                "emphasis": dict(self.skills.emphasis),
            },
            "doublesRule": self.doubles_rule.kind.value,
        }


def _check_weights(weights: Mapping[str, float], where: str) -> None:
    for label, weight in weights.items():
        if not isinstance(weight, (int, float)) or not -1.0 <= weight <= 1.0:
            raise ProfileConfigurationError(
                f"Weight for {label!r} must lie in [-1, 1], got {weight!r}",
                config_field=where,
            )


def _check_positive(value: float, where: str) -> None:
    if not isinstance(value, (int, float)) or value <= 0:
        raise ProfileConfigurationError(
            f"Expected a positive number, got {value!r}",
            config_field=where,
        )
