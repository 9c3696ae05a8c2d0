"""Core configuration settings for deucerating."""

import logging
from pathlib import Path
from typing import Optional
from dataclasses import dataclass, field
from enum import Enum

from deucerating.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

class LogLevel(Enum):
    """Supported logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

class ConfidenceBasis(Enum):
    """Which confidence weights make up the confidence-ratio denominator.

    PROFILE counts every category of the sport profile, skills included,
    whether or not it was answered. ANSWERED counts only answered
    categories. ANSWERED_PLUS_SKILLS counts answered categories and always
    the skill matrix.
    """
    PROFILE = "profile"
    ANSWERED = "answered"
    ANSWERED_PLUS_SKILLS = "answered_plus_skills"

@dataclass
class QuestionnaireSettings:
    """Questionnaire scoring configuration."""
    min_rating: int = 800
    max_rating: int = 8000
    low_confidence_below: float = 0.4
    medium_confidence_below: float = 0.7
    low_confidence_rd: int = 350
    medium_confidence_rd: int = 250
    high_confidence_rd: int = 150
    confidence_basis: ConfidenceBasis = ConfidenceBasis.PROFILE

    def validate(self) -> None:
        """Validate questionnaire settings."""
        if self.min_rating >= self.max_rating:
            raise ConfigurationError(
                "min_rating must be below max_rating",
                config_field="questionnaire.min_rating"
            )

        if not 0.0 < self.low_confidence_below < self.medium_confidence_below <= 1.0:
            raise ConfigurationError(
                "Confidence thresholds must satisfy 0 < low < medium <= 1",
                config_field="questionnaire.low_confidence_below"
            ).add_suggestion("Use the defaults 0.4 and 0.7")

        for name in ("low_confidence_rd", "medium_confidence_rd", "high_confidence_rd"):
            value = getattr(self, name)
            if not 0 <= value <= 350:
                raise ConfigurationError(
                    f"{name} must lie in [0, 350]",
                    config_field=f"questionnaire.{name}"
                )

@dataclass
class BenchmarkSettings:
    """Benchmark (DUPR) conversion configuration."""
    min_value: float = 2.0
    max_value: float = 8.0
    min_reliability: int = 0
    max_reliability: int = 100
    doubles_dominance_gap: float = 0.15
    singles_dominance_gap: float = 0.2
    max_rating_deviation: int = 350

    def validate(self) -> None:
        """Validate benchmark settings."""
        if self.min_value >= self.max_value:
            raise ConfigurationError(
                "Benchmark min_value must be below max_value",
                config_field="benchmark.min_value"
            )

        if not 0 <= self.min_reliability < self.max_reliability <= 100:
            raise ConfigurationError(
                "Reliability bounds must satisfy 0 <= min < max <= 100",
                config_field="benchmark.min_reliability"
            )

        if self.doubles_dominance_gap < 0 or self.singles_dominance_gap < 0:
            raise ConfigurationError(
                "Dominance gaps must be non-negative",
                config_field="benchmark.doubles_dominance_gap"
            )

        if not 0 < self.max_rating_deviation <= 350:
            raise ConfigurationError(
                "max_rating_deviation must lie in (0, 350]",
                config_field="benchmark.max_rating_deviation"
            )

@dataclass
class LoggingSettings:
    """Logging configuration."""
    level: LogLevel = LogLevel.INFO
    file_path: Optional[Path] = None
    console_output: bool = True
    format_string: str = "{asctime} {levelname:<7} {name} - {message}"

    def validate(self) -> None:
        """Validate logging settings."""
        if self.file_path and not self.file_path.parent.exists():
            raise ConfigurationError(
                f"Log directory does not exist: {self.file_path.parent}",
                config_field="logging.file_path"
            ).add_suggestion("Create the directory or use console logging only")

@dataclass
class Settings:
    """Main configuration settings for deucerating."""

    questionnaire: QuestionnaireSettings = field(default_factory=QuestionnaireSettings)
    benchmark: BenchmarkSettings = field(default_factory=BenchmarkSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    debug_mode: bool = False

    def validate(self) -> None:
        """Validate all configuration settings."""
        try:
            self.questionnaire.validate()
            self.benchmark.validate()
            self.logging.validate()
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(
                f"Configuration validation failed: {str(e)}"
            ) from e

    def to_dict(self) -> dict:
        """Convert settings to dictionary for debugging."""
        return {
            'questionnaire': {
                'rating_bounds': [self.questionnaire.min_rating, self.questionnaire.max_rating],
                'thresholds': [
                    self.questionnaire.low_confidence_below,
                    self.questionnaire.medium_confidence_below,
                ],
                'confidence_basis': self.questionnaire.confidence_basis.value,
            },
            'benchmark': {
                'domain': [self.benchmark.min_value, self.benchmark.max_value],
                'reliability_domain': [
                    self.benchmark.min_reliability,
                    self.benchmark.max_reliability,
                ],
                'dominance_gaps': [
                    self.benchmark.doubles_dominance_gap,
                    self.benchmark.singles_dominance_gap,
                ],
            },
            'logging': {
                'level': self.logging.level.value,
                'file_path': str(self.logging.file_path) if self.logging.file_path else None,
            },
            'runtime': {
                'debug_mode': self.debug_mode,
            }
        }

# Global settings instance
_settings: Optional[Settings] = None

def get_settings() -> Settings:
    """Get the current global settings, initialising defaults on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
        logger.debug("Settings not initialised, using defaults")
    return _settings

def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    settings.validate()  # Validate before setting
    _settings = settings
    logger.info("Configuration loaded and validated successfully")

def reset_settings() -> None:
    """Drop the global settings so the next access uses defaults."""
    global _settings
    _settings = None
