"""Scoring and profile exceptions."""

from typing import Optional, Any
from .base import DeuceRatingError, ConfigurationError

class ScoringError(DeuceRatingError):
    """Raised when an answer has a shape the scorer cannot consume.

    Always recovered inside the scorer by skipping the offending answer.
    """

    def __init__(
        self,
        message: str,
        *,
        question_key: Optional[str] = None,
        answer: Optional[Any] = None,
        **kwargs
    ):
        super().__init__(message, recoverable=True, **kwargs)
        if question_key:
            self.add_context('question_key', question_key)
        if answer is not None:
            self.add_context('answer_type', type(answer).__name__)

    def _get_default_error_code(self) -> str:
        return "SCORING_ERROR"


class ProfileConfigurationError(ConfigurationError):
    """Raised at load time when a sport scoring profile is inconsistent."""

    def __init__(self, message: str, *, sport: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        if sport:
            self.add_context('sport', sport)
        self.add_suggestion("Fix the profile tables before serving estimates")

    def _get_default_error_code(self) -> str:
        return "PROFILE_CONFIG_INVALID"
