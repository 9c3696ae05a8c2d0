"""Input validation exceptions."""

from typing import Optional, Any
from .base import DeuceRatingError

class ValidationError(DeuceRatingError):
    """Base class for validation errors."""

    def __init__(
        self,
        message: str,
        *,
        field_name: Optional[str] = None,
        field_value: Optional[Any] = None,
        recoverable: bool = True,
        **kwargs
    ):
        super().__init__(message, recoverable=recoverable, **kwargs)
        self.field_name = field_name
        if field_name:
            self.add_context('field_name', field_name)
        if field_value is not None:
            self.add_context('field_value', str(field_value))

    def _get_default_error_code(self) -> str:
        return "VALIDATION_ERROR"


class BenchmarkValidationError(ValidationError):
    """Raised when a benchmark rating or its reliability is out of domain."""

    def __init__(
        self,
        field_name: str,
        field_value: Any,
        lower: float,
        upper: float,
        **kwargs
    ):
        message = f"{field_name} must lie in [{lower}, {upper}], got {field_value}"
        super().__init__(message, field_name=field_name, field_value=field_value, **kwargs)
        self.add_context('allowed_range', (lower, upper))
        self.add_suggestion("Falling back to questionnaire scoring")

    def _get_default_error_code(self) -> str:
        return "BENCHMARK_OUT_OF_RANGE"


class UnsupportedSportError(ValidationError):
    """Raised when a sport name does not match any scoring profile."""

    def __init__(self, sport: Any, supported: tuple, **kwargs):
        message = f"Unsupported sport: {sport!r}"
        super().__init__(message, field_name="sport", field_value=sport, **kwargs)
        self.add_suggestion(f"Use one of: {', '.join(supported)}")

    def _get_default_error_code(self) -> str:
        return "UNSUPPORTED_SPORT"
