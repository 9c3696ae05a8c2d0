"""Configuration management."""

from .settings import (
    Settings,
    QuestionnaireSettings,
    BenchmarkSettings,
    LoggingSettings,
    LogLevel,
    ConfidenceBasis,
    get_settings,
    set_settings,
    reset_settings,
)
from .loader import ConfigurationLoader, configure_from_cli

__all__ = [
    "Settings",
    "QuestionnaireSettings",
    "BenchmarkSettings",
    "LoggingSettings",
    "LogLevel",
    "ConfidenceBasis",
    "get_settings",
    "set_settings",
    "reset_settings",
    "ConfigurationLoader",
    "configure_from_cli",
]
