"""Configuration loading from CLI, JSON files and programmatic sources."""

import json
import logging
from pathlib import Path
from dataclasses import replace, fields
from typing import Any, Mapping

from deucerating.config.settings import (
    Settings, QuestionnaireSettings, BenchmarkSettings, LoggingSettings,
    LogLevel, ConfidenceBasis
)
from deucerating.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_ENUM_FIELDS = {
    ("questionnaire", "confidence_basis"): ConfidenceBasis,
    ("logging", "level"): LogLevel,
}

class ConfigurationLoader:
    """Loads configuration from CLI args, JSON files and system defaults."""

    def load_from_cli_args(self, args) -> Settings:
        """Load configuration from CLI arguments."""
        try:
            # Start with system defaults, then an optional config file
            settings = self.load_defaults()
            if getattr(args, 'config', None):
                settings = self.load_from_file(Path(args.config))

            logging_updates = {}
            if getattr(args, 'log_file', None):
                logging_updates['file_path'] = Path(args.log_file)
            if getattr(args, 'debug', False):
                logging_updates['level'] = LogLevel.DEBUG

            questionnaire_updates = {}
            if getattr(args, 'confidence_basis', None):
                questionnaire_updates['confidence_basis'] = ConfidenceBasis(args.confidence_basis)

            return replace(
                settings,
                questionnaire=replace(settings.questionnaire, **questionnaire_updates),
                logging=replace(settings.logging, **logging_updates),
                debug_mode=bool(getattr(args, 'debug', False)) or settings.debug_mode,
            )

        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(
                f"Failed to load configuration from CLI arguments: {str(e)}"
            ) from e

    def load_from_file(self, path: Path) -> Settings:
        """Load configuration from a JSON file of section -> field overrides."""
        if not path.is_file():
            raise ConfigurationError(
                f"Configuration file not found: {path}",
                config_field="config"
            ).add_suggestion("Pass an existing JSON file to --config")
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Configuration file is not valid JSON: {path} ({e})",
                config_field="config"
            ) from e
        logger.debug("Loaded configuration overrides from %s", path)
        return self.load_from_mapping(data)

    def load_from_mapping(self, data: Mapping[str, Any]) -> Settings:
        """Apply a nested mapping of overrides on top of the defaults."""
        if not isinstance(data, Mapping):
            raise ConfigurationError("Configuration root must be an object")

        settings = self.load_defaults()
        sections = {
            'questionnaire': settings.questionnaire,
            'benchmark': settings.benchmark,
            'logging': settings.logging,
        }
        updated = {}
        for section_name, current in sections.items():
            overrides = data.get(section_name) or {}
            if not isinstance(overrides, Mapping):
                raise ConfigurationError(
                    f"Section '{section_name}' must be an object",
                    config_field=section_name
                )
            known = {f.name for f in fields(current)}
            unknown = set(overrides) - known
            if unknown:
                raise ConfigurationError(
                    f"Unknown settings: {', '.join(sorted(unknown))}",
                    config_field=section_name
                ).add_suggestion(f"Valid fields: {', '.join(sorted(known))}")
            coerced = {
                key: self._coerce(section_name, key, value)
                for key, value in overrides.items()
            }
            updated[section_name] = replace(current, **coerced)

        return replace(
            settings,
            debug_mode=bool(data.get('debug_mode', settings.debug_mode)),
            **updated,
        )

    @staticmethod
    def _coerce(section: str, key: str, value: Any) -> Any:
        enum_type = _ENUM_FIELDS.get((section, key))
        if enum_type is not None:
            try:
                return enum_type(value)
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid value {value!r}",
                    config_field=f"{section}.{key}"
                ).add_suggestion(
                    f"Use one of: {', '.join(m.value for m in enum_type)}"
                ) from e
        if section == 'logging' and key == 'file_path' and value is not None:
            return Path(value)
        return value

    def load_defaults(self) -> Settings:
        """Load default configuration settings."""
        return Settings(
            questionnaire=QuestionnaireSettings(
                min_rating=800,
                max_rating=8000,
                low_confidence_below=0.4,
                medium_confidence_below=0.7,
                low_confidence_rd=350,
                medium_confidence_rd=250,
                high_confidence_rd=150,
                confidence_basis=ConfidenceBasis.PROFILE,
            ),
            benchmark=BenchmarkSettings(
                min_value=2.0,
                max_value=8.0,
                min_reliability=0,
                max_reliability=100,
                doubles_dominance_gap=0.15,
                singles_dominance_gap=0.2,
                max_rating_deviation=350,
            ),
            logging=LoggingSettings(
                level=LogLevel.INFO,
                file_path=None,
                console_output=True,
            ),
            debug_mode=False,
        )

def configure_from_cli(args) -> Settings:
    """Main entry point to configure settings from CLI args."""
    loader = ConfigurationLoader()
    settings = loader.load_from_cli_args(args)
    settings.validate()
    return settings
