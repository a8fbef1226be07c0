"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_display_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate display parameters."""
        errors = []

        for name in ("ahead_label", "behind_label"):
            if name in params:
                value = params[name]
                if not isinstance(value, str) or not value.strip():
                    errors.append(ValidationError(
                        field=f"display.{name}",
                        message="Must be a non-empty string",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in VALID_LOG_LEVELS:
                errors.append(ValidationError(
                    field="logging.level",
                    message=f"Must be one of {', '.join(VALID_LOG_LEVELS)}",
                    value=value
                ))

        for name in ("format_json", "include_timestamp", "include_caller"):
            if name in params:
                value = params[name]
                if not isinstance(value, bool):
                    errors.append(ValidationError(
                        field=f"logging.{name}",
                        message="Must be a boolean",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section in config:
            if section not in ("display", "logging"):
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=config[section]
                ))
            elif not isinstance(config[section], dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=config[section]
                ))

        if errors:
            return errors

        if "display" in config:
            errors.extend(ConfigValidator.validate_display_params(config["display"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
