"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from .defaults import LoggingParams, StorageParams, TimerParams

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_SECTIONS = {
    "timer": TimerParams,
    "storage": StorageParams,
    "logging": LoggingParams,
}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_positive_int(value: Any) -> bool:
    # bool is an int subclass; "true" is not a duration
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_timer_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate interval lengths and long break cadence."""
        errors = []

        for name in ("work_minutes", "short_break_minutes", "long_break_minutes"):
            if name in params and not _is_positive_int(params[name]):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a positive integer number of minutes",
                    value=params[name]
                ))

        if "long_break_every" in params and not _is_positive_int(params["long_break_every"]):
            errors.append(ValidationError(
                field="long_break_every",
                message="Must be a positive integer",
                value=params["long_break_every"]
            ))

        return errors

    @staticmethod
    def validate_storage_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate state file settings."""
        errors = []

        if "path" in params:
            value = params["path"]
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field="path",
                    message="Must be a non-empty string",
                    value=value
                ))

        if "lock" in params and not isinstance(params["lock"], bool):
            errors.append(ValidationError(
                field="lock",
                message="Must be a boolean",
                value=params["lock"]
            ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging settings."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params and not isinstance(params["format_json"], bool):
            errors.append(ValidationError(
                field="format_json",
                message="Must be a boolean",
                value=params["format_json"]
            ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section, value in config.items():
            if section not in _SECTIONS:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=value
                ))
                continue

            if not isinstance(value, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=value
                ))
                continue

            known = {f.name for f in fields(_SECTIONS[section])}
            for key in value:
                if key not in known:
                    errors.append(ValidationError(
                        field=f"{section}.{key}",
                        message="Unknown setting",
                        value=value[key]
                    ))

        if isinstance(config.get("timer"), dict):
            errors.extend(ConfigValidator.validate_timer_params(config["timer"]))
        if isinstance(config.get("storage"), dict):
            errors.extend(ConfigValidator.validate_storage_params(config["storage"]))
        if isinstance(config.get("logging"), dict):
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
