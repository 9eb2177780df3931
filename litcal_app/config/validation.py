"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_time_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate time parameters."""
        errors = []

        if "timezone" in params:
            value = params["timezone"]
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field="timezone",
                    message="Must be a non-empty IANA time zone name",
                    value=value
                ))
            else:
                try:
                    ZoneInfo(value)
                except (ZoneInfoNotFoundError, ValueError):
                    errors.append(ValidationError(
                        field="timezone",
                        message="Unknown time zone",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_calendar_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate calendar parameters."""
        errors = []

        if "first_week_number" in params:
            value = params["first_week_number"]
            if isinstance(value, bool) or value not in (0, 1):
                errors.append(ValidationError(
                    field="first_week_number",
                    message="Must be 0 or 1",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "time" in config:
            errors.extend(ConfigValidator.validate_time_params(config["time"]))

        if "calendar" in config:
            errors.extend(ConfigValidator.validate_calendar_params(config["calendar"]))

        return errors
