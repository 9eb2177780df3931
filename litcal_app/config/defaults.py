"""Default configuration parameters for the liturgical calendar."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TimeParams:
    """Reference time zone used when resolving "today" and aware instants."""
    timezone: str = "UTC"


@dataclass(frozen=True)
class CalendarParams:
    """Calendar generation parameters."""
    first_week_number: int = 1                       # Week number of a season's first Sunday


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    time: TimeParams
    calendar: CalendarParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        time=TimeParams(),
        calendar=CalendarParams(),
    )
