"""
Public liturgical calendar interface.

Resolves omitted arguments to "today" in the configured reference time
zone, once per call, then delegates to the feast, season and calendar
modules. LiturgicalAlmanac holds only validated, immutable settings; the
module-level functions use a default instance built from in-code defaults.
"""

from datetime import date, tzinfo
from pathlib import Path
from typing import Any, Optional, Union
from zoneinfo import ZoneInfo

from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .errors import ConfigurationError
from .feasts.moveable import feasts_for_year
from .logging.config import get_logger
from .models.feasts import FeastSet
from .season.calendar import build_year_calendar, liturgical_week_label
from .season.classifier import season_of
from .season.models import Season, YearCalendar, YearLetter
from .season.year_letter import liturgical_year_letter
from .utils.time import DateLike, get_reference_today, to_calendar_date
from .validation.arguments import validate_year

logger = get_logger(__name__)


class LiturgicalAlmanac:
    """
    Configured entry point for liturgical date computations.

    Every method accepts an optional year or date. When omitted, today's
    date in the reference time zone is used.
    """

    def __init__(
        self,
        config_dir: Optional[Union[str, Path]] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> None:
        """Load, merge and validate configuration."""
        self.config_loader = ConfigLoader.create(config_dir)
        config = self.config_loader.merge_config(overrides)

        validation_errors = ConfigValidator.validate_config(config)
        if validation_errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value!r})" for err in validation_errors]
            logger.error("Calendar configuration invalid", errors=error_msgs)
            raise ConfigurationError(
                "Invalid calendar configuration: " + "; ".join(error_msgs),
                errors=validation_errors,
                context={"config_dir": str(config_dir) if config_dir is not None else None}
            )

        self.timezone: tzinfo = ZoneInfo(config["time"]["timezone"])
        self.first_week_number: int = config["calendar"]["first_week_number"]

        logger.debug(
            "Liturgical almanac initialized",
            timezone=config["time"]["timezone"],
            first_week_number=self.first_week_number
        )

    def _resolve_year(self, year: Optional[int]) -> int:
        if year is None:
            return get_reference_today(self.timezone).year
        return validate_year(year)

    def _resolve_day(self, day: Optional[DateLike]) -> date:
        if day is None:
            return get_reference_today(self.timezone)
        return to_calendar_date(day, self.timezone)

    def feast_set(self, year: Optional[int] = None) -> FeastSet:
        """All moveable feasts of a year."""
        return feasts_for_year(self._resolve_year(year))

    def easter_date(self, year: Optional[int] = None) -> date:
        """Easter Sunday."""
        return self.feast_set(year).easter

    def ash_wednesday_date(self, year: Optional[int] = None) -> date:
        """Ash Wednesday, 46 days before Easter."""
        return self.feast_set(year).ash_wednesday

    def maundy_thursday_date(self, year: Optional[int] = None) -> date:
        """Maundy Thursday, 3 days before Easter."""
        return self.feast_set(year).maundy_thursday

    def good_friday_date(self, year: Optional[int] = None) -> date:
        """Good Friday, 2 days before Easter."""
        return self.feast_set(year).good_friday

    def palm_sunday_date(self, year: Optional[int] = None) -> date:
        """Palm Sunday, a week before Easter."""
        return self.feast_set(year).palm_sunday

    def pentecost_date(self, year: Optional[int] = None) -> date:
        """Pentecost, 7 weeks after Easter."""
        return self.feast_set(year).pentecost

    def advent_date(self, year: Optional[int] = None) -> date:
        """First Sunday of Advent."""
        return self.feast_set(year).advent

    def liturgical_year(self, day: Optional[DateLike] = None) -> YearLetter:
        """Lectionary year letter in force on day."""
        return liturgical_year_letter(self._resolve_day(day))

    def liturgical_season(self, day: Optional[DateLike] = None) -> Optional[Season]:
        """Season of day, or None if no season rule matched."""
        return season_of(self._resolve_day(day))

    def liturgical_week(self, day: Optional[DateLike] = None) -> str:
        """Label of the week containing day, e.g. ``"Pentecost 4"``."""
        return str(liturgical_week_label(self._resolve_day(day), self.first_week_number))

    def year_calendar(self, year: Optional[int] = None) -> YearCalendar:
        """Every Sunday of a year mapped to its LiturgicalLabel."""
        return build_year_calendar(self._resolve_year(year), self.first_week_number)

    def liturgical_calendar(self, year: Optional[int] = None) -> dict[date, str]:
        """Every Sunday of a year mapped to its rendered label."""
        return self.year_calendar(year).labels()


default_almanac = LiturgicalAlmanac()

easter_date = default_almanac.easter_date
ash_wednesday_date = default_almanac.ash_wednesday_date
maundy_thursday_date = default_almanac.maundy_thursday_date
good_friday_date = default_almanac.good_friday_date
palm_sunday_date = default_almanac.palm_sunday_date
pentecost_date = default_almanac.pentecost_date
advent_date = default_almanac.advent_date
feast_set = default_almanac.feast_set
liturgical_year = default_almanac.liturgical_year
liturgical_season = default_almanac.liturgical_season
liturgical_week = default_almanac.liturgical_week
liturgical_calendar = default_almanac.liturgical_calendar
year_calendar = default_almanac.year_calendar
