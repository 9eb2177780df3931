"""
Per-year Sunday calendar generation and week lookup.

Walks every Sunday of a civil year, classifies it, and numbers consecutive
Sundays within each season. All counters live in the local scope of one
build call, so generation is reentrant.
"""

from datetime import MINYEAR, date, timedelta
from typing import Optional

from ..errors import ClassificationGapError, InvalidDateError
from ..feasts.moveable import feasts_for_year
from ..logging.config import get_calendar_logger, log_season_transition
from ..utils.time import WEEK, days_since_sunday, sunday_on_or_after
from ..validation.arguments import validate_year
from .classifier import classify_season
from .models import LiturgicalLabel, Season, YearCalendar

calendar_logger = get_calendar_logger(__name__)

DEFAULT_FIRST_WEEK_NUMBER = 1


def sundays_in_year(year: int) -> list[date]:
    """
    List every Sunday from Jan 1 to Dec 31 of year, in order.

    Args:
        year: Civil year, 1..9999

    Returns:
        52 or 53 Sundays
    """
    validate_year(year)
    first = sunday_on_or_after(date(year, 1, 1))
    count = (date(year, 12, 31) - first).days // 7 + 1
    return [first + i * WEEK for i in range(count)]


def build_year_calendar(year: int, first_week_number: int = DEFAULT_FIRST_WEEK_NUMBER) -> YearCalendar:
    """
    Label every Sunday of a civil year with its season and week number.

    The first Sunday seen in a season gets first_week_number and each later
    Sunday in that season gets one more. Counters are kept per season for
    the whole year, so the Christmas Sundays of late December continue the
    count of early January and every label in the year is distinct.

    Args:
        year: Civil year, 1..9999
        first_week_number: Week number of a season's first Sunday

    Returns:
        YearCalendar keyed by Sunday

    Raises:
        ClassificationGapError: If a Sunday matches no season rule
    """
    feasts = feasts_for_year(year)
    counters: dict[Season, int] = {}
    weeks: dict[date, LiturgicalLabel] = {}
    previous: Optional[Season] = None

    for sunday in sundays_in_year(year):
        season = classify_season(sunday, feasts)
        if season is None:
            raise ClassificationGapError(
                f"Sunday {sunday.isoformat()} matched no season rule",
                day=sunday,
                year=year,
                context={"feasts": feasts.as_dict()}
            )

        week = counters.get(season, first_week_number - 1) + 1
        counters[season] = week
        weeks[sunday] = LiturgicalLabel(season=season, week=week)

        if season is not previous:
            log_season_transition(
                calendar_logger,
                sunday=sunday,
                from_season=previous.value if previous else None,
                to_season=season.value,
                week=week,
                context={"year": year}
            )
            previous = season

    calendar_logger.debug("Year calendar built", year=year, sundays=len(weeks))
    return YearCalendar(year, weeks)


def week_start(day: date) -> date:
    """
    Sunday that begins the week containing day.

    Raises:
        InvalidDateError: If that Sunday precedes 0001-01-01
    """
    offset = days_since_sunday(day)
    if day.year == MINYEAR and (day - date(MINYEAR, 1, 1)).days < offset:
        raise InvalidDateError(
            f"Week containing {day.isoformat()} starts before year {MINYEAR}",
            value=day,
            expected_type="datetime.date"
        )
    return day - timedelta(days=offset)


def liturgical_week_label(day: date, first_week_number: int = DEFAULT_FIRST_WEEK_NUMBER) -> LiturgicalLabel:
    """
    Label of the week containing day.

    The week is looked up in the calendar of its Sunday's year, so the
    first days of January before the year's first Sunday carry the last
    label of the previous year.

    Args:
        day: Any date
        first_week_number: Week number of a season's first Sunday

    Returns:
        LiturgicalLabel of the Sunday on or before day
    """
    sunday = week_start(day)
    return build_year_calendar(sunday.year, first_week_number)[sunday]
