"""
Season classification by ordered date-range rules.

Each rule covers one contiguous stretch of the civil year. Rules are tried
in order and the first match wins; together they cover Jan 1..Dec 31 with
no overlap, so a miss means the feast arithmetic is broken.
"""

from datetime import date
from typing import Optional

from ..feasts.moveable import feasts_for_year
from ..logging.config import get_calendar_logger
from ..models.feasts import FeastSet
from .models import Season, SeasonRange

calendar_logger = get_calendar_logger(__name__)


def season_rules(feasts: FeastSet) -> tuple[SeasonRange, ...]:
    """
    Build the ordered classifier rules for one year.

    Args:
        feasts: Feast dates of the year being classified

    Returns:
        Rules in evaluation order
    """
    year = feasts.year
    return (
        SeasonRange(Season.LENT, feasts.ash_wednesday, feasts.easter),
        SeasonRange(Season.EASTER, feasts.easter, feasts.pentecost, include_start=False),
        SeasonRange(Season.PENTECOST, feasts.pentecost, feasts.advent, include_start=False),
        SeasonRange(Season.ADVENT, feasts.advent, date(year, 12, 24), include_start=False),
        SeasonRange(Season.CHRISTMAS, feasts.christmas, date(year, 12, 31)),
        SeasonRange(Season.CHRISTMAS, date(year, 1, 1), date(year, 1, 5)),
        SeasonRange(Season.EPIPHANY, date(year, 1, 6), feasts.ash_wednesday, include_end=False),
    )


def classify_season(day: date, feasts: FeastSet) -> Optional[Season]:
    """
    Classify a date against an already computed FeastSet.

    Args:
        day: Date to classify, in the same civil year as feasts
        feasts: Feast dates of that year

    Returns:
        Matching season, or None when no rule matches
    """
    for rule in season_rules(feasts):
        if rule.contains(day):
            return rule.season

    calendar_logger.warning(
        "Date matched no season rule",
        day=day.isoformat(),
        year=feasts.year,
        easter=feasts.easter.isoformat(),
        advent=feasts.advent.isoformat()
    )
    return None


def season_of(day: date) -> Optional[Season]:
    """
    Determine the liturgical season of a date.

    Args:
        day: Date to classify

    Returns:
        Season, or None for a classification gap
    """
    return classify_season(day, feasts_for_year(day.year))
