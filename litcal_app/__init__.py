"""
litcal - Western Liturgical Calendar

Computes Easter by the Computus, the moveable feasts derived from it,
the A/B/C lectionary year, the season of any date, and per-year Sunday
labels such as "Pentecost 4".
"""

__version__ = "0.1.0"
__author__ = "litcal Team"

from .almanac import (
    LiturgicalAlmanac,
    advent_date,
    ash_wednesday_date,
    easter_date,
    feast_set,
    good_friday_date,
    liturgical_calendar,
    liturgical_season,
    liturgical_week,
    liturgical_year,
    maundy_thursday_date,
    palm_sunday_date,
    pentecost_date,
    year_calendar,
)
from .season.models import LiturgicalLabel, Season, YearCalendar, YearLetter

__all__ = [
    "LiturgicalAlmanac",
    "LiturgicalLabel",
    "Season",
    "YearCalendar",
    "YearLetter",
    "advent_date",
    "ash_wednesday_date",
    "easter_date",
    "feast_set",
    "good_friday_date",
    "liturgical_calendar",
    "liturgical_season",
    "liturgical_week",
    "liturgical_year",
    "maundy_thursday_date",
    "palm_sunday_date",
    "pentecost_date",
    "year_calendar",
]
