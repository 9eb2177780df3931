"""Lectionary year letter resolution."""

from datetime import date

from ..feasts.moveable import calculate_advent_sunday
from .models import YearLetter

# Indexed by effective year % 3; fixes the cycle anchor (2025 Advent -> A).
YEAR_LETTERS = (YearLetter.C, YearLetter.A, YearLetter.B)


def effective_liturgical_year(day: date) -> int:
    """Civil year whose liturgical year is in force on day.

    The liturgical year named for year y + 1 starts after Advent Sunday of y.
    """
    year = day.year
    if day > calculate_advent_sunday(year):
        return year + 1
    return year


def liturgical_year_letter(day: date) -> YearLetter:
    """Return the A/B/C lectionary year in force on day."""
    return YEAR_LETTERS[effective_liturgical_year(day) % 3]
