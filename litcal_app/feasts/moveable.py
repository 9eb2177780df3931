"""Moveable feasts derived from Easter, and Advent Sunday derived from Christmas"""

from datetime import date, timedelta

from ..models.feasts import FeastSet
from ..utils.time import WEEK, sunday_on_or_before
from ..validation.arguments import validate_year
from .easter import calculate_easter

# Offsets from Easter Sunday
ASH_WEDNESDAY_OFFSET = timedelta(days=-46)
MAUNDY_THURSDAY_OFFSET = timedelta(days=-3)
GOOD_FRIDAY_OFFSET = timedelta(days=-2)
PALM_SUNDAY_OFFSET = timedelta(days=-7)
PENTECOST_OFFSET = timedelta(weeks=7)

ADVENT_SUNDAYS = 4


def calculate_ash_wednesday(year: int) -> date:
    """Ash Wednesday, 46 days before Easter"""
    return calculate_easter(year) + ASH_WEDNESDAY_OFFSET


def calculate_maundy_thursday(year: int) -> date:
    """Maundy Thursday, 3 days before Easter"""
    return calculate_easter(year) + MAUNDY_THURSDAY_OFFSET


def calculate_good_friday(year: int) -> date:
    """Good Friday, 2 days before Easter"""
    return calculate_easter(year) + GOOD_FRIDAY_OFFSET


def calculate_palm_sunday(year: int) -> date:
    """Palm Sunday, the Sunday before Easter"""
    return calculate_easter(year) + PALM_SUNDAY_OFFSET


def calculate_pentecost(year: int) -> date:
    """Pentecost, 7 weeks after Easter"""
    return calculate_easter(year) + PENTECOST_OFFSET


def calculate_advent_sunday(year: int) -> date:
    """
    First Sunday of Advent, the 4th Sunday before Christmas Day.

    The last Sunday before Christmas is the Sunday on or before Dec 24;
    three weeks earlier is Advent Sunday. Always Nov 27 .. Dec 3.

    Args:
        year: Civil year, 1..9999

    Returns:
        Advent Sunday of that year
    """
    validate_year(year)
    last_sunday = sunday_on_or_before(date(year, 12, 24))
    return last_sunday - (ADVENT_SUNDAYS - 1) * WEEK


def feasts_for_year(year: int) -> FeastSet:
    """
    Compute every moveable feast for a year from a single Easter calculation.

    Args:
        year: Civil year, 1..9999

    Returns:
        FeastSet for the year
    """
    easter = calculate_easter(year)
    return FeastSet(
        year=year,
        easter=easter,
        ash_wednesday=easter + ASH_WEDNESDAY_OFFSET,
        maundy_thursday=easter + MAUNDY_THURSDAY_OFFSET,
        good_friday=easter + GOOD_FRIDAY_OFFSET,
        palm_sunday=easter + PALM_SUNDAY_OFFSET,
        pentecost=easter + PENTECOST_OFFSET,
        advent=calculate_advent_sunday(year),
    )
