"""Feast date calculations: Computus and the feasts derived from it"""

from .easter import calculate_easter, paschal_month_day
from .moveable import (
    calculate_advent_sunday,
    calculate_ash_wednesday,
    calculate_good_friday,
    calculate_maundy_thursday,
    calculate_palm_sunday,
    calculate_pentecost,
    feasts_for_year,
)

__all__ = [
    "calculate_easter",
    "paschal_month_day",
    "calculate_ash_wednesday",
    "calculate_maundy_thursday",
    "calculate_good_friday",
    "calculate_palm_sunday",
    "calculate_pentecost",
    "calculate_advent_sunday",
    "feasts_for_year",
]
