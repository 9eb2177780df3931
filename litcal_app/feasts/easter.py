"""Computus: the date of Western Easter on the Gregorian calendar"""

from datetime import date

from ..validation.arguments import validate_year


def paschal_month_day(year: int) -> tuple[int, int]:
    """
    Month and day of Easter Sunday using the anonymous Gregorian algorithm.

    Pure integer arithmetic, defined for every integer year including those
    datetime.date cannot hold. Floor division agrees with truncating
    division for all non-negative years, and keeps epact + 1 non-zero
    for negative ones.

    Args:
        year: Proleptic Gregorian year

    Returns:
        (month, day) where month is 3 or 4
    """
    golden = year % 19
    century = year // 100
    correction = century - century // 4 - (8 * century + 13) // 25 + 19 * golden + 15
    epact = correction % 30

    # Epact 28/29 adjustments for the paschal full moon
    full_moon = epact // 28
    offset = epact - full_moon * (1 - full_moon * (29 // (epact + 1)) * ((21 - golden) // 11))

    weekday = (year + year // 4 + offset + 2 - century + century // 4) % 7
    paschal_number = offset - weekday

    month = 3 + (paschal_number + 40) // 44
    day = paschal_number + 28 - 31 * (month // 4)
    return month, day


def calculate_easter(year: int) -> date:
    """
    Calculate the date of Easter Sunday for a year.

    Args:
        year: Civil year, 1..9999

    Returns:
        Easter Sunday

    Raises:
        InvalidYearError: If year is not a representable integer year
    """
    validate_year(year)
    month, day = paschal_month_day(year)
    return date(year, month, day)
