"""Argument validation for the public calendar functions."""

from datetime import MAXYEAR, MINYEAR, date, datetime
from typing import Any

from ..errors import InvalidDateError, InvalidYearError


def validate_year(year: Any) -> int:
    """
    Check that year is an int that datetime.date can represent.

    Args:
        year: Candidate civil year

    Returns:
        The year unchanged

    Raises:
        InvalidYearError: If year is not an int (bools included) or out of range
    """
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidYearError(
            f"Year must be an integer, got {type(year).__name__}: {year!r}",
            year=year,
            min_year=MINYEAR,
            max_year=MAXYEAR
        )

    if not MINYEAR <= year <= MAXYEAR:
        raise InvalidYearError(
            f"Year {year} is outside the supported range {MINYEAR}..{MAXYEAR}",
            year=year,
            min_year=MINYEAR,
            max_year=MAXYEAR
        )

    return year


def validate_calendar_date(value: Any) -> None:
    """
    Check that value is a date or datetime.

    Strings and timestamps are rejected rather than coerced.

    Raises:
        InvalidDateError: If value is neither a date nor a datetime
    """
    if not isinstance(value, (date, datetime)):
        raise InvalidDateError(
            f"Expected a date or datetime, got {type(value).__name__}: {value!r}",
            value=value,
            expected_type="datetime.date"
        )
