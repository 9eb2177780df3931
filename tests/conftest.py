"""Pytest configuration and shared fixtures."""

import pytest
from datetime import date

from litcal_app.almanac import LiturgicalAlmanac
from litcal_app.feasts.moveable import feasts_for_year
from litcal_app.models.feasts import FeastSet
from litcal_app.season.calendar import build_year_calendar
from litcal_app.season.models import YearCalendar


@pytest.fixture
def almanac() -> LiturgicalAlmanac:
    """Almanac built from in-code defaults only."""
    return LiturgicalAlmanac()


@pytest.fixture
def feasts_2024() -> FeastSet:
    """Feast dates for 2024 (Easter on March 31)."""
    return feasts_for_year(2024)


@pytest.fixture
def calendar_2024() -> YearCalendar:
    """Sunday calendar for 2024 with default week numbering."""
    return build_year_calendar(2024)


@pytest.fixture
def sample_years() -> list[int]:
    """Years with early, late and ordinary Easter dates."""
    return [1583, 1818, 1943, 2000, 2008, 2011, 2023, 2024, 2025, 2038, 2285, 9999]


@pytest.fixture
def known_easter_dates() -> dict[int, date]:
    """Published Western Easter dates."""
    return {
        1818: date(1818, 3, 22),
        1943: date(1943, 4, 25),
        2000: date(2000, 4, 23),
        2008: date(2008, 3, 23),
        2011: date(2011, 4, 24),
        2019: date(2019, 4, 21),
        2022: date(2022, 4, 17),
        2023: date(2023, 4, 9),
        2024: date(2024, 3, 31),
        2025: date(2025, 4, 20),
        2026: date(2026, 4, 5),
        2038: date(2038, 4, 25),
        2285: date(2285, 3, 22),
    }
