"""Integration tests across feasts, seasons, calendars and export."""

import pytest
from datetime import date, timedelta

import orjson

from litcal_app import (
    LiturgicalAlmanac, Season, liturgical_calendar, liturgical_season, liturgical_week, year_calendar
)
from litcal_app.export import calendar_to_json, feasts_to_json


@pytest.mark.integration
class TestCalendarConsistency:
    """Cross-check the public functions against each other."""

    @pytest.mark.parametrize("year", [1943, 2000, 2023, 2024, 2025, 2285])
    def test_every_sunday_round_trips(self, year: int) -> None:
        """liturgical_week and liturgical_season agree with the calendar on every Sunday."""
        calendar = year_calendar(year)
        for sunday, label in calendar.items():
            assert liturgical_week(sunday) == str(label)
            assert liturgical_season(sunday) is label.season

    def test_days_between_sundays_share_label(self) -> None:
        """Weekdays carry the label of their Sunday across a whole year."""
        labels = liturgical_calendar(2024)
        day = date(2024, 1, 7)
        while day.year == 2024:
            sunday = day - timedelta(days=(day.weekday() + 1) % 7)
            assert liturgical_week(day) == labels[sunday]
            day += timedelta(days=3)

    def test_first_week_zero_everywhere(self) -> None:
        """Zero-based numbering is one less than default on every Sunday."""
        default = LiturgicalAlmanac().year_calendar(2024)
        zero_based = LiturgicalAlmanac(overrides={"calendar": {"first_week_number": 0}}).year_calendar(2024)
        for sunday, label in default.items():
            assert zero_based[sunday].season is label.season
            assert zero_based[sunday].week == label.week - 1


@pytest.mark.integration
class TestJsonExport:
    """Test orjson export of feasts and calendars."""

    def test_feasts_to_json(self, feasts_2024) -> None:
        """Feast dates serialize as ISO strings."""
        payload = orjson.loads(feasts_to_json(feasts_2024))
        assert payload["year"] == 2024
        assert payload["easter"] == "2024-03-31"
        assert payload["advent"] == "2024-12-01"

    def test_calendar_to_json(self, calendar_2024) -> None:
        """Calendar serializes to ordered ISO keys and string labels."""
        payload = orjson.loads(calendar_to_json(calendar_2024))
        assert len(payload) == 52
        assert list(payload) == sorted(payload)
        assert payload["2024-06-16"] == "Pentecost 4"
        assert payload["2024-12-29"] == "Christmas 1"

    def test_pretty_output(self, calendar_2024) -> None:
        """pretty=True indents but encodes the same data."""
        pretty = calendar_to_json(calendar_2024, pretty=True)
        assert b"\n  " in pretty
        assert orjson.loads(pretty) == orjson.loads(calendar_to_json(calendar_2024))

    def test_season_values_in_export(self, calendar_2024) -> None:
        """Every exported label starts with a season name."""
        names = {season.value for season in Season}
        for label in orjson.loads(calendar_to_json(calendar_2024)).values():
            assert label.rsplit(" ", 1)[0] in names
