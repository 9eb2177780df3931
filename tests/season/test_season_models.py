"""Tests for season data models."""

import pytest
from datetime import date

from litcal_app.season.models import (
    LiturgicalLabel, Season, SeasonRange, YearCalendar, YearLetter
)


class TestSeason:
    """Test Season enum."""

    def test_values_are_canonical_labels(self):
        """Season values are the labels used in week strings."""
        assert [s.value for s in Season] == [
            "Advent", "Christmas", "Epiphany", "Lent", "Easter", "Pentecost"
        ]

    def test_compares_equal_to_string(self):
        """str-valued enum compares equal to its label."""
        assert Season.LENT == "Lent"

    def test_year_letters(self):
        """Year letters are A, B and C."""
        assert {letter.value for letter in YearLetter} == {"A", "B", "C"}


class TestSeasonRange:
    """Test SeasonRange interval checks."""

    def test_closed_interval(self):
        """Both ends included by default."""
        rule = SeasonRange(Season.LENT, date(2024, 2, 14), date(2024, 3, 31))
        assert rule.contains(date(2024, 2, 14))
        assert rule.contains(date(2024, 3, 31))
        assert not rule.contains(date(2024, 2, 13))
        assert not rule.contains(date(2024, 4, 1))

    def test_open_start(self):
        """include_start=False excludes the first day."""
        rule = SeasonRange(Season.EASTER, date(2024, 3, 31), date(2024, 5, 19), include_start=False)
        assert not rule.contains(date(2024, 3, 31))
        assert rule.contains(date(2024, 4, 1))
        assert rule.contains(date(2024, 5, 19))

    def test_open_end(self):
        """include_end=False excludes the last day."""
        rule = SeasonRange(Season.EPIPHANY, date(2024, 1, 6), date(2024, 2, 14), include_end=False)
        assert rule.contains(date(2024, 2, 13))
        assert not rule.contains(date(2024, 2, 14))

    def test_empty_when_start_after_end(self):
        """An inverted interval contains nothing."""
        rule = SeasonRange(Season.ADVENT, date(2024, 12, 24), date(2024, 12, 1))
        assert not rule.contains(date(2024, 12, 10))


class TestLiturgicalLabel:
    """Test LiturgicalLabel rendering."""

    def test_str(self):
        """Renders as 'Season N'."""
        assert str(LiturgicalLabel(Season.PENTECOST, 4)) == "Pentecost 4"

    def test_value_equality(self):
        """Labels compare by value."""
        assert LiturgicalLabel(Season.ADVENT, 1) == LiturgicalLabel(Season.ADVENT, 1)
        assert LiturgicalLabel(Season.ADVENT, 1) != LiturgicalLabel(Season.ADVENT, 2)


class TestYearCalendar:
    """Test the read-only YearCalendar mapping."""

    def setup_method(self):
        """Build a two-Sunday calendar."""
        self.weeks = {
            date(2024, 12, 22): LiturgicalLabel(Season.ADVENT, 3),
            date(2024, 12, 29): LiturgicalLabel(Season.CHRISTMAS, 1),
        }
        self.calendar = YearCalendar(2024, self.weeks)

    def test_mapping_protocol(self):
        """Supports len, iteration and lookup."""
        assert len(self.calendar) == 2
        assert list(self.calendar) == list(self.weeks)
        assert self.calendar[date(2024, 12, 29)].season is Season.CHRISTMAS
        assert self.calendar.year == 2024

    def test_missing_key(self):
        """Unknown dates raise KeyError."""
        with pytest.raises(KeyError):
            self.calendar[date(2024, 12, 23)]

    def test_read_only(self):
        """Item assignment is not supported."""
        with pytest.raises(TypeError):
            self.calendar[date(2024, 12, 23)] = LiturgicalLabel(Season.ADVENT, 4)

    def test_decoupled_from_source(self):
        """Mutating the source dict does not change the calendar."""
        self.weeks[date(2024, 12, 15)] = LiturgicalLabel(Season.ADVENT, 2)
        assert len(self.calendar) == 2

    def test_labels(self):
        """labels() renders every value."""
        assert self.calendar.labels() == {
            date(2024, 12, 22): "Advent 3",
            date(2024, 12, 29): "Christmas 1",
        }
