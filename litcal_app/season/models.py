"""
Season data models for liturgical calendar classification.

This module defines immutable data structures for seasons, year letters,
classifier rules, week labels and the per-year Sunday calendar.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from datetime import date
from enum import Enum
from types import MappingProxyType


class Season(str, Enum):
    """Named liturgical seasons. An unclassified date is represented by None."""
    ADVENT = "Advent"
    CHRISTMAS = "Christmas"
    EPIPHANY = "Epiphany"
    LENT = "Lent"
    EASTER = "Easter"
    PENTECOST = "Pentecost"


class YearLetter(str, Enum):
    """Year of the three-year lectionary cycle."""
    A = "A"
    B = "B"
    C = "C"


@dataclass(frozen=True)
class SeasonRange:
    """One classifier rule: a season and a date interval."""

    season: Season
    start: date
    end: date
    include_start: bool = True
    include_end: bool = True

    def contains(self, day: date) -> bool:
        """Check whether day falls inside this interval."""
        after_start = day >= self.start if self.include_start else day > self.start
        before_end = day <= self.end if self.include_end else day < self.end
        return after_start and before_end


@dataclass(frozen=True)
class LiturgicalLabel:
    """Season and week number assigned to a Sunday."""

    season: Season
    week: int

    def __str__(self) -> str:
        return f"{self.season.value} {self.week}"


class YearCalendar(Mapping[date, LiturgicalLabel]):
    """Read-only mapping from every Sunday of a civil year to its label."""

    __slots__ = ("_year", "_weeks")

    def __init__(self, year: int, weeks: Mapping[date, LiturgicalLabel]) -> None:
        self._year = year
        self._weeks = MappingProxyType(dict(weeks))

    @property
    def year(self) -> int:
        return self._year

    def __getitem__(self, sunday: date) -> LiturgicalLabel:
        return self._weeks[sunday]

    def __iter__(self) -> Iterator[date]:
        return iter(self._weeks)

    def __len__(self) -> int:
        return len(self._weeks)

    def __repr__(self) -> str:
        return f"YearCalendar(year={self._year}, sundays={len(self._weeks)})"

    def labels(self) -> dict[date, str]:
        """Sunday to rendered label, e.g. ``"Pentecost 4"``."""
        return {sunday: str(label) for sunday, label in self._weeks.items()}
