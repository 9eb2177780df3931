"""Data models for the moveable feasts of a single year"""

from dataclasses import asdict, dataclass
from datetime import date


@dataclass(frozen=True)
class FeastSet:
    """Derived feast dates for one civil year.

    Every date is a fixed offset from easter, except advent which is
    counted back from Christmas Day.
    """
    year: int
    easter: date
    ash_wednesday: date
    maundy_thursday: date
    good_friday: date
    palm_sunday: date
    pentecost: date
    advent: date

    @property
    def christmas(self) -> date:
        """Christmas Day of the same year"""
        return date(self.year, 12, 25)

    def as_dict(self) -> dict:
        """Feast name to date mapping, year included"""
        return asdict(self)
