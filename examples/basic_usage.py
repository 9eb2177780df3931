#!/usr/bin/env python3
"""
Basic Usage Example - litcal Liturgical Calendar

This script demonstrates the basic usage of the litcal library. It shows how to:
- Compute Easter and the moveable feasts for a year
- Find the season, year letter and week label for a date
- Build and export a full Sunday calendar
- Use a configured almanac with a different reference time zone

Run: python examples/basic_usage.py [year]
"""

import sys
from datetime import date, datetime, timezone

from litcal_app import LiturgicalAlmanac, easter_date, feast_set, liturgical_calendar
from litcal_app import liturgical_season, liturgical_week, liturgical_year
from litcal_app.export import calendar_to_json
from litcal_app.logging.config import configure_logging
from litcal_app.models.feasts import FeastSet


def print_feasts(feasts: FeastSet) -> None:
    """Print every feast date of a year."""
    print(f"Feasts for {feasts.year}:")
    for name, value in feasts.as_dict().items():
        if name == "year":
            continue
        print(f"  {name.replace('_', ' ').title():<16} {value:%a %d %b %Y}")
    print()


def print_day(day: date) -> None:
    """Print the season, year letter and week label of a date."""
    season = liturgical_season(day)
    print(f"  {day.isoformat()}  season={season.value if season else 'undefined':<10}"
          f" year={liturgical_year(day).value}  week={liturgical_week(day)}")


def main():
    """Main demonstration function."""
    configure_logging(level="WARNING")
    year = int(sys.argv[1]) if len(sys.argv) > 1 else date.today().year

    print("litcal - Basic Usage Demo")
    print("=" * 60)

    print(f"1. Easter {year}: {easter_date(year).isoformat()}")
    print()

    print("2. Moveable feasts")
    print_feasts(feast_set(year))

    print("3. A few dates through the year")
    for day in (date(year, 1, 1), date(year, 3, 1), date(year, 6, 1),
                date(year, 11, 30), date(year, 12, 25)):
        print_day(day)
    print()

    print("4. Sunday calendar")
    for sunday, label in liturgical_calendar(year).items():
        print(f"  {sunday.isoformat()}  {label}")
    print()

    print("5. JSON export (first 120 bytes)")
    almanac = LiturgicalAlmanac()
    print(f"  {calendar_to_json(almanac.year_calendar(year))[:120]!r}")
    print()

    print("6. Reference time zone")
    instant = datetime(year, 12, 1, 3, 0, tzinfo=timezone.utc)
    for tz_name in ("UTC", "America/Los_Angeles"):
        zoned = LiturgicalAlmanac(overrides={"time": {"timezone": tz_name}})
        print(f"  {instant.isoformat()} in {tz_name:<20} -> {zoned.liturgical_week(instant)}")
    print()

    print("Demo completed successfully!")


if __name__ == "__main__":
    main()
