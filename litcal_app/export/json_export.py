"""JSON serialization of feast sets and year calendars."""

import orjson

from ..models.feasts import FeastSet
from ..season.models import YearCalendar
from ..utils.time import format_calendar_date


def _options(pretty: bool) -> int:
    return orjson.OPT_INDENT_2 if pretty else 0


def feasts_to_json(feasts: FeastSet, pretty: bool = False) -> bytes:
    """
    Serialize a FeastSet to JSON.

    Args:
        feasts: Feast dates of one year
        pretty: Indent output by two spaces

    Returns:
        UTF-8 JSON object with ISO dates
    """
    return orjson.dumps(feasts, option=_options(pretty))


def calendar_to_json(calendar: YearCalendar, pretty: bool = False) -> bytes:
    """
    Serialize a YearCalendar to a JSON object of ``"YYYY-MM-DD": "Season N"``.

    Keys appear in date order.

    Args:
        calendar: Calendar of one year
        pretty: Indent output by two spaces

    Returns:
        UTF-8 JSON object
    """
    payload = {
        format_calendar_date(sunday): str(label)
        for sunday, label in sorted(calendar.items())
    }
    return orjson.dumps(payload, option=_options(pretty))
