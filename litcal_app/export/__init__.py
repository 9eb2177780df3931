"""
JSON export of computed calendars.
"""
from .json_export import calendar_to_json, feasts_to_json

__all__ = ["calendar_to_json", "feasts_to_json"]
