"""
Logging configuration and utilities for the liturgical calendar library.
"""
from .config import configure_logging, get_calendar_logger, get_logger, log_season_transition

__all__ = ["configure_logging", "get_calendar_logger", "get_logger", "log_season_transition"]
