"""
System failure error classifications for data-integrity problems.

These exceptions signal that the calendar computation itself produced an
inconsistent result. Under correct feast arithmetic they never occur.
"""

from datetime import date
from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable calendar integrity failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class ClassificationGapError(SystemFailureError):
    """A Sunday matched none of the season rules while building a calendar."""

    def __init__(self, message: str, day: Optional[date] = None,
                 year: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.day = day
        self.year = year
