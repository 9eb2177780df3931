"""
Input error classifications for caller contract violations.

These exceptions are raised when a year, date or configuration handed to
the calendar functions cannot be computed with. They are never retried.
"""

from typing import Optional, Dict, Any


class InvalidArgumentError(ValueError):
    """Base class for arguments that violate a public function's contract."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class InvalidYearError(InvalidArgumentError):
    """Year is not an integer or cannot be represented as a calendar date."""

    def __init__(self, message: str, year: Any = None,
                 min_year: Optional[int] = None, max_year: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.year = year
        self.min_year = min_year
        self.max_year = max_year


class InvalidDateError(InvalidArgumentError):
    """Value is not a date/datetime, or its week falls outside the supported range."""

    def __init__(self, message: str, value: Any = None,
                 expected_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.value = value
        self.expected_type = expected_type


class ConfigurationError(InvalidArgumentError):
    """Merged configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
