"""
Error classification system for the liturgical calendar.

Input errors cover caller contract violations (bad years, dates or
configuration). System failures cover integrity problems in the computed
calendar itself.
"""

from .input_errors import (
    InvalidArgumentError,
    InvalidYearError,
    InvalidDateError,
    ConfigurationError,
)
from .system_failures import (
    SystemFailureError,
    ClassificationGapError,
)

__all__ = [
    # Input Errors
    "InvalidArgumentError",
    "InvalidYearError",
    "InvalidDateError",
    "ConfigurationError",
    # System Failures
    "SystemFailureError",
    "ClassificationGapError",
]
