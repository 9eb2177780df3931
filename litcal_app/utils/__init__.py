"""
Utility functions module.

Date handling shared across the calendar modules.

Date Semantics:
- All computation is at whole-day granularity
- "Today" is resolved once per public call, in the reference time zone
- Aware datetimes are converted to the reference zone before truncation
- Weeks start on Sunday
"""
