"""
Season classification and Sunday calendar module.

Classifies dates into liturgical seasons with ordered date-range rules,
resolves the A/B/C year letter, and builds per-year Sunday calendars.
"""
