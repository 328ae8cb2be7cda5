from __future__ import annotations


class DateKitError(Exception):
    """Base exception for all datekit errors."""


class InvalidDateError(DateKitError, ValueError):
    """A date-like input could not be interpreted as a calendar date."""


class ScheduleConfigError(DateKitError, ValueError):
    """A work/off rotation was configured with unusable day counts."""
