# src/datekit/calendar/__init__.py
"""
datekit.calendar
~~~~~~~~~~~~~~~~

Gregorian calendar navigation and period arithmetic.  Every function is
pure: ``date`` and ``datetime`` values are never modified, a new value is
returned instead.

Basic usage::

    from datetime import date
    from datekit.calendar import next_friday_the_13th, weekend_days_in_month

    next_friday_the_13th(date(2024, 1, 13))   # → date(2024, 9, 13)
    weekend_days_in_month(12, 2023)           # → 10

NumPy arrays are accepted by the month-level counters::

    import numpy as np
    weekend_days_in_month(np.arange(1, 13), 2024)

Public API
----------
DatePeriod             Inclusive ``[start, end]`` range.
next_friday            First Friday strictly after a date.
next_friday_the_13th   First Friday the 13th strictly after a date.
days_in_month          Day count of a month.
is_leap_year           Gregorian leap-year rule.
quarter_of             Quarter (1-4) of a date.
days_in_period         Inclusive day count between two instants.
is_within_period       Inclusive range membership.
weekend_days_in_month  Saturdays plus Sundays in a month.
iso_week_number        Monday-based week of the year (week 1 holds Jan 1).
"""

from __future__ import annotations

from datekit.calendar.navigation import (
    days_in_month,
    is_leap_year,
    next_friday,
    next_friday_the_13th,
    quarter_of,
)
from datekit.calendar.periods import (
    DatePeriod,
    days_in_period,
    is_within_period,
    iso_week_number,
    weekend_days_in_month,
)

__all__ = [
    "DatePeriod",
    "next_friday",
    "next_friday_the_13th",
    "days_in_month",
    "is_leap_year",
    "quarter_of",
    "days_in_period",
    "is_within_period",
    "weekend_days_in_month",
    "iso_week_number",
]
