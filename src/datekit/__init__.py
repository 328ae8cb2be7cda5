# src/datekit/__init__.py
"""
datekit
~~~~~~~

Pure date/time helpers: epoch and display conversions, Gregorian calendar
navigation, period arithmetic and work/off rotations.  Nothing here keeps
state or performs I/O, and every result is computed in UTC unless a
timezone is passed explicitly.

Public API
----------
See :mod:`datekit.instant`, :mod:`datekit.calendar` and
:mod:`datekit.schedule`; everything listed there is re-exported here.

DateKitError         Base exception for all datekit errors.
InvalidDateError     Unparseable or out-of-range date input.
ScheduleConfigError  Unusable work/off rotation counts.
"""

from __future__ import annotations

import logging

from datekit._exceptions import DateKitError, InvalidDateError, ScheduleConfigError
from datekit.calendar import (
    DatePeriod,
    days_in_month,
    days_in_period,
    is_leap_year,
    is_within_period,
    iso_week_number,
    next_friday,
    next_friday_the_13th,
    quarter_of,
    weekend_days_in_month,
)
from datekit.instant import (
    from_epoch_millis,
    to_clock_string,
    to_display_string,
    to_epoch_millis,
    to_weekday_name,
)
from datekit.schedule import WorkSchedule, work_schedule

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DateKitError",
    "InvalidDateError",
    "ScheduleConfigError",
    "DatePeriod",
    "WorkSchedule",
    "to_epoch_millis",
    "from_epoch_millis",
    "to_clock_string",
    "to_weekday_name",
    "to_display_string",
    "next_friday",
    "next_friday_the_13th",
    "days_in_month",
    "is_leap_year",
    "quarter_of",
    "days_in_period",
    "is_within_period",
    "weekend_days_in_month",
    "iso_week_number",
    "work_schedule",
]
