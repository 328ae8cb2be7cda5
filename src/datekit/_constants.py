from __future__ import annotations

from datetime import datetime, timezone, tzinfo

MILLISECONDS_PER_SECOND = 1000
SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
MILLISECONDS_PER_DAY = (
    MILLISECONDS_PER_SECOND * SECONDS_PER_MINUTE * MINUTES_PER_HOUR * HOURS_PER_DAY
)

DAYS_PER_WEEK = 7
MONTHS_PER_YEAR = 12
MONTHS_PER_QUARTER = 3

# Monday-based, matching date.weekday().
FRIDAY = 4
WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# NumPy weekmask selecting Saturday and Sunday.
WEEKEND_MASK = "0000011"

SCHEDULE_DATE_FORMAT = "%d-%m-%Y"

DEFAULT_TIMEZONE: tzinfo = timezone.utc

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
