from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional

from .._constants import DEFAULT_TIMEZONE, EPOCH, WEEKDAY_NAMES
from .._parse import DateLike, to_date, to_datetime, to_wall_clock

_ONE_MILLISECOND = timedelta(milliseconds=1)


def to_epoch_millis(value: DateLike) -> int:
    """Milliseconds elapsed since 1970-01-01T00:00:00Z."""
    return (to_datetime(value) - EPOCH) // _ONE_MILLISECOND


def from_epoch_millis(millis: int, tz: Optional[tzinfo] = None) -> datetime:
    return (EPOCH + timedelta(milliseconds=millis)).astimezone(tz or DEFAULT_TIMEZONE)


def to_clock_string(value: DateLike, tz: Optional[tzinfo] = None) -> str:
    """
    Zero-padded 24-hour ``HH:MM:SS``.

    Naive values render their own wall clock; aware values are shown in
    ``tz`` (UTC when omitted).
    """
    dt = to_wall_clock(value)
    if dt.tzinfo is not None:
        dt = dt.astimezone(tz or DEFAULT_TIMEZONE)
    return f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"


def to_weekday_name(value: DateLike) -> str:
    return WEEKDAY_NAMES[to_date(value).weekday()]


def to_display_string(value: DateLike) -> str:
    """US-style ``M/D/YYYY, h:mm:ss AM|PM``, always evaluated in UTC."""
    dt = to_datetime(value).astimezone(timezone.utc)
    hour = dt.hour % 12 or 12
    marker = "AM" if dt.hour < 12 else "PM"
    return (
        f"{dt.month}/{dt.day}/{dt.year}, "
        f"{hour}:{dt.minute:02d}:{dt.second:02d} {marker}"
    )
