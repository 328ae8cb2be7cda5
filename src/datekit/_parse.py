"""
Coercion of date-like inputs.

Every public operation accepts a ``str``, a ``datetime.date`` or a
``datetime.datetime``.  Strings are parsed with :mod:`dateutil`, so both
ISO-8601 (``'2024-02-01T15:00:00.000Z'``) and free-form text
(``'04 Dec 1995 00:12:00 UTC'``) are understood.  Naive values are taken to
be UTC.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any, Union

from dateutil import parser as _parser

from ._constants import SCHEDULE_DATE_FORMAT
from ._exceptions import InvalidDateError

_LOGGER = logging.getLogger(__name__)

# Fields missing from a string fall back to January 1, midnight.
_PARSE_DEFAULT = datetime(1970, 1, 1)

DateLike = Union[str, date, datetime]


def parse_string(value: str) -> datetime:
    try:
        return _parser.parse(value, default=_PARSE_DEFAULT)
    except (ValueError, OverflowError) as exc:
        _LOGGER.debug("Could not parse %r as a date: %s", value, exc)
        raise InvalidDateError(f"Unparseable date string: {value!r}.") from exc


def to_datetime(value: DateLike) -> datetime:
    """Return an aware datetime; naive values are pinned to UTC."""
    if isinstance(value, str):
        value = parse_string(value)
    elif isinstance(value, datetime):
        pass
    elif isinstance(value, date):
        value = datetime(value.year, value.month, value.day)
    else:
        raise InvalidDateError(
            f"Expected a date string, date or datetime; got {type(value).__name__}."
        )

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def to_wall_clock(value: DateLike) -> datetime:
    """Like :func:`to_datetime` but leaves naive values naive."""
    if isinstance(value, str):
        return parse_string(value)
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    raise InvalidDateError(
        f"Expected a date string, date or datetime; got {type(value).__name__}."
    )


def to_date(value: DateLike) -> date:
    """Calendar date of ``value`` as seen in UTC."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    return to_datetime(value).astimezone(timezone.utc).date()


def parse_schedule_date(value: DateLike) -> date:
    # Schedules speak DD-MM-YYYY; other date-likes go through the generic path.
    if isinstance(value, str):
        try:
            return datetime.strptime(value, SCHEDULE_DATE_FORMAT).date()
        except ValueError as exc:
            _LOGGER.debug("Could not parse %r as DD-MM-YYYY: %s", value, exc)
            raise InvalidDateError(
                f"Expected a DD-MM-YYYY date; got {value!r}."
            ) from exc
    return to_date(value)


def period_bounds(period: Any) -> tuple[Any, Any]:
    """Unpack ``(start, end)`` from a DatePeriod, a mapping or a 2-tuple."""
    if isinstance(period, Mapping):
        try:
            return period["start"], period["end"]
        except KeyError as exc:
            raise InvalidDateError(
                f"Period mapping is missing the {exc.args[0]!r} key."
            ) from exc
    if hasattr(period, "start") and hasattr(period, "end"):
        return period.start, period.end
    try:
        start, end = period
    except (TypeError, ValueError) as exc:
        raise InvalidDateError(
            f"Expected a period with start and end; got {period!r}."
        ) from exc
    return start, end


def to_calendar_value(value: DateLike) -> date:
    """Pass ``date``/``datetime`` through untouched; parse strings to a UTC datetime."""
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return to_datetime(value).astimezone(timezone.utc)
    raise InvalidDateError(
        f"Expected a date string, date or datetime; got {type(value).__name__}."
    )
