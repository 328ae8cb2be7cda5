from __future__ import annotations

from datetime import date, datetime
from typing import Union

import numpy as np
from dateutil.relativedelta import FR, relativedelta

from .._constants import FRIDAY, MONTHS_PER_QUARTER, MONTHS_PER_YEAR
from .._exceptions import InvalidDateError
from .._parse import DateLike, to_calendar_value

ArrayLike = Union[int, "np.ndarray"]

_THIRTEENTH = 13
_ONE_MONTH = relativedelta(months=1)


def _same_kind(template: date, day: date) -> date:
    # Datetime in, datetime (midnight, same tzinfo) out.
    if isinstance(template, datetime):
        return datetime(day.year, day.month, day.day, tzinfo=template.tzinfo)
    return day


def month_bounds(month: ArrayLike, year: ArrayLike) -> tuple[np.ndarray, np.ndarray]:
    """
    First day of the month and first day of the following month, as
    ``datetime64[D]`` arrays broadcast over ``month`` and ``year``.
    """
    m = np.atleast_1d(np.asarray(month, dtype=np.int64))
    y = np.atleast_1d(np.asarray(year, dtype=np.int64))
    m, y = np.broadcast_arrays(m, y)

    if m.size and (m.min() < 1 or m.max() > MONTHS_PER_YEAR):
        raise InvalidDateError(f"Month must be in 1..12; got {month!r}.")

    first = ((y - 1970) * MONTHS_PER_YEAR + (m - 1)).astype("datetime64[M]")
    return first.astype("datetime64[D]"), (first + 1).astype("datetime64[D]")


def days_in_month(month: ArrayLike, year: ArrayLike) -> ArrayLike:
    """
    Number of days in ``month`` (1-12) of ``year``.

    NumPy arrays are accepted for either argument and broadcast together.
    """
    scalar = np.ndim(month) == 0 and np.ndim(year) == 0
    begin, end = month_bounds(month, year)
    result = (end - begin).astype(np.int64)
    return int(result[0]) if scalar else result.reshape(np.broadcast(month, year).shape)


def is_leap_year(value: Union[DateLike, int]) -> bool:
    if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
        year = int(value)
    else:
        year = to_calendar_value(value).year

    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def quarter_of(value: DateLike) -> int:
    return (to_calendar_value(value).month - 1) // MONTHS_PER_QUARTER + 1


def next_friday(value: DateLike) -> date:
    """
    The first Friday strictly after ``value``.

    A Friday yields the Friday a week later.  ``date`` and ``datetime``
    inputs keep their type and time of day; strings come back as UTC
    datetimes.
    """
    return to_calendar_value(value) + relativedelta(days=1, weekday=FR)


def next_friday_the_13th(value: DateLike) -> date:
    """
    The first Friday falling on the 13th of a month, strictly after ``value``.

    Datetime inputs give a datetime at midnight in the same timezone.
    """
    current = to_calendar_value(value)
    candidate = date(current.year, current.month, _THIRTEENTH)
    if current.day >= _THIRTEENTH:
        candidate += _ONE_MONTH

    while candidate.weekday() != FRIDAY:
        candidate += _ONE_MONTH
    return _same_kind(current, candidate)
