from __future__ import annotations

from dataclasses import dataclass
from datetime import date

import numpy as np

from .._constants import DAYS_PER_WEEK, MILLISECONDS_PER_DAY, WEEKEND_MASK
from .._parse import DateLike, period_bounds, to_date, to_datetime
from ..instant.conversions import to_epoch_millis
from .navigation import ArrayLike, month_bounds


@dataclass(frozen=True, slots=True)
class DatePeriod:
    """
    Inclusive ``[start, end]`` range.

    ``start <= end`` is assumed, not checked.
    """

    start: DateLike
    end: DateLike

    @property
    def days(self) -> int:
        return days_in_period(self.start, self.end)

    def __contains__(self, value: DateLike) -> bool:
        return is_within_period(value, self)


def days_in_period(start: DateLike, end: DateLike) -> int:
    """
    Inclusive day count, ``ceil((end - start) / one day) + 1``.

    This is a timestamp difference: sub-day offsets round up, and swapping
    the arguments does not simply negate the result.
    """
    diff = to_epoch_millis(end) - to_epoch_millis(start)
    return -(-diff // MILLISECONDS_PER_DAY) + 1


def is_within_period(value: DateLike, period) -> bool:
    start, end = period_bounds(period)
    return to_datetime(start) <= to_datetime(value) <= to_datetime(end)


def weekend_days_in_month(month: ArrayLike, year: ArrayLike) -> ArrayLike:
    """
    Saturdays plus Sundays in ``month`` (1-12) of ``year``.

    Accepts NumPy arrays like :func:`days_in_month`.
    """
    scalar = np.ndim(month) == 0 and np.ndim(year) == 0
    begin, end = month_bounds(month, year)
    result = np.busday_count(begin, end, weekmask=WEEKEND_MASK)
    return int(result[0]) if scalar else result.reshape(np.broadcast(month, year).shape)


def iso_week_number(value: DateLike) -> int:
    """
    Week of the year, where week 1 holds January 1 and weeks start on Monday.

    Not ISO-8601 week numbering: late-December dates are never moved into
    week 1 of the next year, and the count can reach 54.
    """
    day = to_date(value)
    new_year = date(day.year, 1, 1)

    weeks = (day - new_year).days // DAYS_PER_WEEK + 1
    if day.weekday() < new_year.weekday():
        weeks += 1
    return weeks
