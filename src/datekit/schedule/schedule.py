from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

import numpy as np

from .._constants import SCHEDULE_DATE_FORMAT
from .._exceptions import ScheduleConfigError
from .._parse import DateLike, parse_schedule_date, period_bounds

_LOGGER = logging.getLogger(__name__)


class WorkSchedule:
    """
    Work/off rotation: ``count_work_days`` on, ``count_off_days`` off, repeated.

    The rotation is anchored at the start of whatever period it is laid
    over.  Holidays suppress individual work days without shifting the
    rotation.
    """

    def __init__(
        self,
        count_work_days: int,
        count_off_days: int,
        holidays: Optional[Iterable[DateLike]] = None,
    ) -> None:
        if count_work_days < 1:
            raise ScheduleConfigError(
                f"count_work_days must be at least 1; got {count_work_days}."
            )
        if count_off_days < 0:
            raise ScheduleConfigError(
                f"count_off_days must be non-negative; got {count_off_days}."
            )

        self._count_work_days: int = int(count_work_days)
        self._count_off_days: int = int(count_off_days)
        self._pattern: tuple[int, ...] = (
            (1,) * self._count_work_days + (0,) * self._count_off_days
        )
        self._np_pattern: np.ndarray = np.array(self._pattern, dtype=bool)

        self._holidays: set[date] = set()
        for day in holidays or ():
            self.add_holiday(day)

    # ── holiday management ───────────────────────────────────────────────

    def add_holiday(self, day: DateLike) -> None:
        self._holidays.add(parse_schedule_date(day))

    def remove_holiday(self, day: DateLike) -> None:
        self._holidays.discard(parse_schedule_date(day))

    # ── rotation queries ─────────────────────────────────────────────────

    def is_work_day(self, day: DateLike, anchor: DateLike) -> bool:
        """Whether ``day`` is worked in a rotation that starts on ``anchor``."""
        d = parse_schedule_date(day)
        offset = (d - parse_schedule_date(anchor)).days
        if offset < 0 or d in self._holidays:
            return False
        return bool(self._np_pattern[offset % self.cycle_length])

    def work_days(self, period) -> list[date]:
        """
        Worked dates in the inclusive ``period``, ascending.

        Day ``k`` after the start is worked iff ``k mod cycle_length`` falls
        inside the work run.
        """
        start, end = period_bounds(period)
        begin = np.datetime64(parse_schedule_date(start), "D")
        finish = np.datetime64(parse_schedule_date(end), "D")

        n = int((finish - begin).astype(np.int64)) + 1
        if n <= 0:
            return []

        offsets = np.arange(n, dtype=np.int64)
        mask = self._np_pattern[offsets % self.cycle_length]
        days: list[date] = (begin + offsets[mask]).tolist()
        if self._holidays:
            days = [d for d in days if d not in self._holidays]

        _LOGGER.debug(
            "%d work day(s) between %s and %s for %s", len(days), begin, finish, self
        )
        return days

    def count(self, period) -> int:
        return len(self.work_days(period))

    def format(self, period) -> list[str]:
        return [d.strftime(SCHEDULE_DATE_FORMAT) for d in self.work_days(period)]

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def count_work_days(self) -> int:
        return self._count_work_days

    @property
    def count_off_days(self) -> int:
        return self._count_off_days

    @property
    def pattern(self) -> tuple[int, ...]:
        return self._pattern

    @property
    def cycle_length(self) -> int:
        return len(self._pattern)

    @property
    def holidays(self) -> list[date]:
        return sorted(self._holidays)

    def __repr__(self) -> str:
        return (
            f"WorkSchedule(count_work_days={self._count_work_days}, "
            f"count_off_days={self._count_off_days}, "
            f"holidays={len(self._holidays)})"
        )


def work_schedule(period, count_work_days: int, count_off_days: int) -> list[str]:
    """
    ``DD-MM-YYYY`` work dates for a ``DD-MM-YYYY`` period.

    Example::

        work_schedule({"start": "01-01-2024", "end": "15-01-2024"}, 1, 3)
        # → ['01-01-2024', '05-01-2024', '09-01-2024', '13-01-2024']
    """
    return WorkSchedule(count_work_days, count_off_days).format(period)
