# src/datekit/schedule/__init__.py
"""
datekit.schedule
~~~~~~~~~~~~~~~~

Work/off rotations laid over a date period.  A rotation of ``w`` work days
followed by ``o`` off days repeats from the first day of the period; dates
are read and written as ``DD-MM-YYYY``.

Basic usage::

    from datekit.schedule import WorkSchedule, work_schedule

    work_schedule({"start": "01-01-2024", "end": "10-01-2024"}, 1, 1)
    # → ['01-01-2024', '03-01-2024', '05-01-2024', '07-01-2024', '09-01-2024']

    rota = WorkSchedule(2, 2)
    rota.add_holiday("02-01-2024")
    rota.count({"start": "01-01-2024", "end": "08-01-2024"})   # → 3

Public API
----------
WorkSchedule   Reusable rotation with holiday overrides.
work_schedule  One-shot rotation over a period.
"""

from __future__ import annotations

from datekit.schedule.schedule import WorkSchedule, work_schedule

__all__ = [
    "WorkSchedule",
    "work_schedule",
]
