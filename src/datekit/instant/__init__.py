# src/datekit/instant/__init__.py
"""
datekit.instant
~~~~~~~~~~~~~~~

Conversions between date-like values, epoch milliseconds and display
strings.  Everything is evaluated in UTC unless a ``tz`` is passed, so output
does not depend on the host's locale or timezone.

Basic usage::

    from datekit.instant import to_epoch_millis, to_display_string

    to_epoch_millis("04 Dec 1995 00:12:00 UTC")        # → 818035920000
    to_display_string("2024-02-01T15:00:00.000Z")       # → '2/1/2024, 3:00:00 PM'

Public API
----------
to_epoch_millis     Milliseconds since the Unix epoch.
from_epoch_millis   Aware datetime from epoch milliseconds.
to_clock_string     ``HH:MM:SS`` wall clock.
to_weekday_name     Full English weekday name.
to_display_string   ``M/D/YYYY, h:mm:ss AM|PM``.
"""

from __future__ import annotations

from datekit.instant.conversions import (
    from_epoch_millis,
    to_clock_string,
    to_display_string,
    to_epoch_millis,
    to_weekday_name,
)

__all__ = [
    "to_epoch_millis",
    "from_epoch_millis",
    "to_clock_string",
    "to_weekday_name",
    "to_display_string",
]
