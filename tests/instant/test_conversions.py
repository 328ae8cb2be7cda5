"""
tests/instant/test_conversions.py

Covers:
  - Epoch milliseconds from ISO-8601 and free-form strings, dates, datetimes
  - Inverse conversion from epoch milliseconds
  - HH:MM:SS clock strings for naive and aware values
  - Weekday names evaluated in UTC
  - US display strings, including the midnight/noon 12-hour edge cases
  - Rejection of unparseable input
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from datekit import DateKitError, InvalidDateError
from datekit._constants import DEFAULT_TIMEZONE
from datekit.instant import (
    from_epoch_millis,
    to_clock_string,
    to_display_string,
    to_epoch_millis,
    to_weekday_name,
)

PLUS_TWO = timezone(timedelta(hours=2))


# ── Epoch milliseconds ────────────────────────────────────────────────────────

class TestEpochMillis:

    def test_epoch_is_zero(self):
        assert to_epoch_millis("01 Jan 1970 00:00:00 UTC") == 0

    def test_free_form_string(self):
        assert to_epoch_millis("04 Dec 1995 00:12:00 UTC") == 818035920000

    def test_iso_string_with_millis(self):
        assert to_epoch_millis("2024-02-01T15:00:00.000Z") == 1706799600000

    def test_naive_string_is_utc(self):
        assert to_epoch_millis("1970-01-02") == 86_400_000

    def test_date_input(self):
        assert to_epoch_millis(date(1970, 1, 2)) == 86_400_000

    def test_aware_datetime_input(self):
        # 01:00 at UTC+2 is 23:00 the previous day in UTC
        assert to_epoch_millis(datetime(1970, 1, 2, 1, tzinfo=PLUS_TWO)) == 82_800_000

    def test_year_only_string_is_new_year_midnight(self):
        assert to_epoch_millis("2024") == to_epoch_millis("2024-01-01T00:00:00Z")

    def test_year_month_string_is_first_of_month(self):
        assert to_epoch_millis("2024-02") == to_epoch_millis("2024-02-01T00:00:00Z")

    def test_date_only_string_is_midnight(self):
        assert to_epoch_millis("2024-02-10") == to_epoch_millis("2024-02-10T00:00:00Z")

    def test_before_epoch_is_negative(self):
        assert to_epoch_millis("1969-12-31T23:59:59.000Z") == -1000

    def test_returns_int(self):
        assert isinstance(to_epoch_millis("2024-02-01T15:00:00.000Z"), int)

    def test_unparseable_string_raises(self):
        with pytest.raises(InvalidDateError):
            to_epoch_millis("banana")

    def test_empty_string_raises(self):
        with pytest.raises(InvalidDateError):
            to_epoch_millis("")

    def test_unsupported_type_raises(self):
        with pytest.raises(InvalidDateError):
            to_epoch_millis(12345)

    def test_invalid_date_error_is_value_error(self):
        with pytest.raises(ValueError):
            to_epoch_millis("banana")
        with pytest.raises(DateKitError):
            to_epoch_millis("banana")


class TestFromEpochMillis:

    def test_inverse_of_to_epoch_millis(self):
        assert from_epoch_millis(818035920000) == datetime(
            1995, 12, 4, 0, 12, tzinfo=timezone.utc
        )

    def test_default_timezone_is_utc(self):
        assert from_epoch_millis(0).utcoffset() == timedelta(0)

    def test_default_timezone_needs_no_tz_database(self):
        assert DEFAULT_TIMEZONE is timezone.utc
        assert from_epoch_millis(0).tzinfo is timezone.utc

    def test_explicit_timezone(self):
        dt = from_epoch_millis(0, tz=PLUS_TWO)
        assert dt.hour == 2
        assert dt.utcoffset() == timedelta(hours=2)


# ── Clock strings ─────────────────────────────────────────────────────────────

class TestClockString:

    def test_naive_datetime_renders_own_wall_clock(self):
        assert to_clock_string(datetime(2023, 5, 1, 8, 20, 55)) == "08:20:55"
        assert to_clock_string(datetime(2015, 10, 20, 23, 15, 1)) == "23:15:01"

    def test_aware_datetime_defaults_to_utc(self):
        assert to_clock_string(datetime(2024, 1, 1, 1, 2, 3, tzinfo=PLUS_TWO)) == "23:02:03"

    def test_aware_datetime_with_explicit_timezone(self):
        dt = datetime(2024, 1, 1, 23, 0, 0, tzinfo=timezone.utc)
        assert to_clock_string(dt, tz=PLUS_TWO) == "01:00:00"

    def test_iso_string(self):
        assert to_clock_string("2024-02-01T15:00:00.000Z") == "15:00:00"

    def test_date_is_midnight(self):
        assert to_clock_string(date(2024, 1, 1)) == "00:00:00"

    def test_drops_sub_second_part(self):
        assert to_clock_string(datetime(2024, 1, 1, 9, 5, 7, 999_999)) == "09:05:07"


# ── Weekday names ─────────────────────────────────────────────────────────────

class TestWeekdayName:

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("01 Jan 1970 00:00:00 UTC", "Thursday"),
            ("03 Dec 1995 00:12:00 UTC", "Sunday"),
            ("2024-01-30T00:00:00.000Z", "Tuesday"),
        ],
    )
    def test_known_dates(self, value, expected):
        assert to_weekday_name(value) == expected

    def test_offset_is_converted_to_utc(self):
        # Local Tuesday 01:00 at UTC+2 is still Monday in UTC
        assert to_weekday_name("2024-01-30T01:00:00+02:00") == "Monday"

    def test_full_week(self):
        names = [to_weekday_name(date(2024, 1, d)) for d in range(1, 8)]
        assert names == [
            "Monday",
            "Tuesday",
            "Wednesday",
            "Thursday",
            "Friday",
            "Saturday",
            "Sunday",
        ]


# ── Display strings ───────────────────────────────────────────────────────────

class TestDisplayString:

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("2024-02-01T15:00:00.000Z", "2/1/2024, 3:00:00 PM"),
            ("1999-01-05T02:20:00.000Z", "1/5/1999, 2:20:00 AM"),
            ("2010-12-15T22:59:00.000Z", "12/15/2010, 10:59:00 PM"),
        ],
    )
    def test_known_dates(self, value, expected):
        assert to_display_string(value) == expected

    def test_midnight_is_twelve_am(self):
        assert to_display_string("2024-02-01T00:05:09Z") == "2/1/2024, 12:05:09 AM"

    def test_noon_is_twelve_pm(self):
        assert to_display_string("2024-02-01T12:00:00Z") == "2/1/2024, 12:00:00 PM"

    def test_offset_is_converted_to_utc(self):
        assert to_display_string("2024-02-01T01:00:00+02:00") == "1/31/2024, 11:00:00 PM"

    def test_unparseable_string_raises(self):
        with pytest.raises(InvalidDateError):
            to_display_string("banana")
