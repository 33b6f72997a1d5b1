"""Date utility tests (date-only values, formatting)."""

from datetime import datetime, timedelta, timezone

import pytest

from todai.shared.utils.datetime import (
    date_input_from_unix_seconds_utc_midnight,
    ensure_utc,
    format_local_datetime_from_unix_seconds,
    format_utc_date_from_unix_seconds,
    from_timestamp_utc,
    is_utc_midnight,
    to_unix_seconds,
    unix_seconds_utc_midnight_from_date_input,
)

JAN_22_2026 = 1_769_040_000


def test_date_input_round_trip() -> None:
    seconds = unix_seconds_utc_midnight_from_date_input("2026-01-22")
    assert seconds == JAN_22_2026
    assert date_input_from_unix_seconds_utc_midnight(seconds) == "2026-01-22"


def test_overflowing_calendar_date_rejected() -> None:
    """2026-02-31 must not roll over into March."""
    with pytest.raises(ValueError, match="Invalid calendar date"):
        unix_seconds_utc_midnight_from_date_input("2026-02-31")


@pytest.mark.parametrize("value", ["", "2026-1-22", "22-01-2026", "2026-01-22T00:00", "abcd-ef-gh"])
def test_malformed_date_input_rejected(value: str) -> None:
    with pytest.raises(ValueError, match="Invalid date input value"):
        unix_seconds_utc_midnight_from_date_input(value)


def test_leap_day() -> None:
    seconds = unix_seconds_utc_midnight_from_date_input("2028-02-29")
    assert is_utc_midnight(seconds)
    with pytest.raises(ValueError):
        unix_seconds_utc_midnight_from_date_input("2026-02-29")


def test_is_utc_midnight() -> None:
    assert is_utc_midnight(0)
    assert is_utc_midnight(JAN_22_2026)
    assert not is_utc_midnight(JAN_22_2026 + 1)


def test_format_utc_date() -> None:
    assert format_utc_date_from_unix_seconds(JAN_22_2026) == "Jan 22, 2026"
    assert format_utc_date_from_unix_seconds(JAN_22_2026 + 86_399) == "Jan 22, 2026"


def test_format_local_datetime_shape() -> None:
    text = format_local_datetime_from_unix_seconds(JAN_22_2026 + 15 * 3600 + 4 * 60)
    month_day, year, clock = text.split(", ")
    assert month_day.split()[0] in ("Jan",)
    assert year == "2026"
    assert clock.endswith(("AM", "PM"))
    assert not clock.startswith("0")


def test_to_unix_seconds_naive_is_utc() -> None:
    naive = datetime(2026, 1, 22)
    assert to_unix_seconds(naive) == JAN_22_2026


def test_ensure_utc_converts_aware() -> None:
    plus_two = datetime(2026, 1, 22, 2, 0, tzinfo=timezone(timedelta(hours=2)))
    assert ensure_utc(plus_two) == datetime(2026, 1, 22, tzinfo=timezone.utc)
    assert ensure_utc(None) is None


def test_from_timestamp_utc_out_of_range() -> None:
    with pytest.raises(ValueError):
        from_timestamp_utc(10**20)
