"""
UTC datetime utilities for consistent timezone handling.

All datetime values in the system should be timezone-aware UTC. Timestamps
cross the wire as unix seconds; date-only values (due dates) are unix
seconds at UTC midnight.
"""

import re
from datetime import UTC, date, datetime, time

SECONDS_PER_DAY = 86_400

_DATE_INPUT_RE = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})$")


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Use this instead of:
        - datetime.now() - naive, uses local timezone
        - datetime.utcnow() - naive, deprecated in Python 3.12

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Use at repository/persistence boundaries to normalize datetimes.
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def from_timestamp_utc(timestamp: float) -> datetime:
    """
    Create a UTC-aware datetime from a Unix timestamp.
    Use instead of datetime.fromtimestamp() which returns naive local time.

    Raises:
        ValueError: If the timestamp is outside the representable range.
    """
    try:
        return datetime.fromtimestamp(timestamp, tz=UTC)
    except (OverflowError, OSError) as e:
        raise ValueError(f"Timestamp out of range: {timestamp!r}") from e


def to_unix_seconds(dt: datetime) -> int:
    """Whole unix seconds for a datetime (naive values are taken as UTC)."""
    return int(ensure_utc(dt).timestamp() // 1)


def is_utc_midnight(unix_seconds: int) -> bool:
    """True when the timestamp is exactly 00:00:00 UTC of some day."""
    return unix_seconds % SECONDS_PER_DAY == 0


def unix_seconds_utc_midnight_from_date_input(value: str) -> int:
    """Convert a ``YYYY-MM-DD`` date input to unix seconds at UTC midnight.

    The calendar date is validated, so an overflowing day such as
    ``2026-02-31`` is rejected instead of rolling over into March.

    Raises:
        ValueError: If the value is not ``YYYY-MM-DD`` or not a real date.
    """
    match = _DATE_INPUT_RE.match(value)
    if not match:
        raise ValueError("Invalid date input value")
    year, month, day = (int(part) for part in match.groups())
    try:
        day_value = date(year, month, day)
    except ValueError as e:
        raise ValueError("Invalid calendar date") from e
    midnight = datetime.combine(day_value, time.min, tzinfo=UTC)
    return to_unix_seconds(midnight)


def date_input_from_unix_seconds_utc_midnight(unix_seconds: int) -> str:
    """Format a date-only value as ``YYYY-MM-DD`` (UTC calendar date)."""
    return from_timestamp_utc(unix_seconds).date().isoformat()


def format_utc_date_from_unix_seconds(unix_seconds: int) -> str:
    """Render the UTC calendar date of a date-only value, e.g. ``Jan 22, 2026``.

    Date-only values are stored as UTC midnight; rendering them in local time
    would show the previous day west of Greenwich.
    """
    d = from_timestamp_utc(unix_seconds)
    return f"{d:%b} {d.day}, {d.year}"


def format_local_datetime_from_unix_seconds(unix_seconds: int) -> str:
    """Render a full timestamp in local time, e.g. ``Jan 22, 2026, 3:04 PM``."""
    local = from_timestamp_utc(unix_seconds).astimezone()
    clock = local.strftime("%I:%M %p").lstrip("0")
    return f"{local:%b} {local.day}, {local.year}, {clock}"
