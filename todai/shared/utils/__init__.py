"""Shared utilities: datetime and date-only conversions, generators."""

from todai.shared.utils.datetime import (
    date_input_from_unix_seconds_utc_midnight,
    ensure_utc,
    format_local_datetime_from_unix_seconds,
    format_utc_date_from_unix_seconds,
    from_timestamp_utc,
    is_utc_midnight,
    to_unix_seconds,
    unix_seconds_utc_midnight_from_date_input,
    utc_now,
)
from todai.shared.utils.generators import generate_cuid

__all__ = [
    "generate_cuid",
    "utc_now",
    "ensure_utc",
    "from_timestamp_utc",
    "to_unix_seconds",
    "is_utc_midnight",
    "unix_seconds_utc_midnight_from_date_input",
    "date_input_from_unix_seconds_utc_midnight",
    "format_utc_date_from_unix_seconds",
    "format_local_datetime_from_unix_seconds",
]
