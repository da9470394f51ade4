"""System clock access for Calclock.

A single reading of the wall clock is split into a day-count and the
nanoseconds elapsed since that day's midnight, so that a date and a
time taken for "now" always describe the same instant.

This module is not part of the public API.
"""

from __future__ import annotations

import time as _time

from calclock._internal.constants import (
    DAYS_1900_TO_UNIX_EPOCH,
    NANOS_PER_DAY,
    NANOS_PER_SECOND,
)


def utc_now_nanos() -> int:
    """Return nanoseconds since the Unix epoch."""
    return _time.time_ns()


def split_instant(unix_nanos: int, offset_seconds: int = 0) -> tuple[int, int]:
    """Split a Unix timestamp into (day-count, nanoseconds of day).

    Args:
        unix_nanos: Nanoseconds since 1970-01-01T00:00:00 UTC.
        offset_seconds: Fixed UTC offset applied before splitting.

    Returns:
        Days since 1900-01-01 and nanoseconds since local midnight.

    Examples:
        >>> split_instant(0)
        (25567, 0)
        >>> split_instant(0, -3600)  # 1969-12-31T23:00 at UTC-1
        (25566, 82800000000000)
    """
    local = unix_nanos + offset_seconds * NANOS_PER_SECOND
    days, nanos = divmod(local, NANOS_PER_DAY)
    return days + DAYS_1900_TO_UNIX_EPOCH, nanos


def local_offset_seconds() -> int:
    """Return the platform's current UTC offset in seconds."""
    return _time.localtime().tm_gmtoff


__all__ = [
    "utc_now_nanos",
    "split_instant",
    "local_offset_seconds",
]
