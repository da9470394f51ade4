"""Internal constants for Calclock.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000

SECONDS_PER_HOUR: int = 3600

# Year limits. Day 0 of the day-count is START_YEAR-01-01.
START_YEAR: int = 1900
MAX_YEAR: int = 9999

# 1900-01-01 .. 1970-01-01
DAYS_1900_TO_UNIX_EPOCH: int = 25567

# Day 0 (1900-01-01) was a Monday; weekdays count Monday=0 .. Sunday=6
SATURDAY: int = 5

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Whole-hour UTC offset limits
MIN_OFFSET_HOURS: int = -12
MAX_OFFSET_HOURS: int = 12


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "SECONDS_PER_HOUR",
    "START_YEAR",
    "MAX_YEAR",
    "DAYS_1900_TO_UNIX_EPOCH",
    "SATURDAY",
    "DAYS_IN_MONTH",
    "MIN_OFFSET_HOURS",
    "MAX_OFFSET_HOURS",
]
