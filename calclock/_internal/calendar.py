"""Calendar utilities for Calclock.

This module provides internal functions for calendar calculations:
day-count conversions, weekday and leap year logic.

Day-count 0 = 1900-01-01 (a Monday)

This module is not part of the public API.
"""

from __future__ import annotations

from calclock._internal.constants import DAYS_IN_MONTH, START_YEAR


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def _ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (0001-01-01 is 1)."""
    y = year - 1
    # Floor division keeps the formula valid on both sides of year 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + _days_before_month(year, month) + day


_EPOCH_ORDINAL = _ymd_to_ordinal(START_YEAR, 1, 1)


def ymd_to_day_count(year: int, month: int, day: int) -> int:
    """Convert year, month, day to a day-count since 1900-01-01.

    The components are not validated; callers check them first.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        Days elapsed since 1900-01-01 (negative before it).

    Examples:
        >>> ymd_to_day_count(1900, 1, 1)
        0
        >>> ymd_to_day_count(1970, 1, 1)
        25567
        >>> ymd_to_day_count(2024, 2, 29)
        45349
    """
    return _ymd_to_ordinal(year, month, day) - _EPOCH_ORDINAL


def _resolve_year(day_count: int) -> tuple[int, int]:
    """Split a day-count into its year and 1-indexed day of that year."""
    # n is 0-indexed days since 0001-01-01
    n = day_count + _EPOCH_ORDINAL - 1

    # 400-year cycles: each has 146097 days
    n400, n = divmod(n, 146097)
    # 100-year cycles within the 400: each has 36524 days (except last)
    n100, n = divmod(n, 36524)
    # 4-year cycles within the 100: each has 1461 days
    n4, n = divmod(n, 1461)
    # Years within the 4-year cycle: each has 365 days (except leap year)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap cycle overflows into a fifth "year"
    if n1 == 4 or n100 == 4:
        return year - 1, 366

    return year, n + 1


def day_count_to_ymd(day_count: int) -> tuple[int, int, int]:
    """Convert a day-count since 1900-01-01 to year, month, day.

    The year is resolved first; only then is the month table walked,
    with February's length taken from that computed year.

    Args:
        day_count: Days elapsed since 1900-01-01.

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> day_count_to_ymd(0)
        (1900, 1, 1)
        >>> day_count_to_ymd(59)
        (1900, 3, 1)
        >>> day_count_to_ymd(45349)
        (2024, 2, 29)
    """
    year, doy = _resolve_year(day_count)
    for month in range(1, 13):
        length = days_in_month(year, month)
        if doy <= length:
            return (year, month, doy)
        doy -= length

    # Should never reach here for a valid day of year
    raise ValueError(f"Invalid day-count: {day_count}")


def day_of_week(day_count: int) -> int:
    """Return the day of week for a day-count (Monday=0, Sunday=6).

    Day-count 0 is 1900-01-01, which was a Monday, so the remainder
    modulo 7 is the weekday directly. Moving the epoch changes this
    mapping.

    Examples:
        >>> day_of_week(0)  # 1900-01-01
        0
        >>> day_of_week(6)  # 1900-01-07
        6
    """
    return day_count % 7


def day_of_year(day_count: int) -> int:
    """Return the 1-indexed day of the year (1-366) for a day-count."""
    _, doy = _resolve_year(day_count)
    return doy


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "ymd_to_day_count",
    "day_count_to_ymd",
    "day_of_week",
    "day_of_year",
]
