"""Validation utilities for Calclock.

This module provides validation decorators and utilities for
ensuring temporal values are within valid ranges.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, TypeVar, ParamSpec

from calclock._internal.constants import (
    MAX_OFFSET_HOURS,
    MAX_YEAR,
    MIN_OFFSET_HOURS,
    START_YEAR,
)
from calclock.errors import RangeError

P = ParamSpec("P")
T = TypeVar("T")


def validate_range(
    **limits: tuple[int, int],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that parameters are within specified ranges.

    This decorator validates named parameters against specified (min, max)
    ranges, raising RangeError if any value is out of range. Parameters
    passed as None are skipped.

    Args:
        **limits: Mapping of parameter names to (min, max) tuples.
                  Both min and max are inclusive.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_range(hours=(0, 23), minutes=(0, 59))
        ... def clock(hours: int, minutes: int) -> None:
        ...     pass

        >>> clock(24, 0)  # Raises RangeError
        Traceback (most recent call last):
        ...
        RangeError: hours must be between 0 and 23, got 24
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = sig.bind_partial(*args, **kwargs)

            for param_name, (min_val, max_val) in limits.items():
                value = bound.arguments.get(param_name)
                if value is not None and (value < min_val or value > max_val):
                    raise RangeError(
                        f"{param_name} must be between {min_val} and {max_val}, "
                        f"got {value}"
                    )

            return func(*args, **kwargs)

        return wrapper

    return decorator


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Args:
        year: The year to validate.

    Raises:
        RangeError: If year is outside START_YEAR to MAX_YEAR.
    """
    if year < START_YEAR or year > MAX_YEAR:
        raise RangeError(
            f"year must be between {START_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        RangeError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise RangeError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        RangeError: If day is invalid for the month.
    """
    from calclock._internal.calendar import days_in_month

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise RangeError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_offset(hours: int) -> None:
    """Validate a whole-hour UTC offset.

    Raises:
        RangeError: If hours is outside -12 to +12.
    """
    if hours < MIN_OFFSET_HOURS or hours > MAX_OFFSET_HOURS:
        raise RangeError(
            f"offset must be between {MIN_OFFSET_HOURS} and {MAX_OFFSET_HOURS} "
            f"hours, got {hours}"
        )


__all__ = [
    "validate_range",
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_offset",
]
