"""Precision enumeration for clock values.

This module provides the Precision enum naming the five resolutions a
Time can be held at, from minutes down to nanoseconds.
"""

from __future__ import annotations

from enum import IntEnum

from calclock._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)


class Precision(IntEnum):
    """Resolution of a Time value.

    Members are ordered from coarsest to finest, so ``max()`` of two
    precisions is the finer one. Each member knows the size of one of
    its ticks in nanoseconds, which lets the clock arithmetic treat all
    five precisions with the same code.

    Examples:
        >>> Precision.SECONDS.nanos
        1000000000

        >>> Precision.MINUTES.ticks_per_day
        1440

        >>> max(Precision.MINUTES, Precision.MILLISECONDS)
        <Precision.MILLISECONDS: 2>
    """

    MINUTES = 0
    SECONDS = 1
    MILLISECONDS = 2
    MICROSECONDS = 3
    NANOSECONDS = 4

    @property
    def nanos(self) -> int:
        """Return the length of one tick in nanoseconds."""
        return _TICK_NANOS[self]

    @property
    def ticks_per_day(self) -> int:
        """Return the number of ticks in a 24 hour day."""
        return NANOS_PER_DAY // _TICK_NANOS[self]


_TICK_NANOS: dict[Precision, int] = {
    Precision.MINUTES: NANOS_PER_MINUTE,
    Precision.SECONDS: NANOS_PER_SECOND,
    Precision.MILLISECONDS: NANOS_PER_MILLISECOND,
    Precision.MICROSECONDS: NANOS_PER_MICROSECOND,
    Precision.NANOSECONDS: 1,
}


__all__ = ["Precision"]
