"""Fixed whole-hour UTC offsets.

This module provides the TimeZone enum. Only whole-hour deviations from
UTC are modelled; there is no daylight saving and no named-zone
database.
"""

from __future__ import annotations

from enum import IntEnum

from calclock._internal.clock import local_offset_seconds
from calclock._internal.constants import (
    MAX_OFFSET_HOURS,
    MIN_OFFSET_HOURS,
    SECONDS_PER_HOUR,
)
from calclock._internal.validation import validate_offset


class TimeZone(IntEnum):
    """A UTC offset in whole hours, from -12 to +12.

    Positive values are east of UTC (ahead in time), negative values
    are west of UTC.

    Examples:
        >>> TimeZone.from_hours(-5)
        <TimeZone.WEST_5: -5>

        >>> TimeZone.EAST_3.label
        '+03'

        >>> TimeZone.WEST_11.label
        '-11'
    """

    WEST_12 = -12
    WEST_11 = -11
    WEST_10 = -10
    WEST_9 = -9
    WEST_8 = -8
    WEST_7 = -7
    WEST_6 = -6
    WEST_5 = -5
    WEST_4 = -4
    WEST_3 = -3
    WEST_2 = -2
    WEST_1 = -1
    UTC = 0
    EAST_1 = 1
    EAST_2 = 2
    EAST_3 = 3
    EAST_4 = 4
    EAST_5 = 5
    EAST_6 = 6
    EAST_7 = 7
    EAST_8 = 8
    EAST_9 = 9
    EAST_10 = 10
    EAST_11 = 11
    EAST_12 = 12

    @classmethod
    def from_hours(cls, hours: int) -> TimeZone:
        """Return the zone for a whole-hour offset.

        Raises:
            RangeError: If hours is outside -12 to +12.
        """
        validate_offset(hours)
        return cls(hours)

    @classmethod
    def from_seconds(cls, seconds: int, *, clamp: bool = False) -> TimeZone:
        """Return the zone for an offset in seconds, truncated to whole hours.

        Offsets such as +05:30 lose their minutes. Offsets beyond the
        modelled range raise RangeError, or with ``clamp`` become the
        nearest end of the range.

        Examples:
            >>> TimeZone.from_seconds(19800)  # +05:30
            <TimeZone.EAST_5: 5>
            >>> TimeZone.from_seconds(-12600)  # -03:30
            <TimeZone.WEST_3: -3>
        """
        hours = abs(seconds) // SECONDS_PER_HOUR
        if seconds < 0:
            hours = -hours
        if clamp:
            hours = max(MIN_OFFSET_HOURS, min(MAX_OFFSET_HOURS, hours))
        return cls.from_hours(hours)

    @classmethod
    def local(cls) -> TimeZone:
        """Return the platform's current offset as a modelled zone.

        Minutes are truncated. Pacific offsets of +13 and +14 are clamped
        to EAST_12, so this never raises.
        """
        return cls.from_seconds(local_offset_seconds(), clamp=True)

    @property
    def hours(self) -> int:
        """Return the offset in hours."""
        return int(self)

    @property
    def seconds(self) -> int:
        """Return the offset in seconds."""
        return int(self) * SECONDS_PER_HOUR

    @property
    def label(self) -> str:
        """Return the signed two-digit form used in time strings."""
        sign = "-" if self < 0 else "+"
        return f"{sign}{abs(int(self)):02d}"


__all__ = ["TimeZone"]
