"""DateTime class combining a Date and a Time.

This module provides the DateTime class, which owns one Date and one
Time and delegates comparison and formatting to them.
"""

from __future__ import annotations

import logging
from typing import ClassVar

from calclock._internal.clock import split_instant, utc_now_nanos
from calclock.core.date import Date
from calclock.core.time import Time
from calclock.errors import InvalidFormatError
from calclock.format.registry import (
    DATE_TIME,
    Formatter,
    FormatterRegistry,
    default_registry,
)
from calclock.result import Result, attempt
from calclock.units.precision import Precision
from calclock.units.timezone import TimeZone

logger = logging.getLogger(__name__)

SEPARATOR: str = "T"


class DateTime:
    """A calendar day together with a clock reading on that day.

    DateTime owns its Date and Time. The ``date`` and ``time``
    properties return those owned objects, so mutating them mutates the
    DateTime; the setters and the constructor store copies.

    Ordering is lexicographic: the dates are compared first, then the
    times. Times of differing precision are never equal and never
    ordered, so two DateTimes on the same day whose times differ in
    precision are neither equal nor ordered.

    Attributes:
        date: The Date part.
        time: The Time part.

    Examples:
        >>> dt = DateTime.from_string("2024-02-29T23:59:59")
        >>> dt.to_string()
        '2024-02-29T23:59:59+00'
        >>> dt.date.year
        2024
        >>> dt.time.precision
        <Precision.SECONDS: 1>
    """

    __slots__ = ("_date", "_time", "_formatter")

    _formatter_kind: ClassVar[str] = DATE_TIME

    def __init__(self, date: Date, time: Time) -> None:
        """Create a DateTime from a Date and a Time.

        Args:
            date: The calendar day (copied).
            time: The clock reading (copied).

        Examples:
            >>> DateTime(Date(15, 1, 2024), Time(14, 30))
            DateTime(Date(15, 1, 2024), Time(14, 30))
        """
        self._date: Date = date.copy()
        self._time: Time = time.copy()
        self._formatter: Formatter | None = None

    @classmethod
    def now(
        cls,
        precision: Precision = Precision.SECONDS,
        offset: TimeZone | int = TimeZone.UTC,
    ) -> DateTime:
        """Return the current date and time at a fixed UTC offset.

        Both parts come from one reading of the system clock, so they
        cannot straddle midnight.

        Args:
            precision: Precision of the time part.
            offset: The whole-hour offset to observe the clock from.
        """
        zone = TimeZone.from_hours(offset)
        days, nanos = split_instant(utc_now_nanos(), zone.seconds)
        instance = object.__new__(cls)
        instance._date = Date._from_day_count(days)
        instance._time = Time._from_ticks(precision, nanos // precision.nanos, zone)
        instance._formatter = None
        return instance

    @classmethod
    def local_date_time(cls, precision: Precision = Precision.SECONDS) -> DateTime:
        """Return the current date and time at the platform's local offset.

        The platform offset is truncated to whole hours and clamped to
        -12..+12.
        """
        return cls.now(precision, TimeZone.local())

    @classmethod
    def from_string(cls, text: str) -> DateTime:
        """Parse ``<date>T<time>``.

        The string is split at the first 'T'. The date part accepts
        the Date layouts and the time part the Time layouts, optional
        offset included.

        Raises:
            InvalidFormatError: If there is no 'T' or either part is
                malformed.
            RangeError: If a component is out of range.

        Examples:
            >>> DateTime.from_string("20240229T10:15-05")
            DateTime(Date(29, 2, 2024), Time(10, 15, offset=-5))

            >>> DateTime.from_string("2024-02-29 10:15")
            Traceback (most recent call last):
            ...
            InvalidFormatError: missing 'T' between date and time in '2024-02-29 10:15'
        """
        date_text, separator, time_text = text.partition(SEPARATOR)
        if not separator:
            logger.debug("rejected date-time text %r: no separator", text)
            raise InvalidFormatError(
                f"missing {SEPARATOR!r} between date and time in {text!r}"
            )
        instance = object.__new__(cls)
        instance._date = Date.from_string(date_text)
        instance._time = Time.from_string(time_text)
        instance._formatter = None
        return instance

    @classmethod
    def try_from_string(cls, text: str) -> Result[DateTime]:
        """Parse like ``from_string`` but return a Result instead of raising."""
        return attempt(cls.from_string, text)

    @property
    def date(self) -> Date:
        return self._date

    @date.setter
    def date(self, value: Date) -> None:
        self._date = value.copy()

    @property
    def time(self) -> Time:
        return self._time

    @time.setter
    def time(self, value: Time) -> None:
        self._time = value.copy()

    def copy(self) -> DateTime:
        """Return an independent copy, local formatters included."""
        instance = object.__new__(type(self))
        instance._date = self._date.copy()
        instance._time = self._time.copy()
        instance._formatter = self._formatter
        return instance

    __copy__ = copy

    def set_date_local_formatter(self, formatter: Formatter | None) -> None:
        """Set the local formatter of the Date part."""
        self._date.set_local_formatter(formatter)

    def set_time_local_formatter(self, formatter: Formatter | None) -> None:
        """Set the local formatter of the Time part."""
        self._time.set_local_formatter(formatter)

    def set_local_formatter(self, formatter: Formatter | None) -> None:
        """Render this instance with ``formatter``; None removes it."""
        self._formatter = formatter

    @classmethod
    def set_global_formatter(cls, formatter: Formatter | None) -> None:
        """Set the DateTime formatter of the process default registry.

        None restores the built-in ``<Date>T<Time>`` renderer.
        """
        default_registry().register(cls._formatter_kind, formatter)

    def to_string(self, registry: FormatterRegistry | None = None) -> str:
        """Render this date-time.

        The local formatter wins if set; otherwise the formatter
        registered in ``registry`` (the process default when None). The
        built-in renderer formats both parts through the same registry.
        """
        if self._formatter is not None:
            return self._formatter(self)
        if registry is None:
            registry = default_registry()
        return registry.render(self._formatter_kind, self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._date == other._date and self._time == other._time

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Check if this value is earlier than another.

        True when the date is earlier, or the dates are equal and the
        time is earlier.
        """
        if not isinstance(other, DateTime):
            return NotImplemented
        if self._date != other._date:
            return self._date < other._date
        return self._time < other._time

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        if self._date != other._date:
            return self._date < other._date
        return self._time <= other._time

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        if self._date != other._date:
            return self._date > other._date
        return self._time > other._time

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        if self._date != other._date:
            return self._date > other._date
        return self._time >= other._time

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DateTime({self._date!r}, {self._time!r})"

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["DateTime"]
