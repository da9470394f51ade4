"""Date class representing a calendar day.

This module provides the Date class for representing calendar days in
the proleptic Gregorian calendar, from 1900-01-01 onwards.
"""

from __future__ import annotations

from typing import ClassVar

from calclock._internal.calendar import (
    day_count_to_ymd,
    day_of_week,
    day_of_year,
    days_in_month,
    is_leap_year,
    ymd_to_day_count,
)
from calclock._internal.clock import split_instant, utc_now_nanos
from calclock._internal.constants import SATURDAY
from calclock._internal.validation import validate_day, validate_month, validate_year
from calclock.format.grammar import read_date
from calclock.format.registry import DATE, Formatter, FormatterRegistry, default_registry
from calclock.result import Result, attempt
from calclock.units.timezone import TimeZone


class Date:
    """A calendar day in the proleptic Gregorian calendar.

    The only stored state is the number of whole days elapsed since
    1900-01-01. Year, month, day of the month, weekday and day of the
    year are recomputed from that count on every access.

    Dates are mutable: the ``add_*`` and ``subtract_*`` methods change
    the instance in place. Use ``copy()`` to keep the original. Because
    they are mutable, dates are not hashable.

    Attributes:
        year: The year (1900 or later when constructed explicitly).
        month: The month (1-12).
        day_of_the_month: The day of the month (1-31).
        day_of_the_week: Monday=0 through Sunday=6.

    Examples:
        >>> d = Date(15, 1, 2024)
        >>> d.year
        2024
        >>> d.month
        1
        >>> d.day_of_the_month
        15

        >>> Date(29, 2, 2024)  # Valid leap year date
        Date(29, 2, 2024)

        >>> d.add_months(1)
        >>> d
        Date(15, 2, 2024)
    """

    __slots__ = ("_days", "_formatter")

    _formatter_kind: ClassVar[str] = DATE

    def __init__(self, day: int, month: int, year: int) -> None:
        """Create a Date from day, month and year.

        Args:
            day: The day of the month.
            month: The month (1-12).
            year: The year (1900-9999).

        Raises:
            RangeError: If any component is out of range.

        Examples:
            >>> Date(15, 1, 2024)
            Date(15, 1, 2024)

            >>> Date(31, 4, 2024)  # April has 30 days
            Traceback (most recent call last):
            ...
            RangeError: day must be between 1 and 30 for 2024-04, got 31
        """
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)

        self._days: int = ymd_to_day_count(year, month, day)
        self._formatter: Formatter | None = None

    @classmethod
    def _from_day_count(cls, days: int) -> Date:
        """Create a Date from a day-count without validation."""
        instance = object.__new__(cls)
        instance._days = days
        instance._formatter = None
        return instance

    @classmethod
    def from_day_count(cls, days: int) -> Date:
        """Create a Date from the number of days since 1900-01-01.

        Raises:
            RangeError: If the count names a day outside 1900-9999.

        Examples:
            >>> Date.from_day_count(0)
            Date(1, 1, 1900)
            >>> Date.from_day_count(25567)
            Date(1, 1, 1970)
        """
        year, month, day = day_count_to_ymd(days)
        return cls(day, month, year)

    @classmethod
    def now(cls, offset: TimeZone | int = TimeZone.UTC) -> Date:
        """Return the current date at a fixed UTC offset.

        Args:
            offset: The whole-hour offset to observe the date from.

        Returns:
            The current calendar day at ``offset``.

        Raises:
            RangeError: If ``offset`` is outside -12 to +12.
        """
        zone = TimeZone.from_hours(offset)
        days, _ = split_instant(utc_now_nanos(), zone.seconds)
        return cls._from_day_count(days)

    @classmethod
    def local_date(cls) -> Date:
        """Return the current date at the platform's local UTC offset.

        The platform offset is truncated to whole hours and clamped to
        -12..+12.
        """
        return cls.now(TimeZone.local())

    @classmethod
    def from_string(cls, text: str) -> Date:
        """Parse a date from YYYYMMDD or YYYY-MM-DD.

        Args:
            text: An 8 or 10 character date string.

        Returns:
            The parsed Date.

        Raises:
            InvalidFormatError: On a wrong length, a non-digit, or a
                misplaced hyphen.
            RangeError: If the date components are invalid.

        Examples:
            >>> Date.from_string("2024-02-29")
            Date(29, 2, 2024)

            >>> Date.from_string("20240229")
            Date(29, 2, 2024)

            >>> Date.from_string("2024-13-01")  # Invalid month
            Traceback (most recent call last):
            ...
            RangeError: month must be between 1 and 12, got 13
        """
        fields = read_date(text)
        return cls(fields["day"], fields["month"], fields["year"])

    @classmethod
    def try_from_string(cls, text: str) -> Result[Date]:
        """Parse like ``from_string`` but return a Result instead of raising."""
        return attempt(cls.from_string, text)

    def components(self) -> tuple[int, int, int]:
        """Return (year, month, day) in one calendar computation."""
        return day_count_to_ymd(self._days)

    @property
    def day_count(self) -> int:
        """Return the number of days since 1900-01-01."""
        return self._days

    @property
    def year(self) -> int:
        """Return the year component."""
        year, _, _ = day_count_to_ymd(self._days)
        return year

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        _, month, _ = day_count_to_ymd(self._days)
        return month

    @property
    def day_of_the_month(self) -> int:
        """Return the day of the month (1-31)."""
        _, _, day = day_count_to_ymd(self._days)
        return day

    @property
    def day_of_the_week(self) -> int:
        """Return the day of the week.

        Returns Monday as 0 through Sunday as 6.

        Examples:
            >>> Date(15, 1, 2024).day_of_the_week  # Monday
            0
            >>> Date(21, 1, 2024).day_of_the_week  # Sunday
            6
        """
        return day_of_week(self._days)

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366).

        Examples:
            >>> Date(31, 12, 2024).day_of_year  # Leap year
            366
            >>> Date(31, 12, 2023).day_of_year
            365
        """
        return day_of_year(self._days)

    @property
    def is_weekend(self) -> bool:
        """Return True on Saturdays and Sundays.

        This departs from the ``day_of_the_week > 5`` rule, which matches
        Sunday only: Saturday (5) counts as well.
        """
        return self.day_of_the_week >= SATURDAY

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date falls in a leap year."""
        return is_leap_year(self.year)

    def add_days(self, days: int) -> None:
        """Move this date forward by ``days`` days.

        Examples:
            >>> d = Date(1, 3, 2024)
            >>> d.add_days(-1)
            >>> d
            Date(29, 2, 2024)
        """
        if days == 0:
            return
        self._days += days

    def subtract_days(self, days: int) -> None:
        """Move this date back by ``days`` days."""
        if days == 0:
            return
        self._days -= days

    def add_months(self, months: int) -> None:
        """Move this date forward by ``months`` calendar months.

        The day of the month is kept; if the target month is shorter,
        the date lands on that month's last day. Crossing into
        February therefore respects the leap rule of the year being
        entered.

        Examples:
            >>> d = Date(31, 1, 2024)
            >>> d.add_months(1)  # Clamps to Feb 29
            >>> d
            Date(29, 2, 2024)

            >>> d = Date(31, 1, 2024)
            >>> d.add_months(12)
            >>> d
            Date(31, 1, 2025)
        """
        if months == 0:
            return
        self._shift_months(months)

    def subtract_months(self, months: int) -> None:
        """Move this date back by ``months`` calendar months.

        Examples:
            >>> d = Date(31, 3, 2023)
            >>> d.subtract_months(1)  # Clamps to Feb 28
            >>> d
            Date(28, 2, 2023)
        """
        if months == 0:
            return
        self._shift_months(-months)

    def add_years(self, years: int) -> None:
        """Move this date forward by ``years`` calendar years.

        Month and day are kept. February 29 moved into a year without
        a leap day becomes February 28, every other day keeps its
        place, so the number of days moved is never a flat 365 or 366.

        Examples:
            >>> d = Date(29, 2, 2024)
            >>> d.add_years(1)
            >>> d
            Date(28, 2, 2025)

            >>> d = Date(29, 2, 2024)
            >>> d.add_years(4)
            >>> d
            Date(29, 2, 2028)
        """
        if years == 0:
            return
        self._shift_years(years)

    def subtract_years(self, years: int) -> None:
        """Move this date back by ``years`` calendar years."""
        if years == 0:
            return
        self._shift_years(-years)

    def _shift_months(self, months: int) -> None:
        year, month, day = day_count_to_ymd(self._days)

        new_year, month_index = divmod(year * 12 + (month - 1) + months, 12)
        new_month = month_index + 1
        new_day = min(day, days_in_month(new_year, new_month))

        self._days = ymd_to_day_count(new_year, new_month, new_day)

    def _shift_years(self, years: int) -> None:
        year, month, day = day_count_to_ymd(self._days)
        new_year = year + years
        new_day = min(day, days_in_month(new_year, month))

        self._days = ymd_to_day_count(new_year, month, new_day)

    def copy(self) -> Date:
        """Return an independent copy, local formatter included."""
        instance = self._from_day_count(self._days)
        instance._formatter = self._formatter
        return instance

    __copy__ = copy

    def set_local_formatter(self, formatter: Formatter | None) -> None:
        """Render this instance with ``formatter``; None removes it.

        A local formatter takes precedence over the registry.
        """
        self._formatter = formatter

    @classmethod
    def set_global_formatter(cls, formatter: Formatter | None) -> None:
        """Set the Date formatter of the process default registry.

        None restores the built-in YYYY-MM-DD renderer.
        """
        default_registry().register(cls._formatter_kind, formatter)

    def to_string(self, registry: FormatterRegistry | None = None) -> str:
        """Render this date.

        The local formatter wins if set; otherwise the formatter
        registered in ``registry`` (the process default when None).

        Examples:
            >>> Date(5, 3, 2024).to_string()
            '2024-03-05'
        """
        if self._formatter is not None:
            return self._formatter(self)
        if registry is None:
            registry = default_registry()
        return registry.render(self._formatter_kind, self)

    def __eq__(self, other: object) -> bool:
        """Check equality with another date.

        Examples:
            >>> Date(15, 1, 2024) == Date(15, 1, 2024)
            True
            >>> Date(15, 1, 2024) == Date(16, 1, 2024)
            False
        """
        if not isinstance(other, Date):
            return NotImplemented
        return self._days == other._days

    def __ne__(self, other: object) -> bool:
        """Check inequality with another date."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Check if this date is earlier than another."""
        if not isinstance(other, Date):
            return NotImplemented
        return self._days < other._days

    def __le__(self, other: object) -> bool:
        """Check if this date is earlier than or equal to another."""
        if not isinstance(other, Date):
            return NotImplemented
        return self._days <= other._days

    def __gt__(self, other: object) -> bool:
        """Check if this date is later than another."""
        if not isinstance(other, Date):
            return NotImplemented
        return self._days > other._days

    def __ge__(self, other: object) -> bool:
        """Check if this date is later than or equal to another."""
        if not isinstance(other, Date):
            return NotImplemented
        return self._days >= other._days

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        """Return a string like 'Date(15, 1, 2024)'."""
        year, month, day = day_count_to_ymd(self._days)
        return f"Date({day}, {month}, {year})"

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["Date"]
