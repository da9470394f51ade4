"""Time class representing a clock reading within a day.

This module provides the Time class: a time of day held at one of five
precisions (minutes to nanoseconds) together with a fixed whole-hour
UTC offset.
"""

from __future__ import annotations

from typing import ClassVar

from calclock._internal.clock import split_instant, utc_now_nanos
from calclock._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from calclock._internal.validation import validate_range
from calclock.format.grammar import read_time
from calclock.format.registry import TIME, Formatter, FormatterRegistry, default_registry
from calclock.result import Result, attempt
from calclock.units.precision import Precision
from calclock.units.timezone import TimeZone

# Constructor components finer than minutes, coarsest first
_SUB_MINUTE_FIELDS: tuple[str, ...] = (
    "seconds",
    "milliseconds",
    "microseconds",
    "nanoseconds",
)


class Time:
    """A time of day at a fixed precision and a whole-hour UTC offset.

    Time stores the number of whole ticks of its precision elapsed since
    local midnight, always less than one day. The precision is part of
    the value: ``Time(10, 0)`` (minutes) and ``Time(10, 0, 0)``
    (seconds) are different values.

    Comparisons are only defined between equal precisions. Values of
    differing precision are never equal and never ordered: ``==``
    returns False and every ordering operator returns False. Use
    ``to_precision`` to bring two values to a common precision before
    comparing. The offset does not take part in comparison.

    Arithmetic changes the instance in place and wraps around midnight.
    Amounts finer than the precision's resolution are dropped.

    Attributes:
        hours: The hour (0-23).
        minutes: The minute (0-59).
        seconds: The second (0-59), 0 below SECONDS precision.
        milliseconds: The millisecond (0-999), 0 below MILLISECONDS.
        microseconds: The microsecond (0-999), 0 below MICROSECONDS.
        nanoseconds: The nanosecond (0-999), 0 below NANOSECONDS.
        precision: The Precision of the value.
        offset: The TimeZone offset.

    Examples:
        >>> t = Time(23, 59)
        >>> t.precision
        <Precision.MINUTES: 0>
        >>> t.add_minutes(1)
        >>> t.to_string()
        '00:00+00'

        >>> t = Time(12, 30, 45, 123)
        >>> t.milliseconds
        123
        >>> t.microseconds
        0
    """

    __slots__ = ("_precision", "_ticks", "_offset", "_formatter")

    _formatter_kind: ClassVar[str] = TIME

    @validate_range(
        hours=(0, 23),
        minutes=(0, 59),
        seconds=(0, 59),
        milliseconds=(0, 999),
        microseconds=(0, 999),
        nanoseconds=(0, 999),
    )
    def __init__(
        self,
        hours: int,
        minutes: int,
        seconds: int | None = None,
        milliseconds: int | None = None,
        microseconds: int | None = None,
        nanoseconds: int | None = None,
        *,
        offset: TimeZone | int = TimeZone.UTC,
    ) -> None:
        """Create a Time from its components.

        The precision is the finest component supplied. Sub-minute
        components must be supplied coarsest first: milliseconds need
        seconds, microseconds need milliseconds, and so on.

        Args:
            hours: The hour (0-23).
            minutes: The minute (0-59).
            seconds: The second (0-59).
            milliseconds: The millisecond (0-999).
            microseconds: The microsecond (0-999).
            nanoseconds: The nanosecond (0-999).
            offset: Whole-hour UTC offset (-12 to +12).

        Raises:
            RangeError: If any component or the offset is out of range.
            TypeError: If a component is given without the coarser ones.

        Examples:
            >>> Time(14, 30)
            Time(14, 30)

            >>> Time(14, 30, 45, 1, 2, 3)
            Time(14, 30, 45, 1, 2, 3)

            >>> Time(24, 0)
            Traceback (most recent call last):
            ...
            RangeError: hours must be between 0 and 23, got 24
        """
        values = (seconds, milliseconds, microseconds, nanoseconds)
        supplied = 0
        for value in values:
            if value is None:
                break
            supplied += 1
        for name, value in zip(_SUB_MINUTE_FIELDS[supplied:], values[supplied:]):
            if value is not None:
                raise TypeError(
                    f"{name} requires {_SUB_MINUTE_FIELDS[supplied]} to be given"
                )

        precision = Precision(supplied)
        nanos = (
            hours * NANOS_PER_HOUR
            + minutes * NANOS_PER_MINUTE
            + (seconds or 0) * NANOS_PER_SECOND
            + (milliseconds or 0) * NANOS_PER_MILLISECOND
            + (microseconds or 0) * NANOS_PER_MICROSECOND
            + (nanoseconds or 0)
        )

        self._precision: Precision = precision
        self._ticks: int = nanos // precision.nanos
        self._offset: TimeZone = TimeZone.from_hours(offset)
        self._formatter: Formatter | None = None

    @classmethod
    def _from_ticks(
        cls,
        precision: Precision,
        ticks: int,
        offset: TimeZone = TimeZone.UTC,
    ) -> Time:
        """Create a Time from ticks since midnight without validation.

        Args:
            precision: Precision of ``ticks``.
            ticks: Ticks since midnight [0, precision.ticks_per_day).
            offset: The UTC offset.
        """
        instance = object.__new__(cls)
        instance._precision = precision
        instance._ticks = ticks
        instance._offset = offset
        instance._formatter = None
        return instance

    @classmethod
    def now(
        cls,
        precision: Precision = Precision.SECONDS,
        offset: TimeZone | int = TimeZone.UTC,
    ) -> Time:
        """Return the current time of day at a fixed UTC offset.

        Args:
            precision: Precision of the returned value; finer parts of
                the clock reading are truncated.
            offset: The whole-hour offset to observe the clock from.

        Examples:
            >>> t = Time.now(Precision.MILLISECONDS)
            >>> t.precision
            <Precision.MILLISECONDS: 2>
        """
        zone = TimeZone.from_hours(offset)
        _, nanos = split_instant(utc_now_nanos(), zone.seconds)
        return cls._from_ticks(precision, nanos // precision.nanos, zone)

    @classmethod
    def local_time(cls, precision: Precision = Precision.SECONDS) -> Time:
        """Return the current time at the platform's local UTC offset.

        The platform offset is truncated to whole hours and clamped to
        -12..+12.
        """
        return cls.now(precision, TimeZone.local())

    @classmethod
    def from_string(cls, text: str) -> Time:
        """Parse a time string.

        The precision follows from the length of the clock part:

            HH:MM                  minutes
            HH:MM:SS               seconds
            HH:MM:SS.mmm           milliseconds
            HH:MM:SS.mmm.uuu       microseconds
            HH:MM:SS.mmm.uuu.nnn   nanoseconds

        Each may be followed by a signed two-digit hour offset such as
        ``+05`` or ``-11``; without one the offset is UTC.

        Raises:
            InvalidFormatError: On a wrong length, a non-digit, or a
                misplaced separator.
            RangeError: If a component or the offset is out of range.

        Examples:
            >>> Time.from_string("23:59")
            Time(23, 59)

            >>> Time.from_string("10:15:30.250-05")
            Time(10, 15, 30, 250, offset=-5)
        """
        _, fields, offset = read_time(text)
        return cls(**fields, offset=TimeZone.UTC if offset is None else offset)

    @classmethod
    def try_from_string(cls, text: str) -> Result[Time]:
        """Parse like ``from_string`` but return a Result instead of raising."""
        return attempt(cls.from_string, text)

    @property
    def precision(self) -> Precision:
        return self._precision

    @property
    def offset(self) -> TimeZone:
        return self._offset

    @property
    def total_nanoseconds(self) -> int:
        """Return nanoseconds since midnight [0, NANOS_PER_DAY)."""
        return self._ticks * self._precision.nanos

    @property
    def hours(self) -> int:
        """Return the hour component (0-23)."""
        return self.total_nanoseconds // NANOS_PER_HOUR

    @property
    def minutes(self) -> int:
        """Return the minute component (0-59)."""
        return (self.total_nanoseconds % NANOS_PER_HOUR) // NANOS_PER_MINUTE

    @property
    def seconds(self) -> int:
        """Return the second component (0-59).

        Always 0 at MINUTES precision.
        """
        return (self.total_nanoseconds % NANOS_PER_MINUTE) // NANOS_PER_SECOND

    @property
    def milliseconds(self) -> int:
        """Return the milliseconds within the second (0-999).

        Always 0 below MILLISECONDS precision.
        """
        return (self.total_nanoseconds % NANOS_PER_SECOND) // NANOS_PER_MILLISECOND

    @property
    def microseconds(self) -> int:
        """Return the microseconds within the millisecond (0-999).

        Always 0 below MICROSECONDS precision.

        Examples:
            >>> Time(12, 0, 0, 123, 456).microseconds
            456
        """
        return (self.total_nanoseconds % NANOS_PER_MILLISECOND) // NANOS_PER_MICROSECOND

    @property
    def nanoseconds(self) -> int:
        """Return the nanoseconds within the microsecond (0-999).

        Always 0 below NANOSECONDS precision.
        """
        return self.total_nanoseconds % NANOS_PER_MICROSECOND

    def to_precision(self, precision: Precision) -> Time:
        """Return a copy held at another precision.

        Moving to a finer precision is exact; moving to a coarser one
        truncates the finer components.

        Examples:
            >>> Time(10, 0).to_precision(Precision.SECONDS) == Time(10, 0, 0)
            True
            >>> Time(10, 0, 59).to_precision(Precision.MINUTES)
            Time(10, 0)
        """
        result = self.copy()
        result._precision = precision
        result._ticks = self.total_nanoseconds // precision.nanos
        return result

    def _add(self, amount: int, unit_nanos: int) -> None:
        if amount == 0:
            return
        if amount < 0:
            self._subtract(-amount, unit_nanos)
            return
        ticks = self._to_ticks(amount, unit_nanos)
        if ticks:
            self._ticks = (self._ticks + ticks) % self._precision.ticks_per_day

    def _subtract(self, amount: int, unit_nanos: int) -> None:
        if amount == 0:
            return
        if amount < 0:
            self._add(-amount, unit_nanos)
            return
        ticks = self._to_ticks(amount, unit_nanos)
        if ticks:
            self._ticks = (self._ticks - ticks) % self._precision.ticks_per_day

    def _to_ticks(self, amount: int, unit_nanos: int) -> int:
        """Convert ``amount`` units to whole ticks of the current precision.

        The amount is first reduced modulo the number of units in a day.
        Parts finer than one tick are dropped.
        """
        amount %= NANOS_PER_DAY // unit_nanos
        return amount * unit_nanos // self._precision.nanos

    def add_hours(self, hours: int) -> None:
        """Move the clock forward by ``hours``, wrapping at midnight.

        Examples:
            >>> t = Time(22, 0)
            >>> t.add_hours(3)
            >>> t
            Time(1, 0)
        """
        self._add(hours, NANOS_PER_HOUR)

    def add_minutes(self, minutes: int) -> None:
        """Move the clock forward by ``minutes``, wrapping at midnight."""
        self._add(minutes, NANOS_PER_MINUTE)

    def add_seconds(self, seconds: int) -> None:
        """Move the clock forward by ``seconds``, wrapping at midnight.

        At MINUTES precision only whole minutes are applied.

        Examples:
            >>> t = Time(10, 0)
            >>> t.add_seconds(30)  # finer than a minute: no-op
            >>> t
            Time(10, 0)
            >>> t.add_seconds(90)
            >>> t
            Time(10, 1)
        """
        self._add(seconds, NANOS_PER_SECOND)

    def add_milliseconds(self, milliseconds: int) -> None:
        """Move the clock forward by ``milliseconds``, wrapping at midnight.

        Examples:
            >>> t = Time(23, 59, 59, 999)
            >>> t.add_milliseconds(1)
            >>> t.to_string()
            '00:00:00.000+00'
        """
        self._add(milliseconds, NANOS_PER_MILLISECOND)

    def add_microseconds(self, microseconds: int) -> None:
        """Move the clock forward by ``microseconds``, wrapping at midnight."""
        self._add(microseconds, NANOS_PER_MICROSECOND)

    def add_nanoseconds(self, nanoseconds: int) -> None:
        """Move the clock forward by ``nanoseconds``, wrapping at midnight."""
        self._add(nanoseconds, 1)

    def subtract_hours(self, hours: int) -> None:
        """Move the clock back by ``hours``, wrapping below midnight."""
        self._subtract(hours, NANOS_PER_HOUR)

    def subtract_minutes(self, minutes: int) -> None:
        """Move the clock back by ``minutes``, wrapping below midnight.

        Examples:
            >>> t = Time(0, 0)
            >>> t.subtract_minutes(1)
            >>> t
            Time(23, 59)
        """
        self._subtract(minutes, NANOS_PER_MINUTE)

    def subtract_seconds(self, seconds: int) -> None:
        """Move the clock back by ``seconds``, wrapping below midnight."""
        self._subtract(seconds, NANOS_PER_SECOND)

    def subtract_milliseconds(self, milliseconds: int) -> None:
        """Move the clock back by ``milliseconds``, wrapping below midnight."""
        self._subtract(milliseconds, NANOS_PER_MILLISECOND)

    def subtract_microseconds(self, microseconds: int) -> None:
        """Move the clock back by ``microseconds``, wrapping below midnight."""
        self._subtract(microseconds, NANOS_PER_MICROSECOND)

    def subtract_nanoseconds(self, nanoseconds: int) -> None:
        """Move the clock back by ``nanoseconds``, wrapping below midnight."""
        self._subtract(nanoseconds, 1)

    def _combine(self, other: Time, forward: bool) -> Time:
        """Add or subtract every component of ``other``, finest first.

        The result is held at the finer of the two precisions and keeps
        this value's offset and local formatter.
        """
        result = self.to_precision(max(self._precision, other._precision))
        step = result._add if forward else result._subtract
        step(other.nanoseconds, 1)
        step(other.microseconds, NANOS_PER_MICROSECOND)
        step(other.milliseconds, NANOS_PER_MILLISECOND)
        step(other.seconds, NANOS_PER_SECOND)
        step(other.minutes, NANOS_PER_MINUTE)
        step(other.hours, NANOS_PER_HOUR)
        return result

    def __add__(self, other: object) -> Time:
        """Return the clock reading ``other`` later than this one.

        Examples:
            >>> Time(10, 0) + Time(0, 0, 30)
            Time(10, 0, 30)
        """
        if not isinstance(other, Time):
            return NotImplemented  # type: ignore[return-value]
        return self._combine(other, forward=True)

    def __sub__(self, other: object) -> Time:
        """Return the clock reading ``other`` earlier than this one.

        Examples:
            >>> Time(0, 30) - Time(1, 0)
            Time(23, 30)
        """
        if not isinstance(other, Time):
            return NotImplemented  # type: ignore[return-value]
        return self._combine(other, forward=False)

    def __iadd__(self, other: object) -> Time:
        if not isinstance(other, Time):
            return NotImplemented  # type: ignore[return-value]
        result = self._combine(other, forward=True)
        self._precision, self._ticks = result._precision, result._ticks
        return self

    def __isub__(self, other: object) -> Time:
        if not isinstance(other, Time):
            return NotImplemented  # type: ignore[return-value]
        result = self._combine(other, forward=False)
        self._precision, self._ticks = result._precision, result._ticks
        return self

    def copy(self) -> Time:
        """Return an independent copy, local formatter included."""
        instance = self._from_ticks(self._precision, self._ticks, self._offset)
        instance._formatter = self._formatter
        return instance

    __copy__ = copy

    def set_local_formatter(self, formatter: Formatter | None) -> None:
        """Render this instance with ``formatter``; None removes it."""
        self._formatter = formatter

    @classmethod
    def set_global_formatter(cls, formatter: Formatter | None) -> None:
        """Set the Time formatter of the process default registry.

        None restores the built-in renderer.
        """
        default_registry().register(cls._formatter_kind, formatter)

    def to_string(self, registry: FormatterRegistry | None = None) -> str:
        """Render this time.

        The local formatter wins if set; otherwise the formatter
        registered in ``registry`` (the process default when None).

        Examples:
            >>> Time(9, 5, 0, 12, offset=2).to_string()
            '09:05:00.012+02'
        """
        if self._formatter is not None:
            return self._formatter(self)
        if registry is None:
            registry = default_registry()
        return registry.render(self._formatter_kind, self)

    def _comparable(self, other: Time) -> bool:
        return self._precision == other._precision

    def __eq__(self, other: object) -> bool:
        """Check equality with another Time.

        Examples:
            >>> Time(12, 0) == Time(12, 0)
            True
            >>> Time(12, 0) == Time(12, 0, 0)  # precisions differ
            False
        """
        if not isinstance(other, Time):
            return NotImplemented
        return self._comparable(other) and self._ticks == other._ticks

    def __ne__(self, other: object) -> bool:
        """Check inequality with another Time."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Check if this Time is earlier than another of the same precision.

        Examples:
            >>> Time(10, 0) < Time(12, 0)
            True
            >>> Time(10, 0) < Time(12, 0, 0)  # precisions differ
            False
        """
        if not isinstance(other, Time):
            return NotImplemented
        return self._comparable(other) and self._ticks < other._ticks

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._comparable(other) and self._ticks <= other._ticks

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._comparable(other) and self._ticks > other._ticks

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._comparable(other) and self._ticks >= other._ticks

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        """Return the constructor call that rebuilds this value."""
        components = (
            self.hours,
            self.minutes,
            self.seconds,
            self.milliseconds,
            self.microseconds,
            self.nanoseconds,
        )
        args = ", ".join(str(c) for c in components[: self._precision + 2])
        if self._offset != TimeZone.UTC:
            args += f", offset={int(self._offset)}"
        return f"Time({args})"

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["Time"]
