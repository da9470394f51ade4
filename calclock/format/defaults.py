"""Built-in renderers for Date, Time and DateTime.

These are the formatters a FormatterRegistry starts with:

    Date      YYYY-MM-DD
    Time      HH:MM[:SS[.mmm[.uuu[.nnn]]]]±HH
    DateTime  <Date>T<Time>
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from calclock.units.precision import Precision

if TYPE_CHECKING:
    from calclock.format.registry import FormatterRegistry
    from calclock.core.date import Date
    from calclock.core.datetime import DateTime
    from calclock.core.time import Time


def format_date(date: Date) -> str:
    """Render a Date as YYYY-MM-DD.

    Examples:
        >>> from calclock import Date
        >>> format_date(Date(5, 3, 2024))
        '2024-03-05'
    """
    year, month, day = date.components()
    return f"{year:04d}-{month:02d}-{day:02d}"


def format_time(time: Time) -> str:
    """Render a Time down to its precision, followed by its offset.

    Examples:
        >>> from calclock import Time
        >>> format_time(Time(9, 5))
        '09:05+00'
        >>> format_time(Time(23, 59, 59, 7))
        '23:59:59.007+00'
    """
    precision = time.precision
    text = f"{time.hours:02d}:{time.minutes:02d}"
    if precision >= Precision.SECONDS:
        text += f":{time.seconds:02d}"
    if precision >= Precision.MILLISECONDS:
        text += f".{time.milliseconds:03d}"
    if precision >= Precision.MICROSECONDS:
        text += f".{time.microseconds:03d}"
    if precision >= Precision.NANOSECONDS:
        text += f".{time.nanoseconds:03d}"
    return text + time.offset.label


def format_date_time(
    date_time: DateTime, registry: FormatterRegistry | None = None
) -> str:
    """Render a DateTime as <Date>T<Time>.

    Each half goes through its own ``to_string`` so that local
    formatters on the parts still apply. The halves are looked up in
    ``registry`` (the process default when None).
    """
    date = date_time.date.to_string(registry)
    time = date_time.time.to_string(registry)
    return f"{date}T{time}"


__all__ = [
    "format_date",
    "format_time",
    "format_date_time",
]
