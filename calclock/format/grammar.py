"""Fixed-length text layouts for dates and times.

Every accepted layout is listed here once, keyed by its exact length.
A layout names where each numeric field starts, how wide it is, and
which literal separator sits at which index. Reading a string is a
dictionary lookup followed by index checks, so supporting a new
precision is a matter of adding one entry.

Date layouts:
    YYYYMMDD      (8)
    YYYY-MM-DD    (10)

Time layouts (each may be followed by a signed hour offset, e.g. +05):
    HH:MM                   (5)   minutes
    HH:MM:SS                (8)   seconds
    HH:MM:SS.mmm            (12)  milliseconds
    HH:MM:SS.mmm.uuu        (16)  microseconds
    HH:MM:SS.mmm.uuu.nnn    (20)  nanoseconds
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from calclock.errors import InvalidFormatError
from calclock.units.precision import Precision

logger = logging.getLogger(__name__)

OFFSET_WIDTH: int = 3


@dataclass(frozen=True)
class Field:
    """A run of digits inside a layout."""

    name: str
    start: int
    width: int

    @property
    def stop(self) -> int:
        return self.start + self.width


@dataclass(frozen=True)
class Layout:
    """One accepted fixed-length text form.

    Attributes:
        pattern: Human-readable shape, used in error messages.
        fields: Digit runs in order of appearance.
        separators: (index, character) pairs that must match exactly.
        precision: Precision selected by the layout (time layouts only).
    """

    pattern: str
    fields: tuple[Field, ...]
    separators: tuple[tuple[int, str], ...] = ()
    precision: Precision | None = None

    @property
    def length(self) -> int:
        return len(self.pattern)

    def read(self, text: str) -> dict[str, int]:
        """Check ``text`` against this layout and return its fields.

        Raises:
            InvalidFormatError: If a separator or digit is out of place.
        """
        for index, char in self.separators:
            if text[index] != char:
                logger.debug("rejected %r: separator at %d", text, index)
                raise InvalidFormatError(
                    f"expected {char!r} at position {index} of {text!r} "
                    f"(layout {self.pattern})"
                )
        values: dict[str, int] = {}
        for field in self.fields:
            chunk = text[field.start:field.stop]
            if not (chunk.isascii() and chunk.isdigit()):
                logger.debug("rejected %r: %s not digits", text, field.name)
                raise InvalidFormatError(
                    f"expected {field.width} digits for {field.name} at position "
                    f"{field.start} of {text!r} (layout {self.pattern})"
                )
            values[field.name] = int(chunk)
        return values


DATE_LAYOUTS: dict[int, Layout] = {
    8: Layout(
        "YYYYMMDD",
        (Field("year", 0, 4), Field("month", 4, 2), Field("day", 6, 2)),
    ),
    10: Layout(
        "YYYY-MM-DD",
        (Field("year", 0, 4), Field("month", 5, 2), Field("day", 8, 2)),
        separators=((4, "-"), (7, "-")),
    ),
}

_CLOCK_FIELDS: tuple[tuple[Field, tuple[int, str] | None], ...] = (
    (Field("hours", 0, 2), None),
    (Field("minutes", 3, 2), (2, ":")),
    (Field("seconds", 6, 2), (5, ":")),
    (Field("milliseconds", 9, 3), (8, ".")),
    (Field("microseconds", 13, 3), (12, ".")),
    (Field("nanoseconds", 17, 3), (16, ".")),
)

_CLOCK_PATTERN = "HH:MM:SS.mmm.uuu.nnn"


def _time_layout(precision: Precision) -> Layout:
    """Build the layout holding every field down to ``precision``."""
    parts = _CLOCK_FIELDS[: precision + 2]
    fields = tuple(field for field, _ in parts)
    separators = tuple(sep for _, sep in parts if sep is not None)
    return Layout(
        _CLOCK_PATTERN[: fields[-1].stop],
        fields,
        separators=separators,
        precision=precision,
    )


TIME_LAYOUTS: dict[int, Layout] = {
    layout.length: layout for layout in map(_time_layout, Precision)
}


def read_date(text: str) -> dict[str, int]:
    """Read a date string into year, month and day fields.

    Raises:
        InvalidFormatError: If ``text`` matches no date layout.
    """
    layout = DATE_LAYOUTS.get(len(text))
    if layout is None:
        logger.debug("rejected date text %r: length %d", text, len(text))
        raise InvalidFormatError(
            f"date must be 8 (YYYYMMDD) or 10 (YYYY-MM-DD) characters, "
            f"got {len(text)} in {text!r}"
        )
    return layout.read(text)


def split_offset(text: str) -> tuple[str, int | None]:
    """Separate a trailing signed hour offset from a time string.

    Returns:
        The clock part and the offset in hours, or None when the string
        carries no offset.

    Examples:
        >>> split_offset("10:30+05")
        ('10:30', 5)
        >>> split_offset("10:30:00")
        ('10:30:00', None)
    """
    if len(text) <= OFFSET_WIDTH or text[-OFFSET_WIDTH] not in "+-":
        return text, None
    digits = text[-OFFSET_WIDTH + 1:]
    if not (digits.isascii() and digits.isdigit()):
        raise InvalidFormatError(f"expected two offset digits at the end of {text!r}")
    hours = int(digits)
    if text[-OFFSET_WIDTH] == "-":
        hours = -hours
    return text[:-OFFSET_WIDTH], hours


def read_time(text: str) -> tuple[Precision, dict[str, int], int | None]:
    """Read a time string into its precision, fields and offset hours.

    Raises:
        InvalidFormatError: If ``text`` matches no time layout.
    """
    clock, offset = split_offset(text)
    layout = TIME_LAYOUTS.get(len(clock))
    if layout is None or layout.precision is None:
        logger.debug("rejected time text %r: clock length %d", text, len(clock))
        lengths = ", ".join(str(length) for length in sorted(TIME_LAYOUTS))
        raise InvalidFormatError(
            f"time must be {lengths} characters plus an optional "
            f"{OFFSET_WIDTH}-character offset, got {text!r}"
        )
    return layout.precision, layout.read(clock), offset


__all__ = [
    "Field",
    "Layout",
    "DATE_LAYOUTS",
    "TIME_LAYOUTS",
    "OFFSET_WIDTH",
    "read_date",
    "read_time",
    "split_offset",
]
