"""Calclock exception hierarchy.

All Calclock-specific exceptions inherit from CalclockError.
"""

from __future__ import annotations


class CalclockError(Exception):
    """Base exception for all Calclock errors."""

    kind: str = "CalclockError"


class InvalidFormatError(CalclockError):
    """Malformed string representation.

    Raised when a string cannot be read as a date, time or datetime.

    Examples:
        - Wrong length for every known layout
        - A letter where a digit is expected
        - A separator at the wrong position
        - Missing 'T' between date and time
    """

    kind = "InvalidFormat"


class RangeError(CalclockError):
    """Component value outside its legal range.

    Raised when the input is syntactically fine but names a value that
    does not exist.

    Examples:
        - Month value outside 1-12
        - Day value outside the month's length (including Feb 29)
        - Hour value outside 0-23
        - Year before 1900
    """

    kind = "RangeError"


__all__ = [
    "CalclockError",
    "InvalidFormatError",
    "RangeError",
]
