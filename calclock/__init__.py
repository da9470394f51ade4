"""Calclock: precision-aware civil calendar and clock values.

Calclock provides three small mutable value types for the proleptic
Gregorian calendar (from 1900 onwards) and whole-hour UTC offsets.

Core Types:
    Date: Calendar day, stored as days since 1900-01-01
    Time: Time of day at MINUTES .. NANOSECONDS precision with an offset
    DateTime: A Date and a Time

Units:
    Precision: Resolution of a Time
    TimeZone: Whole-hour UTC offset (-12 .. +12)

Formatting:
    FormatterRegistry: Per-type formatters, passed to ``to_string``
    default_registry: The process-wide registry

Exceptions:
    CalclockError: Base exception
    InvalidFormatError: Malformed input string
    RangeError: Component out of range

Example:
    >>> from calclock import Date, DateTime, Time
    >>> d = Date.from_string("2024-03-01")
    >>> d.subtract_days(1)
    >>> str(d)
    '2024-02-29'
    >>> str(DateTime.from_string("2024-02-29T23:59:59"))
    '2024-02-29T23:59:59+00'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from calclock.core.date import Date
from calclock.core.datetime import DateTime
from calclock.core.time import Time

# Units
from calclock.units.precision import Precision
from calclock.units.timezone import TimeZone

# Exceptions
from calclock.errors import CalclockError, InvalidFormatError, RangeError

# Formatting
from calclock.format.registry import FormatterRegistry, default_registry

# Results
from calclock.result import Result, attempt

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "DateTime",
    "Time",
    # Units
    "Precision",
    "TimeZone",
    # Exceptions
    "CalclockError",
    "InvalidFormatError",
    "RangeError",
    # Formatting
    "FormatterRegistry",
    "default_registry",
    # Results
    "Result",
    "attempt",
]
