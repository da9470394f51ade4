"""Formatting and parsing support.

This module provides:
    - The fixed-length layouts accepted when reading strings
    - The built-in renderers for Date, Time and DateTime
    - FormatterRegistry, the per-type formatter configuration

Examples:
    >>> from calclock import Time
    >>> from calclock.format import FormatterRegistry, TIME

    >>> registry = FormatterRegistry(time=lambda t: f"{t.hours}h{t.minutes:02d}")
    >>> Time(9, 5).to_string(registry)
    '9h05'
"""

from __future__ import annotations

from calclock.format.defaults import format_date, format_date_time, format_time
from calclock.format.grammar import read_date, read_time
from calclock.format.registry import (
    DATE,
    DATE_TIME,
    TIME,
    Formatter,
    FormatterRegistry,
    default_registry,
)

__all__: list[str] = [
    # Layouts
    "read_date",
    "read_time",
    # Renderers
    "format_date",
    "format_time",
    "format_date_time",
    # Registry
    "Formatter",
    "FormatterRegistry",
    "DATE",
    "TIME",
    "DATE_TIME",
    "default_registry",
]
