"""Unit types for Calclock.

This module provides the enumerations used by the core types:
    - Precision: Resolution of a Time value (MINUTES .. NANOSECONDS)
    - TimeZone: Whole-hour UTC offset (-12 .. +12)
"""

from __future__ import annotations

from calclock.units.precision import Precision
from calclock.units.timezone import TimeZone

__all__: list[str] = [
    "Precision",
    "TimeZone",
]
