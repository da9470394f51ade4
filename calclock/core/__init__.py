"""Core value types.

This module provides the three value types:
    - Date: Calendar day in the proleptic Gregorian calendar
    - Time: Clock reading at a selectable precision with a fixed offset
    - DateTime: One Date and one Time
"""

from __future__ import annotations

from calclock.core.date import Date
from calclock.core.datetime import DateTime
from calclock.core.time import Time

__all__: list[str] = [
    "Date",
    "DateTime",
    "Time",
]
