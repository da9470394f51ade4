"""Internal utilities for Calclock.

This module contains private implementation details:
    - Calendar arithmetic on day-counts
    - Constants and magic numbers
    - Validation helpers and the range-check decorator
    - System clock access

Note: This module is not part of the public API.
"""

from __future__ import annotations

from calclock._internal.validation import (
    validate_day,
    validate_month,
    validate_offset,
    validate_range,
    validate_year,
)

__all__: list[str] = [
    "validate_day",
    "validate_month",
    "validate_offset",
    "validate_range",
    "validate_year",
]
