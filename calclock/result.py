"""Explicit success/failure values for fallible construction.

Constructors in Calclock raise InvalidFormatError or RangeError. Call
sites that would rather branch than catch can wrap a constructor with
``attempt`` and inspect the returned Result.

Examples:
    >>> from calclock import Date
    >>> result = attempt(Date.from_string, "2024-02-30")
    >>> result.ok
    False
    >>> result.kind
    'RangeError'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from calclock.errors import CalclockError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a constructor call: a value or a Calclock error.

    Attributes:
        value: The constructed value, or None on failure.
        error: The raised error, or None on success.
    """

    value: T | None = None
    error: CalclockError | None = None

    @property
    def ok(self) -> bool:
        """Return True if construction succeeded."""
        return self.error is None

    @property
    def kind(self) -> str | None:
        """Return "InvalidFormat" or "RangeError", or None on success."""
        return None if self.error is None else self.error.kind

    @property
    def detail(self) -> str | None:
        """Return the human-readable error message, or None on success."""
        return None if self.error is None else str(self.error)

    def unwrap(self) -> T:
        """Return the value, re-raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def attempt(factory: Callable[..., T], *args: object, **kwargs: object) -> Result[T]:
    """Call ``factory`` and capture a CalclockError instead of raising it.

    Other exceptions propagate unchanged.
    """
    try:
        return Result(value=factory(*args, **kwargs))
    except CalclockError as exc:
        return Result(error=exc)


__all__ = [
    "Result",
    "attempt",
]
