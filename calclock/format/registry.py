"""Per-type formatter configuration.

A FormatterRegistry holds one formatter for each of the three value
kinds (date, time, date_time). A registry is complete as soon as it is
built: every slot starts with the built-in renderer, so reading a slot
never installs anything. Callers that want isolated formatting build
their own registry and pass it to ``to_string``; everyone else shares
the process default returned by ``default_registry()``.

Examples:
    >>> from calclock import Date
    >>> registry = FormatterRegistry()
    >>> registry.register(DATE, lambda d: f"{d.day_of_the_month}/{d.month}")
    >>> Date(5, 3, 2024).to_string(registry)
    '5/3'
    >>> Date(5, 3, 2024).to_string()
    '2024-03-05'
"""

from __future__ import annotations

import functools
import logging
import threading
from typing import Any, Callable

from calclock.format.defaults import format_date, format_date_time, format_time

logger = logging.getLogger(__name__)

Formatter = Callable[[Any], str]

DATE: str = "date"
TIME: str = "time"
DATE_TIME: str = "date_time"

KINDS: tuple[str, ...] = (DATE, TIME, DATE_TIME)


class FormatterRegistry:
    """Formatters for Date, Time and DateTime, keyed by kind.

    All reads and writes go through one lock, so a registry may be
    shared between threads.
    """

    __slots__ = ("_lock", "_formatters")

    def __init__(
        self,
        *,
        date: Formatter | None = None,
        time: Formatter | None = None,
        date_time: Formatter | None = None,
    ) -> None:
        """Create a registry, optionally overriding some defaults.

        Args:
            date: Formatter for Date values.
            time: Formatter for Time values.
            date_time: Formatter for DateTime values.
        """
        self._lock = threading.Lock()
        self._formatters: dict[str, Formatter] = self._defaults()
        for kind, formatter in ((DATE, date), (TIME, time), (DATE_TIME, date_time)):
            if formatter is not None:
                self._formatters[kind] = formatter

    def _defaults(self) -> dict[str, Formatter]:
        return {
            DATE: format_date,
            TIME: format_time,
            DATE_TIME: functools.partial(format_date_time, registry=self),
        }

    def formatter(self, kind: str) -> Formatter:
        """Return the formatter registered for ``kind``.

        Raises:
            KeyError: If ``kind`` is not one of DATE, TIME, DATE_TIME.
        """
        with self._lock:
            return self._formatters[kind]

    def register(self, kind: str, formatter: Formatter | None) -> None:
        """Install ``formatter`` for ``kind``; None restores the default.

        Raises:
            KeyError: If ``kind`` is not one of DATE, TIME, DATE_TIME.
        """
        if kind not in KINDS:
            raise KeyError(f"unknown formatter kind {kind!r}, expected one of {KINDS}")
        with self._lock:
            if formatter is None:
                self._formatters[kind] = self._defaults()[kind]
                logger.debug("restored default %s formatter", kind)
            else:
                self._formatters[kind] = formatter
                logger.debug("registered %s formatter %r", kind, formatter)

    def reset(self) -> None:
        """Restore the built-in formatter for every kind."""
        with self._lock:
            self._formatters = self._defaults()
        logger.debug("reset all formatters to defaults")

    def render(self, kind: str, value: Any) -> str:
        """Format ``value`` with the formatter registered for ``kind``."""
        return self.formatter(kind)(value)

    def __repr__(self) -> str:
        return f"FormatterRegistry({', '.join(KINDS)})"


_default_registry: FormatterRegistry | None = None
_default_lock = threading.Lock()


def default_registry() -> FormatterRegistry:
    """Return the process-wide registry, creating it on first use.

    Creation happens once under a lock, so concurrent first calls all
    receive the same instance.
    """
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = FormatterRegistry()
                logger.debug("created process default formatter registry")
    return _default_registry


__all__ = [
    "Formatter",
    "FormatterRegistry",
    "DATE",
    "TIME",
    "DATE_TIME",
    "default_registry",
]
