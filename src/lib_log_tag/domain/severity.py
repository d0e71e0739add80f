"""Severity abstraction used for every threshold comparison.

Purpose
-------
Offer an ordered, immutable representation of the six severities understood by
the tagging core, together with the numeric codes handed to sinks.

Contents
--------
* :class:`Severity` enum with ordinal comparison and conversion helpers.
* ``_CODE_TABLE`` / ``_ICON_TABLE`` constants mapping severities to sink codes
  and console glyphs.

System Role
-----------
Used by the visibility policy for the release cutoff, per-owner thresholds and
escalation, and by the adapters to translate severities into sink-specific
codes.
"""

from __future__ import annotations

import logging
from enum import Enum


TRACE_LEVEL = 5
"""Numeric :mod:`logging` level registered for :attr:`Severity.TRACE`."""

logging.addLevelName(TRACE_LEVEL, "TRACE")


class Severity(Enum):
    """Ordered severities, lowest to highest.

    Ordering is purely by ordinal, so ``Severity.DEBUG < Severity.INFO`` holds
    regardless of the sink code attached to each member.
    """

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.value >= other.value

    @property
    def code(self) -> int:
        """Return the numeric code passed to sinks for this severity."""

        return _CODE_TABLE[self]

    @property
    def icon(self) -> str:
        """Return the unicode icon visualising the severity on consoles."""

        return _ICON_TABLE[self]

    def to_python_level(self) -> int:
        """Return the :mod:`logging` level matching this severity."""

        return self.code

    @classmethod
    def from_name(cls, name: str) -> "Severity":
        """Resolve a case-insensitive severity name, accepting common aliases.

        Examples
        --------
        >>> Severity.from_name("verbose") is Severity.TRACE
        True
        >>> Severity.from_name(" Warning ") is Severity.WARN
        True
        """
        normalized = name.strip().upper()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown severity: {name!r}") from exc

    @classmethod
    def from_code(cls, code: int) -> "Severity":
        """Return the :class:`Severity` whose sink code equals ``code``."""
        for severity, candidate in _CODE_TABLE.items():
            if candidate == code:
                return severity
        raise ValueError(f"Unsupported severity code: {code}")


_CODE_TABLE = {
    Severity.TRACE: TRACE_LEVEL,
    Severity.DEBUG: logging.DEBUG,
    Severity.INFO: logging.INFO,
    Severity.WARN: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.FATAL: logging.CRITICAL,
}
# Sink codes line up with the stdlib logging levels.

_ICON_TABLE = {
    Severity.TRACE: "·",
    Severity.DEBUG: "🐞",
    Severity.INFO: "ℹ",
    Severity.WARN: "⚠",
    Severity.ERROR: "✖",
    Severity.FATAL: "☠",
}

_ALIASES = {
    "VERBOSE": "TRACE",
    "WARNING": "WARN",
    "CRITICAL": "FATAL",
    "ASSERT": "FATAL",
}


__all__ = ["Severity", "TRACE_LEVEL"]
