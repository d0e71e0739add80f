"""Sink port receiving the final ``(code, tag, message)`` triple.

Purpose
-------
Define the only outbound boundary of the tagging core. Sinks render or store
the emitted line; the core guarantees at most one call per surviving log call
and none for dropped calls.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SinkPort(Protocol):
    """Render one emitted log line."""

    def __call__(self, code: int, tag: str, message: str) -> None:
        """Consume the severity ``code``, synthesised ``tag``, and ``message``."""


__all__ = ["SinkPort"]
