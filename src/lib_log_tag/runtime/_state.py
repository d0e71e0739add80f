"""Process-wide default context and access helpers."""

from __future__ import annotations

from threading import RLock

from ._context import LoggingContext


_CONTEXT: LoggingContext = LoggingContext()
_STATE_LOCK = RLock()


def current_context() -> LoggingContext:
    """Return the context used by the module-level façade."""

    with _STATE_LOCK:
        return _CONTEXT


def set_context(context: LoggingContext) -> LoggingContext:
    """Install ``context`` as the default and return the one it replaced."""

    with _STATE_LOCK:
        global _CONTEXT
        previous = _CONTEXT
        _CONTEXT = context
        return previous


def is_initialised() -> bool:
    """Return ``True`` when the default context has been initialised."""

    with _STATE_LOCK:
        return _CONTEXT.is_initialised


__all__ = ["current_context", "is_initialised", "set_context"]
