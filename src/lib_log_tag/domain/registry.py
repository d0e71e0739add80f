"""Registry mapping owner identities to their :class:`LoggerState`.

Purpose
-------
Own every :class:`LoggerState` of a logging context, create them lazily on
first use, and apply process-wide defaults retroactively.

System Role
-----------
The only component allowed to construct logger states. Lookups for the same
owner always return the same instance; the registry only grows.
"""

from __future__ import annotations

from collections.abc import Callable
from threading import Lock

from .logger_state import LoggerState


class LoggerRegistry:
    """Thread-safe owner → :class:`LoggerState` mapping with a fallback entry.

    Examples
    --------
    >>> registry = LoggerRegistry()
    >>> registry.get_or_create("app.Foo") is registry.get_or_create("app.Foo")
    True
    >>> registry.get_or_create(None) is registry.fallback()
    True
    >>> registry.set_default_include_line_number(True)
    >>> registry.get_or_create("app.Bar").include_line_number
    True
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._states: dict[str, LoggerState] = {}
        self._default_include_function_name = False
        self._default_include_line_number = False
        self._fallback = self._new_state()

    def _new_state(self) -> LoggerState:
        return LoggerState(
            include_function_name=self._default_include_function_name,
            include_line_number=self._default_include_line_number,
        )

    def get_or_create(self, owner: str | None) -> LoggerState:
        """Return the state for ``owner``, creating it on first access.

        ``None`` (an owner that could not be determined) maps to
        :meth:`fallback`.
        """
        if owner is None:
            return self._fallback
        state = self._states.get(owner)
        if state is not None:
            return state
        with self._lock:
            state = self._states.get(owner)
            if state is None:
                state = self._new_state()
                self._states[owner] = state
            return state

    def fallback(self) -> LoggerState:
        """Return the state used when the owner identity is unknown."""
        return self._fallback

    def owners(self) -> tuple[str, ...]:
        """Return the registered owner identities in creation order."""
        with self._lock:
            return tuple(self._states)

    def for_each(self, fn: Callable[[LoggerState], object]) -> None:
        """Apply ``fn`` to every registered state, including the fallback."""
        with self._lock:
            states = [self._fallback, *self._states.values()]
        for state in states:
            fn(state)

    def set_default_include_function_name(self, value: bool) -> None:
        """Set the include-function-name flag on all current and future states."""
        with self._lock:
            self._default_include_function_name = bool(value)
            for state in (self._fallback, *self._states.values()):
                state.set_include_function_name(value)

    def set_default_include_line_number(self, value: bool) -> None:
        """Set the include-line-number flag on all current and future states."""
        with self._lock:
            self._default_include_line_number = bool(value)
            for state in (self._fallback, *self._states.values()):
                state.set_include_line_number(value)

    def __len__(self) -> int:
        return len(self._states)


__all__ = ["LoggerRegistry"]
