"""Per-owner logger configuration."""

from __future__ import annotations

from dataclasses import dataclass

from .severity import Severity


@dataclass(slots=True, eq=False)
class LoggerState:
    """Mutable configuration attached to one owner identity.

    Instances are created by :class:`~lib_log_tag.domain.registry.LoggerRegistry`
    only and compared by identity, so configuration changes made through one
    lookup are visible to every later lookup of the same owner. Every setter
    writes a single attribute and returns ``self`` for chaining.

    Examples
    --------
    >>> state = LoggerState()
    >>> state.set_threshold(Severity.WARN).set_important(True) is state
    True
    >>> state.threshold, state.important
    (<Severity.WARN: 3>, True)
    """

    threshold: Severity = Severity.TRACE
    include_function_name: bool = False
    include_line_number: bool = False
    important: bool = False

    def set_threshold(self, threshold: Severity | str) -> "LoggerState":
        """Drop calls below ``threshold`` (a :class:`Severity` or its name)."""
        self.threshold = threshold if isinstance(threshold, Severity) else Severity.from_name(threshold)
        return self

    def set_include_function_name(self, include: bool) -> "LoggerState":
        self.include_function_name = bool(include)
        return self

    def set_include_line_number(self, include: bool) -> "LoggerState":
        self.include_line_number = bool(include)
        return self

    def set_important(self, important: bool) -> "LoggerState":
        """Escalate TRACE/DEBUG calls to INFO while in debug mode."""
        self.important = bool(important)
        return self


__all__ = ["LoggerState"]
