"""Runtime façade exposing the process-wide tagging logger.

Purpose
-------
Expose a stable entry point (``initialize``, the severity helpers, per-owner
and process-wide configuration) that host applications use instead of
importing the inner layers directly.

Contents
--------
* ``initialize`` – one-shot configuration of the default context.
* ``trace`` … ``fatal`` plus ``trace_always`` / ``debug_always`` – severity
  entry points attributing each call to the calling owner.
* ``get_logger`` / ``fallback_logger`` – per-owner configuration.
* ``set_include_function_names`` / ``set_include_line_numbers`` –
  retroactive process-wide defaults.
* ``use_context`` / ``current_context`` – explicit context injection.
* ``summary_info`` – metadata banner shared with the CLI.

System Role
-----------
Outer shell of the package. Every function delegates to the default
:class:`LoggingContext`; frames of this module are part of the library set the
call-site resolver skips.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from lib_log_tag.application.ports import SinkPort
from lib_log_tag.application.use_cases.process_call import DiagnosticHook, ProcessResult
from lib_log_tag.config import apply_env_overrides
from lib_log_tag.domain import LoggerState, Severity

from ._context import LoggingContext
from ._state import current_context, is_initialised, set_context


__all__ = [
    "LoggingContext",
    "current_context",
    "debug",
    "debug_always",
    "error",
    "fallback_logger",
    "fatal",
    "get_logger",
    "info",
    "initialize",
    "is_initialised",
    "log",
    "set_include_function_names",
    "set_include_line_numbers",
    "summary_info",
    "trace",
    "trace_always",
    "use_context",
    "warn",
]


def initialize(
    default_tag: str,
    debug_mode: bool,
    *,
    sink: SinkPort | None = None,
    resolve_in_release: bool = True,
    diagnostic_hook: DiagnosticHook = None,
) -> bool:
    """Configure the process-wide context; the first call wins.

    Inputs
    ------
    default_tag:
        Tag used in release mode and whenever the call site cannot be
        resolved. ``LOG_TAG_DEFAULT_TAG`` takes precedence.
    debug_mode:
        Enables call-site tags, sub-INFO severities, and escalation.
        ``LOG_TAG_DEBUG`` takes precedence.
    sink:
        Callable receiving ``(code, tag, message)``; defaults to
        :class:`~lib_log_tag.adapters.RichConsoleSink`.
    resolve_in_release:
        ``False`` skips stack inspection entirely outside debug mode.
    diagnostic_hook:
        Callback receiving pipeline milestones; installed only by the winning
        call.

    Outputs
    -------
    bool
        ``True`` for the winning call; later calls are no-ops that log a
        warning through :mod:`logging` and return ``False``.
    """

    tag, debug_flag = apply_env_overrides(default_tag, debug_mode)
    return current_context().initialize(
        tag,
        debug_flag,
        sink=sink,
        resolve_in_release=resolve_in_release,
        diagnostic_hook=diagnostic_hook,
    )


@contextmanager
def use_context(context: LoggingContext) -> Iterator[LoggingContext]:
    """Temporarily install ``context`` as the process-wide default."""

    previous = set_context(context)
    try:
        yield context
    finally:
        set_context(previous)


def log(severity: Severity | str, message: str, *, force_visible: bool = False) -> ProcessResult:
    """Log ``message`` at ``severity`` on behalf of the calling owner."""

    return current_context().log(severity, message, force_visible=force_visible)


def trace(message: str) -> ProcessResult:
    return current_context().trace(message)


def trace_always(message: str) -> ProcessResult:
    """TRACE that bypasses the release cutoff but not the owner threshold."""

    return current_context().trace_always(message)


def debug(message: str) -> ProcessResult:
    return current_context().debug(message)


def debug_always(message: str) -> ProcessResult:
    """DEBUG that bypasses the release cutoff but not the owner threshold."""

    return current_context().debug_always(message)


def info(message: str) -> ProcessResult:
    return current_context().info(message)


def warn(message: str) -> ProcessResult:
    return current_context().warn(message)


def error(message: str) -> ProcessResult:
    return current_context().error(message)


def fatal(message: str) -> ProcessResult:
    return current_context().fatal(message)


def get_logger(owner: object) -> LoggerState:
    """Return the configuration of ``owner`` (class, module, or identity string)."""

    return current_context().get_logger(owner)


def fallback_logger() -> LoggerState:
    return current_context().fallback_logger()


def set_include_function_names(value: bool) -> None:
    current_context().set_include_function_names(value)


def set_include_line_numbers(value: bool) -> None:
    current_context().set_include_line_numbers(value)


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point and docs."""

    from lib_log_tag import __init__conf__

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)
