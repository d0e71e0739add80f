"""Public package surface of the call-site aware tagging logger.

``import lib_log_tag`` gives access to the process-wide façade (``initialize``
and the severity helpers), the explicit :class:`LoggingContext`, the bundled
sinks, and the domain types hosts need for configuration.
"""

from __future__ import annotations

from .adapters import FrameWalkingResolver, RichConsoleSink, StdlibLoggingSink
from .domain import CallSite, CallSiteNotFound, LoggerState, NotInitialisedError, Severity
from .runtime import (
    LoggingContext,
    current_context,
    debug,
    debug_always,
    error,
    fallback_logger,
    fatal,
    get_logger,
    info,
    initialize,
    is_initialised,
    log,
    set_include_function_names,
    set_include_line_numbers,
    summary_info,
    trace,
    trace_always,
    use_context,
    warn,
)

__all__ = [
    "CallSite",
    "CallSiteNotFound",
    "FrameWalkingResolver",
    "LoggerState",
    "LoggingContext",
    "NotInitialisedError",
    "RichConsoleSink",
    "Severity",
    "StdlibLoggingSink",
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
