"""Explicit logging context: one config, one registry, one sink.

Purpose
-------
Bundle the process-wide pieces of the tagging core into an object that can be
created, initialised once, and used, so hosts and tests can run isolated
contexts instead of relying on hidden module state.

Contents
--------
* :class:`LoggingContext` – composition root and entry points for one context.

System Role
-----------
:mod:`lib_log_tag.runtime` keeps one default instance for the module-level
façade; everything else (tests, the CLI, embedding hosts) may build their own.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Any

from lib_log_tag.adapters.console.rich_console import RichConsoleSink
from lib_log_tag.adapters.stack_inspector import FrameWalkingResolver
from lib_log_tag.application.ports import CallSiteResolverPort, SinkPort
from lib_log_tag.application.use_cases.process_call import DiagnosticHook, ProcessResult, create_process_log_call
from lib_log_tag.application.use_cases.tagging import TagSynthesizer
from lib_log_tag.application.use_cases.visibility import VisibilityPolicy
from lib_log_tag.domain import GlobalConfig, GlobalSettings, LoggerRegistry, LoggerState, Severity, owner_identity

logger = logging.getLogger(__name__)


class LoggingContext:
    """Compose the tagging pipeline for one logging context.

    Parameters
    ----------
    sink:
        Callable receiving ``(code, tag, message)``. When omitted, a
        :class:`RichConsoleSink` is installed by :meth:`initialize`.
    resolver:
        Call-site resolver; defaults to :class:`FrameWalkingResolver`.
    policy / tagger:
        Overrides for the visibility policy and tag synthesizer.
    diagnostic_hook:
        Optional callback receiving pipeline milestones. It can also be
        supplied (or replaced) by the winning :meth:`initialize` call.
    """

    def __init__(
        self,
        sink: SinkPort | None = None,
        *,
        resolver: CallSiteResolverPort | None = None,
        policy: VisibilityPolicy | None = None,
        tagger: TagSynthesizer | None = None,
        diagnostic_hook: DiagnosticHook = None,
    ) -> None:
        self.config = GlobalConfig()
        self.registry = LoggerRegistry()
        self._sink = sink
        self._diagnostic_hook = diagnostic_hook
        self._init_lock = Lock()
        self._process = create_process_log_call(
            config=self.config,
            registry=self.registry,
            resolver=resolver if resolver is not None else FrameWalkingResolver(),
            policy=policy if policy is not None else VisibilityPolicy(),
            tagger=tagger if tagger is not None else TagSynthesizer(),
            sink=self._dispatch,
            diagnostic=self._forward_diagnostic,
        )

    def initialize(
        self,
        default_tag: str,
        debug_mode: bool,
        *,
        sink: SinkPort | None = None,
        resolve_in_release: bool = True,
        diagnostic_hook: DiagnosticHook = None,
    ) -> bool:
        """Initialise the context once; later calls are ignored with a warning.

        The sink and diagnostic hook of the winning call are installed before
        the settings are published. Losing calls change nothing.

        Returns ``True`` when this call won the initialisation.
        """
        with self._init_lock:
            current = self.config.current()
            if current is not None:
                logger.warning(
                    "Did you really intend to re-initialise? Keeping default_tag=%r debug_mode=%s",
                    current.default_tag,
                    current.debug_mode,
                )
                return False
            if sink is not None:
                self._sink = sink
            elif self._sink is None:
                self._sink = RichConsoleSink()
            if diagnostic_hook is not None:
                self._diagnostic_hook = diagnostic_hook
            return self.config.initialize(default_tag, debug_mode, resolve_in_release=resolve_in_release)

    @property
    def settings(self) -> GlobalSettings | None:
        return self.config.current()

    @property
    def is_initialised(self) -> bool:
        return self.config.initialized

    def _dispatch(self, code: int, tag: str, message: str) -> None:
        sink = self._sink
        if sink is None:
            raise RuntimeError("no sink configured for this logging context")
        sink(code, tag, message)

    def _forward_diagnostic(self, event_name: str, payload: dict[str, Any]) -> None:
        hook = self._diagnostic_hook
        if hook is not None:
            hook(event_name, payload)

    def log(self, severity: Severity | str, message: str, *, force_visible: bool = False) -> ProcessResult:
        """Log ``message`` at ``severity`` on behalf of the calling owner."""
        level = severity if isinstance(severity, Severity) else Severity.from_name(severity)
        return self._process(level, message, force_visible=force_visible)

    def trace(self, message: str) -> ProcessResult:
        return self._process(Severity.TRACE, message)

    def trace_always(self, message: str) -> ProcessResult:
        """Log at TRACE, visible even in release mode (threshold still applies)."""
        return self._process(Severity.TRACE, message, force_visible=True)

    def debug(self, message: str) -> ProcessResult:
        return self._process(Severity.DEBUG, message)

    def debug_always(self, message: str) -> ProcessResult:
        """Log at DEBUG, visible even in release mode (threshold still applies)."""
        return self._process(Severity.DEBUG, message, force_visible=True)

    def info(self, message: str) -> ProcessResult:
        return self._process(Severity.INFO, message)

    def warn(self, message: str) -> ProcessResult:
        return self._process(Severity.WARN, message)

    def error(self, message: str) -> ProcessResult:
        return self._process(Severity.ERROR, message)

    def fatal(self, message: str) -> ProcessResult:
        return self._process(Severity.FATAL, message)

    def get_logger(self, owner: object) -> LoggerState:
        """Return the state for ``owner`` (class, module, or identity string).

        Owners that cannot be mapped share the fallback state.
        """
        return self.registry.get_or_create(owner_identity(owner))

    def fallback_logger(self) -> LoggerState:
        return self.registry.fallback()

    def set_include_function_names(self, value: bool) -> None:
        """Toggle function names in tags for every current and future owner."""
        self.registry.set_default_include_function_name(value)

    def set_include_line_numbers(self, value: bool) -> None:
        """Toggle ``(file:line)`` suffixes for every current and future owner."""
        self.registry.set_default_include_line_number(value)


__all__ = ["LoggingContext"]
