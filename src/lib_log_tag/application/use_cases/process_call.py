"""Use case orchestrating a single log call from entry point to sink.

Purpose
-------
Tie together call-site resolution, registry lookup, the visibility policy, tag
synthesis, and the sink in a fixed order:

``resolve → registry → policy → tag → sink``

Contents
--------
* :func:`create_process_log_call` factory returning the per-context callable.
* :func:`build_diagnostic_emitter` wrapping the optional diagnostic hook.

System Role
-----------
Application-layer orchestrator wired by
:class:`lib_log_tag.runtime.LoggingContext`. Recoverable failures (unresolved
call site, unknown owner, sink errors) are absorbed here; only the
not-initialised contract violation escapes to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from lib_log_tag.application.ports import CallSiteResolverPort, SinkPort
from lib_log_tag.domain import CallSite, CallSiteNotFound, GlobalConfig, GlobalSettings, LoggerRegistry, Severity

from .tagging import TagSynthesizer
from .visibility import VisibilityPolicy

logger = logging.getLogger(__name__)

ProcessResult = dict[str, Any]
DiagnosticHook = Callable[[str, dict[str, Any]], None] | None


def build_diagnostic_emitter(diagnostic: DiagnosticHook) -> Callable[[str, dict[str, Any]], None]:
    """Return a callable forwarding pipeline milestones to ``diagnostic``.

    Exceptions raised by the hook never disturb the log call.

    Examples
    --------
    >>> seen = []
    >>> emit = build_diagnostic_emitter(lambda name, payload: seen.append(name))
    >>> emit("emitted", {})
    >>> seen
    ['emitted']
    >>> build_diagnostic_emitter(None)("emitted", {}) is None
    True
    """

    if diagnostic is None:

        def _noop(event_name: str, payload: dict[str, Any]) -> None:
            return None

        return _noop

    def _emit(event_name: str, payload: dict[str, Any]) -> None:
        try:
            diagnostic(event_name, payload)
        except Exception:  # noqa: BLE001
            logger.debug("diagnostic hook failed for %s", event_name, exc_info=True)

    return _emit


def create_process_log_call(
    *,
    config: GlobalConfig,
    registry: LoggerRegistry,
    resolver: CallSiteResolverPort,
    policy: VisibilityPolicy,
    tagger: TagSynthesizer,
    sink: SinkPort,
    diagnostic: DiagnosticHook = None,
) -> Callable[..., ProcessResult]:
    """Build the orchestrator capturing one context's collaborators.

    Parameters
    ----------
    config:
        :class:`GlobalConfig` whose snapshot is read once per call.
    registry:
        :class:`LoggerRegistry` providing the owner's state.
    resolver:
        Adapter implementing :class:`CallSiteResolverPort`.
    policy:
        :class:`VisibilityPolicy` deciding drop vs. emit.
    tagger:
        :class:`TagSynthesizer` building the tag.
    sink:
        Callable receiving ``(code, tag, message)``.
    diagnostic:
        Optional callback invoked with ``emitted``/``dropped``/
        ``callsite_unresolved``/``sink_error`` milestones.

    Returns
    -------
    Callable[[Severity, str], ProcessResult]
        Function accepting ``severity``, ``message`` and the keyword-only
        ``force_visible`` flag, returning a result dictionary.

    Examples
    --------
    >>> from lib_log_tag.domain import CallSite
    >>> class FixedResolver:
    ...     def resolve(self) -> CallSite:
    ...         return CallSite("app.Foo", "bar", 7, "foo.py")
    >>> lines = []
    >>> config = GlobalConfig()
    >>> _ = config.initialize("App", True)
    >>> process = create_process_log_call(
    ...     config=config,
    ...     registry=LoggerRegistry(),
    ...     resolver=FixedResolver(),
    ...     policy=VisibilityPolicy(),
    ...     tagger=TagSynthesizer(),
    ...     sink=lambda code, tag, message: lines.append((code, tag, message)),
    ... )
    >>> process(Severity.WARN, "careful")
    {'ok': True, 'severity': 'WARN', 'tag': 'Foo'}
    >>> lines
    [(30, 'Foo', 'careful')]
    """

    toolkit = _PipelineToolkit(
        config=config,
        registry=registry,
        resolver=resolver,
        policy=policy,
        tagger=tagger,
        sink=sink,
        emit=build_diagnostic_emitter(diagnostic),
    )
    return _ProcessPipeline(toolkit)


@dataclass(frozen=True)
class _PipelineToolkit:
    config: GlobalConfig
    registry: LoggerRegistry
    resolver: CallSiteResolverPort
    policy: VisibilityPolicy
    tagger: TagSynthesizer
    sink: SinkPort
    emit: Callable[[str, dict[str, Any]], None]


class _ProcessPipeline:
    def __init__(self, toolkit: _PipelineToolkit) -> None:
        self._toolkit = toolkit

    def __call__(self, severity: Severity, message: str, *, force_visible: bool = False) -> ProcessResult:
        toolkit = self._toolkit
        settings = toolkit.config.current()
        call_site = _resolve_call_site(toolkit, settings)
        state = toolkit.registry.get_or_create(call_site.owner if call_site is not None else None)
        decision = toolkit.policy.decide(severity, state, settings, force_visible=force_visible)
        if not decision.emit:
            return _reject(toolkit, severity, call_site, decision.reason or "dropped")
        tag = toolkit.tagger.synthesize(call_site, state, toolkit.config.require())
        return _deliver(toolkit, decision.severity, tag, message)


def _resolve_call_site(toolkit: _PipelineToolkit, settings: GlobalSettings | None) -> CallSite | None:
    if settings is None:
        return None
    if not settings.debug_mode and not settings.resolve_in_release:
        return None
    try:
        return toolkit.resolver.resolve()
    except CallSiteNotFound as exc:
        logger.debug("call site unresolved, using fallback logger: %s", exc)
        toolkit.emit("callsite_unresolved", {"error": str(exc)})
        return None


def _reject(toolkit: _PipelineToolkit, severity: Severity, call_site: CallSite | None, reason: str) -> ProcessResult:
    toolkit.emit(
        "dropped",
        {"severity": severity.name, "owner": call_site.owner if call_site else None, "reason": reason},
    )
    return {"ok": False, "reason": reason}


def _deliver(toolkit: _PipelineToolkit, severity: Severity, tag: str, message: str) -> ProcessResult:
    try:
        toolkit.sink(severity.code, tag, message)
    except Exception as exc:  # noqa: BLE001
        logger.exception("sink failed for tag %s", tag)
        toolkit.emit("sink_error", {"severity": severity.name, "tag": tag, "error": repr(exc)})
        return {"ok": False, "reason": "sink_error"}
    toolkit.emit("emitted", {"severity": severity.name, "tag": tag})
    return {"ok": True, "severity": severity.name, "tag": tag}


__all__ = ["DiagnosticHook", "ProcessResult", "build_diagnostic_emitter", "create_process_log_call"]
