"""Visibility policy deciding whether, and at which severity, a call is emitted.

Purpose
-------
Express the release cutoff, the per-owner threshold, and escalation as an
explicit ordered pipeline so the tie-break order is a testable contract.

Contents
--------
* :class:`Decision` – outcome of one evaluation.
* ``DROP_STAGES`` – ordered ``(reason, predicate)`` pairs; the first predicate
  returning ``True`` drops the call.
* :class:`VisibilityPolicy` – evaluates the stages, then escalation.

System Role
-----------
Pure policy: no I/O, no stack inspection. The orchestrator in
:mod:`lib_log_tag.application.use_cases.process_call` feeds it the owner's
:class:`LoggerState` and the published :class:`GlobalSettings`.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from lib_log_tag.domain import GlobalSettings, LoggerState, NotInitialisedError, Severity


@dataclass(slots=True, frozen=True)
class Decision:
    """Result of :meth:`VisibilityPolicy.decide`.

    ``severity`` is the effective severity when ``emit`` is ``True`` and the
    requested one otherwise; ``reason`` names the dropping stage.
    """

    emit: bool
    severity: Severity
    reason: str | None = None


DropPredicate = Callable[[Severity, LoggerState, GlobalSettings, bool], bool]


def _release_cutoff(requested: Severity, state: LoggerState, settings: GlobalSettings, force_visible: bool) -> bool:
    # Forced visibility satisfies this stage only.
    return not settings.debug_mode and requested < Severity.INFO and not force_visible


def _below_threshold(requested: Severity, state: LoggerState, settings: GlobalSettings, force_visible: bool) -> bool:
    return requested < state.threshold


DROP_STAGES: tuple[tuple[str, DropPredicate], ...] = (
    ("release_cutoff", _release_cutoff),
    ("below_threshold", _below_threshold),
)
"""Drop stages in evaluation order."""


def escalate(requested: Severity, state: LoggerState, settings: GlobalSettings) -> Severity:
    """Return the severity to emit for a call that survived every drop stage."""

    if state.important and settings.debug_mode and requested < Severity.INFO:
        return Severity.INFO
    return requested


class VisibilityPolicy:
    """Evaluate the drop stages in order, then escalation.

    Examples
    --------
    >>> policy = VisibilityPolicy()
    >>> release = GlobalSettings(default_tag="App", debug_mode=False)
    >>> policy.decide(Severity.DEBUG, LoggerState(), release)
    Decision(emit=False, severity=<Severity.DEBUG: 1>, reason='release_cutoff')
    >>> debug = GlobalSettings(default_tag="App", debug_mode=True)
    >>> policy.decide(Severity.DEBUG, LoggerState(important=True), debug)
    Decision(emit=True, severity=<Severity.INFO: 2>, reason=None)
    """

    def __init__(self, stages: Sequence[tuple[str, DropPredicate]] = DROP_STAGES) -> None:
        self._stages = tuple(stages)

    @property
    def stages(self) -> tuple[str, ...]:
        """Return the stage names in evaluation order."""
        return tuple(name for name, _ in self._stages)

    def decide(
        self,
        requested: Severity,
        state: LoggerState,
        settings: GlobalSettings | None,
        *,
        force_visible: bool = False,
    ) -> Decision:
        """Decide drop vs. emit for ``requested`` under ``state`` and ``settings``.

        Raises
        ------
        NotInitialisedError
            When ``settings`` is ``None`` (the context was never initialised).
        """
        if settings is None:
            raise NotInitialisedError()
        for reason, predicate in self._stages:
            if predicate(requested, state, settings, force_visible):
                return Decision(emit=False, severity=requested, reason=reason)
        return Decision(emit=True, severity=escalate(requested, state, settings))


__all__ = ["DROP_STAGES", "Decision", "VisibilityPolicy", "escalate"]
