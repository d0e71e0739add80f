"""Use cases composing the tagging core."""

from __future__ import annotations

from .process_call import ProcessResult, build_diagnostic_emitter, create_process_log_call
from .tagging import TagSynthesizer
from .visibility import DROP_STAGES, Decision, VisibilityPolicy

__all__ = [
    "DROP_STAGES",
    "Decision",
    "ProcessResult",
    "TagSynthesizer",
    "VisibilityPolicy",
    "build_diagnostic_emitter",
    "create_process_log_call",
]
