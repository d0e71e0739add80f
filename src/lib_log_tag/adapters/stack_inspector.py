"""Frame-walking call-site resolver implementing :class:`CallSiteResolverPort`.

Purpose
-------
Discover, from the live interpreter stack, the first frame that does not belong
to the logging library itself and describe it as a :class:`CallSite`.

Contents
--------
* ``LIBRARY_MODULES`` – closed set of modules whose frames sit between the
  caller and the resolver.
* :class:`FrameWalkingResolver` – adapter constructed by
  :class:`lib_log_tag.runtime.LoggingContext`.

System Role
-----------
The single most expensive step of a log call; the orchestrator skips it in
release mode when ``resolve_in_release`` is disabled.
"""

from __future__ import annotations

import inspect
import os
from collections.abc import Iterable
from types import FrameType

from lib_log_tag.application.ports.resolver import CallSiteResolverPort
from lib_log_tag.domain.callsite import CallSite, CallSiteNotFound, normalize_owner


LIBRARY_MODULES: frozenset[str] = frozenset(
    {
        "lib_log_tag.adapters.stack_inspector",
        "lib_log_tag.application.use_cases.process_call",
        "lib_log_tag.runtime",
        "lib_log_tag.runtime._context",
    }
)
"""Modules whose frames are never attributed as the call site."""


class FrameWalkingResolver(CallSiteResolverPort):
    """Return the first non-library frame found after a library frame.

    Frames are enumerated innermost outward. Library frames only set the
    "seen library" flag; the first non-library frame after that flag is the
    call site. Host wrappers around the entry points can be skipped by adding
    their module names to ``library_modules``.
    """

    def __init__(self, library_modules: Iterable[str] | None = None) -> None:
        self._library_modules = frozenset(library_modules) if library_modules is not None else LIBRARY_MODULES

    @property
    def library_modules(self) -> frozenset[str]:
        return self._library_modules

    def resolve(self) -> CallSite:
        frame: FrameType | None = inspect.currentframe()
        seen_library = False
        try:
            while frame is not None:
                module_name = frame.f_globals.get("__name__", "__main__")
                if module_name in self._library_modules:
                    seen_library = True
                elif seen_library:
                    return _describe(frame, module_name)
                frame = frame.f_back
        finally:
            del frame
        raise CallSiteNotFound("Went through the entire stack without finding the calling frame.")


def _describe(frame: FrameType, module_name: str) -> CallSite:
    code = frame.f_code
    return CallSite(
        owner=normalize_owner(module_name, code.co_qualname, frame.f_globals),
        function_name=code.co_name,
        line_number=frame.f_lineno,
        file_name=os.path.basename(code.co_filename),
    )


__all__ = ["FrameWalkingResolver", "LIBRARY_MODULES"]
