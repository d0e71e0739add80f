"""Port for components discovering the call site of a log call."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_tag.domain.callsite import CallSite


@runtime_checkable
class CallSiteResolverPort(Protocol):
    """Return the call site that issued the current log call."""

    def resolve(self) -> CallSite:
        """Return the call site or raise :class:`~lib_log_tag.domain.CallSiteNotFound`."""


__all__ = ["CallSiteResolverPort"]
