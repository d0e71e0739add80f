"""Domain entities and value objects used by the tagging core."""

from __future__ import annotations

from .callsite import CallSite, CallSiteNotFound, normalize_owner, owner_identity
from .global_config import GlobalConfig, GlobalSettings, NotInitialisedError
from .logger_state import LoggerState
from .registry import LoggerRegistry
from .severity import Severity

__all__ = [
    "CallSite",
    "CallSiteNotFound",
    "GlobalConfig",
    "GlobalSettings",
    "LoggerRegistry",
    "LoggerState",
    "NotInitialisedError",
    "Severity",
    "normalize_owner",
    "owner_identity",
]
