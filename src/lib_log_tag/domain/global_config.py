"""One-shot global configuration shared by every owner in a context."""

from __future__ import annotations

from dataclasses import dataclass
from threading import Lock


class NotInitialisedError(RuntimeError):
    """Raised when a severity entry point runs before :meth:`GlobalConfig.initialize`."""

    def __init__(self) -> None:
        super().__init__("lib_log_tag.initialize() must be called before using the logging API")


@dataclass(slots=True, frozen=True)
class GlobalSettings:
    """Immutable snapshot published by :class:`GlobalConfig` once initialised.

    Attributes
    ----------
    default_tag:
        Tag used in release mode and whenever call-site resolution fails.
    debug_mode:
        ``True`` enables call-site tags, sub-INFO severities, and escalation.
    resolve_in_release:
        When ``False`` and not in debug mode, the stack is never inspected and
        every call is routed through the fallback logger state.
    """

    default_tag: str
    debug_mode: bool
    resolve_in_release: bool = True


class GlobalConfig:
    """Hold the :class:`GlobalSettings` snapshot, settable exactly once.

    Readers grab a single reference to the frozen snapshot, so a concurrent
    initialisation can never expose a half-written configuration.

    Examples
    --------
    >>> config = GlobalConfig()
    >>> config.initialized
    False
    >>> config.initialize("A", True)
    True
    >>> config.initialize("B", False)
    False
    >>> config.require().default_tag, config.require().debug_mode
    ('A', True)
    """

    def __init__(self) -> None:
        self._settings: GlobalSettings | None = None
        self._lock = Lock()

    @property
    def initialized(self) -> bool:
        return self._settings is not None

    def initialize(self, default_tag: str, debug_mode: bool, *, resolve_in_release: bool = True) -> bool:
        """Publish the settings if none exist yet; return ``True`` for the winner."""

        with self._lock:
            if self._settings is not None:
                return False
            self._settings = GlobalSettings(
                default_tag=default_tag,
                debug_mode=bool(debug_mode),
                resolve_in_release=bool(resolve_in_release),
            )
            return True

    def current(self) -> GlobalSettings | None:
        """Return the published snapshot, or ``None`` before initialisation."""

        return self._settings

    def require(self) -> GlobalSettings:
        """Return the published snapshot or raise :class:`NotInitialisedError`."""

        settings = self._settings
        if settings is None:
            raise NotInitialisedError()
        return settings


__all__ = ["GlobalConfig", "GlobalSettings", "NotInitialisedError"]
