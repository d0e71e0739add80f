"""Rich-powered console sink implementing :class:`SinkPort`.

Purpose
-------
Render emitted ``(code, tag, message)`` triples on an interactive console with
per-severity styles.

Contents
--------
* :data:`_STYLE_MAP` - default severity-to-style mapping.
* :class:`RichConsoleSink` - default sink installed by :func:`lib_log_tag.initialize`.
"""

from __future__ import annotations

from typing import Mapping

from rich.console import Console

from lib_log_tag.application.ports.sink import SinkPort
from lib_log_tag.domain.severity import Severity


#: Default Rich styles keyed by :class:`Severity`.
_STYLE_MAP: Mapping[Severity, str] = {
    Severity.TRACE: "dim",
    Severity.DEBUG: "grey62",
    Severity.INFO: "cyan",
    Severity.WARN: "yellow",
    Severity.ERROR: "red",
    Severity.FATAL: "bold red",
}


class RichConsoleSink(SinkPort):
    """Print emitted lines using Rich, writing to stderr by default."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: Mapping[Severity | str, str] | None = None,
    ) -> None:
        """Configure the sink with colour and style overrides."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(stderr=True, force_terminal=force_color or None, no_color=no_color)
        self._no_color = no_color
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            severity = Severity.from_name(key) if isinstance(key, str) else key
            merged[severity] = value
        self._style_map = merged

    def __call__(self, code: int, tag: str, message: str) -> None:
        """Print one line for the emitted triple.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True)
        >>> sink = RichConsoleSink(console=console)
        >>> sink(30, "Foo.bar", "careful")
        >>> "Foo.bar: careful" in console.export_text()
        True
        """
        severity = Severity.from_code(code)
        style = "" if self._no_color else self._style_map.get(severity, "")
        self._console.print(self.format_line(severity, tag, message), style=style, highlight=False, markup=False)

    @staticmethod
    def format_line(severity: Severity, tag: str, message: str) -> str:
        """Return the console line for one emitted triple.

        Examples
        --------
        >>> RichConsoleSink.format_line(Severity.INFO, "Foo", "hello")
        'ℹ  INFO Foo: hello'
        """
        return f"{severity.icon} {severity.name:>5} {tag}: {message}"


__all__ = ["RichConsoleSink"]
