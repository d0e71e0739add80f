"""Sink forwarding emitted lines to the stdlib :mod:`logging` tree."""

from __future__ import annotations

import logging

from lib_log_tag.application.ports.sink import SinkPort


class StdlibLoggingSink(SinkPort):
    """Log each emitted line on ``logging.getLogger(prefix + tag)``.

    Sink codes already are :mod:`logging` levels, so hosts keep their usual
    handler and filter configuration.

    Examples
    --------
    >>> StdlibLoggingSink(prefix="app.").logger_name("Foo.bar")
    'app.Foo.bar'
    """

    def __init__(self, *, prefix: str = "") -> None:
        self._prefix = prefix

    def logger_name(self, tag: str) -> str:
        return f"{self._prefix}{tag}"

    def __call__(self, code: int, tag: str, message: str) -> None:
        logging.getLogger(self.logger_name(tag)).log(code, message)


__all__ = ["StdlibLoggingSink"]
