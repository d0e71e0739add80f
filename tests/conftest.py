from __future__ import annotations

from collections.abc import Iterator
from io import StringIO

import pytest
from rich.console import Console

from lib_log_tag import LoggingContext
from lib_log_tag import config as log_config
from lib_log_tag.runtime._state import set_context


class RecordingSink:
    """Sink double remembering every ``(code, tag, message)`` triple."""

    def __init__(self) -> None:
        self.lines: list[tuple[int, str, str]] = []

    def __call__(self, code: int, tag: str, message: str) -> None:
        self.lines.append((code, tag, message))

    @property
    def tags(self) -> list[str]:
        return [tag for _, tag, _ in self.lines]


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (log_config.DEFAULT_TAG_ENV_VAR, log_config.DEBUG_ENV_VAR, log_config.DOTENV_ENV_VAR):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def debug_context(sink: RecordingSink) -> LoggingContext:
    context = LoggingContext(sink)
    context.initialize("DefaultTag", True)
    return context


@pytest.fixture
def release_context(sink: RecordingSink) -> LoggingContext:
    context = LoggingContext(sink)
    context.initialize("DefaultTag", False)
    return context


@pytest.fixture
def default_context() -> Iterator[LoggingContext]:
    """Swap in an uninitialised process-wide context for façade tests."""

    context = LoggingContext()
    previous = set_context(context)
    try:
        yield context
    finally:
        set_context(previous)


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=120, color_system=None)
