"""End-to-end behaviour of an explicit :class:`LoggingContext`."""

from __future__ import annotations

import inspect
import logging
import threading
from typing import Any

import pytest

from lib_log_tag import LoggingContext, NotInitialisedError, Severity
from tests.conftest import RecordingSink

MODULE_TAG = __name__.rsplit(".", 1)[-1]


class Foo:
    def __init__(self, context: LoggingContext) -> None:
        self.context = context

    def bar(self, message: str = "hello") -> dict[str, Any]:
        return self.context.info(message)

    def chatty(self) -> dict[str, Any]:
        return self.context.debug("details")

    def always(self) -> dict[str, Any]:
        return self.context.debug_always("forced")

    def where(self) -> tuple[dict[str, Any], int]:
        result = self.context.warn("located")
        return result, inspect.currentframe().f_lineno - 1  # type: ignore[union-attr]

    class Helper:
        def run(self, context: LoggingContext) -> dict[str, Any]:
            return context.error("nested")


def test_debug_mode_tags_with_owner_simple_name(debug_context: LoggingContext, sink: RecordingSink) -> None:
    result = Foo(debug_context).bar()

    assert result == {"ok": True, "severity": "INFO", "tag": "Foo"}
    assert sink.lines == [(Severity.INFO.code, "Foo", "hello")]


def test_function_names_follow_the_owner_flag(debug_context: LoggingContext, sink: RecordingSink) -> None:
    foo = Foo(debug_context)
    foo.bar()
    debug_context.get_logger(Foo).set_include_function_name(True)
    foo.bar()

    assert sink.tags == ["Foo", "Foo.bar"]


def test_module_level_callers_use_the_module_as_owner(debug_context: LoggingContext, sink: RecordingSink) -> None:
    debug_context.info("from a test function")
    assert sink.tags == [MODULE_TAG]


def test_nested_classes_share_the_outer_owner(debug_context: LoggingContext, sink: RecordingSink) -> None:
    Foo.Helper().run(debug_context)
    assert sink.lines == [(Severity.ERROR.code, "Foo", "nested")]
    assert debug_context.registry.owners() == (f"{__name__}.Foo",)


def test_release_mode_drops_trace_and_debug(release_context: LoggingContext, sink: RecordingSink) -> None:
    foo = Foo(release_context)

    assert foo.chatty() == {"ok": False, "reason": "release_cutoff"}
    assert release_context.trace("quiet") == {"ok": False, "reason": "release_cutoff"}
    assert sink.lines == []

    release_context.warn("visible")
    assert sink.lines == [(Severity.WARN.code, "DefaultTag", "visible")]


def test_release_mode_never_leaks_call_site_details(release_context: LoggingContext, sink: RecordingSink) -> None:
    release_context.set_include_function_names(True)
    release_context.set_include_line_numbers(True)
    Foo(release_context).bar()
    assert sink.tags == ["DefaultTag"]


def test_important_owner_escalates_to_info_in_debug_mode(debug_context: LoggingContext, sink: RecordingSink) -> None:
    debug_context.get_logger(Foo).set_important(True)

    result = Foo(debug_context).chatty()

    assert result["severity"] == "INFO"
    assert sink.lines == [(Severity.INFO.code, "Foo", "details")]


def test_important_owner_is_not_escalated_in_release_mode(release_context: LoggingContext, sink: RecordingSink) -> None:
    release_context.get_logger(Foo).set_important(True)

    assert Foo(release_context).chatty() == {"ok": False, "reason": "release_cutoff"}
    Foo(release_context).always()
    assert sink.lines == [(Severity.DEBUG.code, "DefaultTag", "forced")]


def test_line_numbers_apply_retroactively(debug_context: LoggingContext, sink: RecordingSink) -> None:
    foo = Foo(debug_context)
    foo.bar()
    state = debug_context.get_logger(Foo)
    assert state.include_line_number is False

    debug_context.set_include_line_numbers(True)
    _, line = foo.where()

    assert state.include_line_number is True
    assert sink.tags[-1] == f"Foo(test_context.py:{line})"


def test_function_name_default_applies_to_future_owners(debug_context: LoggingContext, sink: RecordingSink) -> None:
    debug_context.set_include_function_names(True)
    Foo(debug_context).bar()
    assert sink.tags == ["Foo.bar"]


def test_owner_threshold_drops_lower_severities(debug_context: LoggingContext, sink: RecordingSink) -> None:
    debug_context.get_logger(Foo).set_threshold(Severity.WARN)
    foo = Foo(debug_context)

    assert foo.bar() == {"ok": False, "reason": "below_threshold"}
    foo.where()
    assert sink.tags == ["Foo"]


def test_forced_visibility_still_honours_the_threshold(release_context: LoggingContext, sink: RecordingSink) -> None:
    release_context.get_logger(Foo).set_threshold("info")
    assert Foo(release_context).always() == {"ok": False, "reason": "below_threshold"}
    assert sink.lines == []


def test_forced_trace_is_visible_in_release_mode(release_context: LoggingContext, sink: RecordingSink) -> None:
    result = release_context.trace_always("forced trace")
    assert result == {"ok": True, "severity": "TRACE", "tag": "DefaultTag"}
    assert sink.lines == [(Severity.TRACE.code, "DefaultTag", "forced trace")]


def test_log_accepts_severity_names(debug_context: LoggingContext, sink: RecordingSink) -> None:
    debug_context.log("warning", "by name")
    debug_context.log(Severity.FATAL, "by member")
    assert [code for code, _, _ in sink.lines] == [Severity.WARN.code, Severity.FATAL.code]


def test_log_rejects_unknown_severity_names(debug_context: LoggingContext) -> None:
    with pytest.raises(ValueError, match="Unknown severity"):
        debug_context.log("loud", "nope")


def test_get_logger_returns_the_same_state_for_class_and_identity(debug_context: LoggingContext) -> None:
    by_class = debug_context.get_logger(Foo)
    by_name = debug_context.get_logger(f"{__name__}.Foo")
    by_nested = debug_context.get_logger(Foo.Helper)

    assert by_class is by_name is by_nested
    assert len(debug_context.registry) == 1


def test_unmappable_owner_maps_to_fallback(debug_context: LoggingContext) -> None:
    assert debug_context.get_logger(42) is debug_context.fallback_logger()
    assert debug_context.get_logger("  ") is debug_context.fallback_logger()


def test_logging_before_initialisation_raises(sink: RecordingSink) -> None:
    context = LoggingContext(sink)

    with pytest.raises(NotInitialisedError):
        context.info("too early")
    assert sink.lines == []
    assert context.is_initialised is False
    assert context.settings is None


def test_reinitialisation_is_ignored_with_a_warning(
    debug_context: LoggingContext, sink: RecordingSink, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING, logger="lib_log_tag.runtime._context"):
        assert debug_context.initialize("Other", False) is False

    assert "re-initialise" in caplog.text
    assert debug_context.settings is not None
    assert debug_context.settings.default_tag == "DefaultTag"
    assert debug_context.settings.debug_mode is True


def test_release_without_resolution_uses_fallback_state(sink: RecordingSink) -> None:
    context = LoggingContext(sink)
    context.initialize("DefaultTag", False, resolve_in_release=False)
    context.get_logger(Foo).set_threshold(Severity.FATAL)

    Foo(context).bar()

    assert sink.lines == [(Severity.INFO.code, "DefaultTag", "hello")]
    assert context.registry.owners() == (f"{__name__}.Foo",)


def test_initialize_installs_explicit_sink() -> None:
    replacement = RecordingSink()
    context = LoggingContext()
    context.initialize("App", True, sink=replacement)
    context.info("routed")
    assert replacement.lines == [(Severity.INFO.code, MODULE_TAG, "routed")]


def test_diagnostic_hook_sees_drops_and_emits(sink: RecordingSink) -> None:
    events: list[tuple[str, dict[str, Any]]] = []
    context = LoggingContext(sink, diagnostic_hook=lambda name, payload: events.append((name, payload)))
    context.initialize("DefaultTag", False)

    context.debug("hidden")
    context.info("shown")

    assert [name for name, _ in events] == ["dropped", "emitted"]
    assert events[0][1]["reason"] == "release_cutoff"
    assert events[1][1] == {"severity": "INFO", "tag": "DefaultTag"}


def test_initialize_installs_the_diagnostic_hook(sink: RecordingSink) -> None:
    events: list[str] = []
    context = LoggingContext(sink)
    foo = Foo(context)
    context.get_logger(Foo).set_threshold(Severity.WARN)

    context.initialize("DefaultTag", True, diagnostic_hook=lambda name, payload: events.append(name))
    foo.bar()
    foo.where()

    assert events == ["dropped", "emitted"]
    assert sink.tags == ["Foo"]


def test_concurrent_logging_creates_one_state_per_owner(debug_context: LoggingContext, sink: RecordingSink) -> None:
    barrier = threading.Barrier(8)

    def worker() -> None:
        barrier.wait()
        for _ in range(25):
            Foo(debug_context).bar()

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(sink.lines) == 200
    assert set(sink.tags) == {"Foo"}
    assert debug_context.registry.owners() == (f"{__name__}.Foo",)
