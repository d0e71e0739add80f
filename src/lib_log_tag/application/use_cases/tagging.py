"""Tag synthesis from the resolved call site and the owner's flags."""

from __future__ import annotations

from lib_log_tag.domain import CallSite, GlobalSettings, LoggerState


class TagSynthesizer:
    """Build the tag handed to the sink.

    Release mode never leaks call-site details: the default tag is returned
    unconditionally. In debug mode the tag is the owner's simple name,
    optionally followed by ``.function`` and ``(file:line)``.

    Examples
    --------
    >>> settings = GlobalSettings(default_tag="App", debug_mode=True)
    >>> site = CallSite("app.models.Foo", "bar", 12, "models.py")
    >>> tagger = TagSynthesizer()
    >>> tagger.synthesize(site, LoggerState(), settings)
    'Foo'
    >>> tagger.synthesize(site, LoggerState(include_function_name=True, include_line_number=True), settings)
    'Foo.bar(models.py:12)'
    >>> tagger.synthesize(None, LoggerState(), settings)
    'App'
    """

    def synthesize(self, call_site: CallSite | None, state: LoggerState, settings: GlobalSettings) -> str:
        if not settings.debug_mode or call_site is None:
            return settings.default_tag
        tag = call_site.simple_name
        if state.include_function_name:
            tag += f".{call_site.function_name}"
        if state.include_line_number:
            tag += f"({call_site.file_name}:{call_site.line_number})"
        return tag


__all__ = ["TagSynthesizer"]
