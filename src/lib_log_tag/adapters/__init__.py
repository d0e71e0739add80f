"""Adapters implementing the tagging core's ports."""

from __future__ import annotations

from .console import RichConsoleSink
from .stack_inspector import LIBRARY_MODULES, FrameWalkingResolver
from .stdlib_bridge import StdlibLoggingSink

__all__ = ["FrameWalkingResolver", "LIBRARY_MODULES", "RichConsoleSink", "StdlibLoggingSink"]
