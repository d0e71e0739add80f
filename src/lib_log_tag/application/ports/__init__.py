"""Ports describing the boundaries of the tagging core."""

from __future__ import annotations

from .resolver import CallSiteResolverPort
from .sink import SinkPort

__all__ = ["CallSiteResolverPort", "SinkPort"]
