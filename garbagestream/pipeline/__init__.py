"""Shared parse carrier."""

from garbagestream.pipeline.result import StreamParseResult

__all__ = [
    "StreamParseResult",
]
