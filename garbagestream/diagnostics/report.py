"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from garbagestream.diagnostics.diagnostic import Diagnostic


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def format_diagnostic(diagnostic: Diagnostic) -> str:
    start, end = diagnostic.range.as_tuple()
    return f"{diagnostic.code} at {start}..{end}: {diagnostic.message}"
