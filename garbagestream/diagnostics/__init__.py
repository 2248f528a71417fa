"""Diagnostics."""

from garbagestream.diagnostics.codes import (
    PARSER_DANGLING_ESCAPE,
    PARSER_EMPTY_INPUT,
    PARSER_UNEXPECTED_LEADING_CHARACTER,
    PARSER_UNTERMINATED_GARBAGE,
    PARSER_UNTERMINATED_GROUP,
    DiagnosticSpec,
)
from garbagestream.diagnostics.diagnostic import Diagnostic, Severity
from garbagestream.diagnostics.report import format_diagnostic, has_errors

__all__ = [
    "PARSER_DANGLING_ESCAPE",
    "PARSER_EMPTY_INPUT",
    "PARSER_UNEXPECTED_LEADING_CHARACTER",
    "PARSER_UNTERMINATED_GARBAGE",
    "PARSER_UNTERMINATED_GROUP",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "format_diagnostic",
    "has_errors",
]
