"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


PARSER_EMPTY_INPUT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EMPTY_INPUT",
    message="expected non-empty string",
    hint="A stream must start with `{` or `<`.",
    severity="error",
    category="parser",
)

PARSER_UNEXPECTED_LEADING_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_LEADING_CHARACTER",
    message="expected '<' or '{'",
    hint="A stream must start with `{` or `<`.",
    severity="error",
    category="parser",
)

PARSER_UNTERMINATED_GROUP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNTERMINATED_GROUP",
    message="unterminated '{'",
    hint="Close the group with `}`.",
    severity="error",
    category="parser",
)

PARSER_UNTERMINATED_GARBAGE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNTERMINATED_GARBAGE",
    message="unterminated '<'",
    hint="Close the garbage with `>`. An escaped `!>` does not close it.",
    severity="error",
    category="parser",
)

PARSER_DANGLING_ESCAPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_DANGLING_ESCAPE",
    message="unexpected end of string after '!'",
    hint="`!` always consumes the character after it.",
    severity="error",
    category="parser",
)
