"""Parse error kinds and the exception raised by strict accessors."""

from enum import StrEnum

from garbagestream.diagnostics import Diagnostic
from garbagestream.diagnostics.codes import (
    PARSER_DANGLING_ESCAPE,
    PARSER_EMPTY_INPUT,
    PARSER_UNEXPECTED_LEADING_CHARACTER,
    PARSER_UNTERMINATED_GARBAGE,
    PARSER_UNTERMINATED_GROUP,
)


class ParseErrorKind(StrEnum):
    EMPTY_INPUT = PARSER_EMPTY_INPUT.code
    UNEXPECTED_LEADING_CHARACTER = PARSER_UNEXPECTED_LEADING_CHARACTER.code
    UNTERMINATED_GROUP = PARSER_UNTERMINATED_GROUP.code
    UNTERMINATED_GARBAGE = PARSER_UNTERMINATED_GARBAGE.code
    DANGLING_ESCAPE = PARSER_DANGLING_ESCAPE.code


class ParseError(Exception):
    """Raised when a failed parse is unwrapped."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    @property
    def kind(self) -> ParseErrorKind:
        return ParseErrorKind(self.diagnostic.code)
