"""High-level parse entrypoint for group/garbage streams."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from garbagestream.diagnostics import Diagnostic
from garbagestream.parser.char_source import CharSource
from garbagestream.parser.errors import ParseErrorKind
from garbagestream.parser.grammar import parse_stream
from garbagestream.parser.parser import Parser

if TYPE_CHECKING:
    from garbagestream.ast import AstNode
    from garbagestream.pipeline import StreamParseResult


@dataclass(frozen=True, slots=True)
class ParsedStream:
    """Either a tree with no diagnostics, or no tree and the one error that stopped parsing."""

    ast: AstNode | None
    diagnostics: list[Diagnostic]

    @property
    def is_ok(self) -> bool:
        return self.ast is not None

    @property
    def error_kind(self) -> ParseErrorKind | None:
        if not self.diagnostics:
            return None
        return ParseErrorKind(self.diagnostics[0].code)

    @staticmethod
    def from_parser(parser: Parser, ast: AstNode | None) -> "ParsedStream":
        """Snapshot a finished parser; the carrier never shares the parser's list."""
        diagnostics = list(parser.finish())
        if diagnostics:
            return ParsedStream(ast=None, diagnostics=diagnostics)
        return ParsedStream(ast=ast, diagnostics=[])


def parse(text: str) -> ParsedStream:
    """Parse one stream into a tree or the diagnostic that stopped it.

    Group and garbage routines recurse once per nesting level, so a stream
    nested deeper than the interpreter recursion limit raises `RecursionError`.
    """
    parser = Parser(CharSource(text))
    ast = parse_stream(parser)
    return ParsedStream.from_parser(parser, ast)


def parse_result(text: str) -> StreamParseResult:
    from garbagestream.pipeline import StreamParseResult

    return StreamParseResult(source_text=text, parsed=parse(text))
