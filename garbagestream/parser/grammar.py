"""Group/garbage grammar routines.

Each routine returns the node it parsed, or `None` after recording a
diagnostic on the parser. Callers return `None` as soon as a child does, so
the first error unwinds the whole parse without a partial tree.
"""

from garbagestream.ast import AstGarbage, AstGroup, AstNode
from garbagestream.diagnostics import Diagnostic, DiagnosticSpec
from garbagestream.diagnostics.codes import (
    PARSER_DANGLING_ESCAPE,
    PARSER_EMPTY_INPUT,
    PARSER_UNEXPECTED_LEADING_CHARACTER,
    PARSER_UNTERMINATED_GARBAGE,
    PARSER_UNTERMINATED_GROUP,
)
from garbagestream.parser.parser import Parser
from garbagestream.text import TextRange, TextSize

GROUP_OPEN = "{"
GROUP_CLOSE = "}"
GARBAGE_OPEN = "<"
GARBAGE_CLOSE = ">"
ESCAPE = "!"


def parse_stream(parser: Parser) -> AstNode | None:
    """Dispatch on the first character to a top-level group or garbage span."""
    if parser.at_eof():
        parser.error(_empty_input(parser))
        return None

    if parser.at(GARBAGE_OPEN):
        return parse_garbage(parser)

    if parser.at(GROUP_OPEN):
        return parse_group(parser)

    parser.error(_unexpected_leading_character(parser))
    return None


def parse_group(parser: Parser) -> AstGroup | None:
    start = parser.position
    if not parser.eat(GROUP_OPEN):
        raise RuntimeError(f"parse_group called at {parser.current!r}")

    children: list[AstNode] = []
    while (char := parser.current) is not None:
        if char == GARBAGE_OPEN:
            child = parse_garbage(parser)
        elif char == GROUP_OPEN:
            child = parse_group(parser)
        elif char == GROUP_CLOSE:
            parser.bump()
            return AstGroup(children=tuple(children))
        else:
            # Filler between children, e.g. `,`.
            parser.bump()
            continue

        if child is None:
            return None
        children.append(child)

    parser.error(_unterminated(parser, PARSER_UNTERMINATED_GROUP, start))
    return None


def parse_garbage(parser: Parser) -> AstGarbage | None:
    start = parser.position
    if not parser.eat(GARBAGE_OPEN):
        raise RuntimeError(f"parse_garbage called at {parser.current!r}")

    literal: list[str] = []
    while (char := parser.current) is not None:
        escape_start = parser.position
        parser.bump()

        if char == ESCAPE:
            # The escaped character is dropped without being inspected.
            if parser.at_eof():
                parser.error(_dangling_escape(parser, escape_start))
                return None
            parser.bump()
        elif char == GARBAGE_CLOSE:
            return AstGarbage(text="".join(literal))
        else:
            literal.append(char)

    parser.error(_unterminated(parser, PARSER_UNTERMINATED_GARBAGE, start))
    return None


def _diagnostic(spec: DiagnosticSpec, range: TextRange, message: str | None = None) -> Diagnostic:
    return Diagnostic(
        code=spec.code,
        message=message if message is not None else spec.message,
        range=range,
        severity=spec.severity,
        hint=spec.hint,
        category=spec.category,
    )


def _empty_input(parser: Parser) -> Diagnostic:
    return _diagnostic(PARSER_EMPTY_INPUT, parser.current_range)


def _unexpected_leading_character(parser: Parser) -> Diagnostic:
    return _diagnostic(
        PARSER_UNEXPECTED_LEADING_CHARACTER,
        parser.current_range,
        message=f"expected '<' or '{{', found {parser.current!r}",
    )


def _unterminated(parser: Parser, spec: DiagnosticSpec, start: TextSize) -> Diagnostic:
    return _diagnostic(spec, TextRange.new(start, parser.end))


def _dangling_escape(parser: Parser, escape_start: TextSize) -> Diagnostic:
    return _diagnostic(PARSER_DANGLING_ESCAPE, TextRange.new(escape_start, parser.end))
