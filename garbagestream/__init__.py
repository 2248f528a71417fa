"""Group/garbage stream parser with score and garbage-length metrics."""

from garbagestream.ast import AstGarbage, AstGroup, AstNode, count_groups, garbage_length, score
from garbagestream.parser import ParseError, ParseErrorKind, ParsedStream, parse, parse_result
from garbagestream.pipeline import StreamParseResult

__all__ = [
    "AstGarbage",
    "AstGroup",
    "AstNode",
    "ParseError",
    "ParseErrorKind",
    "ParsedStream",
    "StreamParseResult",
    "count_groups",
    "garbage_length",
    "parse",
    "parse_result",
    "score",
]
