"""Parser infrastructure (character source + parser + grammar routines)."""

from garbagestream.parser.char_source import CharSource
from garbagestream.parser.errors import ParseError, ParseErrorKind
from garbagestream.parser.grammar import parse_garbage, parse_group, parse_stream
from garbagestream.parser.parser import Parser
from garbagestream.parser.stream import ParsedStream, parse, parse_result

__all__ = [
    "CharSource",
    "ParseError",
    "ParseErrorKind",
    "ParsedStream",
    "Parser",
    "parse",
    "parse_garbage",
    "parse_group",
    "parse_result",
    "parse_stream",
]
