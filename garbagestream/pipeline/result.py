"""Parse carrier for parse-once/consume-many workflows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from garbagestream.ast import count_groups, garbage_length, score
from garbagestream.diagnostics import has_errors
from garbagestream.parser.errors import ParseError
from garbagestream.parser.stream import ParsedStream

if TYPE_CHECKING:
    from garbagestream.ast import AstNode
    from garbagestream.diagnostics import Diagnostic


@dataclass(slots=True)
class StreamParseResult:
    """Stream parse result with cached metric accessors."""

    source_text: str
    parsed: ParsedStream
    _score: int | None = field(default=None, init=False, repr=False)
    _garbage_length: int | None = field(default=None, init=False, repr=False)
    _count_groups: int | None = field(default=None, init=False, repr=False)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self.parsed.diagnostics

    @property
    def has_errors(self) -> bool:
        return has_errors(self.parsed.diagnostics)

    @property
    def ast(self) -> AstNode | None:
        return self.parsed.ast

    def unwrap(self) -> AstNode:
        """Return the tree, raising `ParseError` if parsing failed."""
        if self.parsed.ast is None:
            raise ParseError(self.parsed.diagnostics[0])
        return self.parsed.ast

    def score(self) -> int:
        if self._score is None:
            self._score = score(self.unwrap())
        return self._score

    def garbage_length(self) -> int:
        if self._garbage_length is None:
            self._garbage_length = garbage_length(self.unwrap())
        return self._garbage_length

    def count_groups(self) -> int:
        if self._count_groups is None:
            self._count_groups = count_groups(self.unwrap())
        return self._count_groups
