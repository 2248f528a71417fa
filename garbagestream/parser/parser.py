"""Character-level parser core."""

from garbagestream.diagnostics import Diagnostic
from garbagestream.parser.char_source import CharSource
from garbagestream.text import TextRange, TextSize


class Parser:
    """Parser state shared by the grammar routines of one parse call.

    Parsing stops at the first error, so at most one diagnostic is recorded.
    """

    def __init__(self, source: CharSource) -> None:
        self._source = source
        self._diagnostics: list[Diagnostic] = []

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def current(self) -> str | None:
        return self._source.current

    @property
    def current_range(self) -> TextRange:
        return self._source.current_range

    @property
    def position(self) -> TextSize:
        return self._source.position

    @property
    def end(self) -> TextSize:
        return self._source.end

    def at(self, char: str) -> bool:
        return self.current == char

    def at_eof(self) -> bool:
        return self._source.is_eof

    def bump(self) -> None:
        self._source.bump()

    def eat(self, char: str) -> bool:
        if self.at(char):
            self.bump()
            return True
        return False

    def error(self, diagnostic: Diagnostic) -> None:
        if self._diagnostics:
            raise RuntimeError(f"Parser already failed with {self._diagnostics[0].code}")
        self._diagnostics.append(diagnostic)

    def has_failed(self) -> bool:
        return bool(self._diagnostics)

    def finish(self) -> list[Diagnostic]:
        return self._diagnostics
