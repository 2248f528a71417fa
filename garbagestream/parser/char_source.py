"""Forward-only character source over an in-memory stream."""

from garbagestream.text import TextRange, TextSize


class CharSource:
    """Cursor over an immutable string, advanced one character at a time."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._position = 0

    @property
    def current(self) -> str | None:
        """Character under the cursor, or `None` once the stream is exhausted."""
        if self._position >= len(self._text):
            return None
        return self._text[self._position]

    @property
    def position(self) -> TextSize:
        return TextSize.from_int(self._position)

    @property
    def current_range(self) -> TextRange:
        if self.is_eof:
            return TextRange.empty(self.position)
        return TextRange.at(self.position, TextSize.from_int(1))

    @property
    def end(self) -> TextSize:
        return TextSize.of(self._text)

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._text)

    def bump(self) -> None:
        if self.is_eof:
            raise RuntimeError("Cannot bump past the end of the stream")
        self._position += 1
