"""Single advancing cursor over one fully materialised document."""

from dataclasses import dataclass

from graphtlp.text import LineIndex, TextRange, TextSize


@dataclass(frozen=True, slots=True)
class CursorCheckpoint:
    position: int


class Cursor:
    """Character cursor with exact checkpoint/rewind."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._line_index: LineIndex | None = None

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    @property
    def checkpoint(self) -> CursorCheckpoint:
        return CursorCheckpoint(position=self._position)

    def rewind(self, checkpoint: CursorCheckpoint) -> None:
        self._position = checkpoint.position

    def current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def at_text(self, text: str) -> bool:
        return self._source.startswith(text, self._position)

    def advance(self, steps: int) -> None:
        self._position = min(self._position + steps, len(self._source))

    def advance_while(self, predicate) -> int:
        """Consume characters while `predicate(char)` holds; return the count."""
        start = self._position
        length = len(self._source)
        while self._position < length and predicate(self._source[self._position]):
            self._position += 1
        return self._position - start

    def slice_from(self, start: int) -> str:
        return self._source[start : self._position]

    def range_from(self, start: int) -> TextRange:
        return TextRange.new(TextSize.from_int(start), TextSize.from_int(self._position))

    def line_col(self, offset: int) -> tuple[int, int]:
        if self._line_index is None:
            self._line_index = LineIndex.of(self._source)
        return self._line_index.line_col(TextSize.from_int(offset))
