from bisect import bisect_right

from semantic_glyph.models import SourcePosition


class LineIndex:
    """Offset to line/column lookup for one text snapshot."""

    def __init__(self, text: str) -> None:
        self._length = len(text)
        self._starts = [0]
        start = text.find("\n")
        while start != -1:
            self._starts.append(start + 1)
            start = text.find("\n", start + 1)

    @property
    def line_count(self) -> int:
        return len(self._starts)

    def line_of(self, offset: int) -> int:
        return bisect_right(self._starts, offset) - 1

    def line_start(self, line: int) -> int:
        return self._starts[line]

    def line_end(self, line: int) -> int:
        """Offset of the line's terminating newline, or the end of the text."""
        if line + 1 < len(self._starts):
            return self._starts[line + 1] - 1
        return self._length

    def position(self, offset: int, length: int = 0) -> SourcePosition:
        offset = max(0, min(offset, self._length))
        line = self.line_of(offset)
        return SourcePosition(line=line, column=offset - self._starts[line], offset=offset, length=length)

    def line_position(self, line: int) -> SourcePosition:
        start = self._starts[line]
        return SourcePosition(line=line, column=0, offset=start, length=self.line_end(line) - start)
