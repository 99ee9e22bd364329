"""
Line module holding the text of one document line and its highlight overlays.
"""

from typing import List, Optional, Tuple

from .filetype import HighlightingOptions
from .position import SearchDirection
from .syntax import HighlightKind, expand, tokenize


class Line:
    """
    One line of text with its syntax and search match overlays.

    Columns are character indices. The overlays are only valid right after
    highlight(); editing methods leave them stale and split() clears them, so
    whoever mutates a line must highlight it again before displaying it.
    """

    def __init__(self, text: str = '') -> None:
        self._text = text
        self.syntax: List[HighlightKind] = []
        self.matches: List[bool] = []

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Line({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented

        return self._text == other._text

    @property
    def text(self) -> str:
        """The line content without terminator."""

        return self._text

    def _range(self, start: int, end: Optional[int]) -> Tuple[int, int]:
        length = len(self._text)
        end = length if end is None else max(0, min(end, length))
        start = max(0, min(start, end))

        return start, end

    def render(self, start: int = 0, end: Optional[int] = None) -> str:
        """Get the characters in [start, end), clamped to the line."""

        start, end = self._range(start, end)

        return self._text[start:end]

    def spans(self, start: int = 0, end: Optional[int] = None) -> List[Tuple[str, HighlightKind]]:
        """
        Get the visible part of the line grouped into display runs.

        Args:
            start: First column to include
            end: Column after the last one to include, None for end of line

        Returns:
            A list of (text, kind) tuples where matched characters carry
            HighlightKind.MATCH and all others their syntax kind
        """

        start, end = self._range(start, end)
        result: List[Tuple[str, HighlightKind]] = []

        for column in range(start, end):
            kind = self.syntax[column] if column < len(self.syntax) else HighlightKind.NONE
            if column < len(self.matches) and self.matches[column]:
                kind = HighlightKind.MATCH

            char = self._text[column]
            if result and result[-1][1] is kind:
                result[-1] = (result[-1][0] + char, kind)
                continue

            result.append((char, kind))

        return result

    def insert(self, char: str, at: int) -> None:
        """Insert a character before the given column, appending at the end."""

        self._text = self._text[:at] + char + self._text[at:]

    def delete(self, at: int) -> None:
        """Delete the character at the given column, if there is one."""

        if not 0 <= at < len(self._text):
            return

        self._text = self._text[:at] + self._text[at + 1:]

    def split(self, at: int) -> 'Line':
        """Cut the line at a column and return the tail as a new line."""

        tail = Line(self._text[at:])
        self._text = self._text[:at]
        self.syntax = []
        self.matches = []

        return tail

    def append(self, other: 'Line') -> None:
        """Append the text of another line."""

        self._text += other.text

    def find(self, query: str, start: int,
             direction: SearchDirection = SearchDirection.FORWARD) -> Optional[int]:
        """
        Find a query within this line.

        Args:
            query: Text to search for, case-sensitive
            start: Column to search from
            direction: FORWARD scans text[start:], BACKWARD finds the last
                match ending at or before start - len(query)

        Returns:
            The column just after the match, or None if there is none
        """

        if not query:
            return None

        if direction is SearchDirection.FORWARD:
            if start >= len(self._text):
                return None

            position = self._text.find(query, max(0, start))
        else:
            position = self._text.rfind(query, 0, max(0, start - len(query)))

        if position < 0:
            return None

        return position + len(query)

    def highlight(self, options: HighlightingOptions, search_term: Optional[str] = None) -> None:
        """Recompute the syntax and match overlays."""

        self.syntax = expand(tokenize(options, self._text))
        self.matches = [False] * len(self._text)

        if not search_term:
            return

        column = 0
        while True:
            end = self.find(search_term, column)
            if end is None:
                break

            for index in range(end - len(search_term), end):
                self.matches[index] = True
            column = end
