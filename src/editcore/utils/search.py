"""
Search functionality for the text editor.
"""

import logging
from typing import List, Optional

from ..core.buffer import Buffer
from ..core.position import Position, SearchDirection

logger = logging.getLogger(__name__)


class SearchResult:
    """Represents a search result with position and match information."""

    def __init__(self, position: Position, length: int, match: str):
        self.position = position
        self.length = length
        self.match = match

    def __repr__(self) -> str:
        return f"SearchResult({self.position!r}, {self.length}, {self.match!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchResult):
            return NotImplemented

        return (self.position, self.length, self.match) == (other.position, other.length, other.match)

    @property
    def end(self) -> Position:
        """Position just after the match."""

        return Position(self.position.column + self.length, self.position.row)


class SearchSession:
    """
    Steps a caret through the matches of one query.

    The caret moves to the end of each match found, so calling find_next
    repeatedly walks forward through the document and find_previous walks
    back. Cancelling restores the caret the session started from.
    """

    def __init__(self, buffer: Buffer, query: str, origin: Position = Position()) -> None:
        self.buffer = buffer
        self.query = query
        self.origin = origin
        self.position = origin

    def _step(self, direction: SearchDirection) -> Optional[Position]:
        found = self.buffer.find(self.query, self.position, direction)
        if found is None:
            return None

        self.position = found

        return found

    def find_next(self) -> Optional[Position]:
        """Move to the end of the next match, or stay put if there is none."""

        return self._step(SearchDirection.FORWARD)

    def find_previous(self) -> Optional[Position]:
        """Move to the end of the previous match, or stay put if there is none."""

        return self._step(SearchDirection.BACKWARD)

    def cancel(self) -> Position:
        """
        End the search.

        Returns:
            Position: The caret position the session started from
        """

        self.buffer.clear_search()
        logger.debug("Search for %r cancelled, returning to %s", self.query, self.origin)

        return self.origin


def find_all(buffer: Buffer, query: str) -> List[SearchResult]:
    """
    Find all non-overlapping occurrences of a query.

    Args:
        buffer: The buffer to search
        query: Text to search for, case-sensitive

    Returns:
        List[SearchResult]: Results in document order, positioned at match starts
    """

    if not query:
        return []

    results = []

    for row, line in enumerate(buffer):
        column = 0
        while True:
            end = line.find(query, column)
            if end is None:
                break

            results.append(SearchResult(Position(end - len(query), row), len(query), query))
            column = end

    return results
