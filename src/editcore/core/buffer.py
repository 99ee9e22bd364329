"""
Buffer module holding a text document as an ordered list of lines.
"""

import logging
import os
import shutil
import tempfile
from typing import Iterable, Iterator, List, Optional

from .errors import NoFilenameError
from .filetype import FileType, HighlightingOptions
from .line import Line
from .position import Position, SearchDirection

logger = logging.getLogger(__name__)

NEWLINE = '\n'


class Buffer:
    """
    A text document: its lines, file identity, search term and dirty state.

    Every line touched by an edit is highlighted again before the edit
    returns, so the overlays of all lines are always current.
    """

    def __init__(self, lines: Optional[Iterable[str]] = None, filename: Optional[str] = None) -> None:
        self.filename = filename
        self.file_type = FileType.from_filename(filename)
        self.search_term: Optional[str] = None
        self.dirty = False
        self.lines: List[Line] = [Line(text) for text in lines or ()]

        for line in self.lines:
            line.highlight(self.options)

    @classmethod
    def open(cls, filename: str) -> 'Buffer':
        """
        Load a buffer from a file.

        Args:
            filename: Path of the file to read

        Returns:
            A clean buffer with one line per line of the file

        Raises:
            IOError: If the file can't be opened or read
        """

        with open(filename, 'rb') as f:
            content = f.read().decode('utf-8', errors='replace')

        texts = content.split(NEWLINE)
        if texts[-1] == '':
            texts.pop()

        buffer = cls((text[:-1] if text.endswith('\r') else text for text in texts), filename)
        logger.debug("Loaded %s: %d lines, file type %s", filename, len(buffer), buffer.file_type)

        return buffer

    @property
    def options(self) -> HighlightingOptions:
        """Highlighting options of the buffer's file type."""

        return self.file_type.options

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def line(self, index: int) -> Optional[Line]:
        """Get a line by row, or None if the row is outside the document."""

        if not 0 <= index < len(self.lines):
            return None

        return self.lines[index]

    def is_empty(self) -> bool:
        return not self.lines

    @property
    def text(self) -> str:
        """The document content with lines joined by newlines."""

        return NEWLINE.join(line.text for line in self.lines)

    def char_count(self) -> int:
        """Number of characters in all lines, not counting line breaks."""

        return sum(len(line) for line in self.lines)

    def _highlight(self, line: Line) -> None:
        line.highlight(self.options, self.search_term)

    def insert(self, char: str, position: Position) -> None:
        """
        Insert a character at a position.

        A newline splits the line at the caret, or opens an empty line above
        it when the caret is at column 0. Other characters typed below the
        last line start a new line. Positions outside the document are ignored.
        """

        row, column = position.row, position.column
        if row > len(self.lines):
            return

        if row < len(self.lines) and not 0 <= column <= len(self.lines[row]):
            return

        if char == NEWLINE:
            if column == 0 or row == len(self.lines):
                new_line = Line()
                self.lines.insert(row, new_line)
                self._highlight(new_line)
            else:
                current = self.lines[row]
                tail = current.split(column)
                self.lines.insert(row + 1, tail)
                self._highlight(current)
                self._highlight(tail)
        elif row == len(self.lines):
            new_line = Line(char)
            self.lines.append(new_line)
            self._highlight(new_line)
        else:
            current = self.lines[row]
            current.insert(char, column)
            self._highlight(current)

        self.dirty = True

    def delete(self, position: Position) -> None:
        """
        Delete the character at a position.

        At the end of a line the following line is joined onto it instead.
        Positions outside the document are ignored.
        """

        row, column = position.row, position.column
        if row >= len(self.lines):
            return

        current = self.lines[row]

        if column == len(current) and row + 1 < len(self.lines):
            current.append(self.lines.pop(row + 1))
        elif 0 <= column < len(current):
            current.delete(column)
        else:
            return

        self._highlight(current)
        self.dirty = True

    def save(self, filename: Optional[str] = None) -> None:
        """
        Write the buffer to disk, one newline-terminated line per line.

        The content goes to a temporary file next to the target first, which
        then replaces the target, so a failed save leaves the old file intact.

        Args:
            filename: Optional filename to save to. If None, uses current filename.

        Raises:
            NoFilenameError: If neither a filename argument nor a stored
                filename is available
            IOError: If writing the file fails
        """

        target = filename or self.filename
        if not self.dirty and target == self.filename:
            return

        if not target:
            raise NoFilenameError()

        directory = os.path.dirname(os.path.abspath(target))
        temp_path = None

        try:
            fd, temp_path = tempfile.mkstemp(prefix='.editcore-', dir=directory)
            with os.fdopen(fd, 'w', encoding='utf-8', newline='') as f:
                for line in self.lines:
                    f.write(line.text)
                    f.write(NEWLINE)

            if os.path.exists(target):
                shutil.copymode(target, temp_path)
            os.replace(temp_path, target)
        except OSError as e:
            if temp_path and os.path.exists(temp_path):
                os.remove(temp_path)
            raise IOError(f"Failed to save file: {e}") from e

        self.filename = target
        self.dirty = False
        logger.info("Saved %d lines to %s", len(self.lines), target)

    def find(self, query: str, position: Position,
             direction: SearchDirection = SearchDirection.FORWARD) -> Optional[Position]:
        """
        Find a query starting from a position, scanning line by line.

        Forward searches start at the position's column on its row and at
        column 0 on later rows. Backward searches start at the position's
        column and at the last column of each earlier row.

        Args:
            query: Text to search for, case-sensitive
            position: Caret to search from
            direction: Direction to scan in

        Returns:
            Position just after the match, or None if nothing was found. A
            hit makes the query the active search term and highlights it on
            the matching line.
        """

        if not query or position.row >= len(self.lines):
            return None

        if direction is SearchDirection.FORWARD:
            rows = range(position.row, len(self.lines))
        else:
            rows = range(position.row, -1, -1)

        for row in rows:
            line = self.lines[row]

            if row == position.row:
                start = position.column
            elif direction is SearchDirection.FORWARD:
                start = 0
            else:
                start = max(0, len(line) - 1)

            column = line.find(query, start, direction)
            if column is None:
                continue

            self.search_term = query
            self._highlight(line)
            logger.debug("Found %r at row %d, column %d", query, row, column)

            return Position(column, row)

        logger.debug("No match for %r from %s searching %s", query, position, direction.value)

        return None

    def refresh_highlighting(self) -> None:
        """Highlight every line again with the current search term."""

        for line in self.lines:
            self._highlight(line)

    def clear_search(self) -> None:
        """Forget the active search term and remove its match overlays."""

        self.search_term = None
        self.refresh_highlighting()
