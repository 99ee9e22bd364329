"""Tests for the Line class."""

import pytest

from editcore.core.line import Line
from editcore.core.position import SearchDirection
from editcore.core.syntax import HighlightKind

FORWARD = SearchDirection.FORWARD
BACKWARD = SearchDirection.BACKWARD


class TestEditing:
    """Tests for insert, delete, split and append."""

    def test_insert_in_middle(self):
        """Test inserting before a column."""
        line = Line("abd")
        line.insert("c", 2)

        assert line.text == "abcd"

    def test_insert_at_end_appends(self):
        """Test inserting at the line length."""
        line = Line("ab")
        line.insert("c", 2)

        assert line.text == "abc"

    def test_insert_uses_character_columns(self):
        """Test that columns count characters, not bytes."""
        line = Line("żółw")
        line.insert("!", 3)

        assert line.text == "żół!w"
        assert len(line) == 5

    def test_delete(self):
        """Test deleting a character."""
        line = Line("abc")
        line.delete(1)

        assert line.text == "ac"

    @pytest.mark.parametrize("column", [3, 10, -1])
    def test_delete_out_of_range_is_noop(self, column):
        """Test deleting past the end leaves the line alone."""
        line = Line("abc")
        line.delete(column)

        assert line.text == "abc"

    def test_split(self):
        """Test splitting a line into head and tail."""
        line = Line("abcdef")
        tail = line.split(3)

        assert line.text == "abc"
        assert tail.text == "def"

    def test_split_clears_overlays(self, rust_options):
        """Test that both halves need highlighting after a split."""
        line = Line("let x")
        line.highlight(rust_options)
        tail = line.split(2)

        assert line.syntax == [] and line.matches == []
        assert tail.syntax == [] and tail.matches == []

    @pytest.mark.parametrize("text,column", [
        ("abcdef", 3),
        ("abcdef", 0),
        ("abcdef", 6),
        ("", 0),
        ("ünïcödé", 4),
    ])
    def test_split_then_append_restores_line(self, text, column):
        """Test the split/append round trip."""
        line = Line(text)
        tail = line.split(column)
        line.append(tail)

        assert line.text == text

    def test_append_keeps_other_line(self):
        """Test that appending does not modify the other line."""
        line = Line("ab")
        other = Line("cd")
        line.append(other)

        assert line.text == "abcd"
        assert other.text == "cd"


class TestFind:
    """Tests for Line.find."""

    def test_forward_returns_match_end(self):
        """Test that a forward hit returns the column after the match."""
        assert Line("abcdef").find("de", 0, FORWARD) == 5

    def test_forward_from_column(self):
        """Test that forward search skips text before the start column."""
        line = Line("abcabc")

        assert line.find("abc", 0) == 3
        assert line.find("abc", 1) == 6
        assert line.find("abc", 4) is None

    def test_forward_start_past_end(self):
        """Test that starting at or past the end finds nothing."""
        assert Line("abc").find("c", 3) is None
        assert Line("").find("a", 0) is None

    def test_backward_finds_previous_match(self):
        """Test that backward search skips the match ending at the start column."""
        line = Line("abcabc")

        assert line.find("abc", 6, BACKWARD) == 3
        assert line.find("abc", 3, BACKWARD) is None

    def test_backward_needs_room_for_query(self):
        """Test that backward search only looks before start minus the query length."""
        line = Line("xab")

        assert line.find("ab", 3, BACKWARD) is None
        assert line.find("ab", 5, BACKWARD) == 3

    def test_case_sensitive(self):
        """Test that search is case-sensitive."""
        assert Line("Hello").find("hello", 0) is None

    def test_empty_query(self):
        """Test that an empty query never matches."""
        assert Line("abc").find("", 0) is None
        assert Line("abc").find("", 3, BACKWARD) is None


class TestHighlight:
    """Tests for Line.highlight and the display helpers."""

    @pytest.mark.parametrize("text", ["", "let x = 10;", "\t\"unterminated", "ąę // ść"])
    def test_overlay_lengths(self, rust_options, text):
        """Test that overlays cover every character."""
        line = Line(text)
        line.highlight(rust_options, "x")

        assert len(line.syntax) == len(line.matches) == len(line.text)

    def test_syntax_overlay(self, rust_options):
        """Test that token kinds are spread across their characters."""
        line = Line("fn 1")
        line.highlight(rust_options)

        assert line.syntax == [
            HighlightKind.PRIMARY_KEYWORD,
            HighlightKind.PRIMARY_KEYWORD,
            HighlightKind.WHITESPACE,
            HighlightKind.NUMBER,
        ]
        assert line.matches == [False] * 4

    def test_marks_every_match(self, plain_options):
        """Test that all occurrences of the search term are marked."""
        line = Line("abcabc")
        line.highlight(plain_options, "bc")

        assert line.matches == [False, True, True, False, True, True]

    def test_matches_do_not_overlap(self, plain_options):
        """Test that marking continues after the end of each match."""
        line = Line("aaa")
        line.highlight(plain_options, "aa")

        assert line.matches == [True, True, False]

    def test_highlight_is_idempotent(self, rust_options):
        """Test that highlighting twice gives the same overlays."""
        line = Line("let x = 10;")
        line.highlight(rust_options, "x")
        first = (list(line.syntax), list(line.matches))
        line.highlight(rust_options, "x")

        assert (line.syntax, line.matches) == first

    def test_highlight_after_edit(self, rust_options):
        """Test that highlighting refreshes stale overlays."""
        line = Line("ab")
        line.highlight(rust_options)
        line.insert("c", 2)

        assert len(line.syntax) == 2

        line.highlight(rust_options)

        assert len(line.syntax) == 3

    def test_render(self):
        """Test rendering a column range."""
        line = Line("abcdef")

        assert line.render() == "abcdef"
        assert line.render(2, 4) == "cd"
        assert line.render(4, 100) == "ef"
        assert line.render(10, 20) == ""

    def test_spans(self, rust_options):
        """Test grouping characters into display runs."""
        line = Line("let x")
        line.highlight(rust_options, "x")

        assert line.spans() == [
            ("let", HighlightKind.PRIMARY_KEYWORD),
            (" ", HighlightKind.WHITESPACE),
            ("x", HighlightKind.MATCH),
        ]
        assert line.spans(1, 4) == [
            ("et", HighlightKind.PRIMARY_KEYWORD),
            (" ", HighlightKind.WHITESPACE),
        ]

    def test_spans_without_highlight(self):
        """Test that an unhighlighted line displays as plain text."""
        assert Line("ab").spans() == [("ab", HighlightKind.NONE)]
