"""Tests for the search session and find_all."""

from editcore.core.position import Position
from editcore.utils.search import SearchResult, SearchSession, find_all


class TestSearchSession:
    """Tests for SearchSession."""

    def test_find_next_walks_forward(self, make_buffer):
        """Test stepping through matches in document order."""
        buffer = make_buffer("foo bar", "bar")
        session = SearchSession(buffer, "bar")

        assert session.find_next() == Position(7, 0)
        assert session.find_next() == Position(3, 1)
        assert session.find_next() is None
        assert session.position == Position(3, 1)

    def test_find_previous_walks_back(self, make_buffer):
        """Test stepping back through matches on one line."""
        buffer = make_buffer("ab ab ab")
        session = SearchSession(buffer, "ab", Position(8, 0))

        assert session.find_previous() == Position(5, 0)
        assert session.find_previous() == Position(2, 0)
        assert session.find_previous() is None
        assert session.position == Position(2, 0)

    def test_cancel_restores_origin(self, make_buffer):
        """Test that cancelling returns the starting caret and clears matches."""
        buffer = make_buffer("xx", "xx")
        origin = Position(1, 0)
        session = SearchSession(buffer, "xx", origin)
        session.find_next()

        assert buffer.search_term == "xx"

        assert session.cancel() == origin
        assert buffer.search_term is None
        assert not any(any(line.matches) for line in buffer)


class TestFindAll:
    """Tests for find_all."""

    def test_all_occurrences(self, make_buffer):
        """Test listing every match with its start position."""
        buffer = make_buffer("a-a", "", "xa")

        results = find_all(buffer, "a")

        assert results == [
            SearchResult(Position(0, 0), 1, "a"),
            SearchResult(Position(2, 0), 1, "a"),
            SearchResult(Position(1, 2), 1, "a"),
        ]
        assert results[2].end == Position(2, 2)

    def test_does_not_activate_search(self, make_buffer):
        """Test that listing matches leaves the buffer's search state alone."""
        buffer = make_buffer("abc")

        find_all(buffer, "b")

        assert buffer.search_term is None

    def test_empty_query(self, make_buffer):
        """Test that an empty query finds nothing."""
        assert find_all(make_buffer("abc"), "") == []
