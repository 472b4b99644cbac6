"""Tests for cursor infrastructure.

Validates the immutable cursor pattern and the three-way rule result.
"""

from __future__ import annotations

import pytest
from hypothesis import example, given
from hypothesis import strategies as st

from scenariolex.diagnostics import DiagnosticCode
from scenariolex.syntax.cursor import Cursor, ParseError, ParseResult

# ============================================================================
# CURSOR BASIC TESTS
# ============================================================================


class TestCursorBasic:
    """Test basic cursor functionality."""

    def test_create_cursor(self) -> None:
        """Create cursor at position 0."""
        cursor = Cursor("hello", 0)

        assert cursor.source == "hello"
        assert cursor.pos == 0
        assert not cursor.is_eof

    def test_cursor_immutability(self) -> None:
        """Cursor is immutable (frozen dataclass)."""
        cursor = Cursor("hello", 0)

        with pytest.raises(AttributeError):
            cursor.pos = 5  # type: ignore[misc]

    def test_current_at_eof_raises_eof_error(self) -> None:
        """Reading current at EOF raises EOFError with the position."""
        with pytest.raises(EOFError, match="Unexpected EOF at position 2"):
            _ = Cursor("hi", 2).current

    def test_is_eof_for_empty_source(self) -> None:
        """is_eof is True for empty source at position 0."""
        assert Cursor("", 0).is_eof


# ============================================================================
# NAVIGATION
# ============================================================================


class TestCursorNavigation:
    """Test advance, at, peek and slicing."""

    def test_advance_returns_new_cursor(self) -> None:
        """advance() leaves the original cursor unchanged."""
        cursor = Cursor("hello", 0)
        moved = cursor.advance(2)

        assert moved.pos == 2
        assert cursor.pos == 0

    def test_advance_clamps_to_eof(self) -> None:
        """advance() never moves past the end of source."""
        assert Cursor("hello", 3).advance(10).pos == 5

    def test_at_jumps_to_absolute_position(self) -> None:
        """at() keeps the source and replaces the position."""
        cursor = Cursor("hello", 4).at(1)

        assert cursor.source == "hello"
        assert cursor.current == "e"

    def test_at_clamps_to_eof(self) -> None:
        """at() clamps positions beyond the end."""
        assert Cursor("abc", 0).at(99).pos == 3

    def test_peek_within_and_beyond_source(self) -> None:
        """peek() returns None only beyond EOF."""
        cursor = Cursor("ab", 0)

        assert cursor.peek() == "a"
        assert cursor.peek(1) == "b"
        assert cursor.peek(2) is None

    def test_slice_to_and_slice_ahead(self) -> None:
        """Slices start at the current position."""
        cursor = Cursor("#Jane:Angry", 1)

        assert cursor.slice_to(5) == "Jane"
        assert cursor.slice_ahead(4) == "Jane"
        assert cursor.slice_ahead(100) == "Jane:Angry"

    def test_startswith(self) -> None:
        """startswith() matches at the current position only."""
        cursor = Cursor("x/*", 1)

        assert cursor.startswith("/*")
        assert not cursor.startswith("x")
        assert not Cursor("/", 0).startswith("/*")

    def test_find_returns_absolute_offset(self) -> None:
        """find() searches forward and reports absolute offsets."""
        cursor = Cursor("[a] [b]", 1)

        assert cursor.find("]") == 2
        assert cursor.at(3).find("]") == 6
        assert cursor.find("}") == -1

    def test_find_respects_end_bound(self) -> None:
        """find() ignores matches at or after end_pos."""
        assert Cursor("ab]", 0).find("]", end_pos=2) == -1


# ============================================================================
# LINE HANDLING
# ============================================================================


class TestCursorLines:
    """Test blank, line end and line/column helpers."""

    def test_skip_blank_inline_stops_at_newline(self) -> None:
        """Spaces and tabs are skipped, line endings are not."""
        cursor = Cursor(" \t\nx", 0).skip_blank_inline()

        assert cursor.pos == 2
        assert cursor.current == "\n"

    @pytest.mark.parametrize(
        ("source", "expected"),
        [("a\nb", 2), ("a\r\nb", 3), ("a\rb", 2), ("ab", 1)],
    )
    def test_skip_line_end(self, source: str, expected: int) -> None:
        """LF, CRLF and lone CR are each one line ending."""
        assert Cursor(source, 1).skip_line_end().pos == expected

    def test_skip_line_end_at_eof_is_noop(self) -> None:
        """skip_line_end() at EOF returns the same position."""
        assert Cursor("a", 1).skip_line_end().pos == 1

    def test_skip_to_line_end_stops_at_terminator(self) -> None:
        """skip_to_line_end() stops on the CR of a CRLF."""
        assert Cursor("hello\r\nworld", 0).skip_to_line_end().pos == 5

    def test_compute_line_col(self) -> None:
        """Line and column are 1-based."""
        source = "line1\nline2\nline3"

        assert Cursor(source, 0).compute_line_col() == (1, 1)
        assert Cursor(source, 8).compute_line_col() == (2, 3)
        assert Cursor(source, len(source)).compute_line_col() == (3, 6)

    @given(st.text(max_size=50), st.integers(min_value=0, max_value=60))
    @example("a\nb", 2)
    def test_compute_line_col_always_one_based(self, source: str, pos: int) -> None:
        """Property: line and column are never below 1."""
        line, column = Cursor(source, min(pos, len(source))).compute_line_col()

        assert line >= 1
        assert column >= 1
        assert line == source.count("\n", 0, min(pos, len(source))) + 1


# ============================================================================
# RESULT TYPES
# ============================================================================


class TestParseResultAndError:
    """Test the Matched and Invalid outcomes."""

    def test_parse_result_holds_value_and_cursor(self) -> None:
        """ParseResult carries the value and the advanced cursor."""
        cursor = Cursor("hello", 0)
        result = ParseResult("h", cursor.advance())

        assert result.value == "h"
        assert result.cursor.pos == 1

    def test_parse_error_defaults(self) -> None:
        """ParseError defaults to no expectations and UNRECOGNIZED_LINE."""
        error = ParseError("Bad", Cursor("x", 0))

        assert error.expected == ()
        assert error.code is DiagnosticCode.UNRECOGNIZED_LINE

    def test_format_error_with_position(self) -> None:
        """format_error() prefixes line:column."""
        error = ParseError("Expected ']'", Cursor("hello\nworld", 7))

        assert error.format_error() == "2:2: Expected ']'"

    def test_format_error_with_expected(self) -> None:
        """format_error() lists expected tokens."""
        error = ParseError("Unexpected", Cursor("ab", 1), expected=("|", "line end"))

        assert error.format_error() == "1:2: Unexpected (expected: '|', 'line end')"

    def test_outcomes_are_distinct_types(self) -> None:
        """Matched, Invalid and NotApplicable cannot be confused."""
        matched = ParseResult("x", Cursor("x", 1))
        invalid = ParseError("bad", Cursor("x", 0))

        assert not isinstance(matched, ParseError)
        assert not isinstance(invalid, ParseResult)
        assert matched is not None
        assert invalid is not None
