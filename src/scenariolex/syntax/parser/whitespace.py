"""Line and whitespace handling utilities for the scenario parser.

Every line-level construct consumes exactly one physical line (or, for
block comments and multi-line tags, a span ending at a line end) and must
report both the line content and the cursor just past its terminator.
"""

from scenariolex.syntax.cursor import Cursor

__all__ = ["consume_line", "fold_line_breaks", "is_blank", "rest_of_line_is_blank"]

_FOLD_TABLE: dict[int, str] = {ord("\n"): " ", ord("\r"): " "}


def consume_line(cursor: Cursor) -> tuple[str, Cursor]:
    """Read the rest of the current line.

    Args:
        cursor: Position anywhere within a line

    Returns:
        (content, next_cursor) where content excludes the line terminator
        and next_cursor sits just past it (LF, CRLF or CR), or at EOF.

    Design:
        Both skips are monotonic, so callers always make progress unless
        the cursor was already at EOF.
    """
    line_end = cursor.skip_to_line_end()
    return cursor.slice_to(line_end.pos), line_end.skip_line_end()


def rest_of_line_is_blank(cursor: Cursor) -> bool:
    """Check that only spaces and tabs remain before the line end."""
    after = cursor.skip_blank_inline()
    return after.is_eof or after.current in ("\n", "\r")


def is_blank(text: str) -> bool:
    """True for the empty string or whitespace-only text."""
    return not text or text.isspace()


def fold_line_breaks(text: str) -> str:
    """Replace every CR and LF with a single space.

    The replacement is one character for one character, so offsets into
    the folded text are offsets into the original text.

    Example:
        >>> fold_line_breaks("[\\ntag\\r\\n]")
        '[ tag  ]'
    """
    return text.translate(_FOLD_TABLE)
