"""Immutable cursor infrastructure for type-safe parsing.

Implements the immutable cursor pattern for zero-`None` parsing.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Line:column computed on-demand (O(n) only for errors)

Recognizer Outcomes:
    Every recognizer returns a RuleResult, a closed three-way union:

    - ParseResult: matched, carries the node and the advanced cursor
    - None: not applicable here, the caller tries the next rule
    - ParseError: the sigil matched but the body is invalid; terminal

Line Ending Support:
    - LF (Unix, \\n) and CRLF (Windows, \\r\\n) terminate lines
    - A lone CR is also treated as a line terminator

    compute_line_col() counts \\n only, so CR-only sources report every
    position on line 1.
"""

from dataclasses import dataclass, field

from scenariolex.diagnostics import DiagnosticCode, ErrorTemplate

__all__ = ["Cursor", "ParseError", "ParseResult", "RuleResult"]

_LINE_END_CHARS: tuple[str, ...] = ("\n", "\r")
_BLANK_INLINE_CHARS: tuple[str, ...] = (" ", "\t")


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> new_cursor = cursor.advance()
        >>> new_cursor.current
        'e'
        >>> cursor.current  # Original unchanged (immutability)
        'h'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Note: This is the preferred way to check for EOF.
              Use this in while loops: `while not cursor.is_eof:`
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns None ONLY when peeking beyond EOF.
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped to EOF).

        Example:
            >>> cursor = Cursor("hello", 0)
            >>> cursor.advance(2).pos
            2
            >>> cursor.advance(10).pos
            5
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def at(self, pos: int) -> "Cursor":
        """Return a cursor over the same source at an absolute position."""
        return Cursor(self.source, min(pos, len(self.source)))

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def slice_ahead(self, n: int) -> str:
        """Get next n characters without advancing cursor.

        May return fewer characters if near EOF.
        """
        return self.source[self.pos : self.pos + n]

    def startswith(self, prefix: str) -> bool:
        """Check whether the source continues with prefix at this position.

        Example:
            >>> Cursor("/* x", 0).startswith("/*")
            True
            >>> Cursor("/", 0).startswith("/*")
            False
        """
        return self.source.startswith(prefix, self.pos)

    def find(self, needle: str, end_pos: int | None = None) -> int:
        """Return absolute offset of the next occurrence of needle, or -1.

        The search starts at the current position and does not nest.
        """
        if end_pos is None:
            return self.source.find(needle, self.pos)
        return self.source.find(needle, self.pos, end_pos)

    def skip_blank_inline(self) -> "Cursor":
        """Skip spaces and tabs (never line endings).

        Example:
            >>> Cursor(" \\t x", 0).skip_blank_inline().pos
            3
        """
        c = self
        while not c.is_eof and c.current in _BLANK_INLINE_CHARS:
            c = c.advance()
        return c

    def skip_line_end(self) -> "Cursor":
        """Skip LF, CR, or CRLF line ending.

        Returns:
            New cursor advanced past the line ending, or unchanged if not at line end.

        Example:
            >>> Cursor("hello\\nworld", 5).skip_line_end().pos
            6
            >>> Cursor("hello\\r\\nworld", 5).skip_line_end().pos
            7
        """
        if self.is_eof:
            return self
        if self.current == "\r":
            cursor = self.advance()
            # Handle CRLF
            if not cursor.is_eof and cursor.current == "\n":
                return cursor.advance()
            return cursor
        if self.current == "\n":
            return self.advance()
        return self

    def skip_to_line_end(self) -> "Cursor":
        """Advance to the next line ending character.

        Stops AT the line ending, does not skip past it.
        Use skip_line_end() after this to consume the line ending.

        Example:
            >>> Cursor("hello\\nworld", 0).skip_to_line_end().pos
            5
        """
        cursor = self
        while not cursor.is_eof and cursor.current not in _LINE_END_CHARS:
            cursor = cursor.advance()
        return cursor

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position
            Only call for error reporting, not during normal parsing!

        Example:
            >>> source = "line1\\nline2\\nline3"
            >>> Cursor(source, 0).compute_line_col()
            (1, 1)
            >>> Cursor(source, 8).compute_line_col()
            (2, 3)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Matched outcome: parsed value and new cursor position.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> result = ParseResult("h", cursor.advance())
        >>> result.value
        'h'
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: Cursor


@dataclass(frozen=True, slots=True)
class ParseError:
    """Invalid outcome: a sigil matched but its body violates the grammar.

    Attributes:
        message: User-friendly description of the problem
        cursor: Position of the offending character
        expected: What would have been accepted (optional)
        code: Diagnostic code of the failing construct

    Example:
        >>> error = ParseError("Expected ']'", Cursor("hello\\nworld", 7))
        >>> error.format_error()
        "2:2: Expected ']'"
    """

    message: str
    cursor: Cursor
    expected: tuple[str, ...] = field(default_factory=tuple)
    code: DiagnosticCode = DiagnosticCode.UNRECOGNIZED_LINE

    def format_error(self) -> str:
        """Format error with line:column.

        Example:
            >>> error = ParseError("Unexpected", Cursor("ab", 1), expected=("|",))
            >>> error.format_error()
            "1:2: Unexpected (expected: '|')"
        """
        line, col = self.cursor.compute_line_col()
        error_msg = f"{line}:{col}: {self.message}"

        if self.expected:
            expected_str = ", ".join(f"'{e}'" for e in self.expected)
            error_msg += f" (expected: {expected_str})"

        return error_msg


type RuleResult[T] = ParseResult[T] | ParseError | None
