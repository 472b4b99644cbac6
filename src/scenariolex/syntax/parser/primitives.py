"""Primitive recognizers for the scenario parser.

Low-level parsers for identifiers, restricted names, quoted strings and
tag parameter tokens. They are stateless and reused by several line-level
rules; the composer never calls them directly.

Outcome Convention:
    - ParseResult: matched
    - None: not applicable at this position (SoftFail)
    - ParseError: applicable but malformed (HardFail)
"""

from collections.abc import Callable

from scenariolex.constants import QUOTE_MARKS, SIGIL_PARAMETER_ASSIGN
from scenariolex.diagnostics import DiagnosticCode
from scenariolex.syntax.ast import Identifier, KeyValuePair, QuotedString, Span
from scenariolex.syntax.cursor import Cursor, ParseError, ParseResult, RuleResult

__all__ = [
    "find_first",
    "is_identifier_char",
    "is_identifier_start",
    "is_name_char",
    "parse_identifier",
    "parse_key_value_pair",
    "parse_name",
    "parse_quoted_string",
]

# ASCII only. str.isalpha() accepts full-width and accented letters, which
# the scenario grammar rejects.
_ASCII_LETTERS: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)
_ASCII_DIGITS: frozenset[str] = frozenset("0123456789")
_NAME_CHARS: frozenset[str] = _ASCII_LETTERS | {"_"}
_IDENTIFIER_CHARS: frozenset[str] = _NAME_CHARS | _ASCII_DIGITS


def is_identifier_start(ch: str) -> bool:
    """Check if character can start an identifier: [A-Za-z_]"""
    return ch in _NAME_CHARS


def is_identifier_char(ch: str) -> bool:
    """Check if character can continue an identifier: [A-Za-z0-9_]"""
    return ch in _IDENTIFIER_CHARS


def is_name_char(ch: str) -> bool:
    """Check if character belongs to a label or single-line tag name: [A-Za-z_]"""
    return ch in _NAME_CHARS


def parse_identifier(cursor: Cursor) -> ParseResult[Identifier] | ParseError:
    """Parse identifier: [A-Za-z_][A-Za-z0-9_]*

    Matches the longest prefix. The rest of the line is NOT required to be
    consumed; callers that need a whole-line identifier check trailing
    content themselves.

    Examples:
        name -> Identifier("name")
        _scene_2 -> Identifier("_scene_2")
        7up -> ParseError (cannot start with a digit)

    Args:
        cursor: Current position in source

    Returns:
        ParseResult(Identifier, new_cursor) on success
        ParseError if the current character cannot start an identifier
    """
    if cursor.is_eof or not is_identifier_start(cursor.current):
        return ParseError(
            "Expected identifier (must start with an ASCII letter or underscore)",
            cursor,
            expected=("a-z", "A-Z", "_"),
            code=DiagnosticCode.INVALID_IDENTIFIER,
        )

    start = cursor
    cursor = cursor.advance()
    while not cursor.is_eof and is_identifier_char(cursor.current):
        cursor = cursor.advance()

    raw = start.slice_to(cursor.pos)
    return ParseResult(
        Identifier(value=raw, raw=raw, span=Span(start=start.pos, end=cursor.pos)),
        cursor,
    )


def parse_name(cursor: Cursor) -> ParseResult[str] | None:
    """Parse restricted name: [A-Za-z_]+

    Labels and single-line tag names use this form; digits are not allowed
    anywhere in the name.

    Returns:
        ParseResult(name, new_cursor), or None if no name character is here
    """
    start = cursor
    while not cursor.is_eof and is_name_char(cursor.current):
        cursor = cursor.advance()
    if cursor.pos == start.pos:
        return None
    return ParseResult(start.slice_to(cursor.pos), cursor)


def parse_quoted_string(cursor: Cursor) -> ParseResult[QuotedString] | None:
    """Parse quoted string: 'text' or "text"

    The closing mark is the next occurrence of the opening mark. No escape
    sequences are processed. An empty body is valid.

    Examples:
        "hello" -> QuotedString(value="hello", mark='"')
        '' -> QuotedString(value="", mark="'")
        `tick` -> None (backtick is not a mark)
        "open -> None (unterminated)

    Args:
        cursor: Current position in source

    Returns:
        ParseResult(QuotedString, new_cursor), or None if there is no
        complete quoted string at the cursor
    """
    if cursor.is_eof or cursor.current not in QUOTE_MARKS:
        return None

    mark = cursor.current
    body_start = cursor.advance()
    close_pos = body_start.find(mark)
    if close_pos < 0:
        return None

    end = cursor.at(close_pos + 1)
    node = QuotedString(
        value=body_start.slice_to(close_pos),
        mark=mark,
        raw=cursor.slice_to(end.pos),
        span=Span(start=cursor.pos, end=end.pos),
    )
    return ParseResult(node, end)


def _is_token_end(cursor: Cursor) -> bool:
    return cursor.is_eof or cursor.current.isspace()


def _skip_token(cursor: Cursor) -> Cursor:
    while not _is_token_end(cursor):
        cursor = cursor.advance()
    return cursor


def parse_key_value_pair(cursor: Cursor) -> RuleResult[KeyValuePair]:  # noqa: PLR0911
    """Parse one tag parameter token.

    Grammar:
        parameter ::= key | key "=" value
        value     ::= quoted_string | [^\\s]+

    A bare key becomes a boolean flag. The key may not be empty and the
    value may not be empty; "key", "=", "value" written as separate
    tokens are therefore rejected rather than silently merged.

    Note: PLR0911 (too many returns) is acceptable for parser grammar methods.
    Each return represents a grammar alternative or a distinct error.

    Examples:
        switch -> KeyValuePair(key="switch", value=True)
        key=value -> KeyValuePair(key="key", value="value")
        expr="1 + 2" -> KeyValuePair(key="expr", value="1 + 2")
        =value -> ParseError (missing key)
        key= -> ParseError (missing value)

    Args:
        cursor: Start of a token (not whitespace)

    Returns:
        ParseResult(KeyValuePair, cursor_after_token), None at whitespace
        or EOF, ParseError for a malformed token
    """
    if _is_token_end(cursor):
        return None

    start = cursor
    while not _is_token_end(cursor) and cursor.current != SIGIL_PARAMETER_ASSIGN:
        cursor = cursor.advance()
    key = start.slice_to(cursor.pos)

    if cursor.is_eof or cursor.current != SIGIL_PARAMETER_ASSIGN:
        node = KeyValuePair(key=key, value=True, raw=key, span=Span(start.pos, cursor.pos))
        return ParseResult(node, cursor)

    if not key:
        return ParseError(
            "Parameter has '=' but no key",
            start,
            expected=("key",),
            code=DiagnosticCode.INVALID_PARAMETER,
        )

    value_start = cursor.advance()
    if _is_token_end(value_start):
        return ParseError(
            f"Parameter '{key}' has '=' but no value",
            value_start,
            expected=("value",),
            code=DiagnosticCode.INVALID_PARAMETER,
        )

    value: str
    if value_start.current in QUOTE_MARKS:
        quoted = parse_quoted_string(value_start)
        if quoted is None:
            return ParseError(
                f"Unterminated quoted value for parameter '{key}'",
                value_start,
                expected=(value_start.current,),
                code=DiagnosticCode.INVALID_PARAMETER,
            )
        end = quoted.cursor
        if not _is_token_end(end):
            return ParseError(
                f"Unexpected character after quoted value of parameter '{key}'",
                end,
                expected=(" ",),
                code=DiagnosticCode.INVALID_PARAMETER,
            )
        value = quoted.value.value
    else:
        end = _skip_token(value_start)
        value = value_start.slice_to(end.pos)

    node = KeyValuePair(
        key=key, value=value, raw=start.slice_to(end.pos), span=Span(start.pos, end.pos)
    )
    return ParseResult(node, end)


def find_first[T](
    cursor: Cursor,
    parser: Callable[[Cursor], ParseResult[T] | ParseError | None],
    end_pos: int | None = None,
) -> ParseResult[T] | None:
    """Try parser at each offset from cursor, return the first success.

    Failures at an offset (None or ParseError) only mean "not here"; the
    scan moves one character to the right. No state is carried between
    attempts.

    Args:
        cursor: First offset to try
        parser: Recognizer to apply
        end_pos: Exclusive bound for start offsets (default: end of source)

    Returns:
        First ParseResult, or None if no offset matched

    Example:
        >>> find_first(Cursor("17 tag", 0), parse_identifier).value.value
        'tag'
    """
    stop = len(cursor.source) if end_pos is None else end_pos
    attempts = (parser(cursor.at(pos)) for pos in range(cursor.pos, stop))
    return next((r for r in attempts if isinstance(r, ParseResult)), None)
