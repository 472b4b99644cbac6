"""Grammar rules for the scenario parser.

This module provides the line-level constructs:
- Comments (line comments, block comments)
- Character cues (declarations and the narrative marker)
- Labels
- Tags (single-line and multi-line, sharing one parameter routine)
- Bare text (the fallback)

Sigil Dispatch:
    Each rule checks its own sigil first and returns None when the line
    does not start with it, so the composer can try rules in order:

    - `;` starts a LineComment
    - `/*` starts a BlockComment
    - `[` starts a MultiLineTag (only if a `]` follows somewhere)
    - `*` starts a Label
    - `#` starts a CharacterDeclaration or Narrative
    - `@` starts a SingleLineTag
    - anything else is BareText

    Once the sigil matched, a malformed body is a ParseError, never None.

Tag Bodies:
    Tag parameters are tokenized over an isolated copy of the tag body
    (the rest of the line for `@`, the bracket interior with line breaks
    folded to spaces for `[ ]`). Errors found there are relocated back to
    absolute offsets in the original source.
"""

from dataclasses import replace
from types import MappingProxyType

from scenariolex.constants import (
    SIGIL_BLOCK_COMMENT_CLOSE,
    SIGIL_BLOCK_COMMENT_OPEN,
    SIGIL_CHARACTER,
    SIGIL_EMOTION_SEPARATOR,
    SIGIL_ESCAPE,
    SIGIL_LABEL,
    SIGIL_LABEL_ALTERNATE,
    SIGIL_LINE_COMMENT,
    SIGIL_MULTI_LINE_TAG_CLOSE,
    SIGIL_MULTI_LINE_TAG_OPEN,
    SIGIL_SINGLE_LINE_TAG,
)
from scenariolex.diagnostics import DiagnosticCode
from scenariolex.syntax.ast import (
    BareText,
    BlockComment,
    CharacterDeclaration,
    Label,
    LineComment,
    MultiLineTag,
    Narrative,
    ParameterValue,
    Parameters,
    SingleLineTag,
    Span,
)
from scenariolex.syntax.cursor import Cursor, ParseError, ParseResult, RuleResult
from scenariolex.syntax.parser.primitives import (
    find_first,
    parse_identifier,
    parse_key_value_pair,
    parse_name,
)
from scenariolex.syntax.parser.whitespace import (
    consume_line,
    fold_line_breaks,
    is_blank,
    rest_of_line_is_blank,
)

__all__ = [
    "parse_bare_text",
    "parse_block_comment",
    "parse_character_declaration",
    "parse_label",
    "parse_line_comment",
    "parse_multi_line_tag",
    "parse_single_line_tag",
    "parse_tag_parameters",
]


def _relocate(error: ParseError, origin: Cursor) -> ParseError:
    """Map an error found in an isolated body back onto the original source.

    Args:
        error: Error whose cursor indexes the body text
        origin: Cursor in the original source where body offset 0 lives
    """
    return replace(error, cursor=origin.at(origin.pos + error.cursor.pos))


def _skip_space(cursor: Cursor) -> Cursor:
    while not cursor.is_eof and cursor.current.isspace():
        cursor = cursor.advance()
    return cursor


# =============================================================================
# Comments
# =============================================================================


def parse_line_comment(cursor: Cursor) -> RuleResult[LineComment]:
    """Parse line comment: ;body

    Never fails once the sigil matched; the body may be empty.

    Examples:
        ; -> LineComment(body="")
        ;Line Comment -> LineComment(body="Line Comment")
    """
    if not cursor.startswith(SIGIL_LINE_COMMENT):
        return None

    body, next_cursor = consume_line(cursor.advance(len(SIGIL_LINE_COMMENT)))
    node = LineComment(
        body=body,
        raw=cursor.slice_to(next_cursor.pos),
        span=Span(start=cursor.pos, end=next_cursor.pos),
    )
    return ParseResult(node, next_cursor)


def parse_block_comment(cursor: Cursor) -> RuleResult[BlockComment]:
    """Parse block comment: /* ... */ across several lines.

    The closing delimiter is the first `*/` after the opening one (no
    nesting). Single-line block comments are rejected, and only blanks may
    follow the closing delimiter on its line.

    Examples:
        "/*\\nnote\\n*/" -> BlockComment(body="\\nnote\\n")
        "/* note */" -> ParseError (single line)
        "/*\\nnote" -> ParseError (unterminated)
    """
    if not cursor.startswith(SIGIL_BLOCK_COMMENT_OPEN):
        return None

    body_start = cursor.advance(len(SIGIL_BLOCK_COMMENT_OPEN))
    close_pos = body_start.find(SIGIL_BLOCK_COMMENT_CLOSE)
    if close_pos < 0:
        return ParseError(
            "Unterminated block comment",
            cursor,
            expected=(SIGIL_BLOCK_COMMENT_CLOSE,),
            code=DiagnosticCode.INVALID_BLOCK_COMMENT,
        )

    body = body_start.slice_to(close_pos)
    if "\n" not in body and "\r" not in body:
        return ParseError(
            "Block comment must span more than one line",
            cursor,
            code=DiagnosticCode.INVALID_BLOCK_COMMENT,
        )

    after_close = cursor.at(close_pos + len(SIGIL_BLOCK_COMMENT_CLOSE))
    if not rest_of_line_is_blank(after_close):
        return ParseError(
            "Closing '*/' must end its line",
            after_close.skip_blank_inline(),
            expected=("line end",),
            code=DiagnosticCode.INVALID_BLOCK_COMMENT,
        )

    _, next_cursor = consume_line(after_close)
    node = BlockComment(
        body=body,
        raw=cursor.slice_to(next_cursor.pos),
        span=Span(start=cursor.pos, end=next_cursor.pos),
    )
    return ParseResult(node, next_cursor)


# =============================================================================
# Character cues and labels
# =============================================================================


def parse_character_declaration(
    cursor: Cursor,
) -> RuleResult[CharacterDeclaration | Narrative]:
    """Parse character cue: #, #Name or #Name:Emotion

    The content after `#` is trimmed of trailing whitespace. Empty content
    is the narrative marker. Otherwise it is split on `:`; an empty name,
    an empty emotion or a second `:` is an error rather than a silent
    truncation.

    Examples:
        # -> Narrative
        #Jane -> CharacterDeclaration(name="Jane", emotion=None)
        #Jane:Angry -> CharacterDeclaration(name="Jane", emotion="Angry")
        #Jane: -> ParseError
        #Jane:Angry: -> ParseError
    """
    if not cursor.startswith(SIGIL_CHARACTER):
        return None

    line, next_cursor = consume_line(cursor)
    raw = cursor.slice_to(next_cursor.pos)
    span = Span(start=cursor.pos, end=next_cursor.pos)
    content_pos = cursor.pos + len(SIGIL_CHARACTER)
    content = line[len(SIGIL_CHARACTER) :].rstrip()

    if not content:
        return ParseResult(Narrative(raw=raw, span=span), next_cursor)

    name, separator, emotion = content.partition(SIGIL_EMOTION_SEPARATOR)
    if not name:
        return ParseError(
            "Character name is empty",
            cursor.at(content_pos),
            expected=("name",),
            code=DiagnosticCode.INVALID_CHARACTER_DECLARATION,
        )
    if not separator:
        node = CharacterDeclaration(name=name, emotion=None, raw=raw, span=span)
        return ParseResult(node, next_cursor)

    emotion_pos = content_pos + len(name) + len(separator)
    if SIGIL_EMOTION_SEPARATOR in emotion:
        extra = emotion.index(SIGIL_EMOTION_SEPARATOR)
        return ParseError(
            "Character declaration has more than one ':'",
            cursor.at(emotion_pos + extra),
            code=DiagnosticCode.INVALID_CHARACTER_DECLARATION,
        )
    if not emotion:
        return ParseError(
            "Emotion after ':' is empty",
            cursor.at(emotion_pos),
            expected=("emotion",),
            code=DiagnosticCode.INVALID_CHARACTER_DECLARATION,
        )

    node = CharacterDeclaration(name=name, emotion=emotion, raw=raw, span=span)
    return ParseResult(node, next_cursor)


def parse_label(cursor: Cursor) -> RuleResult[Label]:
    """Parse label: *name or *name|alternate

    Names use the restricted grammar [A-Za-z_]+. Anything after the name
    other than a `|alternate` suffix and trailing blanks is an error.

    Examples:
        *scene -> Label(name="scene", alternate=None)
        *scene|extra -> Label(name="scene", alternate="extra")
        *_ -> Label(name="_", alternate=None)
        *17, *-, *scene extra, *scene:extra -> ParseError
    """
    if not cursor.startswith(SIGIL_LABEL):
        return None

    line, next_cursor = consume_line(cursor)
    body = Cursor(line, len(SIGIL_LABEL))

    name = parse_name(body)
    if name is None:
        message = "Label has no name" if is_blank(line[len(SIGIL_LABEL) :]) else (
            "Label name must be ASCII letters or underscores"
        )
        return _relocate(
            ParseError(
                message,
                body,
                expected=("a-z", "A-Z", "_"),
                code=DiagnosticCode.INVALID_LABEL,
            ),
            cursor,
        )

    rest = name.cursor
    alternate: str | None = None
    if rest.startswith(SIGIL_LABEL_ALTERNATE):
        alternate_start = rest.advance(len(SIGIL_LABEL_ALTERNATE))
        alternate_result = parse_name(alternate_start)
        if alternate_result is None:
            return _relocate(
                ParseError(
                    "Label alternate must be ASCII letters or underscores",
                    alternate_start,
                    expected=("a-z", "A-Z", "_"),
                    code=DiagnosticCode.INVALID_LABEL,
                ),
                cursor,
            )
        alternate = alternate_result.value
        rest = alternate_result.cursor

    if not rest_of_line_is_blank(rest):
        return _relocate(
            ParseError(
                "Unexpected content after label",
                rest,
                expected=(SIGIL_LABEL_ALTERNATE, "line end"),
                code=DiagnosticCode.INVALID_LABEL,
            ),
            cursor,
        )

    node = Label(
        name=name.value,
        alternate=alternate,
        raw=cursor.slice_to(next_cursor.pos),
        span=Span(start=cursor.pos, end=next_cursor.pos),
    )
    return ParseResult(node, next_cursor)


# =============================================================================
# Tags
# =============================================================================


def parse_tag_parameters(
    cursor: Cursor,
) -> ParseResult[Parameters] | ParseError:
    """Parse whitespace separated tag parameters until EOF of the body.

    Shared by single-line and multi-line tags. Each token is a
    KeyValuePair; a bare token is a boolean flag. Repeating a key is an
    error.

    Args:
        cursor: Position in an isolated tag body, just after the tag name

    Returns:
        ParseResult(read-only mapping, cursor at body EOF), or ParseError
    """
    parameters: dict[str, ParameterValue] = {}
    cursor = _skip_space(cursor)

    while not cursor.is_eof:
        result = parse_key_value_pair(cursor)
        match result:
            case ParseError():
                return result
            case None:
                break
            case ParseResult(value=pair, cursor=after):
                if pair.key in parameters:
                    return ParseError(
                        f"Duplicate parameter '{pair.key}'",
                        cursor,
                        code=DiagnosticCode.INVALID_PARAMETER,
                    )
                parameters[pair.key] = pair.value
                cursor = _skip_space(after)

    return ParseResult(MappingProxyType(parameters), cursor)


def _check_name_boundary(after_name: Cursor, code: DiagnosticCode) -> ParseError | None:
    if after_name.is_eof or after_name.current.isspace():
        return None
    return ParseError(
        "Unexpected character in tag name",
        after_name,
        expected=(" ",),
        code=code,
    )


def parse_single_line_tag(cursor: Cursor) -> RuleResult[SingleLineTag]:
    """Parse single-line tag: @tag param key=value

    The tag name uses the restricted grammar [A-Za-z_]+ and must follow
    `@` immediately.

    Examples:
        @tag switch -> SingleLineTag(tag="tag", parameters={"switch": True})
        @tag key=value -> SingleLineTag(tag="tag", parameters={"key": "value"})
        @, @17, @- -> ParseError
    """
    if not cursor.startswith(SIGIL_SINGLE_LINE_TAG):
        return None

    code = DiagnosticCode.INVALID_SINGLE_LINE_TAG
    line, next_cursor = consume_line(cursor)
    body = Cursor(line, len(SIGIL_SINGLE_LINE_TAG))

    name = parse_name(body)
    if name is None:
        message = "Single-line tag has no name" if body.is_eof else (
            "Tag name must be ASCII letters or underscores"
        )
        return _relocate(
            ParseError(message, body, expected=("a-z", "A-Z", "_"), code=code),
            cursor,
        )

    boundary_error = _check_name_boundary(name.cursor, code)
    if boundary_error is not None:
        return _relocate(boundary_error, cursor)

    parameters = parse_tag_parameters(name.cursor)
    if isinstance(parameters, ParseError):
        return _relocate(parameters, cursor)

    node = SingleLineTag(
        tag=name.value,
        parameters=parameters.value,
        raw=cursor.slice_to(next_cursor.pos),
        span=Span(start=cursor.pos, end=next_cursor.pos),
    )
    return ParseResult(node, next_cursor)


def parse_multi_line_tag(cursor: Cursor) -> RuleResult[MultiLineTag]:
    """Parse multi-line tag: [tag param key=value]

    The closing `]` is the next one in the source (no nesting). Without
    one this is not a tag at all and the line falls through to other
    rules. Line breaks inside the brackets are folded to spaces before
    tokenizing, so a `key=value` token must stay on one physical line.
    The line terminator after `]` is consumed only when nothing but blanks
    precedes it; otherwise the node ends at `]`.

    The tag name is the first identifier found scanning the interior from
    left to right.

    Examples:
        [tag key=value] -> MultiLineTag(tag="tag", parameters={"key": "value"})
        "[\\ntag\\nkey=value\\n]" -> same as above
        "[\\ntag\\nkey\\n=\\nvalue\\n]" -> ParseError
        [], [17], [-] -> ParseError
    """
    if not cursor.startswith(SIGIL_MULTI_LINE_TAG_OPEN):
        return None

    close_pos = cursor.find(SIGIL_MULTI_LINE_TAG_CLOSE)
    if close_pos < 0:
        return None

    code = DiagnosticCode.INVALID_MULTI_LINE_TAG
    origin = cursor.advance(len(SIGIL_MULTI_LINE_TAG_OPEN))
    interior = fold_line_breaks(origin.slice_to(close_pos))
    if is_blank(interior):
        return ParseError("Multi-line tag is empty", cursor, expected=("tag",), code=code)

    body = Cursor(interior, 0)
    name = find_first(body, parse_identifier)
    if name is None:
        return _relocate(
            ParseError(
                "Multi-line tag has no tag name",
                _skip_space(body),
                expected=("a-z", "A-Z", "_"),
                code=code,
            ),
            origin,
        )

    boundary_error = _check_name_boundary(name.cursor, code)
    if boundary_error is not None:
        return _relocate(boundary_error, origin)

    parameters = parse_tag_parameters(name.cursor)
    if isinstance(parameters, ParseError):
        return _relocate(parameters, origin)

    # Text after ']' is left for the next line rule.
    next_cursor = cursor.at(close_pos + len(SIGIL_MULTI_LINE_TAG_CLOSE))
    if rest_of_line_is_blank(next_cursor):
        _, next_cursor = consume_line(next_cursor)
    node = MultiLineTag(
        tag=name.value.value,
        parameters=parameters.value,
        raw=cursor.slice_to(next_cursor.pos),
        span=Span(start=cursor.pos, end=next_cursor.pos),
    )
    return ParseResult(node, next_cursor)


# =============================================================================
# Bare text
# =============================================================================


def parse_bare_text(cursor: Cursor) -> RuleResult[BareText]:
    """Parse bare text: any line. Must be tried last.

    A leading `_` is dropped and the rest of the line is kept verbatim,
    including leading and trailing whitespace. Otherwise the line is
    stripped.

    Examples:
        " I'm a line of text." -> BareText(text="I'm a line of text.")
        "_   I'm a line of text." -> BareText(text="   I'm a line of text.")
    """
    if cursor.is_eof:
        return None

    line, next_cursor = consume_line(cursor)
    if line.startswith(SIGIL_ESCAPE):
        text = line[len(SIGIL_ESCAPE) :]
    else:
        text = line.strip()

    node = BareText(
        text=text,
        raw=cursor.slice_to(next_cursor.pos),
        span=Span(start=cursor.pos, end=next_cursor.pos),
    )
    return ParseResult(node, next_cursor)
