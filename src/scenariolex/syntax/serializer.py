"""Serialize scenario AST back to scenario source.

Converts AST nodes to canonical scenario source. Useful for:
- Formatters
- Code generators
- Property-based testing (roundtrip: parse → serialize → parse)

Output is regenerated from node fields, never copied from ``raw``, so
programmatically built documents serialize the same way as parsed ones.

Python 3.13+.
"""

from scenariolex.constants import (
    QUOTE_MARKS,
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
    SIGIL_PARAMETER_ASSIGN,
    SIGIL_SINGLE_LINE_TAG,
)

from .ast import (
    BareText,
    BlockComment,
    CharacterDeclaration,
    Document,
    Empty,
    Label,
    LineComment,
    MultiLineTag,
    Narrative,
    ParameterValue,
    Parameters,
    Scenario,
    SingleLineTag,
)
from .parser.primitives import is_identifier_char, is_identifier_start, is_name_char
from .visitor import ScenarioVisitor

__all__ = ["ScenarioSerializer", "SerializationValidationError", "serialize"]

_LINE_BREAKS: tuple[str, ...] = ("\n", "\r")

# Bare text starting with one of these would be claimed by another rule.
_SIGIL_PREFIXES: tuple[str, ...] = (
    SIGIL_LINE_COMMENT,
    SIGIL_BLOCK_COMMENT_OPEN,
    SIGIL_MULTI_LINE_TAG_OPEN,
    SIGIL_LABEL,
    SIGIL_CHARACTER,
    SIGIL_SINGLE_LINE_TAG,
    SIGIL_ESCAPE,
)


class SerializationValidationError(ValueError):
    """Raised when a node cannot be written as scenario source.

    This error indicates the AST holds a value the grammar cannot express.
    Common causes:
    - Line breaks inside a single-line construct
    - Label or tag names outside the allowed character set
    - Parameter values that need quoting but contain both quote marks
    - Malformed AST nodes from programmatic construction
    """


def _has_line_break(text: str) -> bool:
    return any(ch in text for ch in _LINE_BREAKS)


def _ends_with_space(text: str) -> bool:
    return bool(text) and text[-1].isspace()


def _require_single_line(text: str, context: str) -> None:
    if _has_line_break(text):
        msg = f"{context} cannot contain a line break: {text!r}"
        raise SerializationValidationError(msg)


def _require_name(name: str, context: str) -> None:
    """Validate restricted name grammar [A-Za-z_]+."""
    if not name or not all(is_name_char(ch) for ch in name):
        msg = f"{context} must be one or more ASCII letters or underscores, got {name!r}"
        raise SerializationValidationError(msg)


def _require_identifier(name: str, context: str) -> None:
    """Validate identifier grammar [A-Za-z_][A-Za-z0-9_]*."""
    if not name or not is_identifier_start(name[0]) or not all(
        is_identifier_char(ch) for ch in name[1:]
    ):
        msg = f"{context} must be an identifier, got {name!r}"
        raise SerializationValidationError(msg)


def _serialize_value(key: str, value: str) -> str:
    """Write a parameter value, quoting it when the bare form would not survive."""
    _require_single_line(value, f"Value of parameter '{key}'")
    needs_quotes = not value or value[0] in QUOTE_MARKS or any(ch.isspace() for ch in value)
    if not needs_quotes:
        return value

    for mark in QUOTE_MARKS:
        if mark not in value:
            return f"{mark}{value}{mark}"

    msg = f"Value of parameter '{key}' needs quoting but contains both quote marks: {value!r}"
    raise SerializationValidationError(msg)


def _serialize_parameter(key: str, value: ParameterValue) -> str:
    if not key or SIGIL_PARAMETER_ASSIGN in key or any(ch.isspace() for ch in key):
        msg = f"Parameter key must be non-empty without blanks or '=', got {key!r}"
        raise SerializationValidationError(msg)
    if value is True:
        return key
    if not isinstance(value, str):
        msg = f"Parameter '{key}' must be True or a string, got {value!r}"
        raise SerializationValidationError(msg)
    return f"{key}{SIGIL_PARAMETER_ASSIGN}{_serialize_value(key, value)}"


def _serialize_tag(tag: str, parameters: Parameters) -> str:
    """Write tag name followed by space separated parameters."""
    parts = [tag]
    parts.extend(_serialize_parameter(key, value) for key, value in parameters.items())
    return " ".join(parts)


class ScenarioSerializer(ScenarioVisitor[str]):
    """Converts AST back to scenario source string.

    Thread-safe serializer with no mutable instance state beyond the
    visitor dispatch cache. Every line is terminated by a newline, so the
    output of a non-empty document always ends with one.

    Usage:
        >>> from scenariolex.syntax import parse, ScenarioSerializer
        >>> scenario = parse("#Jane:Angry\\n  Hello.")
        >>> print(ScenarioSerializer().serialize(scenario), end="")
        #Jane:Angry
        Hello.
    """

    __slots__ = ()

    def serialize(self, document: Document) -> str:
        """Serialize a document to scenario source.

        Args:
            document: Scenario or Empty

        Returns:
            Scenario source; the empty string for Empty

        Raises:
            SerializationValidationError: If a node cannot be expressed
        """
        return self.visit(document)

    def visit_Empty(self, node: Empty) -> str:
        """Serialize Empty."""
        return ""

    def visit_Scenario(self, node: Scenario) -> str:
        """Serialize Scenario, one line per node."""
        if not node.lines:
            msg = "Scenario must have at least one line (use EMPTY for an empty document)"
            raise SerializationValidationError(msg)
        return "".join(f"{self.visit(line)}\n" for line in node.lines)

    def visit_LineComment(self, node: LineComment) -> str:
        """Serialize LineComment."""
        _require_single_line(node.body, "Line comment")
        return f"{SIGIL_LINE_COMMENT}{node.body}"

    def visit_BlockComment(self, node: BlockComment) -> str:
        """Serialize BlockComment."""
        if SIGIL_BLOCK_COMMENT_CLOSE in node.body:
            msg = f"Block comment body cannot contain '{SIGIL_BLOCK_COMMENT_CLOSE}'"
            raise SerializationValidationError(msg)
        if not _has_line_break(node.body):
            msg = "Block comment body must contain a line break"
            raise SerializationValidationError(msg)
        return f"{SIGIL_BLOCK_COMMENT_OPEN}{node.body}{SIGIL_BLOCK_COMMENT_CLOSE}"

    def visit_CharacterDeclaration(self, node: CharacterDeclaration) -> str:
        """Serialize CharacterDeclaration."""
        context = "Character declaration"
        _require_single_line(node.name, context)
        if not node.name or SIGIL_EMOTION_SEPARATOR in node.name:
            msg = f"Character name must be non-empty without ':', got {node.name!r}"
            raise SerializationValidationError(msg)

        if node.emotion is None:
            if _ends_with_space(node.name):
                msg = f"Character name cannot end with whitespace, got {node.name!r}"
                raise SerializationValidationError(msg)
            return f"{SIGIL_CHARACTER}{node.name}"

        _require_single_line(node.emotion, context)
        if (
            not node.emotion
            or SIGIL_EMOTION_SEPARATOR in node.emotion
            or _ends_with_space(node.emotion)
        ):
            msg = (
                "Emotion must be non-empty without ':' or trailing whitespace, "
                f"got {node.emotion!r}"
            )
            raise SerializationValidationError(msg)
        return f"{SIGIL_CHARACTER}{node.name}{SIGIL_EMOTION_SEPARATOR}{node.emotion}"

    def visit_Narrative(self, node: Narrative) -> str:
        """Serialize Narrative."""
        return SIGIL_CHARACTER

    def visit_Label(self, node: Label) -> str:
        """Serialize Label."""
        _require_name(node.name, "Label name")
        if node.alternate is None:
            return f"{SIGIL_LABEL}{node.name}"
        _require_name(node.alternate, "Label alternate")
        return f"{SIGIL_LABEL}{node.name}{SIGIL_LABEL_ALTERNATE}{node.alternate}"

    def visit_SingleLineTag(self, node: SingleLineTag) -> str:
        """Serialize SingleLineTag."""
        _require_name(node.tag, "Single-line tag name")
        return f"{SIGIL_SINGLE_LINE_TAG}{_serialize_tag(node.tag, node.parameters)}"

    def visit_MultiLineTag(self, node: MultiLineTag) -> str:
        """Serialize MultiLineTag on a single physical line."""
        _require_identifier(node.tag, "Multi-line tag name")
        body = _serialize_tag(node.tag, node.parameters)
        # The parser closes the tag at the first ']', quoted or not.
        if SIGIL_MULTI_LINE_TAG_CLOSE in body:
            msg = f"Multi-line tag '{node.tag}' cannot contain '{SIGIL_MULTI_LINE_TAG_CLOSE}'"
            raise SerializationValidationError(msg)
        return f"{SIGIL_MULTI_LINE_TAG_OPEN}{body}{SIGIL_MULTI_LINE_TAG_CLOSE}"

    def visit_BareText(self, node: BareText) -> str:
        """Serialize BareText, escaping text that would not read back verbatim."""
        _require_single_line(node.text, "Bare text")
        if node.text != node.text.strip() or node.text.startswith(_SIGIL_PREFIXES):
            return f"{SIGIL_ESCAPE}{node.text}"
        return node.text


def serialize(document: Document) -> str:
    """Serialize a document to scenario source.

    Convenience function using ScenarioSerializer.

    Args:
        document: Scenario or Empty

    Returns:
        Scenario source

    Raises:
        SerializationValidationError: If a node cannot be expressed

    Example:
        >>> serialize(parse("*scene|intro\\n@bgm track='a b'"))
        "*scene|intro\\n@bgm track='a b'\\n"
    """
    return ScenarioSerializer().serialize(document)
