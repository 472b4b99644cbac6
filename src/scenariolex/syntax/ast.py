"""Scenario AST (Abstract Syntax Tree) node definitions.

Every node is a frozen dataclass tagged by a class-level ``kind`` and
carrying ``raw``, the exact source substring it was derived from.
Includes type guards as static methods (eliminates circular imports).

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import ClassVar, Literal, TypeIs

from scenariolex.enums import NodeKind

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Base types
    "Span",
    # Documents
    "Empty",
    "EMPTY",
    "Scenario",
    # Lines
    "LineComment",
    "BlockComment",
    "CharacterDeclaration",
    "Narrative",
    "Label",
    "SingleLineTag",
    "MultiLineTag",
    "BareText",
    # Primitives
    "Identifier",
    "QuotedString",
    "KeyValuePair",
    # Type aliases
    "ParameterValue",
    "Parameters",
    "Line",
    "Document",
    "ScenarioNode",
]

# ============================================================================
# BASE TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Span:
    """Source position span.

    Attributes:
        start: Starting character offset (inclusive)
        end: Ending character offset (exclusive)

    Example:
        Source: "*scene\\nHello"
        Label span: Span(start=0, end=7)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.start < 0:
            msg = f"Span start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Span end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


type ParameterValue = Literal[True] | str
type Parameters = Mapping[str, ParameterValue]

# ============================================================================
# PRIMITIVES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Identifier:
    """Identifier: [A-Za-z_][A-Za-z0-9_]*"""

    kind: ClassVar[NodeKind] = NodeKind.IDENTIFIER

    value: str
    raw: str
    span: Span | None = None


@dataclass(frozen=True, slots=True)
class QuotedString:
    """String delimited by a matching pair of ' or ".

    No escape sequences: a backslash is an ordinary character.

    Example:
        "hello" -> QuotedString(value="hello", mark='"', raw='"hello"')
    """

    kind: ClassVar[NodeKind] = NodeKind.QUOTED_STRING

    value: str
    mark: str
    raw: str
    span: Span | None = None


@dataclass(frozen=True, slots=True)
class KeyValuePair:
    """Tag parameter token.

    Examples:
        switch -> KeyValuePair(key="switch", value=True)
        key=value -> KeyValuePair(key="key", value="value")
        text="a b" -> KeyValuePair(key="text", value="a b")
    """

    kind: ClassVar[NodeKind] = NodeKind.KEY_VALUE_PAIR

    key: str
    value: ParameterValue
    raw: str
    span: Span | None = None


# ============================================================================
# LINES
# ============================================================================


@dataclass(frozen=True, slots=True)
class LineComment:
    """Line comment: ;body"""

    kind: ClassVar[NodeKind] = NodeKind.LINE_COMMENT

    body: str
    raw: str
    span: Span | None = None

    @staticmethod
    def guard(node: object) -> TypeIs["LineComment"]:
        """Type guard for LineComment."""
        return isinstance(node, LineComment)


@dataclass(frozen=True, slots=True)
class BlockComment:
    """Block comment spanning several physical lines.

    Example:
        /*
        notes
        */
    """

    kind: ClassVar[NodeKind] = NodeKind.BLOCK_COMMENT

    body: str
    raw: str
    span: Span | None = None

    @staticmethod
    def guard(node: object) -> TypeIs["BlockComment"]:
        """Type guard for BlockComment."""
        return isinstance(node, BlockComment)


@dataclass(frozen=True, slots=True)
class CharacterDeclaration:
    """Character cue: #Name or #Name:Emotion"""

    kind: ClassVar[NodeKind] = NodeKind.CHARACTER_DECLARATION

    name: str
    emotion: str | None
    raw: str
    span: Span | None = None

    @staticmethod
    def guard(node: object) -> TypeIs["CharacterDeclaration"]:
        """Type guard for CharacterDeclaration."""
        return isinstance(node, CharacterDeclaration)


@dataclass(frozen=True, slots=True)
class Narrative:
    """Anonymous narration marker: a line holding only #"""

    kind: ClassVar[NodeKind] = NodeKind.NARRATIVE

    raw: str
    span: Span | None = None

    @staticmethod
    def guard(node: object) -> TypeIs["Narrative"]:
        """Type guard for Narrative."""
        return isinstance(node, Narrative)


@dataclass(frozen=True, slots=True)
class Label:
    """Scene label: *name or *name|alternate"""

    kind: ClassVar[NodeKind] = NodeKind.LABEL

    name: str
    alternate: str | None
    raw: str
    span: Span | None = None

    @staticmethod
    def guard(node: object) -> TypeIs["Label"]:
        """Type guard for Label."""
        return isinstance(node, Label)


@dataclass(frozen=True, slots=True)
class SingleLineTag:
    """Directive confined to one line: @tag switch key=value

    `parameters` is left out of the hash; equal nodes still hash equal.
    """

    kind: ClassVar[NodeKind] = NodeKind.SINGLE_LINE_TAG

    tag: str
    parameters: Parameters = field(hash=False)
    raw: str
    span: Span | None = None

    @staticmethod
    def guard(node: object) -> TypeIs["SingleLineTag"]:
        """Type guard for SingleLineTag."""
        return isinstance(node, SingleLineTag)


@dataclass(frozen=True, slots=True)
class MultiLineTag:
    """Bracketed directive, may span lines: [tag switch key=value]"""

    kind: ClassVar[NodeKind] = NodeKind.MULTI_LINE_TAG

    tag: str
    parameters: Parameters = field(hash=False)
    raw: str
    span: Span | None = None

    @staticmethod
    def guard(node: object) -> TypeIs["MultiLineTag"]:
        """Type guard for MultiLineTag."""
        return isinstance(node, MultiLineTag)


@dataclass(frozen=True, slots=True)
class BareText:
    """Any line without a sigil; the universal fallback."""

    kind: ClassVar[NodeKind] = NodeKind.BARE_TEXT

    text: str
    raw: str
    span: Span | None = None

    @staticmethod
    def guard(node: object) -> TypeIs["BareText"]:
        """Type guard for BareText."""
        return isinstance(node, BareText)


# ============================================================================
# DOCUMENTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Scenario:
    """Root AST node: lines in playback order."""

    kind: ClassVar[NodeKind] = NodeKind.SCENARIO

    lines: tuple["Line", ...]
    raw: str
    span: Span | None = None

    @staticmethod
    def guard(node: object) -> TypeIs["Scenario"]:
        """Type guard for Scenario."""
        return isinstance(node, Scenario)


@dataclass(frozen=True, slots=True)
class Empty:
    """Result of parsing the empty string. Use the EMPTY singleton."""

    kind: ClassVar[NodeKind] = NodeKind.EMPTY

    raw: str = ""
    span: Span | None = None

    @property
    def lines(self) -> tuple["Line", ...]:
        """An empty document has no lines."""
        return ()

    @staticmethod
    def guard(node: object) -> TypeIs["Empty"]:
        """Type guard for Empty."""
        return isinstance(node, Empty)


EMPTY: Empty = Empty()

# ============================================================================
# TYPE ALIASES
# ============================================================================

type Line = (
    LineComment
    | BlockComment
    | CharacterDeclaration
    | Narrative
    | Label
    | SingleLineTag
    | MultiLineTag
    | BareText
)
type Document = Scenario | Empty
type ScenarioNode = Document | Line | Identifier | QuotedString | KeyValuePair
