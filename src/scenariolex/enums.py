"""Enumerations for scenariolex type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class NodeKind(StrEnum):
    """Discriminator carried by every syntax node.

    StrEnum provides automatic string conversion: str(NodeKind.LABEL) == "label"
    """

    EMPTY = "empty"
    """The whole input was the empty string"""

    SCENARIO = "scenario"
    """Top-level document holding the ordered lines"""

    LINE_COMMENT = "line-comment"
    """; comment to end of line"""

    BLOCK_COMMENT = "block-comment"
    """/* ... */ spanning several physical lines"""

    CHARACTER_DECLARATION = "character-declaration"
    """#Name or #Name:Emotion"""

    NARRATIVE = "narrative"
    """# alone: anonymous narration marker"""

    LABEL = "label"
    """*Name or *Name|Alternate"""

    SINGLE_LINE_TAG = "single-line-tag"
    """@Tag param key=value"""

    MULTI_LINE_TAG = "multi-line-tag"
    """[Tag param key=value], may contain line breaks"""

    BARE_TEXT = "bare-text"
    """Any other line"""

    IDENTIFIER = "identifier"
    """[A-Za-z_][A-Za-z0-9_]*"""

    QUOTED_STRING = "quoted-string"
    """'text' or "text" """

    KEY_VALUE_PAIR = "key-value-pair"
    """Tag parameter: key or key=value"""


__all__ = [
    "NodeKind",
]
