"""Scenario syntax parsing package.

Provides parser, AST definitions, visitor pattern, and serialization.
Separate from any scenario runtime to enable tooling (linters, formatters,
editor plugins) and the downstream executor.

Python 3.13+.
"""

from .ast import (
    EMPTY,
    BareText,
    BlockComment,
    CharacterDeclaration,
    Document,
    Empty,
    Identifier,
    KeyValuePair,
    Label,
    Line,
    LineComment,
    MultiLineTag,
    Narrative,
    ParameterValue,
    Parameters,
    QuotedString,
    Scenario,
    ScenarioNode,
    SingleLineTag,
    Span,
)
from .cursor import Cursor, ParseError, ParseResult, RuleResult
from .parser import ScenarioParser
from .serializer import ScenarioSerializer, SerializationValidationError, serialize
from .visitor import ScenarioVisitor

__all__ = [
    "EMPTY",
    "BareText",
    "BlockComment",
    "CharacterDeclaration",
    "Cursor",
    "Document",
    "Empty",
    "Identifier",
    "KeyValuePair",
    "Label",
    "Line",
    "LineComment",
    "MultiLineTag",
    "Narrative",
    "ParameterValue",
    "Parameters",
    "ParseError",
    "ParseResult",
    "QuotedString",
    "RuleResult",
    "Scenario",
    "ScenarioNode",
    "ScenarioParser",
    "ScenarioSerializer",
    "ScenarioVisitor",
    "SerializationValidationError",
    "SingleLineTag",
    "Span",
    "parse",
    "serialize",
]


def parse(source: str) -> Document:
    """Parse scenario source into AST.

    Convenience function for ScenarioParser.parse().

    Args:
        source: Scenario source text

    Returns:
        Scenario containing parsed lines, or EMPTY for the empty string

    Raises:
        ScenarioSyntaxError: On the first invalid construct

    Example:
        >>> from scenariolex.syntax import parse
        >>> scenario = parse("*intro\\n#Jane:Happy\\nGood morning.")
        >>> scenario.lines[1].emotion
        'Happy'
    """
    parser = ScenarioParser()
    return parser.parse(source)
