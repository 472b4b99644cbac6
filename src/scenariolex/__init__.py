"""ScenarioLex - parser for a line-oriented interactive scenario script language.

Turns scenario source (dialogue lines, character cues, labels, tags and
comments) into an immutable, typed syntax tree, and serializes trees back
to canonical source.

Public API:
    parse - Parse scenario source to AST
    serialize - Serialize AST to scenario source

Exceptions:
    ScenarioError - Base exception class
    ScenarioSyntaxError - Parse errors (offset, line, column, remaining input)
    InvalidLabelError, InvalidCharacterDeclarationError, ... - Per-construct parse errors

Submodules:
    scenariolex.syntax - Parser, AST node types, visitor, serializer
    scenariolex.diagnostics - Error types, diagnostic codes and templates
    scenariolex.constants - Sigils and input limits
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    EmptyScenarioError,
    InvalidBlockCommentError,
    InvalidCharacterDeclarationError,
    InvalidLabelError,
    InvalidMultiLineTagError,
    InvalidParameterError,
    InvalidSingleLineTagError,
    ScenarioError,
    ScenarioSyntaxError,
)
from .syntax import parse, serialize

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("scenariolex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "EmptyScenarioError",
    "InvalidBlockCommentError",
    "InvalidCharacterDeclarationError",
    "InvalidLabelError",
    "InvalidMultiLineTagError",
    "InvalidParameterError",
    "InvalidSingleLineTagError",
    "ScenarioError",
    "ScenarioSyntaxError",
    "__version__",
    "parse",
    "serialize",
]
