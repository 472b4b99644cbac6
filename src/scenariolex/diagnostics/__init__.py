"""Diagnostic system for scenario errors.

Provides structured error diagnostics with codes, spans, and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    EmptyScenarioError,
    InvalidBlockCommentError,
    InvalidCharacterDeclarationError,
    InvalidIdentifierError,
    InvalidLabelError,
    InvalidMultiLineTagError,
    InvalidParameterError,
    InvalidSingleLineTagError,
    ScenarioError,
    ScenarioSyntaxError,
    error_class_for,
)
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "EmptyScenarioError",
    "ErrorTemplate",
    "InvalidBlockCommentError",
    "InvalidCharacterDeclarationError",
    "InvalidIdentifierError",
    "InvalidLabelError",
    "InvalidMultiLineTagError",
    "InvalidParameterError",
    "InvalidSingleLineTagError",
    "ScenarioError",
    "ScenarioSyntaxError",
    "SourceSpan",
    "error_class_for",
]
