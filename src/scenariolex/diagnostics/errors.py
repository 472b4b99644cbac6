"""Scenario exception hierarchy with structured diagnostics.

Integrates with diagnostic codes for Rust/Elm-inspired error messages.
All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ScenarioError(Exception):
    """Base exception for all scenario errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ScenarioError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ScenarioSyntaxError(ScenarioError):
    """Terminal parse failure.

    The parser never recovers: the first invalid construct aborts the
    whole parse and no partial document is returned.

    Attributes:
        offset: Character offset of the failure
        remaining: Unparsed source text from offset to the end
        line: 1-based line of the failure
        column: 1-based column of the failure
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        offset: int,
        remaining: str,
        line: int = 1,
        column: int = 1,
    ) -> None:
        """Initialize ScenarioSyntaxError.

        Args:
            message: Error message string OR Diagnostic object
            offset: Character offset of the failure
            remaining: Source text from offset onwards
            line: 1-based line of the failure
            column: 1-based column of the failure
        """
        super().__init__(message)
        self.offset = offset
        self.remaining = remaining
        self.line = line
        self.column = column


class EmptyScenarioError(ScenarioSyntaxError):
    """Non-empty input yielded no scenario lines."""


class InvalidIdentifierError(ScenarioSyntaxError):
    """Identifier expected but not found.

    Only reported by the `parse_identifier` primitive when called directly.
    Line rules scan for identifiers with `find_first` and report their own
    construct error instead, so `parse()` never raises this class.
    """


class InvalidLabelError(ScenarioSyntaxError):
    """Malformed *label line."""


class InvalidCharacterDeclarationError(ScenarioSyntaxError):
    """Malformed #Name:Emotion line."""


class InvalidSingleLineTagError(ScenarioSyntaxError):
    """Malformed @tag line."""


class InvalidMultiLineTagError(ScenarioSyntaxError):
    """Malformed [tag] span."""


class InvalidParameterError(ScenarioSyntaxError):
    """Malformed tag parameter (empty key or value, broken key=value)."""


class InvalidBlockCommentError(ScenarioSyntaxError):
    """Unterminated or single-line block comment."""


_ERROR_CLASSES: dict[DiagnosticCode, type[ScenarioSyntaxError]] = {
    DiagnosticCode.EMPTY_SCENARIO: EmptyScenarioError,
    DiagnosticCode.INVALID_IDENTIFIER: InvalidIdentifierError,
    DiagnosticCode.INVALID_LABEL: InvalidLabelError,
    DiagnosticCode.INVALID_CHARACTER_DECLARATION: InvalidCharacterDeclarationError,
    DiagnosticCode.INVALID_SINGLE_LINE_TAG: InvalidSingleLineTagError,
    DiagnosticCode.INVALID_MULTI_LINE_TAG: InvalidMultiLineTagError,
    DiagnosticCode.INVALID_PARAMETER: InvalidParameterError,
    DiagnosticCode.INVALID_BLOCK_COMMENT: InvalidBlockCommentError,
}


def error_class_for(code: DiagnosticCode) -> type[ScenarioSyntaxError]:
    """Return the ScenarioSyntaxError subclass raised for a diagnostic code.

    Codes without a dedicated subclass map to ScenarioSyntaxError itself.
    """
    return _ERROR_CLASSES.get(code, ScenarioSyntaxError)
