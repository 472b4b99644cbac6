"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics are created here. NO f-strings in exception constructors!
    Keeps messages testable and documents every error case in one place.
    """

    # One fix-it hint per construct; the message says what was wrong,
    # the hint says what the construct should look like.
    _HINTS: dict[DiagnosticCode, str] = {
        DiagnosticCode.UNRECOGNIZED_LINE: "Every line must be a comment, cue, label, tag or text",
        DiagnosticCode.NO_PROGRESS: "A recognizer matched without consuming input",
        DiagnosticCode.EMPTY_SCENARIO: "A non-empty scenario must contain at least one line",
        DiagnosticCode.INVALID_IDENTIFIER: "Identifiers are [A-Za-z_][A-Za-z0-9_]*",
        DiagnosticCode.INVALID_LABEL: "Write labels as *name or *name|alternate (letters and _)",
        DiagnosticCode.INVALID_CHARACTER_DECLARATION: "Write cues as #, #Name or #Name:Emotion",
        DiagnosticCode.INVALID_SINGLE_LINE_TAG: "Write single-line tags as @tag param key=value",
        DiagnosticCode.INVALID_MULTI_LINE_TAG: "Write multi-line tags as [tag param key=value]",
        DiagnosticCode.INVALID_PARAMETER: (
            "Keep each key=value on one line; quote values containing spaces"
        ),
        DiagnosticCode.INVALID_BLOCK_COMMENT: (
            "Open with /* and close with */ at the end of a later line"
        ),
    }

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Cursor read past the end of the source.

        Args:
            position: Offset at which the read was attempted

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            span=None,
            hint="Check for unterminated constructs",
        )

    @staticmethod
    def syntax_error(
        code: DiagnosticCode,
        message: str,
        *,
        position: int,
        line: int,
        column: int,
    ) -> Diagnostic:
        """Terminal syntax error raised by the parser.

        Args:
            code: Code of the failing construct
            message: What was wrong at the position
            position: Character offset of the error
            line: 1-based line of the error
            column: 1-based column of the error

        Returns:
            Diagnostic carrying a zero-width span at the error position
        """
        return Diagnostic(
            code=code,
            message=message,
            span=SourceSpan(start=position, end=position, line=line, column=column),
            hint=ErrorTemplate._HINTS.get(code),
        )
