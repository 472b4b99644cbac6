"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        3000-3099: Scanner errors (cursor, document level)
        3100-3199: Construct errors (a sigil matched but the body is invalid)
    """

    # Scanner errors (3000-3099)
    UNEXPECTED_EOF = 3001
    UNRECOGNIZED_LINE = 3002  # No rule matched at a position
    NO_PROGRESS = 3003  # A rule matched without consuming input
    EMPTY_SCENARIO = 3004  # Non-empty input produced no lines

    # Construct errors (3100-3199)
    INVALID_IDENTIFIER = 3101
    INVALID_LABEL = 3102
    INVALID_CHARACTER_DECLARATION = 3103
    INVALID_SINGLE_LINE_TAG = 3104
    INVALID_MULTI_LINE_TAG = 3105
    INVALID_PARAMETER = 3106
    INVALID_BLOCK_COMMENT = 3107


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. For multi-byte UTF-8 characters, character offset differs
        from byte offset.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None when no position applies)
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like the Rust compiler.

        Example output:
            error[INVALID_LABEL]: Label name must be letters or underscores
              --> line 3, column 2
              = help: Write labels as *name or *name|alternate

        Returns:
            Formatted error message
        """
        parts = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.span is not None:
            parts.append(f"  --> line {self.span.line}, column {self.span.column}")
        if self.hint:
            parts.append(f"  = help: {self.hint}")
        return "\n".join(parts)
