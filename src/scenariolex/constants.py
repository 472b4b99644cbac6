"""Shared constants for scenariolex.

Centralized configuration constants used across the syntax and diagnostics
packages. Placing constants here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- Input limits: DoS prevention via size constraints
- Sigils: Leading characters that select a line-level construct
- Marks: Quote characters accepted by the quoted-string primitive

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_SOURCE_SIZE",
    # Sigils
    "SIGIL_LINE_COMMENT",
    "SIGIL_BLOCK_COMMENT_OPEN",
    "SIGIL_BLOCK_COMMENT_CLOSE",
    "SIGIL_CHARACTER",
    "SIGIL_LABEL",
    "SIGIL_LABEL_ALTERNATE",
    "SIGIL_SINGLE_LINE_TAG",
    "SIGIL_MULTI_LINE_TAG_OPEN",
    "SIGIL_MULTI_LINE_TAG_CLOSE",
    "SIGIL_EMOTION_SEPARATOR",
    "SIGIL_ESCAPE",
    "SIGIL_PARAMETER_ASSIGN",
    # Marks
    "QUOTE_MARKS",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MB of ASCII).
# Prevents DoS via unbounded memory allocation from huge scenario files.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# SIGILS
# ============================================================================

SIGIL_LINE_COMMENT: str = ";"
SIGIL_BLOCK_COMMENT_OPEN: str = "/*"
SIGIL_BLOCK_COMMENT_CLOSE: str = "*/"
SIGIL_CHARACTER: str = "#"
SIGIL_LABEL: str = "*"
SIGIL_LABEL_ALTERNATE: str = "|"
SIGIL_SINGLE_LINE_TAG: str = "@"
SIGIL_MULTI_LINE_TAG_OPEN: str = "["
SIGIL_MULTI_LINE_TAG_CLOSE: str = "]"
SIGIL_EMOTION_SEPARATOR: str = ":"
SIGIL_PARAMETER_ASSIGN: str = "="

# Leading underscore on a bare text line keeps the rest of the line verbatim.
SIGIL_ESCAPE: str = "_"

# ============================================================================
# MARKS
# ============================================================================

# Backtick is deliberately absent: `x` is not a quoted string.
QUOTE_MARKS: tuple[str, ...] = ("'", '"')
