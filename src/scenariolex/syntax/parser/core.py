"""Core scenario parser implementation.

This module provides the ScenarioParser class that orchestrates parsing of
scenario source into the AST structures defined in :mod:`scenariolex.syntax.ast`.

Architecture:
    The parser uses an immutable cursor pattern (:class:`~scenariolex.syntax.cursor.Cursor`)
    to traverse source text. Each rule in :mod:`~scenariolex.syntax.parser.rules`
    returns a :data:`~scenariolex.syntax.cursor.RuleResult`:

    - :class:`~scenariolex.syntax.cursor.ParseResult` - node plus advanced cursor
    - ``None`` - the rule's sigil is not here; try the next rule
    - :class:`~scenariolex.syntax.cursor.ParseError` - terminal syntax error

Failure Policy:
    Strict and non-recovering. The first ParseError aborts the whole parse
    with a :class:`~scenariolex.diagnostics.ScenarioSyntaxError`; no partial
    document is returned and later lines are never attempted.

Security:
    Includes configurable input size limit to prevent DoS attacks via
    unbounded memory allocation from extremely large scenario files.
"""

import logging
from collections.abc import Callable
from typing import NoReturn

from scenariolex.constants import MAX_SOURCE_SIZE
from scenariolex.diagnostics import DiagnosticCode, ErrorTemplate, error_class_for
from scenariolex.syntax.ast import EMPTY, Document, Line, Scenario, Span
from scenariolex.syntax.cursor import Cursor, ParseError, ParseResult, RuleResult
from scenariolex.syntax.parser.rules import (
    parse_bare_text,
    parse_block_comment,
    parse_character_declaration,
    parse_label,
    parse_line_comment,
    parse_multi_line_tag,
    parse_single_line_tag,
)

__all__ = ["LINE_RULES", "ScenarioParser"]

logger = logging.getLogger(__name__)

type LineRule = Callable[[Cursor], RuleResult[Line]]

# Priority order. Block-level constructs first, then the line-construct
# group; bare text always matches and must stay last.
LINE_RULES: tuple[LineRule, ...] = (
    parse_line_comment,
    parse_block_comment,
    parse_multi_line_tag,
    parse_label,
    parse_character_declaration,
    parse_single_line_tag,
    parse_bare_text,
)


class ScenarioParser:
    """Scenario parser using immutable cursor pattern.

    Design:
    - Immutable cursor prevents infinite loops
    - Pure and reentrant: no instance state changes during parse(), so one
      parser may be shared between threads
    - Errors carry offset, line and column of the offending character

    Attributes:
        max_source_size: Maximum allowed source size in characters (default: 10 MB)
    """

    __slots__ = ("_max_source_size",)

    def __init__(self, *, max_source_size: int | None = None) -> None:
        """Initialize parser with optional size limit.

        Args:
            max_source_size: Maximum source size in characters (default: 10 MB).
                            Set to 0 to disable size limit (not recommended).
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    def parse(self, source: str) -> Document:
        """Parse scenario source into an AST document.

        Args:
            source: Scenario text

        Returns:
            :data:`~scenariolex.syntax.ast.EMPTY` for the empty string, otherwise
            a :class:`~scenariolex.syntax.ast.Scenario` whose lines are in
            source order and whose ``raw`` values concatenate to ``source``.

        Raises:
            ValueError: If source exceeds max_source_size (DoS prevention)
            ScenarioSyntaxError: On the first invalid construct (a subclass
                names the construct, e.g. InvalidLabelError)

        Example:
            >>> parser = ScenarioParser()
            >>> scenario = parser.parse("#Jane:Angry\\nHello.")
            >>> scenario.lines[0].name
            'Jane'
        """
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            msg = (
                f"Source size ({len(source):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size in ScenarioParser constructor to increase limit."
            )
            raise ValueError(msg)

        if not source:
            return EMPTY

        logger.debug("Parsing scenario source (%d characters)", len(source))

        cursor = Cursor(source, 0)
        lines: list[Line] = []

        while not cursor.is_eof:
            result = self._parse_line(cursor)
            if isinstance(result, ParseError):
                self._fail(result)
            lines.append(result.value)
            cursor = result.cursor

        if not lines:
            self._fail(
                ParseError(
                    "Scenario produced no lines",
                    Cursor(source, 0),
                    code=DiagnosticCode.EMPTY_SCENARIO,
                )
            )

        logger.debug("Parsed scenario: %d lines", len(lines))
        return Scenario(lines=tuple(lines), raw=source, span=Span(start=0, end=len(source)))

    @staticmethod
    def _parse_line(cursor: Cursor) -> ParseResult[Line] | ParseError:
        """Run the line rules in priority order at cursor.

        Returns:
            The first match, or the ParseError that must abort the parse
        """
        for rule in LINE_RULES:
            result = rule(cursor)
            match result:
                case None:
                    continue
                case ParseError():
                    return result
                case ParseResult():
                    if result.cursor.pos <= cursor.pos:
                        rule_name = getattr(rule, "__name__", repr(rule))
                        return ParseError(
                            f"Rule {rule_name} matched without consuming input",
                            cursor,
                            code=DiagnosticCode.NO_PROGRESS,
                        )
                    return result

        return ParseError(
            "No rule matches this line",
            cursor,
            code=DiagnosticCode.UNRECOGNIZED_LINE,
        )

    @staticmethod
    def _fail(error: ParseError) -> NoReturn:
        """Raise the ScenarioSyntaxError subclass matching the error code."""
        line, column = error.cursor.compute_line_col()
        position = error.cursor.pos
        diagnostic = ErrorTemplate.syntax_error(
            error.code,
            error.message,
            position=position,
            line=line,
            column=column,
        )
        logger.debug("Rejected scenario source: %s", error.format_error())
        raise error_class_for(error.code)(
            diagnostic,
            offset=position,
            remaining=error.cursor.source[position:],
            line=line,
            column=column,
        )
