"""Hypothesis strategies for ScenarioLex property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules. Strategies are organized by domain:

- scenario: scenario source text and AST nodes

Usage:
    from tests.strategies import scenario_nodes, scenario_chaos_source
    from tests.strategies.scenario import parameter_maps, identifiers

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - scenario_chaos_source, line_endings, parameter_values
    - character_declaration_nodes, bare_text_nodes, scenario_nodes
"""

from .scenario import (
    # Constants
    IDENTIFIER_FIRST_CHARS,
    IDENTIFIER_REST_CHARS,
    NAME_CHARS,
    PARAMETER_KEY_CHARS,
    SIGIL_CHARS,
    UNICODE_CHARS,
    # AST strategies (for serialization)
    bare_text_nodes,
    block_comment_nodes,
    character_declaration_nodes,
    # String strategies (for parsing)
    identifiers,
    label_nodes,
    line_comment_nodes,
    line_endings,
    line_nodes,
    multi_line_tag_nodes,
    parameter_keys,
    parameter_maps,
    parameter_values,
    restricted_names,
    scenario_chaos_source,
    scenario_nodes,
    single_line_tag_nodes,
    single_line_text,
)

__all__ = [
    "IDENTIFIER_FIRST_CHARS",
    "IDENTIFIER_REST_CHARS",
    "NAME_CHARS",
    "PARAMETER_KEY_CHARS",
    "SIGIL_CHARS",
    "UNICODE_CHARS",
    "bare_text_nodes",
    "block_comment_nodes",
    "character_declaration_nodes",
    "identifiers",
    "label_nodes",
    "line_comment_nodes",
    "line_endings",
    "line_nodes",
    "multi_line_tag_nodes",
    "parameter_keys",
    "parameter_maps",
    "parameter_values",
    "restricted_names",
    "scenario_chaos_source",
    "scenario_nodes",
    "single_line_tag_nodes",
    "single_line_text",
]
