"""Scenario parser module.

This module provides the main ScenarioParser class and related parsing
utilities organized into focused submodules.

Module Organization:
- core.py: ScenarioParser class, the document composer
- primitives.py: Identifier, name, quoted string and parameter recognizers
- rules.py: Line-level constructs (comments, cues, labels, tags, bare text)
- whitespace.py: Line consumption and line-break folding

Public API:
    ScenarioParser: Main parser class
    LINE_RULES: Rules in the order the composer tries them
"""

from scenariolex.syntax.parser.core import LINE_RULES, ScenarioParser

__all__ = ["LINE_RULES", "ScenarioParser"]
