"""Hypothesis strategies for generating scenario source and AST nodes.

Provides custom strategies for property-based testing of the scenario
parser and serializer.

Strategy Categories:
- String strategies: Generate scenario source text (for parsing)
- AST strategies: Generate AST nodes directly (for serialization)
"""

from __future__ import annotations

import string
from types import MappingProxyType

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from scenariolex.syntax.ast import (
    BareText,
    BlockComment,
    CharacterDeclaration,
    Label,
    Line,
    LineComment,
    MultiLineTag,
    Narrative,
    ParameterValue,
    Scenario,
    SingleLineTag,
)

# =============================================================================
# Constants
# =============================================================================

# Restricted name grammar for labels and single-line tags: [A-Za-z_]+
NAME_CHARS: str = string.ascii_letters + "_"

# Identifier grammar for multi-line tag names: [A-Za-z_][A-Za-z0-9_]*
IDENTIFIER_FIRST_CHARS: str = NAME_CHARS
IDENTIFIER_REST_CHARS: str = NAME_CHARS + string.digits

# Parameter keys: no blanks, no '=', no ']'
PARAMETER_KEY_CHARS: str = string.ascii_letters + string.digits + "_-."

# Every character the scenario grammar gives a meaning to
SIGIL_CHARS: str = ";/*#@[]_|:='\""

# Unicode test characters (various scripts and special chars)
UNICODE_CHARS: str = (
    "世界"  # Chinese: world
    "こんにちは"  # Japanese: konnichiwa
    "éàüñ"  # Latin extended: accents
    "’“”"  # Smart quotes
    "ＡＢ"  # Full-width letters (not identifier characters)
)

# Any character except line terminators and surrogates
_SINGLE_LINE_CHARS = st.characters(
    blacklist_categories=("Cs",),
    blacklist_characters="\n\r",
)


# =============================================================================
# String Strategies (for parsing)
# =============================================================================


def single_line_text(max_size: int = 30) -> st.SearchStrategy[str]:
    """Generate arbitrary text without line terminators."""
    return st.text(alphabet=_SINGLE_LINE_CHARS, max_size=max_size)


def restricted_names() -> st.SearchStrategy[str]:
    """Generate label and single-line tag names: [A-Za-z_]+"""
    return st.text(alphabet=NAME_CHARS, min_size=1, max_size=12)


@composite
def identifiers(draw: st.DrawFn) -> str:
    """Generate identifiers: [A-Za-z_][A-Za-z0-9_]*"""
    first = draw(st.sampled_from(IDENTIFIER_FIRST_CHARS))
    rest = draw(st.text(alphabet=IDENTIFIER_REST_CHARS, max_size=12))
    return first + rest


@composite
def line_endings(draw: st.DrawFn) -> str:
    """Generate one of the accepted line terminators."""
    ending = draw(st.sampled_from(["\n", "\r\n", "\r"]))
    event(f"line_ending={ending!r}")
    return ending


@composite
def scenario_chaos_source(draw: st.DrawFn) -> str:
    """Generate sigil-heavy source that may or may not be valid.

    Lines are built mostly from grammar characters so every rule, and
    most of their error paths, are reached.
    """
    alphabet = SIGIL_CHARS + " \t" + "abcXYZ019" + UNICODE_CHARS[:4]
    lines = draw(st.lists(st.text(alphabet=alphabet, max_size=16), min_size=1, max_size=8))
    endings = draw(st.lists(line_endings(), min_size=len(lines), max_size=len(lines)))
    trailing = draw(st.booleans())
    parts = [line + ending for line, ending in zip(lines, endings, strict=True)]
    source = "".join(parts)
    if not trailing:
        source = source.rstrip("\r\n")
    event(f"chaos_lines={len(lines)}")
    return source


# =============================================================================
# AST Strategies (for serialization)
# =============================================================================


def _no_trailing_space(text: str) -> bool:
    return bool(text) and not text[-1].isspace()


def parameter_keys() -> st.SearchStrategy[str]:
    """Generate parameter keys accepted by both tag forms."""
    return st.text(alphabet=PARAMETER_KEY_CHARS, min_size=1, max_size=10)


@composite
def parameter_values(draw: st.DrawFn) -> ParameterValue:
    """Generate a flag, a bare value, or a value that needs quoting."""
    kind = draw(st.sampled_from(["flag", "bare", "quoted"]))
    event(f"parameter_value={kind}")
    match kind:
        case "flag":
            return True
        case "bare":
            return draw(
                st.text(alphabet=string.ascii_letters + string.digits + "._-:=", min_size=1)
            )
        case _:
            # May contain one quote mark, never both, so a free mark exists
            return draw(st.text(alphabet=string.ascii_letters + " '\t", max_size=12))


def parameter_maps() -> st.SearchStrategy[MappingProxyType[str, ParameterValue]]:
    """Generate read-only parameter mappings."""
    return st.dictionaries(parameter_keys(), parameter_values(), max_size=4).map(
        MappingProxyType
    )


@composite
def line_comment_nodes(draw: st.DrawFn) -> LineComment:
    """Generate LineComment nodes."""
    return LineComment(body=draw(single_line_text()), raw="")


@composite
def block_comment_nodes(draw: st.DrawFn) -> BlockComment:
    """Generate BlockComment nodes whose body spans at least two lines."""
    lines = draw(st.lists(single_line_text(max_size=12), min_size=2, max_size=4))
    body = "\n".join(lines)
    if "*/" in body:
        body = body.replace("*/", "* /")
    return BlockComment(body=body, raw="")


@composite
def character_declaration_nodes(draw: st.DrawFn) -> CharacterDeclaration:
    """Generate CharacterDeclaration nodes, with or without emotion."""
    part = st.text(
        alphabet=string.ascii_letters + " " + UNICODE_CHARS, min_size=1, max_size=10
    ).filter(_no_trailing_space)
    name = draw(part)
    emotion = draw(st.none() | part)
    event(f"has_emotion={emotion is not None}")
    return CharacterDeclaration(name=name, emotion=emotion, raw="")


@composite
def label_nodes(draw: st.DrawFn) -> Label:
    """Generate Label nodes."""
    name = draw(restricted_names())
    alternate = draw(st.none() | restricted_names())
    return Label(name=name, alternate=alternate, raw="")


@composite
def single_line_tag_nodes(draw: st.DrawFn) -> SingleLineTag:
    """Generate SingleLineTag nodes."""
    return SingleLineTag(tag=draw(restricted_names()), parameters=draw(parameter_maps()), raw="")


@composite
def multi_line_tag_nodes(draw: st.DrawFn) -> MultiLineTag:
    """Generate MultiLineTag nodes."""
    return MultiLineTag(tag=draw(identifiers()), parameters=draw(parameter_maps()), raw="")


@composite
def bare_text_nodes(draw: st.DrawFn) -> BareText:
    """Generate BareText nodes, including text that needs the escape."""
    text = draw(single_line_text())
    if text != text.strip():
        event("bare_text=needs_escape_whitespace")
    elif text and text[0] in SIGIL_CHARS:
        event("bare_text=leading_sigil")
    return BareText(text=text, raw="")


def line_nodes() -> st.SearchStrategy[Line]:
    """Generate any line node."""
    return st.one_of(
        line_comment_nodes(),
        block_comment_nodes(),
        character_declaration_nodes(),
        st.just(Narrative(raw="")),
        label_nodes(),
        single_line_tag_nodes(),
        multi_line_tag_nodes(),
        bare_text_nodes(),
    )


@composite
def scenario_nodes(draw: st.DrawFn) -> Scenario:
    """Generate Scenario documents with at least one line."""
    lines = draw(st.lists(line_nodes(), min_size=1, max_size=8))
    event(f"scenario_lines={len(lines)}")
    return Scenario(lines=tuple(lines), raw="")
