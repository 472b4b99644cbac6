"""Scenario Tooling Example - Parse, Inspect, Reformat.

Demonstrates what build tools can do with the scenario parser:

1. Parse scenario source to AST
2. Walk lines with a visitor (cast list extraction)
3. Report syntax errors with position
4. Serialize AST back to canonical source

Use cases:
- Linters and formatters for scenario files
- Cast and asset extraction for localization
- CI checks before a scenario is shipped to the executor

Python 3.13+.
"""

from __future__ import annotations

SCENARIO = """\
; Chapter 1
*morning|start
[bg file='school gate.png'
    fade=1]
@bgm morning loop
#Jane:Happy
  Good morning!
#Tom
Morning.
#
_   The wind was cold.
"""


def example_1_basic_parsing() -> None:
    """Parse scenario source and inspect the lines."""
    from scenariolex import parse
    from scenariolex.syntax.ast import CharacterDeclaration, Label, MultiLineTag, Scenario

    print("=" * 60)
    print("Example 1: Basic Parsing")
    print("=" * 60)

    scenario = parse(SCENARIO)
    assert isinstance(scenario, Scenario)

    print(f"Parsed {len(scenario.lines)} lines:")
    for line in scenario.lines:
        match line:
            case Label(name=name, alternate=alternate):
                print(f"  label {name} (alternate: {alternate})")
            case CharacterDeclaration(name=name, emotion=emotion):
                print(f"  cue {name} [{emotion or 'neutral'}]")
            case MultiLineTag(tag=tag, parameters=parameters):
                print(f"  [{tag}] {dict(parameters)}")
            case _:
                print(f"  {line.kind}")
    print()


def example_2_cast_list() -> None:
    """Collect every speaking character with a visitor."""
    from scenariolex import parse
    from scenariolex.syntax import CharacterDeclaration, ScenarioVisitor

    print("=" * 60)
    print("Example 2: Cast List")
    print("=" * 60)

    class CastCollector(ScenarioVisitor):
        def __init__(self) -> None:
            super().__init__()
            self.cast: dict[str, set[str]] = {}

        def visit_CharacterDeclaration(self, node: CharacterDeclaration) -> CharacterDeclaration:
            emotions = self.cast.setdefault(node.name, set())
            if node.emotion is not None:
                emotions.add(node.emotion)
            return node

    collector = CastCollector()
    collector.visit(parse(SCENARIO))
    for name, emotions in sorted(collector.cast.items()):
        print(f"  {name}: {', '.join(sorted(emotions)) or '-'}")
    print()


def example_3_syntax_errors() -> None:
    """Report the first syntax error with its position."""
    from scenariolex import ScenarioSyntaxError, parse

    print("=" * 60)
    print("Example 3: Syntax Errors")
    print("=" * 60)

    for source in ("*scene extra", "#Jane:Angry:", "[\nbg\nfile\n=\na.png\n]"):
        try:
            parse(source)
        except ScenarioSyntaxError as error:
            print(f"{type(error).__name__} at offset {error.offset}:")
            print(error)
            print()


def example_4_reformat() -> None:
    """Serialize to canonical form and check the roundtrip."""
    from scenariolex import parse, serialize

    print("=" * 60)
    print("Example 4: Canonical Reformatting")
    print("=" * 60)

    canonical = serialize(parse(SCENARIO))
    print(canonical)
    assert serialize(parse(canonical)) == canonical
    print("Roundtrip OK")


if __name__ == "__main__":
    example_1_basic_parsing()
    example_2_cast_list()
    example_3_syntax_errors()
    example_4_reformat()
