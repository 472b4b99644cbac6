"""Visitor pattern for AST traversal.

Enables tools (interpreters, linters, serializers) to walk a scenario AST
without modifying node classes.

NOTE: This module follows Python stdlib ast.NodeVisitor naming convention.
Methods are named visit_NodeName (PascalCase) rather than visit_node_name (snake_case).
See: https://docs.python.org/3/library/ast.html#ast.NodeVisitor

Type Parameters:
- ScenarioVisitor[T] is generic over return type T
- ScenarioVisitor (no type param) defaults to T=ScenarioNode

Python 3.13+.
"""

from collections.abc import Callable
from typing import ClassVar

from .ast import Empty, Scenario, ScenarioNode

__all__ = ["ScenarioVisitor"]


class ScenarioVisitor[T = ScenarioNode]:
    """Base visitor for traversing a scenario AST.

    Follows stdlib ast.NodeVisitor convention: generic_visit() automatically
    traverses the lines of a document. Override visit_NodeType methods to
    add custom behavior.

    Uses class-level dispatch table:
    - Dispatch table built once per class definition via __init_subclass__
    - Bound methods cached per instance on first use

    Example:
        >>> class CueCounter(ScenarioVisitor):
        ...     def __init__(self):
        ...         super().__init__()
        ...         self.count = 0
        ...
        ...     def visit_CharacterDeclaration(self, node):
        ...         self.count += 1
        ...         return node
        ...
        >>> counter = CueCounter()
        >>> _ = counter.visit(parse("#Jane\\nHi.\\n#Tom\\nHey."))
        >>> counter.count
        2
    """

    __slots__ = ("_instance_dispatch_cache",)

    # Class-level dispatch table (method names only, not bound methods)
    _class_visit_methods: ClassVar[dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Build class-level dispatch table when subclass is defined."""
        super().__init_subclass__(**kwargs)
        cls._class_visit_methods = {}
        for name in dir(cls):
            if name.startswith("visit_") and name != "visit":
                # "visit_Label" -> "Label"
                cls._class_visit_methods[name[6:]] = name

    def __init__(self) -> None:
        """Initialize visitor dispatch cache.

        Subclasses MUST call super().__init__().
        """
        self._instance_dispatch_cache: dict[type, Callable[[ScenarioNode], T]] = {}

    def visit(self, node: ScenarioNode) -> T:
        """Visit a node (dispatcher with class-level + instance-level caching).

        Args:
            node: AST node to visit

        Returns:
            Result of visiting the node
        """
        node_type = type(node)

        if node_type in self._instance_dispatch_cache:
            return self._instance_dispatch_cache[node_type](node)

        node_type_name = node_type.__name__
        if node_type_name in self._class_visit_methods:
            method = getattr(self, self._class_visit_methods[node_type_name])
        else:
            method = self.generic_visit

        self._instance_dispatch_cache[node_type] = method
        return method(node)  # type: ignore[no-any-return]  # getattr returns Any

    def generic_visit(self, node: ScenarioNode) -> T:
        """Default visitor: visit every line of a document, in order.

        Line nodes have no children; they are returned unchanged.

        Args:
            node: AST node to visit

        Returns:
            The node itself (identity)
        """
        if isinstance(node, (Scenario, Empty)):
            for line in node.lines:
                self.visit(line)
        return node  # type: ignore[return-value]  # T defaults to ScenarioNode
