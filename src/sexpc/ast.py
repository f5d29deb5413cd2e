"""
Abstract Syntax Tree (AST) node definitions for the source language.

This is the tree the parser builds: generic calls with a ``name`` and a
list of ``params``. The transformer rewrites it into the C-style tree in
:mod:`sexpc.cast`, which is the only shape the code generator accepts.
"""

from dataclasses import dataclass, field, fields
from typing import Optional, List, Union, Any
from abc import ABC
from .tokens import SourceSpan


# =============================================================================
# Base Classes
# =============================================================================

@dataclass
class Node(ABC):
    """Base class for nodes of both syntax trees."""
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False, kw_only=True)

    @property
    def type(self) -> str:
        """The node tag, e.g. 'CallExpression'."""
        return self.__class__.__name__

    def children(self) -> List["Node"]:
        """Direct child nodes, in field order."""
        result = []
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Node):
                result.append(value)
            elif isinstance(value, list):
                result.extend(v for v in value if isinstance(v, Node))
        return result

    def to_dict(self) -> dict:
        """JSON-ready structure: the tag under 'type', then each field."""
        result = {"type": self.type}
        for f in fields(self):
            if f.name == "span":
                continue
            result[f.name] = _json_value(getattr(self, f.name))
        return result


def _json_value(value: Any) -> Any:
    if isinstance(value, Node):
        return value.to_dict()
    if isinstance(value, list):
        return [_json_value(v) for v in value]
    return value


@dataclass
class AstNode(Node):
    """Base class for source-tree nodes."""


# =============================================================================
# Nodes
# =============================================================================

@dataclass
class NumberLiteral(AstNode):
    """A digit run, kept as text."""
    value: str


@dataclass
class CallExpression(AstNode):
    """A parenthesized call, e.g. ``(add 2 3)``."""
    name: str
    params: List["Expression"] = field(default_factory=list)


Expression = Union[CallExpression, NumberLiteral]


@dataclass
class Program(AstNode):
    """Root of a parsed source file."""
    body: List[Expression] = field(default_factory=list)


# =============================================================================
# Tree Helpers
# =============================================================================

def depth(node: Node) -> int:
    """Call nesting depth below node (0 for a tree without calls)."""
    below = max((depth(child) for child in node.children()), default=0)
    if node.type == "CallExpression":
        return below + 1
    return below


class PrintVisitor:
    """Debug visitor that prints the structure of either tree."""

    def __init__(self, indent: int = 0):
        self.indent = indent

    def _print(self, text: str) -> None:
        print("  " * self.indent + text)

    def generic_visit(self, node: Node) -> None:
        self._print(node.type)
        for f in fields(node):
            if f.name == "span":
                continue
            value = getattr(node, f.name)
            if isinstance(value, Node):
                self._print(f"  {f.name}:")
                PrintVisitor(self.indent + 2).generic_visit(value)
            elif isinstance(value, list):
                self._print(f"  {f.name}: [")
                for item in value:
                    if isinstance(item, Node):
                        PrintVisitor(self.indent + 2).generic_visit(item)
                    else:
                        self._print(f"    {item!r}")
                self._print("  ]")
            else:
                self._print(f"  {f.name}: {value!r}")


def print_ast(node: Node) -> None:
    """Print an AST node for debugging."""
    PrintVisitor().generic_visit(node)
