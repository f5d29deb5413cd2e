"""
C-style syntax tree produced by the transformer.

Calls carry a ``callee`` identifier and an ``arguments`` list, and every
top-level call is wrapped in an ``ExpressionStatement``. This is the
only tree the code generator renders.
"""

from dataclasses import dataclass, field
from typing import List, Union
from .ast import Node


@dataclass
class CastNode(Node):
    """Base class for C-style tree nodes."""


@dataclass
class Identifier(CastNode):
    name: str


@dataclass
class NumberLiteral(CastNode):
    value: str


@dataclass
class CallExpression(CastNode):
    """``callee(arguments...)``"""
    callee: Identifier
    arguments: List["Expression"] = field(default_factory=list)


Expression = Union[CallExpression, NumberLiteral]


@dataclass
class ExpressionStatement(CastNode):
    """A call used as a statement; rendered with a trailing ';'."""
    expression: CallExpression


Statement = Union[ExpressionStatement, NumberLiteral]


@dataclass
class Program(CastNode):
    body: List[Statement] = field(default_factory=list)
