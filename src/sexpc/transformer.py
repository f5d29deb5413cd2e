"""
Source AST to C-style AST transformation.

Walks the parsed tree depth-first and builds a fresh C-style tree beside
it. Each visit receives the list on the new tree that its counterpart
must be appended to (the context), so neither tree is annotated.

    (add 2 (subtract 4 2))

    Program                          Program
      CallExpression add               ExpressionStatement
        NumberLiteral 2       ->         CallExpression callee=add
        CallExpression subtract            NumberLiteral 2
          ...                              CallExpression callee=subtract
                                             ...
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from . import ast
from . import cast
from .errors import error_unknown_node_type, error_nesting_too_deep


class AstTransform(ABC):
    """
    Base class for tree transformations.

    A transform takes a source Program and returns a new Program.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of this transform, used in error messages."""
        pass

    @abstractmethod
    def transform(self, program: ast.Program) -> cast.Program:
        """Apply this transform to a program."""
        pass


class Transformer(AstTransform):
    """
    Rewrites calls into callee/arguments form.

    Subclasses may override the ``enter_*`` methods; each gets the source
    node, its parent and the context list for the new node.
    """

    @property
    def name(self) -> str:
        return "transformer"

    def transform(self, program: ast.Program) -> cast.Program:
        if not isinstance(program, ast.Program):
            raise error_unknown_node_type(program, self.name)
        new_program = cast.Program(span=program.span)
        try:
            self.traverse(program, None, new_program.body)
        except RecursionError:
            raise error_nesting_too_deep(self.name, program.span) from None
        return new_program

    def traverse(self, node: ast.AstNode, parent: Optional[ast.AstNode],
                 context: List[cast.CastNode]) -> None:
        """Visit node, appending its counterpart to context."""
        if not isinstance(node, ast.AstNode):
            raise error_unknown_node_type(node, self.name)
        method = getattr(self, f"enter_{node.type}", None)
        if method is None:
            raise error_unknown_node_type(node, self.name)
        method(node, parent, context)

    def enter_Program(self, node: ast.Program, parent, context) -> None:
        # Only valid as the root
        if parent is not None:
            raise error_unknown_node_type(node, self.name)
        for child in node.body:
            self.traverse(child, node, context)

    def enter_NumberLiteral(self, node: ast.NumberLiteral, parent, context) -> None:
        context.append(cast.NumberLiteral(node.value, span=node.span))

    def enter_CallExpression(self, node: ast.CallExpression, parent, context) -> None:
        expression = cast.CallExpression(
            callee=cast.Identifier(node.name, span=node.span),
            arguments=[],
            span=node.span,
        )

        # Top-level calls become statements
        if isinstance(parent, ast.Program):
            context.append(cast.ExpressionStatement(expression, span=node.span))
        else:
            context.append(expression)

        for child in node.params:
            self.traverse(child, node, expression.arguments)


def transform(program: ast.Program) -> cast.Program:
    """
    Convenience function to transform a source AST.

    Raises:
        UnknownNodeType: If the tree holds a node the transformer does not know
        NestingTooDeep: If calls nest deeper than the interpreter stack allows
    """
    return Transformer().transform(program)
