"""
Code generator: renders a C-style tree as text.
"""

from .cast import (
    CastNode,
    Program, ExpressionStatement, CallExpression, Identifier, NumberLiteral,
)
from .errors import error_unknown_node_type, error_nesting_too_deep


class CodeGenerator:
    """
    Renders C-style nodes.

    Source-tree nodes share some tag names with C-style nodes but are not
    accepted; they must go through the transformer first.
    """

    name = "code generator"

    def generate(self, node: CastNode) -> str:
        if not isinstance(node, CastNode):
            raise error_unknown_node_type(node, self.name)
        try:
            return self._render(node)
        except RecursionError:
            raise error_nesting_too_deep(self.name, node.span) from None

    def _render(self, node: CastNode) -> str:
        if not isinstance(node, CastNode):
            return self.generic_visit(node)
        method = getattr(self, f"visit_{node.type}", self.generic_visit)
        return method(node)

    def generic_visit(self, node) -> str:
        raise error_unknown_node_type(node, self.name)

    def visit_Program(self, node: Program) -> str:
        lines = []
        for stmt in node.body:
            lines.append(self._render(stmt))
        return "\n".join(lines)

    def visit_ExpressionStatement(self, node: ExpressionStatement) -> str:
        return self._render(node.expression) + ";"

    def visit_CallExpression(self, node: CallExpression) -> str:
        args = []
        for arg in node.arguments:
            args.append(self._render(arg))
        return f"{self._render(node.callee)}({', '.join(args)})"

    def visit_Identifier(self, node: Identifier) -> str:
        return node.name

    def visit_NumberLiteral(self, node: NumberLiteral) -> str:
        return node.value


def generate(node: CastNode) -> str:
    """
    Render a C-style node (usually a Program) to source text.

    Raises:
        UnknownNodeType: If the tree holds a node the generator does not know
        NestingTooDeep: If calls nest deeper than the interpreter stack allows
    """
    return CodeGenerator().generate(node)
