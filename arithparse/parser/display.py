"""
Fully parenthesized rendering of expression trees.

Every prefix and infix node is wrapped in parentheses, which makes the
binding chosen by the parser visible in the output.
"""

from typing import Optional

from .ast_nodes import ASTVisitor, Expression, IntegerLiteral, PrefixExpression, InfixExpression


class DisplayStringRenderer(ASTVisitor):
    """Renders an expression tree to its display string."""

    def render(self, node: Expression) -> str:
        return node.accept(self)

    def visit_integer_literal(self, node: IntegerLiteral) -> str:
        return node.text

    def visit_prefix_expression(self, node: PrefixExpression) -> str:
        return f"({node.operator}{self.render(node.operand)})"

    def visit_infix_expression(self, node: InfixExpression) -> str:
        return f"({self.render(node.left)} {node.operator} {self.render(node.right)})"


def to_display_string(node: Optional[Expression]) -> str:
    """Render an expression, or the empty string when there is none."""
    if node is None:
        return ""
    return DisplayStringRenderer().render(node)
