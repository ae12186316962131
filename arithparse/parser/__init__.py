"""
arithparse Parser Package

Implements a Pratt (precedence-climbing) parser for integer arithmetic and
a fully parenthesized renderer for the resulting trees.

Key Features:
- Top-down operator precedence with two tokens of lookahead
- Unary minus binding tighter than any binary operator
- Left-associative +, -, *, /
- Immutable AST nodes with visitor support
- Typed errors for malformed integer literals

Author: arithparse contributors
"""

from .ast_nodes import (
    ASTNode, ASTNodeType, ASTVisitor, Expression,
    IntegerLiteral, PrefixExpression, InfixExpression,
)
from .parser import Parser, Precedence, parse
from .display import DisplayStringRenderer, to_display_string
from .errors import ParseError, MalformedIntegerLiteral

__all__ = [
    # Core parser
    "Parser",
    "Precedence",
    "parse",

    # AST nodes
    "ASTNode", "ASTNodeType", "ASTVisitor", "Expression",
    "IntegerLiteral", "PrefixExpression", "InfixExpression",

    # Rendering
    "DisplayStringRenderer",
    "to_display_string",

    # Error handling
    "ParseError", "MalformedIntegerLiteral",
]
