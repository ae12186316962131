"""
arithparse Package

A hand-written lexer and Pratt parser for integer arithmetic with
+, -, *, / and unary minus. Parsed expressions render back to a fully
parenthesized string that shows how the operators bound.

Architecture:
    arithparse/
    ├── lexer/           # Tokenization
    ├── parser/          # Precedence climbing, AST and rendering
    └── repl.py          # Line-based interactive loop

Author: arithparse contributors
License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, SourceLocation, tokenize
from .parser import (
    Parser, Precedence, parse, to_display_string,
    Expression, IntegerLiteral, PrefixExpression, InfixExpression,
    ParseError, MalformedIntegerLiteral,
)

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "Precedence",

    # Entry points
    "tokenize",
    "parse",
    "to_display_string",

    # Data types
    "Token", "TokenType", "SourceLocation",
    "Expression", "IntegerLiteral", "PrefixExpression", "InfixExpression",

    # Errors
    "ParseError", "MalformedIntegerLiteral",

    # Version info
    "__version__",
    "__license__",
]
