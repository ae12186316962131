"""
arithparse Lexer Package

Implements a hand-written lexical analyzer for integer arithmetic.

Key Features:
- Lazy, forward-only token production
- Integer literals as maximal digit runs
- Single-character operators and separators
- Unrecognized characters skipped silently
- Source offsets on every token

Author: arithparse contributors
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, tokenize

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "tokenize",
]
