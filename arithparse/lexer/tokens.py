"""
Token definitions for the arithparse lexer.

The token set is deliberately small:
- End of input
- Integer literals (runs of ASCII digits)
- The four arithmetic operators
- The semicolon separator

Author: arithparse contributors
"""

from enum import Enum, auto
from dataclasses import dataclass


class TokenType(Enum):
    """Enumeration of all token types produced by the lexer."""

    EOF = auto()                    # End of input
    INTEGER = auto()                # 42

    PLUS = auto()                   # +
    MINUS = auto()                  # - (infix subtraction or prefix negation)
    ASTERISK = auto()               # *
    SLASH = auto()                  # /

    SEMICOLON = auto()              # ;


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in a single line of input.

    Used for error reporting and debugging.
    """
    filename: str
    offset: int  # Character offset from start of the line

    @property
    def column(self) -> int:
        return self.offset + 1

    def __str__(self) -> str:
        return f"{self.filename}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.offset})"


UNKNOWN_LOCATION = SourceLocation("<unknown>", 0)


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    Holds the token type, the raw text from the input and where that text
    starts. Tokens built outside the lexer get an unknown location.
    """
    type: TokenType
    lexeme: str                                 # Raw text from input
    location: SourceLocation = UNKNOWN_LOCATION

    def __str__(self) -> str:
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.lexeme!r}, {self.location!r})"


# Single-character lookup table used by the lexer
OPERATORS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    ";": TokenType.SEMICOLON,
}

DIGITS = frozenset("0123456789")
