"""
arithparse Pratt Parser Implementation

Implements a top-down operator precedence (Pratt) parser over a lexer's
token stream. The parser keeps two tokens of lookahead and pulls each new
token from the lexer only when it advances.

Only the first expression of the input is parsed. Anything after it,
including text following a ';', is never read.

Author: arithparse contributors
"""

import logging
import re
from typing import Callable, Dict, Optional
from enum import IntEnum

from ..lexer.lexer import Lexer
from ..lexer.tokens import Token, TokenType
from .ast_nodes import Expression, IntegerLiteral, PrefixExpression, InfixExpression
from .errors import create_malformed_integer_error


logger = logging.getLogger(__name__)

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_INTEGER_TEXT = re.compile(r'[+-]?[0-9]+')


class Precedence(IntEnum):
    """Operator precedence levels for Pratt parsing."""
    LOWEST = 1
    SUM = 2             # +, -
    PRODUCT = 3         # *, /
    PREFIX = 4          # -x


class Parser:
    """
    Pratt parser for integer arithmetic.

    Builds the expression tree bottom-up. Nodes are never modified after
    they are created.
    """

    def __init__(self, lexer: Lexer):
        """
        Initialize parser over a lexer.

        Args:
            lexer: Lexer positioned at the start of its input
        """
        self.lexer = lexer
        self.current_token: Optional[Token] = None
        self.peek_token: Optional[Token] = None

        self._init_parsing_tables()

        # Fill both lookahead slots
        self._next_token()
        self._next_token()

    def _init_parsing_tables(self):
        """Initialize operator precedence and parsing function tables."""

        # Prefix parsing functions (for tokens that can start expressions)
        self.prefix_parsers: Dict[TokenType, Callable[[], Optional[Expression]]] = {
            TokenType.INTEGER: self._parse_integer_literal,
            TokenType.MINUS: self._parse_prefix_expression,
        }

        # Infix parsing functions (for binary operators)
        self.infix_parsers: Dict[TokenType, Callable[[Expression], Optional[Expression]]] = {
            TokenType.PLUS: self._parse_infix_expression,
            TokenType.MINUS: self._parse_infix_expression,
            TokenType.ASTERISK: self._parse_infix_expression,
            TokenType.SLASH: self._parse_infix_expression,
        }

        self.precedences: Dict[TokenType, Precedence] = {
            TokenType.PLUS: Precedence.SUM,
            TokenType.MINUS: Precedence.SUM,
            TokenType.ASTERISK: Precedence.PRODUCT,
            TokenType.SLASH: Precedence.PRODUCT,
        }

    def parse_program(self) -> Optional[Expression]:
        """
        Parse the first expression in the input.

        Returns:
            The expression, or None if the input holds none

        Raises:
            MalformedIntegerLiteral: If an integer token cannot be converted
        """
        while not self._current_token_is(TokenType.EOF):
            if self.current_token.type in self.prefix_parsers:
                # The first expression has started; stop here even if it is incomplete
                return self.parse_expression(Precedence.LOWEST)
            logger.debug("no expression starts at %s", self.current_token)
            self._next_token()

        return None

    def parse_expression(self, precedence: Precedence) -> Optional[Expression]:
        """Parse an expression whose operators bind tighter than precedence."""
        prefix_parser = self.prefix_parsers.get(self.current_token.type)
        if prefix_parser is None:
            return None

        left = prefix_parser()
        if left is None:
            return None

        while (not self._peek_token_is(TokenType.SEMICOLON)
               and not self._peek_token_is(TokenType.EOF)
               and precedence < self._peek_precedence()):
            infix_parser = self.infix_parsers.get(self.peek_token.type)
            if infix_parser is None:
                break

            self._next_token()
            expression = infix_parser(left)
            if expression is None:
                # Operator with no right operand; keep what was built so far
                break
            left = expression

        return left

    # Prefix parsers (tokens that can start expressions)

    def _parse_integer_literal(self) -> IntegerLiteral:
        """Parse integer literal."""
        token = self.current_token

        if not _INTEGER_TEXT.fullmatch(token.lexeme):
            raise create_malformed_integer_error(token, "Expected base-10 digits")

        try:
            value = int(token.lexeme, 10)
        except ValueError:
            # Very long digit runs exceed the interpreter's conversion limit
            raise create_malformed_integer_error(token, "Value out of range for a signed 64-bit integer") from None

        if not INT64_MIN <= value <= INT64_MAX:
            raise create_malformed_integer_error(token, "Value out of range for a signed 64-bit integer")

        return IntegerLiteral(token, value)

    def _parse_prefix_expression(self) -> Optional[PrefixExpression]:
        """Parse unary minus."""
        token = self.current_token
        if not self._peek_starts_expression():
            return None
        self._next_token()

        operand = self.parse_expression(Precedence.PREFIX)
        if operand is None:
            return None

        return PrefixExpression(token, token.lexeme, operand)

    # Infix parsers

    def _parse_infix_expression(self, left: Expression) -> Optional[InfixExpression]:
        """Parse binary operation; equal precedence chains group to the left."""
        token = self.current_token
        precedence = self._current_precedence()
        if not self._peek_starts_expression():
            return None
        self._next_token()

        right = self.parse_expression(precedence)
        if right is None:
            return None

        return InfixExpression(token, left, token.lexeme, right)

    # Utility methods

    def _next_token(self):
        """Shift the lookahead window by one token."""
        self.current_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def _peek_starts_expression(self) -> bool:
        """Check if the peek token can begin an operand."""
        return self.peek_token.type in self.prefix_parsers

    def _current_token_is(self, token_type: TokenType) -> bool:
        return self.current_token.type == token_type

    def _peek_token_is(self, token_type: TokenType) -> bool:
        return self.peek_token.type == token_type

    def _current_precedence(self) -> Precedence:
        return self.precedences.get(self.current_token.type, Precedence.LOWEST)

    def _peek_precedence(self) -> Precedence:
        return self.precedences.get(self.peek_token.type, Precedence.LOWEST)


def parse(source: str, filename: str = "<input>") -> Optional[Expression]:
    """
    Convenience function to parse a string.

    Args:
        source: Text to parse
        filename: Name used in source locations

    Returns:
        The first expression in source, or None

    Raises:
        MalformedIntegerLiteral: If an integer token cannot be converted
    """
    parser = Parser(Lexer(source, filename))
    return parser.parse_program()
