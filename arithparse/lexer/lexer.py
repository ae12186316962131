"""
arithparse Lexer - turns one line of text into tokens, one at a time.

Anything the lexer does not recognize is skipped rather than rejected, so
a stray character never stops a line from parsing.

Author: arithparse contributors
"""

import logging
from typing import Iterator, List

from .tokens import Token, TokenType, SourceLocation, OPERATORS, DIGITS


logger = logging.getLogger(__name__)


class Lexer:
    """
    Forward-only lexical analyzer over a single line of input.

    Tokens are produced lazily by next_token(). Once the input is
    exhausted every further call returns an EOF token.
    """

    def __init__(self, source: str, filename: str = "<input>"):
        """
        Initialize the lexer with input text.

        Args:
            source: Text to scan
            filename: Name used in source locations
        """
        self.source = source
        self.filename = filename
        self.pos = 0

    def next_token(self) -> Token:
        """Scan and return the next token."""
        while self.pos < len(self.source):
            current_char = self.source[self.pos]

            if current_char == ' ':
                self.pos += 1
                continue

            start_pos = self.pos

            token_type = OPERATORS.get(current_char)
            if token_type is not None:
                self.pos += 1
                return Token(token_type, current_char, self._location(start_pos))

            if current_char in DIGITS:
                return Token(TokenType.INTEGER, self._read_number(), self._location(start_pos))

            # Unrecognized characters produce no token
            logger.debug("skipping unrecognized character %r at %s",
                         current_char, self._location(start_pos))
            self.pos += 1

        return Token(TokenType.EOF, "", self._location(self.pos))

    def tokenize(self) -> List[Token]:
        """
        Tokenize the rest of the input.

        Returns:
            List of tokens including the EOF token
        """
        tokens = list(self)
        tokens.append(self.next_token())
        return tokens

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to, but not including, EOF."""
        while True:
            token = self.next_token()
            if token.type == TokenType.EOF:
                return
            yield token

    def _read_number(self) -> str:
        """Consume a maximal run of digits."""
        start_pos = self.pos
        while self.pos < len(self.source) and self.source[self.pos] in DIGITS:
            self.pos += 1
        return self.source[start_pos:self.pos]

    def _location(self, offset: int) -> SourceLocation:
        return SourceLocation(self.filename, offset)


def tokenize(source: str, filename: str = "<input>") -> List[Token]:
    """
    Convenience function to tokenize a string.

    Args:
        source: Text to scan
        filename: Name used in source locations

    Returns:
        List of tokens ending with an EOF token
    """
    return Lexer(source, filename).tokenize()
