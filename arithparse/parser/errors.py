"""
Error handling for the arithparse parser.

A parse either succeeds or stops at the first fatal error. Errors carry a
diagnostic record with the source location and an error code so callers
can report them and move on to the next line.

Author: arithparse contributors
"""

from typing import Optional
from dataclasses import dataclass

from ..lexer.tokens import Token, SourceLocation


@dataclass
class Diagnostic:
    """A single error report."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        result = f"{self.severity.upper()}: {self.message}\n"
        result += f"  --> {self.location}"

        if self.help_text:
            result += f"\n  help: {self.help_text}"

        return result


class ParseError(Exception):
    """
    Exception raised when the parser encounters a fatal error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text
        )
        self.token = token

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class MalformedIntegerLiteral(ParseError):
    """Raised when an INTEGER token's text is not a signed 64-bit integer."""
    pass


def create_malformed_integer_error(token: Token, reason: str) -> MalformedIntegerLiteral:
    """Create an error for an integer literal that cannot be converted."""
    return MalformedIntegerLiteral(
        message=f"Malformed integer literal: {token.lexeme!r}",
        location=token.location,
        token=token,
        code="P001",
        help_text=reason
    )
