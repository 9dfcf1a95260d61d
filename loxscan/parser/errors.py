"""
Error handling for parsers built on the loxscan token stream.

Provides located, diagnostic-carrying exceptions for unexpected tokens and
unexpected end of input.
"""

from typing import List, Optional

from ..lexer.errors import Diagnostic
from ..lexer.tokens import Keyword, SourceLocation, Token, TokenKind


class ParseError(Exception):
    """
    Exception raised when the token stream does not hold what the parser expects.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.token = token

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


def describe_kind(kind: TokenKind) -> str:
    """Human-readable name of a token kind for messages."""
    if isinstance(kind, Keyword):
        return f"keyword '{kind.value}'"
    return kind.name


def create_unexpected_token_error(
    expected: TokenKind,
    found: Token,
    location: SourceLocation
) -> ParseError:
    """Create an error for an unexpected token."""
    expected_str = describe_kind(expected)
    found_str = describe_kind(found.kind)

    return ParseError(
        message=f"Expected {expected_str}, found {found_str}",
        location=location,
        token=found,
        code="P001",
        help_text=f"The parser expected to see {expected_str} at this position, but found {found_str} instead."
    )


def create_unexpected_eof_error(expected: TokenKind, location: SourceLocation) -> ParseError:
    """Create an error for unexpected end of input."""
    expected_str = describe_kind(expected)

    return ParseError(
        message=f"Unexpected end of input, expected {expected_str}",
        location=location,
        code="P010",
        help_text=f"The parser reached the end of the input while expecting {expected_str}.",
        suggestions=[f"Add the missing {expected_str}"]
    )
