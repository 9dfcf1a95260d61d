"""
Error reporting for the loxscan lexer.

The scanner itself never raises: malformed input becomes ERROR tokens.
This module turns those tokens into located diagnostics for whoever
consumes the stream, either one at a time or batched.
"""

from enum import Enum
from typing import Iterable, List, Optional
from dataclasses import dataclass

from .tokens import SourceIndex, SourceLocation, Token


@dataclass
class Diagnostic:
    """Base class for lexer diagnostics (errors, warnings, info)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception carrying the diagnostic for one ERROR token.

    Only raised by the strict convenience entry points; the lexer itself
    reports errors in-band.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
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

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class ErrorKind(Enum):
    """Why the scanner produced an ERROR token."""
    UNRECOGNIZED_CHARACTER = "L001"
    UNTERMINATED_STRING = "L002"


ERROR_CODES = {
    "L001": "Invalid character",
    "L002": "Unterminated string literal",
}


def classify_error(source: str, token: Token, index: Optional[SourceIndex] = None) -> ErrorKind:
    """
    Recover the cause of an ERROR token from the source it was scanned from.

    ``index`` is a prebuilt SourceIndex over ``source``, for repeated calls.

    Raises:
        ValueError: if the token is not an ERROR token
    """
    if not token.is_error:
        raise ValueError(f"Token {token} is not an error token")

    if index is None:
        index = SourceIndex(source)
    if index.char_at(token.position) == '"':
        return ErrorKind.UNTERMINATED_STRING
    return ErrorKind.UNRECOGNIZED_CHARACTER


def create_invalid_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for an invalid character."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=f"Invalid character: {char!r}",
        location=location,
        code=ErrorKind.UNRECOGNIZED_CHARACTER.value,
        help_text=help_text
    )


def create_unterminated_string_error(location: SourceLocation) -> LexerError:
    """Create an error for an unterminated string literal."""
    return LexerError(
        message="Unterminated string literal",
        location=location,
        code=ErrorKind.UNTERMINATED_STRING.value,
        help_text='String literals must be closed with a matching " quote.',
        suggestions=['Add a closing " quote']
    )


def diagnose(
    source: str,
    token: Token,
    filename: str = "<string>",
    index: Optional[SourceIndex] = None
) -> LexerError:
    """
    Build the LexerError describing one ERROR token.

    ``index`` is a prebuilt SourceIndex over ``source``, for repeated calls.

    Raises:
        ValueError: if the token is not an ERROR token
    """
    if index is None:
        index = SourceIndex(source)
    kind = classify_error(source, token, index)
    location = index.locate(token.position, filename)

    if kind is ErrorKind.UNTERMINATED_STRING:
        return create_unterminated_string_error(location)
    return create_invalid_character_error(index.char_at(token.position), location)


def collect_diagnostics(
    source: str,
    tokens: Iterable[Token],
    filename: str = "<string>"
) -> List[LexerError]:
    """Diagnose every ERROR token in ``tokens``, in stream order."""
    index = SourceIndex(source)
    return [diagnose(source, token, filename, index) for token in tokens if token.is_error]
