"""
Token stream for parsers driving the loxscan lexer.

Wraps the lazy token sequence with a single token of lookahead so a
parser can peek, test and consume without ever forcing the whole scan.
"""

from typing import Iterable, Iterator, Optional

from ..lexer.config import ScanConfig
from ..lexer.lexer import tokenize
from ..lexer.tokens import Kind, SourceLocation, Token, TokenKind, locate, utf8_width
from .errors import create_unexpected_eof_error, create_unexpected_token_error


class TokenStream:
    """
    Pull-based cursor over tokens.

    ``advance`` is consume-next and ``peek`` observes the next token without
    consuming it; both return None once the tokens run out, however often
    they are called.
    """

    def __init__(
        self,
        source: str,
        tokens: Optional[Iterable[Token]] = None,
        filename: str = "<string>",
        config: Optional[ScanConfig] = None
    ):
        """
        Initialize the stream.

        Args:
            source: Source text the tokens were (or will be) scanned from
            tokens: Tokens to read; a fresh scan of ``source`` when omitted
            filename: Name used in error locations
            config: Scan configuration for the fresh scan

        Raises:
            TypeError: if ``tokens`` is a string rather than tokens
        """
        if isinstance(tokens, str):
            raise TypeError("tokens must be an iterable of Token, not str")
        self.source = source
        self.filename = filename
        self._tokens: Iterator[Token] = iter(tokens if tokens is not None else tokenize(source, config))
        self._lookahead: Optional[Token] = next(self._tokens, None)
        self._previous: Optional[Token] = None

    def peek(self) -> Optional[Token]:
        """Return the next token without consuming it."""
        return self._lookahead

    def advance(self) -> Optional[Token]:
        """Consume and return the next token."""
        token = self._lookahead
        if token is not None:
            self._previous = token
            self._lookahead = next(self._tokens, None)
        return token

    @property
    def previous(self) -> Optional[Token]:
        """The most recently consumed token."""
        return self._previous

    def is_at_end(self) -> bool:
        return self._lookahead is None

    def check(self, kind: TokenKind) -> bool:
        """Check if the next token has ``kind`` without consuming it.

        ``Kind.KEYWORD`` matches any keyword token.
        """
        token = self._lookahead
        if token is None:
            return False
        return token.kind is kind or token.tag is kind

    def match(self, kind: TokenKind) -> bool:
        """Consume the next token if it has ``kind``."""
        if self.check(kind):
            self.advance()
            return True
        return False

    def expect(self, kind: TokenKind) -> Token:
        """
        Consume the next token, which must have ``kind``.

        Raises:
            ParseError: if the next token differs or the stream is exhausted
        """
        if self.check(kind):
            return self.advance()

        token = self._lookahead
        if token is None:
            raise create_unexpected_eof_error(kind, self._end_location())
        raise create_unexpected_token_error(kind, token, locate(self.source, token.position, self.filename))

    def skip_comments(self):
        """Consume any COMMENT tokens at the front of the stream."""
        while self.match(Kind.COMMENT):
            pass

    def _end_location(self) -> SourceLocation:
        end = sum(utf8_width(c) for c in self.source)
        return locate(self.source, end, self.filename)
