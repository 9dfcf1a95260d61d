"""
loxscan Lexer - turns source text into a lazy stream of tokens

One character of lookahead is all the scanner ever needs: the doubled
comparison operators, the `//` comment marker and the ambiguous keyword
prefixes (`t`, `f`) each peek a single character before committing.

Malformed input never raises here. Unterminated strings and unrecognized
characters come out as ERROR tokens and the consumer decides what to do.
"""

import logging
from typing import Callable, Iterator, List, Optional

from .config import DEFAULT_CONFIG, ScanConfig
from .errors import diagnose
from .tokens import (
    AMBIGUOUS_PREFIXES, COMPARISON_OPERATORS, DIGITS, KEYWORD_CANDIDATES,
    SINGLE_CHARACTER_TOKENS, WHITESPACE, Kind, Token, TokenKind, utf8_width
)

logger = logging.getLogger(__name__)


class Lexer:
    """
    loxscan lexical analyzer.

    A forward-only iterator over the tokens of ``source``. Each token is
    classified on demand from the cursor; once exhausted the lexer keeps
    signalling end of stream and cannot be restarted. Scan the same text
    again by creating a new Lexer.
    """

    def __init__(self, source: str, config: Optional[ScanConfig] = None):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            config: Scan configuration, defaults to the `//` comment dialect
        """
        self.source = source
        self.config = config or DEFAULT_CONFIG
        self._comment_marker = self.config.comment_style.value

        # Cursor: byte offset of the lookahead character, and the lookahead
        self._chars = iter(source)
        self._offset = 0
        self._lookahead: Optional[str] = next(self._chars, None)
        self._exhausted = False

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        self._next_while(lambda c: c in WHITESPACE)

        if self._lookahead is None:
            if not self._exhausted:
                self._exhausted = True
                logger.debug("Scan finished at offset %d", self._offset)
            raise StopIteration

        start = self._offset
        kind = self._classify(self._advance())
        if kind is Kind.ERROR:
            logger.debug("Error token at offset %d", start)
        return Token(start, kind)

    @property
    def exhausted(self) -> bool:
        """True once the lexer has signalled end of stream."""
        return self._exhausted

    def tokenize(self) -> List[Token]:
        """
        Drain the remaining tokens.

        Returns:
            List of tokens, with no end-of-input sentinel
        """
        return list(self)

    def _classify(self, char: str) -> TokenKind:
        """Classify the lexeme starting with the already consumed ``char``."""
        if char == self._comment_marker[0] and self._matches_rest(self._comment_marker[1:]):
            return self._comment()

        if char in SINGLE_CHARACTER_TOKENS:
            return SINGLE_CHARACTER_TOKENS[char]

        if char in COMPARISON_OPERATORS:
            doubled, single = COMPARISON_OPERATORS[char]
            return doubled if self._next_matches("=") else single

        if char == '"':
            return self._string()

        if char in DIGITS:
            return self._number()

        if char.isalpha():
            return self._identifier_or_keyword(char)

        return Kind.ERROR

    def _identifier_or_keyword(self, first: str) -> TokenKind:
        prefix = first
        candidate = KEYWORD_CANDIDATES.get(prefix)

        # Ambiguous prefixes peek one more character to pick the candidate
        while candidate is None and prefix in AMBIGUOUS_PREFIXES:
            following = self._lookahead
            if following is None:
                break
            extended = prefix + following
            if extended not in KEYWORD_CANDIDATES and extended not in AMBIGUOUS_PREFIXES:
                break
            prefix += self._advance()
            candidate = KEYWORD_CANDIDATES.get(prefix)

        if (candidate is not None
                and self._matches_rest(candidate.value[len(prefix):])
                and not self._next_is_alphanumeric()):
            return candidate

        return self._identifier()

    def _identifier(self) -> Kind:
        self._next_while(str.isalnum)
        return Kind.IDENTIFIER

    def _number(self) -> Kind:
        self._next_while(lambda c: c in DIGITS)
        return Kind.NUMBER

    def _string(self) -> Kind:
        self._next_while(lambda c: c != '"')
        if self._next_matches('"'):
            return Kind.STRING
        return Kind.ERROR

    def _comment(self) -> Kind:
        self._next_while(lambda c: c != "\n")
        return Kind.COMMENT

    # Cursor primitives

    def _advance(self) -> str:
        """Consume and return the lookahead character."""
        char = self._lookahead
        self._offset += utf8_width(char)
        self._lookahead = next(self._chars, None)
        return char

    def _next_matches(self, expected: str) -> bool:
        """Consume the lookahead if it equals ``expected``."""
        if self._lookahead == expected:
            self._advance()
            return True
        return False

    def _matches_rest(self, expected: str) -> bool:
        """Consume ``expected`` character by character, stopping at the first mismatch."""
        return all(self._next_matches(c) for c in expected)

    def _next_while(self, predicate: Callable[[str], bool]) -> None:
        while self._lookahead is not None and predicate(self._lookahead):
            self._advance()

    def _next_is_alphanumeric(self) -> bool:
        return self._lookahead is not None and self._lookahead.isalnum()


def tokenize(source: str, config: Optional[ScanConfig] = None) -> Lexer:
    """
    Start a fresh scan over ``source``.

    Returns:
        A lazy, non-restartable iterator of tokens
    """
    return Lexer(source, config)


def tokenize_string(
    source: str,
    filename: str = "<string>",
    config: Optional[ScanConfig] = None
) -> List[Token]:
    """
    Convenience function to tokenize a source string eagerly.

    Args:
        source: Source code string
        filename: Filename for error reporting
        config: Scan configuration

    Returns:
        List of tokens

    Raises:
        LexerError: for the first ERROR token in the source
    """
    tokens = Lexer(source, config).tokenize()

    for token in tokens:
        if token.is_error:
            raise diagnose(source, token, filename)

    return tokens
