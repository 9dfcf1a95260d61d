"""
Token definitions for the loxscan lexer.

This module defines the closed vocabulary of lexical categories:
- Single-character punctuation
- Comparison operators (with their single-character fallbacks)
- Literals (numbers, strings, identifiers)
- Keywords (a nested closed set carried as the keyword variant's payload)
- Comments and errors

Tokens carry only a byte offset into the source, never a slice of it.
"""

from bisect import bisect_left, bisect_right
from enum import Enum, auto
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple, Union


class Kind(Enum):
    """
    Tag of every token the scanner can produce.

    ``KEYWORD`` is the tag of the keyword variant; the keyword itself is
    carried by the token as a ``Keyword`` member.
    """

    # ========================================================================
    # Single-character tokens
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    SEMICOLON = auto()              # ;
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SLASH = auto()                  # /
    STAR = auto()                   # *

    # ========================================================================
    # Comparison operators
    # ========================================================================
    EQUAL_EQUAL = auto()            # ==
    EQUAL = auto()                  # =
    GREATER_EQUAL = auto()          # >=
    GREATER = auto()                # >
    LESS_EQUAL = auto()             # <=
    LESS = auto()                   # <
    BANG_EQUAL = auto()             # !=
    BANG = auto()                   # !

    # ========================================================================
    # Literals
    # ========================================================================
    NUMBER = auto()                 # 42
    STRING = auto()                 # "hello"
    IDENTIFIER = auto()             # counter, x1

    KEYWORD = auto()

    COMMENT = auto()                # // to end of line (or # in that dialect)

    ERROR = auto()                  # unterminated string, unrecognized char


class Keyword(Enum):
    """Reserved words of the language, valued by their spelling."""

    # Boolean logic-related keywords
    AND = "and"
    OR = "or"
    TRUE = "true"
    FALSE = "false"
    IF = "if"
    ELSE = "else"
    FOR = "for"
    WHILE = "while"

    # Object-related keywords
    CLASS = "class"
    NIL = "nil"
    SUPER = "super"
    THIS = "this"
    VAR = "var"

    # Function-related keywords
    FUNCTION = "function"
    PRINT = "print"
    RETURN = "return"

    def __str__(self) -> str:
        return self.value


TokenKind = Union[Kind, Keyword]


@dataclass(frozen=True)
class Token:
    """
    A classified lexeme.

    ``position`` is the byte offset of the lexeme's first character in the
    scanned source; ``kind`` is either a ``Kind`` member or, for keywords,
    the ``Keyword`` member itself.
    """
    position: int
    kind: TokenKind

    def __str__(self) -> str:
        return f"{self.kind.name}@{self.position}"

    @property
    def tag(self) -> Kind:
        """The ``Kind`` tag, ``Kind.KEYWORD`` for keyword tokens."""
        if isinstance(self.kind, Keyword):
            return Kind.KEYWORD
        return self.kind

    @property
    def keyword(self) -> Optional[Keyword]:
        """The keyword payload, or None for non-keyword tokens."""
        if isinstance(self.kind, Keyword):
            return self.kind
        return None

    @property
    def is_keyword(self) -> bool:
        return isinstance(self.kind, Keyword)

    @property
    def is_literal(self) -> bool:
        return self.kind in {Kind.NUMBER, Kind.STRING}

    @property
    def is_error(self) -> bool:
        return self.kind is Kind.ERROR


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting; lines and columns are 1-based and columns
    count characters, while ``offset`` stays a byte offset.
    """
    filename: str
    line: int
    column: int
    offset: int  # Byte offset from start of source

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


# Lookup tables used by the lexer

SINGLE_CHARACTER_TOKENS: Dict[str, Kind] = {
    "(": Kind.LEFT_PAREN,
    ")": Kind.RIGHT_PAREN,
    "{": Kind.LEFT_BRACE,
    "}": Kind.RIGHT_BRACE,
    ",": Kind.COMMA,
    ".": Kind.DOT,
    ";": Kind.SEMICOLON,
    "+": Kind.PLUS,
    "-": Kind.MINUS,
    "*": Kind.STAR,
    "/": Kind.SLASH,
}

# Operator -> (kind when followed by "=", kind otherwise)
COMPARISON_OPERATORS: Dict[str, Tuple[Kind, Kind]] = {
    "=": (Kind.EQUAL_EQUAL, Kind.EQUAL),
    ">": (Kind.GREATER_EQUAL, Kind.GREATER),
    "<": (Kind.LESS_EQUAL, Kind.LESS),
    "!": (Kind.BANG_EQUAL, Kind.BANG),
}

WHITESPACE: FrozenSet[str] = frozenset(" \t\n\r")

DIGITS: FrozenSet[str] = frozenset("0123456789")


def build_candidate_table(keywords: Iterable[Keyword]) -> Dict[str, Keyword]:
    """
    Map each keyword's shortest identifying prefix to the keyword.

    A prefix identifies a keyword when no other keyword starts with it, so
    ``t`` is never a key while ``th`` and ``tr`` are.

    Raises:
        ValueError: if one keyword is a prefix of another
    """
    keywords = list(keywords)
    table: Dict[str, Keyword] = {}
    for keyword in keywords:
        word = keyword.value
        for length in range(1, len(word) + 1):
            prefix = word[:length]
            if not any(other is not keyword and other.value.startswith(prefix)
                       for other in keywords):
                table[prefix] = keyword
                break
        else:
            raise ValueError(f"Keyword {word!r} is a prefix of another keyword")
    return table


KEYWORD_CANDIDATES: Dict[str, Keyword] = build_candidate_table(Keyword)

# Prefixes that need one more character before a candidate can be chosen
AMBIGUOUS_PREFIXES: FrozenSet[str] = frozenset(
    prefix[:length]
    for prefix in KEYWORD_CANDIDATES
    for length in range(1, len(prefix))
)


def utf8_width(char: str) -> int:
    """Number of bytes ``char`` occupies when encoded as UTF-8."""
    code = ord(char)
    if code < 0x80:
        return 1
    if code < 0x800:
        return 2
    if code < 0x10000:
        return 3
    return 4


class SourceIndex:
    """
    Byte-offset lookups over one source text.

    Character start offsets and line starts are computed once, so each
    ``locate``/``char_at`` is a binary search rather than a rescan.
    """

    def __init__(self, source: str):
        self.source = source
        self._starts: List[int] = []        # byte offset of each character
        self._line_starts: List[int] = [0]  # character index of each line start
        position = 0
        for index, char in enumerate(source):
            self._starts.append(position)
            position += utf8_width(char)
            if char == "\n":
                self._line_starts.append(index + 1)
        self.size = position

    def _char_index(self, offset: int) -> Optional[int]:
        if offset == self.size:
            return len(self.source)
        index = bisect_left(self._starts, offset)
        if index == len(self._starts) or self._starts[index] != offset:
            return None
        return index

    def locate(self, offset: int, filename: str = "<string>") -> SourceLocation:
        """
        Map a byte offset to a line/column location.

        Raises:
            ValueError: if the offset is outside the source or falls inside a
                multi-byte character
        """
        index = self._char_index(offset)
        if index is None:
            raise ValueError(f"Offset {offset} is not a character boundary in the source")
        line = bisect_right(self._line_starts, index)
        column = index - self._line_starts[line - 1] + 1
        return SourceLocation(filename, line, column, offset)

    def char_at(self, offset: int) -> str:
        """
        Return the character starting at byte ``offset``.

        Raises:
            ValueError: if no character starts at that offset
        """
        index = self._char_index(offset)
        if index is None or index == len(self.source):
            raise ValueError(f"No character starts at offset {offset}")
        return self.source[index]


def locate(source: str, offset: int, filename: str = "<string>") -> SourceLocation:
    """One-off ``SourceIndex.locate``; build a SourceIndex for repeated lookups."""
    return SourceIndex(source).locate(offset, filename)


def char_at(source: str, offset: int) -> str:
    """One-off ``SourceIndex.char_at``."""
    return SourceIndex(source).char_at(offset)
