"""
loxscan Lexer Package

Implements the scanner for a small C-like scripting language: a lazy,
forward-only stream of classified tokens with in-band error reporting.

Key Features:
- Maximal-munch tokenization with one character of lookahead
- Keyword recognition through a prefix decision table
- Configurable comment dialect (`//` or `#`)
- Byte-offset positions, mapped back to line/column for diagnostics
"""

from .tokens import Token, Kind, Keyword, SourceIndex, SourceLocation, locate
from .config import ScanConfig, CommentStyle
from .lexer import Lexer, tokenize, tokenize_string
from .errors import LexerError, ErrorKind, classify_error, collect_diagnostics, diagnose

__all__ = [
    "Lexer",
    "tokenize",
    "tokenize_string",
    "Token",
    "Kind",
    "Keyword",
    "SourceLocation",
    "SourceIndex",
    "locate",
    "ScanConfig",
    "CommentStyle",
    "LexerError",
    "ErrorKind",
    "classify_error",
    "collect_diagnostics",
    "diagnose",
]
