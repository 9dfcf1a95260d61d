"""
loxscan Parser Package

Holds the parser-facing side of the scanner: a token stream with
consume-next and peek, and the errors raised when it does not hold what
the parser expects. No syntax tree is built here.
"""

from .stream import TokenStream
from .errors import ParseError

__all__ = [
    "TokenStream",
    "ParseError",
]
