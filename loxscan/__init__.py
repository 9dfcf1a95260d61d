"""
loxscan

Scanner for a small C-like scripting language, plus the token stream a
parser drives it through.

Architecture:
    loxscan/
    ├── lexer/           # Tokenization, configuration and diagnostics
    └── parser/          # Token stream consumed by a parser

License: MIT
"""

from ._version import __version__

__license__ = "MIT"

from .lexer import Lexer, ScanConfig, tokenize
from .parser import TokenStream

__all__ = [
    # Core classes
    "Lexer",
    "ScanConfig",
    "TokenStream",
    "tokenize",

    # Version info
    "__version__",
    "__license__",
]
