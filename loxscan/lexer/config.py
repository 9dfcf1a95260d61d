"""
Scan configuration for the loxscan lexer.

The only dialect switch is the comment marker: ``//`` (the default) or ``#``.
A config is immutable and passed explicitly to each scan.

Usage:
    from loxscan.lexer import tokenize, ScanConfig, CommentStyle

    tokens = list(tokenize(source, ScanConfig(comment_style=CommentStyle.HASH)))
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict


class CommentStyle(Enum):
    """Comment-start marker, valued by its spelling."""
    SLASH_SLASH = "//"
    HASH = "#"


@dataclass(frozen=True)
class ScanConfig:
    """
    Immutable scan configuration.

    Attributes:
        comment_style: Marker that starts a comment running to end of line
    """

    comment_style: CommentStyle = CommentStyle.SLASH_SLASH

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "ScanConfig":
        """
        Create a ScanConfig from a dictionary.

        ``comment_style`` may be given as a ``CommentStyle`` member or as its
        spelling (``"//"`` or ``"#"``).

        Raises:
            ValueError: on unknown keys or an unknown comment style
        """
        known = {f.name for f in fields(cls)}
        unknown = set(config_dict) - known
        if unknown:
            raise ValueError(f"Unknown scan config keys: {', '.join(sorted(unknown))}")

        values = dict(config_dict)
        if "comment_style" in values:
            values["comment_style"] = CommentStyle(values["comment_style"])
        return cls(**values)


DEFAULT_CONFIG = ScanConfig()
