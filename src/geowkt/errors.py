"""Exception hierarchy for WKT parsing.

WktError            -- base for everything raised by geowkt
WktSyntaxError      -- input text cannot be turned into geometries
LexicalError        -- a character outside the WKT alphabet
MalformedNestingError -- parentheses, tuple arity or token placement
"""

from __future__ import annotations


class WktError(Exception):
    """Base class for geowkt errors."""


class WktSyntaxError(WktError, ValueError):
    """Raised when WKT source text is not well formed."""


class LexicalError(WktSyntaxError):
    """Raised when the tokenizer meets a character it cannot classify."""

    def __init__(self, char: str, position: int, message: str | None = None) -> None:
        self.char = char
        self.position = position
        super().__init__(message or f"Invalid character {char!r} at position {position}")


class MalformedNestingError(WktSyntaxError):
    """Raised on unbalanced parentheses or tuples of the wrong arity."""
