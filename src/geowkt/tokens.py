"""WKT tokenizer.

Scans the source text once, left to right, and produces a flat list of
tokens. Whitespace separates tokens and is otherwise dropped.

    POINT (1 2)  ->  TEXT("POINT") ( NUMBER(1.0) NUMBER(2.0) )
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from loguru import logger

from geowkt.config import settings
from geowkt.errors import LexicalError


class TokenKind(Enum):
    """Syntactic class of a WKT token."""
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    COMMA = ","
    TEXT = "text"
    NUMBER = "number"


@dataclass(frozen=True)
class Token:
    """One syntactically meaningful unit of WKT source."""
    kind: TokenKind
    value: str | float | None = None


_PUNCTUATION = {
    "(": TokenKind.LEFT_PAREN,
    ",": TokenKind.COMMA,
    ")": TokenKind.RIGHT_PAREN,
}

_WHITESPACE = frozenset(" \t\r\n")


def is_alpha(c: str) -> bool:
    """ASCII letter, either case."""
    return "a" <= c <= "z" or "A" <= c <= "Z"


def is_numeric(c: str) -> bool:
    """Digit, decimal point or minus sign.

    Runs of these are read greedily, so "-1-" is a single (malformed) number.
    """
    return "0" <= c <= "9" or c == "." or c == "-"


def tokenize(text: str, *, strict_numbers: bool | None = None) -> list[Token]:
    """Split WKT source text into tokens.

    Args:
        text: Raw WKT source.
        strict_numbers: Raise on numeric runs that do not form a number
            (e.g. "1--2"). Defaults to ``settings.strict_numbers``; when
            off such runs become ``float("nan")``.

    Returns:
        Tokens in source order.

    Raises:
        LexicalError: A character is not a letter, digit, ".", "-", "(",
            ")", "," or whitespace. Nothing is returned in that case.
    """
    if strict_numbers is None:
        strict_numbers = settings.strict_numbers

    tokens: list[Token] = []
    cursor = 0
    length = len(text)
    while cursor < length:
        c = text[cursor]
        if c in _PUNCTUATION:
            tokens.append(Token(_PUNCTUATION[c]))
            cursor += 1
        elif is_alpha(c):
            word, cursor = _scan_run(text, cursor, is_alpha)
            tokens.append(Token(TokenKind.TEXT, word))
        elif is_numeric(c):
            start = cursor
            run, cursor = _scan_run(text, cursor, is_numeric)
            tokens.append(Token(TokenKind.NUMBER, _to_number(run, start, strict_numbers)))
        elif c in _WHITESPACE:
            cursor += 1
        else:
            raise LexicalError(c, cursor)
    return tokens


def _scan_run(text: str, start: int, accept: Callable[[str], bool]) -> tuple[str, int]:
    """Consume the maximal run of accepted characters.

    Returns the run and the index of the first character after it.
    """
    end = start
    while end < len(text) and accept(text[end]):
        end += 1
    return text[start:end], end


def _to_number(run: str, position: int, strict: bool) -> float:
    try:
        return float(run)
    except ValueError:
        if strict:
            raise LexicalError(
                run[0], position, f"Malformed number {run!r} at position {position}"
            ) from None
        logger.debug(f"Malformed number {run!r} at position {position} read as NaN")
        return float("nan")
