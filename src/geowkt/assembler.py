"""Turn a token sequence into geometry objects.

The assembler keeps one "current" object. A keyword token seen while there
is no current object (or the current one is finished) starts a new object;
every other token is handed to the current object until it finishes.
"""

from __future__ import annotations

from typing import Iterable

from loguru import logger

from geowkt.errors import MalformedNestingError, WktSyntaxError
from geowkt.geometry import WktObject
from geowkt.registry import Registry, create_object
from geowkt.tokens import Token, TokenKind, tokenize


def assemble(tokens: Iterable[Token], registry: Registry | None = None) -> list[WktObject]:
    """Build geometry objects from tokens.

    Args:
        tokens: Output of tokenize().
        registry: Keyword -> constructor mapping (default GEOMETRY_TYPES).

    Returns:
        Finished objects in source order.

    Raises:
        MalformedNestingError: A geometry does not start with a keyword,
            its tokens are misplaced, or the input ends inside it.
    """
    objects: list[WktObject] = []
    current: WktObject | None = None

    for token in tokens:
        if current is None or current.finished:
            if token.kind is not TokenKind.TEXT:
                raise MalformedNestingError(
                    f"Expected a geometry keyword, got {token.kind.name}"
                )
            current = create_object(str(token.value), registry)
            logger.debug(f"New {current.keyword or 'unknown'} object")
            objects.append(current)
        else:
            current.handle_token(token)

    if current is not None and not current.finished:
        raise MalformedNestingError(f"Unexpected end of input inside {current.keyword}")
    return objects


def parse(
    text: str,
    registry: Registry | None = None,
    *,
    strict_numbers: bool | None = None,
) -> list[WktObject]:
    """Parse WKT source text into geometry objects."""
    return assemble(tokenize(text, strict_numbers=strict_numbers), registry)


def loads(
    text: str,
    registry: Registry | None = None,
    *,
    strict_numbers: bool | None = None,
) -> WktObject:
    """Parse text holding exactly one geometry."""
    objects = parse(text, registry, strict_numbers=strict_numbers)
    if len(objects) != 1:
        raise WktSyntaxError(f"Expected one geometry, found {len(objects)}")
    return objects[0]
