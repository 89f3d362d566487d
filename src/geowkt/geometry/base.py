"""Base classes for WKT geometry objects.

GeometryType    -- closed set of supported WKT geometry kinds
Renderable      -- capability a host attaches to draw a finished geometry
WktObject       -- token-driven accumulator every geometry kind subclasses
UnknownGeometry -- fallback for keywords missing from the registry

A WktObject is fed one token at a time through handle_token(). It tracks
parenthesis depth explicitly; each kind declares the depths at which
numbers may appear (tuple depths) and how deep it may nest. A comma at a
tuple depth separates coordinates, a comma above it separates parts.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Mapping, Protocol, runtime_checkable

from geowkt.errors import MalformedNestingError
from geowkt.tokens import Token, TokenKind

DIMENSION_TAGS = ("", "Z", "M", "ZM")


class GeometryType(Enum):
    """WKT geometry keywords understood by the parser."""
    POINT = "POINT"
    LINESTRING = "LINESTRING"
    POLYGON = "POLYGON"
    MULTIPOINT = "MULTIPOINT"
    MULTILINESTRING = "MULTILINESTRING"
    MULTIPOLYGON = "MULTIPOLYGON"
    GEOMETRYCOLLECTION = "GEOMETRYCOLLECTION"


@runtime_checkable
class Renderable(Protocol):
    """Drawing capability supplied by a rendering layer, never by the parser."""

    def render(self, context: Any) -> None:
        ...


class WktObject:
    """Abstract geometry built incrementally from WKT tokens.

    Subclasses set the ClassVar fields describing their nesting shape and
    may override the _on_* transitions or the _add_coordinate and
    _separate_parts hooks.
    """

    geometry_type: ClassVar[GeometryType | None] = None
    geojson_type: ClassVar[str | None] = None

    # Depths at which NUMBER tokens are legal
    tuple_depths: ClassVar[frozenset[int]] = frozenset({1})
    # Deepest parenthesis level allowed; None for unlimited
    max_depth: ClassVar[int | None] = 1

    _TRANSITIONS: ClassVar[dict[TokenKind, str]] = {
        TokenKind.LEFT_PAREN: "_on_left_paren",
        TokenKind.RIGHT_PAREN: "_on_right_paren",
        TokenKind.COMMA: "_on_comma",
        TokenKind.NUMBER: "_on_number",
        TokenKind.TEXT: "_on_text",
    }

    def __init__(self) -> None:
        self.keyword = self.geometry_type.value if self.geometry_type else ""
        self.is_3d = False
        self.is_measured = False
        self.is_empty = False
        self.coordinates: list = []
        # Registry this object was created from; collections resolve
        # nested keywords through it.
        self.registry: Mapping[str, Any] | None = None
        self._depth = 0
        self._opened = False
        self._finished = False
        self._pending: list[float] = []

    def __repr__(self) -> str:
        tag = f" {self.dimensions}" if self.dimensions else ""
        state = "finished" if self._finished else f"open depth={self._depth}"
        return f"<{type(self).__name__} {self.keyword}{tag} {state}>"

    # ------------------------------------------------------------------
    # Dimensionality
    # ------------------------------------------------------------------

    @property
    def dimensions(self) -> str:
        """Dimensionality tag: "", "Z", "M" or "ZM"."""
        return ("Z" if self.is_3d else "") + ("M" if self.is_measured else "")

    @property
    def arity(self) -> int:
        """Number of values in one coordinate tuple."""
        return 2 + int(self.is_3d) + int(self.is_measured)

    def set_dimensions(self, tag: str) -> None:
        """Apply a Z / M / ZM tag (case-insensitive, "" clears it)."""
        tag = tag.upper()
        if tag not in DIMENSION_TAGS:
            raise MalformedNestingError(
                f"Invalid dimensionality tag {tag!r} for {self.keyword or 'geometry'}"
            )
        if self._pending or self._has_coordinates():
            raise MalformedNestingError(
                f"Dimensionality of {self.keyword} changed after coordinates were read"
            )
        self.is_3d = "Z" in tag
        self.is_measured = "M" in tag

    # ------------------------------------------------------------------
    # Token handling
    # ------------------------------------------------------------------

    @property
    def finished(self) -> bool:
        """True once the opening parenthesis is balanced (or after EMPTY)."""
        return self._finished

    def handle_token(self, token: Token) -> None:
        """Advance the state machine by one token.

        Raises:
            MalformedNestingError: The token is not legal here (unbalanced
                parentheses, wrong tuple arity, tokens after the end).
        """
        if self._finished:
            raise MalformedNestingError(
                f"{self.keyword or 'Geometry'} is already complete; "
                f"unexpected {token.kind.name}"
            )
        getattr(self, self._TRANSITIONS[token.kind])(token)

    def _on_left_paren(self, token: Token) -> None:
        if self.max_depth is not None and self._depth >= self.max_depth:
            raise MalformedNestingError(
                f"{self.keyword} nests deeper than {self.max_depth} level(s)"
            )
        self._depth += 1
        self._opened = True

    def _on_right_paren(self, token: Token) -> None:
        self._check_pending()
        if self._depth == 0:
            raise MalformedNestingError(f"Unbalanced ')' in {self.keyword}")
        self._depth -= 1
        if self._depth == 0:
            self._finished = True

    def _on_comma(self, token: Token) -> None:
        self._check_pending()
        if self._depth == 0:
            raise MalformedNestingError(f"Comma outside parentheses in {self.keyword}")
        if not self._accepts_numbers_at(self._depth):
            self._separate_parts(self._depth)

    def _on_number(self, token: Token) -> None:
        if not self._accepts_numbers_at(self._depth):
            raise MalformedNestingError(
                f"Number {token.value} at nesting depth {self._depth} in {self.keyword}"
            )
        self._pending.append(token.value)
        if len(self._pending) == self.arity:
            self._add_coordinate(tuple(self._pending))
            self._pending = []

    def _on_text(self, token: Token) -> None:
        if self._opened:
            raise MalformedNestingError(
                f"Unexpected keyword {token.value!r} inside {self.keyword}"
            )
        word = str(token.value).upper()
        if word == "EMPTY":
            self.is_empty = True
            self._finished = True
        else:
            self.set_dimensions(word)

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def _accepts_numbers_at(self, depth: int) -> bool:
        return depth in self.tuple_depths

    def _add_coordinate(self, coordinate: tuple[float, ...]) -> None:
        self.coordinates.append(coordinate)

    def _separate_parts(self, depth: int) -> None:
        raise MalformedNestingError(
            f"Unexpected comma at nesting depth {depth} in {self.keyword}"
        )

    def _has_coordinates(self) -> bool:
        return bool(self.coordinates)

    def _check_pending(self) -> None:
        if self._pending:
            raise MalformedNestingError(
                f"{self.keyword} coordinate {self._pending} has "
                f"{len(self._pending)} value(s), expected {self.arity}"
            )

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def geojson_coordinates(self) -> list:
        """Coordinates as nested lists in GeoJSON layout."""
        return [list(c) for c in self.coordinates]

    def to_geojson(self) -> dict | None:
        """GeoJSON geometry dict, or None when the kind has no GeoJSON form."""
        if self.geojson_type is None:
            return None
        return {"type": self.geojson_type, "coordinates": self.geojson_coordinates()}


class UnknownGeometry(WktObject):
    """Fallback for unregistered keywords.

    Collects every coordinate tuple it sees as a flat list, at any depth,
    and ignores nested keywords.
    """

    max_depth = None

    def __init__(self, keyword: str = "") -> None:
        super().__init__()
        self.keyword = keyword

    def _accepts_numbers_at(self, depth: int) -> bool:
        return depth > 0

    def _on_text(self, token: Token) -> None:
        if not self._opened:
            super()._on_text(token)
