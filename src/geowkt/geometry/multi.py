"""Geometries made of nested sub-geometries.

A MultiGeometry owns the outermost pair of parentheses. Every part opened
inside it is a child WktObject that receives all tokens until it reports
itself finished; commas between parts are handled by the parent.
"""

from __future__ import annotations

from geowkt.errors import MalformedNestingError
from geowkt.geometry.base import GeometryType, WktObject
from geowkt.geometry.polygon import Polygon
from geowkt.geometry.simple import LineString
from geowkt.tokens import Token


class MultiGeometry(WktObject):
    """Base for geometries whose ``coordinates`` are child objects."""

    max_depth = 1
    tuple_depths = frozenset()

    def __init__(self) -> None:
        super().__init__()
        self._active: WktObject | None = None
        self._expect_part = True

    @property
    def parts(self) -> list[WktObject]:
        return self.coordinates

    def handle_token(self, token: Token) -> None:
        if self._active is not None:
            self._active.handle_token(token)
            if self._active.finished:
                self._active = None
            return
        super().handle_token(token)

    def _on_left_paren(self, token: Token) -> None:
        if self._depth == 0:
            super()._on_left_paren(token)
            return
        self._start_part(self._new_paren_part(), token)

    def _on_right_paren(self, token: Token) -> None:
        if self._depth == 1 and self._expect_part and self.coordinates:
            raise MalformedNestingError(f"Missing part after ',' in {self.keyword}")
        super()._on_right_paren(token)

    def _on_comma(self, token: Token) -> None:
        if self._depth == 0:
            raise MalformedNestingError(f"Comma outside parentheses in {self.keyword}")
        if self._expect_part:
            raise MalformedNestingError(f"Empty part in {self.keyword}")
        self._expect_part = True

    def _on_text(self, token: Token) -> None:
        if not self._opened:
            super()._on_text(token)
            return
        self._start_part(self._new_text_part(str(token.value)), token)

    def _start_part(self, part: WktObject, token: Token) -> None:
        if not self._expect_part:
            raise MalformedNestingError(f"Missing ',' between parts of {self.keyword}")
        self._expect_part = False
        self.coordinates.append(part)
        part.handle_token(token)
        if not part.finished:
            self._active = part

    def _new_paren_part(self) -> WktObject:
        raise MalformedNestingError(f"Unexpected '(' inside {self.keyword}")

    def _new_text_part(self, word: str) -> WktObject:
        if word.upper() != "EMPTY":
            raise MalformedNestingError(f"Unexpected keyword {word!r} inside {self.keyword}")
        return self._new_paren_part()

    def _inherit_dimensions(self, part: WktObject) -> WktObject:
        part.set_dimensions(self.dimensions)
        return part

    def geojson_coordinates(self) -> list:
        return [part.geojson_coordinates() for part in self.coordinates]


class MultiLineString(MultiGeometry):
    """MULTILINESTRING ((x y, ...), (x y, ...))"""

    geometry_type = GeometryType.MULTILINESTRING
    geojson_type = "MultiLineString"

    def _new_paren_part(self) -> WktObject:
        return self._inherit_dimensions(LineString())


class MultiPolygon(MultiGeometry):
    """MULTIPOLYGON (((x y, ...)), ((x y, ...), (x y, ...)))"""

    geometry_type = GeometryType.MULTIPOLYGON
    geojson_type = "MultiPolygon"

    def _new_paren_part(self) -> WktObject:
        return self._inherit_dimensions(Polygon())


class GeometryCollection(MultiGeometry):
    """GEOMETRYCOLLECTION (POINT (x y), LINESTRING (...), ...)

    Members are created from their keywords through the same registry as
    the collection. A member without its own tag takes the collection's.
    """

    geometry_type = GeometryType.GEOMETRYCOLLECTION
    geojson_type = "GeometryCollection"

    @property
    def geometries(self) -> list[WktObject]:
        return self.coordinates

    def _new_text_part(self, word: str) -> WktObject:
        from geowkt.registry import create_object

        part = create_object(word, self.registry)
        if not part.dimensions:
            part.set_dimensions(self.dimensions)
        return part

    def _start_part(self, part: WktObject, token: Token) -> None:
        if not self._expect_part:
            raise MalformedNestingError(f"Missing ',' between parts of {self.keyword}")
        # The keyword token created the member; it is not fed to it.
        self._expect_part = False
        self.coordinates.append(part)
        self._active = part

    def geojson_coordinates(self) -> list:
        return [g for g in (part.to_geojson() for part in self.coordinates) if g is not None]

    def to_geojson(self) -> dict:
        return {"type": self.geojson_type, "geometries": self.geojson_coordinates()}
