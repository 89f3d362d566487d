"""POLYGON: an exterior ring followed by optional interior rings (holes).

Rings accumulate in ``coordinates``. A comma between rings moves the ring
just read into ``outer_boundary`` (the first time) or ``inner_boundaries``,
so once finished ``coordinates`` holds the last ring:

    POLYGON ((a), (b), (c))  ->  outer_boundary=a, inner_boundaries=[b], coordinates=c
    POLYGON ((a))            ->  outer_boundary=None, coordinates=a
"""

from __future__ import annotations

from geowkt.errors import MalformedNestingError
from geowkt.geometry.base import GeometryType, WktObject
from geowkt.tokens import Token

Ring = list[tuple[float, ...]]


class Polygon(WktObject):
    """POLYGON ((x y, ...), (x y, ...))"""

    geometry_type = GeometryType.POLYGON
    geojson_type = "Polygon"
    tuple_depths = frozenset({2})
    max_depth = 2

    def __init__(self) -> None:
        super().__init__()
        self.outer_boundary: Ring | None = None
        self.inner_boundaries: list[Ring] = []
        # A ring was closed and no ',' has followed it yet
        self._ring_closed = False
        # A ',' was read and no ring has followed it yet
        self._expect_ring = False

    def _on_left_paren(self, token: Token) -> None:
        if self._depth == 1:
            if self._ring_closed:
                raise MalformedNestingError("Missing ',' between POLYGON rings")
            self._expect_ring = False
        super()._on_left_paren(token)

    def _on_right_paren(self, token: Token) -> None:
        self._check_pending()
        if self._depth == 2 and not self.coordinates:
            raise MalformedNestingError("POLYGON ring has no coordinates")
        if self._depth == 1 and self._expect_ring:
            raise MalformedNestingError("Missing ring after ',' in POLYGON")
        super()._on_right_paren(token)
        if self._depth == 1:
            self._ring_closed = True

    def _separate_parts(self, depth: int) -> None:
        if not self.coordinates:
            raise MalformedNestingError("POLYGON ring has no coordinates")
        if self.outer_boundary is None:
            self.outer_boundary = list(self.coordinates)
        else:
            self.inner_boundaries.append(list(self.coordinates))
        self.coordinates = []
        self._ring_closed = False
        self._expect_ring = True

    def _has_coordinates(self) -> bool:
        return bool(self.coordinates) or self.outer_boundary is not None

    @property
    def rings(self) -> list[Ring]:
        """All rings in source order, exterior first."""
        if self.outer_boundary is None:
            return [self.coordinates] if self.coordinates else []
        return [self.outer_boundary, *self.inner_boundaries, self.coordinates]

    @property
    def exterior(self) -> Ring:
        rings = self.rings
        return rings[0] if rings else []

    @property
    def interiors(self) -> list[Ring]:
        return self.rings[1:]

    def geojson_coordinates(self) -> list:
        return [[list(c) for c in ring] for ring in self.rings]
