"""Geometries whose coordinates form one flat tuple list."""

from __future__ import annotations

from geowkt.errors import MalformedNestingError
from geowkt.geometry.base import GeometryType, WktObject


class Point(WktObject):
    """POINT (x y) -- exactly one coordinate."""

    geometry_type = GeometryType.POINT
    geojson_type = "Point"

    def _add_coordinate(self, coordinate: tuple[float, ...]) -> None:
        if self.coordinates:
            raise MalformedNestingError("POINT takes a single coordinate")
        super()._add_coordinate(coordinate)

    def geojson_coordinates(self) -> list:
        return list(self.coordinates[0]) if self.coordinates else []


class LineString(WktObject):
    """LINESTRING (x y, x y, ...)"""

    geometry_type = GeometryType.LINESTRING
    geojson_type = "LineString"


class MultiPoint(WktObject):
    """MULTIPOINT (x y, x y) or MULTIPOINT ((x y), (x y)).

    Both spellings give the same flat list of point coordinates.
    """

    geometry_type = GeometryType.MULTIPOINT
    geojson_type = "MultiPoint"
    tuple_depths = frozenset({1, 2})
    max_depth = 2
