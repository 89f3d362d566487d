"""Geometry object family produced by the WKT assembler."""

from geowkt.geometry.base import (
    DIMENSION_TAGS,
    GeometryType,
    Renderable,
    UnknownGeometry,
    WktObject,
)
from geowkt.geometry.multi import (
    GeometryCollection,
    MultiGeometry,
    MultiLineString,
    MultiPolygon,
)
from geowkt.geometry.polygon import Polygon
from geowkt.geometry.simple import LineString, MultiPoint, Point

__all__ = [
    "DIMENSION_TAGS",
    "GeometryCollection",
    "GeometryType",
    "LineString",
    "MultiGeometry",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
    "Renderable",
    "UnknownGeometry",
    "WktObject",
]
