"""Keyword -> geometry constructor lookup.

A registry is any mapping from an uppercase WKT keyword (without its
dimensionality suffix) to a zero-argument callable returning a WktObject.
Hosts that need extra behaviour, such as a render() method, pass their
own mapping to the assembler; GEOMETRY_TYPES is the default.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Callable, Mapping

from loguru import logger

from geowkt.geometry import (
    GeometryCollection,
    GeometryType,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    UnknownGeometry,
    WktObject,
)

Registry = Mapping[str, Callable[[], WktObject]]

GEOMETRY_TYPES: Registry = MappingProxyType({
    GeometryType.POINT.value: Point,
    GeometryType.LINESTRING.value: LineString,
    GeometryType.POLYGON.value: Polygon,
    GeometryType.MULTIPOINT.value: MultiPoint,
    GeometryType.MULTILINESTRING.value: MultiLineString,
    GeometryType.MULTIPOLYGON.value: MultiPolygon,
    GeometryType.GEOMETRYCOLLECTION.value: GeometryCollection,
})

_DIMENSION_SUFFIX = re.compile(r"(ZM|Z|M)$")


def split_keyword(keyword: str, registry: Registry | None = None) -> tuple[str, str]:
    """Split a keyword such as "POLYGONZM" into ("POLYGON", "ZM").

    A keyword the registry knows as-is is never split.
    """
    registry = GEOMETRY_TYPES if registry is None else registry
    word = keyword.upper()
    if word in registry:
        return word, ""
    match = _DIMENSION_SUFFIX.search(word)
    if match is None or match.start() == 0:
        return word, ""
    return word[: match.start()], match.group(1)


def create_object(keyword: str, registry: Registry | None = None) -> WktObject:
    """Instantiate the geometry for a keyword, falling back to UnknownGeometry."""
    registry = GEOMETRY_TYPES if registry is None else registry
    base, tag = split_keyword(keyword, registry)

    factory = registry.get(base)
    if factory is None:
        logger.warning(f"Unknown WKT geometry type {keyword!r}, using generic object")
        obj: WktObject = UnknownGeometry(base)
    else:
        obj = factory()
        obj.keyword = base
    obj.registry = registry
    if tag:
        obj.set_dimensions(tag)
    return obj
