"""Write geometries back to WKT text.

Works from the GeoJSON geometry layout, so both parsed WktObjects and
GeoJSON dicts (from layers imported as GeoJSON) go through one path.
Collection members are written one by one so each keeps its own tag.

    dumps(loads("polygonz((0 0 1,1 0 1,1 1 1,0 0 1))"))
    -> "POLYGON Z ((0 0 1, 1 0 1, 1 1 1, 0 0 1))"
"""

from __future__ import annotations

from decimal import Decimal

from geowkt.errors import WktError
from geowkt.geometry import GeometryCollection, GeometryType, WktObject

_KEYWORDS = {
    "Point": GeometryType.POINT.value,
    "LineString": GeometryType.LINESTRING.value,
    "Polygon": GeometryType.POLYGON.value,
    "MultiPoint": GeometryType.MULTIPOINT.value,
    "MultiLineString": GeometryType.MULTILINESTRING.value,
    "MultiPolygon": GeometryType.MULTIPOLYGON.value,
    "GeometryCollection": GeometryType.GEOMETRYCOLLECTION.value,
}

# How many list levels sit above a single position
_POSITION_DEPTH = {
    "Point": 0,
    "LineString": 1,
    "MultiPoint": 1,
    "Polygon": 2,
    "MultiLineString": 2,
    "MultiPolygon": 3,
}

_TAG_BY_SIZE = {3: "Z", 4: "ZM"}


def dumps(obj: WktObject) -> str:
    """Serialize a parsed geometry to WKT.

    Members of a GEOMETRYCOLLECTION with no GeoJSON form (unknown
    keywords) are left out, as in to_geojson().
    """
    if isinstance(obj, GeometryCollection):
        members = [m for m in obj.geometries if m.to_geojson() is not None]
        body = ", ".join(dumps(m) for m in members)
        return _wrap(_KEYWORDS["GeometryCollection"], obj.dimensions, body)
    geometry = obj.to_geojson()
    if geometry is None:
        raise WktError(f"Cannot write geometry of unknown type {obj.keyword!r}")
    return dumps_geojson(geometry, obj.dimensions)


def dumps_geojson(geometry: dict, dimensions: str | None = None) -> str:
    """Serialize a GeoJSON geometry dict to WKT.

    Args:
        geometry: Dict with "type" and "coordinates" (or "geometries").
        dimensions: "", "Z", "M" or "ZM". Inferred from the first position
            when None (3 values -> Z, 4 -> ZM). For a collection an empty
            tag leaves each member to infer its own.
    """
    geom_type = geometry.get("type", "")
    keyword = _KEYWORDS.get(geom_type)
    if keyword is None:
        raise WktError(f"Unsupported geometry type: {geom_type!r}")

    if dimensions is None:
        dimensions = _infer_dimensions(geometry)
    if geom_type == "GeometryCollection":
        members = geometry.get("geometries") or []
        body = ", ".join(dumps_geojson(m, dimensions or None) for m in members)
    else:
        coordinates = geometry.get("coordinates") or []
        body = _format_coordinates(coordinates, _POSITION_DEPTH[geom_type])
    return _wrap(keyword, dimensions, body)


def format_number(value: float) -> str:
    """Shortest round-tripping text in positional notation.

    Integral floats lose the ".0"; exponents are expanded since the
    tokenizer reads "e" as a keyword.
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return f"{Decimal(repr(value)):f}"


def _wrap(keyword: str, dimensions: str, body: str) -> str:
    tag = f" {dimensions}" if dimensions else ""
    if not body:
        return f"{keyword}{tag} EMPTY"
    return f"{keyword}{tag} ({body})"


def _format_coordinates(coordinates: list, depth: int) -> str:
    if depth == 0:
        return " ".join(format_number(v) for v in coordinates)
    if depth == 1:
        return ", ".join(_format_coordinates(c, 0) for c in coordinates)
    return ", ".join(
        f"({_format_coordinates(part, depth - 1)})" if part else "EMPTY"
        for part in coordinates
    )


def _infer_dimensions(geometry: dict) -> str:
    if geometry.get("type") == "GeometryCollection":
        for member in geometry.get("geometries") or []:
            tag = _infer_dimensions(member)
            if tag:
                return tag
        return ""
    node = geometry.get("coordinates")
    while isinstance(node, list) and node:
        if not isinstance(node[0], list):
            return _TAG_BY_SIZE.get(len(node), "")
        node = node[0]
    return ""
