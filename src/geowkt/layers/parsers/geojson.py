"""Parse GeoJSON (RFC 7946) to Layer using stdlib json.

Handles FeatureCollection, Feature and bare geometry objects, with all
seven geometry types. Passes through properties dict.
"""

from __future__ import annotations

import json
import uuid

from loguru import logger

from geowkt.layers.layer import Layer, LayerFeature

GEOMETRY_TYPES = (
    "Point",
    "LineString",
    "Polygon",
    "MultiPoint",
    "MultiLineString",
    "MultiPolygon",
    "GeometryCollection",
)


def parse_geojson(geojson_string: str, name: str = "") -> Layer:
    """Parse a GeoJSON string into a Layer.

    Args:
        geojson_string: Raw GeoJSON content (string).
        name: Display name, used when the document carries none.

    Returns:
        Layer with parsed features. Returns empty layer on parse errors.
    """
    try:
        data = json.loads(geojson_string)
    except (json.JSONDecodeError, TypeError) as e:
        logger.warning(f"GeoJSON parse failed: {e}")
        return Layer(
            layer_id=f"layer-{uuid.uuid4().hex[:8]}",
            name=name,
            source_format="geojson",
            features=[],
        )
    if not isinstance(data, dict):
        data = {}

    raw_features: list = []
    if data.get("type") == "FeatureCollection":
        raw_features = data.get("features", [])
    elif data.get("type") == "Feature":
        raw_features = [data]
    elif data.get("type") in GEOMETRY_TYPES:
        raw_features = [{"type": "Feature", "geometry": data, "properties": {}}]

    features: list[LayerFeature] = []
    for idx, raw in enumerate(raw_features):
        feature = _parse_feature(raw, idx)
        if feature is not None:
            features.append(feature)

    return Layer(
        layer_id=f"layer-{uuid.uuid4().hex[:8]}",
        name=data.get("name", "") or name,
        source_format="geojson",
        features=features,
    )


def _parse_feature(raw: dict, idx: int) -> LayerFeature | None:
    """Parse a single GeoJSON Feature dict into a LayerFeature."""
    if not isinstance(raw, dict):
        return None

    geometry = raw.get("geometry")
    if not isinstance(geometry, dict):
        return None

    geom_type = geometry.get("type", "")
    if geom_type == "GeometryCollection":
        coordinates = geometry.get("geometries")
    else:
        coordinates = geometry.get("coordinates")

    if geom_type not in GEOMETRY_TYPES or coordinates is None:
        logger.debug(f"Skipping GeoJSON feature {idx} with geometry type {geom_type!r}")
        return None

    properties = raw.get("properties") or {}
    if not isinstance(properties, dict):
        properties = {}

    feature_id = raw.get("id", f"geojson-{idx}")
    if not isinstance(feature_id, str):
        feature_id = str(feature_id)

    return LayerFeature(
        feature_id=feature_id,
        geometry_type=geom_type,
        coordinates=coordinates,
        properties=properties,
    )
