"""Export Layer to GeoJSON dict (RFC 7946 layout).

Positions are written as stored; measured data keeps its measure in the
slot after Z, which GeoJSON readers will treat as extra ordinates.
"""

from __future__ import annotations

from geowkt.layers.layer import Layer, LayerFeature


def export_geojson(layer: Layer) -> dict:
    """Export a Layer to a GeoJSON FeatureCollection dict.

    Args:
        layer: The Layer to export.

    Returns:
        Dict representing a GeoJSON FeatureCollection.
    """
    return {
        "type": "FeatureCollection",
        "name": layer.name,
        "features": [_feature_to_geojson(f) for f in layer.features],
    }


def _feature_to_geojson(feature: LayerFeature) -> dict:
    """Convert a LayerFeature to a GeoJSON Feature dict."""
    return {
        "type": "Feature",
        "id": feature.feature_id,
        "geometry": feature.geometry(),
        "properties": dict(feature.properties),
    }
