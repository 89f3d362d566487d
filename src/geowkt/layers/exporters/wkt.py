"""Export Layer to WKT text, one geometry per line."""

from __future__ import annotations

from geowkt.layers.layer import Layer
from geowkt.writer import dumps_geojson


def export_wkt(layer: Layer) -> str:
    """Export a Layer to WKT.

    Args:
        layer: The Layer to export.

    Returns:
        Newline-separated WKT geometries, in feature order.
    """
    lines = [
        dumps_geojson(feature.geometry(), feature.dimensions or None)
        for feature in layer.features
    ]
    return "\n".join(lines)
