"""Parse WKT text to Layer.

Each top-level geometry in the text becomes one feature. Geometries with
an unregistered keyword have no GeoJSON form and are skipped.
"""

from __future__ import annotations

import uuid

from loguru import logger

from geowkt.assembler import parse
from geowkt.errors import WktSyntaxError
from geowkt.geometry import WktObject
from geowkt.layers.layer import Layer, LayerFeature


def parse_wkt(wkt_string: str, name: str = "") -> Layer:
    """Parse a WKT string into a Layer.

    Args:
        wkt_string: Raw WKT content, one or more geometries.
        name: Display name for the layer.

    Returns:
        Layer with parsed features. Returns empty layer on syntax errors.
    """
    try:
        objects = parse(wkt_string)
    except WktSyntaxError as e:
        logger.warning(f"WKT parse failed: {e}")
        return Layer(
            layer_id=f"layer-{uuid.uuid4().hex[:8]}",
            name=name,
            source_format="wkt",
            features=[],
            metadata={"error": str(e)},
        )
    return layer_from_objects(objects, name)


def layer_from_objects(objects: list[WktObject], name: str = "") -> Layer:
    """Wrap already-parsed geometries in a Layer."""
    features: list[LayerFeature] = []
    skipped = 0
    for idx, obj in enumerate(objects):
        feature = _object_to_feature(obj, idx)
        if feature is None:
            skipped += 1
            continue
        features.append(feature)

    if skipped:
        logger.warning(f"Skipped {skipped} geometry(ies) of unknown type")

    return Layer(
        layer_id=f"layer-{uuid.uuid4().hex[:8]}",
        name=name,
        source_format="wkt",
        features=features,
        metadata={"skipped": skipped},
    )


def _object_to_feature(obj: WktObject, idx: int) -> LayerFeature | None:
    """Convert one parsed geometry into a LayerFeature."""
    geometry = obj.to_geojson()
    if geometry is None:
        return None

    if geometry["type"] == "GeometryCollection":
        coordinates = geometry["geometries"]
    else:
        coordinates = geometry["coordinates"]

    return LayerFeature(
        feature_id=f"wkt-{idx}",
        geometry_type=geometry["type"],
        coordinates=coordinates,
        properties={"wkt_type": obj.keyword},
        dimensions=obj.dimensions,
    )
