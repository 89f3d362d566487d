"""Layer and LayerFeature dataclasses for imported geometries.

Coordinates are stored in GeoJSON layout: a position is [x, y], [x, y, z]
or, for measured data, [x, y, m] / [x, y, z, m].
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class LayerFeature:
    """A single geometry within a layer.

    Attributes:
        feature_id: Unique identifier for this feature.
        geometry_type: GeoJSON type name ("Point", "MultiPolygon",
            "GeometryCollection", ...).
        coordinates: GeoJSON-style coordinate arrays. For a
            GeometryCollection, the list of member geometry dicts.
            Point: [x, y]
            Polygon: [[[x, y], ...], ...]  (list of rings, exterior first)
            MultiPolygon: [polygon, polygon, ...]
        properties: Arbitrary key-value metadata.
        dimensions: WKT dimensionality tag ("", "Z", "M", "ZM"); keeps
            measured data distinguishable from elevation.
    """

    feature_id: str
    geometry_type: str
    coordinates: list
    properties: dict
    dimensions: str = ""

    def geometry(self) -> dict:
        """GeoJSON geometry dict for this feature."""
        if self.geometry_type == "GeometryCollection":
            return {"type": self.geometry_type, "geometries": self.coordinates}
        return {"type": self.geometry_type, "coordinates": self.coordinates}


@dataclass
class Layer:
    """A named collection of features.

    Attributes:
        layer_id: Unique identifier for this layer.
        name: Human-readable display name.
        source_format: Original format ("wkt" or "geojson").
        features: List of LayerFeature instances.
        visible: Whether the layer is currently shown.
        metadata: Arbitrary key-value metadata about the layer.
        created_at: ISO8601 creation timestamp.
        updated_at: ISO8601 last-update timestamp.
    """

    layer_id: str
    name: str
    source_format: str
    features: list[LayerFeature]
    visible: bool = True
    metadata: dict = field(default_factory=dict)
    created_at: str = ""
    updated_at: str = ""
