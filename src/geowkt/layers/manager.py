"""LayerManager -- registry of imported geometry layers.

Manages the lifecycle of Layer objects: add, remove, get, list,
import from text or file, export to format, and visibility control.
"""

from __future__ import annotations

import json
import os
import uuid
from datetime import datetime, timezone

from loguru import logger

from geowkt.layers.layer import Layer

_FORMAT_BY_EXTENSION = {
    ".wkt": "wkt",
    ".txt": "wkt",
    ".geojson": "geojson",
    ".json": "geojson",
}


class LayerManager:
    """Registry of imported layers."""

    def __init__(self) -> None:
        self._layers: dict[str, Layer] = {}

    def add_layer(self, layer: Layer) -> str:
        """Add a layer to the registry.

        Returns:
            The layer_id of the added layer.
        """
        self._layers[layer.layer_id] = layer
        return layer.layer_id

    def remove_layer(self, layer_id: str) -> bool:
        """Remove a layer; False if it didn't exist."""
        if layer_id in self._layers:
            del self._layers[layer_id]
            return True
        return False

    def get_layer(self, layer_id: str) -> Layer | None:
        return self._layers.get(layer_id)

    def list_layers(self) -> list[Layer]:
        return list(self._layers.values())

    def set_visibility(self, layer_id: str, visible: bool) -> None:
        """Set the visibility of a layer.

        Raises:
            KeyError: If the layer_id is not found.
        """
        layer = self._layers.get(layer_id)
        if layer is None:
            raise KeyError(f"Layer not found: {layer_id}")
        layer.visible = visible

    def import_text(self, content: str, format: str = "wkt", name: str = "") -> Layer:
        """Parse content into a new registered layer.

        Args:
            content: WKT or GeoJSON text.
            format: "wkt" or "geojson".
            name: Display name for the layer.

        Returns:
            The imported Layer (also registered in the manager).
        """
        layer = self._parse_content(content, format, name)

        now = datetime.now(timezone.utc).isoformat()
        layer.created_at = now
        layer.updated_at = now

        self.add_layer(layer)
        logger.info(
            f"Imported {format} layer {layer.layer_id} with {len(layer.features)} feature(s)"
        )
        return layer

    def import_file(self, path: str, format: str = "auto") -> Layer:
        """Import a file into a new layer.

        Args:
            path: Path to the file to import.
            format: "wkt", "geojson", or "auto" to detect from the extension
                (unknown extensions are read as WKT).

        Returns:
            The imported Layer (also registered in the manager).
        """
        if format == "auto":
            ext = os.path.splitext(path)[1].lower()
            format = _FORMAT_BY_EXTENSION.get(ext, "wkt")

        with open(path, "r", encoding="utf-8") as f:
            content = f.read()

        name = os.path.splitext(os.path.basename(path))[0]
        return self.import_text(content, format, name)

    def export_layer(self, layer_id: str, format: str) -> str:
        """Export a layer to a string in the given format.

        Args:
            layer_id: ID of the layer to export.
            format: Output format ("wkt" or "geojson").

        Raises:
            KeyError: If the layer_id is not found.
            ValueError: If the format is not supported.
        """
        layer = self._layers.get(layer_id)
        if layer is None:
            raise KeyError(f"Layer not found: {layer_id}")

        if format == "geojson":
            from geowkt.layers.exporters.geojson import export_geojson
            return json.dumps(export_geojson(layer))
        elif format == "wkt":
            from geowkt.layers.exporters.wkt import export_wkt
            return export_wkt(layer)
        else:
            raise ValueError(f"Unsupported export format: {format}")

    def _parse_content(self, content: str, format: str, name: str) -> Layer:
        """Parse content string into a Layer using the appropriate parser."""
        if format == "wkt":
            from geowkt.layers.parsers.wkt import parse_wkt
            layer = parse_wkt(content, name)
        elif format == "geojson":
            from geowkt.layers.parsers.geojson import parse_geojson
            layer = parse_geojson(content, name)
        else:
            raise ValueError(f"Unsupported import format: {format}")

        if not layer.layer_id:
            layer.layer_id = f"layer-{uuid.uuid4().hex[:8]}"
        return layer
