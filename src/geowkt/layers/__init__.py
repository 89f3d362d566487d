"""Layer system -- import/export WKT and GeoJSON geometries.

Parsing goes through geowkt.parse; exports write GeoJSON dicts or one
WKT geometry per line.
"""

from geowkt.layers.layer import Layer, LayerFeature
from geowkt.layers.manager import LayerManager

__all__ = ["Layer", "LayerFeature", "LayerManager"]
