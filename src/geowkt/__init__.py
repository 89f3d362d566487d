"""geowkt - Well-Known Text geometry parsing.

    tokenize(text)    -> list[Token]
    assemble(tokens)  -> list[WktObject]
    parse(text)       -> list[WktObject]   (both steps)
    dumps(obj)        -> str               (back to WKT)

Map-layer import/export built on the parser lives in geowkt.layers.
"""

from loguru import logger

from geowkt.assembler import assemble, loads, parse
from geowkt.errors import LexicalError, MalformedNestingError, WktError, WktSyntaxError
from geowkt.geometry import GeometryType, Renderable, UnknownGeometry, WktObject
from geowkt.registry import GEOMETRY_TYPES, create_object, split_keyword
from geowkt.tokens import Token, TokenKind, tokenize
from geowkt.writer import dumps, dumps_geojson

# Library code stays quiet unless the application opts in.
logger.disable("geowkt")

__all__ = [
    "GEOMETRY_TYPES",
    "GeometryType",
    "LexicalError",
    "MalformedNestingError",
    "Renderable",
    "Token",
    "TokenKind",
    "UnknownGeometry",
    "WktError",
    "WktObject",
    "WktSyntaxError",
    "assemble",
    "create_object",
    "dumps",
    "dumps_geojson",
    "loads",
    "parse",
    "split_keyword",
    "tokenize",
]
