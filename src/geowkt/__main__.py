"""Convert WKT geometries to GeoJSON or canonical WKT.

Usage:
    python -m geowkt shapes.wkt
    echo "POINT (1 2)" | python -m geowkt --format wkt
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger

from geowkt.assembler import parse
from geowkt.config import settings
from geowkt.errors import WktSyntaxError
from geowkt.layers import LayerManager
from geowkt.layers.parsers.wkt import layer_from_objects


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geowkt",
        description="Parse WKT geometries and print them as GeoJSON or WKT.",
    )
    parser.add_argument("path", nargs="?", help="WKT file to read (default: stdin)")
    parser.add_argument(
        "--format",
        choices=["geojson", "wkt"],
        default=settings.default_export_format,
        help="Output format (default: %(default)s)",
    )
    parser.add_argument(
        "--strict-numbers",
        action="store_true",
        help="Reject malformed numbers such as '1--2' instead of reading NaN",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="stderr log level (default: %(default)s)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())
    logger.enable("geowkt")

    if args.path:
        text = Path(args.path).read_text(encoding="utf-8")
        name = Path(args.path).stem
    else:
        text = sys.stdin.read()
        name = "stdin"

    try:
        objects = parse(text, strict_numbers=args.strict_numbers or None)
    except WktSyntaxError as e:
        print(f"geowkt: {e}", file=sys.stderr)
        return 1

    manager = LayerManager()
    layer_id = manager.add_layer(layer_from_objects(objects, name))
    print(manager.export_layer(layer_id, args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
