#!/usr/bin/env python3
"""
Tessellate a circle and write the result to DXF.

Usage:
    python -m dxfent [--config FILE] [--center X Y Z] [--radius R]
                     [--normal X Y Z] [--thickness T] [--layer NAME]
                     [--precision N] [--keep-circle] [--output FILE.dxf]

Examples:
    # 16-gon approximating a circle of radius 5 centered at (10, 10)
    python -m dxfent --center 10 10 0 --radius 5 --precision 16 --output hole.dxf

    # tilted circle, original circle kept next to its approximation
    python -m dxfent --normal 0 1 1 --keep-circle --output tilted.dxf
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from dxfent.circle import Circle
from dxfent.config import Settings, load_settings
from dxfent.dxf_export import write_dxf
from dxfent.logging_config import setup_logging
from dxfent.tables import Layer
from dxfent.vectors import Vector3

logger = logging.getLogger("dxfent.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dxfent",
        description="Approximate a DXF circle with a closed polyline",
    )
    parser.add_argument("--config", help="YAML settings file")
    parser.add_argument("--log-level", help="override the configured log level")
    parser.add_argument("--log-file", help="also write log output to this file")
    parser.add_argument("--center", nargs=3, type=float, default=[0.0, 0.0, 0.0],
                        metavar=("X", "Y", "Z"), help="center in world coordinates")
    parser.add_argument("--radius", type=float, default=1.0)
    parser.add_argument("--normal", nargs=3, type=float, default=[0.0, 0.0, 1.0],
                        metavar=("X", "Y", "Z"), help="plane normal of the circle")
    parser.add_argument("--thickness", type=float, default=0.0)
    parser.add_argument("--layer", default=None, help="layer name (default '0')")
    parser.add_argument("--precision", type=int, default=None,
                        help="number of vertexes (default from settings)")
    parser.add_argument("--keep-circle", action="store_true",
                        help="write the source circle as well")
    parser.add_argument("--output", default="dxfent-out.dxf", help="output DXF file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config) if args.config else Settings()
        if args.log_level:
            settings = Settings(settings.default_precision, settings.dxf_version, args.log_level)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    setup_logging(settings.log_level_value, args.log_file)

    precision = args.precision if args.precision is not None else settings.default_precision
    try:
        circle = Circle(Vector3.of(args.center), args.radius)
        circle.normal = Vector3.of(args.normal)
        circle.thickness = args.thickness
        if args.layer:
            circle.layer = Layer.named(args.layer)
        polyline = circle.to_polyline(precision)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2

    entities = [circle, polyline] if args.keep_circle else [polyline]
    try:
        path = write_dxf(entities, args.output, settings.dxf_version)
    except OSError as exc:
        logger.error("could not write %s: %s", args.output, exc)
        return 1
    print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
