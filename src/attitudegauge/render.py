"""
Command-line renderer: draw one frame of the gauge into a PNG file.

Usage:
    $ attitudegauge-render --yaw 45 --pitch 30 --output gauge.png
    $ attitudegauge-render --options sky.json --width 300 --height 300 -o gauge.png
"""
from __future__ import annotations

import json
import logging
import sys
from argparse import ArgumentParser
from pathlib import Path
from typing import Any, Optional, Sequence

from PySide6.QtGui import QGuiApplication

from attitudegauge.errors import ConfigurationError, SurfaceError
from attitudegauge.gauge import AttitudeGauge
from attitudegauge.logging_config import setup_logging
from attitudegauge.surface.registry import create_surface

logger = logging.getLogger(__name__)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="attitudegauge-render", description="Render the attitude gauge to a PNG image.")
    parser.add_argument("--width", type=int, default=200, help="image width in pixels")
    parser.add_argument("--height", type=int, default=200, help="image height in pixels")
    parser.add_argument("--yaw", type=float, default=0.0, help="yaw angle in degrees")
    parser.add_argument("--pitch", type=float, default=0.0, help="pitch angle in degrees")
    parser.add_argument("--options", type=Path, default=None, help="JSON file with gauge option overrides")
    parser.add_argument("-o", "--output", type=Path, required=True, help="output PNG path")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def load_options(path: Optional[Path]) -> Optional[dict[str, Any]]:
    if path is None:
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not read options file '{path}': {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Options file '{path}' must contain a JSON object")
    return data


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO)

    # Text rendering needs a GUI application instance
    _app = QGuiApplication.instance() or QGuiApplication(sys.argv[:1])

    try:
        surface = create_surface("qimage", args.width, args.height)
        gauge = AttitudeGauge.create(surface, load_options(args.options))
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    gauge.set_yaw(args.yaw)
    gauge.set_pitch(args.pitch)
    try:
        gauge.draw()
        surface.save_png(args.output)
    except SurfaceError as e:
        logger.error(f"Rendering failed: {e}")
        return 1

    logger.info(f"Rendered yaw={gauge.yaw:g} pitch={gauge.pitch:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
