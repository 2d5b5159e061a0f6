#!/usr/bin/env python3
import argparse
import logging
import sys

from panoview.config import load_config
from panoview.images import ImageLoadError
from panoview.logging_config import setup_logging

logger = logging.getLogger("panoview.main")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="View an equirectangular or cylindrical panorama.")
    ap.add_argument("image", nargs="?", help="Panorama image to open")
    ap.add_argument("--config", default=None, help="Path to viewer YAML config")
    ap.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    ap.add_argument("--log-file", default=None, help="Also write logs to this file")
    ap.add_argument("--fullscreen", action="store_true", help="Open on the primary monitor")
    ap.add_argument("--no-compass", action="store_true", help="Hide the compass overlay")
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)

    config = load_config(args.config)
    if args.image:
        config.image = args.image
    if args.log_level:
        config.log_level = args.log_level
    if args.log_file:
        config.log_file = args.log_file
    if args.fullscreen:
        config.fullscreen = True
    if args.no_compass:
        config.compass.enabled = False

    setup_logging(config.log_level, config.log_file)

    # GL/GLFW imports are deferred so --help works without a display.
    from panoview.app import App

    try:
        app = App(config)
    except ImageLoadError as e:
        logger.error("%s", e)
        return 1
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
