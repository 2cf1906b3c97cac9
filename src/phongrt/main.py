# main.py
import argparse
import logging
import sys
from typing import List, Optional

from phongrt.config import LOG_LEVEL, RENDER_SETTINGS
from phongrt.logging_config import setup_logging
from phongrt.renderer.scenes import SCENES, projectile

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phongrt",
        description="Render one of the example scenes with the Phong ray tracer.",
    )
    parser.add_argument("scene", nargs="?", default=RENDER_SETTINGS['scene'],
                        choices=sorted(SCENES) + ["projectile"],
                        help="scene to render (default: %(default)s)")
    parser.add_argument("-W", "--width", type=int, default=RENDER_SETTINGS['width'],
                        help="image width in pixels (default: %(default)s)")
    parser.add_argument("-H", "--height", type=int, default=RENDER_SETTINGS['height'],
                        help="image height in pixels; the square sphere and clock "
                             "scenes use the width only (default: %(default)s)")
    parser.add_argument("-o", "--output", default=RENDER_SETTINGS['output'],
                        help="output file; .ppm is written as P3 text, other "
                             "extensions via Pillow, '-' for stdout (default: %(default)s)")
    parser.add_argument("--preview", action="store_true",
                        help="show the rendered image in a window")
    parser.add_argument("--log-level", default=LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="logging verbosity (default: %(default)s)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    if args.scene == "projectile":
        for position in projectile():
            print(f"{position.x:.4f} {position.y:.4f} {position.z:.4f}")
        return 0

    if args.width <= 0 or args.height <= 0:
        logger.error("Image size must be positive, got %dx%d", args.width, args.height)
        return 2

    logger.info("Rendering scene '%s'", args.scene)
    canvas = SCENES[args.scene](args.width, args.height)
    canvas.save(args.output)

    if args.preview:
        from phongrt.renderer import preview
        preview.show(canvas, caption=f"phongrt - {args.scene}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
