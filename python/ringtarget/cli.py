"""Command-line entry point: ``ringtarget [options]``.

Exit status is 0 on success, 1 when the decoration image or the PDF backend
fails, and 2 on usage errors.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from ._api import __version__, render_target
from ._config import (
    DEFAULT_INNER_RINGS,
    DEFAULT_LINE_WIDTH,
    DEFAULT_MARGIN,
    DEFAULT_OUTER_RINGS,
    DEFAULT_OUTPUT,
    DEFAULT_RINGS,
    DEFAULT_SIZE,
    TargetConfig,
    parse_size,
)
from .decoration import DEFAULT_IMAGE
from .errors import TargetError
from .geometry import PageGeometry


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ringtarget",
        description="Generate a printable concentric-ring shooting target PDF.",
    )
    parser.add_argument("-s", dest="size", metavar="WxH", default=DEFAULT_SIZE,
                        help=f"Set size in inches, default {DEFAULT_SIZE}")
    parser.add_argument("-m", dest="margin", metavar="MARGIN", type=float, default=DEFAULT_MARGIN,
                        help=f"Set page margin in inches, default {DEFAULT_MARGIN:g}")
    parser.add_argument("-o", dest="output", metavar="FNAME", type=Path, default=Path(DEFAULT_OUTPUT),
                        help=f"Set output filename, default {DEFAULT_OUTPUT}")
    parser.add_argument("-r", dest="rings", metavar="RINGS", type=int, default=DEFAULT_RINGS,
                        help=f"Set number of rings, default {DEFAULT_RINGS}")
    parser.add_argument("-I", dest="inner_rings", metavar="IRINGS", type=int, default=DEFAULT_INNER_RINGS,
                        help=f"Set number of inner rings, default {DEFAULT_INNER_RINGS}")
    parser.add_argument("-O", dest="outer_rings", metavar="ORINGS", type=int, default=DEFAULT_OUTER_RINGS,
                        help=f"Set number of outer rings, default {DEFAULT_OUTER_RINGS}")
    parser.add_argument("-l", dest="line_width", metavar="LINEW", type=float, default=DEFAULT_LINE_WIDTH,
                        help=f"Set line width in inches, default {DEFAULT_LINE_WIDTH:g}")
    parser.add_argument("-b", dest="background", action="store_true", default=False,
                        help="Use yellowish background color")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> TargetConfig:
    """Build a validated :class:`TargetConfig`; raises ``ValueError`` when invalid."""
    width_in, height_in = parse_size(args.size)
    config = TargetConfig(
        width_in=width_in,
        height_in=height_in,
        margin_in=args.margin,
        output=args.output,
        rings=args.rings,
        inner_rings=args.inner_rings,
        outer_rings=args.outer_rings,
        line_width_in=args.line_width,
        background=args.background,
    )
    PageGeometry.from_config(config)
    return config


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    try:
        out_path = render_target(config, image=DEFAULT_IMAGE)
    except TargetError as e:
        print(e, file=sys.stderr)
        return 1

    print(f"Wrote {out_path} ({config.width_in:g}in x {config.height_in:g}in, {config.rings} rings)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
