#!/usr/bin/env python3
"""Render the standard set of printable targets, one PDF per page size.

Usage:
    python tools/gen_targets.py --out_dir out/targets
    python tools/gen_targets.py --sizes 8.5x11 11x17 --rings 10

Writes ``target-<size>.pdf`` for each size. The decoration image is read from
``--image`` (default: ``koi.png`` in the working directory).
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import ringtarget
from ringtarget import PageGeometry, TargetConfig, TargetError, parse_size


STANDARD_SIZES = ("8.5x11", "11x8.5", "11x17", "17x11")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render printable ring targets for several page sizes.")
    parser.add_argument("--out_dir", type=Path, default=Path("."), help="Output directory (default: .)")
    parser.add_argument(
        "--sizes",
        nargs="+",
        default=list(STANDARD_SIZES),
        help=f"Page sizes in inches as WxH (default: {' '.join(STANDARD_SIZES)})",
    )
    parser.add_argument("--image", type=Path, default=Path(ringtarget.DEFAULT_IMAGE))
    parser.add_argument("--rings", type=int, default=ringtarget.DEFAULT_RINGS)
    parser.add_argument("--background", action="store_true", help="Use yellowish background color")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    args.out_dir.mkdir(parents=True, exist_ok=True)

    for size in args.sizes:
        try:
            width_in, height_in = parse_size(size)
            cfg = TargetConfig(
                width_in=width_in,
                height_in=height_in,
                output=args.out_dir / f"target-{size}.pdf",
                rings=args.rings,
                background=args.background,
            )
            PageGeometry.from_config(cfg)
        except ValueError as e:
            print(f"{size}: {e}", file=sys.stderr)
            return 2

        try:
            out_path = ringtarget.render_target(cfg, image=args.image)
        except TargetError as e:
            print(e, file=sys.stderr)
            return 1
        print(out_path)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
