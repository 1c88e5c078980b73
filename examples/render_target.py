#!/usr/bin/env python3
"""Render a tabloid target with twelve rings from Python.

Example:
  python examples/render_target.py --image koi.png --out tabloid.pdf
"""

from __future__ import annotations

import argparse
from pathlib import Path

import ringtarget
from ringtarget.pdf import write_pdf


def main() -> None:
    parser = argparse.ArgumentParser(description="Render a ring target PDF")
    parser.add_argument("--image", type=Path, default=Path("koi.png"), help="Corner decoration image")
    parser.add_argument("--out", type=Path, default=Path("tabloid.pdf"), help="Output PDF path")
    args = parser.parse_args()

    cfg = ringtarget.TargetConfig(
        width_in=11.0,
        height_in=17.0,
        output=args.out,
        rings=12,
        inner_rings=4,
        outer_rings=3,
        line_width_in=0.04,
    )
    scene = ringtarget.layout_target(cfg, image=args.image)
    print(f"{len(scene.commands)} drawing commands")

    out = write_pdf(scene, cfg.output, metadata={"Author": "ringtarget example"})
    print(f"Wrote {out}")


if __name__ == "__main__":
    main()
