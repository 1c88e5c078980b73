"""Target configuration and its defaults.

All user-facing lengths are in inches. Drawing happens in PDF points, see
:data:`POINTS_PER_INCH` and the ``*_pt`` properties of :class:`TargetConfig`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping


POINTS_PER_INCH = 72.0

DEFAULT_SIZE = "8.5x11"
DEFAULT_MARGIN = 0.25
DEFAULT_OUTPUT = "target.pdf"
DEFAULT_RINGS = 8
DEFAULT_INNER_RINGS = 3
DEFAULT_OUTER_RINGS = 2
DEFAULT_LINE_WIDTH = 0.05


def inch_to_pt(inches: float) -> float:
    return inches * POINTS_PER_INCH


def pt_to_inch(points: float) -> float:
    return points / POINTS_PER_INCH


def parse_size(text: str) -> tuple[float, float]:
    """Parse a ``WxH`` page size in inches, e.g. ``"8.5x11"``."""
    width_text, sep, height_text = str(text).partition("x")
    if not sep:
        raise ValueError(f"size must be WxH, got {text!r}")
    try:
        return float(width_text), float(height_text)
    except ValueError:
        raise ValueError(f"size must be WxH with numeric W and H, got {text!r}") from None


def format_size(width_in: float, height_in: float) -> str:
    return f"{width_in:g}x{height_in:g}"


@dataclass(frozen=True, slots=True)
class TargetConfig:
    """Page geometry and styling for one target.

    Instances are validated on construction and never change afterwards.
    """

    width_in: float = 8.5
    height_in: float = 11.0
    margin_in: float = DEFAULT_MARGIN
    output: Path = Path(DEFAULT_OUTPUT)
    rings: int = DEFAULT_RINGS
    inner_rings: int = DEFAULT_INNER_RINGS
    outer_rings: int = DEFAULT_OUTER_RINGS
    line_width_in: float = DEFAULT_LINE_WIDTH
    background: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "output", Path(self.output))
        self.validate()

    def validate(self) -> None:
        for name, value in (
            ("page width", self.width_in),
            ("page height", self.height_in),
            ("margin", self.margin_in),
            ("line width", self.line_width_in),
        ):
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value!r}")
        if not self.width_in > 0 or not self.height_in > 0:
            raise ValueError("page width and height must be > 0")
        if self.margin_in < 0:
            raise ValueError("margin must be >= 0")
        if self.line_width_in < 0:
            raise ValueError("line width must be >= 0")
        if self.rings < 1:
            raise ValueError("number of rings must be >= 1")
        if self.inner_rings < 0 or self.outer_rings < 0:
            raise ValueError("inner and outer ring counts must be >= 0")
        if self.inner_rings + self.outer_rings > self.rings:
            raise ValueError(
                f"inner rings ({self.inner_rings}) + outer rings ({self.outer_rings}) "
                f"must not exceed rings ({self.rings})"
            )

    @property
    def width_pt(self) -> float:
        return inch_to_pt(self.width_in)

    @property
    def height_pt(self) -> float:
        return inch_to_pt(self.height_in)

    @property
    def margin_pt(self) -> float:
        return inch_to_pt(self.margin_in)

    @property
    def line_width_pt(self) -> float:
        return inch_to_pt(self.line_width_in)

    @property
    def size(self) -> str:
        return format_size(self.width_in, self.height_in)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TargetConfig":
        if not isinstance(data, Mapping):
            raise TypeError("data must be a mapping")
        if "size" in data:
            width_in, height_in = parse_size(data["size"])
        else:
            width_in = float(data.get("width_in", 8.5))
            height_in = float(data.get("height_in", 11.0))
        return cls(
            width_in=width_in,
            height_in=height_in,
            margin_in=float(data.get("margin_in", DEFAULT_MARGIN)),
            output=Path(data.get("output", DEFAULT_OUTPUT)),
            rings=int(data.get("rings", DEFAULT_RINGS)),
            inner_rings=int(data.get("inner_rings", DEFAULT_INNER_RINGS)),
            outer_rings=int(data.get("outer_rings", DEFAULT_OUTER_RINGS)),
            line_width_in=float(data.get("line_width_in", DEFAULT_LINE_WIDTH)),
            background=bool(data.get("background", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "width_in": float(self.width_in),
            "height_in": float(self.height_in),
            "margin_in": float(self.margin_in),
            "output": str(self.output),
            "rings": int(self.rings),
            "inner_rings": int(self.inner_rings),
            "outer_rings": int(self.outer_rings),
            "line_width_in": float(self.line_width_in),
            "background": bool(self.background),
        }
