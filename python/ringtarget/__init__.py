"""ringtarget: printable concentric-ring shooting targets as PDF.

High-level API: build a :class:`TargetConfig` and call :func:`render_target`.
"""

from ._api import __version__, layout_target, render_target
from ._config import (
    DEFAULT_INNER_RINGS,
    DEFAULT_LINE_WIDTH,
    DEFAULT_MARGIN,
    DEFAULT_OUTER_RINGS,
    DEFAULT_OUTPUT,
    DEFAULT_RINGS,
    DEFAULT_SIZE,
    POINTS_PER_INCH,
    TargetConfig,
    inch_to_pt,
    parse_size,
    pt_to_inch,
)
from .decoration import DEFAULT_IMAGE, Decoration, open_decoration
from .errors import AssetError, RenderError, TargetError
from .geometry import PageGeometry, gcd, ring_radius, ring_spacing, spacing_label
from .scene import HAlign, Scene, VAlign, build_scene

__all__ = [
    "TargetConfig",
    "PageGeometry",
    "Scene",
    "Decoration",
    "HAlign",
    "VAlign",
    "render_target",
    "layout_target",
    "build_scene",
    "open_decoration",
    "ring_spacing",
    "ring_radius",
    "gcd",
    "spacing_label",
    "parse_size",
    "inch_to_pt",
    "pt_to_inch",
    "TargetError",
    "AssetError",
    "RenderError",
    "POINTS_PER_INCH",
    "DEFAULT_SIZE",
    "DEFAULT_MARGIN",
    "DEFAULT_OUTPUT",
    "DEFAULT_RINGS",
    "DEFAULT_INNER_RINGS",
    "DEFAULT_OUTER_RINGS",
    "DEFAULT_LINE_WIDTH",
    "DEFAULT_IMAGE",
    "__version__",
]
