"""Target layout as an ordered sequence of drawing commands.

:func:`build_scene` turns a :class:`~ringtarget.TargetConfig` into a
:class:`Scene`: an immutable tuple of commands that a backend paints in order,
later commands over earlier ones. Each command carries its complete style, so
a backend keeps no drawing state between commands.

Page coordinates are in points with the origin at the top-left corner and y
growing downwards.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterator, Union

import numpy as np

from ._config import TargetConfig, inch_to_pt
from .decoration import Decoration
from .geometry import (
    PageGeometry,
    ring_label_is_white,
    ring_stroke_is_white,
    spacing_label,
)


Color = tuple[float, float, float]

BLACK: Color = (0.0, 0.0, 0.0)
WHITE: Color = (1.0, 1.0, 1.0)
RED: Color = (1.0, 0.0, 0.0)
BLUE: Color = (0.3, 0.5, 1.0)
BACKGROUND: Color = (0.95, 0.95, 0.8)

DECORATION_WIDTH_IN = 2.0
CAPTION_FONT_SIZE = 12.0
SITE_LABEL = "www.fishlet.com"
COPYRIGHT_LABEL = "Copyright © 2022"


class HAlign(str, Enum):
    """Horizontal text anchor relative to the measured ink width."""

    CENTER = "center"
    LEFT = "left"
    RIGHT = "right"


class VAlign(str, Enum):
    """Vertical text anchor relative to the measured ink height."""

    CENTER = "center"
    TOP = "top"
    BOTTOM = "bottom"


def aligned_origin(
    x: float,
    y: float,
    width: float,
    height: float,
    h_align: HAlign,
    v_align: VAlign,
) -> tuple[float, float]:
    """Baseline origin that puts text of the given extents at ``(x, y)``.

    ``width`` and ``height`` are the text ink extents. With y growing
    downwards, moving the baseline down by the full height makes ``y`` the
    top of the text.
    """
    dx = 0.0
    if h_align == HAlign.CENTER:
        dx = -width / 2
    elif h_align == HAlign.RIGHT:
        dx = -width

    dy = 0.0
    if v_align == VAlign.CENTER:
        dy = height / 2
    elif v_align == VAlign.TOP:
        dy = height

    return x + dx, y + dy


@dataclass(frozen=True, slots=True)
class Style:
    """Drawing style in effect when a command is recorded."""

    color: Color = BLACK
    line_width: float = 1.0
    font_size: float = 10.0
    bold: bool = True


@dataclass(frozen=True, slots=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    fill: Color


@dataclass(frozen=True, slots=True)
class Circle:
    cx: float
    cy: float
    radius: float
    fill: Color | None = None
    stroke: Color | None = None
    line_width: float = 0.0


@dataclass(frozen=True, slots=True)
class Label:
    x: float
    y: float
    text: str
    color: Color
    font_size: float
    bold: bool = True
    h_align: HAlign = HAlign.CENTER
    v_align: VAlign = VAlign.CENTER


@dataclass(frozen=True, slots=True, eq=False)
class Picture:
    """Raster image scaled into the box ``(x, y, width, height)``."""

    pixels: np.ndarray = field(repr=False)
    x: float
    y: float
    width: float
    height: float


Command = Union[Rect, Circle, Label, Picture]


@dataclass(frozen=True, slots=True)
class Scene:
    """A single page: its size in points and the commands painted on it."""

    width: float
    height: float
    commands: tuple[Command, ...]

    def of_type(self, kind: type) -> list[Command]:
        return [c for c in self.commands if isinstance(c, kind)]


class SceneBuilder:
    """Records drawing commands against a current :class:`Style`.

    ``set_style`` changes the style for everything recorded afterwards;
    ``style`` changes it only inside a ``with`` block.
    """

    def __init__(self, width: float, height: float) -> None:
        self._width = float(width)
        self._height = float(height)
        self._style = Style()
        self._commands: list[Command] = []

    @property
    def current_style(self) -> Style:
        return self._style

    def set_style(self, **changes) -> None:
        self._style = replace(self._style, **changes)

    @contextmanager
    def style(self, **changes) -> Iterator[Style]:
        saved = self._style
        self._style = replace(saved, **changes)
        try:
            yield self._style
        finally:
            self._style = saved

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        self._commands.append(Rect(x, y, width, height, fill=self._style.color))

    def fill_circle(self, cx: float, cy: float, radius: float) -> None:
        self._commands.append(Circle(cx, cy, radius, fill=self._style.color))

    def stroke_circle(self, cx: float, cy: float, radius: float) -> None:
        self._commands.append(
            Circle(cx, cy, radius, stroke=self._style.color, line_width=self._style.line_width)
        )

    def fill_stroke_circle(self, cx: float, cy: float, radius: float, outline: Color) -> None:
        self._commands.append(
            Circle(
                cx,
                cy,
                radius,
                fill=self._style.color,
                stroke=outline,
                line_width=self._style.line_width,
            )
        )

    def text(
        self,
        x: float,
        y: float,
        text: str,
        h_align: HAlign = HAlign.CENTER,
        v_align: VAlign = VAlign.CENTER,
    ) -> None:
        s = self._style
        self._commands.append(
            Label(x, y, text, s.color, s.font_size, bold=s.bold, h_align=h_align, v_align=v_align)
        )

    def picture(self, decoration: Decoration, x: float, y: float, width: float) -> None:
        height = decoration.height_for(width)
        self._commands.append(Picture(decoration.pixels, x, y, width, height))

    def build(self) -> Scene:
        return Scene(self._width, self._height, tuple(self._commands))


def _draw_background(b: SceneBuilder, config: TargetConfig, page: PageGeometry) -> None:
    m = config.margin_pt
    with b.style(color=BACKGROUND):
        b.fill_rect(m, m, page.width - 2 * m, page.height - 2 * m)


def _draw_disks(b: SceneBuilder, config: TargetConfig, page: PageGeometry) -> None:
    # Outermost first; each disk covers the centre of the previous one.
    disks = (
        (BLUE, config.rings),
        (WHITE, config.rings - config.outer_rings),
        (RED, config.inner_rings),
        (WHITE, 0),
    )
    for color, ring in disks:
        with b.style(color=color):
            b.fill_circle(page.cx, page.cy, page.ring_radius(ring))


def _draw_rings(b: SceneBuilder, config: TargetConfig, page: PageGeometry) -> None:
    for ring in range(config.rings + 1):
        white = ring_stroke_is_white(ring, config.rings, config.inner_rings, config.outer_rings)
        with b.style(color=WHITE if white else BLACK):
            b.stroke_circle(page.cx, page.cy, page.ring_radius(ring))


def _draw_ring_numbers(b: SceneBuilder, config: TargetConfig, page: PageGeometry) -> None:
    rs = page.spacing
    with b.style(font_size=rs / 2, bold=True):
        for ring in range(1, config.rings + 1):
            white = ring_label_is_white(ring, config.rings, config.inner_rings, config.outer_rings)
            b.set_style(color=WHITE if white else BLACK)
            label = str(ring)
            d = ring * rs
            b.text(page.cx + d, page.cy, label)
            b.text(page.cx - d, page.cy, label)
            b.text(page.cx, page.cy + d, label)
            b.text(page.cx, page.cy - d, label)


def _draw_eyes(b: SceneBuilder, config: TargetConfig, page: PageGeometry) -> None:
    td = page.eye_offset()
    r = page.spacing / 2
    with b.style(color=WHITE):
        for sx, sy in ((-1, -1), (1, -1), (1, 1), (-1, 1)):
            b.fill_stroke_circle(page.cx + sx * td, page.cy + sy * td, r, outline=BLACK)


def _draw_corners(
    b: SceneBuilder,
    config: TargetConfig,
    page: PageGeometry,
    decoration: Decoration,
) -> tuple[float, float]:
    m = config.margin_pt
    image_w = inch_to_pt(DECORATION_WIDTH_IN)
    image_h = decoration.height_for(image_w)

    b.picture(decoration, m, m, image_w)
    b.picture(decoration, page.width - m - image_w, m, image_w)
    b.picture(decoration, m, page.height - m - image_h, image_w)
    b.picture(decoration, page.width - m - image_w, page.height - m - image_h, image_w)
    return image_w, image_h


def _draw_captions(
    b: SceneBuilder,
    config: TargetConfig,
    page: PageGeometry,
    image_w: float,
    image_h: float,
) -> None:
    m = config.margin_pt
    fs = CAPTION_FONT_SIZE
    left_x = m + image_w / 2
    right_x = page.width - m - image_w / 2
    top_y = m + image_h + fs
    bottom_y = page.height - m - image_h - fs

    with b.style(color=BLACK, font_size=fs, bold=True):
        b.text(left_x, top_y, SITE_LABEL, HAlign.CENTER, VAlign.TOP)
        b.text(right_x, top_y, SITE_LABEL, HAlign.CENTER, VAlign.TOP)
        b.text(left_x, bottom_y, spacing_label(page.spacing), HAlign.CENTER, VAlign.BOTTOM)
        b.text(right_x, bottom_y, COPYRIGHT_LABEL, HAlign.CENTER, VAlign.BOTTOM)


def build_scene(config: TargetConfig, decoration: Decoration) -> Scene:
    """Lay out the whole target page for ``config``."""
    page = PageGeometry.from_config(config)
    b = SceneBuilder(page.width, page.height)

    if config.background:
        _draw_background(b, config, page)

    b.set_style(line_width=config.line_width_pt)

    _draw_disks(b, config, page)
    _draw_rings(b, config, page)
    _draw_ring_numbers(b, config, page)
    _draw_eyes(b, config, page)
    image_w, image_h = _draw_corners(b, config, page, decoration)
    _draw_captions(b, config, page, image_w, image_h)

    return b.build()
