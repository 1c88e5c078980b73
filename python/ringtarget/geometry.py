"""Ring geometry for a concentric target.

Rings are indexed from 0 (the bullseye) to ``rings`` (the outermost). All
lengths are in points::

    ((    ((    (( c ))    ))    ))
    |<-- radius -->|

The bullseye boundary sits half a spacing from the centre and the outermost
boundary lies exactly on ``radius``. The outer stroke fits inside the margin
because :func:`outer_radius` already subtracts half the line width.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ._config import TargetConfig, pt_to_inch


SPACING_DENOMINATOR = 32


def ring_spacing(radius: float, rings: int) -> float:
    """Radial distance between consecutive ring boundaries."""
    return radius / (rings + 0.5)


def ring_radius(radius: float, rings: int, ring: int) -> float:
    """Radius of the boundary of ring ``ring`` (0 is the bullseye)."""
    rs = ring_spacing(radius, rings)
    return rs / 2 + ring * rs


def outer_radius(width: float, height: float, margin: float, line_width: float) -> float:
    """Largest ring radius whose stroke fits inside the margin-bounded page."""
    return min(width, height) / 2 - margin - line_width / 2


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two non-negative integers.

    ``gcd(0, b) == b``, so ``gcd(0, 0) == 0``.
    """
    a, b = abs(int(a)), abs(int(b))
    while a != 0:
        a, b = b % a, a
    return b


def spacing_fraction(spacing: float, denominator: int = SPACING_DENOMINATOR) -> tuple[int, int]:
    """Round a spacing in points to the nearest ``1/denominator`` inch, reduced."""
    num = int(pt_to_inch(spacing) * denominator + 0.5)
    den = int(denominator)
    g = gcd(num, den)
    if g == 0:
        return num, den
    return num // g, den // g


def spacing_label(spacing: float) -> str:
    num, den = spacing_fraction(spacing)
    return f'Ring spacing {num}/{den}"'


def ring_stroke_is_white(ring: int, rings: int, inner_rings: int, outer_rings: int) -> bool:
    """Whether the boundary of ``ring`` is stroked white for contrast.

    Boundaries strictly inside the red inner band or the blue outer band are
    white; the bullseye edge, the band edges and the outermost edge are black.
    """
    return (0 < ring < inner_rings) or (rings - outer_rings < ring < rings)


def ring_label_is_white(ring: int, rings: int, inner_rings: int, outer_rings: int) -> bool:
    """Whether the number of ``ring`` is drawn white (it sits on red or blue)."""
    return ring <= inner_rings or ring > rings - outer_rings


@dataclass(frozen=True, slots=True)
class PageGeometry:
    """Centre, outer radius and ring spacing of a page, in points."""

    width: float
    height: float
    cx: float
    cy: float
    radius: float
    rings: int

    @classmethod
    def from_config(cls, config: TargetConfig) -> "PageGeometry":
        width = config.width_pt
        height = config.height_pt
        radius = outer_radius(width, height, config.margin_pt, config.line_width_pt)
        if not math.isfinite(radius) or radius <= 0:
            raise ValueError(
                f"margin {config.margin_in:g}in and line width {config.line_width_in:g}in "
                f"leave no room for a target on a {config.size} page"
            )
        return cls(
            width=width,
            height=height,
            cx=width / 2,
            cy=height / 2,
            radius=radius,
            rings=config.rings,
        )

    @property
    def spacing(self) -> float:
        return ring_spacing(self.radius, self.rings)

    def ring_radius(self, ring: int) -> float:
        return ring_radius(self.radius, self.rings, ring)

    def eye_offset(self) -> float:
        """Diagonal x/y offset of the eye markers from the centre."""
        return self.ring_radius(self.rings - 1) * math.sqrt(2.0) / 2
