"""Render a :class:`~ringtarget.scene.Scene` to a one-page PDF with matplotlib.

The figure is sized in inches so that one data unit is one PDF point, and the
y axis is inverted to keep the scene's top-left origin.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from matplotlib.font_manager import FontProperties
from matplotlib.textpath import TextPath

from ._config import POINTS_PER_INCH
from .errors import RenderError
from .scene import Circle, Label, Picture, Rect, Scene, aligned_origin


DEFAULT_METADATA: dict[str, str] = {
    "Title": "Shooting target",
    "Subject": "Concentric ring target",
    "Creator": "ringtarget",
}


def _load_matplotlib():
    import matplotlib

    matplotlib.use("Agg")

    import matplotlib.pyplot as plt

    return plt


def _font(size: float, bold: bool) -> FontProperties:
    return FontProperties(family="sans-serif", weight="bold" if bold else "normal", size=size)


def measure_text(text: str, font_size: float, bold: bool = True) -> tuple[float, float]:
    """Ink width and height of ``text`` in points."""
    if not text:
        return 0.0, 0.0
    path = TextPath((0.0, 0.0), text, size=font_size, prop=_font(font_size, bold))
    extents = path.get_extents()
    return float(extents.width), float(extents.height)


def _draw_rect(ax, cmd: Rect) -> None:
    import matplotlib.patches as patches

    ax.add_patch(
        patches.Rectangle(
            (cmd.x, cmd.y),
            cmd.width,
            cmd.height,
            facecolor=cmd.fill,
            edgecolor="none",
            linewidth=0.0,
        )
    )


def _draw_circle(ax, cmd: Circle) -> None:
    import matplotlib.patches as patches

    stroked = cmd.stroke is not None and cmd.line_width > 0
    ax.add_patch(
        patches.Circle(
            (cmd.cx, cmd.cy),
            cmd.radius,
            facecolor="none" if cmd.fill is None else cmd.fill,
            edgecolor=cmd.stroke if stroked else "none",
            linewidth=cmd.line_width if stroked else 0.0,
        )
    )


def _draw_label(ax, cmd: Label) -> None:
    width, height = measure_text(cmd.text, cmd.font_size, cmd.bold)
    x, y = aligned_origin(cmd.x, cmd.y, width, height, cmd.h_align, cmd.v_align)
    ax.text(
        x,
        y,
        cmd.text,
        color=cmd.color,
        fontproperties=_font(cmd.font_size, cmd.bold),
        ha="left",
        va="baseline",
        parse_math=False,
    )


def _draw_picture(ax, cmd: Picture) -> None:
    # Row 0 of the image at the top edge of the box (y axis is inverted).
    ax.imshow(
        cmd.pixels,
        extent=(cmd.x, cmd.x + cmd.width, cmd.y + cmd.height, cmd.y),
        origin="upper",
        aspect="auto",
        interpolation="none",
    )


_DRAWERS = {
    Rect: _draw_rect,
    Circle: _draw_circle,
    Label: _draw_label,
    Picture: _draw_picture,
}


def write_pdf(
    scene: Scene,
    path: str | Path,
    metadata: Mapping[str, Any] | None = None,
) -> Path:
    """Paint ``scene`` in order and save it as a single-page PDF at ``path``.

    Raises :class:`RenderError` with the backend's message if drawing or
    saving fails; a partially written file is removed.
    """
    out_path = Path(path)
    plt = _load_matplotlib()
    info = dict(DEFAULT_METADATA)
    if metadata is not None:
        info.update(metadata)

    fig = None
    try:
        fig = plt.figure(
            figsize=(scene.width / POINTS_PER_INCH, scene.height / POINTS_PER_INCH),
            dpi=POINTS_PER_INCH,
            frameon=False,
        )
        ax = fig.add_axes([0.0, 0.0, 1.0, 1.0])
        ax.set_axis_off()
        ax.set_autoscale_on(False)

        for cmd in scene.commands:
            drawer = _DRAWERS.get(type(cmd))
            if drawer is None:
                raise RenderError(f"Operation failed: unsupported command {type(cmd).__name__}")
            drawer(ax, cmd)

        ax.set_xlim(0, scene.width)
        ax.set_ylim(scene.height, 0)
        _save(fig, out_path, info)
    except RenderError:
        raise
    except (ValueError, TypeError, RuntimeError) as exc:
        raise RenderError(f"Operation failed: {exc}") from exc
    finally:
        if fig is not None:
            plt.close(fig)

    return out_path


def _save(fig, out_path: Path, info: Mapping[str, Any]) -> None:
    # Some failures only surface when the page is flushed to disk.
    try:
        fig.savefig(out_path, format="pdf", dpi=POINTS_PER_INCH, metadata=dict(info))
    except (OSError, ValueError, RuntimeError) as exc:
        try:
            out_path.unlink()
        except OSError:
            pass
        raise RenderError(f"Operation failed: {exc}") from exc
