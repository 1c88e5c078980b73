"""Public Python API for ringtarget.

Typical flow:
1. Build a :class:`TargetConfig` (or use the defaults).
2. Call :func:`render_target` to write the PDF.

For finer control, open the decoration with
:func:`~ringtarget.decoration.open_decoration`, build a scene with
:func:`~ringtarget.scene.build_scene` and write it with
:func:`~ringtarget.pdf.write_pdf`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from ._config import TargetConfig
from .decoration import DEFAULT_IMAGE, open_decoration
from .pdf import write_pdf
from .scene import Scene, build_scene


__version__ = "0.1.0"


def render_target(
    config: TargetConfig | None = None,
    *,
    image: str | Path = DEFAULT_IMAGE,
    metadata: Mapping[str, Any] | None = None,
) -> Path:
    """Render one target page and return the written PDF path.

    Raises :class:`~ringtarget.errors.AssetError` if the decoration image can
    not be loaded (no PDF is written) and
    :class:`~ringtarget.errors.RenderError` if the PDF backend fails.
    """
    if config is None:
        config = TargetConfig()
    scene = layout_target(config, image=image)
    return write_pdf(scene, config.output, metadata=metadata)


def layout_target(config: TargetConfig, *, image: str | Path = DEFAULT_IMAGE) -> Scene:
    """Build the drawing commands for ``config`` without writing anything."""
    with open_decoration(image) as decoration:
        return build_scene(config, decoration)
