"""Corner decoration image."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

import numpy as np
from PIL import Image, UnidentifiedImageError

from .errors import AssetError


DEFAULT_IMAGE = "koi.png"


@dataclass(frozen=True, slots=True)
class Decoration:
    """RGBA pixels of a decoration image and its natural size in pixels."""

    name: str
    pixels: np.ndarray
    natural_width: int
    natural_height: int

    def height_for(self, width: float) -> float:
        """Display height matching ``width`` at the natural aspect ratio."""
        return width * self.natural_height / self.natural_width


@contextmanager
def open_decoration(path: str | Path = DEFAULT_IMAGE) -> Iterator[Decoration]:
    """Load a decoration image for the duration of a ``with`` block.

    Raises :class:`AssetError` naming the file if it is missing or can not be
    decoded. The file handle is closed before the block body runs.
    """
    path = Path(path)
    try:
        with Image.open(path) as image:
            image.load()
            rgba = image.convert("RGBA")
    except FileNotFoundError:
        raise AssetError(f"Could not load image {path}: file not found") from None
    except (UnidentifiedImageError, OSError) as exc:
        raise AssetError(f"Could not load image {path}: {exc}") from exc

    width, height = rgba.size
    if width == 0 or height == 0:
        raise AssetError(f"Could not load image {path}: image is empty")

    pixels = np.asarray(rgba, dtype=np.uint8)
    pixels.setflags(write=False)
    rgba.close()
    yield Decoration(
        name=path.name,
        pixels=pixels,
        natural_width=int(width),
        natural_height=int(height),
    )
