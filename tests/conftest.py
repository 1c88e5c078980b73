from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from ringtarget import Decoration


def write_koi_png(path: Path, width: int = 100, height: int = 50) -> Path:
    rgba = np.zeros((height, width, 4), dtype=np.uint8)
    rgba[..., 0] = 255
    rgba[..., 1] = np.linspace(0, 255, width, dtype=np.uint8)[None, :]
    rgba[..., 3] = 255
    Image.fromarray(rgba).save(path)
    return path


@pytest.fixture
def koi_png(tmp_path: Path) -> Path:
    return write_koi_png(tmp_path / "koi.png")


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Working directory holding the default decoration image."""
    write_koi_png(tmp_path / "koi.png")
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def decoration() -> Decoration:
    pixels = np.zeros((50, 100, 4), dtype=np.uint8)
    return Decoration(name="koi.png", pixels=pixels, natural_width=100, natural_height=50)
