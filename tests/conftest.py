from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from PIL import Image

from thumbcache import ThumbnailCache

ImageFactory = Callable[..., Path]


@pytest.fixture
def make_image(tmp_path: Path) -> ImageFactory:
    """Write a synthetic source image and return its path."""
    src_dir = tmp_path / "src"
    src_dir.mkdir(exist_ok=True)

    def _make(name: str, size: tuple[int, int] = (400, 200), mode: str = "RGB",
              color=(200, 40, 40), fmt: str | None = None) -> Path:
        path = src_dir / name
        with Image.new(mode, size, color) as img:
            img.save(path, fmt)
        return path

    return _make


@pytest.fixture
def noisy_jpeg(tmp_path: Path) -> Path:
    path = tmp_path / "src" / "noise.jpg"
    path.parent.mkdir(exist_ok=True)
    with Image.effect_noise((300, 300), 64) as noise, noise.convert("RGB") as rgb:
        rgb.save(path, "JPEG", quality=95)
    return path


@pytest.fixture
def cache_dir(tmp_path: Path) -> Path:
    return tmp_path / "cache"


@pytest.fixture
def cache(cache_dir: Path) -> ThumbnailCache:
    return ThumbnailCache(cache_dir)
