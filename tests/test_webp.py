"""Tests for the WebP transcoder."""

from __future__ import annotations

from pathlib import Path

from PIL import Image

from thumbcache.utils.webp import WebPTranscoder


def test_converts_and_removes_original(make_image):
    raster = make_image("thumb.png", size=(32, 32))
    outcome = WebPTranscoder(quality=60).to_webp(raster)
    assert outcome.error is None
    assert outcome.path == raster.with_suffix(".webp")
    assert not raster.exists()
    with Image.open(outcome.path) as img:
        assert img.format == "WEBP"
        assert img.size == (32, 32)


def test_keeps_original_when_asked(make_image):
    raster = make_image("thumb.jpg", size=(32, 32))
    outcome = WebPTranscoder().to_webp(raster, delete_original=False)
    assert raster.exists()
    assert outcome.path.exists()


def test_failure_returns_original(tmp_path: Path):
    broken = tmp_path / "broken.jpg"
    broken.write_bytes(b"\xff\xd8 not really")
    outcome = WebPTranscoder().to_webp(broken)
    assert outcome.path == broken
    assert broken.exists()
    assert outcome.error and "broken.jpg" in outcome.error
    assert not broken.with_suffix(".webp").exists()
