"""Tests for the typer command line."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from thumbcache.cli import app

runner = CliRunner()


def test_make_prints_cached_path(make_image, cache_dir: Path):
    src = make_image("photo.jpg")
    result = runner.invoke(app, ["make", str(src), "50", "40", "--cache-dir", str(cache_dir)])
    assert result.exit_code == 0
    [entry] = list(cache_dir.iterdir())
    assert entry.name in result.stdout


def test_make_width_only(make_image, cache_dir: Path):
    src = make_image("photo.png")
    result = runner.invoke(app, ["make", str(src), "50", "--cache-dir", str(cache_dir)])
    assert result.exit_code == 0
    assert len(list(cache_dir.iterdir())) == 1


def test_make_invalid_source_fails(tmp_path: Path, cache_dir: Path):
    fake = tmp_path / "fake.jpg"
    fake.write_text("nope")
    result = runner.invoke(app, ["make", str(fake), "50", "--cache-dir", str(cache_dir)])
    assert result.exit_code == 1
    assert list(cache_dir.iterdir()) == []


def test_make_bad_quality_is_configuration_error(make_image, cache_dir: Path):
    src = make_image("photo.jpg")
    result = runner.invoke(
        app, ["make", str(src), "50", "--quality", "300", "--cache-dir", str(cache_dir)]
    )
    assert result.exit_code == 2


def test_flush_and_ls(make_image, cache_dir: Path):
    a = make_image("a.jpg")
    b = make_image("b.jpg")
    for src in (a, b):
        runner.invoke(app, ["make", str(src), "20", "20", "--cache-dir", str(cache_dir)])

    listed = runner.invoke(app, ["ls", str(a), "--cache-dir", str(cache_dir)])
    assert listed.exit_code == 0
    assert len(listed.stdout.split()) == 1

    flushed = runner.invoke(app, ["flush", str(a), "--cache-dir", str(cache_dir)])
    assert flushed.exit_code == 0
    assert "Removed 1" in flushed.stdout
    assert len(list(cache_dir.iterdir())) == 1

    runner.invoke(app, ["flush", "--cache-dir", str(cache_dir)])
    assert list(cache_dir.iterdir()) == []
