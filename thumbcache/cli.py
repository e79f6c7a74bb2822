"""Typer-based command line for the thumbnail cache."""

from pathlib import Path
from typing import Optional

import typer

from thumbcache import config
from thumbcache.cache import ThumbnailCache
from thumbcache.errors import ConfigurationError, ThumbcacheError

app = typer.Typer(help="Generate and manage cached image thumbnails")

CACHE_DIR_HELP = "Cache directory"


def _open_cache(cache_dir: Path, **options) -> ThumbnailCache:
    try:
        return ThumbnailCache(cache_dir, **options)
    except ConfigurationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(2) from exc


@app.callback()
def main_callback(
    log_level: str = typer.Option(config.LOG_LEVEL, "--log-level", help="Logging level"),
) -> None:
    config.configure_logging(log_level)


@app.command()
def make(
    source: Path = typer.Argument(..., help="Source JPEG, PNG or WebP image"),
    width: int = typer.Argument(..., help="Thumbnail width in pixels"),
    height: Optional[int] = typer.Argument(None, help="Thumbnail height; keep aspect ratio if omitted"),
    cache_dir: Path = typer.Option(config.CACHE_DIR, "--cache-dir", "-c", help=CACHE_DIR_HELP),
    quality: int = typer.Option(config.QUALITY, help="JPEG/WebP quality (0-100)"),
    png_compression: int = typer.Option(config.PNG_COMPRESSION, help="PNG compression level (0-9)"),
    webp: bool = typer.Option(config.WEBP_ENABLED, "--webp/--no-webp", help="Transcode output to WebP"),
) -> None:
    """Print the path of a cached thumbnail, rendering it if needed."""
    cache = _open_cache(cache_dir, quality=quality, png_compression=png_compression, webp=webp)
    try:
        result = cache.make(source, width, height)
    except ThumbcacheError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc

    if not result.ok:
        typer.echo(f"Error: {result.error}", err=True)
        raise typer.Exit(1)
    if result.transcode_error:
        typer.echo(f"Warning: {result.transcode_error}", err=True)
    typer.echo(str(result.path))


@app.command()
def flush(
    source: Optional[Path] = typer.Argument(None, help="Only drop thumbnails of this source"),
    cache_dir: Path = typer.Option(config.CACHE_DIR, "--cache-dir", "-c", help=CACHE_DIR_HELP),
) -> None:
    """Remove cached thumbnails of one source, or all of them."""
    removed = _open_cache(cache_dir).flush(source)
    typer.echo(f"Removed {removed} cached file(s)")


@app.command("ls")
def list_entries(
    source: Optional[Path] = typer.Argument(None, help="Only list thumbnails of this source"),
    cache_dir: Path = typer.Option(config.CACHE_DIR, "--cache-dir", "-c", help=CACHE_DIR_HELP),
) -> None:
    """List cached thumbnails."""
    for entry in _open_cache(cache_dir).entries(source):
        typer.echo(entry.name)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
