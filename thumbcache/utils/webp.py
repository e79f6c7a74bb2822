from pathlib import Path
from typing import NamedTuple, Optional

from PIL import Image, UnidentifiedImageError

from thumbcache.config import logger
from thumbcache.errors import TranscodeError


class TranscodeOutcome(NamedTuple):
    path:  Path
    error: Optional[str] = None


class WebPTranscoder:
    def __init__(self, quality: int = 75):
        self.quality = quality

    def convert(self, raster: Path) -> Path:
        """Write ``raster`` as a sibling ``.webp`` file; raise on failure."""
        target = raster.with_suffix(".webp")
        try:
            with Image.open(raster) as img:
                img.save(target, "WEBP", quality=self.quality)
        except (UnidentifiedImageError, OSError, ValueError, KeyError) as exc:
            target.unlink(missing_ok=True)
            raise TranscodeError(f"WebP conversion of {raster.name} failed: {exc}") from exc
        return target

    def to_webp(self, raster: Path, delete_original: bool = True) -> TranscodeOutcome:
        """Convert ``raster`` to WebP, falling back to ``raster`` on failure."""
        try:
            target = self.convert(raster)
        except TranscodeError as exc:
            logger.warning("%s; serving %s instead", exc, raster.name)
            return TranscodeOutcome(raster, str(exc))

        if delete_original:
            raster.unlink(missing_ok=True)
        return TranscodeOutcome(target)
