"""Disk-backed thumbnail cache.

``ThumbnailCache.make`` validates a source image, derives its cache key and
either returns the already cached artifact or renders a new one:

    validate -> build key -> look up -> (hit | crop, encode, [webp]) -> result

Everything is synchronous and assumes a single writer per cache directory.
"""

from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from thumbcache import config
from thumbcache.config import logger
from thumbcache.errors import ConfigurationError
from thumbcache.schemas import ConversionOptions, ThumbnailResult
from thumbcache.utils.geometry import compute_crop
from thumbcache.utils.hashing import name_crc32
from thumbcache.utils.image_variants import Codec, image_size, output_extension, sniff_mime
from thumbcache.utils.naming import build_key, parse_identity
from thumbcache.utils.storage import LocalStorage
from thumbcache.utils.webp import WebPTranscoder

PathLike = Union[str, Path]


class ThumbnailCache:
    def __init__(
        self,
        cache_dir: PathLike,
        quality: int = 75,
        png_compression: int = 5,
        webp: bool = False,
    ):
        try:
            self.options = ConversionOptions(
                quality=quality, png_compression=png_compression, webp=webp,
            )
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid conversion options: {exc}") from exc

        self.storage    = LocalStorage(Path(cache_dir))
        self.codec      = Codec(self.options)
        self.transcoder = WebPTranscoder(self.options.quality)

    @classmethod
    def from_env(cls) -> "ThumbnailCache":
        return cls(
            config.CACHE_DIR,
            quality=config.QUALITY,
            png_compression=config.PNG_COMPRESSION,
            webp=config.WEBP_ENABLED,
        )

    @property
    def cache_dir(self) -> Path:
        return self.storage.root

    # ── make ──────────────────────────────────────────────────────────────
    def _validate(self, source: Path, width: int, height: Optional[int]) -> Optional[str]:
        if not source.exists() or not source.is_file():
            return f"Image file does not exist: {source}"
        if width <= 0:
            return f"Width must be positive, got {width}"
        if height is not None and height <= 0:
            return f"Height must be positive, got {height}"
        return None

    def make(self, path: PathLike, width: int, height: Optional[int] = None) -> ThumbnailResult:
        source = Path(path).resolve()

        if (error := self._validate(source, width, height)):
            logger.info("Rejected %s: %s", source, error)
            return ThumbnailResult.failure(error)

        mime = sniff_mime(source)
        if mime not in config.ALLOWED_MIME_TYPES:
            error = f"Invalid image type: {mime or 'unknown'}"
            logger.info("Rejected %s: %s", source, error)
            return ThumbnailResult.failure(error)

        key = build_key(source, width, height)
        ext = output_extension(mime)
        lookup = ["webp", ext] if self.options.webp else [ext]
        if (hit := self.storage.find(key, lookup)):
            logger.debug("Cache hit for %s → %s", source.name, hit.name)
            return ThumbnailResult.success(hit, cached=True)

        src_w, src_h = image_size(source)
        crop = compute_crop(src_w, src_h, width, height)
        out_path = self.codec.encode(
            source, mime, crop, width, crop.out_h, self.storage.base_path(key),
        )

        transcode_error = None
        if self.options.webp and out_path.suffix != ".webp":
            out_path, transcode_error = self.transcoder.to_webp(out_path)

        logger.info("Generated %s for %s", out_path.name, source.name)
        return ThumbnailResult.success(out_path, transcode_error=transcode_error)

    # ── flush ─────────────────────────────────────────────────────────────
    def entries(self, path: Optional[PathLike] = None) -> list[Path]:
        """Cached files, optionally only those rendered from ``path``."""
        files = self.storage.list_files()
        if not path:
            return files
        identity = name_crc32(Path(path))
        return [f for f in files if parse_identity(f.name) == identity]

    def flush(self, path: Optional[PathLike] = None) -> int:
        """Delete the cached variants of ``path``, or everything when omitted."""
        removed = sum(1 for f in self.entries(path) if self.storage.delete_file(f))
        if path:
            logger.info("Flushed %d cache entr%s for %s",
                        removed, "y" if removed == 1 else "ies", Path(path).name)
        else:
            logger.info("Flushed entire cache (%d entries)", removed)
        return removed
