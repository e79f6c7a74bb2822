from pathlib import Path
from typing import Any, Optional

from PIL import Image, UnidentifiedImageError

from thumbcache.config import logger
from thumbcache.errors import CacheWriteError, DecodeError
from thumbcache.schemas import ConversionOptions
from thumbcache.utils.geometry import CropBox

FORMAT_BY_MIME = {
    "image/jpeg": ("JPEG", "jpg"),
    "image/png":  ("PNG",  "png"),
    "image/webp": ("WEBP", "webp"),
}


def sniff_mime(path: Path) -> Optional[str]:
    """MIME type from the file header, ``None`` if Pillow can't identify it."""
    try:
        with Image.open(path) as img:
            fmt = img.format or ""
    except (UnidentifiedImageError, OSError) as exc:
        logger.debug("Could not identify %s: %s", path, exc)
        return None
    # Camera JPEGs with embedded previews are reported as MPO
    if fmt == "MPO":
        return "image/jpeg"
    return Image.MIME.get(fmt)


def image_size(path: Path) -> tuple[int, int]:
    try:
        with Image.open(path) as img:
            return img.size
    except (UnidentifiedImageError, OSError) as exc:
        logger.error("Reading image header of %s failed: %s", path, exc)
        raise DecodeError(f"Cannot read image header of {path}: {exc}") from exc


def output_extension(mime: str) -> str:
    return FORMAT_BY_MIME[mime][1]


def _target_mode(img: Image.Image, fmt: str) -> str:
    if fmt == "JPEG":
        return img.mode if img.mode in ("RGB", "L") else "RGB"
    # PNG / WebP keep alpha through the resample
    if img.mode in ("RGB", "RGBA", "L", "LA"):
        return img.mode
    has_alpha = "transparency" in img.info or img.mode.endswith("A")
    return "RGBA" if has_alpha else "RGB"


class Codec:
    """Decode a source, resample its crop box onto the target canvas, encode."""

    def __init__(self, options: ConversionOptions):
        self.options = options

    def _save_kwargs(self, fmt: str) -> dict[str, Any]:
        if fmt == "JPEG":
            return {"quality": self.options.quality, "optimize": True}
        if fmt == "PNG":
            return {"compress_level": self.options.png_compression}
        return {"quality": self.options.quality}

    def encode(self, source: Path, mime: str, crop: CropBox,
               target_w: int, target_h: int, out_base: Path) -> Path:
        fmt, ext = FORMAT_BY_MIME[mime]
        out_path = out_base.with_name(f"{out_base.name}.{ext}")

        try:
            with Image.open(source) as src:
                src.load()
                mode = _target_mode(src, fmt)
                if src.mode != mode:
                    with src.convert(mode) as converted:
                        canvas = converted.resize((target_w, target_h),
                                                  resample=Image.LANCZOS, box=crop.box)
                else:
                    canvas = src.resize((target_w, target_h),
                                        resample=Image.LANCZOS, box=crop.box)
        except (UnidentifiedImageError, OSError, ValueError) as exc:
            logger.error("Decoding %s failed: %s", source, exc)
            raise DecodeError(f"Cannot decode {source}: {exc}") from exc

        with canvas:
            try:
                canvas.save(out_path, fmt, **self._save_kwargs(fmt))
            except (OSError, ValueError) as exc:
                out_path.unlink(missing_ok=True)
                raise CacheWriteError(f"Cannot write {out_path}: {exc}") from exc

        logger.debug("Encoded %s (%dx%d) from %s", out_path.name, target_w, target_h, source.name)
        return out_path
