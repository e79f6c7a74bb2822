from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ConversionOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    quality:         int  = Field(75, ge=0, le=100)   # JPEG / WebP
    png_compression: int  = Field(5, ge=0, le=9)
    webp:            bool = False


class ThumbnailResult(BaseModel):
    """Outcome of a single ``ThumbnailCache.make`` call.

    ``ok`` tells a served artifact apart from a rejected request, so callers
    never have to guess whether a string is a path or a message.
    """

    model_config = ConfigDict(frozen=True)

    ok:              bool
    path:            Optional[Path] = None
    error:           Optional[str]  = None
    cached:          bool           = False
    # Set when WebP mode is on and the conversion fell back to the raster
    transcode_error: Optional[str]  = None

    @model_validator(mode="after")
    def _check_tag(self) -> "ThumbnailResult":
        if self.ok and self.path is None:
            raise ValueError("successful result requires a path")
        if not self.ok and (self.error is None or self.path is not None):
            raise ValueError("failed result requires an error and no path")
        return self

    @classmethod
    def success(cls, path: Path, *, cached: bool = False,
                transcode_error: Optional[str] = None) -> "ThumbnailResult":
        return cls(ok=True, path=path, cached=cached, transcode_error=transcode_error)

    @classmethod
    def failure(cls, error: str) -> "ThumbnailResult":
        return cls(ok=False, error=error)
