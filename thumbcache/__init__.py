from thumbcache.cache import ThumbnailCache
from thumbcache.errors import (
    CacheWriteError,
    ConfigurationError,
    DecodeError,
    ThumbcacheError,
    TranscodeError,
)
from thumbcache.schemas import ConversionOptions, ThumbnailResult

__all__ = [
    "ThumbnailCache",
    "ThumbnailResult",
    "ConversionOptions",
    "ThumbcacheError",
    "ConfigurationError",
    "DecodeError",
    "CacheWriteError",
    "TranscodeError",
]
