class ThumbcacheError(Exception):
    """Base class for every error raised by thumbcache."""


class ConfigurationError(ThumbcacheError):
    """Cache directory unusable or conversion options out of range."""


class DecodeError(ThumbcacheError):
    """Source raster could not be decoded by its detected format."""


class CacheWriteError(ThumbcacheError):
    """Encoded thumbnail could not be written into the cache directory."""


class TranscodeError(ThumbcacheError):
    """WebP conversion of a cached raster failed."""
