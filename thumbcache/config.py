import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


CACHE_DIR        = Path(os.getenv("THUMBCACHE_DIR", "./cache"))
# Raw strings; ConversionOptions coerces and range-checks them
QUALITY          = os.getenv("THUMBCACHE_QUALITY", "75")
PNG_COMPRESSION  = os.getenv("THUMBCACHE_PNG_COMPRESSION", "5")
WEBP_ENABLED     = _env_bool("THUMBCACHE_WEBP")
LOG_LEVEL        = os.getenv("LOG_LEVEL", "INFO").upper()

# Content-sniffed MIME types accepted as thumbnail sources
ALLOWED_MIME_TYPES = ("image/jpeg", "image/png", "image/webp")

logger = logging.getLogger("thumbcache")


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
