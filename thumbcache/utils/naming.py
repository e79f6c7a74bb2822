"""Cache key derivation.

A key looks like ``{slug}-{width}[x{height}]-{identity}-{version}``:

* ``slug`` is a transliterated, hyphenated form of the source file stem
  (omitted when nothing survives the clean-up),
* ``identity`` is the CRC32 of the source basename and groups every cached
  variant of one source for :meth:`ThumbnailCache.flush`,
* ``version`` changes when the source file is rewritten, so stale
  thumbnails are never served for an edited image.
"""

import html
import re
import unicodedata
from pathlib import Path
from typing import Optional

from thumbcache.utils.hashing import name_crc32, source_version

# Latin-1 characters NFKD would either keep or fold to a letter we don't want
_LATIN1_FOLD = str.maketrans({
    "æ": "a", "ð": "d", "ø": "o", "þ": "b", "ß": "s",
    "º": " ", "ª": " ", "°": " ",
})

_NON_ALNUM  = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def slugify(stem: str) -> str:
    text = html.escape(stem.lower()).translate(_LATIN1_FOLD)
    text = unicodedata.normalize("NFKD", text)
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    text = _NON_ALNUM.sub(" ", text).strip()
    return _WHITESPACE.sub("-", text)


def dimension_segment(width: int, height: Optional[int] = None) -> str:
    segment = str(width) if width > 0 else ""
    if height:
        segment += f"x{height}"
    return segment


def build_key(source: Path, width: int, height: Optional[int] = None) -> str:
    parts = [
        slugify(source.stem),
        dimension_segment(width, height),
        name_crc32(source),
        source_version(source),
    ]
    return "-".join(p for p in parts if p)


def parse_identity(entry_name: str) -> Optional[str]:
    """Return the identity segment of a cache file name, or ``None``.

    The segment is read from the right so hyphens inside the slug never
    shift it.
    """
    stem = entry_name.split(".", 1)[0]
    segments = stem.rsplit("-", 2)
    if len(segments) < 3:
        return None
    return segments[-2]
