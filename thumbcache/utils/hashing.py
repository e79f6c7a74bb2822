import zlib
from pathlib import Path


def _crc32_hex(data: bytes) -> str:
    return f"{zlib.crc32(data) & 0xFFFFFFFF:08x}"


def name_crc32(path: Path) -> str:
    """Identity fingerprint: CRC32 of the basename, extension included."""
    return _crc32_hex(path.name.encode("utf-8"))


def source_version(path: Path) -> str:
    """Short fingerprint that changes whenever the source is rewritten."""
    st = path.stat()
    return _crc32_hex(f"{st.st_mtime_ns}:{st.st_size}".encode("ascii"))
