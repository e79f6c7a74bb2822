from pathlib import Path
from typing import Iterable, Optional

from thumbcache.config import logger
from thumbcache.errors import ConfigurationError


class LocalStorage:
    """Flat cache directory; the file name is the only index."""

    def __init__(self, root: Path, mode: int = 0o755):
        self.root = Path(root)
        try:
            self.root.mkdir(mode=mode, parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigurationError(f"Could not create cache folder {self.root}: {exc}") from exc
        if not self.root.is_dir():
            raise ConfigurationError(f"Cache path is not a directory: {self.root}")

    def base_path(self, key: str) -> Path:
        return self.root / key

    def find(self, key: str, extensions: Iterable[str]) -> Optional[Path]:
        """Return the first existing ``{key}.{ext}`` file, in the given order."""
        for ext in extensions:
            candidate = self.root / f"{key}.{ext}"
            if candidate.is_file():
                return candidate
        return None

    def list_files(self) -> list[Path]:
        return sorted(p for p in self.root.iterdir() if p.is_file())

    def delete_file(self, path: Path) -> bool:
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            logger.warning("Failed deleting cache entry %s: %s", path.name, exc)
            return False
        logger.debug("Deleted cache entry %s", path.name)
        return True
