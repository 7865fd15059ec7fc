"""
Local filesystem storage backend.

Every key becomes one ``<key>.json`` file directly inside the base
directory. Keys are plain names; anything that could address another
directory is refused.
"""

import logging
import re
from pathlib import Path

from .base import (
    StorageError,
    StorageNotFoundError,
    StoragePermissionError,
    StorageService,
)

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


class LocalStorageService(StorageService):
    """Keeps each document as a JSON file below ``base_path``."""

    suffix = ".json"

    def __init__(self, base_path: str = "storage"):
        self.base_path = Path(base_path)
        self.base_path.mkdir(parents=True, exist_ok=True)

    def path_for(self, key: str) -> Path:
        """File backing ``key``."""
        if not _KEY_PATTERN.match(key) or ".." in key:
            raise StorageError(f"Invalid storage key: {key!r}")
        return self.base_path / f"{key}{self.suffix}"

    def write(self, key: str, content: bytes) -> None:
        path = self.path_for(key)
        try:
            path.write_bytes(content)
        except PermissionError as e:
            raise StoragePermissionError(f"Cannot write {path}: {e}") from e
        except OSError as e:
            raise StorageError(f"Failed to write {path}: {e}") from e
        logger.debug(f"Wrote {len(content)} bytes to {path}")

    def read(self, key: str) -> bytes:
        path = self.path_for(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            raise StorageNotFoundError(f"Nothing stored under {key!r}") from None
        except PermissionError as e:
            raise StoragePermissionError(f"Cannot read {path}: {e}") from e
        except OSError as e:
            raise StorageError(f"Failed to read {path}: {e}") from e

    def exists(self, key: str) -> bool:
        return self.path_for(key).is_file()

    def delete(self, key: str) -> bool:
        path = self.path_for(key)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except PermissionError as e:
            raise StoragePermissionError(f"Cannot delete {path}: {e}") from e
        except OSError as e:
            raise StorageError(f"Failed to delete {path}: {e}") from e
        return True
