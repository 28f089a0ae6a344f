"""File-based key-value storage, one JSON-safe text file per slot."""

import re
from pathlib import Path
from typing import Optional

from street_translator.services.caching.key_value_storage import KeyValueStorage
from street_translator.services.exceptions import PersistenceError


_SAFE_SLOT = re.compile(r"[^A-Za-z0-9_.-]")


class FileKeyValueStorage(KeyValueStorage):
    """
    Stores each slot as `<directory>/<slot>.json`.

    Writes go to a temporary sibling file first and are then renamed over
    the target, so a crash mid-write never leaves a half-written slot.
    """

    SUFFIX = ".json"

    def __init__(self, directory: Path):
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def read(self, slot: str) -> Optional[str]:
        path = self._slot_path(slot)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Error reading {path}: {e}") from e

    def write(self, slot: str, data: str) -> None:
        path = self._slot_path(slot)
        tmp_path = path.with_name(path.name + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(data, encoding="utf-8")
            tmp_path.replace(path)
        except OSError as e:
            raise PersistenceError(f"Error writing {path}: {e}") from e

    def remove(self, slot: str) -> None:
        path = self._slot_path(slot)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise PersistenceError(f"Error deleting {path}: {e}") from e

    def _slot_path(self, slot: str) -> Path:
        """Get the file path for a slot name."""
        return self._directory / (_SAFE_SLOT.sub("_", slot) + self.SUFFIX)
