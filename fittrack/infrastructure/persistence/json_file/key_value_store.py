"""JSON-file implementation of KeyValueStore.

Each key is stored as ``<directory>/<key>.json``. Writes go to a
temporary file first and are moved into place, so a crash never leaves a
half-written value behind.
"""

import json
import os
import re
from pathlib import Path
from typing import Any, Optional, Union

import structlog

from fittrack.domain.shared.errors import PersistenceError
from fittrack.domain.shared.ports import KeyValueStore

logger = structlog.get_logger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")
_PROBE_KEY = "__storage_test__"


class JsonFileKeyValueStore(KeyValueStore):
    """Directory-backed key-value store."""

    def __init__(self, directory: Union[str, Path]) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def _path(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key) or key.startswith("."):
            raise PersistenceError(key, "key contains unsupported characters")
        return self._directory / f"{key}.json"

    def save(self, key: str, value: Any) -> bool:
        try:
            self._write(key, value)
        except PersistenceError as e:
            logger.warning("Save failed", key=key, reason=e.reason)
            return False
        return True

    def _write(self, key: str, value: Any) -> None:
        path = self._path(key)
        try:
            serialized = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise PersistenceError(key, f"value is not serialisable: {e}") from e

        tmp_path = path.with_suffix(".json.tmp")
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(serialized, encoding="utf-8")
            os.replace(tmp_path, path)
        except OSError as e:
            raise PersistenceError(key, str(e)) from e

    def load(self, key: str) -> Optional[Any]:
        try:
            path = self._path(key)
        except PersistenceError as e:
            logger.error("Error loading data", key=key, error=e.reason)
            return None
        try:
            serialized = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.error("Error loading data", key=key, error=str(e))
            return None
        if not serialized:
            return None
        try:
            return json.loads(serialized)
        except json.JSONDecodeError as e:
            logger.error("Error loading data", key=key, error=str(e))
            return None

    def remove(self, key: str) -> None:
        try:
            self._path(key).unlink(missing_ok=True)
        except (PersistenceError, OSError) as e:
            logger.error("Error removing data", key=key, error=str(e))

    def clear(self) -> None:
        if not self._directory.is_dir():
            return
        for path in self._directory.glob("*.json"):
            try:
                path.unlink()
            except OSError as e:
                logger.error("Error clearing storage", path=str(path), error=str(e))

    def is_available(self) -> bool:
        """Probe the directory with a write and delete."""
        try:
            self._write(_PROBE_KEY, _PROBE_KEY)
            self._path(_PROBE_KEY).unlink()
        except (PersistenceError, OSError):
            return False
        return True

    def size_bytes(self) -> int:
        if not self._directory.is_dir():
            return 0
        total = 0
        for path in self._directory.glob("*.json"):
            try:
                total += len(path.stem) + len(path.read_text(encoding="utf-8"))
            except OSError as e:
                logger.debug("Skipping unreadable file", path=str(path), error=str(e))
        return total
