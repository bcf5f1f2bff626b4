"""In-memory implementation of KeyValueStore."""

import json
from typing import Any, Optional

import structlog

from fittrack.domain.shared.errors import PersistenceError, StorageQuotaExceededError
from fittrack.domain.shared.ports import KeyValueStore

logger = structlog.get_logger(__name__)


class InMemoryKeyValueStore(KeyValueStore):
    """
    In-memory key-value store.

    Values are kept as JSON text, so everything saved goes through the
    same serialisation round-trip as a persistent store. Suitable for
    tests and for sessions that do not need to survive a restart.

    An optional byte quota makes writes fail the way a full browser
    storage does.
    """

    def __init__(self, quota_bytes: Optional[int] = None) -> None:
        """Initialize empty store.

        Args:
            quota_bytes: Maximum total size of keys and values, None for no limit
        """
        self._data: dict[str, str] = {}
        self._quota_bytes = quota_bytes

    def save(self, key: str, value: Any) -> bool:
        try:
            self._write(key, value)
        except PersistenceError as e:
            logger.warning("Save failed", key=key, reason=e.reason)
            return False
        return True

    def _write(self, key: str, value: Any) -> None:
        try:
            serialized = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise PersistenceError(key, f"value is not serialisable: {e}") from e

        if self._quota_bytes is not None:
            current = self.size_bytes()
            if key in self._data:
                current -= len(key) + len(self._data[key])
            required = current + len(key) + len(serialized)
            if required > self._quota_bytes:
                raise StorageQuotaExceededError(key, required, self._quota_bytes)

        self._data[key] = serialized

    def load(self, key: str) -> Optional[Any]:
        serialized = self._data.get(key)
        if not serialized:
            return None
        try:
            return json.loads(serialized)
        except json.JSONDecodeError as e:
            logger.error("Error loading data", key=key, error=str(e))
            return None

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()

    def is_available(self) -> bool:
        return True

    def size_bytes(self) -> int:
        return sum(len(key) + len(value) for key, value in self._data.items())

    def keys(self) -> list[str]:
        """Stored keys, in insertion order."""
        return list(self._data)
