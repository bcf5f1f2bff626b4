"""Base key-value repositories with reusable patterns.

Provides common functionality for repositories built on a KeyValueStore:
- Document mapping (domain <-> JSON)
- Tolerant loading (unreadable documents are logged and skipped)
- Save failures reported as False, never raised

Subclasses implement ``storage_key``, ``to_document`` and ``from_document``.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic

import structlog
from pydantic import ValidationError

from fittrack.domain.shared.ports import ILogRepository, KeyValueStore, TEntity

logger = structlog.get_logger(__name__)


class KeyValueBaseRepository(ABC, Generic[TEntity]):
    """
    Abstract base class for repositories stored under one key.

    Example:
        class WeightHistoryRepository(KeyValueLogRepository[WeightEntry]):
            storage_key = "weight_history"

            def to_document(self, entry: WeightEntry) -> dict:
                ...

            def from_document(self, doc: dict) -> WeightEntry:
                ...
    """

    storage_key: str

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    @abstractmethod
    def to_document(self, entity: TEntity) -> dict[str, Any]:
        """Convert a domain object to a JSON-ready document."""
        pass

    @abstractmethod
    def from_document(self, doc: Any) -> TEntity:
        """
        Convert a stored document to a domain object.

        Raises:
            ValidationError: If the document does not match the schema
        """
        pass

    def _try_from_document(self, doc: Any) -> tuple[bool, Any]:
        try:
            return True, self.from_document(doc)
        except (ValidationError, TypeError, ValueError) as e:
            logger.warning(
                "Skipping unreadable document", key=self.storage_key, error=str(e)
            )
            return False, None


class KeyValueLogRepository(KeyValueBaseRepository[TEntity], ILogRepository[TEntity]):
    """Append-only ordered log stored as a JSON list.

    Entries whose save failed are held in memory and retried with the
    next append, so the session still sees them.
    """

    def __init__(self, store: KeyValueStore) -> None:
        super().__init__(store)
        self._unsaved: list[dict[str, Any]] = []

    def load_all(self) -> list[TEntity]:
        """All readable entries, oldest first."""
        entries = []
        for doc in self._stored_documents() + self._unsaved:
            ok, entity = self._try_from_document(doc)
            if ok:
                entries.append(entity)
        return entries

    def append(self, entity: TEntity) -> bool:
        """Append one entry and persist the whole log.

        Stored documents are kept as-is, including any this process cannot
        read, so appending never drops data.
        """
        self._unsaved.append(self.to_document(entity))
        docs = self._stored_documents() + self._unsaved
        saved = self._store.save(self.storage_key, docs)
        if saved:
            self._unsaved = []
        else:
            logger.warning(
                "Log entry held in memory",
                key=self.storage_key,
                unsaved=len(self._unsaved),
            )
        return saved

    def replace_all(self, entities: list[TEntity]) -> bool:
        self._unsaved = []
        return self._store.save(
            self.storage_key, [self.to_document(entity) for entity in entities]
        )

    def clear(self) -> None:
        self._unsaved = []
        self._store.remove(self.storage_key)

    def _stored_documents(self) -> list[Any]:
        raw = self._store.load(self.storage_key)
        if raw is None:
            return []
        if not isinstance(raw, list):
            logger.warning("Stored log is not a list", key=self.storage_key)
            return []
        return raw
