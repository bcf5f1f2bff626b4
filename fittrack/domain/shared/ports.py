"""Persistence ports consumed by the core."""

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

TEntity = TypeVar("TEntity")


class KeyValueStore(ABC):
    """Port for string-keyed persistence of JSON-serialisable values.

    Adapters must round-trip values through a textual serialisation
    (order-preserving for lists, keys-as-given for mappings) and must not
    raise on expected failures: ``save`` reports them by returning False.
    """

    @abstractmethod
    def save(self, key: str, value: Any) -> bool:
        """Persist value under key.

        Args:
            key: Storage key
            value: JSON-serialisable value

        Returns:
            bool: True if the value was stored
        """
        pass

    @abstractmethod
    def load(self, key: str) -> Optional[Any]:
        """Load the value stored under key.

        Returns:
            Deserialised value, or None if missing or unreadable
        """
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete key if present."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Delete every key."""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check whether the store can currently accept writes."""
        pass

    @abstractmethod
    def size_bytes(self) -> int:
        """Approximate number of bytes used by keys and serialised values."""
        pass


class ILogRepository(ABC, Generic[TEntity]):
    """Port for an append-only, ordered log of immutable entries."""

    @abstractmethod
    def append(self, entity: TEntity) -> bool:
        """Append an entry and persist the log.

        Returns:
            bool: False if the log could not be persisted
        """
        pass

    @abstractmethod
    def load_all(self) -> list[TEntity]:
        """All entries, oldest first."""
        pass
