"""Key-value store factory.

Environment-based store selection:
- FITTRACK_STORAGE_BACKEND=inmemory (default): transient, fast, isolated
- FITTRACK_STORAGE_BACKEND=json_file: one JSON file per key under
  FITTRACK_STORAGE_DIR

Usage:
    from fittrack.infrastructure.persistence.factory import create_key_value_store

    store = create_key_value_store(load_settings())
"""

import structlog

from fittrack.domain.shared.ports import KeyValueStore
from fittrack.infrastructure.config import Settings

from .in_memory.key_value_store import InMemoryKeyValueStore
from .json_file.key_value_store import JsonFileKeyValueStore

logger = structlog.get_logger(__name__)


def create_key_value_store(settings: Settings) -> KeyValueStore:
    """Create the key-value store selected by settings.

    Returns:
        KeyValueStore: Store instance
    """
    if settings.storage_backend == "json_file":
        logger.info("Using JSON file storage", directory=str(settings.storage_dir))
        return JsonFileKeyValueStore(settings.storage_dir)

    logger.info("Using in-memory storage", quota_bytes=settings.storage_quota_bytes)
    return InMemoryKeyValueStore(quota_bytes=settings.storage_quota_bytes)
