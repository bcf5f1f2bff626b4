"""Configuration for the infrastructure layer.

Settings come from environment variables, optionally seeded from a
``.env`` file:

    FITTRACK_STORAGE_BACKEND=json_file     # or "inmemory" (default)
    FITTRACK_STORAGE_DIR=~/.fittrack
    FITTRACK_STORAGE_QUOTA_BYTES=5242880   # in-memory backend only
    LOG_LEVEL=DEBUG
    LOG_FORMAT=json                        # or "console" (default)
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

STORAGE_BACKENDS = ("inmemory", "json_file")
LOG_FORMATS = ("console", "json")


@dataclass(frozen=True)
class Settings:
    """Runtime settings.

    Attributes:
        storage_backend: "inmemory" or "json_file"
        storage_dir: Directory used by the json_file backend
        storage_quota_bytes: Optional byte quota for the in-memory backend
        log_level: Standard logging level name
        log_format: "console" or "json"
    """

    storage_backend: str = "inmemory"
    storage_dir: Path = Path(".fittrack")
    storage_quota_bytes: Optional[int] = None
    log_level: str = "INFO"
    log_format: str = "console"

    def __post_init__(self) -> None:
        if self.storage_backend not in STORAGE_BACKENDS:
            raise ValueError(
                f"FITTRACK_STORAGE_BACKEND must be one of {STORAGE_BACKENDS}, "
                f"got {self.storage_backend!r}"
            )
        if self.log_format not in LOG_FORMATS:
            raise ValueError(
                f"LOG_FORMAT must be one of {LOG_FORMATS}, got {self.log_format!r}"
            )
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"LOG_LEVEL is not a logging level: {self.log_level!r}")
        if self.storage_quota_bytes is not None and self.storage_quota_bytes <= 0:
            raise ValueError(
                "FITTRACK_STORAGE_QUOTA_BYTES must be positive, "
                f"got {self.storage_quota_bytes}"
            )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def _parse_quota(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(
            f"FITTRACK_STORAGE_QUOTA_BYTES must be an integer, got {raw!r}"
        ) from e


def load_settings(env_file: Optional[Union[str, Path]] = None) -> Settings:
    """Build settings from the environment.

    Args:
        env_file: Optional .env file loaded first; existing environment
            variables take precedence over its values

    Returns:
        Settings: Validated settings

    Raises:
        ValueError: If a variable has an invalid value
    """
    if env_file is not None and Path(env_file).exists():
        load_dotenv(env_file)

    return Settings(
        storage_backend=os.getenv("FITTRACK_STORAGE_BACKEND", "inmemory").strip().lower(),
        storage_dir=Path(os.getenv("FITTRACK_STORAGE_DIR", ".fittrack")).expanduser(),
        storage_quota_bytes=_parse_quota(os.getenv("FITTRACK_STORAGE_QUOTA_BYTES")),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        log_format=os.getenv("LOG_FORMAT", "console").strip().lower(),
    )
