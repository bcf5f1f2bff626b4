"""Persistence adapters: key-value stores, documents and repositories."""

from .factory import create_key_value_store
from .in_memory.key_value_store import InMemoryKeyValueStore
from .json_file.key_value_store import JsonFileKeyValueStore
from .repositories import (
    BMIHistoryRepository,
    CalorieHistoryRepository,
    WeightHistoryRepository,
    WorkoutPlanRepository,
)

__all__ = [
    "create_key_value_store",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "BMIHistoryRepository",
    "CalorieHistoryRepository",
    "WeightHistoryRepository",
    "WorkoutPlanRepository",
]
