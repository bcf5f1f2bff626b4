"""
Domain errors.

Expected user-input problems are never raised: they travel as
``ValidationFailure`` values inside result objects. Exceptions are kept
for programming errors and adapter internals.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Taxonomy of recoverable validation failures."""

    EMPTY_INPUT = "empty_input"
    NON_NUMERIC_INPUT = "non_numeric_input"
    NEGATIVE_OR_ZERO_INPUT = "negative_or_zero_input"
    OUT_OF_RANGE_INPUT = "out_of_range_input"
    INVALID_SELECTION = "invalid_selection"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ValidationFailure:
    """A single recoverable failure with a human-readable message.

    Attributes:
        kind: Failure category
        message: Sentence ready for display
        field: Input field the failure refers to, if any
    """

    kind: ErrorKind
    message: str
    field: Optional[str] = None

    def __str__(self) -> str:
        return self.message


# ═══════════════════════════════════════════════════════════
# EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class FitTrackError(Exception):
    """Base exception for all fittrack errors."""

    pass


class InvalidMeasurementError(FitTrackError):
    """Raised when a measurement is built with a unit of the wrong dimension."""

    pass


class PersistenceError(FitTrackError):
    """
    Key-value store operation failed.

    Raised inside store adapters and caught at the store boundary, where
    it is logged and reported as a failed save.
    """

    def __init__(self, key: str, reason: str):
        super().__init__(f"Persistence failed for key '{key}': {reason}")
        self.key = key
        self.reason = reason


class StorageQuotaExceededError(PersistenceError):
    """Raised when a write would exceed the configured storage quota."""

    def __init__(self, key: str, required: int, quota: int):
        super().__init__(key, f"quota exceeded ({required} > {quota} bytes)")
        self.required = required
        self.quota = quota
