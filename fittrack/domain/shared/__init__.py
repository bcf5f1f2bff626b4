"""Shared kernel: units, measurements, validation and persistence port."""

from .errors import (
    ErrorKind,
    FitTrackError,
    InvalidMeasurementError,
    PersistenceError,
    StorageQuotaExceededError,
    ValidationFailure,
)
from .measurement import Measurement
from .ports import ILogRepository, KeyValueStore
from .units import LengthUnit, MassUnit
from .validation import ValidationResult, Validator, parse_float

__all__ = [
    "ErrorKind",
    "FitTrackError",
    "InvalidMeasurementError",
    "PersistenceError",
    "StorageQuotaExceededError",
    "ValidationFailure",
    "Measurement",
    "ILogRepository",
    "KeyValueStore",
    "LengthUnit",
    "MassUnit",
    "ValidationResult",
    "Validator",
    "parse_float",
]
