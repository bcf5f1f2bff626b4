"""Result objects returned by application services.

Expected input problems come back as a failed result carrying a
ValidationFailure; they are never raised.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from fittrack.domain.shared.errors import ErrorKind, ValidationFailure
from fittrack.domain.workout.core.entities import Exercise

TResult = TypeVar("TResult")


@dataclass(frozen=True)
class CalculationOutcome(Generic[TResult]):
    """Outcome of a validated calculation.

    Attributes:
        result: Calculated value, None on failure
        error: Validation failure, None on success
        warning: Non-blocking advisory shown next to the result
        saved: False when the history entry could not be persisted
    """

    result: Optional[TResult] = None
    error: Optional[ValidationFailure] = None
    warning: Optional[str] = None
    saved: bool = False

    @property
    def success(self) -> bool:
        return self.error is None and self.result is not None

    @classmethod
    def failed(
        cls, kind: ErrorKind, message: str, field: Optional[str] = None
    ) -> "CalculationOutcome":
        return cls(error=ValidationFailure(kind=kind, message=message, field=field))


@dataclass(frozen=True)
class AddExerciseResult:
    """Outcome of WorkoutPlanner.add_exercise."""

    exercise: Optional[Exercise] = None
    error: Optional[ValidationFailure] = None
    saved: bool = False

    @property
    def success(self) -> bool:
        return self.error is None and self.exercise is not None
