"""ProgressTracker - workout statistics and weight history."""

from datetime import datetime, timezone
from typing import Callable, Optional, Sequence

import structlog

from fittrack.domain.progress import (
    ChartPoint,
    WeightEntry,
    WorkoutStats,
    derive_workout_stats,
    prepare_weight_chart,
)
from fittrack.domain.shared.errors import ErrorKind
from fittrack.domain.shared.ports import ILogRepository
from fittrack.domain.shared.units import MassUnit
from fittrack.domain.shared.validation import RawValue, Validator, parse_float
from fittrack.domain.workout.core.entities import WeeklyPlan

from .results import CalculationOutcome

logger = structlog.get_logger(__name__)


class ProgressTracker:
    """Derive progress views from the workout plan and weight log.

    The plan comes from ``plan_source``, normally the planner's snapshot
    method, so statistics follow the session state even when saving
    failed.
    """

    def __init__(
        self,
        plan_source: Callable[[], WeeklyPlan],
        weight_history: ILogRepository[WeightEntry],
        validator: Validator,
    ) -> None:
        self._plan_source = plan_source
        self._weights = weight_history
        self._validator = validator

    def get_workout_stats(self, plan: Optional[WeeklyPlan] = None) -> WorkoutStats:
        """Statistics for the given plan, or the current session plan."""
        if plan is None:
            plan = self._plan_source()
        return derive_workout_stats(plan)

    def get_weight_chart(
        self, entries: Optional[Sequence[WeightEntry]] = None
    ) -> list[ChartPoint]:
        """Chart points for the given entries, or the persisted weight log."""
        if entries is None:
            entries = self._weights.load_all()
        return prepare_weight_chart(entries)

    def add_weight_entry(
        self,
        date: Optional[datetime],
        weight: RawValue,
        unit: object,
    ) -> CalculationOutcome[WeightEntry]:
        """Validate and append a body-weight entry to the weight log.

        Args:
            date: When the weight was measured, now if None
            weight: Weight value, 1-500
            unit: "kg" or "lbs" (anything else is taken as kg)

        Returns:
            CalculationOutcome: The stored entry, or the validation failure
        """
        if parse_float(weight) is None:
            return CalculationOutcome.failed(
                ErrorKind.NON_NUMERIC_INPUT,
                self._validator.get_error_message("nonNumeric", "weight"),
                "weight",
            )
        if not self._validator.is_valid_weight(weight):
            return CalculationOutcome.failed(
                ErrorKind.OUT_OF_RANGE_INPUT,
                self._validator.get_error_message("outOfRange", "Weight"),
                "weight",
            )

        entry = WeightEntry(
            date=date or datetime.now(timezone.utc),
            weight=parse_float(weight),
            unit=MassUnit.parse(unit) or MassUnit.KILOGRAM,
        )
        saved = self._weights.append(entry)
        if not saved:
            logger.warning("Weight history not saved, changes kept in memory only")

        logger.info("Weight recorded", weight=entry.weight, unit=entry.unit.value)
        return CalculationOutcome(result=entry, saved=saved)
