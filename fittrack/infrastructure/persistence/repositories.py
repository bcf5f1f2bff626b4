"""Concrete key-value repositories for fittrack state."""

from typing import Any

import structlog

from fittrack.domain.body_metrics.core.value_objects import (
    BMIHistoryEntry,
    CalorieHistoryEntry,
)
from fittrack.domain.progress.weight_entry import WeightEntry
from fittrack.domain.workout.core.entities import WeeklyPlan
from fittrack.domain.workout.core.ports import IWorkoutPlanRepository

from .base import KeyValueBaseRepository, KeyValueLogRepository
from .documents import (
    BMIHistoryDocument,
    CalorieHistoryDocument,
    WeeklyPlanDocument,
    WeightEntryDocument,
)

logger = structlog.get_logger(__name__)

BMI_HISTORY_KEY = "bmi_history"
CALORIE_HISTORY_KEY = "calorie_history"
WORKOUT_PLAN_KEY = "workout_plan"
WEIGHT_HISTORY_KEY = "weight_history"


class BMIHistoryRepository(KeyValueLogRepository[BMIHistoryEntry]):
    storage_key = BMI_HISTORY_KEY

    def to_document(self, entity: BMIHistoryEntry) -> dict[str, Any]:
        return BMIHistoryDocument.from_domain(entity).to_json_dict()

    def from_document(self, doc: Any) -> BMIHistoryEntry:
        return BMIHistoryDocument.model_validate(doc).to_domain()


class CalorieHistoryRepository(KeyValueLogRepository[CalorieHistoryEntry]):
    storage_key = CALORIE_HISTORY_KEY

    def to_document(self, entity: CalorieHistoryEntry) -> dict[str, Any]:
        return CalorieHistoryDocument.from_domain(entity).to_json_dict()

    def from_document(self, doc: Any) -> CalorieHistoryEntry:
        return CalorieHistoryDocument.model_validate(doc).to_domain()


class WeightHistoryRepository(KeyValueLogRepository[WeightEntry]):
    storage_key = WEIGHT_HISTORY_KEY

    def to_document(self, entity: WeightEntry) -> dict[str, Any]:
        return WeightEntryDocument.from_domain(entity).to_json_dict()

    def from_document(self, doc: Any) -> WeightEntry:
        return WeightEntryDocument.model_validate(doc).to_domain()


class WorkoutPlanRepository(KeyValueBaseRepository[WeeklyPlan], IWorkoutPlanRepository):
    """The weekly plan, stored whole under one key."""

    storage_key = WORKOUT_PLAN_KEY

    def to_document(self, entity: WeeklyPlan) -> dict[str, Any]:
        return WeeklyPlanDocument.from_domain(entity).to_json_dict()

    def from_document(self, doc: Any) -> WeeklyPlan:
        return WeeklyPlanDocument.model_validate(doc).to_domain()

    def load(self) -> WeeklyPlan:
        """Stored plan, or seven empty days when none is readable."""
        raw = self._store.load(self.storage_key)
        if raw is None:
            return WeeklyPlan()
        ok, plan = self._try_from_document(raw)
        if not ok:
            logger.error("Stored workout plan unreadable, starting empty")
            return WeeklyPlan()
        return plan

    def save(self, plan: WeeklyPlan) -> bool:
        return self._store.save(self.storage_key, self.to_document(plan))
