"""
Persistence documents.

Pydantic models describing the JSON stored under each key. Field names
are serialised in camelCase (``weeklyPlan``, ``lastModified``,
``addedAt``), matching the blobs written by the web client, so
existing local-storage exports load unchanged.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from fittrack.domain.body_metrics.core.value_objects import (
    ActivityLevel,
    BMICategory,
    BMIHistoryEntry,
    CalorieHistoryEntry,
    CalorieInputs,
    Gender,
)
from fittrack.domain.progress.weight_entry import WeightEntry
from fittrack.domain.shared.measurement import Measurement
from fittrack.domain.shared.units import LengthUnit, MassUnit
from fittrack.domain.workout.core.entities import Exercise, WeeklyPlan

logger = structlog.get_logger(__name__)


class _Document(BaseModel):
    """Base document: camelCase aliases, populated by either name."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def _ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Naive datetimes are assumed to be UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _parse_timestamp(value: object) -> object:
    # Date-only strings ("2025-01-15") become midnight datetimes
    if isinstance(value, str) and len(value) == 10:
        return datetime.fromisoformat(value)
    return value


class MeasurementDocument(_Document):
    """A value with its unit tag; ``inches`` only for feet."""

    value: float
    unit: str
    inches: Optional[float] = None

    @classmethod
    def from_domain(cls, measurement: Measurement) -> MeasurementDocument:
        inches = measurement.inches if measurement.unit is LengthUnit.FEET_INCHES else None
        return cls(value=measurement.value, unit=measurement.unit.value, inches=inches)

    def to_mass(self) -> Measurement:
        return Measurement.mass(self.value, self.unit)

    def to_length(self) -> Measurement:
        return Measurement.length(self.value, self.unit, self.inches or 0.0)


class BMIHistoryDocument(_Document):
    bmi: float
    category: str
    weight: MeasurementDocument
    height: MeasurementDocument
    timestamp: datetime

    @field_validator("timestamp")
    @classmethod
    def timestamp_utc(cls, v: datetime) -> datetime:
        return _ensure_utc(v)

    @classmethod
    def from_domain(cls, entry: BMIHistoryEntry) -> BMIHistoryDocument:
        return cls(
            bmi=entry.bmi,
            category=entry.category.value,
            weight=MeasurementDocument.from_domain(entry.weight),
            height=MeasurementDocument.from_domain(entry.height),
            timestamp=entry.timestamp,
        )

    def to_domain(self) -> BMIHistoryEntry:
        try:
            category = BMICategory(self.category)
        except ValueError:
            category = BMICategory.from_bmi(self.bmi)
        return BMIHistoryEntry(
            bmi=self.bmi,
            category=category,
            weight=self.weight.to_mass(),
            height=self.height.to_length(),
            timestamp=self.timestamp,
        )


class CalorieInputsDocument(_Document):
    age: float
    gender: str
    weight: MeasurementDocument
    height: MeasurementDocument
    activity_level: str

    @classmethod
    def from_domain(cls, inputs: CalorieInputs) -> CalorieInputsDocument:
        return cls(
            age=inputs.age,
            gender=inputs.gender.value,
            weight=MeasurementDocument.from_domain(inputs.weight),
            height=MeasurementDocument.from_domain(inputs.height),
            activity_level=inputs.activity_level.value,
        )

    def to_domain(self) -> CalorieInputs:
        return CalorieInputs(
            age=self.age,
            gender=Gender.from_raw(self.gender),
            weight=self.weight.to_mass(),
            height=self.height.to_length(),
            activity_level=ActivityLevel.from_key(self.activity_level),
        )


class CalorieHistoryDocument(_Document):
    bmr: int
    maintenance: int
    weight_loss: int
    weight_gain: int
    inputs: CalorieInputsDocument
    timestamp: datetime

    @field_validator("timestamp")
    @classmethod
    def timestamp_utc(cls, v: datetime) -> datetime:
        return _ensure_utc(v)

    @classmethod
    def from_domain(cls, entry: CalorieHistoryEntry) -> CalorieHistoryDocument:
        return cls(
            bmr=entry.bmr,
            maintenance=entry.maintenance,
            weight_loss=entry.weight_loss,
            weight_gain=entry.weight_gain,
            inputs=CalorieInputsDocument.from_domain(entry.inputs),
            timestamp=entry.timestamp,
        )

    def to_domain(self) -> CalorieHistoryEntry:
        return CalorieHistoryEntry(
            bmr=self.bmr,
            maintenance=self.maintenance,
            weight_loss=self.weight_loss,
            weight_gain=self.weight_gain,
            inputs=self.inputs.to_domain(),
            timestamp=self.timestamp,
        )


class ExerciseDocument(_Document):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    sets: int
    reps: int
    completed: bool = False
    added_at: datetime
    completed_at: Optional[datetime] = None

    @field_validator("added_at", "completed_at")
    @classmethod
    def timestamps_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return _ensure_utc(v)

    @classmethod
    def from_domain(cls, exercise: Exercise) -> ExerciseDocument:
        return cls(
            id=exercise.id,
            name=exercise.name,
            sets=exercise.sets,
            reps=exercise.reps,
            completed=exercise.completed,
            added_at=exercise.added_at,
            completed_at=exercise.completed_at,
        )

    def to_domain(self) -> Exercise:
        # Blobs from the web client can hold 0 after truncating "0.5"
        return Exercise(
            id=self.id,
            name=self.name,
            sets=max(1, self.sets),
            reps=max(1, self.reps),
            completed=self.completed,
            added_at=self.added_at,
            completed_at=self.completed_at,
        )


class WeeklyPlanDocument(_Document):
    weekly_plan: dict[str, list[ExerciseDocument]] = Field(default_factory=dict)
    last_modified: Optional[datetime] = None

    @field_validator("last_modified")
    @classmethod
    def last_modified_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return _ensure_utc(v)

    @field_validator("weekly_plan", mode="before")
    @classmethod
    def skip_unreadable_exercises(cls, v: object) -> object:
        """Drop exercises that fail validation, keeping the rest of the plan."""
        if not isinstance(v, dict):
            return v
        readable = {}
        for day, exercises in v.items():
            if not isinstance(exercises, list):
                logger.warning("Skipping unreadable day", day=day)
                readable[day] = []
                continue
            kept = []
            for raw in exercises:
                try:
                    kept.append(ExerciseDocument.model_validate(raw))
                except ValidationError as e:
                    logger.warning(
                        "Skipping unreadable exercise", day=day, error=str(e)
                    )
            readable[day] = kept
        return readable

    @classmethod
    def from_domain(cls, plan: WeeklyPlan) -> WeeklyPlanDocument:
        return cls(
            weekly_plan={
                day: [ExerciseDocument.from_domain(ex) for ex in exercises]
                for day, exercises in plan.weekly_plan.items()
            },
            last_modified=plan.last_modified,
        )

    def to_domain(self) -> WeeklyPlan:
        return WeeklyPlan(
            weekly_plan={
                day: [doc.to_domain() for doc in exercises]
                for day, exercises in self.weekly_plan.items()
            },
            last_modified=self.last_modified,
        )


class WeightEntryDocument(_Document):
    date: datetime
    weight: float
    unit: str = MassUnit.KILOGRAM.value

    @field_validator("date", mode="before")
    @classmethod
    def date_only(cls, v: object) -> object:
        return _parse_timestamp(v)

    @field_validator("date")
    @classmethod
    def date_utc(cls, v: datetime) -> datetime:
        return _ensure_utc(v)

    @classmethod
    def from_domain(cls, entry: WeightEntry) -> WeightEntryDocument:
        return cls(date=entry.date, weight=entry.weight, unit=entry.unit.value)

    def to_domain(self) -> WeightEntry:
        return WeightEntry(
            date=self.date,
            weight=self.weight,
            unit=MassUnit.parse(self.unit) or MassUnit.KILOGRAM,
        )
