"""History entries - immutable snapshots of past calculations."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from ....shared.measurement import Measurement
from .activity_level import ActivityLevel
from .bmi_category import BMICategory
from .bmi_result import BMIResult
from .calorie_result import CalorieResult
from .gender import Gender


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class BMIHistoryEntry:
    """Snapshot of one BMI calculation and the inputs that produced it."""

    bmi: float
    category: BMICategory
    weight: Measurement
    height: Measurement
    timestamp: datetime = field(default_factory=_utcnow)

    @classmethod
    def record(
        cls, result: BMIResult, weight: Measurement, height: Measurement
    ) -> "BMIHistoryEntry":
        return cls(
            bmi=result.bmi,
            category=result.category,
            weight=weight,
            height=height,
        )


@dataclass(frozen=True)
class CalorieInputs:
    """Structured inputs of a calorie calculation."""

    age: float
    gender: Gender
    weight: Measurement
    height: Measurement
    activity_level: ActivityLevel


@dataclass(frozen=True)
class CalorieHistoryEntry:
    """Snapshot of one calorie calculation and its inputs."""

    bmr: int
    maintenance: int
    weight_loss: int
    weight_gain: int
    inputs: CalorieInputs
    timestamp: datetime = field(default_factory=_utcnow)

    @classmethod
    def record(cls, result: CalorieResult, inputs: CalorieInputs) -> "CalorieHistoryEntry":
        return cls(
            bmr=result.bmr,
            maintenance=result.maintenance,
            weight_loss=result.weight_loss,
            weight_gain=result.weight_gain,
            inputs=inputs,
        )
