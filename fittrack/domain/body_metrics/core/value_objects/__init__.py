"""Value objects for body metrics domain."""

from .activity_level import ActivityLevel
from .bmi_category import BMICategory
from .bmi_result import BMIResult
from .calorie_result import CALORIE_ADJUSTMENT, CalorieResult
from .gender import Gender
from .history_entry import BMIHistoryEntry, CalorieHistoryEntry, CalorieInputs

__all__ = [
    "ActivityLevel",
    "BMICategory",
    "BMIResult",
    "CALORIE_ADJUSTMENT",
    "CalorieResult",
    "Gender",
    "BMIHistoryEntry",
    "CalorieHistoryEntry",
    "CalorieInputs",
]
