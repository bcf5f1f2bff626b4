"""Application services: one component per screen of the tracker."""

from .bmi_calculator import BMICalculator
from .calorie_estimator import CalorieEstimator
from .progress_tracker import ProgressTracker
from .results import AddExerciseResult, CalculationOutcome
from .workout_planner import WorkoutPlanner

__all__ = [
    "BMICalculator",
    "CalorieEstimator",
    "ProgressTracker",
    "WorkoutPlanner",
    "AddExerciseResult",
    "CalculationOutcome",
]
