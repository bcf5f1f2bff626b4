"""Value objects for workout domain."""

from .exercise_id import ExerciseIdGenerator
from .weekday import DAY_NAMES, Weekday

__all__ = ["DAY_NAMES", "ExerciseIdGenerator", "Weekday"]
