"""WorkoutPlanner - CRUD over the weekly workout plan."""

import copy
import math
from typing import Optional

import structlog

from fittrack.domain.shared.errors import ErrorKind
from fittrack.domain.shared.validation import (
    RawValue,
    ValidationResult,
    Validator,
    parse_float,
)
from fittrack.domain.workout.core.entities import Exercise, WeeklyPlan
from fittrack.domain.workout.core.ports import IWorkoutPlanRepository
from fittrack.domain.workout.core.value_objects import ExerciseIdGenerator, Weekday

from .results import AddExerciseResult

logger = structlog.get_logger(__name__)

EMPTY_NAME_MESSAGE = "Please enter an exercise name"
INVALID_DAY_MESSAGE = "Please select a valid day of the week"


class WorkoutPlanner:
    """Holds the session's weekly plan and persists every change.

    The plan is loaded once, at construction. After that the in-memory
    plan is authoritative: a failed save is logged and the change is kept.
    """

    def __init__(
        self,
        repository: IWorkoutPlanRepository,
        validator: Validator,
        id_generator: Optional[ExerciseIdGenerator] = None,
    ) -> None:
        self._repository = repository
        self._validator = validator
        self._ids = id_generator or ExerciseIdGenerator()
        self._plan = repository.load()

    def add_exercise(
        self, day: object, name: RawValue, sets: RawValue, reps: RawValue
    ) -> AddExerciseResult:
        """Schedule a new exercise at the end of a day.

        Checks run in the order name, sets, reps, day and stop at the
        first failure. Sets and reps may be fractional; they are stored
        truncated, never below 1.

        Args:
            day: Weekday name, case-insensitive
            name: Exercise name
            sets: Number of sets
            reps: Repetitions per set

        Returns:
            AddExerciseResult: Created exercise, or the first failure
        """
        validation = self._validate_exercise(day, name, sets, reps)
        if not validation.is_valid:
            logger.debug("Exercise rejected", reason=validation.error.message)
            return AddExerciseResult(error=validation.error)

        weekday = Weekday.parse(day)
        exercise = Exercise(
            id=self._ids.generate(),
            name=name.strip(),
            sets=_to_count(sets),
            reps=_to_count(reps),
        )
        self._plan.add(weekday, exercise)
        saved = self._persist()

        logger.info(
            "Exercise added",
            day=weekday.value,
            exercise_id=exercise.id,
            name=exercise.name,
        )
        return AddExerciseResult(exercise=copy.deepcopy(exercise), saved=saved)

    def remove_exercise(self, day: object, exercise_id: str) -> bool:
        """Remove one exercise; False if the day or id is unknown."""
        weekday = Weekday.parse(day)
        if weekday is None or not self._plan.remove(weekday, exercise_id):
            logger.debug("Exercise not found", day=day, exercise_id=exercise_id)
            return False

        self._persist()
        logger.info("Exercise removed", day=weekday.value, exercise_id=exercise_id)
        return True

    def toggle_exercise_completion(self, day: object, exercise_id: str) -> bool:
        """Flip an exercise's completed flag; False if the day or id is unknown."""
        weekday = Weekday.parse(day)
        if weekday is None or not self._plan.toggle(weekday, exercise_id):
            logger.debug("Exercise not found", day=day, exercise_id=exercise_id)
            return False

        self._persist()
        exercise = self._plan.find(weekday, exercise_id)
        logger.info(
            "Exercise toggled",
            day=weekday.value,
            exercise_id=exercise_id,
            completed=exercise.completed,
        )
        return True

    def clear_day(self, day: object) -> bool:
        """Remove every exercise from a day; False if the day is unknown."""
        weekday = Weekday.parse(day)
        if weekday is None:
            logger.debug("Unknown day", day=day)
            return False

        self._plan.clear(weekday)
        self._persist()
        logger.info("Day cleared", day=weekday.value)
        return True

    def get_weekly_plan(self) -> WeeklyPlan:
        """Snapshot of the current plan; changes to it are not kept."""
        return copy.deepcopy(self._plan)

    def get_day(self, day: object) -> list[Exercise]:
        """Snapshot of one day's exercises, empty for an unknown day."""
        weekday = Weekday.parse(day)
        if weekday is None:
            return []
        return copy.deepcopy(self._plan.exercises(weekday))

    def _validate_exercise(
        self, day: object, name: RawValue, sets: RawValue, reps: RawValue
    ) -> ValidationResult:
        if not self._validator.is_not_empty(name):
            return ValidationResult.fail(ErrorKind.EMPTY_INPUT, EMPTY_NAME_MESSAGE, "name")

        for field, value in (("sets", sets), ("reps", reps)):
            number = parse_float(value)
            if number is None:
                return ValidationResult.fail(
                    ErrorKind.NON_NUMERIC_INPUT,
                    self._validator.get_error_message("negative", field.capitalize()),
                    field,
                )
            if not self._validator.is_positive_number(value):
                return ValidationResult.fail(
                    ErrorKind.NEGATIVE_OR_ZERO_INPUT,
                    self._validator.get_error_message("negative", field.capitalize()),
                    field,
                )
            if not math.isfinite(number):
                return ValidationResult.fail(
                    ErrorKind.OUT_OF_RANGE_INPUT,
                    self._validator.get_error_message("outOfRange", field.capitalize()),
                    field,
                )

        if Weekday.parse(day) is None:
            return ValidationResult.fail(
                ErrorKind.INVALID_SELECTION, INVALID_DAY_MESSAGE, "day"
            )

        return ValidationResult.ok()

    def _persist(self) -> bool:
        saved = self._repository.save(self._plan)
        if not saved:
            logger.warning("Workout plan not saved, changes kept in memory only")
        return saved


def _to_count(value: RawValue) -> int:
    """Whole count from a validated positive number: truncated, at least 1."""
    return max(1, int(parse_float(value)))
