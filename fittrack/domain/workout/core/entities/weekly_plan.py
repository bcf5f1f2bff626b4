"""WeeklyPlan entity - aggregate root for the weekly workout schedule."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterator, Optional

from ..value_objects.weekday import DAY_NAMES, Weekday
from .exercise import Exercise


def _empty_days() -> dict[str, list[Exercise]]:
    return {day: [] for day in DAY_NAMES}


@dataclass
class WeeklyPlan:
    """Seven-day exercise schedule.

    Invariants:
    - exactly the seven weekday keys exist, even when a day is empty
    - exercises within a day keep insertion order

    Attributes:
        weekly_plan: Day name -> ordered exercises
        last_modified: Timestamp of the last mutation, None if never changed
    """

    weekly_plan: dict[str, list[Exercise]] = field(default_factory=_empty_days)
    last_modified: Optional[datetime] = None

    def __post_init__(self) -> None:
        days = _empty_days()
        for name, exercises in self.weekly_plan.items():
            day = Weekday.parse(name)
            if day is not None:
                days[day.value] = list(exercises)
        self.weekly_plan = days

    def exercises(self, day: Weekday) -> list[Exercise]:
        return self.weekly_plan[day.value]

    def find(self, day: Weekday, exercise_id: str) -> Optional[Exercise]:
        for exercise in self.exercises(day):
            if exercise.id == exercise_id:
                return exercise
        return None

    def add(self, day: Weekday, exercise: Exercise) -> None:
        self.exercises(day).append(exercise)
        self._touch()

    def remove(self, day: Weekday, exercise_id: str) -> bool:
        """Remove a single exercise; False if the id is not in that day."""
        exercises = self.exercises(day)
        for index, exercise in enumerate(exercises):
            if exercise.id == exercise_id:
                del exercises[index]
                self._touch()
                return True
        return False

    def toggle(self, day: Weekday, exercise_id: str) -> bool:
        exercise = self.find(day, exercise_id)
        if exercise is None:
            return False
        exercise.toggle_completion()
        self._touch()
        return True

    def clear(self, day: Weekday) -> None:
        self.weekly_plan[day.value] = []
        self._touch()

    def all_exercises(self) -> Iterator[Exercise]:
        """Every exercise, Monday to Sunday, in insertion order."""
        for day in DAY_NAMES:
            yield from self.weekly_plan[day]

    def _touch(self) -> None:
        self.last_modified = datetime.now(timezone.utc)
