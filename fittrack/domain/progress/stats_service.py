"""Workout statistics derived from the weekly plan."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..workout.core.entities.weekly_plan import WeeklyPlan

NO_WORKOUT_LABEL = "N/A"


@dataclass(frozen=True)
class WorkoutStats:
    """Summary of the weekly plan.

    Attributes:
        total_workouts: Exercises scheduled across all seven days
        completed_workouts: Exercises marked completed
        current_week_workouts: Same as completed_workouts; the plan holds a
            single week, so no calendar filtering is applied
        completion_rate: completed / total, 0.0 for an empty plan
        last_workout_date: Latest ``completed_at``, None if none recorded
    """

    total_workouts: int
    completed_workouts: int
    current_week_workouts: int
    completion_rate: float
    last_workout_date: Optional[datetime]

    def as_display(self) -> dict:
        """Flat record for the stats panel."""
        if self.last_workout_date is None:
            last_workout = NO_WORKOUT_LABEL
        else:
            d = self.last_workout_date
            last_workout = f"{d:%b} {d.day}, {d.year}"
        return {
            "total_workouts": str(self.total_workouts),
            "current_week_workouts": str(self.current_week_workouts),
            "completion_rate": f"{self.completion_rate * 100:.0f}%",
            "last_workout_date": last_workout,
        }


def derive_workout_stats(plan: WeeklyPlan) -> WorkoutStats:
    """Count scheduled and completed exercises in a plan.

    Example:
        >>> derive_workout_stats(WeeklyPlan()).completion_rate
        0.0
    """
    total = 0
    completed = 0
    last_workout: Optional[datetime] = None

    for exercise in plan.all_exercises():
        total += 1
        if not exercise.completed:
            continue
        completed += 1
        if exercise.completed_at is not None and (
            last_workout is None or exercise.completed_at > last_workout
        ):
            last_workout = exercise.completed_at

    return WorkoutStats(
        total_workouts=total,
        completed_workouts=completed,
        current_week_workouts=completed,
        completion_rate=completed / total if total > 0 else 0.0,
        last_workout_date=last_workout,
    )
