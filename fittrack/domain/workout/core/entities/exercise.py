"""Exercise entity - one scheduled exercise within a plan day."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


@dataclass
class Exercise:
    """A scheduled exercise.

    Owned by exactly one day of a WeeklyPlan and mutated in place.

    Attributes:
        id: Unique exercise id
        name: Trimmed, non-empty exercise name
        sets: Number of sets (>= 1)
        reps: Repetitions per set (>= 1)
        completed: Completion flag
        added_at: When the exercise was scheduled
        completed_at: When it was last marked completed, None otherwise
    """

    id: str
    name: str
    sets: int
    reps: int
    completed: bool = False
    added_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    completed_at: Optional[datetime] = None

    def toggle_completion(self) -> None:
        """Flip the completion flag, stamping or clearing ``completed_at``."""
        self.completed = not self.completed
        self.completed_at = datetime.now(timezone.utc) if self.completed else None
