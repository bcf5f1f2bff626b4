"""Entities for workout domain."""

from .exercise import Exercise
from .weekly_plan import WeeklyPlan

__all__ = ["Exercise", "WeeklyPlan"]
