"""IWorkoutPlanRepository port - weekly plan persistence interface."""

from abc import ABC, abstractmethod

from .entities.weekly_plan import WeeklyPlan


class IWorkoutPlanRepository(ABC):
    """Port for loading and saving the single weekly plan."""

    @abstractmethod
    def load(self) -> WeeklyPlan:
        """Stored plan, or an empty seven-day plan if none exists."""
        pass

    @abstractmethod
    def save(self, plan: WeeklyPlan) -> bool:
        """Persist the whole plan.

        Returns:
            bool: False if the plan could not be persisted
        """
        pass
