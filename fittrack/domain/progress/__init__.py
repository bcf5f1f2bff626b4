"""Progress domain: workout statistics and weight chart data."""

from .chart import ChartPoint, prepare_weight_chart
from .stats_service import WorkoutStats, derive_workout_stats
from .weight_entry import WeightEntry

__all__ = [
    "ChartPoint",
    "prepare_weight_chart",
    "WorkoutStats",
    "derive_workout_stats",
    "WeightEntry",
]
