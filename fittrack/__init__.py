"""FitTrack - BMI, calorie, workout and progress tracking core."""

__version__ = "0.1.0"
