"""Calculation services for body metrics."""

from .bmi_service import BMIService
from .bmr_service import BMRService
from .tdee_service import TDEEService

__all__ = [
    "BMIService",
    "BMRService",
    "TDEEService",
]
