"""CalorieEstimator - daily caloric needs from Mifflin-St Jeor."""

from typing import Optional

import structlog

from fittrack.domain.body_metrics.calculation import BMRService, TDEEService
from fittrack.domain.body_metrics.core.value_objects import (
    ActivityLevel,
    CalorieHistoryEntry,
    CalorieInputs,
    CalorieResult,
    Gender,
)
from fittrack.domain.body_metrics.input_validation import validate_calorie_inputs
from fittrack.domain.shared.measurement import Measurement
from fittrack.domain.shared.ports import ILogRepository
from fittrack.domain.shared.validation import (
    RawValue,
    ValidationResult,
    Validator,
    parse_float,
)

from .results import CalculationOutcome

logger = structlog.get_logger(__name__)


class CalorieEstimator:
    """Calorie estimator component.

    BMR from weight, height, age and gender; maintenance from the activity
    multiplier; weight loss and gain targets 500 kcal either side.
    """

    def __init__(
        self,
        validator: Validator,
        history: ILogRepository[CalorieHistoryEntry],
        bmr_service: Optional[BMRService] = None,
        tdee_service: Optional[TDEEService] = None,
    ) -> None:
        self._validator = validator
        self._history = history
        self._bmr = bmr_service or BMRService()
        self._tdee = tdee_service or TDEEService()

    def calculate_calories(
        self,
        age: float,
        gender: object,
        weight: float,
        weight_unit: object,
        height: float,
        height_unit: object,
        activity_level: object,
        height_inches: float = 0,
    ) -> CalorieResult:
        """Calculate BMR and daily calorie targets.

        Args:
            age: Age in years
            gender: "male" selects the male constant, anything else female
            weight: Weight value, "kg" or "lbs"
            weight_unit: Unit of weight (anything unrecognised is kg)
            height: Height value, whole feet for "ft"
            height_unit: "cm", "ft" or "m" (anything unrecognised is cm)
            activity_level: Activity key, unknown keys count as sedentary
            height_inches: Extra inches, only used with "ft"

        Returns:
            CalorieResult: Integer BMR, maintenance and goal targets

        Example:
            >>> estimator.calculate_calories(30, "male", 70, "kg", 170, "cm", "sedentary").bmr
            1618
        """
        inputs = self._inputs(
            age,
            gender,
            weight,
            weight_unit,
            height,
            height_unit,
            activity_level,
            height_inches,
        )
        return self._calculate(inputs)

    def validate_inputs(
        self,
        age: RawValue,
        gender: Optional[str],
        weight: RawValue,
        height: RawValue,
        activity_level: Optional[str],
    ) -> ValidationResult:
        return validate_calorie_inputs(
            self._validator, age, gender, weight, height, activity_level
        )

    def calculate_and_record(
        self,
        age: RawValue,
        gender: Optional[str],
        weight: RawValue,
        weight_unit: object,
        height: RawValue,
        height_unit: object,
        activity_level: Optional[str],
        height_inches: RawValue = None,
    ) -> CalculationOutcome[CalorieResult]:
        """Validate raw input, calculate and append to the calorie history.

        An age outside 15-120 still calculates; the outcome then carries
        the accuracy warning.
        """
        validation = self.validate_inputs(age, gender, weight, height, activity_level)
        if not validation.is_valid:
            logger.debug("Calorie input rejected", reason=validation.error.message)
            return CalculationOutcome(error=validation.error)

        inputs = self._inputs(
            parse_float(age),
            gender,
            parse_float(weight),
            weight_unit,
            parse_float(height),
            height_unit,
            activity_level,
            parse_float(height_inches) or 0.0,
        )
        result = self._calculate(inputs)

        saved = self._history.append(CalorieHistoryEntry.record(result, inputs))
        if not saved:
            logger.warning("Calorie history not saved, changes kept in memory only")

        logger.info(
            "Calories calculated",
            bmr=result.bmr,
            maintenance=result.maintenance,
            activity_level=inputs.activity_level.value,
        )
        return CalculationOutcome(result=result, warning=validation.warning, saved=saved)

    def get_history(self) -> list[CalorieHistoryEntry]:
        return self._history.load_all()

    def _calculate(self, inputs: CalorieInputs) -> CalorieResult:
        bmr = self._bmr.calculate(
            weight_kg=inputs.weight.to_kilograms(),
            height_cm=inputs.height.to_centimeters(),
            age=inputs.age,
            gender=inputs.gender,
        )
        return self._tdee.targets(bmr, inputs.activity_level)

    @staticmethod
    def _inputs(
        age: float,
        gender: object,
        weight: float,
        weight_unit: object,
        height: float,
        height_unit: object,
        activity_level: object,
        height_inches: float,
    ) -> CalorieInputs:
        return CalorieInputs(
            age=age,
            gender=Gender.from_raw(gender),
            weight=Measurement.mass(weight, weight_unit),
            height=Measurement.length(height, height_unit, height_inches),
            activity_level=ActivityLevel.from_key(activity_level),
        )
