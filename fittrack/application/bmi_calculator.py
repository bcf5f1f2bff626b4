"""BMICalculator - validate, calculate and record BMI."""

from typing import Optional

import structlog

from fittrack.domain.body_metrics.calculation import BMIService
from fittrack.domain.body_metrics.core.value_objects import BMIHistoryEntry, BMIResult
from fittrack.domain.body_metrics.input_validation import validate_bmi_inputs
from fittrack.domain.shared.measurement import Measurement
from fittrack.domain.shared.ports import ILogRepository
from fittrack.domain.shared.units import LengthUnit
from fittrack.domain.shared.validation import (
    RawValue,
    ValidationResult,
    Validator,
    parse_float,
)

from .results import CalculationOutcome

logger = structlog.get_logger(__name__)


class BMICalculator:
    """BMI calculator component.

    Collaborators are passed in explicitly: the validator for raw input
    and the history log that receives a snapshot of every successful
    calculation.
    """

    def __init__(
        self,
        validator: Validator,
        history: ILogRepository[BMIHistoryEntry],
        bmi_service: Optional[BMIService] = None,
    ) -> None:
        self._validator = validator
        self._history = history
        self._service = bmi_service or BMIService()

    def calculate_bmi(
        self,
        weight: float,
        weight_unit: object,
        height: float,
        height_unit: object,
        height_inches: float = 0,
    ) -> BMIResult:
        """Calculate BMI from already-validated numbers.

        Args:
            weight: Weight value
            weight_unit: "kg" or "lbs" (anything else is taken as kg)
            height: Height value, whole feet for "ft"
            height_unit: "cm", "ft" or "m" (anything else is taken as m)
            height_inches: Extra inches, only used with "ft"

        Returns:
            BMIResult: Rounded BMI and category

        Example:
            >>> calculator.calculate_bmi(70, "kg", 170, "cm").bmi
            24.2
        """
        return self._service.calculate(
            Measurement.mass(weight, weight_unit),
            self._height(height, height_unit, height_inches),
        )

    def validate_inputs(
        self,
        weight: RawValue,
        height: RawValue,
        height_unit: object = None,
        height_inches: RawValue = None,
    ) -> ValidationResult:
        """Validate raw form input before calculating."""
        return validate_bmi_inputs(
            self._validator, weight, height, height_unit, height_inches
        )

    def calculate_and_record(
        self,
        weight: RawValue,
        weight_unit: object,
        height: RawValue,
        height_unit: object,
        height_inches: RawValue = None,
    ) -> CalculationOutcome[BMIResult]:
        """Validate raw input, calculate BMI and append it to the history.

        Returns:
            CalculationOutcome: Result, or the first validation failure
        """
        validation = self.validate_inputs(weight, height, height_unit, height_inches)
        if not validation.is_valid:
            logger.debug("BMI input rejected", reason=validation.error.message)
            return CalculationOutcome(error=validation.error)

        weight_m = Measurement.mass(parse_float(weight), weight_unit)
        height_m = self._height(
            parse_float(height), height_unit, parse_float(height_inches) or 0.0
        )
        result = self._service.calculate(weight_m, height_m)

        saved = self._history.append(BMIHistoryEntry.record(result, weight_m, height_m))
        if not saved:
            logger.warning("BMI history not saved, changes kept in memory only")

        logger.info("BMI calculated", bmi=result.bmi, category=result.category.value)
        return CalculationOutcome(result=result, saved=saved)

    def get_history(self) -> list[BMIHistoryEntry]:
        return self._history.load_all()

    @staticmethod
    def _height(value: float, unit: object, inches: float) -> Measurement:
        # Unrecognised height units are taken as meters
        return Measurement.length(value, unit, inches, default=LengthUnit.METER)
