"""BMIService - Body Mass Index calculation."""

from ...shared.measurement import Measurement
from ...shared.rounding import round_half_up
from ..core.value_objects.bmi_category import BMICategory
from ..core.value_objects.bmi_result import BMIResult


class BMIService:
    """Calculate Body Mass Index.

    Formula:
        BMI = weight(kg) / height(m)²

    Example: 70 kg / (1.70 m)² = 24.22 -> 24.2, Normal.

    The category is taken from the unrounded BMI, so 24.96 is reported as
    25.0 but classified Normal.
    """

    def calculate(self, weight: Measurement, height: Measurement) -> BMIResult:
        """Calculate BMI from a mass and a length measurement.

        Args:
            weight: Body weight in kg or lbs
            height: Body height in cm, m or feet+inches

        Returns:
            BMIResult: Rounded BMI, category and normalised inputs
        """
        weight_kg = weight.to_kilograms()
        height_m = height.to_meters()

        bmi = weight_kg / (height_m * height_m)

        return BMIResult(
            bmi=round_half_up(bmi, 1),
            category=BMICategory.from_bmi(bmi),
            weight_kg=weight_kg,
            height_m=height_m,
        )
