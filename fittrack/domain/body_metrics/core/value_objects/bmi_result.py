"""BMIResult value object."""

from dataclasses import dataclass

from .bmi_category import BMICategory


@dataclass(frozen=True)
class BMIResult:
    """Body Mass Index calculation result.

    Attributes:
        bmi: BMI rounded to one decimal place
        category: Category classified from the unrounded BMI
        weight_kg: Weight used, in kilograms
        height_m: Height used, in meters
    """

    bmi: float
    category: BMICategory
    weight_kg: float
    height_m: float

    def as_display(self) -> dict:
        """Flat record ready for display substitution."""
        return {
            "bmi": f"{self.bmi:.1f}",
            "category": self.category.value,
            "color": self.category.color(),
        }
