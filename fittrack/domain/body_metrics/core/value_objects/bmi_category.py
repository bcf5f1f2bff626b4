"""BMICategory value object - WHO-style weight classification."""

from enum import Enum

# Neutral grey used when a category string cannot be resolved
DEFAULT_CATEGORY_COLOR = "#6B7280"


class BMICategory(str, Enum):
    """BMI category with half-open thresholds (lower bound inclusive).

    - UNDERWEIGHT: BMI < 18.5
    - NORMAL: 18.5 <= BMI < 25.0
    - OVERWEIGHT: 25.0 <= BMI < 30.0
    - OBESE: BMI >= 30.0
    """

    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"

    @classmethod
    def from_bmi(cls, bmi: float) -> "BMICategory":
        """Classify a BMI value.

        Example:
            >>> BMICategory.from_bmi(25.0)
            <BMICategory.OVERWEIGHT: 'Overweight'>
        """
        if bmi < 18.5:
            return cls.UNDERWEIGHT
        elif bmi < 25.0:
            return cls.NORMAL
        elif bmi < 30.0:
            return cls.OVERWEIGHT
        else:
            return cls.OBESE

    def color(self) -> str:
        """Hex colour used to highlight the category."""
        colors = {
            BMICategory.UNDERWEIGHT: "#FCD34D",  # yellow
            BMICategory.NORMAL: "#10B981",  # green
            BMICategory.OVERWEIGHT: "#F59E0B",  # orange
            BMICategory.OBESE: "#EF4444",  # red
        }
        return colors[self]

    @classmethod
    def color_for(cls, category: str) -> str:
        """Colour for a raw category label, grey if it is not a category."""
        try:
            return cls(category).color()
        except ValueError:
            return DEFAULT_CATEGORY_COLOR
