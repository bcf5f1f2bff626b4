"""CalorieResult value object - daily calorie targets."""

from dataclasses import dataclass

# Daily deficit/surplus of ~500 kcal moves weight by ~0.45 kg per week
CALORIE_ADJUSTMENT = 500


@dataclass(frozen=True)
class CalorieResult:
    """Daily caloric needs, rounded to whole kcal.

    Attributes:
        bmr: Basal metabolic rate
        maintenance: BMR × activity multiplier
        weight_loss: Maintenance - 500
        weight_gain: Maintenance + 500
    """

    bmr: int
    maintenance: int
    weight_loss: int
    weight_gain: int

    def as_display(self) -> dict:
        return {
            "bmr": f"{self.bmr} kcal/day",
            "maintenance": f"{self.maintenance} kcal/day",
            "weight_loss": f"{self.weight_loss} kcal/day",
            "weight_gain": f"{self.weight_gain} kcal/day",
        }
