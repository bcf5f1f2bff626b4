"""TDEEService - maintenance calories and goal targets."""

from ...shared.rounding import round_to_int
from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.calorie_result import CALORIE_ADJUSTMENT, CalorieResult


class TDEEService:
    """Derive daily calorie targets from BMR.

    Formula:
        maintenance = BMR × activity multiplier
        weight loss = maintenance - 500
        weight gain = maintenance + 500

    Rounding happens once, on the final values.
    """

    def maintenance(self, bmr: float, activity_level: ActivityLevel) -> float:
        return bmr * activity_level.multiplier()

    def targets(self, bmr: float, activity_level: ActivityLevel) -> CalorieResult:
        """Build the rounded calorie result.

        Example:
            >>> TDEEService().targets(1617.5, ActivityLevel.SEDENTARY).maintenance
            1941
        """
        maintenance = self.maintenance(bmr, activity_level)
        return CalorieResult(
            bmr=round_to_int(bmr),
            maintenance=round_to_int(maintenance),
            weight_loss=round_to_int(maintenance - CALORIE_ADJUSTMENT),
            weight_gain=round_to_int(maintenance + CALORIE_ADJUSTMENT),
        )
