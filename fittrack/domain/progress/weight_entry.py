"""WeightEntry value object - one body-weight log entry."""

from dataclasses import dataclass
from datetime import datetime

from ..shared.measurement import Measurement
from ..shared.units import MassUnit, kilograms_to_pounds


@dataclass(frozen=True)
class WeightEntry:
    """Body weight recorded on a date.

    Attributes:
        date: When the weight was recorded
        weight: Weight value in ``unit``
        unit: Mass unit of ``weight``
    """

    date: datetime
    weight: float
    unit: MassUnit

    def weight_in(self, unit: MassUnit) -> float:
        """Weight expressed in another mass unit."""
        if unit is self.unit:
            return self.weight
        kilograms = Measurement(self.weight, self.unit).to_kilograms()
        if unit is MassUnit.POUND:
            return kilograms_to_pounds(kilograms)
        return kilograms
