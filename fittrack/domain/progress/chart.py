"""Weight chart data preparation.

Only the numeric transform lives here; drawing the chart is up to the
caller.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

from ..shared.units import MassUnit
from .weight_entry import WeightEntry

# Range used when every weight is identical, to avoid dividing by zero
DEFAULT_RANGE = 1.0


@dataclass(frozen=True)
class ChartPoint:
    """One bar/point of the weight chart.

    Attributes:
        date: Entry date
        weight: Weight expressed in the chart unit
        unit: Chart unit (unit of the first entry)
        normalized: Position in [0, 1] between the lowest and highest weight
    """

    date: datetime
    weight: float
    unit: MassUnit
    normalized: float

    @property
    def height_percent(self) -> float:
        return self.normalized * 100


def prepare_weight_chart(entries: Sequence[WeightEntry]) -> list[ChartPoint]:
    """Normalise a weight history for rendering.

    Weights are converted to the unit of the first entry, then scaled with
    ``(value - min) / (max - min)``. When all weights are equal the range
    defaults to 1, so every point sits at 0.

    Returns:
        list[ChartPoint]: One point per entry, in input order
    """
    if not entries:
        return []

    unit = entries[0].unit
    weights = [entry.weight_in(unit) for entry in entries]
    low = min(weights)
    span = (max(weights) - low) or DEFAULT_RANGE

    return [
        ChartPoint(
            date=entry.date,
            weight=weight,
            unit=unit,
            normalized=(weight - low) / span,
        )
        for entry, weight in zip(entries, weights)
    ]
