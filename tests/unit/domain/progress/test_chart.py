"""Unit tests for weight chart preparation."""

from datetime import datetime

import pytest

from fittrack.domain.progress.chart import prepare_weight_chart
from fittrack.domain.progress.weight_entry import WeightEntry
from fittrack.domain.shared.units import MassUnit


def entry(day: int, weight: float, unit: MassUnit = MassUnit.KILOGRAM) -> WeightEntry:
    return WeightEntry(date=datetime(2025, 1, day), weight=weight, unit=unit)


class TestPrepareWeightChart:
    def test_empty(self):
        assert prepare_weight_chart([]) == []

    def test_normalises_between_min_and_max(self):
        points = prepare_weight_chart([entry(1, 80), entry(2, 75), entry(3, 70)])

        assert [p.normalized for p in points] == [1.0, 0.5, 0.0]
        assert [p.height_percent for p in points] == [100.0, 50.0, 0.0]
        assert [p.date.day for p in points] == [1, 2, 3]

    def test_identical_weights_use_default_range(self):
        points = prepare_weight_chart([entry(1, 70), entry(2, 70)])

        assert [p.normalized for p in points] == [0.0, 0.0]

    def test_mixed_units_use_first_entry_unit(self):
        points = prepare_weight_chart(
            [entry(1, 70), entry(2, 165.3465, MassUnit.POUND)]
        )

        assert all(p.unit is MassUnit.KILOGRAM for p in points)
        assert points[1].weight == pytest.approx(75.0, abs=0.01)
        assert points[1].normalized == pytest.approx(1.0)


class TestWeightEntry:
    def test_weight_in_same_unit(self):
        assert entry(1, 70).weight_in(MassUnit.KILOGRAM) == 70

    def test_weight_in_pounds(self):
        assert entry(1, 45.3592).weight_in(MassUnit.POUND) == pytest.approx(100.0)

    def test_weight_in_kilograms(self):
        pounds = entry(1, 100, MassUnit.POUND)

        assert pounds.weight_in(MassUnit.KILOGRAM) == pytest.approx(45.3592)
