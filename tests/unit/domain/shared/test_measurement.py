"""Unit tests for Measurement value object."""

import pytest

from fittrack.domain.shared.errors import InvalidMeasurementError
from fittrack.domain.shared.measurement import Measurement
from fittrack.domain.shared.units import LengthUnit, MassUnit


class TestMeasurement:
    """Test conversions dispatch on the declared unit."""

    def test_kilograms_identity(self):
        assert Measurement(70.0, MassUnit.KILOGRAM).to_kilograms() == 70.0

    def test_pounds_to_kilograms(self):
        assert Measurement(154.3, MassUnit.POUND).to_kilograms() == pytest.approx(
            69.9893, abs=0.001
        )

    def test_centimeters(self):
        height = Measurement(170.0, LengthUnit.CENTIMETER)

        assert height.to_centimeters() == 170.0
        assert height.to_meters() == pytest.approx(1.7)

    def test_meters(self):
        height = Measurement(1.7, LengthUnit.METER)

        assert height.to_meters() == 1.7
        assert height.to_centimeters() == pytest.approx(170.0)

    def test_feet_and_inches(self):
        height = Measurement(5, LengthUnit.FEET_INCHES, inches=7)

        assert height.to_centimeters() == pytest.approx(170.18)
        assert height.to_meters() == pytest.approx(1.7018)

    def test_inches_ignored_for_centimeters(self):
        assert Measurement(170, LengthUnit.CENTIMETER, inches=5).to_centimeters() == 170

    def test_mass_as_length_raises(self):
        with pytest.raises(InvalidMeasurementError):
            Measurement(70.0, MassUnit.KILOGRAM).to_centimeters()

    def test_length_as_mass_raises(self):
        with pytest.raises(InvalidMeasurementError):
            Measurement(170.0, LengthUnit.CENTIMETER).to_kilograms()

    def test_is_immutable(self):
        measurement = Measurement(70.0, MassUnit.KILOGRAM)

        with pytest.raises(AttributeError):
            measurement.value = 80.0  # type: ignore


class TestMeasurementFromRawUnit:
    def test_mass(self):
        assert Measurement.mass(154.3, "lbs").unit is MassUnit.POUND

    def test_mass_unknown_unit_is_kilograms(self):
        assert Measurement.mass(70, "stone").unit is MassUnit.KILOGRAM

    def test_length(self):
        height = Measurement.length(5, "ft", 7)

        assert height.unit is LengthUnit.FEET_INCHES
        assert height.inches == 7

    def test_length_default(self):
        assert Measurement.length(170, None).unit is LengthUnit.CENTIMETER
        assert (
            Measurement.length(1.7, "?", default=LengthUnit.METER).unit
            is LengthUnit.METER
        )
