"""Measurement value object - a numeric value tagged with its unit."""

from dataclasses import dataclass
from typing import Union

from .errors import InvalidMeasurementError
from .units import (
    LengthUnit,
    MassUnit,
    centimeters_to_meters,
    feet_inches_to_centimeters,
    pounds_to_kilograms,
)


@dataclass(frozen=True)
class Measurement:
    """A body measurement expressed in an explicit unit.

    The value is only ever interpreted under ``unit``: conversion methods
    dispatch on the declared unit and refuse units of the wrong dimension.

    Attributes:
        value: Numeric value (whole feet for FEET_INCHES)
        unit: Mass or length unit
        inches: Extra inches, only meaningful for FEET_INCHES
    """

    value: float
    unit: Union[MassUnit, LengthUnit]
    inches: float = 0.0

    def to_kilograms(self) -> float:
        """Express a mass measurement in kilograms.

        Raises:
            InvalidMeasurementError: If the measurement is not a mass
        """
        if self.unit is MassUnit.KILOGRAM:
            return self.value
        if self.unit is MassUnit.POUND:
            return pounds_to_kilograms(self.value)
        raise InvalidMeasurementError(f"{self.unit.value} is not a mass unit")

    def to_centimeters(self) -> float:
        """Express a length measurement in centimeters.

        Raises:
            InvalidMeasurementError: If the measurement is not a length
        """
        if self.unit is LengthUnit.CENTIMETER:
            return self.value
        if self.unit is LengthUnit.METER:
            return self.value * 100
        if self.unit is LengthUnit.FEET_INCHES:
            return feet_inches_to_centimeters(self.value, self.inches)
        raise InvalidMeasurementError(f"{self.unit.value} is not a length unit")

    def to_meters(self) -> float:
        """Express a length measurement in meters."""
        if self.unit is LengthUnit.METER:
            return self.value
        return centimeters_to_meters(self.to_centimeters())

    @classmethod
    def mass(cls, value: float, unit: object) -> "Measurement":
        """Mass measurement from a raw unit tag; unrecognised tags are kg."""
        return cls(value, MassUnit.parse(unit) or MassUnit.KILOGRAM)

    @classmethod
    def length(
        cls,
        value: float,
        unit: object,
        inches: float = 0.0,
        default: LengthUnit = LengthUnit.CENTIMETER,
    ) -> "Measurement":
        """Length measurement from a raw unit tag, ``default`` if unrecognised."""
        return cls(value, LengthUnit.parse(unit) or default, inches)
