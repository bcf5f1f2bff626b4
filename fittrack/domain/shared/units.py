"""Unit conversions between imperial and metric measurements.

All functions are pure and never raise: NaN and infinity propagate to the
caller. Inputs are expected to be validated upstream.
"""

import math
from enum import Enum
from typing import Optional

# 1 pound = 0.453592 kilograms
LBS_TO_KG = 0.453592

# 1 inch = 2.54 centimeters
INCHES_TO_CM = 2.54

# 1 centimeter = 0.393701 inches
CM_TO_INCHES = 0.393701

# 1 meter = 100 centimeters
CM_TO_METERS = 100

CONVERSION_CONSTANTS = {
    "LBS_TO_KG": LBS_TO_KG,
    "INCHES_TO_CM": INCHES_TO_CM,
    "CM_TO_INCHES": CM_TO_INCHES,
    "CM_TO_METERS": CM_TO_METERS,
}


class MassUnit(str, Enum):
    """Supported body-weight units."""

    KILOGRAM = "kg"
    POUND = "lbs"

    @classmethod
    def parse(cls, raw: object) -> Optional["MassUnit"]:
        """Resolve a raw unit tag, or None when it is not recognised.

        Example:
            >>> MassUnit.parse("LBS")
            <MassUnit.POUND: 'lbs'>
        """
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return None
        tag = raw.strip().lower()
        aliases = {
            "kg": cls.KILOGRAM,
            "kilogram": cls.KILOGRAM,
            "kilograms": cls.KILOGRAM,
            "lb": cls.POUND,
            "lbs": cls.POUND,
            "pound": cls.POUND,
            "pounds": cls.POUND,
        }
        return aliases.get(tag)


class LengthUnit(str, Enum):
    """Supported body-height units.

    FEET_INCHES measurements carry whole feet in ``value`` and the
    remaining inches separately.
    """

    CENTIMETER = "cm"
    METER = "m"
    FEET_INCHES = "ft"

    @classmethod
    def parse(cls, raw: object) -> Optional["LengthUnit"]:
        """Resolve a raw unit tag, or None when it is not recognised."""
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return None
        tag = raw.strip().lower()
        aliases = {
            "cm": cls.CENTIMETER,
            "centimeter": cls.CENTIMETER,
            "centimeters": cls.CENTIMETER,
            "m": cls.METER,
            "meter": cls.METER,
            "meters": cls.METER,
            "ft": cls.FEET_INCHES,
            "feet": cls.FEET_INCHES,
        }
        return aliases.get(tag)


def pounds_to_kilograms(pounds: float) -> float:
    """Convert pounds to kilograms (kg = lbs × 0.453592)."""
    return pounds * LBS_TO_KG


def kilograms_to_pounds(kilograms: float) -> float:
    """Convert kilograms to pounds (lbs = kg ÷ 0.453592)."""
    return kilograms / LBS_TO_KG


def feet_inches_to_centimeters(feet: float, inches: float) -> float:
    """Convert feet and inches to centimeters.

    Formula: cm = (feet × 12 + inches) × 2.54

    Example:
        >>> round(feet_inches_to_centimeters(5, 7), 2)
        170.18
    """
    total_inches = feet * 12 + inches
    return total_inches * INCHES_TO_CM


def centimeters_to_feet_inches(centimeters: float) -> tuple[float, float]:
    """Convert centimeters to a (feet, inches) pair.

    Formula:
        total_inches = cm × 0.393701
        feet = floor(total_inches ÷ 12)
        inches = total_inches mod 12

    Returns:
        tuple: Whole feet and remaining (fractional) inches
    """
    total_inches = centimeters * CM_TO_INCHES
    if not math.isfinite(total_inches):
        return total_inches, math.nan
    feet = math.floor(total_inches / 12)
    inches = math.fmod(total_inches, 12)
    return feet, inches


def centimeters_to_meters(centimeters: float) -> float:
    """Convert centimeters to meters (m = cm ÷ 100)."""
    return centimeters / CM_TO_METERS
