"""Input validation rules for the BMI and calorie forms.

Checks run in a fixed order and stop at the first failure, so the user
always sees the most basic problem first.
"""

import math
from typing import Optional

from ..shared.errors import ErrorKind
from ..shared.units import LengthUnit
from ..shared.validation import (
    RawValue,
    ValidationResult,
    Validator,
    is_blank,
    parse_float,
)

BMI_EMPTY_MESSAGE = "Please enter both weight and height values"
CALORIE_EMPTY_MESSAGE = (
    "Please fill in all required fields: age, gender, weight, height, "
    "and activity level"
)
INCHES_TOO_LARGE_MESSAGE = (
    "Inches must be less than 12 (use feet for values 12 and above)"
)
INCHES_NEGATIVE_MESSAGE = "Inches must be a positive number"
AGE_ACCURACY_WARNING = "Results may be less accurate for ages outside 15-120 range"

# Ages outside this range still calculate, with an accuracy warning
ACCURATE_AGE_RANGE = (15, 120)


def validate_bmi_inputs(
    validator: Validator,
    weight: RawValue,
    height: RawValue,
    height_unit: object = None,
    height_inches: RawValue = None,
) -> ValidationResult:
    """Validate raw BMI form input.

    Order: empty -> non-numeric -> negative -> out of range, weight before
    height. For feet, supplied inches must then be numeric and in [0, 12).

    Returns:
        ValidationResult: First failure, or ok
    """
    if is_blank(weight) or is_blank(height):
        return ValidationResult.fail(ErrorKind.EMPTY_INPUT, BMI_EMPTY_MESSAGE)

    for field, value in (("weight", weight), ("height", height)):
        if parse_float(value) is None:
            return ValidationResult.fail(
                ErrorKind.NON_NUMERIC_INPUT,
                validator.get_error_message("nonNumeric", field),
                field,
            )

    for field, value in (("weight", weight), ("height", height)):
        if not validator.is_positive_number(value):
            return ValidationResult.fail(
                ErrorKind.NEGATIVE_OR_ZERO_INPUT,
                validator.get_error_message("negative", field.capitalize()),
                field,
            )

    if not validator.is_valid_weight(weight):
        return ValidationResult.fail(
            ErrorKind.OUT_OF_RANGE_INPUT,
            validator.get_error_message("outOfRange", "Weight"),
            "weight",
        )
    if not validator.is_valid_height(height):
        return ValidationResult.fail(
            ErrorKind.OUT_OF_RANGE_INPUT,
            validator.get_error_message("outOfRange", "Height"),
            "height",
        )

    if LengthUnit.parse(height_unit) is LengthUnit.FEET_INCHES and not is_blank(
        height_inches
    ):
        return validate_inches(validator, height_inches)

    return ValidationResult.ok()


def validate_inches(validator: Validator, inches: RawValue) -> ValidationResult:
    """Validate the extra-inches field used with feet."""
    value = parse_float(inches)
    if value is None:
        return ValidationResult.fail(
            ErrorKind.NON_NUMERIC_INPUT,
            validator.get_error_message("nonNumeric", "inches"),
            "inches",
        )
    if value >= 12:
        return ValidationResult.fail(
            ErrorKind.OUT_OF_RANGE_INPUT, INCHES_TOO_LARGE_MESSAGE, "inches"
        )
    if value < 0:
        return ValidationResult.fail(
            ErrorKind.OUT_OF_RANGE_INPUT, INCHES_NEGATIVE_MESSAGE, "inches"
        )
    return ValidationResult.ok()


def validate_calorie_inputs(
    validator: Validator,
    age: RawValue,
    gender: Optional[str],
    weight: RawValue,
    height: RawValue,
    activity_level: Optional[str],
) -> ValidationResult:
    """Validate raw calorie form input.

    Any missing field fails with one combined message. Age, weight and
    height must then parse, be positive and be finite; there is no other
    upper bound here. An age outside 15-120 passes with a warning.
    """
    if any(is_blank(value) for value in (age, gender, weight, height, activity_level)):
        return ValidationResult.fail(ErrorKind.EMPTY_INPUT, CALORIE_EMPTY_MESSAGE)

    numeric_fields = (("age", age), ("weight", weight), ("height", height))

    for field, value in numeric_fields:
        if parse_float(value) is None:
            return ValidationResult.fail(
                ErrorKind.NON_NUMERIC_INPUT,
                validator.get_error_message("nonNumeric", field),
                field,
            )

    for field, value in numeric_fields:
        if not validator.is_positive_number(value):
            return ValidationResult.fail(
                ErrorKind.NEGATIVE_OR_ZERO_INPUT,
                validator.get_error_message("negative", field.capitalize()),
                field,
            )

    for field, value in numeric_fields:
        if not math.isfinite(parse_float(value)):
            return ValidationResult.fail(
                ErrorKind.OUT_OF_RANGE_INPUT,
                validator.get_error_message("outOfRange", field.capitalize()),
                field,
            )

    low, high = ACCURATE_AGE_RANGE
    if not validator.is_in_range(age, low, high):
        return ValidationResult.ok(warning=AGE_ACCURACY_WARNING)

    return ValidationResult.ok()
