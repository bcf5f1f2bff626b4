"""Unit tests for BMI and calorie form validation."""

import pytest

from fittrack.domain.body_metrics.input_validation import (
    AGE_ACCURACY_WARNING,
    BMI_EMPTY_MESSAGE,
    CALORIE_EMPTY_MESSAGE,
    INCHES_NEGATIVE_MESSAGE,
    INCHES_TOO_LARGE_MESSAGE,
    validate_bmi_inputs,
    validate_calorie_inputs,
)
from fittrack.domain.shared.errors import ErrorKind
from fittrack.domain.shared.validation import Validator


class TestValidateBMIInputs:
    """Test checks run empty -> non-numeric -> negative -> out of range."""

    def setup_method(self):
        """Set up test fixtures."""
        self.validator = Validator()

    def validate(self, *args, **kwargs):
        return validate_bmi_inputs(self.validator, *args, **kwargs)

    def test_valid(self):
        result = self.validate("70", "170", "cm")

        assert result.is_valid is True
        assert result.warning is None

    @pytest.mark.parametrize("weight,height", [("", "170"), ("70", "   "), (None, None)])
    def test_empty(self, weight, height):
        result = self.validate(weight, height)

        assert result.error.kind is ErrorKind.EMPTY_INPUT
        assert result.error.message == BMI_EMPTY_MESSAGE

    def test_non_numeric_weight_before_height(self):
        result = self.validate("abc", "xyz")

        assert result.error.kind is ErrorKind.NON_NUMERIC_INPUT
        assert result.error.message == "Please enter a valid number for weight"
        assert result.error.field == "weight"

    def test_non_numeric_height(self):
        result = self.validate("70", "tall")

        assert result.error.message == "Please enter a valid number for height"

    def test_non_numeric_before_negative(self):
        """Test a non-numeric height wins over a negative weight."""
        result = self.validate("-70", "tall")

        assert result.error.kind is ErrorKind.NON_NUMERIC_INPUT

    def test_negative_weight(self):
        result = self.validate("-70", "170")

        assert result.error.kind is ErrorKind.NEGATIVE_OR_ZERO_INPUT
        assert result.error.message == "Weight must be a positive number"

    def test_zero_height(self):
        result = self.validate("70", "0")

        assert result.error.kind is ErrorKind.NEGATIVE_OR_ZERO_INPUT
        assert result.error.message == "Height must be a positive number"

    def test_weight_out_of_range(self):
        result = self.validate("501", "170")

        assert result.error.kind is ErrorKind.OUT_OF_RANGE_INPUT
        assert result.error.message == "Weight is out of valid range"

    def test_height_out_of_range(self):
        result = self.validate("70", "301")

        assert result.error.kind is ErrorKind.OUT_OF_RANGE_INPUT
        assert result.error.message == "Height is out of valid range"

    def test_range_bounds_inclusive(self):
        assert self.validate("500", "300").is_valid is True
        assert self.validate("1", "1").is_valid is True

    def test_feet_with_valid_inches(self):
        assert self.validate("70", "5", "ft", "7").is_valid is True

    def test_feet_without_inches(self):
        assert self.validate("70", "5", "ft", "").is_valid is True

    def test_inches_too_large(self):
        result = self.validate("70", "5", "ft", "12")

        assert result.error.kind is ErrorKind.OUT_OF_RANGE_INPUT
        assert result.error.message == INCHES_TOO_LARGE_MESSAGE

    def test_inches_negative(self):
        result = self.validate("70", "5", "ft", "-1")

        assert result.error.message == INCHES_NEGATIVE_MESSAGE

    def test_inches_non_numeric(self):
        result = self.validate("70", "5", "ft", "seven")

        assert result.error.kind is ErrorKind.NON_NUMERIC_INPUT
        assert result.error.message == "Please enter a valid number for inches"

    def test_inches_ignored_for_centimeters(self):
        assert self.validate("70", "170", "cm", "15").is_valid is True


class TestValidateCalorieInputs:
    """Test calorie form validation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.validator = Validator()

    def validate(
        self,
        age="30",
        gender="male",
        weight="70",
        height="170",
        activity_level="sedentary",
    ):
        return validate_calorie_inputs(
            self.validator, age, gender, weight, height, activity_level
        )

    def test_valid(self):
        result = self.validate()

        assert result.is_valid is True
        assert result.warning is None

    @pytest.mark.parametrize(
        "field", ["age", "gender", "weight", "height", "activity_level"]
    )
    def test_any_missing_field(self, field):
        result = self.validate(**{field: ""})

        assert result.error.kind is ErrorKind.EMPTY_INPUT
        assert result.error.message == CALORIE_EMPTY_MESSAGE

    def test_non_numeric_age(self):
        result = self.validate(age="thirty")

        assert result.error.kind is ErrorKind.NON_NUMERIC_INPUT
        assert result.error.message == "Please enter a valid number for age"

    def test_negative_weight(self):
        result = self.validate(weight="-70")

        assert result.error.kind is ErrorKind.NEGATIVE_OR_ZERO_INPUT
        assert result.error.message == "Weight must be a positive number"

    def test_no_upper_bound(self):
        assert self.validate(weight="900", height="400").is_valid is True

    @pytest.mark.parametrize("field", ["age", "weight", "height"])
    @pytest.mark.parametrize("raw", ["Infinity", "1e999"])
    def test_infinite_value_out_of_range(self, field, raw):
        result = self.validate(**{field: raw})

        assert result.error.kind is ErrorKind.OUT_OF_RANGE_INPUT
        assert result.error.field == field
        assert result.error.message == f"{field.capitalize()} is out of valid range"

    @pytest.mark.parametrize("age", ["10", "121", "14.9"])
    def test_age_outside_accurate_range_warns(self, age):
        result = self.validate(age=age)

        assert result.is_valid is True
        assert result.warning == AGE_ACCURACY_WARNING

    @pytest.mark.parametrize("age", ["15", "120"])
    def test_age_range_bounds_do_not_warn(self, age):
        assert self.validate(age=age).warning is None
