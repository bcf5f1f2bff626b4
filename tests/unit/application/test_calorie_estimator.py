"""Unit tests for CalorieEstimator."""

import pytest
from freezegun import freeze_time

from fittrack.application.calorie_estimator import CalorieEstimator
from fittrack.domain.body_metrics.core.value_objects import (
    ActivityLevel,
    CalorieResult,
    Gender,
)
from fittrack.domain.body_metrics.input_validation import AGE_ACCURACY_WARNING
from fittrack.domain.shared.errors import ErrorKind
from fittrack.domain.shared.units import LengthUnit


@pytest.fixture
def estimator(validator, calorie_history) -> CalorieEstimator:
    return CalorieEstimator(validator, calorie_history)


class TestCalculateCalories:
    def test_reference_male(self, estimator):
        result = estimator.calculate_calories(30, "male", 70, "kg", 170, "cm", "sedentary")

        # BMR = 700 + 1062.5 - 150 + 5 = 1617.5
        assert result == CalorieResult(
            bmr=1618, maintenance=1941, weight_loss=1441, weight_gain=2441
        )

    def test_female_branch(self, estimator):
        result = estimator.calculate_calories(
            25, "female", 60, "kg", 165, "cm", "lightly_active"
        )

        assert result.bmr == 1345
        assert result.maintenance == 1850

    def test_non_male_gender_uses_female_constant(self, estimator):
        female = estimator.calculate_calories(30, "female", 70, "kg", 170, "cm", "sedentary")
        other = estimator.calculate_calories(30, "other", 70, "kg", 170, "cm", "sedentary")

        assert other == female

    def test_unknown_activity_is_sedentary(self, estimator):
        sedentary = estimator.calculate_calories(30, "male", 70, "kg", 170, "cm", "sedentary")
        unknown = estimator.calculate_calories(30, "male", 70, "kg", 170, "cm", "couch")

        assert unknown == sedentary

    def test_imperial_units(self, estimator):
        metric = estimator.calculate_calories(30, "male", 70, "kg", 170.18, "cm", "sedentary")
        imperial = estimator.calculate_calories(
            30, "male", 154.3236, "lbs", 5, "ft", "sedentary", height_inches=7
        )

        assert imperial.bmr == pytest.approx(metric.bmr, abs=1)

    def test_height_in_meters(self, estimator):
        result = estimator.calculate_calories(30, "male", 70, "kg", 1.7, "m", "sedentary")

        assert result.bmr == 1618

    def test_unknown_height_unit_is_centimeters(self, estimator):
        result = estimator.calculate_calories(30, "male", 70, "kg", 170, "?", "sedentary")

        assert result.bmr == 1618


class TestCalculateAndRecord:
    @freeze_time("2025-01-15 08:30:00")
    def test_success_appends_history(self, estimator):
        outcome = estimator.calculate_and_record(
            "30", "male", "70", "kg", "170", "cm", "moderately_active"
        )

        assert outcome.success is True
        assert outcome.warning is None
        assert outcome.saved is True

        entry = estimator.get_history()[0]
        assert entry.bmr == 1618
        assert entry.maintenance == outcome.result.maintenance
        assert entry.inputs.gender is Gender.MALE
        assert entry.inputs.activity_level is ActivityLevel.MODERATELY_ACTIVE
        assert entry.inputs.height.unit is LengthUnit.CENTIMETER
        assert entry.inputs.age == 30.0

    def test_age_warning_still_calculates(self, estimator):
        outcome = estimator.calculate_and_record(
            "12", "female", "40", "kg", "150", "cm", "sedentary"
        )

        assert outcome.success is True
        assert outcome.warning == AGE_ACCURACY_WARNING
        assert len(estimator.get_history()) == 1

    def test_missing_field(self, estimator):
        outcome = estimator.calculate_and_record(
            "30", "", "70", "kg", "170", "cm", "sedentary"
        )

        assert outcome.error.kind is ErrorKind.EMPTY_INPUT
        assert estimator.get_history() == []

    def test_negative_height(self, estimator):
        outcome = estimator.calculate_and_record(
            "30", "male", "70", "kg", "-170", "cm", "sedentary"
        )

        assert outcome.error.kind is ErrorKind.NEGATIVE_OR_ZERO_INPUT
        assert outcome.error.message == "Height must be a positive number"

    @pytest.mark.parametrize(
        "age,weight,height",
        [("Infinity", "70", "170"), ("30", "1e999", "170"), ("30", "70", "Infinity")],
    )
    def test_infinite_input_rejected(self, estimator, age, weight, height):
        outcome = estimator.calculate_and_record(
            age, "male", weight, "kg", height, "cm", "sedentary"
        )

        assert outcome.error.kind is ErrorKind.OUT_OF_RANGE_INPUT
        assert outcome.result is None
        assert estimator.get_history() == []
