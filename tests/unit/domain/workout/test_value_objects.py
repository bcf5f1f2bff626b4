"""Unit tests for workout value objects."""

import pytest
from freezegun import freeze_time

from fittrack.domain.workout.core.value_objects import (
    DAY_NAMES,
    ExerciseIdGenerator,
    Weekday,
)


class TestWeekday:
    @pytest.mark.parametrize("raw", ["monday", "Monday", " MONDAY ", Weekday.MONDAY])
    def test_parse_case_insensitive(self, raw):
        assert Weekday.parse(raw) is Weekday.MONDAY

    @pytest.mark.parametrize("raw", ["funday", "", None, 1])
    def test_parse_unknown(self, raw):
        assert Weekday.parse(raw) is None

    def test_day_names_monday_first(self):
        assert DAY_NAMES == (
            "monday",
            "tuesday",
            "wednesday",
            "thursday",
            "friday",
            "saturday",
            "sunday",
        )


class TestExerciseIdGenerator:
    @freeze_time("2025-01-15 18:00:00")
    def test_unique_with_frozen_clock(self):
        """Test ids differ even when the clock does not move."""
        generator = ExerciseIdGenerator()

        ids = {generator.generate() for _ in range(1000)}

        assert len(ids) == 1000

    def test_format(self):
        exercise_id = ExerciseIdGenerator().generate()

        prefix, millis, sequence, random_part = exercise_id.split("_")
        assert prefix == "ex"
        assert millis.isdigit()
        assert sequence == "1"
        assert len(random_part) == 9
