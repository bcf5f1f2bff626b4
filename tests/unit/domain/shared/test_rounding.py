"""Unit tests for half-up rounding."""

import math

import pytest

from fittrack.domain.shared.rounding import round_half_up, round_to_int


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (1617.5, 1618.0),
            (2.5, 3.0),
            (-2.5, -2.0),
            (1941.4, 1941.0),
        ],
    )
    def test_integer_rounding(self, value, expected):
        assert round_half_up(value) == expected

    def test_one_decimal(self):
        assert round_half_up(24.22, 1) == pytest.approx(24.2)
        assert round_half_up(24.96, 1) == pytest.approx(25.0)

    def test_non_finite_unchanged(self):
        assert round_half_up(math.inf) == math.inf
        assert math.isnan(round_half_up(math.nan))

    def test_round_to_int(self):
        result = round_to_int(1617.5)

        assert result == 1618
        assert isinstance(result, int)
