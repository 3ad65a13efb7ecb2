"""
Tests for fixed-precision output rounding.
"""

import math

import pytest

from bsm_pricer.analytics.rounding import round_half_away


class TestRoundHalfAway:
    """Rounding applies to the exact binary value, ties away from zero."""

    @pytest.mark.parametrize(
        "value,places,expected",
        [
            (10.450583572185565, 2, 10.45),
            (0.63683065117561910, 3, 0.637),
            (-0.36316934882438090, 3, -0.363),
            (0.125, 2, 0.13),  # exact tie
            (-0.0625, 3, -0.063),  # exact negative tie
            (1.005, 2, 1.0),  # stored just below the tie
            (2.675, 2, 2.67),
            (0.0005, 3, 0.001),  # stored just above the tie
            (1.0005, 3, 1.0),
            (12.0, 2, 12.0),
        ],
    )
    def test_round(self, value, places, expected):
        assert round_half_away(value, places) == expected

    def test_round_small_negative_to_zero(self):
        result = round_half_away(-0.0004, 3)
        assert result == 0.0
        assert math.copysign(1.0, result) == -1.0

    def test_round_returns_float(self):
        assert isinstance(round_half_away(3, 2), float)
