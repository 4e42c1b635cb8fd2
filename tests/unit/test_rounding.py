"""Tests for client-compatible rounding."""

import pytest

from protectron.shared.rounding import round_half_up, round_to_tenth


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(12.5, 13), (37.5, 38), (0.5, 1), (2.5, 3), (66.6, 67), (33.3, 33), (0, 0)],
    )
    def test_halves_round_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_differs_from_builtin_round(self):
        assert round(12.5) == 12
        assert round_half_up(12.5) == 13


class TestRoundToTenth:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(71.25, 71.3), (97.5, 97.5), (100, 100), (0, 0)],
    )
    def test_one_decimal(self, value, expected):
        assert round_to_tenth(value) == expected

    def test_repeating_fraction(self):
        assert round_to_tenth(200 / 3) == 66.7
