"""Tests for pertplan.domain.estimation.pert."""

import math

import pytest

from pertplan.domain.estimation import (
    CONFIDENCE_LEVELS,
    confidence_band,
    confidence_bands,
    expected,
    format_hours,
    std_dev,
    task_expected,
    task_std_dev,
)


class TestExpected:
    def test_weighted_average(self):
        assert expected(10, 20, 30) == 20
        assert expected(0, 6, 0) == 4
        assert expected(2, 3, 10) == pytest.approx(4.0)

    def test_zero_estimates(self):
        assert expected(0, 0, 0) == 0

    def test_equal_estimates(self):
        assert expected(7, 7, 7) == 7

    def test_task_expected(self, make_task):
        assert task_expected(make_task("A1", o=1, m=2, p=9)) == pytest.approx(3.0)


class TestStdDev:
    def test_range_over_six(self):
        assert std_dev(10, 30) == pytest.approx(20 / 6)
        assert std_dev(6, 6) == 0

    def test_inverted_estimates_give_negative_deviation(self):
        assert std_dev(30, 10) == pytest.approx(-20 / 6)

    def test_task_std_dev(self, make_task):
        assert task_std_dev(make_task("A1", o=0, m=5, p=12)) == pytest.approx(2.0)


class TestConfidenceBands:
    """expected ± k·σ for k in 1..3."""

    @pytest.mark.parametrize("k", [1, 2, 3])
    def test_band(self, k):
        low, high = confidence_band(20, 2, k)
        assert low == 20 - 2 * k
        assert high == 20 + 2 * k

    def test_one_sigma_for_ten_twenty_thirty(self):
        low, high = confidence_band(expected(10, 20, 30), std_dev(10, 30), 1)
        assert low == pytest.approx(16.6667, abs=1e-4)
        assert high == pytest.approx(23.3333, abs=1e-4)

    @pytest.mark.parametrize("k", [0, 4, -1])
    def test_invalid_k(self, k):
        with pytest.raises(ValueError):
            confidence_band(20, 2, k)

    def test_labels(self):
        assert CONFIDENCE_LEVELS == {
            1: "±1σ (68% conf.)",
            2: "±2σ (95% conf.)",
            3: "±3σ (99% conf.)",
        }

    def test_confidence_bands(self):
        bands = confidence_bands(10, 1)
        assert [b.sigma for b in bands] == [1, 2, 3]
        assert [(b.low, b.high) for b in bands] == [(9, 11), (8, 12), (7, 13)]
        assert bands[1].label == "±2σ (95% conf.)"


class TestFormatHours:
    """Two decimals, and never fails."""

    @pytest.mark.parametrize(
        "value,expected_text",
        [
            (20, "20.00"),
            (3.6, "3.60"),
            (1 / 3, "0.33"),
            (2 / 3, "0.67"),
            (0.125, "0.13"),
            (0.375, "0.38"),
            (-1.5, "-1.50"),
            (1234.5, "1234.50"),
            ("7.25", "7.25"),
        ],
    )
    def test_formats_numbers(self, value, expected_text):
        assert format_hours(value) == expected_text

    @pytest.mark.parametrize("value", [None, math.nan, math.inf, -math.inf, "abc", [], {}, True])
    def test_invalid_input_formats_as_zero(self, value):
        assert format_hours(value) == "0.00"

    def test_negative_zero(self):
        assert format_hours(-0.0) == "0.00"
        assert format_hours(-0.001) == "0.00"
