# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Tests for engine helper functions."""

import pytest

from divinerank.engine.utils import (
    clamp,
    digit_sum,
    letter_sum,
    map_range,
    popcount,
    reduce_digits,
    string_hash,
    to_int32,
    weighted_sum,
)


class TestMapRange:
    def test_linear_inside_range(self):
        assert map_range(0.5, 0, 1, 0, 20) == pytest.approx(10.0)
        assert map_range(0.0, -1.5, 1.5, 0, 20) == pytest.approx(10.0)

    def test_below_input_range_yields_out_min(self):
        assert map_range(-3, 0, 1, 0.8, 1.2) == 0.8
        assert map_range(-100, 0.2, 1, 0, 20) == 0.0

    def test_above_input_range_yields_out_max(self):
        assert map_range(7, 0, 1, 0.8, 1.2) == 1.2
        assert map_range(100, -5, 10, 0, 20) == 20.0

    def test_bounds_map_exactly(self):
        assert map_range(0.2, 0.2, 1, 0, 20) == 0.0
        assert map_range(1.0, 0.2, 1, 0, 20) == pytest.approx(20.0)


def test_clamp():
    assert clamp(150, 0, 100) == 100
    assert clamp(-1, 0, 100) == 0
    assert clamp(42.5, 0, 100) == 42.5


class TestDigitReduction:
    def test_digit_sum(self):
        assert digit_sum(2024) == 8
        assert digit_sum(-19) == 10

    @pytest.mark.parametrize("n, expected", [(2024, 8), (29, 11), (499, 22), (3, 3), (10, 1), (987, 6)])
    def test_reduce_keeps_master_numbers(self, n, expected):
        assert reduce_digits(n) == expected

    def test_reduce_without_master_numbers(self):
        assert reduce_digits(29, keep_master=False) == 2
        assert reduce_digits(499, keep_master=False) == 4


def test_letter_sum_ignores_non_letters():
    values = {"A": 1, "B": 2}
    assert letter_sum("ab-1 a!", values) == 4
    assert letter_sum("深度求索", values) == 0


class TestHashing:
    def test_to_int32_wraps(self):
        assert to_int32(2 ** 31) == -(2 ** 31)
        assert to_int32(2 ** 32 + 5) == 5
        assert to_int32(-1) == -1

    def test_string_hash_small_strings(self):
        assert string_hash("") == 0
        assert string_hash("a") == 97
        assert string_hash("ab") == 31 * 97 + 98

    def test_string_hash_is_non_negative_and_32_bit(self):
        h = string_hash("the quick brown fox jumps over the lazy dog" * 10)
        assert 0 <= h <= 2 ** 31

    def test_popcount(self):
        assert popcount(0) == 0
        assert popcount(0b1011) == 3
        assert popcount(-0b1011) == 3


def test_weighted_sum():
    assert weighted_sum([1, 2, 3], [0.5, 0.25, 0.25]) == pytest.approx(1.75)
