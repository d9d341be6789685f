# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Pure helper functions shared by the scoring algorithms."""

from __future__ import annotations

from typing import Iterable, Mapping

MASTER_NUMBERS = (11, 22, 33)


def clamp(value: float, low: float, high: float) -> float:
    """Clamp ``value`` into [low, high]."""
    return max(low, min(high, value))


def map_range(value: float, in_min: float, in_max: float, out_min: float, out_max: float) -> float:
    """Linearly map ``value`` from [in_min, in_max] to [out_min, out_max], clamped.

    Values outside the input range land exactly on the nearest output bound.

    Examples:
        >>> map_range(0.5, 0, 1, 0, 20)
        10.0
        >>> map_range(-3, 0, 1, 0.8, 1.2)
        0.8
        >>> map_range(7, 0, 1, 0.8, 1.2)
        1.2
    """
    scaled = (value - in_min) / (in_max - in_min) * (out_max - out_min) + out_min
    return clamp(scaled, out_min, out_max)


def digit_sum(n: int) -> int:
    """Sum of the decimal digits of ``abs(n)``."""
    return sum(int(ch) for ch in str(abs(n)))


def reduce_digits(n: int, keep_master: bool = True) -> int:
    """Repeatedly sum digits until a single digit remains.

    Master numbers 11, 22 and 33 are kept as-is when ``keep_master`` is set.

    Examples:
        >>> reduce_digits(2024)
        8
        >>> reduce_digits(29)
        11
        >>> reduce_digits(29, keep_master=False)
        2
    """
    while n > 9 and not (keep_master and n in MASTER_NUMBERS):
        n = digit_sum(n)
    return n


def letter_sum(text: str, values: Mapping[str, int]) -> int:
    """Sum letter values of the A-Z letters in ``text``; other characters count 0."""
    return sum(values.get(ch, 0) for ch in text.upper() if "A" <= ch <= "Z")


def to_int32(n: int) -> int:
    """Wrap ``n`` to a signed 32-bit integer."""
    return ((n + 0x80000000) & 0xFFFFFFFF) - 0x80000000


def string_hash(text: str) -> int:
    """31-multiplier string hash wrapped to signed 32 bits, returned as its absolute value."""
    h = 0
    for ch in text:
        h = to_int32(31 * h + ord(ch))
    return abs(h)


def popcount(n: int) -> int:
    """Number of set bits in ``abs(n)``."""
    return bin(abs(n)).count("1")


def weighted_sum(values: Iterable[float], weights: Iterable[float]) -> float:
    return sum(v * w for v, w in zip(values, weights))


__all__ = [
    "MASTER_NUMBERS",
    "clamp",
    "digit_sum",
    "letter_sum",
    "map_range",
    "popcount",
    "reduce_digits",
    "string_hash",
    "to_int32",
    "weighted_sum",
]
