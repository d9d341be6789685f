# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Numeric-reduction score: digit roots of the founding date, the name and the current moment."""

from __future__ import annotations

import re
from datetime import date, datetime

from divinerank.core.almanac import local_datetime
from divinerank.engine.models import CandidateProfile, ContextBundle
from divinerank.engine.utils import digit_sum, letter_sum, map_range, reduce_digits

PYTHAGOREAN_VALUES = {
    "A": 1, "B": 2, "C": 3, "D": 4, "E": 5, "F": 6, "G": 7, "H": 8, "I": 9,
    "J": 1, "K": 2, "L": 3, "M": 4, "N": 5, "O": 6, "P": 7, "Q": 8, "R": 9,
    "S": 1, "T": 2, "U": 3, "V": 4, "W": 5, "X": 6, "Y": 7, "Z": 8,
}
CHALDEAN_VALUES = {
    "A": 1, "B": 2, "C": 3, "D": 4, "E": 5, "U": 6, "O": 7, "F": 8, "P": 8,
    "I": 1, "J": 1, "Q": 1, "Y": 1, "K": 2, "G": 3, "L": 3, "S": 3, "M": 4,
    "T": 4, "N": 5, "H": 5, "X": 5, "V": 6, "W": 6, "Z": 7, "R": 9,
}

_REPEATED_DIGIT = re.compile(r"(\d)\1{2,}")
_ASCENDING_RUN = re.compile(r"123|234|345|456|567|678|789")


def life_path(d: date) -> int:
    return reduce_digits(digit_sum(d.year) + digit_sum(d.month) + digit_sum(d.day))


def name_number(name: str, values) -> int:
    return reduce_digits(letter_sum(name, values))


def moment_number(moment: datetime) -> int:
    """Digit root of year + month + day + hour + minute."""
    return reduce_digits(moment.year + moment.month + moment.day + moment.hour + moment.minute)


def time_pattern_bonus(moment: datetime) -> float:
    """1.0 for a digit repeated three times in HHMMSS, 0.9 for an ascending triple, else 0.5."""
    digits = moment.strftime("%H%M%S")
    if _REPEATED_DIGIT.search(digits):
        return 1.0
    if _ASCENDING_RUN.search(digits):
        return 0.9
    return 0.5


def _harmony(a: int, b: int) -> float:
    gap = abs(a - b)
    return 1.0 if gap <= 1 else 1.0 / (gap + 1)


def score_numeric_reduction(context: ContextBundle, candidate: CandidateProfile) -> float:
    """Numeric-reduction score in [0, 20]."""
    now = local_datetime(context.timestamp, context.timezone)
    current = moment_number(now)

    path = life_path(candidate.founding_date)
    pythagorean = name_number(candidate.name, PYTHAGOREAN_VALUES)
    chaldean = name_number(candidate.name, CHALDEAN_VALUES)

    name_resonance = 1.0 if abs(pythagorean - chaldean) <= 1 else 0.5
    total = (
        _harmony(path, current) * 0.3
        + _harmony(chaldean, current) * 0.3
        + time_pattern_bonus(now) * 0.2
        + name_resonance * 0.2
    )
    return map_range(total, 0.1, 1.0, 0.0, 20.0)


__all__ = [
    "CHALDEAN_VALUES",
    "PYTHAGOREAN_VALUES",
    "life_path",
    "moment_number",
    "name_number",
    "score_numeric_reduction",
    "time_pattern_bonus",
]
