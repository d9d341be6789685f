# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Numerical-correspondence score: gematria of name and model indexes a ten-entry table."""

from __future__ import annotations

from divinerank.core.almanac import local_datetime, sunday_first_weekday
from divinerank.engine.models import CandidateProfile, ContextBundle
from divinerank.engine.utils import letter_sum, reduce_digits

GEMATRIA_VALUES = {
    "A": 1, "B": 2, "C": 3, "D": 4, "E": 5, "F": 80, "G": 3, "H": 8, "I": 10,
    "J": 10, "K": 20, "L": 30, "M": 40, "N": 50, "O": 70, "P": 80, "Q": 100,
    "R": 200, "S": 300, "T": 9, "U": 6, "V": 6, "W": 6, "X": 60, "Y": 10, "Z": 7,
}

# Keter to Malkuth.
SEPHIROTH_SCORES = (1.0, 0.9, 0.8, 0.85, 0.7, 0.95, 0.75, 0.6, 1.0, 0.5)
SCALE = 10.0


def gematria(text: str) -> int:
    """Single-digit root of the letter values of ``text`` (no master numbers)."""
    return reduce_digits(letter_sum(text, GEMATRIA_VALUES), keep_master=False)


def score_correspondence(context: ContextBundle, candidate: CandidateProfile) -> float:
    """Correspondence score in [0, 10]."""
    weekday = sunday_first_weekday(local_datetime(context.timestamp, context.timezone))
    index = (gematria(candidate.name) + gematria(candidate.model) + weekday) % len(SEPHIROTH_SCORES)
    return SEPHIROTH_SCORES[index] * SCALE


__all__ = ["GEMATRIA_VALUES", "SEPHIROTH_SCORES", "gematria", "score_correspondence"]
