# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""The ten sub-score algorithms, one module each.

Every algorithm is a pure ``(ContextBundle, CandidateProfile) -> float``.
``build_algorithms`` returns them keyed by ScoreSlot in slot order.
"""

from __future__ import annotations

from functools import partial
from typing import Callable, Dict, Mapping, Optional

from divinerank.data.registry import FOUNDER_PROFILES

from divinerank.engine.algorithms.behavioral import score_behavioral
from divinerank.engine.algorithms.card_draw import score_card_draw
from divinerank.engine.algorithms.celestial import score_celestial
from divinerank.engine.algorithms.correspondence import score_correspondence
from divinerank.engine.algorithms.elemental import score_elemental
from divinerank.engine.algorithms.entropy import score_entropy
from divinerank.engine.algorithms.founder import score_founder
from divinerank.engine.algorithms.numeric import score_numeric_reduction
from divinerank.engine.algorithms.oracle_cast import score_oracle_cast
from divinerank.engine.algorithms.spatial import score_spatial
from divinerank.engine.models import CandidateProfile, ContextBundle, FounderProfile, ScoreSlot

Algorithm = Callable[[ContextBundle, CandidateProfile], float]


def build_algorithms(founders: Optional[Mapping[str, FounderProfile]] = None) -> Dict[ScoreSlot, Algorithm]:
    """Map every ScoreSlot to its algorithm, founder table bound into founder-destiny."""
    if founders is None:
        founders = FOUNDER_PROFILES

    table = {
        ScoreSlot.ELEMENTAL: score_elemental,
        ScoreSlot.CELESTIAL: score_celestial,
        ScoreSlot.NUMERIC_REDUCTION: score_numeric_reduction,
        ScoreSlot.SPATIAL: score_spatial,
        ScoreSlot.ENTROPY: score_entropy,
        ScoreSlot.FOUNDER: partial(score_founder, founders=founders),
        ScoreSlot.BEHAVIORAL: score_behavioral,
        ScoreSlot.ORACLE_CAST: score_oracle_cast,
        ScoreSlot.CORRESPONDENCE: score_correspondence,
        ScoreSlot.CARD_DRAW: score_card_draw,
    }
    return {slot: table[slot] for slot in ScoreSlot}


__all__ = [
    "Algorithm",
    "build_algorithms",
    "score_behavioral",
    "score_card_draw",
    "score_celestial",
    "score_correspondence",
    "score_elemental",
    "score_entropy",
    "score_founder",
    "score_numeric_reduction",
    "score_oracle_cast",
    "score_spatial",
]
