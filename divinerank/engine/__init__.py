# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Scoring core: models, weights, resonance, quota and hover state.

The orchestrator lives in ``divinerank.engine.ranking``.
"""

from divinerank.engine.hover import HoverTracker
from divinerank.engine.models import (
    SLOT_MAXIMA,
    CandidateProfile,
    CandidateResult,
    ContextBundle,
    ContextValidationError,
    FounderProfile,
    Headquarters,
    ScoreSlot,
)
from divinerank.engine.quota import QuotaExhaustedError, RerollQuota
from divinerank.engine.resonance import ResonanceEngine
from divinerank.engine.weights import weights_for

__all__ = [
    "SLOT_MAXIMA",
    "CandidateProfile",
    "CandidateResult",
    "ContextBundle",
    "ContextValidationError",
    "FounderProfile",
    "Headquarters",
    "HoverTracker",
    "QuotaExhaustedError",
    "RerollQuota",
    "ResonanceEngine",
    "ScoreSlot",
    "weights_for",
]
